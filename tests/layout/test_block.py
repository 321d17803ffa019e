"""Tests for blocks layout."""

import pytest

from boxlayout import MissingContainingBlock

from ..testing_utils import assert_no_logs, box, render


@assert_no_logs
def test_block_fills_viewport():
    geometry = render(box(
        'root', None, box('a', size=(100, 20)), box('b', {'height': 30})),
        800)
    assert geometry['root'] == (0, 0, 800, 50)
    assert geometry['a'] == (0, 0, 800, 20)
    assert geometry['b'] == (0, 20, 800, 30)


@assert_no_logs
def test_block_auto_width_fills_parent():
    geometry = render(box(
        'root', None,
        box('a', {'width': 300}, box('b', None, box('c', size=(20, 10))))),
        800)
    assert geometry['a'] == (0, 0, 300, 10)
    assert geometry['b'] == (0, 0, 300, 10)
    assert geometry['c'] == (0, 0, 300, 10)


@assert_no_logs
@pytest.mark.parametrize('display', (
    'block', 'inline', 'flow', 'inline flow'))
def test_block_outer_display_does_not_matter(display):
    geometry = render(box(
        'root', None, box('a', {'display': display}, size=(10, 10))), 200)
    assert geometry['a'] == (0, 0, 200, 10)


@assert_no_logs
def test_block_children_of_inline_box():
    geometry = render(box(
        'root', {'display': 'inline'},
        box('a', size=(10, 10)), box('b', size=(10, 10))), 200)
    assert geometry['a'] == (0, 0, 200, 10)
    assert geometry['b'] == (0, 10, 200, 10)


@assert_no_logs
def test_block_geometry_relative_to_parent():
    geometry = render(box(
        'root', None, box('a', {'height': 10}),
        box('b', None, box('c', {'height': 5}), box('d', {'height': 5}))),
        100)
    assert geometry['b'] == (0, 10, 100, 10)
    assert geometry['c'] == (0, 0, 100, 5)
    assert geometry['d'] == (0, 5, 100, 5)


@assert_no_logs
def test_block_explicit_height():
    geometry = render(box(
        'root', {'height': 15},
        box('a', size=(0, 10)), box('b', size=(0, 10))), 100)
    assert geometry['root'] == (0, 0, 100, 15)
    assert geometry['b'] == (0, 10, 100, 10)


@assert_no_logs
def test_block_leaf_heights():
    geometry = render(box(
        'root', None, box('a'), box('b', size=(500, 7))), 100)
    assert geometry['a'] == (0, 0, 100, 0)
    # Intrinsic widths don't change the width of block boxes.
    assert geometry['b'] == (0, 0, 100, 7)
    assert geometry['root'] == (0, 0, 100, 7)


@assert_no_logs
def test_block_percentages():
    geometry = render(box(
        'root', {'height': 200},
        box('a', {'width': '50%', 'height': '25%'},
            box('b', {'width': '50%', 'height': '50%'})),
        box('c', {'height': '10%'})), 400)
    assert geometry['a'] == (0, 0, 200, 50)
    assert geometry['b'] == (0, 0, 100, 25)
    assert geometry['c'] == (0, 50, 400, 20)


@assert_no_logs
def test_block_percentage_height_of_auto_parent():
    geometry = render(box(
        'root', None, box('a', {'height': '50%'}, size=(0, 12))), 400)
    assert geometry['a'] == (0, 0, 400, 12)
    assert geometry['root'] == (0, 0, 400, 12)


@assert_no_logs
def test_block_units():
    geometry = render(box(
        'root', None, box('a', {'width': '1in', 'height': '6pc'})), 400)
    assert geometry['a'] == (0, 0, 96, 96)


@assert_no_logs
def test_block_explicit_root_width():
    geometry = render(box('root', {'width': 300}, box('a', size=(0, 10))))
    assert geometry['root'] == (0, 0, 300, 10)
    assert geometry['a'] == (0, 0, 300, 10)


@assert_no_logs
def test_block_missing_viewport():
    with pytest.raises(MissingContainingBlock) as exception_info:
        render(box('root', None, box('a')))
    assert exception_info.value.box_id == 'root'


@assert_no_logs
def test_block_percentage_root_width_missing_viewport():
    with pytest.raises(MissingContainingBlock) as exception_info:
        render(box('root', {'width': '50%'}))
    assert exception_info.value.box_id == 'root'


@assert_no_logs
def test_block_sizes_not_negative():
    geometry = render(box(
        'root', {'display': 'flex', 'width': 50},
        box('a', {'flexBasis': 100, 'flexShrink': 5}, box('a1')),
        box('b', {'position': 'absolute', 'left': 40, 'right': 40}),
        box('c', {'flexBasis': 10}, box('c1', {'height': '10%'}))), 800)
    for x, y, width, height in geometry.values():
        assert width >= 0
        assert height >= 0
