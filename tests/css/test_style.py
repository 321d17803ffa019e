"""Test computed styles built from declaration strings and mappings."""

import pytest

from boxlayout.css import Style, parse_style, property_name
from boxlayout.css.properties import INITIAL_VALUES, Dimension
from boxlayout.css.tokens import InvalidValues

from ..testing_utils import assert_no_logs, capture_logs


@assert_no_logs
def test_initial_values():
    style = parse_style()
    assert style['display'] == ('block', 'flow')
    assert style['position'] == 'static'
    assert style['width'] == style['height'] == 'auto'
    assert style['flex_grow'] == 0
    assert style['flex_shrink'] == 1
    assert style['flex_basis'] == 'auto'
    assert style['justify_content'] == 'flex-start'
    assert style['align_items'] == 'stretch'
    assert style['gap'] == Dimension(0, 'px')
    assert dict(style) == INITIAL_VALUES


@assert_no_logs
def test_style_immutable():
    style = parse_style({'width': 10})
    with pytest.raises(TypeError):
        style['width'] = Dimension(20, 'px')
    assert style['width'] == Dimension(10, 'px')


@assert_no_logs
def test_style_unknown_key():
    with pytest.raises(KeyError):
        Style({'float': 'left'})
    with pytest.raises(KeyError):
        parse_style()['float']


@assert_no_logs
def test_style_specified_and_copy():
    style = parse_style('display: flex; flex-grow: 0; gap: 10px')
    assert style.specified() == {
        'display': ('block', 'flex'), 'gap': Dimension(10, 'px')}
    copy = style.copy(gap=Dimension(20, 'px'))
    assert copy['gap'] == Dimension(20, 'px')
    assert copy['display'] == ('block', 'flex')
    assert style['gap'] == Dimension(10, 'px')


@assert_no_logs
def test_parse_style_keeps_style():
    style = parse_style({'position': 'relative'})
    assert parse_style(style) is style


@assert_no_logs
@pytest.mark.parametrize('key, name', (
    ('flexGrow', 'flex-grow'),
    ('flex-grow', 'flex-grow'),
    ('flex_grow', 'flex-grow'),
    ('justifyContent', 'justify-content'),
    ('outerDisplay', 'outer-display'),
    ('width', 'width'),
))
def test_property_name(key, name):
    assert property_name(key) == name


@assert_no_logs
def test_mapping_keys():
    style = parse_style({
        'flexGrow': 2, 'flex-shrink': 0, 'flex_basis': 50,
        'justifyContent': 'space-between', 'alignItems': 'center'})
    assert style['flex_grow'] == 2
    assert style['flex_shrink'] == 0
    assert style['flex_basis'] == Dimension(50, 'px')
    assert style['justify_content'] == 'space-between'
    assert style['align_items'] == 'center'


@assert_no_logs
def test_mapping_numbers_are_pixels():
    style = parse_style({
        'width': 100, 'height': 20.5, 'top': -10, 'gap': 0})
    assert style['width'] == Dimension(100, 'px')
    assert style['height'] == Dimension(20.5, 'px')
    assert style['top'] == Dimension(-10, 'px')
    assert style['gap'] == Dimension(0, 'px')


@assert_no_logs
@pytest.mark.parametrize('value, pixels', (
    ('1in', 96),
    ('0.5in', 48),
    ('2pc', 32),
    ('10px', 10),
    ('0in', 0),
))
def test_absolute_units(value, pixels):
    assert parse_style({'width': value})['width'] == Dimension(pixels, 'px')


@assert_no_logs
def test_percentages_kept():
    style = parse_style({'width': '50%', 'left': '10%'})
    assert style['width'] == Dimension(50, '%')
    assert style['left'] == Dimension(10, '%')


@assert_no_logs
def test_gap_normal():
    assert parse_style('gap: normal')['gap'] == Dimension(0, 'px')


@assert_no_logs
def test_initial_keyword():
    style = parse_style({'flexShrink': 'initial', 'display': 'initial'})
    assert style['flex_shrink'] == 1
    assert style['display'] == ('block', 'flow')


@assert_no_logs
@pytest.mark.parametrize('style, display', (
    ({'innerDisplay': 'flex'}, ('block', 'flex')),
    ({'outerDisplay': 'inline'}, ('inline', 'flow')),
    ({'outerDisplay': 'inline', 'innerDisplay': 'flex'}, ('inline', 'flex')),
    ({'display': 'inline', 'innerDisplay': 'flex'}, ('inline', 'flex')),
    ({'innerDisplay': 'flex', 'display': 'inline'}, ('inline', 'flex')),
    ({'display': 'flex', 'innerDisplay': 'initial'}, ('block', 'flow')),
    ('display: inline; inner-display: flex', ('inline', 'flex')),
))
def test_display_halves(style, display):
    assert parse_style(style)['display'] == display


@assert_no_logs
def test_declaration_string():
    style = parse_style(
        'display: flex; /* main axis */ justify-content: center; gap: 1in')
    assert style['display'] == ('block', 'flex')
    assert style['justify_content'] == 'center'
    assert style['gap'] == Dimension(96, 'px')


def test_unknown_properties_ignored():
    with capture_logs() as logs:
        style = parse_style({'color': 'red', 'width': 10})
    assert style['width'] == Dimension(10, 'px')
    assert len(logs) == 1
    assert 'WARNING: Ignored `color: red`, unknown property.' == logs[0]


@assert_no_logs
@pytest.mark.parametrize('style', (
    {'width': True},
    {'width': None},
    {'width': [10]},
    {'width': float('nan')},
    {'width': float('inf')},
    {'flexGrow': -1},
    {'flexShrink': -0.5},
    {'gap': -20},
    {'height': -1},
    {'flexBasis': -10},
    {'position': 10},
    {'justifyContent': 'left'},
    {'outerDisplay': 'flex'},
    {'innerDisplay': 'grid'},
    'width: -1px',
    42,
))
def test_invalid_styles(style):
    with pytest.raises(InvalidValues):
        parse_style(style)
