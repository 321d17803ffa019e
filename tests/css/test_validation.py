"""Test validation of properties."""

import pytest
import tinycss2

from boxlayout.css import preprocess_declarations
from boxlayout.css.properties import Dimension
from boxlayout.css.tokens import InvalidValues
from boxlayout.css.validation.properties import PROPERTIES

from ..testing_utils import assert_no_logs, capture_logs


def get_value(css, expected_error=None):
    declarations = tinycss2.parse_blocks_contents(css)

    with capture_logs() as logs:
        declarations = list(preprocess_declarations(declarations))

    if expected_error:
        assert len(logs) == 1
        assert expected_error in logs[0]
    else:
        assert not logs

    if declarations:
        assert len(declarations) == 1
        return declarations[0][1]


def assert_invalid(css, message='invalid value'):
    with pytest.raises(InvalidValues) as exception_info:
        get_value(css)
    assert message in exception_info.value.args[0]


@assert_no_logs
@pytest.mark.parametrize('prop', PROPERTIES)
def test_empty_property_value(prop):
    assert_invalid(f'{prop}:', message='no value')


@assert_no_logs
def test_unknown_property():
    assert get_value('float: left', 'unknown property') is None


@assert_no_logs
def test_underscore_property():
    assert get_value('flex_grow: 1', 'did you mean flex-grow?') is None


@assert_no_logs
def test_at_rule_ignored():
    assert get_value('@media print {}', 'only declarations') is None


@assert_no_logs
def test_parse_error():
    assert_invalid('width 10px', message='at 1:')


@assert_no_logs
@pytest.mark.parametrize('rule, value', (
    ('block', ('block', 'flow')),
    ('inline', ('inline', 'flow')),
    ('flow', ('block', 'flow')),
    ('flex', ('block', 'flex')),
    ('inline-flex', ('inline', 'flex')),
    ('inline flex', ('inline', 'flex')),
    ('flex inline', ('inline', 'flex')),
    ('block flow', ('block', 'flow')),
))
def test_display(rule, value):
    assert get_value(f'display: {rule}') == value


@assert_no_logs
@pytest.mark.parametrize('rule', (
    'grid', 'flex flex', 'block inline', 'inline block flow', '1px',
    'inline-block'))
def test_display_invalid(rule):
    assert_invalid(f'display: {rule}')


@assert_no_logs
@pytest.mark.parametrize('rule', ('static', 'relative', 'absolute', 'fixed'))
def test_position(rule):
    assert get_value(f'position: {rule}') == rule


@assert_no_logs
def test_position_invalid():
    assert_invalid('position: sticky')


@assert_no_logs
@pytest.mark.parametrize('prop', ('width', 'height', 'flex-basis'))
@pytest.mark.parametrize('rule, value', (
    ('auto', 'auto'),
    ('10px', Dimension(10, 'px')),
    ('2in', Dimension(2, 'in')),
    ('50%', Dimension(50, '%')),
    ('0', Dimension(0, 'px')),
))
def test_sizes(prop, rule, value):
    assert get_value(f'{prop}: {rule}') == value


@assert_no_logs
@pytest.mark.parametrize('prop', ('width', 'height', 'flex-basis'))
def test_sizes_negative(prop):
    assert_invalid(f'{prop}: -1px', 'negative values are not allowed')


@assert_no_logs
@pytest.mark.parametrize('rule', ('1em', 'none', '10px 20px', '5'))
def test_width_invalid(rule):
    assert_invalid(f'width: {rule}')


@assert_no_logs
@pytest.mark.parametrize('prop', ('top', 'right', 'bottom', 'left'))
@pytest.mark.parametrize('rule, value', (
    ('auto', 'auto'),
    ('10px', Dimension(10, 'px')),
    ('-5px', Dimension(-5, 'px')),
    ('25%', Dimension(25, '%')),
))
def test_offsets(prop, rule, value):
    assert get_value(f'{prop}: {rule}') == value


@assert_no_logs
@pytest.mark.parametrize('rule, value', (
    ('20px', Dimension(20, 'px')),
    ('0', Dimension(0, 'px')),
    ('normal', 'normal'),
))
def test_gap(rule, value):
    assert get_value(f'gap: {rule}') == value


@assert_no_logs
@pytest.mark.parametrize('rule, message', (
    ('-1px', 'negative values are not allowed'),
    ('10%', 'invalid value'),
    ('10px 20px', 'invalid value'),
))
def test_gap_invalid(rule, message):
    assert_invalid(f'gap: {rule}', message)


@assert_no_logs
@pytest.mark.parametrize('prop', ('flex-grow', 'flex-shrink'))
@pytest.mark.parametrize('rule, value', (('0', 0), ('2', 2), ('1.5', 1.5)))
def test_flex_factors(prop, rule, value):
    assert get_value(f'{prop}: {rule}') == value


@assert_no_logs
@pytest.mark.parametrize('prop', ('flex-grow', 'flex-shrink'))
@pytest.mark.parametrize('rule, message', (
    ('-1', 'negative values are not allowed'),
    ('1px', 'invalid value'),
    ('auto', 'invalid value'),
))
def test_flex_factors_invalid(prop, rule, message):
    assert_invalid(f'{prop}: {rule}', message)


@assert_no_logs
@pytest.mark.parametrize('rule', (
    'flex-start', 'flex-end', 'center', 'space-between', 'space-around',
    'space-evenly'))
def test_justify_content(rule):
    assert get_value(f'justify-content: {rule}') == rule


@assert_no_logs
@pytest.mark.parametrize('rule', ('left', 'stretch', 'center center'))
def test_justify_content_invalid(rule):
    assert_invalid(f'justify-content: {rule}')


@assert_no_logs
@pytest.mark.parametrize('rule', (
    'flex-start', 'flex-end', 'center', 'stretch'))
def test_align_items(rule):
    assert get_value(f'align-items: {rule}') == rule


@assert_no_logs
@pytest.mark.parametrize('rule', ('baseline', 'space-between'))
def test_align_items_invalid(rule):
    assert_invalid(f'align-items: {rule}')


@assert_no_logs
def test_initial_keyword():
    assert get_value('width: initial') == 'initial'


@assert_no_logs
def test_case_insensitive():
    assert get_value('JUSTIFY-CONTENT: Center') == 'center'
    assert get_value('width: 10PX') == Dimension(10, 'px')


@assert_no_logs
def test_error_message():
    assert_invalid(
        'width: -10px', '`width: -10px`, negative values are not allowed')
