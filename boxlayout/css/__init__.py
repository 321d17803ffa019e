"""Resolved styles of boxes.

There is no cascade here: each box comes with its own declarations, either as
a string of CSS declarations or as a mapping from property names to values.
This module validates these declarations, computes their values (absolute
units are converted to pixels) and stores them in immutable :class:`Style`
objects falling back to initial values.

"""

import re
from collections.abc import Mapping
from math import isfinite

import tinycss2
from tinycss2.ast import DimensionToken, NumberToken

from .properties import DISPLAY_KEYS, INITIAL_VALUES, ZERO_PIXELS, Dimension
from .tokens import InvalidValues, remove_whitespace
from .units import to_pixels
from .validation import preprocess_declarations, validate_declaration

# Properties whose bare numbers are not lengths.
NUMBER_PROPERTIES = {'flex-grow', 'flex-shrink', 'flex'}

CAMEL_CASE_RE = re.compile('([A-Z])')


class Style(Mapping):
    """Computed style of a box, with initial values as fallback.

    Keys are property names with underscores, ``style['flex_grow']``.

    """
    def __init__(self, values=None):
        self._values = dict(values or {})
        for key in self._values:
            if key not in INITIAL_VALUES:
                raise KeyError(key)

    def __getitem__(self, key):
        if key in self._values:
            return self._values[key]
        return INITIAL_VALUES[key]

    def __iter__(self):
        return iter(INITIAL_VALUES)

    def __len__(self):
        return len(INITIAL_VALUES)

    def __repr__(self):
        return f'<{type(self).__name__} {self._values!r}>'

    def specified(self):
        """Return the properties that are not set to their initial value."""
        return {
            key: value for key, value in self._values.items()
            if value != INITIAL_VALUES[key]}

    def copy(self, **changes):
        """Return a new style with some computed values changed."""
        return type(self)({**self._values, **changes})


def property_name(key):
    """Get the CSS property name for an exchange-form ``key``.

    ``flexGrow``, ``flex_grow`` and ``flex-grow`` are all ``flex-grow``.

    """
    return CAMEL_CASE_RE.sub(r'-\1', key).lower().replace('_', '-')


def value_to_tokens(name, value):
    """Get CSS tokens for a value found in a style mapping.

    Strings are parsed as CSS, numbers are pixels for lengths.

    """
    if isinstance(value, str):
        return remove_whitespace(tinycss2.parse_component_value_list(value))
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise InvalidValues(f'`{name}` got unsupported value {value!r}')
    if not isfinite(value):
        raise InvalidValues(f'`{name}` got non-finite value {value!r}')
    int_value = value if isinstance(value, int) else None
    if name in NUMBER_PROPERTIES:
        return [NumberToken(1, 1, value, int_value, str(value))]
    return [DimensionToken(1, 1, value, int_value, str(value), 'px')]


def compute(name, value):
    """Compute a validated ``value`` for the property called ``name``."""
    if value == 'initial':
        return INITIAL_VALUES[name]
    if name == 'gap' and value == 'normal':
        return ZERO_PIXELS
    if isinstance(value, Dimension) and value.unit != '%':
        return Dimension(to_pixels(value), 'px')
    return value


def compute_declarations(declarations):
    """Build a :class:`Style` from validated ``(name, value)`` tuples."""
    values = {}
    halves = {}
    for name, value in declarations:
        hyphens_name = name.replace('_', '-')
        if hyphens_name in DISPLAY_KEYS:
            halves[DISPLAY_KEYS[hyphens_name]] = value
        else:
            values[name] = compute(name, value)
    if halves:
        display = list(values.get('display', INITIAL_VALUES['display']))
        for index, value in halves.items():
            if value == 'initial':
                value = INITIAL_VALUES['display'][index]
            display[index] = value
        values['display'] = tuple(display)
    return Style(values)


def parse_style(source=None):
    """Build a :class:`Style` from declarations.

    :param source:
        ``None`` for initial values, a string of CSS declarations like
        ``'display: flex; gap: 20px'``, or a mapping from property names
        (camelCase, kebab-case or snake_case) to values, where numbers are
        pixels for lengths.
    :raises InvalidValues: for invalid values.

    """
    if source is None:
        return Style()
    if isinstance(source, Style):
        return source
    if isinstance(source, str):
        declarations = tinycss2.parse_blocks_contents(source)
        return compute_declarations(preprocess_declarations(declarations))
    if isinstance(source, Mapping):
        declarations = []
        for key, value in source.items():
            name = property_name(key)
            tokens = value_to_tokens(name, value)
            declarations.extend(validate_declaration(name, tokens))
        return compute_declarations(declarations)
    raise InvalidValues(f'unsupported style {source!r}')
