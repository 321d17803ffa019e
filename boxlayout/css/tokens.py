"""CSS tokens parsers."""

import functools

from .properties import Dimension
from .units import LENGTH_UNITS


class InvalidValues(ValueError):  # noqa: N818
    """Invalid or unsupported values for a known style property."""


def remove_whitespace(tokens):
    """Remove any top-level whitespace and comments in a token list."""
    return tuple(
        token for token in tokens
        if token.type not in ('whitespace', 'comment'))


def get_keyword(token):
    """If ``token`` is a keyword, return its lowercase name.

    Otherwise return ``None``.

    """
    if token.type == 'ident':
        return token.lower_value


def get_single_keyword(tokens):
    """If ``values`` is a 1-element list of keywords, return its name.

    Otherwise return ``None``.

    """
    if len(tokens) == 1:
        token = tokens[0]
        if token.type == 'ident':
            return token.lower_value


def single_keyword(function):
    """Decorator for validators that only accept a single keyword."""
    @functools.wraps(function)
    def keyword_validator(tokens):
        """Wrap a validator to call get_single_keyword on tokens."""
        keyword = get_single_keyword(tokens)
        if function(keyword):
            return keyword
    return keyword_validator


def single_token(function):
    """Decorator for validators that only accept a single token."""
    @functools.wraps(function)
    def single_token_validator(tokens, *args):
        """Validate a property whose token is single."""
        if len(tokens) == 1:
            return function(tokens[0], *args)
    return single_token_validator


def get_length(token, negative=True, percentage=False):
    """Parse a <length> token."""
    if token.type in ('dimension', 'percentage', 'number'):
        if not negative and token.value < 0:
            raise InvalidValues('negative values are not allowed')
    if percentage and token.type == 'percentage':
        return Dimension(token.value, '%')
    if token.type == 'dimension' and token.unit.lower() in LENGTH_UNITS:
        return Dimension(token.value, token.unit.lower())
    if token.type == 'number' and token.value == 0:
        return Dimension(0, 'px')


def get_number(token, negative=True):
    """Parse a <number> token."""
    if token.type == 'number':
        if not negative and token.value < 0:
            raise InvalidValues('negative values are not allowed')
        return token.value
