"""Validate properties and expanders."""

from tinycss2 import serialize

from ...logger import LOGGER
from ..properties import DISPLAY_KEYS, KNOWN_PROPERTIES
from ..tokens import InvalidValues, remove_whitespace
from .expanders import EXPANDERS
from .properties import validate_non_shorthand


def validate_declaration(name, tokens):
    """Validate a single declaration, expanding shorthands.

    Return an iterable of ``(name, value)`` tuples, with underscores in
    names. Unknown properties are logged and ignored, invalid values raise
    :class:`InvalidValues`.

    """
    if name in EXPANDERS:
        expander = EXPANDERS[name]
    elif name in KNOWN_PROPERTIES or name in DISPLAY_KEYS:
        expander = validate_non_shorthand
    else:
        hyphens_name = name.replace('_', '-')
        if hyphens_name in KNOWN_PROPERTIES:
            reason = f'did you mean {hyphens_name}?'
        else:
            reason = 'unknown property'
        LOGGER.warning('Ignored `%s: %s`, %s.', name, serialize(tokens), reason)
        return ()

    try:
        if not tokens:
            raise InvalidValues('no value')
        results = list(expander(tokens, name))
    except InvalidValues as exception:
        message = exception.args[0] if exception.args else 'invalid value'
        raise InvalidValues(
            f'`{name}: {serialize(tokens)}`, {message}') from exception
    return [
        (long_name.replace('-', '_'), value) for long_name, value in results]


def preprocess_declarations(declarations):
    """Expand shorthand properties, filter unknown properties and values.

    Log a warning for every ignored declaration, raise
    :class:`InvalidValues` for declarations with invalid values.

    Return a iterable of ``(name, value)`` tuples.

    """
    for declaration in declarations:
        if declaration.type in ('whitespace', 'comment'):
            continue

        if declaration.type == 'error':
            raise InvalidValues(
                f'{declaration.message} at '
                f'{declaration.source_line}:{declaration.source_column}')

        if declaration.type != 'declaration':
            LOGGER.warning(
                'Ignored %s at %d:%d, only declarations are allowed.',
                declaration.type, declaration.source_line,
                declaration.source_column)
            continue

        tokens = remove_whitespace(declaration.value)
        yield from validate_declaration(declaration.lower_name, tokens)
