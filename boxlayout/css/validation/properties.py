"""Validate properties.

See https://www.w3.org/TR/CSS21/propidx.html and various CSS3 modules.

"""

from ..properties import DISPLAY_KEYS, KNOWN_PROPERTIES
from ..tokens import (
    InvalidValues, get_keyword, get_length, get_number, get_single_keyword,
    single_keyword, single_token)

# Yes/no validators for non-shorthand properties
# Maps property names to functions taking a value list, returning a value or
# None for invalid.
# For properties that take a single value, that value is returned by itself
# instead of a list.
PROPERTIES = {}

DISPLAY_OUTSIDE = ('block', 'inline')
DISPLAY_INSIDE = ('flow', 'flex')


# Validators

def property(property_name=None):
    """Decorator adding a function to the ``PROPERTIES``.

    The name of the property covered by the decorated function is set to
    ``property_name`` if given, or is inferred from the function name
    (replacing underscores by hyphens).

    """
    def decorator(function):
        """Add ``function`` to the ``PROPERTIES``."""
        if property_name is None:
            name = function.__name__.replace('_', '-')
        else:
            name = property_name
        assert name in KNOWN_PROPERTIES or name in DISPLAY_KEYS, name
        assert name not in PROPERTIES, name

        PROPERTIES[name] = function
        return function
    return decorator


def validate_non_shorthand(tokens, name, required=False):
    """Default validator for non-shorthand properties."""
    if not required and name not in KNOWN_PROPERTIES | set(DISPLAY_KEYS):
        hyphens_name = name.replace('_', '-')
        if hyphens_name in KNOWN_PROPERTIES:
            raise InvalidValues(f'did you mean {hyphens_name}?')
        else:
            raise InvalidValues('unknown property')

    if not tokens:
        raise InvalidValues('no value')

    keyword = get_single_keyword(tokens)
    if keyword == 'initial':
        value = keyword
    else:
        value = PROPERTIES[name](tokens)
        if value is None:
            raise InvalidValues
    return ((name, value),)


@property()
def display(tokens):
    """``display`` property validation."""
    for token in tokens:
        if token.type != 'ident':
            return

    if len(tokens) == 1:
        value = tokens[0].lower_value
        if value in DISPLAY_OUTSIDE:
            return (value, 'flow')
        elif value in DISPLAY_INSIDE:
            return ('block', value)
        elif value == 'inline-flex':
            return ('inline', 'flex')
    elif len(tokens) == 2:
        outside = inside = None
        for token in tokens:
            value = token.lower_value
            if value in DISPLAY_OUTSIDE and outside is None:
                outside = value
            elif value in DISPLAY_INSIDE and inside is None:
                inside = value
            else:
                return
        return (outside, inside)


@property('outer-display')
@single_keyword
def outer_display(keyword):
    """Validation for the outer half of ``display``."""
    return keyword in DISPLAY_OUTSIDE


@property('inner-display')
@single_keyword
def inner_display(keyword):
    """Validation for the inner half of ``display``."""
    return keyword in DISPLAY_INSIDE


@property()
@single_token
def position(token):
    """``position`` property validation."""
    keyword = get_keyword(token)
    if keyword in ('static', 'relative', 'absolute', 'fixed'):
        return keyword


@property('top')
@property('right')
@property('bottom')
@property('left')
@single_token
def length_percentage_or_auto(token):
    """Validation for the offset properties, negative values allowed."""
    length = get_length(token, percentage=True)
    if length:
        return length
    if get_keyword(token) == 'auto':
        return 'auto'


@property('width')
@property('height')
@single_token
def width_height(token):
    """Validation for the ``width`` and ``height`` properties."""
    length = get_length(token, negative=False, percentage=True)
    if length:
        return length
    if get_keyword(token) == 'auto':
        return 'auto'


@property()
@single_token
def gap(token):
    """Validation for the ``gap`` property, main axis only."""
    length = get_length(token, negative=False)
    if length:
        return length
    if get_keyword(token) == 'normal':
        return 'normal'


@property()
@single_token
def flex_basis(token):
    """``flex-basis`` property validation."""
    return width_height([token])


@property('flex-grow')
@property('flex-shrink')
@single_token
def flex_grow_shrink(token):
    return get_number(token, negative=False)


@property()
@single_keyword
def justify_content(keyword):
    """``justify-content`` property validation."""
    return keyword in (
        'flex-start', 'flex-end', 'center', 'space-between', 'space-around',
        'space-evenly')


@property()
@single_keyword
def align_items(keyword):
    """``align-items`` property validation."""
    return keyword in ('flex-start', 'flex-end', 'center', 'stretch')
