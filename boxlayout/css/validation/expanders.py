"""Validate properties expanders."""

import functools

from tinycss2.ast import DimensionToken, IdentToken, NumberToken

from ..properties import OFFSET_PROPERTIES
from ..tokens import InvalidValues, get_single_keyword
from .properties import flex_basis, flex_grow_shrink, validate_non_shorthand

EXPANDERS = {}


def expander(property_name):
    """Decorator adding a function to the ``EXPANDERS``."""
    def expander_decorator(function):
        """Add ``function`` to the ``EXPANDERS``."""
        assert property_name not in EXPANDERS, property_name
        EXPANDERS[property_name] = function
        return function
    return expander_decorator


def generic_expander(*expanded_names):
    """Decorator helping expanders to handle ``initial``.

    Wrap an expander so that it does not have to handle the 'initial' case,
    and can just yield name suffixes. Missing suffixes get the initial value.

    """
    def generic_expander_decorator(wrapped):
        """Decorate the ``wrapped`` expander."""
        @functools.wraps(wrapped)
        def generic_expander_wrapper(tokens, name):
            """Wrap the expander."""
            skip_validation = False
            keyword = get_single_keyword(tokens)
            if keyword == 'initial':
                results = {name: keyword for name in expanded_names}
                skip_validation = True
            else:
                results = {}
                for new_name, new_tokens in wrapped(tokens, name):
                    assert new_name in expanded_names, new_name
                    if new_name in results:
                        raise InvalidValues(
                            f'got multiple {new_name.strip("-")} values '
                            f'in a {name} shorthand')
                    results[new_name] = new_tokens

            for new_name in expanded_names:
                if new_name.startswith('-'):
                    # new_name is a suffix
                    actual_new_name = f'{name}{new_name}'
                else:
                    actual_new_name = new_name

                if new_name in results:
                    value = results[new_name]
                    if not skip_validation:
                        # validate_non_shorthand returns ((name, value),)
                        (actual_new_name, value), = validate_non_shorthand(
                            value, actual_new_name, required=True)
                else:
                    value = 'initial'

                yield actual_new_name, value
        return generic_expander_wrapper
    return generic_expander_decorator


@expander('inset')
def expand_inset(tokens, name):
    """Expand the ``inset`` shorthand to the four offset properties.

    The values are given in the same order as for ``margin``.

    """
    if not 1 <= len(tokens) <= 4:
        raise InvalidValues
    tokens = list(tokens)
    if len(tokens) == 1:
        tokens.append(tokens[0])  # right = top
    if len(tokens) == 2:
        tokens.append(tokens[0])  # bottom = top
    if len(tokens) == 3:
        tokens.append(tokens[1])  # left = right
    for suffix, token in zip(OFFSET_PROPERTIES, tokens):
        (new_name, value), = validate_non_shorthand(
            [token], suffix, required=True)
        yield new_name, value


@expander('flex')
@generic_expander('-grow', '-shrink', '-basis')
def expand_flex(tokens, name):
    """Expand the ``flex`` property."""
    keyword = get_single_keyword(tokens)
    line, column = tokens[0].source_line, tokens[0].source_column
    if keyword == 'none':
        zero_token = NumberToken(line, column, 0, 0, '0')
        auto_token = IdentToken(line, column, 'auto')
        yield '-grow', [zero_token]
        yield '-shrink', [zero_token]
        yield '-basis', [auto_token]
    elif keyword == 'auto':
        one_token = NumberToken(line, column, 1, 1, '1')
        auto_token = IdentToken(line, column, 'auto')
        yield '-grow', [one_token]
        yield '-shrink', [one_token]
        yield '-basis', [auto_token]
    else:
        grow, shrink, basis = 1, 1, None
        grow_found, shrink_found, basis_found = False, False, False
        for token in tokens:
            # "A unitless zero that is not already preceded by two flex factors
            # must be interpreted as a flex factor."
            forced_flex_factor = (
                token.type == 'number' and token.int_value == 0 and
                not all((grow_found, shrink_found)))
            if not basis_found and not forced_flex_factor:
                new_basis = flex_basis([token])
                if new_basis is not None:
                    basis = token
                    basis_found = True
                    continue
            if not grow_found:
                new_grow = flex_grow_shrink([token])
                if new_grow is None:
                    raise InvalidValues
                else:
                    grow = new_grow
                    grow_found = True
                    continue
            elif not shrink_found:
                new_shrink = flex_grow_shrink([token])
                if new_shrink is None:
                    raise InvalidValues
                else:
                    shrink = new_shrink
                    shrink_found = True
                    continue
            else:
                raise InvalidValues
        int_grow = int(grow) if float(grow).is_integer() else None
        int_shrink = int(shrink) if float(shrink).is_integer() else None
        grow_token = NumberToken(line, column, grow, int_grow, str(grow))
        shrink_token = NumberToken(
            line, column, shrink, int_shrink, str(shrink))
        if not basis_found:
            basis = DimensionToken(line, column, 0, 0, '0', 'px')
        yield '-grow', [grow_token]
        yield '-shrink', [shrink_token]
        yield '-basis', [basis]
