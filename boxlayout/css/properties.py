"""Various data about known style properties."""

import collections

Dimension = collections.namedtuple('Dimension', ['value', 'unit'])

ZERO_PIXELS = Dimension(0, 'px')

INITIAL_VALUES = {
    # CSS 2.1: https://www.w3.org/TR/CSS21/propidx.html
    'bottom': 'auto',
    'height': 'auto',
    'left': 'auto',
    'position': 'static',
    'right': 'auto',
    'top': 'auto',
    'width': 'auto',

    # Display 3 (CR): https://www.w3.org/TR/css-display-3/
    # Layout trees are made of block boxes unless told otherwise.
    'display': ('block', 'flow'),

    # Flexible Box Layout Module 1 (CR): https://www.w3.org/TR/css-flexbox-1/
    'align_items': 'stretch',
    'flex_basis': 'auto',
    'flex_grow': 0,
    'flex_shrink': 1,
    'justify_content': 'flex-start',

    # Box Alignment 3 (WD): https://www.w3.org/TR/css-align-3/
    'gap': ZERO_PIXELS,
}

KNOWN_PROPERTIES = {name.replace('_', '-') for name in INITIAL_VALUES}

# Exchange-form keys that are not CSS property names.
DISPLAY_KEYS = {'outer-display': 0, 'inner-display': 1}

OFFSET_PROPERTIES = ('top', 'right', 'bottom', 'left')
