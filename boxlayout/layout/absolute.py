"""Absolutely positioned boxes management.

Absolutely positioned and fixed boxes are taken out of the flow. They are
laid out once their parent, their containing block, has its final size.

"""

from ..errors import MissingContainingBlock
from .containing_block import resolve_available_width
from .percent import resolve_height, resolve_position_percentages
from .preferred import content_height


def absolute_width(context, box, containing_block, static_x, left, right):
    """Return the used ``(position_x, width)`` of ``box``."""
    # https://www.w3.org/TR/CSS2/visudet.html#abs-non-replaced-width
    cb_width = containing_block[0]
    width = resolve_available_width(context, box, containing_block)
    if left != 'auto':
        position_x = left
    elif right != 'auto':
        if cb_width is None:
            raise MissingContainingBlock(
                box.box_id, 'right offset needs a containing block width')
        position_x = cb_width - right - width
    else:
        # Keep the static position
        position_x = static_x
    return position_x, width


def absolute_height(context, box, containing_block, static_y, top, bottom,
                    width):
    """Return the used ``(position_y, height, definite_height)`` of ``box``."""
    # https://www.w3.org/TR/CSS2/visudet.html#abs-non-replaced-height
    cb_height = containing_block[1]
    height = resolve_height(box, containing_block)
    definite_height = height != 'auto'
    if height == 'auto':
        if top != 'auto' and bottom != 'auto':
            if cb_height is None:
                raise MissingContainingBlock(
                    box.box_id, 'top and bottom offsets need a containing '
                    'block height')
            height = max(0, cb_height - top - bottom)
            definite_height = True
        else:
            height = content_height(context, box, width)

    if top != 'auto':
        position_y = top
    elif bottom != 'auto':
        if cb_height is None:
            raise MissingContainingBlock(
                box.box_id, 'bottom offset needs a containing block height')
        position_y = cb_height - bottom - height
    else:
        # Keep the static position
        position_y = static_y
    return position_y, height, definite_height


def absolute_layout(context, box, containing_block, static_position):
    """Lay out an absolutely positioned ``box`` in its containing block.

    ``static_position`` is the ``(x, y)`` position the box would have had in
    the normal flow.

    """
    from .block import block_level_layout

    static_x, static_y = static_position
    top, right, bottom, left = resolve_position_percentages(
        box, containing_block)
    position_x, width = absolute_width(
        context, box, containing_block, static_x, left, right)
    position_y, height, definite_height = absolute_height(
        context, box, containing_block, static_y, top, bottom, width)
    block_level_layout(
        context, box, position_x, position_y, width, height, definite_height)
