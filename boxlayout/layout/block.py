"""Layout for block-level and block-container boxes."""

from .absolute import absolute_layout
from .containing_block import resolve_available_width
from .formatting_context import FLEX_ITEM, classify
from .percent import resolve_position_percentages
from .preferred import hypothetical_height


def block_level_layout(context, box, position_x, position_y, width, height,
                       definite_height):
    """Set the geometry of ``box`` and lay out its descendants.

    ``position_x`` and ``position_y`` are relative to the content box of
    the containing block, ``width`` and ``height`` are the used size of the
    content box of ``box``. ``definite_height`` tells whether ``height``
    can be used as a reference for the percentages of the children.

    """
    context.set_geometry(box, position_x, position_y, width, height)

    containing_block = (width, height if definite_height else None)
    if classify(box).child_layout_mode == FLEX_ITEM:
        from .flex import flex_layout
        static_positions = flex_layout(
            context, box, width, height, containing_block)
    else:
        static_positions = block_container_layout(
            context, box, containing_block)

    # This box is the containing block for absolute children, its size is
    # now known.
    for child, static_position in static_positions.items():
        absolute_layout(context, child, (width, height), static_position)


def block_container_layout(context, box, containing_block):
    """Stack the in-flow children of ``box`` in the normal flow.

    Return a dict mapping absolutely positioned children to their static
    position.

    """
    static_positions = {}
    position_y = 0
    for child in box.children:
        if child.is_absolutely_positioned():
            static_positions[child] = (0, position_y)
            continue
        position_y += in_flow_layout(
            context, child, position_y, containing_block)
    return static_positions


def in_flow_layout(context, box, position_y, containing_block):
    """Lay out the block-participating ``box`` at ``position_y``.

    Return the height taken by ``box`` in the flow.

    """
    width = resolve_available_width(context, box, containing_block)
    height, definite_height = hypothetical_height(
        context, box, width, containing_block)
    translate_x, translate_y = relative_offset(box, containing_block)
    block_level_layout(
        context, box, translate_x, position_y + translate_y, width, height,
        definite_height)
    return height


def relative_offset(box, containing_block):
    """Return the translation of ``box`` if it is relatively positioned.

    Relative positioning has no effect on the position of other boxes.

    """
    if not box.is_relatively_positioned():
        return 0, 0
    top, right, bottom, left = resolve_position_percentages(
        box, containing_block)

    if left != 'auto':
        translate_x = left
    elif right != 'auto':
        translate_x = -right
    else:
        translate_x = 0

    if top != 'auto':
        translate_y = top
    elif bottom != 'auto':
        translate_y = -bottom
    else:
        translate_y = 0

    return translate_x, translate_y
