"""Preferred width and content height of boxes.

The preferred width, also known as max-content width, is the width a box
needs to lay out its content without any constraint. It is what
shrink-to-fit boxes and flex items with automatic bases request.

Leaves get their sizes from their intrinsic content size, measured by an
external collaborator.

These functions are pure: they only read the boxes and cache their results
in the layout context.

"""

from .formatting_context import in_flow_children
from .percent import resolve_height


def max_content_width(context, box):
    """Return the max-content width for ``box``.

    *Warning:* the return value is for the width of the content area, the
    box's own ``width`` is ignored.

    """
    if box in context.max_content_widths:
        return context.max_content_widths[box]

    children = in_flow_children(box)
    if not children:
        width = box.intrinsic_width
    elif box.is_flex_container():
        width = flex_max_content_width(context, box, children)
    else:
        width = max(
            width_contribution(context, child) for child in children)
    context.max_content_widths[box] = width
    return width


def width_contribution(context, box):
    """Return the width ``box`` requests from a parent of unknown width."""
    width = box.style['width']
    if width != 'auto' and width.unit == 'px':
        return width.value
    return max_content_width(context, box)


def flex_max_content_width(context, box, children):
    """Return the max-content width of a flex container."""
    from .flex import flex_base_size

    gap = box.style['gap'].value
    return (
        sum(flex_base_size(context, child, None) for child in children) +
        gap * (len(children) - 1))


def content_height(context, box, width):
    """Return the height of ``box`` when its content is ``width`` wide.

    The box's own ``height`` is ignored, percentages in descendants'
    heights are ``'auto'`` as the height of ``box`` depends on them.

    """
    key = (box, width)
    if key in context.content_heights:
        return context.content_heights[key]

    children = in_flow_children(box)
    if not children:
        height = box.intrinsic_height
    elif box.is_flex_container():
        height = flex_content_height(context, box, width, children)
    else:
        height = block_content_height(context, box, width, children)
    context.content_heights[key] = height
    return height


def hypothetical_height(context, box, width, containing_block):
    """Return the height of ``box`` and whether it is definite."""
    height = resolve_height(box, containing_block)
    if height == 'auto':
        return content_height(context, box, width), False
    return height, True


def block_content_height(context, box, width, children):
    """Return the sum of the heights of in-flow children stacked in flow."""
    from .containing_block import resolve_available_width

    containing_block = (width, None)
    height = 0
    for child in children:
        child_width = resolve_available_width(context, child, containing_block)
        height += hypothetical_height(
            context, child, child_width, containing_block)[0]
    return height


def flex_content_height(context, box, width, children):
    """Return the cross size of the single flex line of ``box``."""
    from .flex import main_axis_layout

    containing_block = (width, None)
    _, sizes = main_axis_layout(context, box, width)
    return max(
        hypothetical_height(context, child, size, containing_block)[0]
        for child, size in zip(children, sizes))
