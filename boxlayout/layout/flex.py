"""Layout for flex containers and flex-items.

Only single-line, row-direction flex containers are supported.

"""

import collections

from .formatting_context import is_flex_item
from .percent import percentage, resolve_height
from .preferred import content_height, max_content_width

FlexItem = collections.namedtuple(
    'FlexItem', ['base_size', 'flex_grow', 'flex_shrink'])


def flex_base_size(context, box, container_width):
    """Return the flex base size of ``box`` in a ``container_width`` line.

    ``container_width`` is ``None`` when it is not known yet, percentages
    then behave as ``auto``.

    """
    # See https://www.w3.org/TR/css-flexbox-1/#flex-basis-property.
    flex_basis = percentage(box.style['flex_basis'], container_width)
    if flex_basis == 'auto':
        flex_basis = percentage(box.style['width'], container_width)
    if flex_basis == 'auto':
        # Size as a shrink-to-fit box.
        flex_basis = max_content_width(context, box)
    return flex_basis


def layout_main_axis(container_content_width, items, gap, justify_content):
    """Resolve flexible lengths and distribute the remaining free space.

    Return a ``(positions, sizes)`` tuple with the x offsets and the used
    main sizes of ``items``, in order.

    """
    # References are to: https://www.w3.org/TR/css-flexbox-1/#layout-algorithm.
    if not items:
        return [], []

    # 9.7.1 Determine the used flex factor.
    used_space = (
        sum(item.base_size for item in items) + gap * (len(items) - 1))
    free_space = container_content_width - used_space
    sizes = [item.base_size for item in items]

    flex_grow_factors_sum = sum(item.flex_grow for item in items)
    scaled_flex_shrink_factors_sum = sum(
        item.flex_shrink * item.base_size for item in items)

    # 9.7.5.c Distribute free space proportional to the flex factors.
    if free_space > 0 and flex_grow_factors_sum > 0:
        for i, item in enumerate(items):
            ratio = item.flex_grow / flex_grow_factors_sum
            sizes[i] = item.base_size + free_space * ratio
        free_space = 0
    elif free_space < 0 and scaled_flex_shrink_factors_sum > 0:
        clamped = False
        for i, item in enumerate(items):
            ratio = (
                item.flex_shrink * item.base_size /
                scaled_flex_shrink_factors_sum)
            sizes[i] = item.base_size + free_space * ratio
            if sizes[i] < 0:
                sizes[i] = 0
                clamped = True
        if clamped:
            # Items can't be smaller than nothing, the rest overflows.
            free_space = container_content_width - (sum(sizes) + gap * (
                len(items) - 1))
        else:
            free_space = 0

    # 12.2 Align the items along the main-axis per justify-content.
    if free_space < 0:
        if justify_content == 'space-between':
            justify_content = 'flex-start'
        elif justify_content in ('space-around', 'space-evenly'):
            justify_content = 'center'

    position_main = 0
    if justify_content == 'flex-end':
        position_main += free_space
    elif justify_content == 'center':
        position_main += free_space / 2
    elif justify_content == 'space-around':
        position_main += free_space / len(items) / 2
    elif justify_content == 'space-evenly':
        position_main += free_space / (len(items) + 1)

    positions = []
    for i, size in enumerate(sizes):
        if i:
            position_main += gap
        positions.append(position_main)
        position_main += size
        if justify_content == 'space-around':
            position_main += free_space / len(items)
        elif justify_content == 'space-between':
            if len(items) > 1:
                position_main += free_space / (len(items) - 1)
        elif justify_content == 'space-evenly':
            position_main += free_space / (len(items) + 1)

    return positions, sizes


def flex_items(box):
    """Return the flex items of the flex container ``box``, in order."""
    return [child for child in box.children if is_flex_item(child, box)]


def main_axis_layout(context, box, width):
    """Return the ``(positions, sizes)`` of the flex items of ``box``.

    ``width`` is the width of the content box of the flex container.

    """
    key = (box, width)
    if key not in context.main_axes:
        items = [
            FlexItem(
                flex_base_size(context, child, width),
                child.style['flex_grow'], child.style['flex_shrink'])
            for child in flex_items(box)]
        context.main_axes[key] = layout_main_axis(
            width, items, box.style['gap'].value,
            box.style['justify_content'])
    return context.main_axes[key]


def flex_layout(context, box, width, height, containing_block):
    """Lay out the children of the flex container ``box``.

    ``width`` and ``height`` are the used size of the content box of
    ``box``, ``containing_block`` is the ``(width, height)`` containing
    block of its children, where the height is ``None`` when it depends on
    the children.

    Return a dict mapping absolutely positioned children to their static
    position.

    """
    from . import block

    children = flex_items(box)
    positions, sizes = main_axis_layout(context, box, width)

    # The flex container is single-line: the cross size of the line is the
    # content height of the container, set by its height or by its items.
    line_cross_size = height
    align_items = box.style['align_items']

    for child, position_x, child_width in zip(children, positions, sizes):
        # 9.4 Determine the hypothetical cross size of each item.
        child_height = resolve_height(child, containing_block)
        definite_height = child_height != 'auto'
        if not definite_height:
            if align_items == 'stretch':
                # 11 Determine the used cross size of each flex item.
                child_height = line_cross_size
                definite_height = True
            else:
                child_height = content_height(context, child, child_width)

        # 14 Align all flex items along the cross-axis.
        position_y = 0
        if align_items == 'flex-end':
            position_y += line_cross_size - child_height
        elif align_items == 'center':
            position_y += (line_cross_size - child_height) / 2

        translate_x, translate_y = block.relative_offset(
            child, containing_block)
        block.block_level_layout(
            context, child, position_x + translate_x,
            position_y + translate_y, child_width, child_height,
            definite_height)

    return {
        child: (0, 0) for child in box.children
        if child.is_absolutely_positioned()}
