"""Classify boxes by the formatting contexts they take part in.

A box has a dual nature. Its position decides how it sizes itself against
its parent, its inner display decides how its children are laid out. Its
outer display has no effect on either: a block container lays out inline
children as block-participating boxes, and a flex container turns all its
in-flow children into flex items.

See https://www.w3.org/TR/css-display-3/#the-display-properties

"""

import collections

#: Fill the containing block width, take part in the normal flow.
BLOCK = 'block'
#: Size to the content, out of the normal flow.
SHRINK_TO_FIT = 'shrink-to-fit'
#: Children of flex containers, sized by the flex algorithm.
FLEX_ITEM = 'flex-item'

Classification = collections.namedtuple(
    'Classification', ['participation', 'child_layout_mode'])


def classify(box):
    """Return the :class:`Classification` of ``box``.

    Pure function of the box style, computed again on each layout pass.

    """
    if box.is_absolutely_positioned():
        participation = SHRINK_TO_FIT
    else:
        participation = BLOCK
    if box.is_flex_container():
        child_layout_mode = FLEX_ITEM
    else:
        child_layout_mode = BLOCK
    return Classification(participation, child_layout_mode)


def is_flex_item(box, parent):
    """Return whether ``box``, a child of ``parent``, is a flex item.

    Absolutely positioned children of flex containers are not flex items.

    """
    return (
        classify(parent).child_layout_mode == FLEX_ITEM and
        classify(box).participation == BLOCK)


def in_flow_children(box):
    """Return the children of ``box`` that take part in its layout."""
    return [
        child for child in box.children
        if classify(child).participation == BLOCK]
