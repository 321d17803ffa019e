"""Available width of boxes in their containing block.

Block-participating boxes fill their containing block, shrink-to-fit boxes
only take the width their content needs unless both their ``left`` and
``right`` offsets constrain them.

Flex items are never sized here: their width always comes from the flex
algorithm, see :func:`boxlayout.layout.flex.flex_base_size`.

See https://www.w3.org/TR/CSS21/visudet.html#blockwidth and
https://www.w3.org/TR/CSS21/visudet.html#abs-non-replaced-width

"""

from ..errors import MissingContainingBlock
from .formatting_context import BLOCK, classify
from .percent import percentage, resolve_position_percentages
from .preferred import max_content_width


def resolve_available_width(context, box, containing_block):
    """Return the width ``box`` can use in ``containing_block``.

    ``containing_block`` is the ``(width, height)`` of the parent content
    box, ``None`` members are undefined.

    :raises MissingContainingBlock: when the width depends on an undefined
        containing block width.

    """
    cb_width = containing_block[0]
    width = percentage(box.style['width'], cb_width)
    if width != 'auto':
        return width

    if classify(box).participation == BLOCK:
        if cb_width is None:
            raise MissingContainingBlock(
                box.box_id, 'width: auto needs a containing block width, '
                'the root box must be given a viewport width')
        return cb_width

    _, right, _, left = resolve_position_percentages(box, containing_block)
    if left != 'auto' and right != 'auto':
        if cb_width is None:
            raise MissingContainingBlock(
                box.box_id, 'left and right offsets need a containing block '
                'width')
        return max(0, cb_width - left - right)
    return max_content_width(context, box)
