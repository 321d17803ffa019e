"""Resolve percentages into fixed values."""


def percentage(value, refer_to):
    """Return the percentage of the reference value, or the value unchanged.

    ``refer_to`` is the length for 100%. When it is ``None``, percentages
    behave as ``'auto'``.

    """
    if value is None or value == 'auto':
        return value
    elif value.unit == 'px':
        return value.value
    else:
        assert value.unit == '%'
        if refer_to is None:
            return 'auto'
        return refer_to * value.value / 100


def resolve_position_percentages(box, containing_block):
    """Return the used ``(top, right, bottom, left)`` offsets of ``box``."""
    cb_width, cb_height = containing_block
    return (
        percentage(box.style['top'], cb_height),
        percentage(box.style['right'], cb_width),
        percentage(box.style['bottom'], cb_height),
        percentage(box.style['left'], cb_width))


def resolve_height(box, containing_block):
    """Return the used ``height`` of ``box``, or ``'auto'``."""
    return percentage(box.style['height'], containing_block[1])
