"""Constants and helpers for units."""

# How many CSS pixels is one <unit>?
# https://www.w3.org/TR/CSS21/syndata.html#length-units
LENGTHS_TO_PIXELS = {
    'px': 1,
    'pt': 1 / 0.75,
    'pc': 16,
    'in': 96,
    'cm': 96 / 2.54,
    'mm': 96 / 25.4,
    'q': 96 / 25.4 / 4,
}

# Font-relative units need text measurement, they are not supported.
# https://drafts.csswg.org/css-values-4/#lengths
LENGTH_UNITS = set(LENGTHS_TO_PIXELS)


def to_pixels(value):
    """Get number of pixels corresponding to a length."""
    if value.value == 0:
        return 0
    elif (unit := value.unit.lower()) == 'px':
        return value.value
    return value.value * LENGTHS_TO_PIXELS[unit]
