"""Transform a box tree into geometry.

Determine the position and the size of the content box of each box.
Positions are relative to the content box of the containing block of each
box, the root box is positioned in the viewport.

Layout has two passes. The measure pass computes preferred widths, flex
base sizes and content heights from the leaves to the root, without placing
anything. The placement pass walks the tree from the root, gives each box
its final geometry and uses it as the containing block of its children.

Geometry is written once per box in a :class:`LayoutContext`, and only
given to the boxes when the whole pass succeeded.

"""

from collections.abc import Mapping
from math import isfinite

from ..css.properties import OFFSET_PROPERTIES, Dimension
from ..errors import InvalidStyleValue, MalformedTree, MissingContainingBlock
from ..formatting_structure.boxes import Box, BoxTree, ComputedGeometry
from ..logger import PROGRESS_LOGGER
from .absolute import absolute_layout
from .block import in_flow_layout


class LayoutContext:
    """State of a single layout pass."""
    def __init__(self, viewport_width):
        self.viewport_width = viewport_width
        self.geometries = {}

        # Measure pass caches, only valid for this pass.
        self.max_content_widths = {}
        self.content_heights = {}
        self.main_axes = {}

    def set_geometry(self, box, position_x, position_y, width, height):
        """Set the geometry of ``box``, that can only be set once."""
        assert box not in self.geometries, f'{box!r} laid out twice'
        assert width >= 0 and height >= 0, (box, width, height)
        self.geometries[box] = ComputedGeometry(
            position_x, position_y, width, height)


class LayoutResult(Mapping):
    """Mapping of box ids to their :class:`ComputedGeometry`.

    Ids are in document order.

    """
    def __init__(self, geometries):
        self._geometries = dict(geometries)

    def __getitem__(self, box_id):
        return self._geometries[box_id]

    def __iter__(self):
        return iter(self._geometries)

    def __len__(self):
        return len(self._geometries)

    def __repr__(self):
        return f'<{type(self).__name__} {self._geometries!r}>'

    def to_dict(self):
        """Return the exchange form of the result."""
        return {
            str(box_id): geometry._asdict()
            for box_id, geometry in self._geometries.items()}


def check_styles(tree):
    """Check the values of styles that must be finite or not negative.

    Styles built from declarations are already checked, styles built from
    computed values are not.

    """
    for box in tree:
        style = box.style
        for name in ('flex_grow', 'flex_shrink'):
            if not isfinite(style[name]) or style[name] < 0:
                raise InvalidStyleValue(
                    box.box_id, f'{name.replace("_", "-")} must be finite '
                    f'and not negative, got {style[name]}')
        for name in ('width', 'height', 'flex_basis', 'gap'):
            value = style[name]
            if isinstance(value, Dimension) and (
                    not isfinite(value.value) or value.value < 0):
                raise InvalidStyleValue(
                    box.box_id, f'{name.replace("_", "-")} must be finite '
                    f'and not negative, got {value.value}{value.unit}')
        for name in OFFSET_PROPERTIES:
            value = style[name]
            if isinstance(value, Dimension) and not isfinite(value.value):
                raise InvalidStyleValue(
                    box.box_id, f'{name} must be finite, got '
                    f'{value.value}{value.unit}')


def layout_root(context, root):
    """Lay out the ``root`` box in the viewport."""
    viewport = (context.viewport_width, None)
    if root.is_absolutely_positioned():
        absolute_layout(context, root, viewport, static_position=(0, 0))
    else:
        in_flow_layout(context, root, 0, viewport)


def layout_tree(tree, viewport_width=None):
    """Lay out the whole ``tree``.

    :param tree: a :class:`BoxTree`, or its root :class:`Box`.
    :param viewport_width: the width of the containing block of the root
        box, required when the root box fills it.
    :returns: a :class:`LayoutResult`, the geometry is also set on boxes.
    :raises MalformedTree: when boxes don't form a tree, or when the tree
        is too deep to be laid out.
    :raises InvalidStyleValue: when a style has an invalid value.
    :raises MissingContainingBlock: when the root box needs a viewport width.

    """
    if isinstance(tree, Box):
        tree = BoxTree(tree)

    PROGRESS_LOGGER.info('Step 1 - Validating box tree')
    tree.validate()
    check_styles(tree)
    if viewport_width is not None and (
            isinstance(viewport_width, bool) or
            not isinstance(viewport_width, (int, float)) or
            not isfinite(viewport_width) or viewport_width < 0):
        raise MissingContainingBlock(
            tree.root.box_id,
            f'viewport width must be a finite non-negative number, got '
            f'{viewport_width!r}')

    PROGRESS_LOGGER.info('Step 2 - Laying out boxes')
    context = LayoutContext(viewport_width)
    try:
        layout_root(context, tree.root)
    except RecursionError as exception:
        raise MalformedTree(
            tree.root.box_id, 'box tree is too deep') from exception

    PROGRESS_LOGGER.info('Step 3 - Storing geometry')
    geometries = {}
    for box in tree:
        box.geometry = context.geometries[box]
        geometries[box.box_id] = box.geometry
    return LayoutResult(geometries)
