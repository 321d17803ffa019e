"""The Box Geometry Resolver.

The public API is what is accessible from this "root" packages without
importing sub-modules.

"""

VERSION = __version__ = '1.0'

#: Default values for command-line and Python API options. See
#: :func:`__main__.main` to learn more about specific options for
#: command-line.
#:
#: :param float viewport_width:
#:     Width of the containing block of the root box, :obj:`None` to use the
#:     width given by the document.
#: :param int indent:
#:     Indentation of the JSON output, :obj:`None` for a compact output.
DEFAULT_OPTIONS = {
    'viewport_width': None,
    'indent': None,
}

__all__ = [
    'VERSION', '__version__', 'DEFAULT_OPTIONS', 'LOGGER', 'layout',
    'Box', 'BoxTree', 'ComputedGeometry', 'LayoutResult', 'Style',
    'parse_style', 'build_tree', 'build_document', 'tree_from_json',
    'LayoutError', 'MalformedTree', 'InvalidStyleValue',
    'MissingContainingBlock', 'InvalidTreeData']


# Work around circular imports, and define layout after importing the
# layout subpackage that would otherwise shadow it.
from .css import Style, parse_style  # noqa: I001, E402
from .errors import (  # noqa: E402
    InvalidStyleValue, InvalidTreeData, LayoutError, MalformedTree,
    MissingContainingBlock)
from .formatting_structure.boxes import Box, BoxTree, ComputedGeometry  # noqa: E402
from .formatting_structure.build import (  # noqa: E402
    build_document, build_tree, tree_from_json)
from .layout import LayoutResult, layout_tree  # noqa: E402
from .logger import LOGGER  # noqa: E402


def layout(tree, viewport_width=None):
    """Compute the geometry of all the boxes of ``tree``.

    :type tree: :class:`BoxTree` or :class:`Box`
    :param tree: The tree to lay out, or its root box.
    :type viewport_width: :obj:`float`
    :param viewport_width:
        The width of the containing block of the root box.
    :returns: A :class:`LayoutResult` mapping box ids to their
        :class:`ComputedGeometry`, also stored in the ``geometry`` attribute
        of each box.
    :raises LayoutError: When the tree can't be laid out. The geometry of
        the boxes is then left untouched.

    """
    return layout_tree(tree, viewport_width)

