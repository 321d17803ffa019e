"""Classes for the boxes of the layout tree.

A :class:`Box` has an id, a resolved :class:`boxlayout.css.Style`, ordered
children and, for leaves, an optional intrinsic content size measured by an
external collaborator (text shaping, images…). Its ``geometry`` is ``None``
until a layout pass succeeds.

A :class:`BoxTree` owns the root box. Each other box is owned by its parent:
it appears exactly once in the children of exactly one box.

See https://www.w3.org/TR/CSS21/visuren.html

"""

import collections
from math import isfinite

from ..css import parse_style
from ..css.tokens import InvalidValues
from ..errors import InvalidStyleValue, MalformedTree

#: Output of layout, relative to the containing block's content box origin.
ComputedGeometry = collections.namedtuple(
    'ComputedGeometry', ['x', 'y', 'width', 'height'])


class Box:
    """A box of the layout tree."""
    def __init__(self, box_id, style=None, children=None,
                 intrinsic_content_size=None):
        self.box_id = box_id
        try:
            self.style = parse_style(style)
        except InvalidValues as exception:
            message = exception.args[0] if exception.args else 'invalid value'
            raise InvalidStyleValue(box_id, message) from exception
        self.children = list(children or ())
        if intrinsic_content_size is not None:
            width, height = intrinsic_content_size
            for size in (width, height):
                if (isinstance(size, bool) or
                        not isinstance(size, (int, float)) or
                        not isfinite(size) or size < 0):
                    raise InvalidStyleValue(
                        box_id, 'intrinsic content size must be finite '
                        'non-negative numbers')
            intrinsic_content_size = (width, height)
        self.intrinsic_content_size = intrinsic_content_size
        self.geometry = None

    def __repr__(self):
        return f'<{type(self).__name__} {self.box_id}>'

    def descendants(self):
        """A flat generator for a box, its children and descendants."""
        stack = [self]
        while stack:
            box = stack.pop()
            yield box
            stack.extend(reversed(box.children))

    def is_absolutely_positioned(self):
        """Return whether this box is taken out of the normal flow."""
        return self.style['position'] in ('absolute', 'fixed')

    def is_relatively_positioned(self):
        return self.style['position'] == 'relative'

    def is_flex_container(self):
        return self.style['display'][1] == 'flex'

    @property
    def intrinsic_width(self):
        if self.intrinsic_content_size is None:
            return 0
        return self.intrinsic_content_size[0]

    @property
    def intrinsic_height(self):
        if self.intrinsic_content_size is None:
            return 0
        return self.intrinsic_content_size[1]


class BoxTree:
    """Ownership tree of boxes, owned by the caller through its root."""
    def __init__(self, root):
        self.root = root

    def __repr__(self):
        return f'<{type(self).__name__} {self.root!r}>'

    def __iter__(self):
        """Iterate over boxes in document order."""
        return self.root.descendants()

    def get(self, box_id):
        """Return the box whose id is ``box_id``."""
        for box in self:
            if box.box_id == box_id:
                return box
        raise KeyError(box_id)

    def validate(self):
        """Check that the boxes form a tree.

        :raises MalformedTree: when a box is its own ancestor, when a box
            appears more than once in the tree, or when two boxes share the
            same id.

        """
        if not isinstance(self.root, Box):
            raise MalformedTree(repr(self.root), 'root is not a box')
        seen_boxes = set()
        seen_ids = set()
        ancestors = set()
        # Boxes are popped twice, when entering and when leaving them.
        stack = [(self.root, False)]
        while stack:
            box, leaving = stack.pop()
            if leaving:
                ancestors.remove(box)
                continue
            if box in ancestors:
                raise MalformedTree(box.box_id, 'box is its own ancestor')
            if box in seen_boxes:
                raise MalformedTree(
                    box.box_id, 'box appears more than once in the tree')
            if box.box_id in seen_ids:
                raise MalformedTree(box.box_id, 'duplicate box id')
            seen_boxes.add(box)
            seen_ids.add(box.box_id)
            ancestors.add(box)
            stack.append((box, True))
            for child in box.children:
                if not isinstance(child, Box):
                    raise MalformedTree(
                        box.box_id, f'child {child!r} is not a box')
            stack.extend((child, False) for child in reversed(box.children))

    def geometries(self):
        """Return a dict mapping box ids to their computed geometry."""
        return {box.box_id: box.geometry for box in self}
