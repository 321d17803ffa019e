"""Errors raised while building box trees and laying them out.

Every layout error names the box it is about and the constraint that box
violates. Layout is pure and deterministic: errors are never retried.

"""


class LayoutError(ValueError):
    """Base class for errors aborting a layout pass."""
    def __init__(self, box_id, constraint):
        super().__init__(f'{box_id}: {constraint}')
        self.box_id = box_id
        self.constraint = constraint


class MalformedTree(LayoutError):
    """Cycle, shared box, duplicate id or dangling child reference."""


class InvalidStyleValue(LayoutError):
    """Negative or unparsable style value."""


class MissingContainingBlock(LayoutError):
    """Width is needed from a containing block that has none."""


class InvalidTreeData(ValueError):
    """Exchange data that does not describe box records."""
