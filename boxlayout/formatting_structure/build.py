"""Turn box records from the exchange form into a box tree.

Two forms are accepted.

The nested form is a record for the root box, whose ``children`` are
records::

    {"id": "root", "style": {"display": "flex"}, "children": [
        {"id": "a", "intrinsicContentSize": [100, 20]}]}

The flat form lists all the records and gives children as ids::

    {"root": "root", "boxes": [
        {"id": "root", "style": "display: flex", "children": ["a"]},
        {"id": "a", "intrinsicContentSize": {"width": 100, "height": 20}}]}

Both can be wrapped in a document giving the viewport width, the nested form
in its ``tree`` key::

    {"viewportWidth": 800, "tree": {"id": "root"}}

"""

import json
from collections.abc import Mapping

from ..errors import InvalidTreeData, MalformedTree
from ..logger import LOGGER
from . import boxes

RECORD_KEYS = {
    'id', 'style', 'children', 'intrinsicContentSize',
    'intrinsic_content_size'}


def get_intrinsic_content_size(record):
    """Get the ``(width, height)`` intrinsic content size of a record."""
    size = record.get(
        'intrinsicContentSize', record.get('intrinsic_content_size'))
    if size is None:
        return None
    if isinstance(size, Mapping):
        if set(size) != {'width', 'height'}:
            raise InvalidTreeData(
                f'{record["id"]}: intrinsic content size needs width and '
                'height')
        return size['width'], size['height']
    if isinstance(size, (list, tuple)) and len(size) == 2:
        return tuple(size)
    raise InvalidTreeData(
        f'{record["id"]}: invalid intrinsic content size {size!r}')


def check_record(record):
    """Check the shape of a box record and return its id."""
    if not isinstance(record, Mapping):
        raise InvalidTreeData(f'box record {record!r} is not an object')
    if 'id' not in record:
        raise InvalidTreeData(f'box record {record!r} has no id')
    box_id = record['id']
    if isinstance(box_id, bool) or not isinstance(box_id, (str, int)):
        raise InvalidTreeData(f'invalid box id {box_id!r}')
    if not isinstance(record.get('children', []), list):
        raise InvalidTreeData(f'{box_id}: children must be a list')
    for key in set(record) - RECORD_KEYS:
        LOGGER.warning('Ignored `%s` in box record %s.', key, box_id)
    return str(box_id)


def record_to_box(record, box_id, children):
    return boxes.Box(
        box_id, record.get('style'), children,
        get_intrinsic_content_size(record))


def nested_record_to_box(record, seen_ids):
    """Convert a nested record and its children into a box with children."""
    box_id = check_record(record)
    if box_id in seen_ids:
        raise MalformedTree(box_id, 'duplicate box id')
    seen_ids.add(box_id)
    children = [
        nested_record_to_box(child, seen_ids)
        for child in record.get('children', [])]
    return record_to_box(record, box_id, children)


def flat_records_to_box(root_id, records):
    """Link flat records referencing their children by id."""
    by_id = {}
    for record in records:
        box_id = check_record(record)
        if box_id in by_id:
            raise MalformedTree(box_id, 'duplicate box id')
        by_id[box_id] = record

    root_id = str(root_id)
    if root_id not in by_id:
        raise MalformedTree(root_id, 'root box does not exist')

    parents = {}
    built = {}
    ancestors = []

    def build(box_id):
        if box_id in ancestors:
            raise MalformedTree(box_id, 'box is its own ancestor')
        record = by_id[box_id]
        ancestors.append(box_id)
        children = []
        for child_id in record.get('children', []):
            if isinstance(child_id, bool) or not isinstance(
                    child_id, (str, int)):
                raise InvalidTreeData(
                    f'{box_id}: child {child_id!r} is not a box id')
            child_id = str(child_id)
            if child_id not in by_id:
                raise MalformedTree(
                    box_id, f'child {child_id} does not exist')
            if child_id == root_id:
                raise MalformedTree(child_id, 'root box has a parent')
            if child_id in parents:
                raise MalformedTree(
                    child_id, f'box is a child of both {parents[child_id]} '
                    f'and {box_id}')
            parents[child_id] = box_id
            children.append(build(child_id))
        ancestors.pop()
        built[box_id] = record_to_box(record, box_id, children)
        return built[box_id]

    root = build(root_id)
    for box_id in by_id:
        if box_id not in built:
            raise MalformedTree(box_id, 'box is not reachable from the root')
    return root


def build_document(data):
    """Build a box tree from the exchange form.

    Return a ``(tree, viewport_width)`` tuple, where ``viewport_width`` is
    ``None`` when the document does not give it.

    :raises InvalidTreeData: when the data does not describe box records,
        or when records are nested too deeply.
    :raises MalformedTree: when the records do not describe a tree.
    :raises InvalidStyleValue: when a box has an invalid style.

    """
    if not isinstance(data, Mapping):
        raise InvalidTreeData('the document is not an object')
    viewport_width = data.get('viewportWidth', data.get('viewport_width'))
    if viewport_width is not None and (
            isinstance(viewport_width, bool) or
            not isinstance(viewport_width, (int, float))):
        raise InvalidTreeData(f'invalid viewport width {viewport_width!r}')

    try:
        if 'boxes' in data:
            if 'root' not in data:
                raise InvalidTreeData('flat documents need a root id')
            if not isinstance(data['boxes'], list):
                raise InvalidTreeData('boxes must be a list')
            root = flat_records_to_box(data['root'], data['boxes'])
        elif 'tree' in data:
            root = nested_record_to_box(data['tree'], set())
        else:
            record = {
                key: value for key, value in data.items()
                if key not in ('viewportWidth', 'viewport_width')}
            root = nested_record_to_box(record, set())
    except RecursionError as exception:
        raise InvalidTreeData(
            'box records are nested too deeply') from exception
    return boxes.BoxTree(root), viewport_width


def build_tree(data):
    """Build a :class:`boxes.BoxTree` from the exchange form."""
    tree, _ = build_document(data)
    return tree


def tree_from_json(string):
    """Build a box tree and the viewport width from a JSON string."""
    try:
        data = json.loads(string)
    except (ValueError, RecursionError) as exception:
        raise InvalidTreeData(f'invalid JSON: {exception}') from exception
    return build_document(data)
