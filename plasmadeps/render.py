"""Plain-text list and tree rendering of query results."""

from __future__ import annotations

from collections.abc import Iterable

from .inventory.graph import Adjacency
from .inventory.resource import ResourceID, to_path

BRANCH = "├── "
LAST_BRANCH = "└── "
PIPE = "│   "
SPACE = "    "


def display(mrn: ResourceID, path_form: bool) -> str:
    return to_path(mrn) if path_form else mrn


def render_list(resources: Iterable[ResourceID], path_form: bool) -> list[str]:
    """One line per resource, sorted by MRN."""
    return [display(mrn, path_form) for mrn in sorted(set(resources))]


def render_tree(
    adjacency: Adjacency,
    header: str,
    start: ResourceID,
    depth_limit: int,
    path_form: bool,
) -> list[str]:
    """Render the edges below `start` as a box-drawing tree.

    Children are sorted by MRN at every level. Nodes reached at `depth_limit`
    are shown but not expanded. A node reachable from several parents is
    shown under each of them, so on a cyclic graph with branching the
    output grows exponentially with `depth_limit`; keep the depth small.
    """
    lines = [header]
    _render_subtree(adjacency, start, "", 1, depth_limit, path_form, lines)
    return lines


def _render_subtree(
    adjacency: Adjacency,
    parent: ResourceID,
    indent: str,
    level: int,
    depth_limit: int,
    path_form: bool,
    lines: list[str],
) -> None:
    children = sorted(adjacency.get(parent, ()))
    for i, node in enumerate(children):
        is_last = i == len(children) - 1
        connector = LAST_BRANCH if is_last else BRANCH
        lines.append(indent + connector + display(node, path_form))
        if level < depth_limit:
            extension = SPACE if is_last else PIPE
            _render_subtree(adjacency, node, indent + extension, level + 1, depth_limit, path_form, lines)
