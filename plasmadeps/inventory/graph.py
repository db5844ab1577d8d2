"""Dependency graph of resources and depth-limited traversal."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType

from .resource import ResourceID

Adjacency = Mapping[ResourceID, tuple[ResourceID, ...]]


class Direction(Enum):
    DEPENDS_ON = "depends_on"  # resource -> what it requires
    REQUIRED_BY = "required_by"  # resource -> what requires it


def _freeze(edges: Mapping[ResourceID, Iterable[ResourceID]]) -> Adjacency:
    """Copy edges into a read-only mapping of insertion-ordered, duplicate-free tuples."""
    return MappingProxyType({src: tuple(dict.fromkeys(dsts)) for src, dsts in edges.items()})


@dataclass(frozen=True)
class DependencyGraph:
    """Forward and reverse edges between resources.

    Both mappings are snapshots; the graph is never mutated after construction.
    """

    depends_on: Adjacency = field(default_factory=lambda: MappingProxyType({}))
    required_by: Adjacency = field(default_factory=lambda: MappingProxyType({}))

    def __post_init__(self):
        object.__setattr__(self, "depends_on", _freeze(self.depends_on))
        object.__setattr__(self, "required_by", _freeze(self.required_by))

    @classmethod
    def from_depends_on(cls, edges: Mapping[ResourceID, Iterable[ResourceID]]) -> "DependencyGraph":
        """Build graph from forward edges, deriving the reverse edges."""
        reverse: dict[ResourceID, list[ResourceID]] = {}
        for src, dsts in edges.items():
            for dst in dict.fromkeys(dsts):
                reverse.setdefault(dst, []).append(src)
        return cls(depends_on=edges, required_by=reverse)

    def edges(self, direction: Direction) -> Adjacency:
        if direction is Direction.DEPENDS_ON:
            return self.depends_on
        return self.required_by

    def nodes(self) -> set[ResourceID]:
        """Every resource that appears on either side of an edge."""
        found: set[ResourceID] = set()
        for src, dsts in self.depends_on.items():
            found.add(src)
            found.update(dsts)
        for src, dsts in self.required_by.items():
            found.add(src)
            found.update(dsts)
        return found

    def reachable(self, mrn: ResourceID, direction: Direction, depth: int) -> set[ResourceID]:
        return traverse(mrn, self.edges(direction), depth)

    def get_depends_on_resources(self, mrn: ResourceID, depth: int) -> set[ResourceID]:
        """Resources `mrn` requires, directly or within `depth` hops."""
        return self.reachable(mrn, Direction.DEPENDS_ON, depth)

    def get_required_by_resources(self, mrn: ResourceID, depth: int) -> set[ResourceID]:
        """Resources requiring `mrn`, directly or within `depth` hops."""
        return self.reachable(mrn, Direction.REQUIRED_BY, depth)


def traverse(start: ResourceID, adjacency: Adjacency, depth_limit: int) -> set[ResourceID]:
    """Collect every node reachable from `start` in at most `depth_limit` hops.

    The walk is breadth-first, so each node is first met at its shortest
    distance and expanded at most once. Cycles therefore terminate. The start
    node is only included when a cycle leads back to it.

    `depth_limit` must be >= 1; callers reject anything else.
    """
    found: set[ResourceID] = set()
    expanded = {start}
    queue: deque[tuple[ResourceID, int]] = deque([(start, 0)])

    while queue:
        node, depth = queue.popleft()
        for neighbor in adjacency.get(node, ()):
            if neighbor in found:
                continue
            found.add(neighbor)
            if depth + 1 < depth_limit and neighbor not in expanded:
                expanded.add(neighbor)
                queue.append((neighbor, depth + 1))

    return found
