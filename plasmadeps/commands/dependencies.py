"""Dependencies command - show what requires a resource and what it requires."""

from __future__ import annotations

import logging
from collections.abc import Callable
from pathlib import Path

from rich.console import Console

from ..config import DEFAULT_INVENTORY
from ..errors import DependenciesError, InvalidDepth
from ..inventory.graph import DependencyGraph, Direction
from ..inventory.loader import load_inventory
from ..inventory.resource import ResourceID, resolve
from ..render import display, render_list, render_tree

logger = logging.getLogger(__name__)

LineSink = Callable[[str], None]

ANCESTORS_LABEL = "Dependent resources:"
DESCENDANTS_LABEL = "Dependencies:"


def validate_depth(depth: int) -> None:
    if depth < 1:
        raise InvalidDepth(depth)


def _render_direction(
    graph: DependencyGraph,
    mrn: ResourceID,
    direction: Direction,
    depth: int,
    path_form: bool,
    tree_form: bool,
) -> list[str]:
    found = graph.reachable(mrn, direction, depth)
    if not found:
        return []
    if tree_form:
        return render_tree(graph.edges(direction), display(mrn, path_form), mrn, depth, path_form)
    return render_list(found, path_form)


def query(
    target: str,
    source_root: Path,
    depth: int,
    path_form: bool,
    tree_form: bool,
    graph: DependencyGraph,
) -> tuple[list[str], list[str]]:
    """Render ancestors and descendants of `target`.

    Returns:
        (ancestor_lines, descendant_lines); a list is empty when nothing is
        reachable in that direction.

    Raises:
        InvalidDepth: depth is not positive.
        ResourceNotFound: target is neither an MRN nor a known role path.
    """
    validate_depth(depth)
    mrn = resolve(target, source_root)

    ancestors = _render_direction(graph, mrn, Direction.REQUIRED_BY, depth, path_form, tree_form)
    descendants = _render_direction(graph, mrn, Direction.DEPENDS_ON, depth, path_form, tree_form)
    return ancestors, descendants


def run_dependencies(
    source: Path,
    target: str,
    *,
    depth: int,
    path_form: bool = True,
    tree_form: bool = False,
    inventory: Path | None = None,
    sink: LineSink | None = None,
) -> int:
    """Print the dependencies query for `target`.

    Args:
        source: Resources source directory
        target: MRN or role path
        depth: Traversal depth limit (>= 1)
        path_form: Show role paths instead of MRNs
        tree_form: Show a tree instead of a flat list
        inventory: Snapshot file (default: inventory.yaml in `source`)
        sink: Receives output lines (default: stdout)

    Returns:
        Exit code (0 = success, 1 = query failed)
    """
    console = Console(stderr=True, soft_wrap=True)
    emit = sink or print

    if not source.is_dir():
        console.print(f"{source} doesn't exist, fallback to current dir", style="yellow", markup=False)
        source = Path(".")
    else:
        console.print(f"Selected source is {source}", style="dim", markup=False)

    inventory_path = inventory or source / DEFAULT_INVENTORY

    try:
        validate_depth(depth)
        mrn = resolve(target, source)
        graph = load_inventory(inventory_path)
        ancestors, descendants = query(mrn, source, depth, path_form, tree_form, graph)
    except DependenciesError as e:
        console.print(str(e), style="bold red", markup=False)
        return 1

    logger.debug("%s: %d ancestor lines, %d descendant lines", mrn, len(ancestors), len(descendants))

    for label, lines in ((ANCESTORS_LABEL, ancestors), (DESCENDANTS_LABEL, descendants)):
        if not lines:
            continue
        emit(label)
        for line in lines:
            emit(line)

    return 0
