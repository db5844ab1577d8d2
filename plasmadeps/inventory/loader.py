"""Inventory snapshot loading.

The inventory builder scans the resources source tree and writes the
adjacency maps to a YAML (or JSON) snapshot; this module only reads it.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml

from ..errors import InventoryError
from .graph import DependencyGraph
from .resource import ResourceID, is_mrn

logger = logging.getLogger(__name__)


def _coerce_edges(value: Any, key: str) -> dict[ResourceID, list[ResourceID]]:
    if not isinstance(value, dict):
        raise InventoryError(f"'{key}' must be a mapping of resource to list of resources")

    edges: dict[ResourceID, list[ResourceID]] = {}
    for src, dsts in value.items():
        if not isinstance(src, str):
            continue
        if not is_mrn(src):
            raise InventoryError(f"'{key}' has invalid resource name {src!r}")
        if dsts is None:
            dsts = []
        if not isinstance(dsts, list):
            raise InventoryError(f"'{key}.{src}' must be a list of resources")
        names = [d for d in dsts if isinstance(d, str)]
        invalid = [d for d in names if not is_mrn(d)]
        if invalid:
            raise InventoryError(f"'{key}.{src}' has invalid resource name {invalid[0]!r}")
        edges[src] = names
    return edges


def parse_inventory(data: Any) -> DependencyGraph:
    """Build a DependencyGraph from a decoded snapshot document."""
    if not isinstance(data, dict) or "depends_on" not in data:
        raise InventoryError("inventory snapshot must contain a 'depends_on' mapping")

    depends_on = _coerce_edges(data["depends_on"] or {}, "depends_on")
    if data.get("required_by") is None:
        return DependencyGraph.from_depends_on(depends_on)

    required_by = _coerce_edges(data["required_by"], "required_by")
    return DependencyGraph(depends_on=depends_on, required_by=required_by)


def load_inventory(path: Path) -> DependencyGraph:
    """Read an inventory snapshot file.

    Raises:
        InventoryError: the file is missing, unreadable, or malformed.
    """
    if not path.is_file():
        raise InventoryError(f"inventory snapshot not found: {path}")

    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError, yaml.YAMLError) as e:
        raise InventoryError(f"cannot read inventory snapshot {path}: {e}") from e

    graph = parse_inventory(data)
    logger.debug(
        "loaded inventory %s: %d resources with dependencies, %d required",
        path,
        len(graph.depends_on),
        len(graph.required_by),
    )
    return graph
