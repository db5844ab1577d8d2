"""Resource inventory: identifiers, dependency graph, snapshot loading."""

from .graph import DependencyGraph, Direction, traverse
from .loader import load_inventory, parse_inventory
from .resource import Resource, ResourceID, build_resource_from_path, is_mrn, resolve, to_mrn, to_path

__all__ = [
    "DependencyGraph",
    "Direction",
    "traverse",
    "load_inventory",
    "parse_inventory",
    "Resource",
    "ResourceID",
    "build_resource_from_path",
    "is_mrn",
    "resolve",
    "to_mrn",
    "to_path",
]
