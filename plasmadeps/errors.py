"""Errors raised while answering a dependencies query."""

from __future__ import annotations


class DependenciesError(Exception):
    """Base class for query failures reported to the user."""


class InvalidDepth(DependenciesError):
    def __init__(self, depth: int):
        super().__init__("depth value should not be zero" if depth == 0 else f"depth value should be positive, got {depth}")
        self.depth = depth


class ResourceNotFound(DependenciesError):
    def __init__(self, target: str):
        super().__init__(f"not valid resource {target!r}")
        self.target = target


class InventoryError(DependenciesError):
    """Inventory snapshot is missing or malformed."""


class ConfigError(DependenciesError):
    """Config file is present but unusable."""
