"""Per-source defaults read from ``.plasmadeps.toml``."""

from __future__ import annotations

import tomllib
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from .errors import ConfigError

CONFIG_FILE = ".plasmadeps.toml"

DEFAULT_DEPTH = 99
DEFAULT_INVENTORY = "inventory.yaml"


@dataclass(frozen=True)
class DependenciesConfig:
    depth: int = DEFAULT_DEPTH
    inventory: str = DEFAULT_INVENTORY
    mrn: bool = False
    tree: bool = False

    def inventory_path(self, source: Path) -> Path:
        path = Path(self.inventory)
        return path if path.is_absolute() else source / path


def _expect(data: dict[str, Any], key: str, kind: type, default: Any) -> Any:
    if key not in data:
        return default
    value = data[key]
    # bool is an int subclass; keep `depth = true` out.
    if not isinstance(value, kind) or (kind is int and isinstance(value, bool)):
        raise ConfigError(f"{CONFIG_FILE}: '{key}' must be of type {kind.__name__}")
    return value


def load_config(source: Path) -> DependenciesConfig:
    """Load config from `source`, falling back to defaults when there is none.

    Unknown keys are ignored.
    """
    path = source / CONFIG_FILE
    if not path.is_file():
        return DependenciesConfig()

    try:
        data = tomllib.loads(path.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError, tomllib.TOMLDecodeError) as e:
        raise ConfigError(f"{path}: {e}") from e

    inventory = str(_expect(data, "inventory", str, DEFAULT_INVENTORY)).strip() or DEFAULT_INVENTORY
    return DependenciesConfig(
        depth=_expect(data, "depth", int, DEFAULT_DEPTH),
        inventory=inventory,
        mrn=_expect(data, "mrn", bool, False),
        tree=_expect(data, "tree", bool, False),
    )
