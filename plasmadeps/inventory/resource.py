"""Resource identifiers: machine resource names (MRN) and role paths.

An MRN is three segments joined by ``__`` (``platform__foundation__cluster``).
Its path form inserts the literal ``roles`` component before the last
segment (``platform/foundation/roles/cluster``).
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path

from ..errors import ResourceNotFound

logger = logging.getLogger(__name__)

MRN_DELIMITER = "__"
ROLES_DIR = "roles"
META_FILE = Path("meta") / "plasma.yaml"

ResourceID = str


def is_mrn(target: str) -> bool:
    """True if `target` splits on ``__`` into exactly three non-empty parts."""
    parts = target.split(MRN_DELIMITER)
    return len(parts) == 3 and all(parts)


def to_mrn(namespace: str, collection: str, role: str) -> ResourceID:
    return MRN_DELIMITER.join((namespace, collection, role))


def to_path(mrn: ResourceID) -> str:
    """Convert a valid MRN to its ``a/b/roles/c`` path form."""
    namespace, collection, role = mrn.split(MRN_DELIMITER)
    return "/".join((namespace, collection, ROLES_DIR, role))


@dataclass(frozen=True)
class Resource:
    """A role directory found under a source root."""

    mrn: ResourceID
    source_root: Path

    @property
    def name(self) -> str:
        return self.mrn.split(MRN_DELIMITER)[2]

    @property
    def path(self) -> Path:
        return self.source_root / to_path(self.mrn)

    @property
    def meta_path(self) -> Path:
        return self.path / META_FILE

    def is_valid(self) -> bool:
        return self.meta_path.is_file()


def _relative_parts(path: str, source_root: Path) -> tuple[str, ...]:
    """Split `path` into components relative to `source_root` where possible."""
    candidate = Path(path)
    root = source_root.resolve()
    absolute = candidate if candidate.is_absolute() else (Path.cwd() / candidate)
    try:
        return absolute.resolve().relative_to(root).parts
    except ValueError:
        pass
    # Not inside the source root on disk; treat it as already relative to it.
    return tuple(p for p in Path(os.path.normpath(path)).parts if p not in ("", "."))


def build_resource_from_path(path: str, source_root: Path) -> Resource | None:
    """Build a Resource from a role path, or None if it is not a known role.

    Accepts ``ns/collection/roles/role`` with optional trailing components
    (``.../tasks/main.yaml``), relative to `source_root`, to the current
    directory, or absolute.
    """
    parts = _relative_parts(path, source_root)
    if len(parts) < 4 or parts[2] != ROLES_DIR:
        logger.debug("path %s does not look like a role path", path)
        return None

    namespace, collection, _, role = parts[:4]
    if not all(segment and MRN_DELIMITER not in segment for segment in (namespace, collection, role)):
        return None

    resource = Resource(to_mrn(namespace, collection, role), source_root)
    if not resource.is_valid():
        logger.debug("role %s has no %s", resource.path, META_FILE)
        return None
    return resource


def resolve(target: str, source_root: Path) -> ResourceID:
    """Return the MRN for `target`, which is either an MRN or a role path.

    Raises:
        ResourceNotFound: `target` is not an MRN and no role exists at that path.
    """
    if is_mrn(target):
        return target

    resource = build_resource_from_path(target, source_root)
    if resource is None:
        raise ResourceNotFound(target)

    logger.debug("resolved %s to %s", target, resource.mrn)
    return resource.mrn
