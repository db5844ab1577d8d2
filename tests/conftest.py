"""Pytest configuration and fixtures."""

from pathlib import Path

import pytest
import yaml

from plasmadeps.inventory.graph import DependencyGraph

CLUSTER = "platform__foundation__cluster"
NETWORK = "platform__foundation__network"
STORAGE = "platform__foundation__storage"
MONITORING = "platform__observability__monitoring"
DASHBOARD = "platform__observability__dashboard"

SOURCE_DEPENDS_ON = {
    DASHBOARD: [MONITORING],
    MONITORING: [CLUSTER, STORAGE],
    CLUSTER: [NETWORK, STORAGE],
    STORAGE: [NETWORK],
    NETWORK: [],
}


def write_role(source: Path, mrn: str) -> Path:
    """Create a role directory with its meta/plasma.yaml under `source`."""
    namespace, collection, role = mrn.split("__")
    role_dir = source / namespace / collection / "roles" / role
    (role_dir / "meta").mkdir(parents=True, exist_ok=True)
    (role_dir / "meta" / "plasma.yaml").write_text("plasma:\n  type: role\n", encoding="utf-8")
    (role_dir / "tasks").mkdir(exist_ok=True)
    (role_dir / "tasks" / "main.yaml").write_text("---\n", encoding="utf-8")
    return role_dir


@pytest.fixture
def abcd_graph() -> DependencyGraph:
    """A -> B, C; B -> D."""
    return DependencyGraph.from_depends_on({"A": ["B", "C"], "B": ["D"], "C": [], "D": []})


@pytest.fixture
def example_graph() -> DependencyGraph:
    """x__y__a -> b, c; b -> d."""
    return DependencyGraph.from_depends_on(
        {"x__y__a": ["x__y__b", "x__y__c"], "x__y__b": ["x__y__d"], "x__y__c": [], "x__y__d": []}
    )


@pytest.fixture
def source_graph() -> DependencyGraph:
    return DependencyGraph.from_depends_on(SOURCE_DEPENDS_ON)


@pytest.fixture
def source_tree(tmp_path: Path) -> Path:
    """Resources source dir with roles and an inventory snapshot."""
    source = tmp_path / "src"
    source.mkdir()
    for mrn in SOURCE_DEPENDS_ON:
        write_role(source, mrn)
    (source / "inventory.yaml").write_text(
        yaml.safe_dump({"depends_on": SOURCE_DEPENDS_ON}, sort_keys=False),
        encoding="utf-8",
    )
    return source
