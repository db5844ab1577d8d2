from __future__ import annotations

from hypothesis import given, settings
from hypothesis import strategies as st

from plasmadeps.inventory.graph import DependencyGraph, traverse
from plasmadeps.render import render_list, render_tree

from .conftest import CLUSTER, DASHBOARD, MONITORING, NETWORK, STORAGE


def _strip_tree(line: str) -> str:
    return line.lstrip("│├└─ ")


def test_list_is_sorted(abcd_graph: DependencyGraph) -> None:
    assert render_list(traverse("A", abcd_graph.depends_on, 2), path_form=False) == ["B", "C", "D"]


def test_list_path_form_sorts_by_mrn() -> None:
    # Sorted by MRN, which differs from sorting the converted paths.
    resources = {"ab__x__y", "ab0__x__y"}
    assert render_list(resources, path_form=True) == ["ab0/x/roles/y", "ab/x/roles/y"]


def test_tree_example(abcd_graph: DependencyGraph) -> None:
    assert render_tree(abcd_graph.depends_on, "A", "A", 2, path_form=False) == [
        "A",
        "├── B",
        "│   └── D",
        "└── C",
    ]


def test_tree_depth_one_shows_direct_children_only(abcd_graph: DependencyGraph) -> None:
    assert render_tree(abcd_graph.depends_on, "A", "A", 1, path_form=False) == [
        "A",
        "├── B",
        "└── C",
    ]


def test_tree_closed_branch_indent() -> None:
    graph = DependencyGraph.from_depends_on({"A": ["B", "C"], "C": ["D", "E"], "D": ["F"]})
    assert render_tree(graph.depends_on, "A", "A", 3, path_form=False) == [
        "A",
        "├── B",
        "└── C",
        "    ├── D",
        "    │   └── F",
        "    └── E",
    ]


def test_tree_repeats_shared_children(source_graph: DependencyGraph) -> None:
    lines = render_tree(source_graph.depends_on, "header", MONITORING, 3, path_form=False)
    assert lines == [
        "header",
        f"├── {CLUSTER}",
        f"│   ├── {NETWORK}",
        f"│   └── {STORAGE}",
        f"│       └── {NETWORK}",
        f"└── {STORAGE}",
        f"    └── {NETWORK}",
    ]


def test_tree_path_form_converts_display_only(source_graph: DependencyGraph) -> None:
    lines = render_tree(source_graph.depends_on, "platform/observability/roles/dashboard", DASHBOARD, 2, path_form=True)
    assert lines == [
        "platform/observability/roles/dashboard",
        "└── platform/observability/roles/monitoring",
        "    ├── platform/foundation/roles/cluster",
        "    └── platform/foundation/roles/storage",
    ]


def test_tree_cycle_is_bounded_by_depth() -> None:
    graph = DependencyGraph.from_depends_on({"A": ["B"], "B": ["A"]})
    assert render_tree(graph.depends_on, "A", "A", 3, path_form=False) == [
        "A",
        "└── B",
        "    └── A",
        "        └── B",
    ]


def test_tree_without_children_is_header_only() -> None:
    assert render_tree({}, "A", "A", 3, path_form=False) == ["A"]


_node = st.sampled_from(["n__n__a", "n__n__b", "n__n__c", "n__n__d", "n__n__e", "n__n__f"])


@st.composite
def _acyclic_edges(draw) -> dict[str, list[str]]:
    # Edges only point to later nodes in a fixed order.
    order = ["n__n__a", "n__n__b", "n__n__c", "n__n__d", "n__n__e", "n__n__f"]
    edges: dict[str, list[str]] = {}
    for i, node in enumerate(order):
        later = order[i + 1 :]
        if later:
            edges[node] = draw(st.lists(st.sampled_from(later), max_size=3))
    return edges


@given(edges=_acyclic_edges(), start=_node, depth=st.integers(min_value=1, max_value=5))
@settings(max_examples=100)
def test_tree_nodes_match_traversal_on_acyclic_graphs(edges: dict[str, list[str]], start: str, depth: int) -> None:
    adjacency = DependencyGraph.from_depends_on(edges).depends_on
    lines = render_tree(adjacency, start, start, depth, path_form=False)
    assert {_strip_tree(line) for line in lines[1:]} == traverse(start, adjacency, depth)


@given(edges=_acyclic_edges(), start=_node)
@settings(max_examples=50)
def test_output_ignores_insertion_order(edges: dict[str, list[str]], start: str) -> None:
    forward = DependencyGraph.from_depends_on(edges).depends_on
    backward = DependencyGraph.from_depends_on({k: list(reversed(v)) for k, v in reversed(edges.items())}).depends_on
    assert render_tree(forward, start, start, 5, False) == render_tree(backward, start, start, 5, False)
    assert render_list(traverse(start, forward, 5), True) == render_list(traverse(start, backward, 5), True)
