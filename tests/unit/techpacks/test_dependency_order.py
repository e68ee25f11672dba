from __future__ import annotations

import pytest

from sdd.core.exceptions import DependencyCycle, UnknownDependency
from sdd.core.techpacks import build_dependency_graph, dependency_order, kahn_order

pytestmark = pytest.mark.fast


def test_independent_components_are_alphabetical() -> None:
    assert dependency_order({"db": [], "api": []}) == ["api", "db"]


def test_dependency_comes_first() -> None:
    assert dependency_order({"api": ["db"], "db": []}) == ["db", "api"]


def test_two_node_cycle() -> None:
    with pytest.raises(DependencyCycle) as exc_info:
        dependency_order({"a": ["b"], "b": ["a"]})
    assert exc_info.value.remaining == ["a", "b"]
    assert "a, b" in str(exc_info.value)


def test_cycle_remaining_includes_blocked_nodes_in_declaration_order() -> None:
    with pytest.raises(DependencyCycle) as exc_info:
        dependency_order({"web": ["b"], "a": ["b"], "b": ["a"], "solo": []})
    # "web" is not on the cycle but can never become ready.
    assert exc_info.value.remaining == ["web", "a", "b"]


def test_self_dependency_is_a_cycle() -> None:
    with pytest.raises(DependencyCycle):
        dependency_order({"a": ["a"]})


def test_unknown_dependency_reported_before_ordering() -> None:
    with pytest.raises(UnknownDependency) as exc_info:
        dependency_order({"api": ["cache"], "a": ["b"], "b": ["a"]})
    assert exc_info.value.component == "api"
    assert exc_info.value.dependency == "cache"
    assert str(exc_info.value) == 'Component "api" depends on unknown component "cache"'


def test_diamond() -> None:
    graph = {"app": ["api", "web"], "api": ["db"], "web": ["db"], "db": []}
    assert dependency_order(graph) == ["db", "api", "web", "app"]


def test_newly_ready_node_is_inserted_in_sorted_position() -> None:
    # After "b" is emitted, "a" becomes ready and must jump ahead of "c".
    assert dependency_order({"b": [], "c": [], "a": ["b"]}) == ["b", "a", "c"]


def test_every_component_follows_its_transitive_dependencies() -> None:
    graph = {
        "frontend": ["api", "contracts"],
        "api": ["db", "contracts"],
        "worker": ["db", "queue"],
        "contracts": [],
        "db": [],
        "queue": [],
        "e2e": ["frontend", "worker"],
    }
    order = dependency_order(graph)
    assert sorted(order) == sorted(graph)
    position = {name: i for i, name in enumerate(order)}

    def ancestors(name: str) -> set:
        seen: set = set()
        stack = list(graph[name])
        while stack:
            dep = stack.pop()
            if dep not in seen:
                seen.add(dep)
                stack.extend(graph[dep])
        return seen

    for name in graph:
        assert all(position[dep] < position[name] for dep in ancestors(name))


def test_order_is_independent_of_declaration_order() -> None:
    graph = {"c": ["a"], "b": ["a"], "a": [], "d": ["b", "c"]}
    reordered = dict(reversed(list(graph.items())))
    first = dependency_order(graph)
    assert first == dependency_order(graph)
    assert first == dependency_order(reordered)
    assert first == ["a", "b", "c", "d"]


def test_build_dependency_graph_records_unknown_edges() -> None:
    graph = build_dependency_graph({"api": ["db", "cache"], "db": []})
    assert graph.nodes["api"].in_degree == 1
    assert graph.nodes["db"].dependents == ("api",)
    assert graph.unknown == (("api", "cache"),)


def test_kahn_order_does_not_mutate_graph() -> None:
    graph = build_dependency_graph({"api": ["db"], "db": []})
    result = kahn_order(graph)
    assert result.order == ["db", "api"]
    assert result.remaining == []
    assert graph.nodes["api"].in_degree == 1


def test_empty_components() -> None:
    assert dependency_order({}) == []
