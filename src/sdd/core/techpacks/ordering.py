"""Deterministic dependency ordering of component types (Kahn's algorithm).

Scaffolding runs component types in this order, so the same manifest must
always yield the same order: the ready queue is kept sorted, the smallest
ready name is taken first, and each node's dependents are visited in sorted
order.
"""
from __future__ import annotations

import bisect
from dataclasses import dataclass
from typing import Dict, List, Mapping, NamedTuple, Sequence, Tuple

from sdd.core.exceptions import DependencyCycle, UnknownDependency

from .manifest import ComponentType


@dataclass(frozen=True)
class GraphNode:
    in_degree: int
    dependents: Tuple[str, ...]


@dataclass(frozen=True)
class DependencyGraph:
    """Component-type graph with edges dependency -> dependent.

    ``unknown`` lists ``(component, dependency)`` pairs whose target is not a
    declared component type; those edges are left out of ``nodes``.
    """

    nodes: Dict[str, GraphNode]
    unknown: Tuple[Tuple[str, str], ...] = ()


class KahnResult(NamedTuple):
    order: List[str]
    remaining: List[str]


def depends_on_map(components: Mapping[str, ComponentType]) -> Dict[str, List[str]]:
    """Project typed components to ``{name: depends_on}``."""
    return {name: list(comp.depends_on) for name, comp in components.items()}


def build_dependency_graph(depends_on: Mapping[str, Sequence[str]]) -> DependencyGraph:
    """Build the in-degree / dependents structure for ``depends_on``."""
    in_degree: Dict[str, int] = {name: 0 for name in depends_on}
    dependents: Dict[str, List[str]] = {name: [] for name in depends_on}
    unknown: List[Tuple[str, str]] = []

    for name, deps in depends_on.items():
        for dep in deps:
            if dep not in in_degree:
                unknown.append((name, dep))
                continue
            dependents[dep].append(name)
            in_degree[name] += 1

    nodes = {
        name: GraphNode(in_degree=in_degree[name], dependents=tuple(dependents[name]))
        for name in depends_on
    }
    return DependencyGraph(nodes=nodes, unknown=tuple(unknown))


def kahn_order(graph: DependencyGraph) -> KahnResult:
    """Run Kahn's algorithm with the sorted-queue tie-break.

    ``remaining`` holds every node not emitted (declaration order); it is
    non-empty exactly when the graph has a cycle.
    """
    in_degree = {name: node.in_degree for name, node in graph.nodes.items()}
    queue = sorted(name for name, degree in in_degree.items() if degree == 0)
    order: List[str] = []

    while queue:
        current = queue.pop(0)
        order.append(current)
        for dependent in sorted(graph.nodes[current].dependents):
            in_degree[dependent] -= 1
            if in_degree[dependent] == 0:
                # First position whose value exceeds ``dependent``, else append.
                queue.insert(bisect.bisect_right(queue, dependent), dependent)

    emitted = set(order)
    remaining = [name for name in graph.nodes if name not in emitted]
    return KahnResult(order, remaining)


def dependency_order(depends_on: Mapping[str, Sequence[str]]) -> List[str]:
    """Return every component type ordered after all of its dependencies.

    Raises:
        UnknownDependency: a ``depends_on`` entry names an undeclared component
            (checked before ordering)
        DependencyCycle: the graph is cyclic; ``remaining`` lists the
            components left out of the order
    """
    graph = build_dependency_graph(depends_on)
    if graph.unknown:
        component, dependency = graph.unknown[0]
        raise UnknownDependency(component, dependency)

    result = kahn_order(graph)
    if result.remaining:
        raise DependencyCycle(result.remaining)
    return result.order


__all__ = [
    "GraphNode",
    "DependencyGraph",
    "KahnResult",
    "depends_on_map",
    "build_dependency_graph",
    "kahn_order",
    "dependency_order",
]
