"""Strongly connected components, periods and primitivity of graphs."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterator, Optional

import numpy as np

from symdyn.graph import Graph, MatrixGraph


@dataclass(frozen=True)
class StronglyConnectedComponents:
    """The component index of every node and the number of components."""

    components: tuple[int, ...]
    count: int

    def __iter__(self) -> Iterator:
        yield self.components
        yield self.count


def strongly_connected_components(graph: Graph) -> StronglyConnectedComponents:
    """Find strongly connected components with Tarjan's algorithm.

    Components are numbered in the order in which they are completed.
    """
    size = len(graph)
    neighbors = [graph.neighbors(v) for v in range(size)]
    index: list[Optional[int]] = [None] * size
    lowlink = [0] * size
    on_stack = [False] * size
    components = [0] * size
    scc_stack: list[int] = []
    next_index = 0
    count = 0

    for root in range(size):
        if index[root] is not None:
            continue
        work: list[tuple[int, Iterator[int], Optional[int]]] = [
            (root, iter(neighbors[root]), None)
        ]
        while work:
            v, successors, child = work.pop()
            if child is None:
                index[v] = lowlink[v] = next_index
                next_index += 1
                scc_stack.append(v)
                on_stack[v] = True
            else:
                lowlink[v] = min(lowlink[v], lowlink[child])

            for w in successors:
                if index[w] is None:
                    work.append((v, successors, w))
                    work.append((w, iter(neighbors[w]), None))
                    break
                if on_stack[w]:
                    lowlink[v] = min(lowlink[v], index[w])
            else:
                if lowlink[v] == index[v]:
                    while True:
                        w = scc_stack.pop()
                        on_stack[w] = False
                        components[w] = count
                        if w == v:
                            break
                    count += 1

    return StronglyConnectedComponents(tuple(components), count)


def _period(graph: Graph) -> tuple[StronglyConnectedComponents, int]:
    sccs = strongly_connected_components(graph)
    gcd = 0
    for edge in graph.edges():
        if sccs.components[edge.source] != sccs.components[edge.dest]:
            continue
        gcd = math.gcd(gcd, edge.dest - edge.source - 1)
        if gcd == 1:
            break
    return sccs, gcd


def period(graph: Graph) -> int:
    """Return the period of ``graph``, or 0 if it has no cycles."""
    return _period(graph)[1]


def is_aperiodic(graph: Graph) -> bool:
    """Return whether the period of ``graph`` is 1."""
    return period(graph) == 1


def is_primitive(graph: Graph) -> bool:
    """Return whether ``graph`` is strongly connected and aperiodic."""
    sccs, gcd = _period(graph)
    return sccs.count == 1 and gcd == 1


def sccs_as_matrices(graph: MatrixGraph) -> list[np.ndarray]:
    """Return the adjacency matrix restricted to each strongly connected component.

    Matrices come in component order; nodes keep their relative order.
    """
    sccs = strongly_connected_components(graph)
    adjacency = np.asarray(graph.adjacency_matrix)
    members: list[list[int]] = [[] for _ in range(sccs.count)]
    for node, component in enumerate(sccs.components):
        members[component].append(node)
    return [adjacency[np.ix_(nodes, nodes)] for nodes in members]