"""Shift spaces and sofic shifts given by labelled graph presentations."""

from __future__ import annotations

import math
from typing import Iterable, Optional

import numpy as np

from symdyn.graph import UnweightedMatrixGraph
from symdyn.graph_algorithms import sccs_as_matrices
from symdyn.linalg import perron_frobenius_eigen


def _log(value: float) -> float:
    if value > 0:
        return math.log(value)
    if value == 0:
        return -math.inf
    return math.nan


class ShiftSpace:
    """A shift space over a finite alphabet of integer symbols."""

    def __init__(self, alphabet: Iterable[int] = ()) -> None:
        self.alphabet: tuple[int, ...] = tuple(alphabet)


class SoficShift(ShiftSpace):
    """A sofic shift presented by a graph whose edges carry one-symbol labels.

    ``right_resolving`` and ``irreducible`` describe the presentation; the
    caller is responsible for them being true.
    """

    def __init__(
        self,
        alphabet: Iterable[int] = (),
        edge_shift: Optional[UnweightedMatrixGraph] = None,
        *,
        right_resolving: bool = False,
        irreducible: bool = False,
    ) -> None:
        super().__init__(alphabet)
        if edge_shift is None:
            edge_shift = UnweightedMatrixGraph()
        if not isinstance(edge_shift, UnweightedMatrixGraph):
            raise TypeError("edge_shift must be an UnweightedMatrixGraph")
        self._edge_shift = edge_shift.copy()
        self.right_resolving = right_resolving
        self.irreducible = irreducible

    @property
    def edge_shift(self) -> UnweightedMatrixGraph:
        """A copy of the presentation graph."""
        return self._edge_shift.copy()

    def entropy(self) -> float:
        """Return the topological entropy of a right-resolving presentation."""
        if not self.right_resolving:
            raise TypeError("Entropy needs a right-resolving presentation")
        if self.irreducible:
            adjacency = np.asarray(self._edge_shift.adjacency_matrix, dtype=float)
            _, value = perron_frobenius_eigen(adjacency)
            return _log(value)
        values = [
            perron_frobenius_eigen(block.astype(float))[1]
            for block in sccs_as_matrices(self._edge_shift)
        ]
        if not values:
            raise ValueError("Entropy of an empty presentation is undefined")
        return _log(max(values))

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(alphabet={self.alphabet!r}, "
            f"nodes={len(self._edge_shift)}, right_resolving={self.right_resolving}, "
            f"irreducible={self.irreducible})"
        )


def _check_compatible(ss1: SoficShift, ss2: SoficShift) -> None:
    if ss1.right_resolving != ss2.right_resolving:
        raise TypeError("Both sofic shifts must agree on being right-resolving")


def sofic_shift_union(ss1: SoficShift, ss2: SoficShift) -> SoficShift:
    """Return the union, presented by the disjoint union of both graphs."""
    _check_compatible(ss1, ss2)
    graph1 = ss1.edge_shift
    graph2 = ss2.edge_shift
    offset = len(graph1)
    result = UnweightedMatrixGraph(offset + len(graph2))
    for edge in graph1.edges():
        result.add_edge(edge.source, edge.dest, 1, edge.label)
    for edge in graph2.edges():
        result.add_edge(edge.source + offset, edge.dest + offset, 1, edge.label)
    alphabet = sorted(set(ss1.alphabet) | set(ss2.alphabet))
    return SoficShift(
        alphabet, result, right_resolving=ss1.right_resolving, irreducible=False
    )


def sofic_shift_intersection(ss1: SoficShift, ss2: SoficShift) -> SoficShift:
    """Return the intersection, presented by the label product of both graphs."""
    _check_compatible(ss1, ss2)
    graph1 = ss1.edge_shift
    graph2 = ss2.edge_shift
    width = len(graph2)
    result = UnweightedMatrixGraph(len(graph1) * width)
    edges2 = graph2.edges()
    for edge1 in graph1.edges():
        for edge2 in edges2:
            if edge1.label != edge2.label:
                continue
            result.add_edge(
                edge1.source * width + edge2.source,
                edge1.dest * width + edge2.dest,
                1,
                edge1.label,
            )
    return SoficShift(
        ss1.alphabet, result, right_resolving=ss1.right_resolving, irreducible=False
    )