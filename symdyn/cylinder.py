"""Cylinder sets: words with wildcards placed at fixed coordinates."""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from dataclasses import dataclass
from functools import lru_cache
from typing import Iterable, Optional

from symdyn.sofic import SoficShift

WILDCARD = None
"""The symbol that stands for any symbol of the alphabet."""

Symbol = Optional[int]


@dataclass(frozen=True)
class CylinderSet:
    """Symbols fixed at coordinates ``start`` to ``end``; ``WILDCARD`` leaves one free.

    Every coordinate outside the range is free as well. The default cylinder
    set fixes nothing.
    """

    representation: tuple[Symbol, ...] = ()
    start: int = 0
    end: int = -1

    def __post_init__(self) -> None:
        representation = tuple(self.representation)
        object.__setattr__(self, "representation", representation)
        if len(representation) != self.end - self.start + 1:
            raise ValueError("Cylinder set representation size mismatch")

    @classmethod
    def from_positions(
        cls, fixed_positions: Iterable[int], symbols: Iterable[int]
    ) -> "CylinderSet":
        """Build a cylinder set fixing ``symbols`` at ``fixed_positions``."""
        positions = list(fixed_positions)
        values = list(symbols)
        if not positions:
            raise ValueError("At least one position must be fixed")
        if len(positions) != len(values):
            raise ValueError("Every fixed position needs exactly one symbol")
        start, end = min(positions), max(positions)
        representation: list[Symbol] = [WILDCARD] * (end - start + 1)
        for position, symbol in zip(positions, values):
            representation[position - start] = symbol
        return cls(tuple(representation), start, end)

    def __getitem__(self, index: int) -> Symbol:
        if index < self.start or index > self.end:
            return WILDCARD
        return self.representation[index - self.start]

    @property
    def range(self) -> tuple[int, int]:
        """The first and last coordinate of the representation."""
        return self.start, self.end

    def intersection(self, other: "CylinderSet") -> "CylinderSet":
        """Return the coordinates on which both sets agree, trimmed to the agreeing span."""
        first, second = synchronize_representation(self, other)
        matches = [
            i for i in range(first.start, first.end + 1) if first[i] == second[i]
        ]
        if not matches:
            return CylinderSet()
        low, high = matches[0], matches[-1]
        representation = tuple(
            first[i] if first[i] == second[i] else WILDCARD
            for i in range(low, high + 1)
        )
        return CylinderSet(representation, low, high)

    def divide_into_disjoint(self) -> list["CylinderSet"]:
        """Split into the maximal runs of fixed symbols."""
        pieces: list[CylinderSet] = []
        run: list[int] = []
        run_start = self.start
        for i in range(self.start, self.end + 2):
            symbol = self[i]
            if symbol is not WILDCARD:
                if not run:
                    run_start = i
                run.append(symbol)
            elif run:
                pieces.append(CylinderSet(tuple(run), run_start, i - 1))
                run = []
        return pieces

    def is_subset_of(self, shift: SoficShift) -> bool:
        """Return whether some node of the presentation reads every word of this set.

        Each wildcard must be matchable by every symbol of the alphabet.
        """
        graph = shift.edge_shift
        alphabet = shift.alphabet
        word = self.representation
        outgoing = [graph.edges_from(node) for node in range(len(graph))]

        @lru_cache(maxsize=None)
        def accepts(node: int, position: int) -> bool:
            if position >= len(word):
                return True
            symbol = word[position]
            wanted = alphabet if symbol is WILDCARD else (symbol,)
            return all(
                any(
                    edge.label[:1] == (s,) and accepts(edge.dest, position + 1)
                    for edge in outgoing[node]
                )
                for s in wanted
            )

        return any(accepts(node, 0) for node in range(len(graph)))


def synchronize_representation(
    cs1: CylinderSet, cs2: CylinderSet
) -> tuple[CylinderSet, CylinderSet]:
    """Return both sets rewritten over the union of their coordinate ranges."""
    start = min(cs1.start, cs2.start)
    end = max(cs1.end, cs2.end)
    coordinates = range(start, end + 1)
    return (
        CylinderSet(tuple(cs1[i] for i in coordinates), start, end),
        CylinderSet(tuple(cs2[i] for i in coordinates), start, end),
    )


class Distance(ABC):
    """Bounds on the distance between points of two cylinder sets of a full shift."""

    @abstractmethod
    def _bound(self, cs1: CylinderSet, cs2: CylinderSet) -> tuple[float, float]:
        """Bound the distance for two sets over the same range."""

    def bound(self, cs1: CylinderSet, cs2: CylinderSet) -> tuple[float, float]:
        """Return a lower and an upper bound on the distance."""
        first, second = synchronize_representation(cs1, cs2)
        return self._bound(first, second)


class HammingDistance(Distance):
    """The number of coordinates at which two points differ."""

    def _bound(self, cs1: CylinderSet, cs2: CylinderSet) -> tuple[float, float]:
        lower = float(
            sum(
                1
                for i in range(cs1.start, cs1.end + 1)
                if cs1[i] is not WILDCARD
                and cs2[i] is not WILDCARD
                and cs1[i] != cs2[i]
            )
        )
        return lower, math.inf


class PadicDistance(Distance):
    """The sum of ``2 ** -|i|`` over the coordinates ``i`` at which two points differ."""

    def _bound(self, cs1: CylinderSet, cs2: CylinderSet) -> tuple[float, float]:
        lower = 0.0
        upper = 0.0
        for i in range(cs1.start, cs1.end + 1):
            weight = 2.0 ** -abs(i)
            if cs1[i] is WILDCARD or cs2[i] is WILDCARD:
                upper += weight
            elif cs1[i] != cs2[i]:
                upper += weight
                lower += weight
        upper += 2.0 ** -abs(cs1.start)
        upper += 2.0 ** -abs(cs1.end)
        return lower, upper