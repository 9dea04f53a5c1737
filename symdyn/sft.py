"""Shifts of finite type given by finite lists of forbidden words."""

from __future__ import annotations

import math
from collections.abc import Iterable
from typing import NamedTuple

import numpy as np

from symdyn.block_code import BlockCode
from symdyn.graph import UnweightedMatrixGraph
from symdyn.graph_algorithms import is_primitive, strongly_connected_components
from symdyn.linalg import perron_frobenius_eigen
from symdyn.sofic import SoficShift
from symdyn.words import Word, generate_all_words, generate_full_length_forbidden_words


class HigherBlockShift(NamedTuple):
    """Presentations of a higher block shift and the codes between them."""

    edge_shift: UnweightedMatrixGraph
    higher_block_shift: UnweightedMatrixGraph
    block_code: BlockCode
    inverse_block_code: BlockCode


def _log(value: float) -> float:
    if value > 0:
        return math.log(value)
    if value == 0:
        return -math.inf
    return math.nan


class SFT(SoficShift):
    """A shift of finite type over ``alphabet`` avoiding ``forbidden_words``.

    Forbidden words may have different lengths; shorter ones are extended with
    every combination of symbols when a presentation is built.
    """

    def __init__(
        self,
        alphabet: Iterable[int],
        forbidden_words: Iterable[Iterable[int]] = (),
    ) -> None:
        self.alphabet = tuple(alphabet)
        self.forbidden_words: tuple[Word, ...] = tuple(tuple(w) for w in forbidden_words)
        max_length = max([2, *(len(word) for word in self.forbidden_words)])
        self._m_step = max_length - 1
        graph = self.nth_higher_block_shift(self._m_step).edge_shift
        super().__init__(self.alphabet, graph, right_resolving=False, irreducible=True)

    @property
    def m_step(self) -> int:
        """The memory of the shift: one less than the longest forbidden word."""
        return self._m_step

    def nth_higher_block_shift(self, n: int) -> HigherBlockShift:
        """Build the presentation whose nodes are the allowed words of length ``n``.

        Two nodes are joined when they overlap in ``n - 1`` symbols and the
        word of length ``n + 1`` they span is not forbidden.
        """
        if n < self._m_step:
            raise ValueError(f"Block length {n} is smaller than the memory {self._m_step}")
        if not self.alphabet:
            raise ValueError("The alphabet must not be empty")
        forbidden = set(
            generate_full_length_forbidden_words(self.forbidden_words, self.alphabet, n + 1)
        )
        words = sorted(generate_all_words(self.alphabet, n))
        edge_shift = UnweightedMatrixGraph(len(words), words)
        higher = UnweightedMatrixGraph(len(words), words)
        block_code: dict[Word, int] = {}
        inverse_block_code: dict[Word, int] = {}

        for i, first in enumerate(words):
            for j, second in enumerate(words):
                if first[1:] != second[:-1]:
                    continue
                block = first + second[-1:]
                if block in forbidden:
                    continue
                block_code[block] = i
                inverse_block_code[(i,)] = block[0]
                edge_shift.add_edge(i, j, 1, (first[0],))
                higher.add_edge(i, j, 1, block)

        return HigherBlockShift(
            edge_shift,
            higher,
            BlockCode.from_mapping(block_code, 0, n),
            BlockCode.from_mapping(inverse_block_code, 0, 0),
        )

    def entropy(self) -> float:
        """Return the topological entropy, the log of the Perron eigenvalue."""
        adjacency = np.asarray(self._edge_shift.adjacency_matrix, dtype=float)
        _, value = perron_frobenius_eigen(adjacency)
        return _log(value)

    def is_transitive(self) -> bool:
        """Return whether the presentation is strongly connected."""
        return strongly_connected_components(self._edge_shift).count == 1

    def is_mixing(self) -> bool:
        """Return whether the presentation is primitive."""
        return is_primitive(self._edge_shift)

    def __repr__(self) -> str:
        return f"SFT(alphabet={self.alphabet!r}, forbidden_words={self.forbidden_words!r})"


def sft_factor_map(shift: SoficShift) -> tuple[SFT, BlockCode]:
    """Return the edge shift of a presentation and the code reading edge labels.

    The SFT's symbols are edge indices in edge order; two edges may follow
    each other when the first ends where the second starts.
    """
    edges = shift.edge_shift.edges()
    if not edges:
        raise ValueError("The presentation has no edges")
    mapping: dict[Word, int] = {}
    for index, edge in enumerate(edges):
        if len(edge.label) != 1:
            raise ValueError(f"Edge {edge.source}->{edge.dest} needs a one-symbol label")
        mapping[(index,)] = edge.label[0]
    forbidden = [
        (i, j)
        for i, first in enumerate(edges)
        for j, second in enumerate(edges)
        if first.dest != second.source
    ]
    return SFT(range(len(edges)), forbidden), BlockCode.from_mapping(mapping, 0, 0)


def map_sofic_shift(code: BlockCode, shift: SoficShift) -> SoficShift:
    """Return the image of a sofic shift under ``code``."""
    sft, factor = sft_factor_map(shift)
    return factor.compose(code).map_sft(sft)