"""Measures of cylinder sets."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

import numpy as np

from symdyn.cylinder import CylinderSet
from symdyn.linalg import perron_frobenius_eigen
from symdyn.sft import SFT


class Measure(ABC):
    """A measure that assigns a value to every cylinder set."""

    @abstractmethod
    def cylinder_set_measure(self, cs: CylinderSet) -> float:
        """Return the measure of ``cs``."""


class MarkovMeasure(Measure):
    """A Markov measure given by a transition matrix between symbols."""

    def __init__(self, transition_matrix: Any) -> None:
        matrix = np.array(transition_matrix, dtype=float)
        if matrix.ndim != 2 or matrix.shape[0] != matrix.shape[1]:
            raise ValueError("Transition matrix must be square")
        self.transition_matrix = matrix

    def stationary_distribution(self) -> np.ndarray:
        """Return the unit Perron eigenvector of the transition matrix."""
        vector, _ = perron_frobenius_eigen(self.transition_matrix)
        return vector

    def cylinder_set_measure(self, cs: CylinderSet) -> float:
        """Sum the path weights of every run of fixed symbols in ``cs``."""
        stationary = self.stationary_distribution()
        total = 0.0
        for piece in cs.divide_into_disjoint():
            word = piece.representation
            weight = float(stationary[word[0]])
            for current, following in zip(word, word[1:]):
                weight *= float(self.transition_matrix[current, following])
            total += weight
        return total

    def compatible_with(self, sft: SFT) -> bool:
        """Return whether the matrix gives no weight to transitions ``sft`` forbids."""
        complement = np.asarray(
            sft.edge_shift.complement().adjacency_matrix, dtype=float
        )
        if complement.shape != self.transition_matrix.shape:
            raise ValueError("Transition matrix does not match the shift's presentation")
        return float(np.abs(complement * self.transition_matrix).sum()) == 0.0