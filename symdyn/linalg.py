"""Dense linear algebra helpers used by the shift-space code."""

from __future__ import annotations

from typing import Any

import numpy as np


def perron_frobenius_eigen(matrix: Any) -> tuple[np.ndarray, float]:
    """Return the eigenvector and eigenvalue with the largest real part.

    Only the real parts of the eigenvalues and eigenvectors are used. The
    eigenvector is scaled to unit Euclidean norm.
    """
    m = np.asarray(matrix, dtype=float)
    if m.ndim != 2 or m.shape[0] != m.shape[1]:
        raise ValueError("Matrix must be square")
    if m.shape[0] == 0:
        raise ValueError("Matrix must not be empty")
    values, vectors = np.linalg.eig(m)
    real_values = values.real
    real_vectors = vectors.real
    best = int(np.argmax(real_values))
    vector = real_vectors[:, best]
    norm = np.linalg.norm(vector)
    if norm != 0:
        vector = vector / norm
    return vector, float(real_values[best])