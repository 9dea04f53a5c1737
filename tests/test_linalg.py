import numpy as np
import pytest

from symdyn.linalg import perron_frobenius_eigen


def test_eigenpair_satisfies_definition():
    matrix = np.array([[1.0, 1.0], [1.0, 0.0]])
    vector, value = perron_frobenius_eigen(matrix)
    assert np.allclose(matrix @ vector, value * vector)


def test_vector_has_unit_norm():
    matrix = np.array([[0.25, 0.75], [0.25, 0.75]])
    vector, _ = perron_frobenius_eigen(matrix)
    assert np.linalg.norm(vector) == pytest.approx(1.0)


def test_diagonal_matrix_picks_largest_entry():
    vector, value = perron_frobenius_eigen(np.diag([3.0, 5.0]))
    assert value == pytest.approx(5.0)
    assert np.allclose(np.abs(vector), [0.0, 1.0])


def test_integer_matrix_is_accepted():
    vector, value = perron_frobenius_eigen([[2, 0], [0, 1]])
    assert value == pytest.approx(2.0)
    assert np.allclose(np.abs(vector), [1.0, 0.0])


def test_largest_eigenvalue_bounds_all_others():
    matrix = np.array([[1.0, 2.0, 0.0], [0.0, 1.0, 1.0], [1.0, 0.0, 1.0]])
    _, value = perron_frobenius_eigen(matrix)
    assert all(value >= ev.real - 1e-12 for ev in np.linalg.eigvals(matrix))


def test_empty_matrix_raises():
    with pytest.raises(ValueError):
        perron_frobenius_eigen(np.zeros((0, 0)))


def test_non_square_matrix_raises():
    with pytest.raises(ValueError):
        perron_frobenius_eigen(np.zeros((2, 3)))