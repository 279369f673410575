"""Test eigenspace bases."""
import logging
import pytest
import matrixsteps as ms
from matrixsteps import Rational

from conftest import SQUARE_MATRICES


def test_two_dimensional_eigenspace():
    basis = ms.eigenbasis(SQUARE_MATRICES['sample3'], 3.0)
    assert basis.eigenvalue == 3
    assert basis.shifted_matrix == ms.to_matrix([[-1, -1, 1], [-2, -2, 2], [-1, -1, 1]])
    assert basis.pivots == (0,)
    assert basis.free_columns == (1, 2)
    assert basis.vectors == ms.to_matrix([[-1, 1, 0], [1, 0, 1]])
    assert basis.dimension == 2


def test_one_dimensional_eigenspace():
    basis = ms.eigenbasis(SQUARE_MATRICES['sample3'], 5)
    assert basis.vectors == ms.to_matrix([[1, 2, 1]])
    assert basis.steps[-2].matrix == ms.to_matrix([[1, 0, -1], [0, 1, -2], [0, 0, 0]])


def test_eigenvectors_satisfy_definition(square_matrix):
    for root in ms.eigenvalues(square_matrix):
        basis = ms.eigenbasis(square_matrix, root)
        value = basis.eigenvalue
        for vector in basis.vectors:
            assert ms.multiply_vector(square_matrix, vector) == tuple(value * v for v in vector)


def test_trace_ends_with_parameterization():
    steps = ms.eigenbasis(SQUARE_MATRICES['symmetric2'], 3).steps
    assert steps[0].operation == 'Start'
    assert steps[-1].operation == 'Parameterization'
    assert steps[-1].is_final
    assert not any(s.is_final for s in steps[:-1])
    assert steps[-1].description.startswith("Identify pivot variables (cols 1) and free variables (cols 2).")
    assert "x_1 = 1x_2" in steps[-1].description


def test_not_an_eigenvalue(caplog):
    with caplog.at_level(logging.INFO, logger="matrixsteps"):
        basis = ms.eigenbasis(SQUARE_MATRICES['sample3'], 4)
    assert basis.vectors == ()
    assert basis.dimension == 0
    assert basis.free_columns == ()
    assert "trivial" in caplog.text


def test_rotation_has_trivial_eigenspaces():
    assert ms.eigenbasis(SQUARE_MATRICES['rotation'], 0).vectors == ()
    assert ms.eigenbasis(SQUARE_MATRICES['rotation'], 1).vectors == ()


def test_exact_eigenvalue_is_kept():
    basis = ms.eigenbasis([[Rational(1, 2), 0], [0, 3]], Rational(1, 2))
    assert basis.eigenvalue == Rational(1, 2)
    assert basis.vectors == ms.to_matrix([[1, 0]])


@pytest.mark.parametrize("value,expected", [
    (2.9999999, 3),
    (-1.0000001, -1),
    (2.5, 3),
    (-2.5, -3),
    (0.4, 0),
    (7, 7),
    (Rational(3, 4), Rational(3, 4)),
])
def test_round_eigenvalue(value, expected):
    assert ms.round_eigenvalue(value) == expected


def test_non_square_is_rejected():
    with pytest.raises(ms.DimensionError):
        ms.eigenbasis([[1, 2, 3], [4, 5, 6]], 1)
