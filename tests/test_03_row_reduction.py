"""Test Gauss-Jordan reduction, rank/nullity and inversion."""
import pytest
import sympy
import matrixsteps as ms
from matrixsteps import Rational


def test_operation_tags():
    steps = ms.rref_steps([[1, 2], [3, 4]])
    assert [s.operation for s in steps] == ['Start', 'E21(-3)', 'M2(-1/2)', 'E12(-2)']
    assert steps[0].description == "Initial Matrix"
    assert steps[-1].matrix == ms.identity(2)
    assert steps[-1].is_final
    assert not any(s.is_final for s in steps[:-1])


def test_swap_is_recorded():
    steps = ms.rref_steps([[0, 1], [1, 0]])
    assert [s.operation for s in steps] == ['Start', 'P12']
    assert "Swap Row 1 and Row 2" in steps[1].description


def test_scale_tag_uses_reciprocal():
    steps = ms.rref_steps([[2, 4]])
    assert [s.operation for s in steps] == ['Start', 'M1(1/2)']
    assert steps[-1].matrix == ms.to_matrix([[1, 2]])


def test_already_reduced_matrix():
    steps = ms.rref_steps([[1, 0, 3], [0, 1, -1]])
    assert len(steps) == 1
    assert steps[0].operation == 'Start'
    assert steps[0].is_final


def test_rref_matches_sympy(any_matrix):
    expected, pivots = ms.to_sympy(any_matrix).rref()
    assert ms.rref(any_matrix) == ms.to_matrix(expected)
    assert ms.pivot_columns(ms.rref(any_matrix)) == list(pivots)


def test_rref_is_idempotent(any_matrix):
    reduced = ms.rref(any_matrix)
    assert ms.rref(reduced) == reduced
    assert len(ms.rref_steps(reduced)) == 1


def test_pivots_and_free_columns_partition(any_matrix):
    reduced = ms.rref(any_matrix)
    pivots = ms.pivot_columns(reduced)
    free = ms.free_columns(reduced)
    assert sorted(pivots + free) == list(range(len(any_matrix[0])))
    assert len(pivots) <= min(len(any_matrix), len(any_matrix[0]))


def test_rank_nullity(any_matrix):
    result = ms.rank_nullity(any_matrix)
    assert result.rank + result.nullity == result.cols
    assert result.rank == ms.to_sympy(any_matrix).rank()
    assert result.theorem_check() == f"{result.rank} + {result.nullity} = {result.cols}"


def test_nullspace_basis(any_matrix):
    reduced = ms.rref(any_matrix)
    basis = ms.nullspace_basis(reduced)
    assert len(basis) == ms.nullity(any_matrix)
    zero = tuple(Rational(0) for _ in any_matrix)
    for vector in basis:
        assert ms.multiply_vector(any_matrix, vector) == zero


def test_nullspace_basis_entries():
    reduced = ms.rref([[1, 2, -1], [2, 4, -2]])
    assert ms.nullspace_basis(reduced) == ms.to_matrix([[-2, 1, 0], [1, 0, 1]])
    assert ms.nullspace_basis(ms.identity(3)) == ()


def test_inverse(square_matrix):
    inv = ms.inverse(square_matrix)
    if ms.to_sympy(square_matrix).det() == 0:
        assert inv is None
        assert ms.inverse_steps(square_matrix)[-1].operation == 'Singular'
    else:
        n = len(square_matrix)
        assert ms.multiply(square_matrix, inv) == ms.identity(n)
        assert ms.multiply(inv, square_matrix) == ms.identity(n)
        assert inv == ms.to_matrix(ms.to_sympy(square_matrix).inv())


def test_inverse_trace():
    steps = ms.inverse_steps([[2, 0], [0, 4]])
    assert steps[0].operation == 'Start'
    assert steps[0].matrix == ms.to_matrix([[2, 0, 1, 0], [0, 4, 0, 1]])
    assert [s.operation for s in steps] == ['Start', 'M1(1/2)', 'M2(1/4)', 'Result']
    assert "leading one" in steps[1].description
    assert steps[-1].is_final
    assert steps[-1].matrix == ms.to_matrix([[1, 0, Rational(1, 2), 0], [0, 1, 0, Rational(1, 4)]])


def test_singular_inverse_trace():
    steps = ms.inverse_steps([[1, 2], [2, 4]])
    assert steps[-1].operation == 'Singular'
    assert steps[-1].is_final
    assert ms.inverse([[1, 2], [2, 4]]) is None


def test_inverse_requires_square():
    with pytest.raises(ms.DimensionError):
        ms.inverse_steps([[1, 2, 3], [4, 5, 6]])


def test_elimination_order():
    steps = ms.rref_steps([[1, 1, 1], [2, 3, 4], [3, 5, 8]])
    ops = [s.operation for s in steps]
    assert ops[:3] == ['Start', 'E21(-2)', 'E31(-3)']
    assert steps[-1].matrix == ms.identity(3)


@pytest.mark.timeout(30)
def test_large_exact_reduction():
    hilbert = [[Rational(1, i + j + 1) for j in range(6)] for i in range(6)]
    inv = ms.inverse(hilbert)
    assert inv == ms.to_matrix(sympy.Matrix(6, 6, lambda i, j: sympy.Rational(1, i + j + 1)).inv())
