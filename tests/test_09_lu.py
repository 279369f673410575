"""Test LU decomposition without row exchanges."""
import pytest
import matrixsteps as ms
from matrixsteps import Rational

from conftest import SQUARE_MATRICES


def test_three_by_three():
    result = ms.lu_decomposition([[2, 1, 1], [4, -6, 0], [-2, 7, 2]])
    assert result.complete
    assert result.lower == ms.to_matrix([[1, 0, 0], [2, 1, 0], [-1, -1, 1]])
    assert result.upper == ms.to_matrix([[2, 1, 1], [0, -8, -2], [0, 0, 1]])
    assert [s.title for s in result.steps] == [
        "Start", "Eliminate (2, 1)", "Eliminate (3, 1)", "Eliminate (3, 2)", "Result"
    ]


def test_product_reproduces_matrix(square_matrix):
    result = ms.lu_decomposition(square_matrix)
    if result.complete:
        assert ms.multiply(result.lower, result.upper) == square_matrix
    else:
        assert result.steps[-1].title == "Zero Pivot"


def test_fraction_multiplier():
    result = ms.lu_decomposition([[2, 1], [1, 3]])
    assert result.lower[1][0] == Rational(1, 2)
    assert result.upper == ms.to_matrix([[2, 1], [0, '5/2']])
    assert "Multiplier m = 1/2 = 1/2" in result.steps[1].description


def test_zero_pivot_stops():
    result = ms.lu_decomposition(SQUARE_MATRICES['swap_needed'])
    assert not result.complete
    assert [s.title for s in result.steps] == ["Start", "Zero Pivot"]
    assert result.upper == ms.to_matrix(SQUARE_MATRICES['swap_needed'])


def test_non_square_is_rejected():
    with pytest.raises(ms.DimensionError):
        ms.lu_decomposition([[1, 2, 3]])
