"""Test determinants and their narrated derivations."""
import pytest
import matrixsteps as ms
from matrixsteps import Rational

from conftest import SQUARE_MATRICES


def test_known_determinant():
    assert ms.determinant(SQUARE_MATRICES['det8']) == 8
    assert ms.determinant(SQUARE_MATRICES['singular3']) == 0
    assert ms.determinant([[5]]) == 5
    assert ms.determinant([['1/2', '1/3'], ['1/4', '1/5']]) == Rational(1, 60)


def test_determinant_matches_sympy(square_matrix):
    assert ms.determinant(square_matrix) == ms.to_matrix([[ms.to_sympy(square_matrix).det()]])[0][0]


def test_determinant_is_multiplicative():
    a = ms.to_matrix(SQUARE_MATRICES['sample3'])
    b = ms.to_matrix(SQUARE_MATRICES['swap_needed'])
    assert ms.determinant(ms.multiply(a, b)) == ms.determinant(a) * ms.determinant(b)


def test_determinant_of_transpose(square_matrix):
    assert ms.determinant(ms.transpose(square_matrix)) == ms.determinant(square_matrix)


def test_non_square_is_rejected():
    with pytest.raises(ms.DimensionError):
        ms.determinant([[1, 2, 3], [4, 5, 6]])
    with pytest.raises(ms.DimensionError):
        ms.cofactor_steps([[1, 2]])
    with pytest.raises(ms.DimensionError):
        ms.sarrus_steps([[1, 2], [3, 4]])


def test_cofactor_steps_two_by_two():
    steps = ms.cofactor_steps([[1, 2], [3, 4]])
    assert [s.title for s in steps] == ["Initial Matrix", "2x2 Formula"]
    assert steps[-1].math.endswith("= -2")


def test_cofactor_steps_skip_zero_entries():
    steps = ms.cofactor_steps(SQUARE_MATRICES['det8'])
    titles = [s.title for s in steps]
    assert titles == ["Initial Matrix", "Cofactor Expansion", "Term 1,1", "Term 1,3", "Summation"]
    assert steps[2].matrix == ms.to_matrix([[1, 0], [-2, 3]])
    assert steps[3].math.startswith("+ (-1)")
    assert steps[-1].math.endswith("= 8")


def test_sarrus_agrees_with_cofactor_expansion():
    for name in ('det8', 'sample3', 'swap_needed', 'singular3', 'identity3'):
        matrix = SQUARE_MATRICES[name]
        steps = ms.sarrus_steps(matrix)
        assert steps[-1].title == "Final Calculation"
        assert steps[-1].math.endswith(f"= {ms.determinant(matrix)}")


def test_sarrus_diagonals():
    steps = ms.sarrus_steps(SQUARE_MATRICES['det8'])
    by_title = {s.title: s for s in steps}
    assert by_title["Sum of Forward Diagonals"].math == "6 + 0 + 2 = 8"
    assert by_title["Sum of Backward Diagonals"].math == "0 + 0 + 0 = 0"
    assert by_title["Final Calculation"].math == "det(A) = (8) - (0) = 8"
    assert len(steps) == 12
