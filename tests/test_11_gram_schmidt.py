"""Test Gram-Schmidt orthogonalization and orthogonality narration."""
import logging
import pytest
import matrixsteps as ms
from matrixsteps import Rational
from matrixsteps.matrix import from_columns, augment

from conftest import SQUARE_MATRICES


def test_two_columns():
    gs = ms.gram_schmidt([[1, 1], [1, 0], [0, 1]])
    assert gs.orthogonal == ms.to_matrix([[1, 1, 0], ['1/2', '-1/2', 1]])
    assert gs.basis == gs.orthogonal
    assert gs.coefficients == ms.to_matrix([[1, '1/2'], [0, 1]])
    assert [s.title for s in gs.steps] == ["Start", "Step 1", "Step 2", "Orthogonal Basis", "Normalization"]
    assert gs.steps[2].math == "u_2 = a_2 - (1/2) u_1 = [1/2, -1/2, 1]"
    assert gs.steps[-1].math == "||u_1|| = √2\n||u_2|| = √(3/2)"


def test_basis_is_orthogonal(any_matrix):
    basis = ms.gram_schmidt(any_matrix).basis
    for i, u in enumerate(basis):
        for v in basis[i + 1:]:
            assert ms.dot(u, v) == 0


def test_span_is_preserved(any_matrix):
    gs = ms.gram_schmidt(any_matrix)
    assert len(gs.basis) == ms.rank(any_matrix)
    if gs.basis:
        assert ms.rank(augment(any_matrix, from_columns(gs.basis))) == ms.rank(any_matrix)


def test_exact_factorization(any_matrix):
    gs = ms.gram_schmidt(any_matrix)
    assert ms.multiply(from_columns(gs.orthogonal), gs.coefficients) == any_matrix


def test_dependent_column(caplog):
    with caplog.at_level(logging.INFO, logger="matrixsteps"):
        gs = ms.gram_schmidt([[1, 2], [1, 2]])
    assert gs.orthogonal[1] == ms.to_vector([0, 0])
    assert gs.basis == ms.to_matrix([[1, 1]])
    assert "adds no new direction" in gs.steps[2].description
    assert "span of the previous columns" in caplog.text


@pytest.mark.parametrize("vector,text", [
    ([3, 4], "5"),
    ([1, 2, 3], "√14"),
    (['1/2', '1/2'], "√(1/2)"),
    (['1/2', 0], "1/2"),
    ([0, 0], "0"),
])
def test_format_norm(vector, text):
    assert ms.format_norm(ms.to_vector(vector)) == text


def test_exact_norm():
    assert ms.exact_norm(ms.to_vector(['3/5', '4/5'])) == 1
    assert ms.exact_norm(ms.to_vector([1, 1])) is None
    assert ms.norm_squared(ms.to_vector([1, -2])) == 5


def test_qr_display():
    gs = ms.gram_schmidt([[3], [4]])
    assert gs.q_entries == (("3/5",), ("4/5",))
    assert gs.r_entries == (("5",),)

    gs = ms.gram_schmidt([[1, 1], [1, 0], [0, 1]])
    assert [row[0] for row in gs.q_entries] == ["1/√2", "1/√2", "0"]
    assert gs.r_entries[0] == ("2/√2", "1/√2")
    assert gs.r_entries[1][0] == "0"


def test_identity_is_orthonormal():
    gs = ms.gram_schmidt(SQUARE_MATRICES['identity3'])
    assert gs.basis == ms.identity(3)
    assert gs.q_entries == (("1", "0", "0"), ("0", "1", "0"), ("0", "0", "1"))
    assert gs.r_entries == gs.q_entries


def test_orthogonality_steps():
    steps = ms.orthogonality_steps([1, 2], [2, -1])
    assert [s.title for s in steps] == [
        "1. Inner Product (Dot Product)", "2. Vector Lengths (Norms)", "3. Distance", "4. Orthogonality", "5. Angle"
    ]
    assert steps[0].math == "u · v = (1)(2) + (2)(-1) = 0"
    assert steps[1].math == "||u|| = √5 = √5\n||v|| = √5 = √5"
    assert steps[2].math == "dist(u, v) = ||u - v|| = √10 = √10"
    assert steps[3].math == "u · v = 0 => Orthogonal"
    assert steps[4].math == "θ ≈ 90.00°"


def test_orthogonality_steps_angle_and_zero_vector():
    assert ms.orthogonality_steps([1, 0], [1, 1])[-1].math == "θ ≈ 45.00°"
    steps = ms.orthogonality_steps([0, 0], [1, 1])
    assert len(steps) == 4
    assert steps[3].math == "u · v = 0 => Orthogonal"
    with pytest.raises(ms.DimensionError):
        ms.orthogonality_steps([1, 2], [1, 2, 3])


def test_orthogonal_set_steps():
    steps = ms.orthogonal_set_steps(SQUARE_MATRICES['identity3'])
    assert steps[0].math.count("(✓)") == 3
    assert steps[-1].description == "All pairs are orthogonal."

    steps = ms.orthogonal_set_steps([[1, 1], [1, 0]])
    assert steps[0].math == "u_1 · u_2 = 1 (×)"
    assert steps[-1].description == "Not all pairs are orthogonal."

    assert ms.orthogonal_set_steps([[1], [2]]) == ()
