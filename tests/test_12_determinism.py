"""Test that repeated runs produce identical step traces."""
import matrixsteps as ms


def test_rref_steps_are_reproducible(any_matrix):
    first, second = ms.rref_steps(any_matrix), ms.rref_steps(any_matrix)
    assert first == second
    assert [(s.operation, s.description, s.is_final) for s in first] == \
        [(s.operation, s.description, s.is_final) for s in second]


def test_inverse_steps_are_reproducible(square_matrix):
    first, second = ms.inverse_steps(square_matrix), ms.inverse_steps(square_matrix)
    assert first == second
    assert [str(s) for s in first] == [str(s) for s in second]


def test_eigenbasis_steps_are_reproducible(square_matrix):
    for value in list(ms.eigenvalues(square_matrix)) + [0]:
        first = ms.eigenbasis(square_matrix, value)
        second = ms.eigenbasis(square_matrix, value)
        assert first.steps == second.steps
        assert first == second


def test_derivations_are_reproducible(square_matrix):
    assert ms.cofactor_steps(square_matrix) == ms.cofactor_steps(square_matrix)
    assert ms.characteristic_polynomial(square_matrix).steps == ms.characteristic_polynomial(square_matrix).steps
    assert ms.diagonalize(square_matrix).steps == ms.diagonalize(square_matrix).steps
    assert ms.gram_schmidt(square_matrix) == ms.gram_schmidt(square_matrix)
