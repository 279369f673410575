import pytest
import matrixsteps as ms

# Small integer matrices used across the test modules
SQUARE_MATRICES = {
    'identity3': [[1, 0, 0], [0, 1, 0], [0, 0, 1]],
    'det8': [[2, 0, -1], [1, 1, 0], [0, -2, 3]],
    'sample3': [[4, 1, -1], [2, 5, -2], [1, 1, 2]],
    'swap_needed': [[0, 2, 1], [1, 1, 0], [2, 0, 3]],
    'singular3': [[1, 2, 3], [4, 5, 6], [7, 8, 9]],
    'rotation': [[0, 1], [-1, 0]],
    'fractions2': [['1/2', '1/3'], ['1/4', '1/5']],
    'jordan2': [[2, 1], [0, 2]],
    'symmetric2': [[2, 1], [1, 2]],
    'four': [[1, 2, 0, 1], [0, 1, 3, 0], [2, 0, 1, 1], [1, 1, 1, 2]],
}

RECTANGULAR_MATRICES = {
    'wide': [[1, 2, -1], [2, 4, -2]],
    'tall': [[1, 2], [3, 4], [5, 6]],
    'zero': [[0, 0, 0], [0, 0, 0]],
    'mixed': [[0, 0, 1, 2], [0, 3, 6, 0], [0, 1, 2, 1]],
}

ALL_MATRICES = {**SQUARE_MATRICES, **RECTANGULAR_MATRICES}


@pytest.fixture(params=sorted(ALL_MATRICES), scope="session")
def any_matrix(request: pytest.FixtureRequest):
    """Provide session-level fixture for every test matrix."""
    return ms.to_matrix(ALL_MATRICES[request.param])


@pytest.fixture(params=sorted(SQUARE_MATRICES), scope="session")
def square_matrix(request: pytest.FixtureRequest):
    """Provide session-level fixture for square test matrices."""
    return ms.to_matrix(SQUARE_MATRICES[request.param])
