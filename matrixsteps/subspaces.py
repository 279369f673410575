#!/usr/bin/env python3
#
# Copyright 2022 Max Planck Insitute Magdeburg
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
#
#
#
"""The four fundamental subspaces of a matrix

All bases are derived from two reductions, RREF(A) and RREF(Aᵀ):

    column space      C(A)   columns of A at the pivot columns of RREF(A)
    row space         R(A)   nonzero rows of RREF(A)
    null space        N(A)   free-variable parameterization of RREF(A)
    left null space   N(Aᵀ)  free-variable parameterization of RREF(Aᵀ)
"""

from dataclasses import dataclass
from typing import Sequence, Tuple
import logging

from matrixsteps.matrix import Matrix, Vector, to_matrix, transpose, column, dot
from matrixsteps.row_reduction import rref_steps, pivot_columns, nullspace_basis
from matrixsteps.steps import Step

LOG = logging.getLogger(__name__)


@dataclass(frozen=True)
class FundamentalSubspaces:
    """Bases of C(A), R(A), N(A) and N(Aᵀ) together with the reductions they come from."""
    matrix: Matrix
    rref_steps: Tuple[Step, ...]
    transpose_rref_steps: Tuple[Step, ...]
    pivots: Tuple[int, ...]
    column_space: Tuple[Vector, ...]
    row_space: Tuple[Vector, ...]
    null_space: Tuple[Vector, ...]
    left_null_space: Tuple[Vector, ...]

    @property
    def rank(self) -> int:
        return len(self.pivots)

    @property
    def nullity(self) -> int:
        return len(self.matrix[0]) - self.rank

    @property
    def left_nullity(self) -> int:
        return len(self.matrix) - self.rank


def column_space_basis(matrix: Matrix, pivots: Sequence[int]) -> Tuple[Vector, ...]:
    """Columns of the original matrix at the pivot indices."""
    return tuple(column(matrix, p) for p in pivots)


def row_space_basis(rref_matrix: Matrix) -> Tuple[Vector, ...]:
    """Nonzero rows of a reduced row echelon form."""
    return tuple(row for row in rref_matrix if any(not v.is_zero() for v in row))


def fundamental_subspaces(matrix) -> FundamentalSubspaces:
    """Compute bases for all four fundamental subspaces of a matrix
    
    Example:
        fs = fundamental_subspaces([[1, 2, -1], [2, 4, -2]])
        fs.pivots      # (0,)
        fs.null_space  # ((-2, 1, 0), (1, 0, 1)) as Rationals
    
    Args:
        matrix (nested sequence):
        
            Any rectangular matrix.
            
    Returns:
        (FundamentalSubspaces):
        
            The four bases, the pivot columns of RREF(A) and the step traces
            of RREF(A) and RREF(Aᵀ).
    """
    matrix = to_matrix(matrix)
    steps = rref_steps(matrix)
    reduced = steps[-1].matrix
    pivots = pivot_columns(reduced)

    steps_t = rref_steps(transpose(matrix))
    reduced_t = steps_t[-1].matrix

    result = FundamentalSubspaces(matrix=matrix,
                                  rref_steps=steps,
                                  transpose_rref_steps=steps_t,
                                  pivots=tuple(pivots),
                                  column_space=column_space_basis(matrix, pivots),
                                  row_space=row_space_basis(reduced),
                                  null_space=nullspace_basis(reduced, pivots),
                                  left_null_space=nullspace_basis(reduced_t))
    LOG.debug(f"Rank {result.rank}, nullity {result.nullity}, left nullity {result.left_nullity}.")
    return result


def column_space(matrix) -> Tuple[Vector, ...]:
    return fundamental_subspaces(matrix).column_space


def row_space(matrix) -> Tuple[Vector, ...]:
    return fundamental_subspaces(matrix).row_space


def null_space(matrix) -> Tuple[Vector, ...]:
    matrix = to_matrix(matrix)
    return nullspace_basis(rref_steps(matrix)[-1].matrix)


def left_null_space(matrix) -> Tuple[Vector, ...]:
    """Null space of the transpose."""
    matrix = to_matrix(matrix)
    return nullspace_basis(rref_steps(transpose(matrix))[-1].matrix)


def are_orthogonal(basis_a: Sequence[Vector], basis_b: Sequence[Vector]) -> bool:
    """True if every vector of one basis is orthogonal to every vector of the other."""
    return all(dot(u, v).is_zero() for u in basis_a for v in basis_b)
