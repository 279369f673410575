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
"""Gauss-Jordan elimination with exact rational arithmetic and a step trace

The reduction follows one fixed policy so that traces are reproducible: the
pivot column advances left to right and the pivot row top to bottom, the
pivot is the first row (from the current pivot row down) with a nonzero entry
in the pivot column, the pivot row is scaled to a leading one, and the pivot
column is then cleared in all other rows from top to bottom. Each row
operation is recorded as a Step with one of the tags

    P{row}{row}              swap two rows
    M{row}(scalar)           multiply a row by a scalar
    E{target}{source}(c)     add c times the source row to the target row

with 1-based row numbers.
"""

from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple
import logging

from matrixsteps.names import START, RESULT, SINGULAR, SWAP, SCALE, ELIMINATE
from matrixsteps.rational import Rational, ZERO, ONE
from matrixsteps.matrix import Matrix, Vector, to_matrix, shape, identity, augment, is_identity, require_square
from matrixsteps.steps import Step, StepTrace

LOG = logging.getLogger(__name__)


class GaussJordan:
    """
    Reduce one matrix to reduced row echelon form, recording every row
    operation in a StepTrace.

    An instance owns a working copy of the matrix and is used for a single
    reduction. With explain=True the step descriptions are written out in
    full sentences (used for the [A | I] inversion trace).
    """

    def __init__(self, matrix: Matrix, trace: StepTrace, explain: bool = False):
        self.rows, self.cols = shape(matrix)
        self.matrix: List[List[Rational]] = [list(row) for row in matrix]
        self.trace = trace
        self.explain = explain
        self.pivots: List[int] = []

    def reduce(self) -> List[int]:
        """
        Run the elimination.

        Returns:
            Pivot column indices in order of their pivot rows
        """
        pivot_row = 0
        pivot_col = 0
        while pivot_row < self.rows and pivot_col < self.cols:
            found = self._find_pivot_row(pivot_row, pivot_col)
            if found == -1:
                # Nothing to eliminate in this column
                pivot_col += 1
                continue
            if found != pivot_row:
                self._swap_rows(pivot_row, found, pivot_col)
            if not self.matrix[pivot_row][pivot_col].is_one():
                self._normalize_row(pivot_row, pivot_col)
            self._eliminate_column(pivot_row, pivot_col)
            self.pivots.append(pivot_col)
            pivot_row += 1
            pivot_col += 1
        return self.pivots

    def _find_pivot_row(self, start_row: int, col: int) -> int:
        """First row at or below start_row with a nonzero entry in col, -1 if none."""
        for row in range(start_row, self.rows):
            if not self.matrix[row][col].is_zero():
                return row
        return -1

    def _swap_rows(self, pivot_row: int, other: int, col: int):
        self.matrix[pivot_row], self.matrix[other] = self.matrix[other], self.matrix[pivot_row]
        if self.explain:
            description = (f"Pivot Issue: The element at the pivot position ({pivot_row + 1},{col + 1}) is zero. "
                           f"To proceed with Gaussian elimination, we need a non-zero value here. "
                           f"Solution: Swap Row {pivot_row + 1} with Row {other + 1}, which puts a non-zero value "
                           f"into the pivot spot.")
        else:
            description = (f"Swap Row {pivot_row + 1} and Row {other + 1} to bring a non-zero pivot "
                           f"to the current position.")
        self.trace.record(self.matrix, f"{SWAP}{pivot_row + 1}{other + 1}", description)

    def _normalize_row(self, pivot_row: int, col: int):
        pivot = self.matrix[pivot_row][col]
        scalar = pivot.invert()
        self.matrix[pivot_row] = [value * scalar for value in self.matrix[pivot_row]]
        if self.explain:
            description = (f"Normalization: We want the pivot at ({pivot_row + 1},{col + 1}) to be exactly 1 "
                           f"(a 'leading one'). Currently, it is {pivot}. We multiply the entire Row "
                           f"{pivot_row + 1} by its reciprocal, {scalar}.")
        else:
            description = f"Scale Row {pivot_row + 1} by {scalar} to make the pivot element 1."
        self.trace.record(self.matrix, f"{SCALE}{pivot_row + 1}({scalar})", description)

    def _eliminate_column(self, pivot_row: int, col: int):
        """Clear column col in every row except the pivot row, top to bottom."""
        source = self.matrix[pivot_row]
        for row in range(self.rows):
            if row == pivot_row:
                continue
            value = self.matrix[row][col]
            if value.is_zero():
                continue
            scalar = -value
            self.matrix[row] = [current + scalar * pivot_val for current, pivot_val in zip(self.matrix[row], source)]
            if self.explain:
                description = (f"Elimination: We need to clear out the value {value} at position "
                               f"({row + 1},{col + 1}). We do this by adding {scalar} times the pivot row "
                               f"(Row {pivot_row + 1}) to Row {row + 1}. This makes the entry at "
                               f"({row + 1},{col + 1}) become zero.")
            else:
                description = (f"Add {scalar} times Row {pivot_row + 1} to Row {row + 1} to eliminate "
                               f"the value in the pivot column.")
            self.trace.record(self.matrix, f"{ELIMINATE}{row + 1}{pivot_row + 1}({scalar})", description)


def rref_steps(matrix) -> Tuple[Step, ...]:
    """Compute the reduced row echelon form and return every step of the way
    
    The first step is always the unchanged input tagged 'Start'. The last step
    holds the RREF and is flagged final; for a matrix that is already reduced
    this is the 'Start' step itself.
    
    Example:
        steps = rref_steps([[1, 2], [3, 4]])
        [s.operation for s in steps]  # ['Start', 'E21(-3)', 'M2(-1/2)', 'E12(-2)']
    
    Args:
        matrix (nested sequence):
        
            Any rectangular matrix of Rational-convertible values.
            
    Returns:
        (tuple of Step):
        
            The step trace.
    """
    matrix = to_matrix(matrix)
    trace = StepTrace()
    trace.record(matrix, START, "Initial Matrix")
    GaussJordan(matrix, trace).reduce()
    steps = trace.build()
    LOG.debug(f"Reduced {len(matrix)}x{len(matrix[0])} matrix in {len(steps) - 1} row operation(s).")
    return steps


def rref(matrix) -> Matrix:
    """Reduced row echelon form of a matrix."""
    return rref_steps(matrix)[-1].matrix


def pivot_columns(rref_matrix: Matrix) -> List[int]:
    """Leading (first nonzero) column of every nonzero row, in ascending order."""
    pivots = []
    for row in rref_matrix:
        for col, value in enumerate(row):
            if not value.is_zero():
                pivots.append(col)
                break
    return sorted(pivots)


def free_columns(rref_matrix: Matrix, pivots: Optional[Sequence[int]] = None) -> List[int]:
    """Columns without a pivot, i.e. the free variables of the homogeneous system."""
    if pivots is None:
        pivots = pivot_columns(rref_matrix)
    pivot_set = set(pivots)
    return [col for col in range(len(rref_matrix[0])) if col not in pivot_set]


def nullspace_basis(rref_matrix: Matrix, pivots: Optional[Sequence[int]] = None) -> Tuple[Vector, ...]:
    """
    Basis of the null space read off a reduced row echelon form.

    For every free column f one basis vector is built: its f-th coordinate is
    1, all other free coordinates are 0, and the coordinate of the pivot
    variable in row i is the negated RREF entry in row i, column f. Without
    free columns the basis is empty (the null space is {0}).

    Args:
        rref_matrix: A matrix in reduced row echelon form
        pivots: Its pivot columns (computed if not given)

    Returns:
        Tuple of basis vectors, one per free column in ascending order
    """
    if pivots is None:
        pivots = pivot_columns(rref_matrix)
    cols = len(rref_matrix[0])
    basis = []
    for free in free_columns(rref_matrix, pivots):
        vector = [ZERO] * cols
        vector[free] = ONE
        for row, pivot in enumerate(pivots):
            vector[pivot] = -rref_matrix[row][free]
        basis.append(tuple(vector))
    return tuple(basis)


@dataclass(frozen=True)
class RankNullity:
    """Rank and nullity of a rows x cols matrix; rank + nullity == cols."""
    rank: int
    nullity: int
    rows: int
    cols: int

    def theorem_check(self) -> str:
        return f"{self.rank} + {self.nullity} = {self.cols}"


def rank(matrix) -> int:
    return len(pivot_columns(rref(matrix)))


def nullity(matrix) -> int:
    matrix = to_matrix(matrix)
    return len(matrix[0]) - rank(matrix)


def rank_nullity(matrix) -> RankNullity:
    """Rank, nullity and dimensions of a matrix."""
    matrix = to_matrix(matrix)
    rows, cols = shape(matrix)
    r = rank(matrix)
    return RankNullity(rank=r, nullity=cols - r, rows=rows, cols=cols)


def inverse_steps(matrix) -> Tuple[Step, ...]:
    """Invert a square matrix by reducing [A | I]
    
    The trace starts with the augmented matrix and runs the same elimination
    as rref_steps over all 2n columns. A final classification step is always
    appended: 'Result' when the left block became the identity (the right
    block is then the inverse), 'Singular' otherwise.
    
    Args:
        matrix (nested sequence):
        
            A square matrix.
            
    Returns:
        (tuple of Step):
        
            The step trace, ending with the 'Result' or 'Singular' step.
            
    Raises:
        DimensionError: If the matrix is not square.
    """
    matrix = to_matrix(matrix)
    n = require_square(matrix, "inversion")
    augmented = augment(matrix, identity(n))
    trace = StepTrace()
    trace.record(augmented, START, "Augment the matrix with the Identity Matrix [A | I].")
    reducer = GaussJordan(augmented, trace, explain=True)
    reducer.reduce()
    if is_identity(tuple(tuple(row[:n]) for row in reducer.matrix)):
        trace.record(reducer.matrix, RESULT,
                     "The left side is now the Identity Matrix. The right side is the Inverse Matrix A⁻¹.")
    else:
        LOG.info(f"Matrix is singular (rank {len(reducer.pivots)} < {n}).")
        trace.record(reducer.matrix, SINGULAR,
                     "The matrix could not be reduced to Identity. It is Singular (non-invertible).")
    return trace.build()


def inverse(matrix) -> Optional[Matrix]:
    """Exact inverse of a square matrix, or None if the matrix is singular."""
    matrix = to_matrix(matrix)
    n = len(matrix)
    reduced = inverse_steps(matrix)[-1].matrix
    if not is_identity(tuple(row[:n] for row in reduced)):
        return None
    return tuple(row[n:] for row in reduced)
