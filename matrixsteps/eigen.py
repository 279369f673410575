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
"""Eigenspace bases from the null space of (λI - A)"""

from dataclasses import dataclass
from numbers import Integral, Real
from typing import List, Tuple
import logging
import math

from matrixsteps.names import PARAMETERIZATION
from matrixsteps.rational import Rational
from matrixsteps.matrix import Matrix, Vector, to_matrix, require_square
from matrixsteps.row_reduction import rref_steps, pivot_columns, free_columns, nullspace_basis
from matrixsteps.steps import Step, StepTrace

LOG = logging.getLogger(__name__)


@dataclass(frozen=True)
class EigenBasis:
    """Basis of the eigenspace of one eigenvalue

    Args:
        eigenvalue: The exact eigenvalue λ used
        shifted_matrix: λI - A
        steps: RREF trace of λI - A followed by the parameterization step
        pivots: Pivot columns of the RREF
        free_columns: Free columns of the RREF
        vectors: Basis vectors, one per free column; empty if the eigenspace is {0}
    """
    eigenvalue: Rational
    shifted_matrix: Matrix
    steps: Tuple[Step, ...]
    pivots: Tuple[int, ...]
    free_columns: Tuple[int, ...]
    vectors: Tuple[Vector, ...]

    @property
    def dimension(self) -> int:
        """Geometric multiplicity of the eigenvalue."""
        return len(self.vectors)


def round_eigenvalue(value) -> Rational:
    """
    Hand an eigenvalue over from root finding to exact arithmetic.

    Floating point roots are rounded to the nearest integer. Exact values
    (Rational, Fraction, int) pass through unchanged.
    """
    if isinstance(value, Rational):
        return value
    if isinstance(value, Integral):
        return Rational(value)
    if isinstance(value, Real):
        # halves round away from zero
        return Rational(int(math.copysign(math.floor(abs(value) + 0.5), value)))
    return Rational.value_of(value)


def shifted_matrix(matrix: Matrix, eigenvalue: Rational) -> Matrix:
    """λI - A"""
    n = len(matrix)
    return tuple(
        tuple(eigenvalue - matrix[r][c] if r == c else -matrix[r][c] for c in range(n)) for r in range(n))


def _parameterization(rref_matrix: Matrix, pivots: List[int], free: List[int]) -> str:
    lines = [
        f"Identify pivot variables (cols {', '.join(str(p + 1) for p in pivots)}) "
        f"and free variables (cols {', '.join(str(f + 1) for f in free)}).",
        "Express pivot variables in terms of free variables:",
    ]
    for row, pivot in enumerate(pivots):
        terms = []
        for f in free:
            value = rref_matrix[row][f]
            if not value.is_zero():
                terms.append(f"{-value}x_{f + 1}")
        lines.append(f"x_{pivot + 1} = " + (" + ".join(terms) if terms else "0"))
    return "\n".join(lines)


def eigenbasis(matrix, eigenvalue) -> EigenBasis:
    """Basis of the eigenspace of a square matrix for one eigenvalue
    
    Reduces λI - A to RREF and reads the null space basis off the pivot/free
    column structure: each free column gets a vector with a 1 in that
    coordinate, zeros in the other free coordinates and the negated RREF
    entries in the pivot coordinates.
    
    Args:
        matrix (nested sequence):
        
            A square matrix A.
            
        eigenvalue (float, int or Rational):
        
            The eigenvalue λ. Floats (from root finding) are rounded to the
            nearest integer first, see round_eigenvalue().
            
    Returns:
        (EigenBasis):
        
            The basis and its derivation. If λ is not an eigenvalue the basis
            is empty, which is not an error.
            
    Raises:
        DimensionError: If the matrix is not square.
    """
    matrix = to_matrix(matrix)
    require_square(matrix, "eigenvectors")
    value = round_eigenvalue(eigenvalue)
    shifted = shifted_matrix(matrix, value)

    reduction = rref_steps(shifted)
    reduced = reduction[-1].matrix
    pivots = pivot_columns(reduced)
    free = free_columns(reduced, pivots)
    vectors = nullspace_basis(reduced, pivots)

    trace = StepTrace()
    trace.extend(reduction)
    trace.record(reduced, PARAMETERIZATION, _parameterization(reduced, pivots, free))
    if not vectors:
        LOG.info(f"Eigenspace of {value} is trivial, no eigenvectors.")
    return EigenBasis(eigenvalue=value,
                      shifted_matrix=shifted,
                      steps=trace.build(),
                      pivots=tuple(pivots),
                      free_columns=tuple(free),
                      vectors=vectors)
