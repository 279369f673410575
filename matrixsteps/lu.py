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
"""LU decomposition without row exchanges (Doolittle)"""

from dataclasses import dataclass
from typing import List, Tuple
import logging

from matrixsteps.rational import Rational, ZERO, ONE
from matrixsteps.matrix import Matrix, to_matrix, require_square

LOG = logging.getLogger(__name__)


@dataclass(frozen=True)
class LUStep:
    title: str
    description: str
    lower: Matrix
    upper: Matrix


@dataclass(frozen=True)
class LUDecomposition:
    """L (unit lower triangular) and U (upper triangular) with L x U = A when complete."""
    lower: Matrix
    upper: Matrix
    steps: Tuple[LUStep, ...]
    complete: bool


def _freeze(rows: List[List[Rational]]) -> Matrix:
    return tuple(tuple(row) for row in rows)


def lu_decomposition(matrix) -> LUDecomposition:
    """
    Factor a square matrix as A = LU using Gaussian elimination without
    row exchanges.

    L starts as the identity and U as A. Every nonzero entry below a pivot
    U[k][k] is eliminated with the multiplier m = U[i][k] / U[k][k], which is
    stored in L[i][k]. A zero pivot stops the factorization; the result is
    then returned with complete=False and a final 'Zero Pivot' step.

    Args:
        matrix: A square matrix

    Returns:
        LUDecomposition with the step trace

    Raises:
        DimensionError: If the matrix is not square
    """
    matrix = to_matrix(matrix)
    n = require_square(matrix, "LU decomposition")
    lower = [[ONE if r == c else ZERO for c in range(n)] for r in range(n)]
    upper = [list(row) for row in matrix]
    steps = [LUStep("Start", "Initialize L = I and U = A.", _freeze(lower), _freeze(upper))]

    for k in range(n - 1):
        pivot = upper[k][k]
        if pivot.is_zero():
            LOG.info(f"Zero pivot at ({k + 1},{k + 1}), LU decomposition needs row exchanges.")
            steps.append(
                LUStep("Zero Pivot", f"Pivot at ({k + 1},{k + 1}) is zero. LU decomposition without permutation "
                       f"requires non-zero pivots.", _freeze(lower), _freeze(upper)))
            return LUDecomposition(_freeze(lower), _freeze(upper), tuple(steps), complete=False)
        for i in range(k + 1, n):
            value = upper[i][k]
            if value.is_zero():
                continue
            multiplier = value / pivot
            lower[i][k] = multiplier
            for j in range(k, n):
                upper[i][j] = upper[i][j] - multiplier * upper[k][j]
            steps.append(
                LUStep(
                    f"Eliminate ({i + 1}, {k + 1})",
                    f"Multiplier m = {value}/{pivot} = {multiplier}. Set L[{i + 1}][{k + 1}] = {multiplier}. "
                    f"Update U Row {i + 1} = Row {i + 1} - ({multiplier}) * Row {k + 1}.", _freeze(lower),
                    _freeze(upper)))

    steps.append(LUStep("Result", "LU Decomposition complete.", _freeze(lower), _freeze(upper)))
    return LUDecomposition(_freeze(lower), _freeze(upper), tuple(steps), complete=True)
