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
"""Determinants by cofactor expansion, with narrated derivations

determinant() evaluates the value; cofactor_steps() and sarrus_steps() narrate
two different derivations of the same value. The expansion itself,
expand_along_first_row(), is written for any entry type with + - * and
is_zero(), and is shared with the characteristic polynomial.
"""

from typing import Tuple
import logging

from matrixsteps.rational import Rational, ZERO
from matrixsteps.matrix import Matrix, DimensionError, to_matrix, require_square, submatrix
from matrixsteps.steps import DerivationStep

LOG = logging.getLogger(__name__)


def expand_along_first_row(matrix, zero):
    """Determinant of a square matrix by recursive cofactor expansion.

    1x1 and 2x2 matrices use the closed forms a and ad - bc. Larger matrices
    are expanded along the first row; zero entries are skipped and the sign
    alternates with the column parity (+, -, +, ...).

    Args:
        matrix: Square tuple-of-tuples of ring elements (Rational or Polynomial)
        zero: The zero element of the ring, returned if every term is skipped
    """
    n = len(matrix)
    if n == 1:
        return matrix[0][0]
    if n == 2:
        return matrix[0][0] * matrix[1][1] - matrix[0][1] * matrix[1][0]
    total = zero
    for col, entry in enumerate(matrix[0]):
        if entry.is_zero():
            continue
        term = entry * expand_along_first_row(submatrix(matrix, 0, col), zero)
        if col % 2 == 0:
            total = total + term
        else:
            total = total - term
    return total


def determinant(matrix) -> Rational:
    """Exact determinant of a square matrix.

    Raises:
        DimensionError: If the matrix is not square
    """
    matrix = to_matrix(matrix)
    require_square(matrix, "determinant")
    return expand_along_first_row(matrix, ZERO)


def cofactor_steps(matrix) -> Tuple[DerivationStep, ...]:
    """Narrate the cofactor expansion along the first row
    
    For 1x1 and 2x2 matrices the closed form is shown. For larger matrices
    there is one step per nonzero entry of the first row, showing the minor
    matrix whose determinant multiplies the signed entry, followed by the
    summation.
    
    Args:
        matrix (nested sequence):
        
            A square matrix.
            
    Returns:
        (tuple of DerivationStep):
        
            The narrated derivation. The value appears in the math of the last step.
    """
    matrix = to_matrix(matrix)
    n = require_square(matrix, "determinant")
    steps = [DerivationStep("Initial Matrix", "Start with the given square matrix.", "det(A)", matrix)]
    if n == 1:
        steps.append(DerivationStep("1x1 Determinant", "The determinant of a 1x1 matrix is the value itself.",
                                    f"= {matrix[0][0]}"))
        return tuple(steps)
    if n == 2:
        (a, b), (c, d) = matrix
        steps.append(DerivationStep("2x2 Formula", "Use the formula ad - bc.",
                                    f"= ({a})({d}) - ({b})({c})\n= {a * d} - {b * c}\n= {a * d - b * c}"))
        return tuple(steps)

    steps.append(DerivationStep("Cofactor Expansion", "Expand along the first row."))
    parts = []
    total = ZERO
    for col, value in enumerate(matrix[0]):
        if value.is_zero():
            continue
        sign = "+" if col % 2 == 0 else "-"
        minor = submatrix(matrix, 0, col)
        minor_det = expand_along_first_row(minor, ZERO)
        term = value * minor_det
        total = total + term if col % 2 == 0 else total - term
        steps.append(
            DerivationStep(
                f"Term 1,{col + 1}",
                f"Element a1,{col + 1} is {value}. Sign is {sign}. Minor is the determinant of the submatrix "
                f"remaining after removing Row 1 and Col {col + 1}.", f"{sign} ({value}) * det(M1,{col + 1})", minor))
        parts.append(f"{sign} ({value})({minor_det})")
    steps.append(DerivationStep("Summation", "Sum up all the terms.", f"det(A) = {' '.join(parts)}\n= {total}"))
    return tuple(steps)


def sarrus_steps(matrix) -> Tuple[DerivationStep, ...]:
    """Narrate the diagonal rule (Sarrus) for a 3x3 determinant.

    Raises:
        DimensionError: If the matrix is not 3x3
    """
    matrix = to_matrix(matrix)
    if len(matrix) != 3 or len(matrix[0]) != 3:
        raise DimensionError(f"The diagonal rule needs a 3x3 matrix, got {len(matrix)}x{len(matrix[0])}")
    (a, b, c), (d, e, f), (g, h, i) = matrix
    steps = [
        DerivationStep("Initial Matrix", "Start with the 3x3 matrix.", "det(A)", matrix),
        DerivationStep("Forward Diagonals", "Multiply terms along the three diagonals from top-left to bottom-right.",
                       matrix=matrix),
    ]
    forward = [(a, e, i), (b, f, g), (c, d, h)]
    backward = [(g, e, c), (h, f, a), (i, d, b)]
    names = ["First", "Second", "Third"]

    forward_products = []
    for k, (x, y, z) in enumerate(forward):
        product = x * y * z
        forward_products.append(product)
        steps.append(DerivationStep(f"Diagonal {k + 1}", f"{names[k]} diagonal: ({x}) × ({y}) × ({z})", f"= {product}"))
    sum_forward = sum(forward_products, ZERO)
    steps.append(
        DerivationStep("Sum of Forward Diagonals", "Add the results of the three forward diagonals.",
                       " + ".join(str(p) for p in forward_products) + f" = {sum_forward}"))

    steps.append(
        DerivationStep("Backward Diagonals", "Multiply terms along the three diagonals from bottom-left to top-right."))
    backward_products = []
    for k, (x, y, z) in enumerate(backward):
        product = x * y * z
        backward_products.append(product)
        steps.append(
            DerivationStep(f"Anti-Diagonal {k + 1}", f"{names[k]} anti-diagonal: ({x}) × ({y}) × ({z})", f"= {product}"))
    sum_backward = sum(backward_products, ZERO)
    steps.append(
        DerivationStep("Sum of Backward Diagonals", "Add the results of the three backward diagonals.",
                       " + ".join(str(p) for p in backward_products) + f" = {sum_backward}"))

    det = sum_forward - sum_backward
    steps.append(
        DerivationStep("Final Calculation", "Subtract the backward sum from the forward sum.",
                       f"det(A) = ({sum_forward}) - ({sum_backward}) = {det}"))
    LOG.debug(f"Diagonal rule determinant: {det}")
    return tuple(steps)
