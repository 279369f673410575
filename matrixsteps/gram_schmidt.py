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
"""Gram-Schmidt orthogonalization and orthogonality checks in exact arithmetic

The orthogonal vectors u_i are kept unnormalized so that every entry stays
rational:

    u_i = a_i - sum_j (u_j . a_i) / (u_j . u_j) u_j      (j < i, u_j != 0)

A column that depends on the previous ones reduces to the zero vector and is
left out of the basis. Norms are irrational in general and only appear as
display strings ('√14', '3', '√(5/2)'), which is also how the QR factors are
rendered.
"""

from dataclasses import dataclass
from math import isqrt
from typing import List, Optional, Sequence, Tuple
import logging
import numpy as np

from matrixsteps.rational import Rational, ZERO, ONE
from matrixsteps.matrix import Matrix, Vector, DimensionError, to_matrix, to_vector, transpose, dot
from matrixsteps.steps import DerivationStep

LOG = logging.getLogger(__name__)


@dataclass(frozen=True)
class GramSchmidt:
    """Result of orthogonalizing the columns of a matrix

    Args:
        matrix: The input matrix A
        columns: The columns a_i of A
        orthogonal: The vectors u_i, one per column (zero for dependent columns)
        coefficients: Unit upper triangular T with A = U T, where U has columns u_i
        q_entries: Display form of Q = U with normalized columns
        r_entries: Display form of R with A = Q R
        steps: Narrated derivation
    """
    matrix: Matrix
    columns: Tuple[Vector, ...]
    orthogonal: Tuple[Vector, ...]
    coefficients: Matrix
    q_entries: Tuple[Tuple[str, ...], ...]
    r_entries: Tuple[Tuple[str, ...], ...]
    steps: Tuple[DerivationStep, ...]

    @property
    def basis(self) -> Tuple[Vector, ...]:
        """Nonzero orthogonal vectors, an orthogonal basis of the column space."""
        return tuple(u for u in self.orthogonal if not _is_zero_vector(u))


def _is_zero_vector(vector: Sequence[Rational]) -> bool:
    return all(v.is_zero() for v in vector)


def _format_vector(vector: Sequence[Rational]) -> str:
    return "[" + ", ".join(str(v) for v in vector) + "]"


def norm_squared(vector: Sequence[Rational]) -> Rational:
    return dot(vector, vector)


def exact_norm(vector: Sequence[Rational]) -> Optional[Rational]:
    """||v|| when v . v is the square of a rational, None otherwise."""
    square = norm_squared(vector)
    num_root, den_root = isqrt(square.numerator), isqrt(square.denominator)
    if num_root * num_root == square.numerator and den_root * den_root == square.denominator:
        return Rational(num_root, den_root)
    return None


def format_norm(vector: Sequence[Rational]) -> str:
    """||v|| as text, e.g. '3', '1/2', '√14' or '√(5/2)'."""
    norm = exact_norm(vector)
    if norm is not None:
        return str(norm)
    square = norm_squared(vector)
    if square.is_integer():
        return f"√{square}"
    return f"√({square})"


def _over_norm(value: Rational, vector: Sequence[Rational]) -> str:
    norm = exact_norm(vector)
    if norm is not None:
        return str(value / norm)
    return f"{value}/{format_norm(vector)}"


def _qr_entries(columns: List[Vector], orthogonal: List[Vector]):
    rows, cols = len(columns[0]), len(columns)
    q_entries = [["0"] * cols for _ in range(rows)]
    r_entries = [["0"] * cols for _ in range(cols)]
    for j, u in enumerate(orthogonal):
        if _is_zero_vector(u):
            continue
        for r, value in enumerate(u):
            if not value.is_zero():
                q_entries[r][j] = _over_norm(value, u)
        # R[j][c] = a_c . q_j
        for c in range(j, cols):
            value = dot(columns[c], u)
            if not value.is_zero():
                r_entries[j][c] = _over_norm(value, u)
    return tuple(tuple(row) for row in q_entries), tuple(tuple(row) for row in r_entries)


def gram_schmidt(matrix) -> GramSchmidt:
    """Orthogonalize the columns of a matrix
    
    Example:
        gs = gram_schmidt([[1, 1], [1, 0], [0, 1]])
        gs.basis  # ((1, 1, 0), (1/2, -1/2, 1)) as Rationals
    
    Args:
        matrix (nested sequence):
        
            Any rectangular matrix; its columns are orthogonalized left to right.
            
    Returns:
        (GramSchmidt):
        
            Orthogonal vectors, the exact factorization A = U T, display forms of
            Q and R, and the narrated derivation.
    """
    matrix = to_matrix(matrix)
    columns = list(transpose(matrix))
    n = len(columns)
    steps = [
        DerivationStep("Start", f"We start with the {n} column vectors of A.", f"A = [a_1, ..., a_{n}]", matrix)
    ]
    orthogonal: List[Vector] = []
    coefficients = [[ONE if r == c else ZERO for c in range(n)] for r in range(n)]
    for i, column in enumerate(columns):
        current = column
        formula = f"u_{i + 1} = a_{i + 1}"
        description = f"Initialize u_{i + 1} as a_{i + 1}."
        if i > 0:
            description += " Subtract projections onto previous orthogonal vectors."
        for j, previous in enumerate(orthogonal):
            square = norm_squared(previous)
            if square.is_zero():
                continue
            projection = dot(previous, column)
            coefficient = projection / square
            coefficients[j][i] = coefficient
            current = tuple(value - coefficient * p for value, p in zip(current, previous))
            formula += f" - ({projection}/{square}) u_{j + 1}"
        if _is_zero_vector(current):
            LOG.info(f"Column {i + 1} lies in the span of the previous columns.")
            description += f" The result is the zero vector, so a_{i + 1} adds no new direction."
        orthogonal.append(current)
        steps.append(DerivationStep(f"Step {i + 1}", description, f"{formula} = {_format_vector(current)}"))

    basis = [u for u in orthogonal if not _is_zero_vector(u)]
    steps.append(
        DerivationStep("Orthogonal Basis", f"The {len(basis)} nonzero vectors u_i form an orthogonal basis of Col(A).",
                       "\n".join(_format_vector(u) for u in basis)))
    steps.append(
        DerivationStep("Normalization", "Divide each u_i by its length ||u_i|| = √(u_i · u_i) to obtain Q.",
                       "\n".join(f"||u_{k + 1}|| = {format_norm(u)}" for k, u in enumerate(orthogonal)
                                 if not _is_zero_vector(u))))
    q_entries, r_entries = _qr_entries(columns, orthogonal)
    return GramSchmidt(matrix=matrix,
                       columns=tuple(columns),
                       orthogonal=tuple(orthogonal),
                       coefficients=tuple(tuple(row) for row in coefficients),
                       q_entries=q_entries,
                       r_entries=r_entries,
                       steps=tuple(steps))


def orthogonality_steps(u, v) -> Tuple[DerivationStep, ...]:
    """Narrate dot product, lengths, distance, orthogonality and angle of two vectors.

    Raises:
        DimensionError: If the vectors differ in length
    """
    u, v = to_vector(u), to_vector(v)
    if len(u) != len(v):
        raise DimensionError(f"Vectors must have the same dimension: {len(u)} vs {len(v)}")
    product = dot(u, v)
    terms = " + ".join(f"({a})({b})" for a, b in zip(u, v))
    difference = tuple(a - b for a, b in zip(u, v))
    steps = [
        DerivationStep("1. Inner Product (Dot Product)",
                       "Compute u · v by summing the products of corresponding entries.",
                       f"u · v = {terms} = {product}"),
        DerivationStep("2. Vector Lengths (Norms)", "Compute the length of each vector: ||v|| = √(v · v).",
                       f"||u|| = √{norm_squared(u)} = {format_norm(u)}\n||v|| = √{norm_squared(v)} = {format_norm(v)}"),
        DerivationStep("3. Distance", "Distance between u and v is ||u - v||.",
                       f"dist(u, v) = ||u - v|| = √{norm_squared(difference)} = {format_norm(difference)}"),
        DerivationStep("4. Orthogonality", "Two vectors are orthogonal if their dot product is zero.",
                       f"u · v = {product} => {'Orthogonal' if product.is_zero() else 'Not Orthogonal'}"),
    ]
    u_square, v_square = norm_squared(u), norm_squared(v)
    if not u_square.is_zero() and not v_square.is_zero():
        cosine = float(product) / np.sqrt(float(u_square) * float(v_square))
        angle = np.degrees(np.arccos(np.clip(cosine, -1.0, 1.0)))
        steps.append(
            DerivationStep("5. Angle",
                           "Calculate the angle θ between u and v using cos(θ) = (u · v) / (||u|| ||v||).",
                           f"θ ≈ {angle:.2f}°"))
    return tuple(steps)


def orthogonal_set_steps(matrix) -> Tuple[DerivationStep, ...]:
    """Check every pair of columns for orthogonality; empty for fewer than two columns."""
    matrix = to_matrix(matrix)
    columns = transpose(matrix)
    if len(columns) < 2:
        return ()
    lines = []
    orthogonal = True
    for i in range(len(columns)):
        for j in range(i + 1, len(columns)):
            product = dot(columns[i], columns[j])
            if not product.is_zero():
                orthogonal = False
            lines.append(f"u_{i + 1} · u_{j + 1} = {product} ({'✓' if product.is_zero() else '×'})")
    steps = [
        DerivationStep("Orthogonal Set Check",
                       "A set of vectors {u_1, ..., u_p} is an orthogonal set if each pair of distinct vectors "
                       "is orthogonal.", "\n".join(lines))
    ]
    if orthogonal:
        steps.append(DerivationStep("Conclusion", "All pairs are orthogonal.", "=> The columns form an orthogonal set."))
    else:
        steps.append(
            DerivationStep("Conclusion", "Not all pairs are orthogonal.",
                           "=> The columns DO NOT form an orthogonal set."))
    return tuple(steps)
