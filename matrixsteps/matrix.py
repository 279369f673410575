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
"""Exact rational matrices: construction, input parsing and basic operations

Matrices are tuples of equal-length tuples of Rational (row-major); vectors
are tuples of Rational. Every function in this module returns new tuples, so
results can be shared between step snapshots without copying.
"""

from typing import Sequence, Tuple, Optional
import numpy as np
import sympy

from matrixsteps.rational import Rational, ZERO, ONE

Vector = Tuple[Rational, ...]
Matrix = Tuple[Vector, ...]


class DimensionError(ValueError):
    """Matrix or vector dimensions do not fit the requested operation."""


def to_vector(values) -> Vector:
    """Convert a sequence of numbers to a vector of Rationals."""
    return tuple(Rational.value_of(v) for v in values)


def to_matrix(values) -> Matrix:
    """Convert a rectangular nested sequence to an exact rational matrix.

    Accepts lists or tuples of rows, 2-D numpy arrays and sympy matrices. Each
    entry is converted with Rational.value_of, so strings are parsed as input
    cells.

    Args:
        values (nested sequence, numpy.ndarray or sympy.Matrix):

            Matrix entries, row-major.

    Returns:
        (tuple of tuple of Rational):

            The matrix.

    Raises:
        DimensionError: If the input is empty or its rows differ in length.
    """
    if isinstance(values, sympy.MatrixBase):
        values = values.tolist()
    elif isinstance(values, np.ndarray):
        if values.ndim != 2:
            raise DimensionError(f"Expected a 2-D array, got {values.ndim} dimension(s)")
        values = values.tolist()
    rows = [to_vector(row) for row in values]
    if not rows or not rows[0]:
        raise DimensionError("Matrix must have at least one row and one column")
    width = len(rows[0])
    for i, row in enumerate(rows):
        if len(row) != width:
            raise DimensionError(f"Row {i + 1} has {len(row)} entries, expected {width}")
    return tuple(rows)


def parse_matrix(cells: Sequence[Sequence[str]], rows: Optional[int] = None, cols: Optional[int] = None) -> Matrix:
    """Parse a grid of input cells.

    Input grids may be larger than the matrix being edited, in which case
    only the top-left rows x cols block is read.

    Example:
        A = parse_matrix([['1', '1/2'], ['0.25', '-3']])

    Args:
        cells (list of list of str):

            Cell texts, row-major. See Rational.parse for accepted forms.

        rows (optional (int)):

            Number of rows to read (default: all rows).

        cols (optional (int)):

            Number of columns to read (default: all columns of the first row).

    Returns:
        (tuple of tuple of Rational):

            The parsed matrix.
    """
    if rows is None:
        rows = len(cells)
    if cols is None:
        cols = len(cells[0]) if cells else 0
    if rows > len(cells) or any(cols > len(cells[r]) for r in range(rows)):
        raise DimensionError(f"Input grid is smaller than {rows}x{cols}")
    return to_matrix([[Rational.parse(cells[r][c]) for c in range(cols)] for r in range(rows)])


def to_numpy(matrix: Matrix) -> np.ndarray:
    """Float copy of a rational matrix, e.g. for plotting."""
    return np.array([[float(v) for v in row] for row in matrix], dtype=float)


def to_sympy(matrix: Matrix) -> sympy.Matrix:
    """Exact sympy copy of a rational matrix."""
    return sympy.Matrix([[sympy.Rational(v.numerator, v.denominator) for v in row] for row in matrix])


def shape(matrix: Matrix) -> Tuple[int, int]:
    return len(matrix), len(matrix[0])


def require_square(matrix: Matrix, operation: str) -> int:
    """Return the order of a square matrix, raise DimensionError otherwise."""
    rows, cols = shape(matrix)
    if rows != cols:
        raise DimensionError(f"Matrix must be square for {operation}: {rows}x{cols}")
    return rows


def identity(n: int) -> Matrix:
    return tuple(tuple(ONE if r == c else ZERO for c in range(n)) for r in range(n))


def diagonal(values: Sequence[Rational]) -> Matrix:
    n = len(values)
    return tuple(tuple(values[r] if r == c else ZERO for c in range(n)) for r in range(n))


def is_identity(matrix: Matrix) -> bool:
    for r, row in enumerate(matrix):
        for c, value in enumerate(row):
            if value != (ONE if r == c else ZERO):
                return False
    return True


def transpose(matrix: Matrix) -> Matrix:
    return tuple(zip(*matrix))


def column(matrix: Matrix, index: int) -> Vector:
    return tuple(row[index] for row in matrix)


def from_columns(columns: Sequence[Vector]) -> Matrix:
    """Assemble a matrix whose columns are the given vectors."""
    return transpose(tuple(tuple(c) for c in columns))


def submatrix(matrix: Sequence[Sequence], row: int, col: int) -> tuple:
    """Minor matrix with one row and one column removed.

    Works for any entry type, which lets the characteristic polynomial reuse
    it for polynomial matrices.
    """
    return tuple(
        tuple(value for j, value in enumerate(entries) if j != col) for i, entries in enumerate(matrix) if i != row)


def augment(left: Matrix, right: Matrix) -> Matrix:
    """Place two matrices with equal row counts side by side: [left | right]."""
    if len(left) != len(right):
        raise DimensionError(f"Cannot augment {len(left)} rows with {len(right)} rows")
    return tuple(tuple(a) + tuple(b) for a, b in zip(left, right))


def dot(u: Sequence[Rational], v: Sequence[Rational]) -> Rational:
    if len(u) != len(v):
        raise DimensionError(f"Vectors must have the same dimension: {len(u)} vs {len(v)}")
    total = ZERO
    for a, b in zip(u, v):
        total = total + a * b
    return total


def multiply(matrix_a: Matrix, matrix_b: Matrix) -> Matrix:
    """Matrix product A x B.

    Raises:
        DimensionError: If the column count of A differs from the row count of B
    """
    rows_a, cols_a = shape(matrix_a)
    rows_b, cols_b = shape(matrix_b)
    if cols_a != rows_b:
        raise DimensionError(f"Cannot multiply {rows_a}x{cols_a} by {rows_b}x{cols_b}")
    columns_b = transpose(matrix_b)
    return tuple(tuple(dot(row, col) for col in columns_b) for row in matrix_a)


def multiply_vector(matrix: Matrix, vector: Sequence[Rational]) -> Vector:
    """Matrix-vector product A x v."""
    if len(matrix[0]) != len(vector):
        raise DimensionError(f"Cannot multiply {len(matrix)}x{len(matrix[0])} matrix by vector of size {len(vector)}")
    return tuple(dot(row, vector) for row in matrix)


def format_matrix(matrix: Matrix) -> str:
    """Plain text rendering with right-aligned columns, one row per line."""
    cells = [[str(v) for v in row] for row in matrix]
    widths = [max(len(cells[r][c]) for r in range(len(cells))) for c in range(len(cells[0]))]
    return "\n".join("[ " + "  ".join(cell.rjust(w) for cell, w in zip(row, widths)) + " ]" for row in cells)
