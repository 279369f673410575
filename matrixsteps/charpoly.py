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
"""Characteristic polynomial p(x) = det(xI - A) and its real roots

The characteristic matrix xI - A is built over Polynomial and its
determinant is expanded along the first row exactly like a rational
determinant. Root finding is intentionally limited to what small integer
matrices need:

    degree 1     closed form
    degree 2     quadratic formula (no roots for a negative discriminant,
                 roots closer than ROOT_TOL merge into one double root)
    degree >= 3  integer sweep over ROOT_SEARCH_RANGE, accepting |p(x)| < ROOT_TOL

Irrational or large roots of cubic and higher polynomials are therefore not
found. An empty root set is a valid result, e.g. for rotations.
"""

from dataclasses import dataclass
from typing import Optional, Sequence, Tuple
import logging
import math

from matrixsteps.names import ROOT_TOL, INTEGER_TOL, ROOT_SEARCH_RANGE, VARIABLE
from matrixsteps.matrix import Matrix, to_matrix, require_square, submatrix
from matrixsteps.polynomial import Polynomial, coerce_rational, format_number
from matrixsteps.determinant import expand_along_first_row
from matrixsteps.steps import DerivationStep

LOG = logging.getLogger(__name__)


@dataclass(frozen=True)
class CharacteristicPolynomial:
    """Characteristic polynomial of a square matrix with its derivation

    Args:
        matrix: The input matrix A
        characteristic_matrix: xI - A with Polynomial entries
        polynomial: p(x) = det(xI - A)
        roots: Real roots found, distinct and ascending
        factored: Factored display form if all roots are integers, else None
        steps: Narrated derivation
    """
    matrix: Matrix
    characteristic_matrix: tuple
    polynomial: Polynomial
    roots: Tuple[float, ...]
    factored: Optional[str]
    steps: Tuple[DerivationStep, ...]

    @property
    def degree(self) -> int:
        return self.polynomial.degree

    @property
    def spectrum(self) -> Tuple[float, ...]:
        """Found roots, each repeated by its algebraic multiplicity."""
        spectrum = []
        for root in self.roots:
            spectrum.extend([root] * algebraic_multiplicity(self.polynomial, root))
        return tuple(spectrum)


def characteristic_matrix(matrix) -> tuple:
    """xI - A as a matrix of polynomials: x - a_ii on the diagonal, -a_ij elsewhere."""
    matrix = to_matrix(matrix)
    n = require_square(matrix, "the characteristic polynomial")
    return tuple(
        tuple(
            Polynomial.linear(-coerce_rational(matrix[r][c])) if r == c else Polynomial.constant(
                -coerce_rational(matrix[r][c])) for c in range(n)) for r in range(n))


def find_roots(polynomial: Polynomial) -> Tuple[float, ...]:
    """Real roots of a polynomial, distinct and in ascending order (see module docstring for limits)."""
    degree = polynomial.degree
    coeffs = polynomial.coeffs
    if degree < 1:
        return ()
    if degree == 1:
        return (-coeffs[0] / coeffs[1],)
    if degree == 2:
        c, b, a = coeffs
        delta = b * b - 4 * a * c
        if delta < 0:
            return ()
        r1 = (-b + math.sqrt(delta)) / (2 * a)
        r2 = (-b - math.sqrt(delta)) / (2 * a)
        if abs(r1 - r2) < ROOT_TOL:
            # double root split by rounding noise in the coefficients
            return (-b / (2 * a),)
        return tuple(sorted((r1, r2)))
    low, high = ROOT_SEARCH_RANGE
    return tuple(float(x) for x in range(low, high + 1) if abs(polynomial.evaluate(float(x))) < ROOT_TOL)


def algebraic_multiplicity(polynomial: Polynomial, root: float) -> int:
    """Number of times (x - root) divides the polynomial, within ROOT_TOL."""
    count = 0
    current = polynomial
    while current.degree >= 1:
        quotient, remainder = current.deflate(root)
        if abs(remainder) >= ROOT_TOL:
            break
        count += 1
        current = quotient
    return count


def is_integer_root(root: float) -> bool:
    return abs(root - round(root)) < INTEGER_TOL


def factored_form(polynomial: Polynomial, roots: Sequence[float], variable: str = VARIABLE) -> Optional[str]:
    """
    Product of linear factors, e.g. '(x - 1)(x + 2)', when every found root is
    an integer and there are as many roots as the degree. Returns None
    otherwise.
    """
    if not roots or len(roots) != polynomial.degree or not all(is_integer_root(r) for r in roots):
        return None
    factors = []
    for root in roots:
        value = int(round(root))
        if value == 0:
            factors.append(variable)
        elif value > 0:
            factors.append(f"({variable} - {value})")
        else:
            factors.append(f"({variable} + {-value})")
    return "".join(factors)


def format_roots(roots: Sequence[float]) -> str:
    return ", ".join(format_number(r) for r in roots)


def _format_poly_matrix(matrix, variable: str) -> str:
    return "; ".join(", ".join(entry.to_string(variable) for entry in row) for row in matrix)


def _determinant_steps(poly_matrix, result: Polynomial, variable: str):
    n = len(poly_matrix)
    if n == 1:
        return []
    if n == 2:
        (a, b), (c, d) = poly_matrix
        return [
            DerivationStep(
                "Determinant Calculation", "Using ad - bc:",
                f"= ({a.to_string(variable)})({d.to_string(variable)}) - ({b.to_string(variable)})({c.to_string(variable)})"),
            DerivationStep("Simplification", "Simplify the expression:", f"= {result.to_string(variable)}"),
        ]
    parts = []
    for col, entry in enumerate(poly_matrix[0]):
        if entry.is_zero():
            continue
        sign = "+" if col % 2 == 0 else "-"
        minor = f"|{_format_poly_matrix(submatrix(poly_matrix, 0, col), variable)}|"
        if not parts:
            prefix = "- " if sign == "-" else ""
        else:
            prefix = f"{sign} "
        parts.append(f"{prefix}({entry.to_string(variable)}){minor}")
    return [
        DerivationStep("Cofactor Expansion", "Using cofactor expansion along the first row, we get:",
                       "= " + " ".join(parts)),
        DerivationStep("Polynomial Expansion", "Expanding the terms:", f"= {result.to_string(variable)}"),
    ]


def characteristic_polynomial(matrix, variable: str = VARIABLE) -> CharacteristicPolynomial:
    """Derive the characteristic polynomial of a square matrix and find its real roots
    
    Example:
        cp = characteristic_polynomial([[0, 1], [-1, 0]])
        str(cp.polynomial)  # 'x^2 + 1'
        cp.roots            # ()
    
    Args:
        matrix (nested sequence):
        
            A square matrix.
            
        variable (optional (str)):
        
            Name of the polynomial variable used in the narration (default: 'x').
            
    Returns:
        (CharacteristicPolynomial):
        
            Characteristic matrix, polynomial, roots, factored form and the
            narrated derivation.
            
    Raises:
        DimensionError: If the matrix is not square.
    """
    matrix = to_matrix(matrix)
    n = require_square(matrix, "the characteristic polynomial")
    poly_matrix = characteristic_matrix(matrix)
    polynomial = expand_along_first_row(poly_matrix, Polynomial.constant(0.0))
    roots = find_roots(polynomial)
    factored = factored_form(polynomial, roots, variable)

    steps = [
        DerivationStep("Characteristic Matrix", f"Note that {variable}I_{n} - A = ",
                       f"[{_format_poly_matrix(poly_matrix, variable)}]"),
        DerivationStep("Characteristic Polynomial Setup", f"Thus, p({variable}) = det({variable}I_{n} - A) =",
                       f"p({variable}) = |{_format_poly_matrix(poly_matrix, variable)}|"),
    ]
    steps.extend(_determinant_steps(poly_matrix, polynomial, variable))
    if n == 1:
        steps.append(DerivationStep("Polynomial", "The determinant of a 1x1 matrix is its entry:",
                                    f"= {polynomial.to_string(variable)}"))
    if factored is not None and n > 1:
        steps.append(DerivationStep("Factoring", "Factoring the polynomial:", f"= {factored}"))
    if roots:
        solutions = " or ".join(format_number(r) for r in roots)
        steps.append(
            DerivationStep("Roots",
                           f"Setting p({variable}) = 0 and solving for {variable} gives {variable} = {solutions}. Therefore,",
                           f"σ(A) = {{{format_roots(roots)}}}"))
    else:
        LOG.info(f"No real eigenvalues found for p({variable}) = {polynomial.to_string(variable)}.")
        steps.append(
            DerivationStep("Roots", f"Setting p({variable}) = 0 gives no real solutions {variable}. Therefore,",
                           "σ(A) = {}"))
    return CharacteristicPolynomial(matrix=matrix,
                                    characteristic_matrix=poly_matrix,
                                    polynomial=polynomial,
                                    roots=roots,
                                    factored=factored,
                                    steps=tuple(steps))


def eigenvalues(matrix) -> Tuple[float, ...]:
    """Real eigenvalues found for a square matrix, distinct and ascending."""
    return characteristic_polynomial(matrix).roots
