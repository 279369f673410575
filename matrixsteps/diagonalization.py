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
"""Diagonalization A = P D P⁻¹ from eigenvalues and eigenbases"""

from dataclasses import dataclass
from typing import Iterable, Optional, Tuple
import logging

from matrixsteps.rational import Rational
from matrixsteps.matrix import Matrix, to_matrix, require_square, from_columns, diagonal, multiply
from matrixsteps.charpoly import characteristic_polynomial
from matrixsteps.eigen import EigenBasis, eigenbasis, round_eigenvalue
from matrixsteps.steps import DerivationStep

LOG = logging.getLogger(__name__)


def distinct_eigenvalues(roots: Iterable[float]) -> Tuple[Rational, ...]:
    """Round float roots to exact eigenvalues and drop repeats, descending.

    Two roots that round to the same value share one eigenspace, which must
    only be collected once.
    """
    values = []
    for root in sorted(roots, reverse=True):
        value = round_eigenvalue(root)
        if value not in values:
            values.append(value)
    return tuple(values)


@dataclass(frozen=True)
class Diagonalization:
    """Outcome of a diagonalization attempt

    Args:
        matrix: The input matrix A
        is_diagonalizable: False if fewer than n independent eigenvectors were found
        eigenvalues: Distinct eigenvalues after rounding, descending
        eigenbases: One EigenBasis per eigenvalue, same order
        P: Eigenvectors as columns (None if not diagonalizable)
        D: Matching eigenvalues on the diagonal (None if not diagonalizable)
        AP: A x P (None if not diagonalizable)
        PD: P x D (None if not diagonalizable)
        verified: True if AP == PD exactly
        steps: Narrated derivation
    """
    matrix: Matrix
    is_diagonalizable: bool
    eigenvalues: Tuple[Rational, ...]
    eigenbases: Tuple[EigenBasis, ...]
    P: Optional[Matrix]
    D: Optional[Matrix]
    AP: Optional[Matrix]
    PD: Optional[Matrix]
    verified: bool
    steps: Tuple[DerivationStep, ...]


def diagonalize(matrix) -> Diagonalization:
    """Try to diagonalize a square matrix
    
    Eigenvalues come from the characteristic polynomial, are rounded to exact
    values (see distinct_eigenvalues) and are processed in descending order.
    The eigenbasis vectors of every eigenvalue are collected
    in that order; if there are fewer than n of them the matrix is classified
    as not diagonalizable. Otherwise the vectors become the columns of P, the
    matching eigenvalues the diagonal of D, and AP = PD is checked with exact
    rational arithmetic.
    
    Args:
        matrix (nested sequence):
        
            A square matrix.
            
    Returns:
        (Diagonalization):
        
            The classification, P and D when they exist, and the narrated steps.
            
    Raises:
        DimensionError: If the matrix is not square.
    """
    matrix = to_matrix(matrix)
    n = require_square(matrix, "diagonalization")
    steps = [
        DerivationStep("1. Get Eigenvalues", "First, we find the eigenvalues by solving det(xI - A) = 0."),
    ]
    eigenvalues = distinct_eigenvalues(characteristic_polynomial(matrix).roots)
    listing = ", ".join(str(value) for value in eigenvalues)
    steps.append(DerivationStep("Eigenvalues Found", f"The eigenvalues are: {listing}", f"σ(A) = {{{listing}}}"))

    bases = []
    vectors = []
    values = []
    lines = []
    for eigenvalue in eigenvalues:
        basis = eigenbasis(matrix, eigenvalue)
        bases.append(basis)
        lines.append(f"For x = {basis.eigenvalue}:")
        if not basis.vectors:
            lines.append("No eigenvectors found.")
        for vector in basis.vectors:
            vectors.append(vector)
            values.append(basis.eigenvalue)
            lines.append(f"v_{len(vectors)} = [{', '.join(str(v) for v in vector)}]^T")
    steps.append(
        DerivationStep("2. Get Eigenvectors", "We find the eigenvectors for each eigenvalue.", "\n".join(lines)))

    if len(vectors) < n:
        LOG.info(f"Matrix is not diagonalizable: {len(vectors)} eigenvector(s) for order {n}.")
        steps.append(
            DerivationStep(
                "Not Diagonalizable", f"We found only {len(vectors)} linearly independent eigenvectors, but we need "
                f"{n} (the dimension of the matrix). Therefore, A is not diagonalizable."))
        return Diagonalization(matrix=matrix,
                               is_diagonalizable=False,
                               eigenvalues=eigenvalues,
                               eigenbases=tuple(bases),
                               P=None,
                               D=None,
                               AP=None,
                               PD=None,
                               verified=False,
                               steps=tuple(steps))

    P = from_columns(vectors)
    D = diagonal(values)
    steps.append(
        DerivationStep("3. Form Matrix P", "Construct matrix P using the eigenvectors as columns.",
                       "P = [v_1 | v_2 | ... | v_n]", P))
    steps.append(
        DerivationStep("4. Form Matrix D", "Construct diagonal matrix D using the corresponding eigenvalues.",
                       "D = diag(λ_1, λ_2, ..., λ_n)", D))
    AP = multiply(matrix, P)
    PD = multiply(P, D)
    steps.append(
        DerivationStep("5. Verify AP = PD", "Compute AP (Original Matrix × Eigenvector Matrix).", "AP", AP))
    steps.append(DerivationStep("Compute PD", "Compute PD (Eigenvector Matrix × Diagonal Matrix).", "PD", PD))
    verified = AP == PD
    if verified:
        steps.append(
            DerivationStep("Conclusion", "Since AP = PD, we have confirmed the diagonalization. This implies P⁻¹AP = D.",
                           "P^-1 A P = D"))
    else:
        LOG.warning("Diagonalization check failed: AP != PD.")
        steps.append(DerivationStep("Error", "Verification failed. AP != PD.", "AP ≠ PD"))
    return Diagonalization(matrix=matrix,
                           is_diagonalizable=True,
                           eigenvalues=eigenvalues,
                           eigenbases=tuple(bases),
                           P=P,
                           D=D,
                           AP=AP,
                           PD=PD,
                           verified=verified,
                           steps=tuple(steps))
