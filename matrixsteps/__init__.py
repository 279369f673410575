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
"""matrixsteps: exact rational linear algebra with step-by-step traces"""

from .names import *
from .rational import Rational
from .matrix import (DimensionError, to_matrix, to_vector, parse_matrix, to_numpy, to_sympy, identity, transpose,
                     multiply, multiply_vector, dot, format_matrix)
from .steps import Step, DerivationStep, StepTrace
from .polynomial import Polynomial
from .row_reduction import (GaussJordan, RankNullity, rref_steps, rref, pivot_columns, free_columns, nullspace_basis,
                            rank, nullity, rank_nullity, inverse_steps, inverse)
from .determinant import determinant, cofactor_steps, sarrus_steps
from .charpoly import (CharacteristicPolynomial, characteristic_matrix, characteristic_polynomial, find_roots,
                       algebraic_multiplicity, factored_form, eigenvalues)
from .eigen import EigenBasis, eigenbasis, round_eigenvalue
from .subspaces import (FundamentalSubspaces, fundamental_subspaces, column_space, row_space, null_space,
                        left_null_space, are_orthogonal)
from .diagonalization import Diagonalization, diagonalize, distinct_eigenvalues
from .lu import LUStep, LUDecomposition, lu_decomposition
from .gram_schmidt import (GramSchmidt, gram_schmidt, norm_squared, exact_norm, format_norm, orthogonality_steps,
                           orthogonal_set_steps)
