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
"""Dense single-variable polynomials with floating point coefficients

Polynomials appear only as entries of the characteristic matrix xI - A. This
is where exact arithmetic ends: matrix entries enter through
coerce_rational() and every computation afterwards is done in floating point
with the tolerances from matrixsteps.names.
"""

from numbers import Real
from typing import Sequence, Tuple
import numpy as np
from numpy.polynomial import polynomial as npoly

from matrixsteps.names import POLY_TRIM_TOL, INTEGER_TOL, VARIABLE
from matrixsteps.rational import Rational


def coerce_rational(value: Rational) -> float:
    """Convert an exact matrix entry to a polynomial coefficient."""
    return float(value)


def format_number(value: float) -> str:
    """Integers without decimals, anything else with two decimals."""
    if abs(value - round(value)) < INTEGER_TOL:
        return str(int(round(value)))
    return f"{value:.2f}"


class Polynomial:
    """
    Polynomial with coefficients in ascending order: coeffs[i] belongs to x^i.

    Trailing (highest degree) coefficients with magnitude below POLY_TRIM_TOL
    are dropped on construction, so the zero polynomial is (0.0,) and
    degree() is reliable. Instances are immutable.
    """

    __slots__ = ('_coeffs',)

    def __init__(self, coeffs: Sequence[float]):
        arr = np.array(coeffs, dtype=float).ravel()
        if arr.size == 0:
            arr = np.zeros(1)
        n = arr.size
        while n > 1 and abs(arr[n - 1]) < POLY_TRIM_TOL:
            n -= 1
        arr = arr[:n].copy()
        arr.flags.writeable = False
        self._coeffs = arr

    @classmethod
    def constant(cls, value: float) -> 'Polynomial':
        return cls([value])

    @classmethod
    def linear(cls, constant: float, slope: float = 1.0) -> 'Polynomial':
        """slope * x + constant"""
        return cls([constant, slope])

    @property
    def coeffs(self) -> Tuple[float, ...]:
        return tuple(float(c) for c in self._coeffs)

    @property
    def degree(self) -> int:
        return self._coeffs.size - 1

    def is_zero(self) -> bool:
        return self._coeffs.size == 1 and abs(self._coeffs[0]) < POLY_TRIM_TOL

    def evaluate(self, x: float) -> float:
        return float(npoly.polyval(x, self._coeffs))

    def __call__(self, x: float) -> float:
        return self.evaluate(x)

    def deflate(self, root: float) -> Tuple['Polynomial', float]:
        """Divide by (x - root); return quotient and remainder."""
        quotient, remainder = npoly.polydiv(self._coeffs, np.array([-root, 1.0]))
        return Polynomial(quotient), float(remainder[0])

    def __add__(self, other):
        if not isinstance(other, Polynomial):
            return NotImplemented
        return Polynomial(npoly.polyadd(self._coeffs, other._coeffs))

    def __sub__(self, other):
        if not isinstance(other, Polynomial):
            return NotImplemented
        return Polynomial(npoly.polysub(self._coeffs, other._coeffs))

    def __mul__(self, other):
        if isinstance(other, Polynomial):
            if self.is_zero() or other.is_zero():
                return Polynomial([0.0])
            return Polynomial(np.convolve(self._coeffs, other._coeffs))
        if isinstance(other, Rational):
            return Polynomial(self._coeffs * coerce_rational(other))
        if isinstance(other, Real):
            return Polynomial(self._coeffs * float(other))
        return NotImplemented

    def __rmul__(self, other):
        if isinstance(other, (Real, Rational)):
            return self * other
        return NotImplemented

    def __neg__(self):
        return Polynomial(-self._coeffs)

    def __eq__(self, other):
        if not isinstance(other, Polynomial):
            return NotImplemented
        return np.array_equal(self._coeffs, other._coeffs)

    __hash__ = None

    def to_string(self, variable: str = VARIABLE) -> str:
        """Plain text form, highest degree first, e.g. 'x^2 - 3x + 2'."""
        if self.is_zero():
            return "0"
        terms = []
        for power in range(self.degree, -1, -1):
            coeff = float(self._coeffs[power])
            if abs(coeff) < POLY_TRIM_TOL:
                continue
            magnitude = format_number(abs(coeff))
            if power > 0 and magnitude == "1":
                magnitude = ""
            if power == 0:
                body = format_number(abs(coeff))
            elif power == 1:
                body = f"{magnitude}{variable}"
            else:
                body = f"{magnitude}{variable}^{power}"
            if not terms:
                terms.append(body if coeff > 0 else f"-{body}")
            else:
                terms.append(("+ " if coeff > 0 else "- ") + body)
        return " ".join(terms)

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"Polynomial({list(self.coeffs)})"
