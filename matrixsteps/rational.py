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
"""Exact rational numbers for step-by-step matrix computations.

Rational wraps Python's fractions.Fraction, which keeps every value in lowest
terms with a positive denominator. On top of it, this module provides the
parsing rules used for matrix input cells (integers, "n/d" fractions and
best-effort decimals on a fixed denominator).
"""

from fractions import Fraction
from numbers import Integral, Real
from typing import Union
import sympy

from matrixsteps.names import DECIMAL_SCALE


class Rational:
    """
    Immutable exact fraction.

    Arithmetic accepts other Rationals and plain integers on either side and
    always returns a new Rational in lowest terms. A zero denominator, either
    at construction or as a divisor, raises ArithmeticError.

    Floats are never mixed in: arithmetic with a float raises TypeError and
    comparison returns NotImplemented, so Rational(1, 2) == 0.5 is False.
    Convert explicitly with Rational.value_of() or float().
    """

    __slots__ = ('_fraction',)

    def __init__(self, numerator: Union[int, 'Rational', Fraction] = 0, denominator: int = None):
        """
        Args:
            numerator: An integer numerator, or another Rational/Fraction to copy
            denominator: Optional integer denominator (default 1)
        """
        if denominator is None:
            if isinstance(numerator, Rational):
                fraction = numerator._fraction
            elif isinstance(numerator, Fraction):
                fraction = numerator
            elif isinstance(numerator, Integral):
                fraction = Fraction(int(numerator))
            else:
                raise TypeError(f"Cannot build Rational from {type(numerator).__name__}, use Rational.value_of")
        else:
            if denominator == 0:
                raise ArithmeticError("Denominator cannot be zero")
            fraction = Fraction(int(numerator), int(denominator))
        object.__setattr__(self, '_fraction', fraction)

    def __setattr__(self, name, value):
        raise AttributeError("Rational is immutable")

    @property
    def numerator(self) -> int:
        return self._fraction.numerator

    @property
    def denominator(self) -> int:
        return self._fraction.denominator

    def to_fraction(self) -> Fraction:
        return self._fraction

    def signum(self) -> int:
        """Return sign: -1, 0, or 1"""
        if self._fraction < 0:
            return -1
        elif self._fraction > 0:
            return 1
        return 0

    def is_zero(self) -> bool:
        return self._fraction.numerator == 0

    def is_one(self) -> bool:
        return self._fraction == 1

    def is_integer(self) -> bool:
        return self._fraction.denominator == 1

    def negate(self) -> 'Rational':
        return Rational(-self._fraction)

    def abs(self) -> 'Rational':
        return Rational(abs(self._fraction))

    def invert(self) -> 'Rational':
        """Return the multiplicative inverse (1/this)."""
        if self.is_zero():
            raise ArithmeticError("Division by zero")
        return Rational(1 / self._fraction)

    def add(self, other) -> 'Rational':
        return Rational(self._fraction + _as_fraction(other))

    def subtract(self, other) -> 'Rational':
        return Rational(self._fraction - _as_fraction(other))

    def multiply(self, other) -> 'Rational':
        return Rational(self._fraction * _as_fraction(other))

    def divide(self, other) -> 'Rational':
        divisor = _as_fraction(other)
        if divisor == 0:
            raise ArithmeticError("Division by zero")
        return Rational(self._fraction / divisor)

    # Python operator overloading
    def __add__(self, other):
        if not _is_operand(other):
            return NotImplemented
        return self.add(other)

    def __radd__(self, other):
        if not _is_operand(other):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other):
        if not _is_operand(other):
            return NotImplemented
        return self.subtract(other)

    def __rsub__(self, other):
        if not _is_operand(other):
            return NotImplemented
        return Rational(_as_fraction(other) - self._fraction)

    def __mul__(self, other):
        if not _is_operand(other):
            return NotImplemented
        return self.multiply(other)

    def __rmul__(self, other):
        if not _is_operand(other):
            return NotImplemented
        return self.multiply(other)

    def __truediv__(self, other):
        if not _is_operand(other):
            return NotImplemented
        return self.divide(other)

    def __rtruediv__(self, other):
        if not _is_operand(other):
            return NotImplemented
        return Rational(other).divide(self)

    def __neg__(self):
        return self.negate()

    def __abs__(self):
        return self.abs()

    def __bool__(self):
        return not self.is_zero()

    def __eq__(self, other) -> bool:
        if _is_operand(other):
            return self._fraction == _as_fraction(other)
        return NotImplemented

    def __lt__(self, other) -> bool:
        if _is_operand(other):
            return self._fraction < _as_fraction(other)
        return NotImplemented

    def __le__(self, other) -> bool:
        if _is_operand(other):
            return self._fraction <= _as_fraction(other)
        return NotImplemented

    def __gt__(self, other) -> bool:
        if _is_operand(other):
            return self._fraction > _as_fraction(other)
        return NotImplemented

    def __ge__(self, other) -> bool:
        if _is_operand(other):
            return self._fraction >= _as_fraction(other)
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._fraction)

    def __float__(self) -> float:
        return float(self._fraction)

    def __str__(self) -> str:
        if self._fraction.denominator == 1:
            return str(self._fraction.numerator)
        return f"{self._fraction.numerator}/{self._fraction.denominator}"

    def __repr__(self) -> str:
        return f"Rational({self._fraction.numerator}, {self._fraction.denominator})"

    def __reduce__(self):
        return (Rational, (self.numerator, self.denominator))

    @staticmethod
    def parse(text: str) -> 'Rational':
        """
        Parse the text of a matrix input cell.

        Accepted forms are plain integers ("-3"), fractions ("3/4") and
        decimals. Decimals are a best-effort conversion: the value is scaled
        by DECIMAL_SCALE and truncated, so "0.5" becomes 5000/10000 = 1/2 and
        "0.33333" becomes 3333/10000. An empty cell reads as zero.

        Args:
            text: Cell content

        Returns:
            The parsed Rational

        Raises:
            ArithmeticError: If a fraction has a zero denominator
            ValueError: If the text is not a number
        """
        s = text.strip()
        if not s:
            return ZERO
        if '/' in s:
            parts = s.split('/')
            if len(parts) != 2:
                raise ValueError(f"Invalid fraction format: {text}")
            try:
                numerator, denominator = int(parts[0]), int(parts[1])
            except ValueError as exc:
                raise ValueError(f"Invalid fraction format: {text}") from exc
            return Rational(numerator, denominator)
        try:
            return Rational(int(s))
        except ValueError:
            pass
        try:
            return Rational(int(float(s) * DECIMAL_SCALE), DECIMAL_SCALE)
        except (ValueError, OverflowError) as exc:
            raise ValueError(f"Invalid number: {text}") from exc

    @staticmethod
    def value_of(value) -> 'Rational':
        """
        Factory method to create a Rational from the numeric types found at
        the input boundary: Rational, Fraction, int (including numpy integers),
        sympy.Rational, str (see parse) and float (including numpy floats).
        Floats are converted with Fraction.limit_denominator().
        """
        if isinstance(value, Rational):
            return value
        elif isinstance(value, str):
            return Rational.parse(value)
        elif isinstance(value, (Fraction, Integral)):
            return Rational(value)
        elif isinstance(value, sympy.Rational):
            return Rational(int(value.p), int(value.q))
        elif isinstance(value, Real):
            return Rational(Fraction(float(value)).limit_denominator())
        raise TypeError(f"Cannot convert {type(value).__name__} to Rational")


def _is_operand(value) -> bool:
    return isinstance(value, (Rational, Fraction, Integral))


def _as_fraction(value) -> Fraction:
    if isinstance(value, Rational):
        return value._fraction
    if isinstance(value, Fraction):
        return value
    if isinstance(value, Integral):
        return Fraction(int(value))
    raise TypeError(f"Unsupported operand type {type(value).__name__}")


ZERO = Rational(0)
ONE = Rational(1)
