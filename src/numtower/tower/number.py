"""
The five variants of a Number and the smart constructors that keep them normalized.

A value is always stored in the simplest variant that represents it exactly:
    new_rational(4, 2)   -> Integer(value=2)
    new_real(3.0)        -> Integer(value=3)
    new_complex(2.5, 0.) -> Real(value=2.5)

Build values with new_integer, new_rational, new_real and new_complex. Constructing a variant directly is
validated against the same invariants, but never downcasts.
"""

from __future__ import annotations

import logging
import math
from abc import ABC, abstractmethod
from dataclasses import dataclass
from fractions import Fraction
from typing import Any, ClassVar

from numtower.core.errors import DivisionByZeroError
from numtower.core.fraction import IntFraction
from numtower.core.typing import IntegerLike, RealLike
from numtower.core.utils import (
    as_float,
    as_int,
    checked_int64,
    fits_int64,
    float_to_int64,
    is_whole,
)

logger = logging.getLogger(__name__)


class Number(ABC):
    kind: ClassVar[str]

    @abstractmethod
    def to_python(self) -> None | int | Fraction | float | complex:
        """Returns the value as a native python scalar."""

    def is_undefined(self) -> bool:
        return False

    def __add__(self, other: Any) -> "Number":
        from numtower.functional.arithmetic import add
        from numtower.tower.coercion import is_number_like

        if not is_number_like(other):
            return NotImplemented
        return add(self, other)

    def __radd__(self, other: Any) -> "Number":
        from numtower.functional.arithmetic import add
        from numtower.tower.coercion import is_number_like

        if not is_number_like(other):
            return NotImplemented
        return add(other, self)


@dataclass(frozen=True)
class Undefined(Number):
    kind: ClassVar[str] = "undefined"

    def to_python(self) -> None:
        return None

    def is_undefined(self) -> bool:
        return True


@dataclass(frozen=True)
class Integer(Number):
    value: int
    kind: ClassVar[str] = "integer"

    def __post_init__(self):
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise TypeError(f"Integer payload must be int, got {type(self.value).__name__}")
        if not fits_int64(self.value):
            raise ValueError(f"Integer payload {self.value} does not fit into 64 bits, use new_integer")

    def to_python(self) -> int:
        return self.value


@dataclass(frozen=True)
class Rational(Number):
    fraction: IntFraction
    kind: ClassVar[str] = "rational"

    def __post_init__(self):
        if not isinstance(self.fraction, IntFraction):
            raise TypeError(f"Rational payload must be IntFraction, got {type(self.fraction).__name__}")
        num, denom = self.fraction
        if denom <= 0 or math.gcd(num, denom) != 1:
            raise ValueError(f"Rational payload {self.fraction} is not in lowest terms, use new_rational")
        if self.fraction.is_whole():
            raise ValueError(f"Rational payload {self.fraction} is whole, use new_rational")
        if not (fits_int64(num) and fits_int64(denom)):
            raise ValueError(f"Rational payload {self.fraction} does not fit into 64 bits, use new_rational")

    @property
    def num(self) -> int:
        return self.fraction.num

    @property
    def denom(self) -> int:
        return self.fraction.denom

    def to_python(self) -> Fraction:
        return self.fraction.to_fraction()


@dataclass(frozen=True)
class Real(Number):
    value: float
    kind: ClassVar[str] = "real"

    def __post_init__(self):
        if not isinstance(self.value, float):
            raise TypeError(f"Real payload must be float, got {type(self.value).__name__}")
        if is_whole(self.value):
            raise ValueError(f"Real payload {self.value} is whole, use new_real")

    def to_python(self) -> float:
        return self.value


@dataclass(frozen=True)
class Complex(Number):
    real: float
    imag: float
    kind: ClassVar[str] = "complex"

    def __post_init__(self):
        if not (isinstance(self.real, float) and isinstance(self.imag, float)):
            raise TypeError("Complex payload must be a pair of floats")
        if self.imag == 0.0:
            raise ValueError("Complex payload has zero imaginary part, use new_complex")

    def to_python(self) -> complex:
        return complex(self.real, self.imag)


UNDEFINED = Undefined()


def new_integer(value: IntegerLike) -> Number:
    value = as_int(value, context="integer")
    return Integer(checked_int64(value, context="integer"))


def new_rational(numerator: IntegerLike, denominator: IntegerLike) -> Number:
    """
    Creates the normalized number numerator / denominator.

    Args:
        numerator (IntegerLike): Signed 64-bit numerator
        denominator (IntegerLike): Signed 64-bit denominator, must not be zero

    Raises:
        DivisionByZeroError: If the denominator is zero

    Returns:
        Number: Integer if the division is exact, otherwise Rational in lowest terms with a positive denominator
    """
    numerator = checked_int64(as_int(numerator, context="numerator"), context="numerator")
    denominator = checked_int64(as_int(denominator, context="denominator"), context="denominator")
    if denominator == 0:
        raise DivisionByZeroError(f"Cannot create rational {numerator}/0")
    if numerator % denominator == 0:
        logger.debug("Rational %d/%d is whole, downcasting to integer", numerator, denominator)
        # exact quotient, so floor and truncating division agree
        return new_integer(numerator // denominator)
    reduced = IntFraction(numerator, denominator).reduced()
    if not (fits_int64(reduced.num) and fits_int64(reduced.denom)):
        # only the sign flip of INT64_MIN over a negative denominator gets here
        return new_rational(
            checked_int64(reduced.num, context="numerator"),
            checked_int64(reduced.denom, context="denominator"),
        )
    return Rational(reduced)


def new_real(value: RealLike) -> Number:
    value = as_float(value, context="real")
    if is_whole(value):
        logger.debug("Real %r is whole, downcasting to integer", value)
        return Integer(float_to_int64(value))
    return Real(value)


def new_complex(real: RealLike, imaginary: RealLike) -> Number:
    real = as_float(real, context="real part")
    imaginary = as_float(imaginary, context="imaginary part")
    if imaginary == 0.0:
        logger.debug("Complex %r has zero imaginary part, downcasting to real", complex(real, imaginary))
        return new_real(real)
    return Complex(real, imaginary)
