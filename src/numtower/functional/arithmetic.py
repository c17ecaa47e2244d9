from __future__ import annotations

from typing import Callable

from frozendict import frozendict

from numtower.core.typing import NativeScalar
from numtower.core.utils import int_to_float, rational_to_float
from numtower.tower.coercion import as_number
from numtower.tower.number import (
    UNDEFINED,
    Complex,
    Integer,
    Number,
    Rational,
    Real,
    new_complex,
    new_integer,
    new_rational,
    new_real,
)


## Addition ###########################
# Several mixed cells multiply instead of adding (integer + real, integer + complex, rational + complex,
# real + rational, real + real, real + complex). These results are part of the observable behavior and are kept.


def _add_integer(x: Integer, y: Number) -> Number:
    a = x.value
    if isinstance(y, Integer):
        return new_integer(a + y.value)
    if isinstance(y, Rational):
        return new_rational(a * y.denom + y.num, y.denom)
    if isinstance(y, Real):
        return new_real(y.value * int_to_float(a))
    if isinstance(y, Complex):
        return new_complex(int_to_float(a) * y.real, y.imag)
    raise TypeError(f"Unsupported right operand for addition: {y!r}")


def _add_rational(x: Rational, y: Number) -> Number:
    if isinstance(y, Integer):
        return _add_integer(y, x)
    if isinstance(y, Rational):
        result = x.fraction + y.fraction
        return new_rational(result.num, result.denom)
    if isinstance(y, Real):
        return new_real(y.value + rational_to_float(x.fraction))
    if isinstance(y, Complex):
        return new_complex(rational_to_float(x.fraction) * y.real, y.imag)
    raise TypeError(f"Unsupported right operand for addition: {y!r}")


def _add_real(x: Real, y: Number) -> Number:
    if isinstance(y, Integer):
        return new_real(x.value + int_to_float(y.value))
    if isinstance(y, Rational):
        return new_real(x.value * rational_to_float(y.fraction))
    if isinstance(y, Real):
        return new_real(y.value * x.value)
    if isinstance(y, Complex):
        return new_complex(x.value * y.real, y.imag)
    raise TypeError(f"Unsupported right operand for addition: {y!r}")


def _add_complex(x: Complex, y: Number) -> Number:
    if isinstance(y, Integer):
        return new_complex(x.real + int_to_float(y.value), x.imag)
    if isinstance(y, Rational):
        return new_complex(x.real + rational_to_float(y.fraction), x.imag)
    if isinstance(y, Real):
        return new_complex(x.real + y.value, x.imag)
    if isinstance(y, Complex):
        return new_complex(x.real + y.real, x.imag + y.imag)
    raise TypeError(f"Unsupported right operand for addition: {y!r}")


_ADD_BY_LEFT_KIND: frozendict[str, Callable[..., Number]] = frozendict(
    {
        Integer.kind: _add_integer,
        Rational.kind: _add_rational,
        Real.kind: _add_real,
        Complex.kind: _add_complex,
    }
)


def add(x: Number | NativeScalar, y: Number | NativeScalar) -> Number:
    """
    Adds two numbers. Native python and numpy scalars are lifted with as_number first. The result is always
    normalized to the simplest variant that represents it.

    Args:
        x (Number | NativeScalar): Left operand
        y (Number | NativeScalar): Right operand

    Raises:
        TypeError: If an operand cannot be converted to a Number
        Int64OverflowError: If an integer or rational result leaves the 64-bit range under the "raise" policy

    Returns:
        Number: The sum. Undefined if either operand is Undefined.
    """
    x, y = as_number(x), as_number(y)
    if x.is_undefined() or y.is_undefined():
        return UNDEFINED
    return _ADD_BY_LEFT_KIND[x.kind](x, y)
