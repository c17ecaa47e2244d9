# ruff: noqa: F811
from fractions import Fraction
from types import NoneType
from typing import Any, Union

import numpy as np
from plum import Dispatcher

from numtower.core.fraction import IntFraction
from numtower.core.typing import NativeScalar
from numtower.tower.number import (
    UNDEFINED,
    Number,
    new_complex,
    new_integer,
    new_rational,
    new_real,
)

dispatch = Dispatcher()


def is_number_like(x: Any) -> bool:
    """True for values that as_number lifts into the tower. Booleans are not numbers here."""
    if isinstance(x, bool | np.bool_):
        return False
    return isinstance(x, Number) or isinstance(x, NativeScalar)


@dispatch
def as_number(x: Number) -> Number:
    return x


@dispatch
def as_number(x: NoneType) -> Number:
    return UNDEFINED


@dispatch
def as_number(x: Union[int, np.integer]) -> Number:
    return new_integer(x)


@dispatch
def as_number(x: Union[float, np.floating]) -> Number:
    return new_real(x)


@dispatch
def as_number(x: Union[complex, np.complexfloating]) -> Number:
    return new_complex(x.real, x.imag)


@dispatch
def as_number(x: Fraction) -> Number:
    return new_rational(x.numerator, x.denominator)


@dispatch
def as_number(x: IntFraction) -> Number:
    return new_rational(x.num, x.denom)


@dispatch
def as_number(x: bool) -> Number:
    raise TypeError(f"Cannot use boolean {x!r} as a number")


@dispatch
def as_number(x: np.bool_) -> Number:
    raise TypeError(f"Cannot use boolean {x!r} as a number")


@dispatch
def as_number(x: object) -> Number:
    raise TypeError(f"Cannot convert {type(x).__name__} to a number: {x!r}")
