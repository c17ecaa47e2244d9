from numtower.core.errors import DivisionByZeroError, Int64OverflowError, NumberTowerError
from numtower.core.fraction import IntFraction
from numtower.functional.arithmetic import add
from numtower.tower.coercion import as_number
from numtower.tower.number import (
    UNDEFINED,
    Complex,
    Integer,
    Number,
    Rational,
    Real,
    Undefined,
    new_complex,
    new_integer,
    new_rational,
    new_real,
)

__all__ = [
    "Number",
    "Undefined",
    "Integer",
    "Rational",
    "Real",
    "Complex",
    "UNDEFINED",
    "new_integer",
    "new_rational",
    "new_real",
    "new_complex",
    "add",
    "as_number",
    "IntFraction",
    "NumberTowerError",
    "DivisionByZeroError",
    "Int64OverflowError",
]
