import struct

from numtower import (
    UNDEFINED,
    Complex,
    Number,
    Real,
    new_complex,
    new_integer,
    new_rational,
    new_real,
)


def float_bits(x: float) -> bytes:
    return struct.pack("<d", x)


def same_number(a: Number, b: Number) -> bool:
    """Same variant and bit-identical payload, so NaN and signed zeros compare as stored."""
    if type(a) is not type(b):
        return False
    if isinstance(a, Real):
        return float_bits(a.value) == float_bits(b.value)  # type: ignore[attr-defined]
    if isinstance(a, Complex):
        return float_bits(a.real) == float_bits(b.real) and float_bits(a.imag) == float_bits(b.imag)  # type: ignore[attr-defined]
    return a == b


def one_of_each() -> list[Number]:
    return [
        UNDEFINED,
        new_integer(7),
        new_rational(-3, 4),
        new_real(2.5),
        new_complex(1.5, -2.0),
    ]