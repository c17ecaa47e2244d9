import dataclasses
import math
from fractions import Fraction

import numpy as np
import pytest

from numtower import (
    UNDEFINED,
    Complex,
    DivisionByZeroError,
    Int64OverflowError,
    IntFraction,
    Integer,
    Rational,
    Real,
    Undefined,
    new_complex,
    new_integer,
    new_rational,
    new_real,
)
from numtower.core.constants import INT64_MAX, INT64_MIN

from tests.utils import same_number


def test_new_integer():
    """Test integer constructor keeps the value"""
    result = new_integer(42)
    assert isinstance(result, Integer)
    assert result.value == 42
    assert result.to_python() == 42


def test_new_integer_numpy_scalar():
    """Test integer constructor accepts numpy integers and stores a python int"""
    result = new_integer(np.int32(-5))
    assert result == Integer(-5)
    assert type(result.value) is int  # type: ignore[attr-defined]


def test_new_integer_rejects_bool_and_float():
    """Test integer constructor only takes integers"""
    with pytest.raises(TypeError):
        new_integer(True)
    with pytest.raises(TypeError):
        new_integer(1.0)  # type: ignore[arg-type]


def test_new_integer_bounds():
    """Test the full signed 64-bit range is representable"""
    assert new_integer(INT64_MAX) == Integer(INT64_MAX)
    assert new_integer(INT64_MIN) == Integer(INT64_MIN)
    with pytest.raises(Int64OverflowError):
        new_integer(INT64_MAX + 1)


def test_new_rational_reduces():
    """Test rational constructor reduces to lowest terms"""
    result = new_rational(6, 8)
    assert isinstance(result, Rational)
    assert (result.num, result.denom) == (3, 4)


def test_new_rational_positive_denominator():
    """Test the sign always ends up in the numerator"""
    result = new_rational(1, -2)
    assert isinstance(result, Rational)
    assert (result.num, result.denom) == (-1, 2)
    result = new_rational(-1, -2)
    assert isinstance(result, Rational)
    assert (result.num, result.denom) == (1, 2)


def test_new_rational_collapses_to_integer():
    """Test exact divisions become integers"""
    assert same_number(new_rational(8, 4), Integer(2))
    assert same_number(new_rational(-9, 3), Integer(-3))
    assert same_number(new_rational(9, -3), Integer(-3))
    assert same_number(new_rational(0, 5), Integer(0))
    for i in (-17, -1, 0, 1, 12, INT64_MAX, INT64_MIN):
        assert same_number(new_rational(i, 1), Integer(i))


def test_new_rational_normalization_idempotent():
    """Test scaling numerator and denominator by the same factor gives the same value"""
    for n, d in ((1, 3), (-2, 5), (7, -4), (3, 1)):
        expected = new_rational(n, d)
        for k in (2, -3, 11, -1000):
            assert same_number(new_rational(k * n, k * d), expected)


def test_new_rational_division_by_zero():
    """Test a zero denominator raises"""
    with pytest.raises(DivisionByZeroError):
        new_rational(1, 0)
    with pytest.raises(ZeroDivisionError):
        new_rational(0, 0)


def test_new_rational_min_over_minus_one():
    """Test INT64_MIN / -1 overflows instead of wrapping"""
    with pytest.raises(Int64OverflowError):
        new_rational(INT64_MIN, -1)


def test_new_rational_to_python():
    """Test rational converts to a stdlib fraction"""
    assert new_rational(2, 6).to_python() == Fraction(1, 3)


def test_new_real():
    """Test real constructor keeps values with a fractional part"""
    result = new_real(2.5)
    assert isinstance(result, Real)
    assert result.value == 2.5


def test_new_real_collapses_to_integer():
    """Test whole floats become integers"""
    for i in (-3, 0, 1, 2**53, -(2**62)):
        assert same_number(new_real(float(i)), Integer(i))
    assert same_number(new_real(-0.0), Integer(0))
    assert same_number(new_real(3), Integer(3))


def test_new_real_no_tolerance():
    """Test the whole check compares exactly"""
    result = new_real(1.0 + 2**-52)
    assert isinstance(result, Real)
    assert result.value == 1.0 + 2**-52


def test_new_real_non_finite_stays_real():
    """Test NaN and infinities are kept as reals"""
    nan = new_real(math.nan)
    assert isinstance(nan, Real)
    assert math.isnan(nan.value)
    assert same_number(new_real(math.inf), Real(math.inf))
    assert same_number(new_real(-math.inf), Real(-math.inf))


def test_new_real_out_of_range_whole():
    """Test whole floats outside the 64-bit range overflow"""
    with pytest.raises(Int64OverflowError):
        new_real(1e19)
    with pytest.raises(Int64OverflowError):
        new_real(-1e300)
    # -2**63 is exactly representable and in range
    assert same_number(new_real(-(2.0**63)), Integer(INT64_MIN))


def test_new_real_rejects_complex():
    """Test real constructor refuses complex values"""
    with pytest.raises(TypeError):
        new_real(1j)  # type: ignore[arg-type]


def test_new_complex():
    """Test complex constructor keeps nonzero imaginary parts"""
    result = new_complex(1.0, 2.0)
    assert isinstance(result, Complex)
    assert (result.real, result.imag) == (1.0, 2.0)
    assert result.to_python() == 1 + 2j


def test_new_complex_collapses():
    """Test zero imaginary part delegates to the real constructor"""
    for x in (0.0, -0.0, 1.5, 3.0, -7.25, math.inf):
        assert same_number(new_complex(x, 0.0), new_real(x))
    assert same_number(new_complex(2.5, -0.0), Real(2.5))
    assert same_number(new_complex(4.0, 0.0), Integer(4))


def test_new_complex_nan_imaginary_stays_complex():
    """Test NaN imaginary part is not zero"""
    result = new_complex(1.0, math.nan)
    assert isinstance(result, Complex)


def test_undefined():
    """Test the undefined singleton"""
    assert isinstance(UNDEFINED, Undefined)
    assert Undefined() == UNDEFINED
    assert UNDEFINED.to_python() is None
    assert UNDEFINED.is_undefined()
    assert not new_integer(0).is_undefined()


def test_variants_are_immutable():
    """Test values cannot be modified after construction"""
    value = new_integer(1)
    with pytest.raises(dataclasses.FrozenInstanceError):
        value.value = 2  # type: ignore[misc]
    value = new_complex(1.0, 1.0)
    with pytest.raises(dataclasses.FrozenInstanceError):
        value.imag = 0.0  # type: ignore[misc]


def test_structural_equality_and_hash():
    """Test equality compares variant and payload"""
    assert new_integer(1) == new_rational(3, 3)
    assert new_integer(1) != Real(1.5)
    assert new_rational(1, 2) == new_rational(2, 4)
    assert new_rational(1, 2) != new_real(0.5)
    assert len({new_integer(2), new_rational(4, 2), new_real(2.0), new_complex(2.0, 0.0)}) == 1


def test_kind():
    """Test every variant names its kind"""
    assert UNDEFINED.kind == "undefined"
    assert new_integer(1).kind == "integer"
    assert new_rational(1, 2).kind == "rational"
    assert new_real(0.5).kind == "real"
    assert new_complex(0.5, 1.0).kind == "complex"


def test_direct_construction_is_validated():
    """Test invariants hold for directly constructed variants"""
    with pytest.raises(ValueError):
        Real(3.0)
    with pytest.raises(ValueError):
        Complex(1.5, 0.0)
    with pytest.raises(ValueError):
        Rational(IntFraction(2, 4))
    with pytest.raises(ValueError):
        Rational(IntFraction(1, -2))
    with pytest.raises(ValueError):
        Rational(IntFraction(4, 1))
    with pytest.raises(ValueError):
        Integer(INT64_MAX + 1)
    with pytest.raises(TypeError):
        Integer(1.5)  # type: ignore[arg-type]
    with pytest.raises(TypeError):
        Real(2)  # type: ignore[arg-type]
