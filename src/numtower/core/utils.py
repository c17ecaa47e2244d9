from __future__ import annotations

import logging

import numpy as np

from numtower.core import flags
from numtower.core.constants import INT64_MAX, INT64_MIN, OVERFLOW_POLICIES
from numtower.core.errors import Int64OverflowError
from numtower.core.fraction import IntFraction
from numtower.core.typing import IntegerLike, RealLike

logger = logging.getLogger(__name__)


def fits_int64(value: int) -> bool:
    return INT64_MIN <= value <= INT64_MAX


def checked_int64(value: int, context: str = "value") -> int:
    """
    Returns the value unchanged if it fits into a signed 64-bit integer. Otherwise the global overflow policy
    decides: "raise" raises Int64OverflowError, "saturate" clamps to the nearest bound.

    Args:
        value (int): Integer to check
        context (str): Description of the value used in error and log messages

    Returns:
        int: The value, or the clamped value under the "saturate" policy
    """
    if fits_int64(value):
        return value
    policy = flags.OVERFLOW_POLICY
    if policy not in OVERFLOW_POLICIES:
        raise ValueError(f"Unknown overflow policy {policy!r}, expected one of {OVERFLOW_POLICIES}")
    if policy == "raise":
        raise Int64OverflowError(value, context)
    clamped = INT64_MAX if value > INT64_MAX else INT64_MIN
    logger.warning("Saturating %s %d to %d", context, value, clamped)
    return clamped


def as_int(value: IntegerLike, context: str = "value") -> int:
    """Converts an integer-like argument to a python int, rejecting bools and non-integers."""
    if isinstance(value, bool | np.bool_) or not isinstance(value, IntegerLike):
        raise TypeError(f"Expected an integer for {context}, got {type(value).__name__}: {value!r}")
    return int(value)


def as_float(value: RealLike, context: str = "value") -> float:
    """Converts a real-valued argument to a python float, rejecting bools and complex values."""
    if isinstance(value, bool | np.bool_) or not isinstance(value, RealLike):
        raise TypeError(f"Expected a real number for {context}, got {type(value).__name__}: {value!r}")
    try:
        return float(value)
    except OverflowError:
        # python ints beyond the float range are far outside the 64-bit range as well
        return float(checked_int64(int(value), context=context))


def is_whole(value: float) -> bool:
    # exact comparison, no tolerance
    if not np.isfinite(value):
        return False
    return bool(np.floor(value) == value)


def float_to_int64(value: float) -> int:
    """Casts a finite whole float to int, applying the overflow policy outside of the 64-bit range."""
    assert is_whole(value), f"Internal error, please report: {value} is not a finite whole float"
    return checked_int64(int(value), context="float")


def int_to_float(value: int) -> float:
    return float(value)


def rational_to_float(fraction: IntFraction) -> float:
    return fraction.value()
