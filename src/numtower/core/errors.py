"""Exceptions raised by the numeric tower."""

__all__ = [
    "NumberTowerError",
    "DivisionByZeroError",
    "Int64OverflowError",
]


class NumberTowerError(Exception):
    """Base class of all errors raised by numtower."""


class DivisionByZeroError(NumberTowerError, ZeroDivisionError):
    """A rational was requested with a zero denominator."""


class Int64OverflowError(NumberTowerError, OverflowError):
    """An integer value does not fit into a signed 64-bit integer."""

    def __init__(self, value: int, context: str = "value"):
        self.value = value
        self.context = context
        super().__init__(f"{context} {value} does not fit into a signed 64-bit integer")
