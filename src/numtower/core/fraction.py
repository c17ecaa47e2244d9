from __future__ import annotations
import math
from fractions import Fraction
from typing import Any, NamedTuple, Union, overload


class IntFraction(NamedTuple):
    num: int
    denom: int

    def __repr__(self) -> str:
        return str(self)

    def __str__(self) -> str:
        if self.num == 0:
            return "0"
        if self.denom == 1:
            return str(self.num)
        return f"({self.num}/{self.denom})"

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, int | IntFraction | Fraction):
            return False
        if isinstance(other, IntFraction):
            self_red = self.reduced()
            other_red = other.reduced()
            return self_red.num == other_red.num and self_red.denom == other_red.denom
        if isinstance(other, Fraction):
            return self == IntFraction.from_fraction(other)
        self_red = self.reduced()
        if self_red.denom != 1:
            return False
        return self_red.num == other

    def __ne__(self, other: Any) -> bool:
        return not self.__eq__(other)

    def __hash__(self) -> int:
        red = self.reduced()
        # agrees with int and Fraction hashes, which compare equal
        return hash(Fraction(red.num, red.denom))

    @classmethod
    def from_fraction(cls, fraction: Fraction) -> "IntFraction":
        return cls(fraction.numerator, fraction.denominator)

    def to_fraction(self) -> Fraction:
        return Fraction(self.num, self.denom)

    def value(self) -> float:
        """
        Float value of the fraction. Both parts are converted to float before dividing, so numerators and
        denominators above 2**53 are rounded first.
        """
        return float(self.num) / float(self.denom)

    def reduced(self) -> "IntFraction":
        if self.denom == 0:
            raise ZeroDivisionError("Cannot reduce a fraction with zero denominator")
        if self.num == 0:
            return IntFraction(0, 1)

        common_divisor = math.gcd(abs(self.num), abs(self.denom))
        reduced_num = self.num // common_divisor
        reduced_denom = self.denom // common_divisor

        # Ensure denominator is positive
        if reduced_denom < 0:
            reduced_num = -reduced_num
            reduced_denom = -reduced_denom

        return IntFraction(reduced_num, reduced_denom)

    def is_whole(self) -> bool:
        return self.num % self.denom == 0

    # Addition. The sum is exact, range checks are left to the caller.
    @overload
    def __add__(self, other: "IntFraction") -> "IntFraction": ...

    @overload
    def __add__(self, other: int) -> "IntFraction": ...

    def __add__(self, other: Any) -> Union["IntFraction", Any]:  # type: ignore[override]
        if isinstance(other, IntFraction):
            common_denom = math.lcm(self.denom, other.denom)
            new_num = self.num * (common_denom // self.denom) + other.num * (common_denom // other.denom)
            return IntFraction(new_num, common_denom).reduced()
        elif isinstance(other, int) and not isinstance(other, bool):
            return self + IntFraction(other, 1)
        return NotImplemented

    @overload
    def __radd__(self, other: "IntFraction") -> "IntFraction": ...

    @overload
    def __radd__(self, other: int) -> "IntFraction": ...

    def __radd__(self, other: Any) -> Union["IntFraction", Any]:
        return self.__add__(other)
