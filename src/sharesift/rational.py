from dataclasses import dataclass
from math import gcd


@dataclass(frozen=True)
class Rat:
    # An exact rational number num / den over arbitrary-precision integers. The pair is always stored
    # fully reduced with a positive denominator, so two rationals are equal iff their fields are equal,
    # and a rational is an integer iff its denominator is 1.

    num: int
    den: int = 1

    def __post_init__(self) -> None:
        if self.den == 0:
            raise ZeroDivisionError("denominator cannot be zero")
        g = gcd(self.num, self.den)  # gcd(0, d) = |d|, so zero is stored as 0 / 1
        if self.den < 0:
            g = -g
        object.__setattr__(self, "num", self.num // g)
        object.__setattr__(self, "den", self.den // g)

    @property
    def is_integer(self) -> bool:
        return self.den == 1

    def __add__(self, other: "Rat | int") -> "Rat":
        other = lift(other)
        return Rat(self.num * other.den + other.num * self.den, self.den * other.den)

    def __sub__(self, other: "Rat | int") -> "Rat":
        other = lift(other)
        return Rat(self.num * other.den - other.num * self.den, self.den * other.den)

    def __mul__(self, other: "Rat | int") -> "Rat":
        other = lift(other)
        return Rat(self.num * other.num, self.den * other.den)

    def __truediv__(self, other: "Rat | int") -> "Rat":
        other = lift(other)
        if other.num == 0:
            raise ZeroDivisionError("division by zero")
        return Rat(self.num * other.den, self.den * other.num)

    __radd__ = __add__
    __rmul__ = __mul__

    def __rsub__(self, other: int) -> "Rat":
        return lift(other) - self

    def __rtruediv__(self, other: int) -> "Rat":
        return lift(other) / self

    def __neg__(self) -> "Rat":
        return Rat(-self.num, self.den)

    def __bool__(self) -> bool:
        return self.num != 0

    def __int__(self) -> int:
        if self.den != 1:
            raise ValueError(f"{self} is not an integer")
        return self.num

    def __str__(self) -> str:
        return str(self.num) if self.den == 1 else f"{self.num}/{self.den}"


def lift(value: Rat | int) -> Rat:
    return value if isinstance(value, Rat) else Rat(value)
