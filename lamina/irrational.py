"""Exact-ish representation of common irrational numbers (√n, π, e, log n)."""

from __future__ import annotations

import copy
import enum
import math
from dataclasses import dataclass, field
from numbers import Real

_EPS = 1e-15


class IrrationalType(enum.Enum):
    """The shape an :class:`Irrational` currently has."""

    SQRT = "sqrt"
    PI = "pi"
    E = "e"
    LOG = "log"
    COMPLEX = "complex"


def _trimmed(value: float) -> str:
    """Format with six decimals, dropping trailing zeros and a bare point."""
    text = f"{value:.6f}".rstrip("0")
    return text[:-1] if text.endswith(".") else text


def _scaled_symbol(coefficient: float, symbol: str) -> str:
    if coefficient == 1.0:
        return symbol
    if coefficient == -1.0:
        return "-" + symbol
    if abs(coefficient - round(coefficient)) < _EPS:
        return f"{int(round(coefficient))}{symbol}"
    return _trimmed(coefficient) + symbol


def _simplify_sqrt(n: int) -> tuple[int, int]:
    """Split n into (a, b) with n == a*a*b and b free of square factors."""
    perfect, remainder = 1, n
    i = 2
    while i * i <= n:
        while remainder % (i * i) == 0:
            perfect *= i
            remainder //= i * i
        i += 1
    return perfect, remainder


@dataclass(eq=False)
class Irrational:
    """A number of the form a·√n, a·π, a·e, a·log n, or a sum of such terms."""

    type: IrrationalType = IrrationalType.COMPLEX
    coefficient: float = 0.0
    radicand: int = 1
    coefficients: dict[str, float] = field(default_factory=dict)
    constant_term: float = 0.0

    @classmethod
    def sqrt(cls, n: int, coeff: float = 1.0) -> Irrational:
        """coeff·√n with square factors pulled out of the radicand."""
        perfect, remainder = _simplify_sqrt(n)
        return cls(IrrationalType.SQRT, coeff * perfect, remainder)

    @classmethod
    def pi(cls, coeff: float = 1.0) -> Irrational:
        """coeff·π."""
        return cls(IrrationalType.PI, coeff)

    @classmethod
    def e(cls, coeff: float = 1.0) -> Irrational:
        """coeff·e."""
        return cls(IrrationalType.E, coeff)

    @classmethod
    def constant(cls, value: float) -> Irrational:
        """A plain constant, held in compound form."""
        return cls(IrrationalType.COMPLEX, 0.0, 1, {}, value)

    def _copy(self) -> Irrational:
        return copy.deepcopy(self)

    @staticmethod
    def _coerce(other: object) -> Irrational | None:
        if isinstance(other, Irrational):
            return other
        if isinstance(other, Real):
            return Irrational.constant(float(other))
        return None

    def to_complex(self) -> None:
        """Convert this value in place to the compound (sum of terms) form."""
        if self.type is IrrationalType.COMPLEX:
            return
        self.coefficients = {}
        self.constant_term = 0.0
        if self.type is IrrationalType.SQRT:
            if self.radicand == 1:
                self.constant_term = self.coefficient
            else:
                self.coefficients[f"sqrt{self.radicand}"] = self.coefficient
        elif self.type is IrrationalType.PI:
            self.coefficients["pi"] = self.coefficient
        elif self.type is IrrationalType.E:
            self.coefficients["e"] = self.coefficient
        self.type = IrrationalType.COMPLEX

    def _combine(self, other: Irrational, sign: float) -> Irrational:
        result = self._copy()
        other_copy = other._copy()
        result.to_complex()
        other_copy.to_complex()
        result.constant_term += sign * other_copy.constant_term
        for key, coeff in other_copy.coefficients.items():
            result.coefficients[key] = result.coefficients.get(key, 0.0) + sign * coeff
        return result

    def __add__(self, other: object) -> Irrational:
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return self._combine(rhs, 1.0)

    def __radd__(self, other: object) -> Irrational:
        lhs = self._coerce(other)
        if lhs is None:
            return NotImplemented
        return lhs._combine(self, 1.0)

    def __sub__(self, other: object) -> Irrational:
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return self._combine(rhs, -1.0)

    def _scale(self, scalar: float) -> Irrational:
        result = self._copy()
        if result.type is IrrationalType.COMPLEX:
            result.constant_term *= scalar
            result.coefficients = {k: v * scalar for k, v in result.coefficients.items()}
        else:
            result.coefficient *= scalar
        return result

    def __mul__(self, other: object) -> Irrational:
        if isinstance(other, Real):
            return self._scale(float(other))
        if not isinstance(other, Irrational):
            return NotImplemented
        if self.type is IrrationalType.COMPLEX and not self.coefficients:
            return other._scale(self.constant_term)
        if other.type is IrrationalType.COMPLEX and not other.coefficients:
            return self._scale(other.constant_term)
        if self.type is IrrationalType.SQRT and other.type is IrrationalType.SQRT:
            return Irrational.sqrt(
                self.radicand * other.radicand, self.coefficient * other.coefficient
            )
        return Irrational.constant(float(self) * float(other))

    def __rmul__(self, other: object) -> Irrational:
        if isinstance(other, Real):
            return self._scale(float(other))
        return NotImplemented

    def __truediv__(self, other: object) -> Irrational:
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        if (
            rhs.type is IrrationalType.COMPLEX
            and not rhs.coefficients
            and rhs.constant_term != 0
        ):
            return self._scale(1.0 / rhs.constant_term)
        divisor = float(rhs)
        if abs(divisor) < _EPS:
            raise ZeroDivisionError("Irrational: division by zero")
        return Irrational.constant(float(self) / divisor)

    def __neg__(self) -> Irrational:
        return self._scale(-1.0)

    def __eq__(self, other: object) -> bool:
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return abs(float(self) - float(rhs)) < 1e-12

    def __lt__(self, other: object) -> bool:
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return float(self) < float(rhs)

    def __le__(self, other: object) -> bool:
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return self < rhs or self == rhs

    def __gt__(self, other: object) -> bool:
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return rhs < self

    def __ge__(self, other: object) -> bool:
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return self > rhs or self == rhs

    def __float__(self) -> float:
        kind = self.type
        if kind is IrrationalType.SQRT:
            if self.radicand == 1:
                return self.coefficient
            return self.coefficient * math.sqrt(self.radicand)
        if kind is IrrationalType.PI:
            return self.coefficient * math.pi
        if kind is IrrationalType.E:
            return self.coefficient * math.e
        if kind is IrrationalType.LOG:
            return self.coefficient * math.log(self.radicand)
        total = self.constant_term
        for key, coeff in self.coefficients.items():
            if key == "pi":
                total += coeff * math.pi
            elif key == "e":
                total += coeff * math.e
            elif key.startswith("sqrt"):
                total += coeff * math.sqrt(int(key[4:]))
        return total

    def __str__(self) -> str:
        kind = self.type
        if kind is IrrationalType.SQRT:
            if self.radicand == 1:
                if self.coefficient == int(self.coefficient):
                    return str(int(self.coefficient))
                return f"{self.coefficient:.6f}"
            return _scaled_symbol(self.coefficient, f"√{self.radicand}")
        if kind is IrrationalType.PI:
            return _scaled_symbol(self.coefficient, "π")
        if kind is IrrationalType.E:
            return _scaled_symbol(self.coefficient, "e")
        if kind is IrrationalType.LOG:
            return _scaled_symbol(self.coefficient, f"log({self.radicand})")
        return self._compound_str()

    def _compound_str(self) -> str:
        parts: list[str] = []
        first = True
        const = self.constant_term
        if abs(const) > _EPS:
            if abs(const - round(const)) < _EPS:
                parts.append(str(int(round(const))))
            else:
                parts.append(_trimmed(const))
            first = False

        for key in sorted(self.coefficients):
            coeff = self.coefficients[key]
            if abs(coeff) < _EPS:
                continue
            if not first:
                parts.append(" + " if coeff > 0 else " - ")
            if key == "pi":
                symbol = "π"
            elif key == "e":
                symbol = "e"
            elif key.startswith("sqrt"):
                symbol = f"√{int(key[4:])}"
            else:
                symbol = ""
            magnitude = abs(coeff)
            if not symbol:
                term = ""
            elif magnitude == 1.0:
                term = symbol
            elif magnitude == int(magnitude):
                term = f"{int(magnitude)}{symbol}"
            else:
                term = f"{magnitude:.6f}{symbol}"
            if first and coeff < 0:
                parts.append("-")
            parts.append(term)
            first = False

        text = "".join(parts)
        return text or "0"

    def __abs__(self) -> Irrational:
        return -self if self.is_negative() else self._copy()

    def __pow__(self, exponent: int) -> Irrational:
        if not isinstance(exponent, int):
            return NotImplemented
        if exponent == 0:
            return Irrational.constant(1.0)
        if exponent == 1:
            return self._copy()
        if exponent == 2 and self.type is IrrationalType.SQRT:
            return Irrational.constant(self.coefficient * self.coefficient * self.radicand)
        return Irrational.constant(float(self) ** exponent)

    def is_zero(self) -> bool:
        """True if the value is numerically zero."""
        return abs(float(self)) < _EPS

    def is_rational(self) -> bool:
        """True if the value is a plain constant with no irrational terms."""
        return self.type is IrrationalType.COMPLEX and not self.coefficients

    def simplify(self) -> None:
        """Drop terms whose coefficient is numerically zero."""
        if self.type is not IrrationalType.COMPLEX:
            return
        self.coefficients = {
            k: v for k, v in self.coefficients.items() if abs(v) >= _EPS
        }
        if not self.coefficients and abs(self.constant_term) < _EPS:
            self.constant_term = 0.0

    def is_positive(self) -> bool:
        """True if the value is strictly positive."""
        return float(self) > _EPS

    def is_negative(self) -> bool:
        """True if the value is strictly negative."""
        return float(self) < -_EPS