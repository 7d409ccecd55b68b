"""Numeric built-ins: constants, trigonometry, rounding, integer arithmetic."""

from __future__ import annotations

import math
import warnings
from numbers import Real
from typing import Any

from lamina.irrational import Irrational

_INT32_MAX = 2**31 - 1


def _is_numeric(value: object) -> bool:
    if isinstance(value, bool):
        return False
    return isinstance(value, (Real, Irrational))


def _is_int(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _as_number(value: Any, name: str) -> float:
    if not _is_numeric(value):
        raise TypeError(f"{name}() requires numeric argument")
    return float(value)


def _is_big(value: object) -> bool:
    return _is_int(value) and abs(value) > _INT32_MAX


def pi() -> Irrational:
    """The exact constant π."""
    return Irrational.pi()


def e() -> Irrational:
    """The exact constant e."""
    return Irrational.e()


def absolute(x: Any) -> int | float:
    """Absolute value; integers stay exact, everything else becomes a float."""
    if _is_int(x):
        return abs(x)
    return abs(_as_number(x, "abs"))


def sin(x: Any) -> float:
    """Sine of ``x`` radians."""
    return math.sin(_as_number(x, "sin"))


def cos(x: Any) -> float:
    """Cosine of ``x`` radians."""
    return math.cos(_as_number(x, "cos"))


def tan(x: Any) -> float:
    """Tangent of ``x`` radians."""
    return math.tan(_as_number(x, "tan"))


def log(x: Any) -> float:
    """Natural logarithm of a positive number."""
    value = _as_number(x, "log")
    if value <= 0:
        raise ValueError("log() requires positive argument")
    return math.log(value)


def round_int(x: Any) -> int:
    """Round to the nearest integer, halves away from zero."""
    value = _as_number(x, "round")
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


def floor_int(x: Any) -> int:
    """Largest integer not greater than ``x``."""
    return math.floor(_as_number(x, "floor"))


def ceil_int(x: Any) -> int:
    """Smallest integer not less than ``x``."""
    return math.ceil(_as_number(x, "ceil"))


def size(value: Any) -> int:
    """Length of a list (rows of a matrix) or string; scalars have size 1."""
    if isinstance(value, (list, str)):
        return len(value)
    return 1


def idiv(a: Any, b: Any) -> int:
    """Division truncated toward zero."""
    if not (_is_numeric(a) and _is_numeric(b)):
        raise TypeError("idiv() requires numeric arguments")
    if float(b) == 0.0:
        raise ZeroDivisionError("Integer division by zero")
    if _is_int(a) and _is_int(b):
        quotient = abs(a) // abs(b)
        return quotient if (a < 0) == (b < 0) else -quotient
    return int(float(a) / float(b))


def decimal(x: Any) -> float:
    """The value as a float."""
    return _as_number(x, "decimal")


def power(base: Any, exponent: Any) -> int | float:
    """``base`` raised to ``exponent``; exact for integers with a non-negative exponent."""
    if not (_is_numeric(base) and _is_numeric(exponent)):
        raise TypeError("pow() requires numeric arguments")
    if _is_int(base) and _is_int(exponent) and exponent >= 0:
        return base**exponent
    if _is_big(base) or _is_big(exponent):
        warnings.warn(
            "pow() with BigInt converted to floating point, precision may be lost",
            stacklevel=2,
        )
    try:
        return math.pow(float(base), float(exponent))
    except OverflowError:
        return math.inf
    except ValueError:
        return math.nan


def _truncated_pair(a: Any, b: Any, name: str) -> tuple[int, int]:
    warnings.warn(
        f"{name}() with floating point numbers may have precision issues", stacklevel=3
    )
    return int(abs(float(a))), int(abs(float(b)))


def gcd(a: Any, b: Any) -> int:
    """Greatest common divisor; non-integers are truncated with a warning."""
    if not (_is_numeric(a) and _is_numeric(b)):
        raise TypeError("gcd() requires numeric arguments")
    if _is_int(a) and _is_int(b):
        return math.gcd(a, b)
    x, y = _truncated_pair(a, b, "gcd")
    return math.gcd(x, y)


def lcm(a: Any, b: Any) -> int:
    """Least common multiple; zero if either argument is zero."""
    if not (_is_numeric(a) and _is_numeric(b)):
        raise TypeError("lcm() requires numeric arguments")
    if _is_int(a) and _is_int(b):
        return math.lcm(a, b)
    x, y = _truncated_pair(a, b, "lcm")
    return math.lcm(x, y)