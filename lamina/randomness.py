"""Random numbers and random alphanumeric strings."""

from __future__ import annotations

import random
import string

CHARSET = string.ascii_lowercase + string.ascii_uppercase + string.digits

_generator = random.Random()


def _is_numeric(value: object) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def rand() -> float:
    """A uniform float in [0, 1)."""
    return _generator.random()


def randint(low: int | float, high: int | float) -> int:
    """A uniform integer in [low, high]; float bounds are truncated."""
    if not (_is_numeric(low) and _is_numeric(high)):
        raise TypeError("randint() requires two numeric arguments")
    lo, hi = int(low), int(high)
    if lo > hi:
        raise ValueError("randint() lower bound exceeds upper bound")
    return _generator.randint(lo, hi)


def randstr(size: int | float) -> str:
    """A random string of ``size`` ASCII letters and digits."""
    if not _is_numeric(size):
        raise TypeError("randstr() requires exactly one numeric argument")
    count = int(size)
    if count < 0:
        raise ValueError("randstr() length argument must be non-negative")
    return "".join(_generator.choice(CHARSET) for _ in range(count))