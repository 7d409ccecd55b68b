"""Current time and date in simple formats."""

from __future__ import annotations

import time

_ALLOWED = frozenset("Ymd-")
_DIRECTIVES = {"Y": "%Y", "m": "%m", "d": "%d"}


def get_time() -> int:
    """Seconds since the Unix epoch."""
    return int(time.time())


def get_date() -> str:
    """Today's local date as YYYY-MM-DD."""
    return time.strftime("%Y-%m-%d", time.localtime())


def format_date(fmt: str) -> str:
    """Today's local date built from the letters Y, m and d.

    Dashes are accepted in ``fmt`` but dropped from the result.
    """
    if not isinstance(fmt, str):
        raise TypeError("get_format_date() requires exactly one string argument")
    if any(char not in _ALLOWED for char in fmt):
        raise ValueError(
            "Invalid format string. Only 'Y', 'm', 'd', '-' characters are allowed."
        )
    pattern = "".join(_DIRECTIVES[char] for char in fmt if char != "-")
    return time.strftime(pattern, time.localtime())