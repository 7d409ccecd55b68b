"""Array helpers: integer ranges and nested or key-based element access."""

from __future__ import annotations

from typing import Any


def _require_int(value: object, message: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(message)
    return value


def make_range(*args: int) -> list[int] | None:
    """``make_range(end)``, ``make_range(start, end)`` or ``make_range(start, end, step)``.

    Returns None when called with no arguments.
    """
    if not args:
        return None
    ints = [_require_int(a, "range() arguments must be integers") for a in args]
    if len(ints) > 1:
        start, end = ints[0], ints[1]
    else:
        start, end = 0, ints[0]
    step = ints[2] if len(ints) > 2 else 1
    if step <= 0 and start < end:
        raise ValueError("range() step must be positive")
    if step <= 0:
        return []
    return list(range(start, end, step))


def visit(array: Any, *args: int) -> Any:
    """Follow a chain of integer indices into nested lists."""
    if not isinstance(array, list):
        raise TypeError("First Arg Must Be A Array")
    current: Any = array
    for level, index in enumerate(args, start=1):
        _require_int(index, "Index argument must be an integer")
        if not isinstance(current, list):
            raise TypeError(f"Cannot index non-array value at level {level}")
        if index < 0 or index >= len(current):
            raise IndexError(f"Array Index Out Of Range at level {level}")
        current = current[index]
    return current


def visit_by_str(array: Any, key: str) -> Any:
    """Look up ``key`` in a flat list of alternating keys and values."""
    if not isinstance(array, list) or not isinstance(key, str):
        raise TypeError("Invalid arguments (expected array and string)")
    if len(array) % 2 == 0:
        for candidate, value in zip(array[::2], array[1::2]):
            if isinstance(candidate, str) and candidate == key:
                return value
    raise KeyError(f"Key '{key}' not found in array")