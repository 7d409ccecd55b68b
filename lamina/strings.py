"""String helpers working with explicit start indices."""

from __future__ import annotations


def _require_str(value: object, message: str) -> str:
    if not isinstance(value, str):
        raise TypeError(message)
    return value


def _require_int(value: object, message: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(message)
    return value


def _check_start(text: str, start_index: int) -> None:
    if start_index < 0 or start_index >= len(text):
        raise IndexError("Start Index Out Of Range")


def concat(*args: str) -> str:
    """Join all string arguments."""
    for arg in args:
        _require_str(arg, "Args Must Be String")
    return "".join(args)


def char_at(text: str, index: int) -> int:
    """The code of the character at ``index``."""
    _require_str(text, "First Arg Must Be A String")
    _require_int(index, "Second Arg Must Be A Int")
    if index < 0 or index >= len(text):
        raise IndexError("Char Index Out Of Range")
    return ord(text[index])


def length(text: str) -> int:
    """The length of ``text``."""
    return len(_require_str(text, "First Arg Must Be A String"))


def find(text: str, start_index: int, sub: str) -> int:
    """First index of ``sub`` at or after ``start_index``, or -1."""
    _require_str(text, "First Arg Must Be A String")
    _require_int(start_index, "Second Arg Must Be A Int")
    _require_str(sub, "Third Arg Must Be A String")
    _check_start(text, start_index)
    return text.find(sub, start_index)


def sub_string(text: str, start_index: int, size: int) -> str:
    """Up to ``size`` characters from ``start_index``; a negative size takes the rest."""
    _require_str(text, "First Arg Must Be A String")
    _require_int(start_index, "Second Arg Must Be A Int")
    _require_int(size, "Third Arg Must Be A Int")
    _check_start(text, start_index)
    if size < 0:
        return text[start_index:]
    return text[start_index:start_index + size]


def replace_by_index(text: str, start_index: int, sub: str) -> str:
    """Overwrite ``text`` with ``sub`` from ``start_index``, extending it if needed."""
    _require_str(text, "First Arg Must Be A String")
    _require_int(start_index, "Second Arg Must Be A Int")
    _require_str(sub, "Third Arg Must Be A String")
    _check_start(text, start_index)
    return text[:start_index] + sub + text[start_index + len(sub):]