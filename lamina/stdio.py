"""Console input and output, file access, shell commands and assertions."""

from __future__ import annotations

import os
import re
import subprocess
import sys
from typing import Any

_INT_PREFIX = re.compile(r"\s*[+-]?\d+")
_FLOAT_PREFIX = re.compile(
    r"\s*[+-]?(?:(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?|inf(?:inity)?|nan)",
    re.IGNORECASE,
)
_INT32_MIN = -(2**31)
_INT32_MAX = 2**31 - 1


def format_value(value: Any) -> str:
    """Text of a value as the console shows it."""
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, list):
        return "[" + ", ".join(format_value(item) for item in value) + "]"
    return str(value)


def _parse_line(line: str) -> int | float | str:
    if "." in line:
        match = _FLOAT_PREFIX.match(line)
        if match is None:
            return line
        value = float(match.group().strip())
        if abs(value) == float("inf") and "inf" not in match.group().lower():
            return line
        return value
    match = _INT_PREFIX.match(line)
    if match is None:
        return line
    number = int(match.group())
    if not _INT32_MIN <= number <= _INT32_MAX:
        return line
    return number


def read_input(prompt: Any = None) -> int | float | str:
    """Read one line; return it as a number when it starts with one.

    Returns an empty string at end of input.
    """
    if prompt is not None:
        sys.stdout.write(format_value(prompt))
        sys.stdout.flush()
    line = sys.stdin.readline()
    if not line:
        return ""
    return _parse_line(line.rstrip("\r\n") if line.endswith("\n") else line)


def print_values(*args: Any) -> None:
    """Print the values separated by spaces, followed by a newline."""
    print(" ".join(format_value(arg) for arg in args))


def _require_filename(filename: Any, function: str) -> str:
    if not isinstance(filename, str):
        raise TypeError(
            f"The first argument of {function} must be a string (filename)."
        )
    return filename


def file_put_content(filename: str, content: Any) -> int:
    """Overwrite an existing file with ``content``; return the bytes written."""
    path = _require_filename(filename, "file_put_content")
    if not os.path.exists(path):
        raise FileNotFoundError(f"File does not exist: {path}")
    if os.path.isdir(path):
        raise IsADirectoryError(f"Path is not a file: {path}")
    if not os.path.isfile(path):
        raise OSError(f"Path is not a file: {path}")
    data = format_value(content).encode("utf-8")
    with open(path, "wb") as handle:
        handle.write(data)
    return len(data)


def file_get_content(filename: str) -> str:
    """The whole contents of a file."""
    path = _require_filename(filename, "file_get_content")
    with open(path, "rb") as handle:
        return handle.read().decode("utf-8", errors="surrogateescape")


def execute(command: str) -> int:
    """Run a shell command; raise RuntimeError if it exits non-zero."""
    if not isinstance(command, str):
        raise TypeError("The first argument of exec must be a string (command).")
    result = subprocess.run(command, shell=True, check=False).returncode
    if result != 0:
        raise RuntimeError(f"Command execution failed: {command}")
    return result


def exist(filename: str) -> bool:
    """True if the path exists."""
    return os.path.exists(_require_filename(filename, "exist"))


def touch_file(filename: str) -> bool:
    """Create the file if missing and set its modification time to now."""
    path = _require_filename(filename, "touch_file")
    with open(path, "a", encoding="utf-8"):
        pass
    os.utime(path, None)
    return True


def check(condition: Any = False, message: Any = "None") -> None:
    """Raise AssertionError with ``message`` unless ``condition`` holds."""
    if not condition:
        raise AssertionError(f"Assertion: {format_value(message)}")