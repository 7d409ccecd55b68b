"""Computer-algebra operations on plain values (numbers and expression text)."""

from __future__ import annotations

import re
from collections.abc import Iterator
from contextlib import contextmanager

from lamina.cas import Expr, Number, Variable, parse_expression

_FLOAT_PREFIX = re.compile(
    r"\s*[+-]?(?:(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?|inf(?:inity)?|nan)",
    re.IGNORECASE,
)


class CasError(Exception):
    """Raised when a CAS operation receives bad input or fails."""


@contextmanager
def _reporting(label: str) -> Iterator[None]:
    try:
        yield
    except (CasError, ValueError, NameError, ArithmeticError, LookupError) as exc:
        raise CasError(f"{label}: {exc}") from exc


def _leading_float(text: str) -> float:
    match = _FLOAT_PREFIX.match(text)
    if match is None:
        raise ValueError(f"invalid number: {text!r}")
    return float(match.group().strip())


def _is_number(value: object) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def to_expression(value: object) -> Expr:
    """Turn a number or expression text into an expression tree.

    Text that does not parse becomes a single variable of that name.
    """
    if isinstance(value, Expr):
        return value
    if _is_number(value):
        return Number(float(value))
    if isinstance(value, str):
        try:
            return parse_expression(value)
        except ValueError:
            return Variable(value)
    raise CasError("Unsupported value type for CAS operation")


def from_expression(expr: Expr) -> float | str:
    """A number for a constant expression, otherwise its text."""
    if isinstance(expr, Number):
        return expr.value
    return str(expr)


def _point(value: object) -> float:
    if not _is_number(value):
        raise CasError("Point must be a number")
    return float(value)


def cas_parse(text: str) -> float | str:
    """Parse and simplify expression text."""
    if not isinstance(text, str):
        raise CasError("cas_parse() requires one string argument")
    with _reporting("CAS Parse Error"):
        return from_expression(parse_expression(text).simplify())


def cas_simplify(value: object) -> float | str:
    """Simplify an expression."""
    with _reporting("CAS Simplify Error"):
        return from_expression(to_expression(value).simplify())


def cas_differentiate(value: object, variable: str) -> float | str:
    """Differentiate with respect to ``variable`` and simplify."""
    if not isinstance(variable, str):
        raise CasError("cas_differentiate() requires expression and variable name")
    with _reporting("CAS Differentiate Error"):
        return from_expression(to_expression(value).differentiate(variable).simplify())


def cas_evaluate(value: object, *args: object) -> float:
    """Evaluate an expression; extra arguments like ``"x=3"`` bind variables.

    Arguments that are not strings or hold no ``=`` are ignored.
    """
    with _reporting("CAS Evaluate Error"):
        expr = to_expression(value)
        variables: dict[str, float] = {}
        for arg in args:
            if isinstance(arg, str) and "=" in arg:
                name, _, raw = arg.partition("=")
                variables[name] = _leading_float(raw)
        return expr.evaluate(variables)


def cas_evaluate_at(value: object, variable: str, point: object) -> float:
    """Evaluate an expression with ``variable`` bound to ``point``."""
    if not isinstance(variable, str):
        raise CasError("cas_evaluate_at() requires expression, variable, and value")
    with _reporting("CAS Evaluate At Error"):
        expr = to_expression(value)
        return expr.evaluate({variable: _point(point)})


def cas_solve_linear(value: object, variable: str) -> float | str:
    """Solve ``expr = 0`` for ``variable``, treating the expression as linear."""
    if not isinstance(variable, str):
        raise CasError("cas_solve_linear() requires equation and variable")
    with _reporting("CAS Solve Error"):
        expr = to_expression(value)
        intercept = expr.evaluate({variable: 0.0})
        slope = expr.evaluate({variable: 1.0}) - intercept
        if abs(slope) < 1e-10:
            if abs(intercept) < 1e-10:
                return "Infinitely many solutions"
            return "No solution"
        return -intercept / slope


def cas_numerical_derivative(value: object, variable: str, point: object) -> float:
    """Central-difference approximation of the derivative at ``point``."""
    if not isinstance(variable, str):
        raise CasError(
            "cas_numerical_derivative() requires expression, variable, and point"
        )
    with _reporting("CAS Numerical Derivative Error"):
        expr = to_expression(value)
        x = _point(point)
        h = 1e-8
        upper = expr.evaluate({variable: x + h})
        lower = expr.evaluate({variable: x - h})
        return (upper - lower) / (2 * h)


class ExpressionStore:
    """Named storage for expressions."""

    def __init__(self) -> None:
        self._expressions: dict[str, Expr] = {}

    def store(self, name: str, value: object) -> str:
        """Store ``value`` as an expression under ``name``."""
        if not isinstance(name, str):
            raise CasError("cas_store() requires name and expression")
        with _reporting("CAS Store Error"):
            self._expressions[name] = to_expression(value)
        return f"Expression stored as: {name}"

    def load(self, name: str) -> float | str:
        """Return the stored expression, or a not-found message."""
        if not isinstance(name, str):
            raise CasError("cas_load() requires expression name")
        expr = self._expressions.get(name)
        if expr is None:
            return f"Expression not found: {name}"
        return from_expression(expr)