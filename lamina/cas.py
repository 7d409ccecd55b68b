"""Symbolic expression trees with simplification, differentiation and evaluation."""

from __future__ import annotations

import math
import re
from abc import ABC, abstractmethod
from collections.abc import Mapping
from dataclasses import dataclass

_DIGITS = frozenset("0123456789")
_LETTERS = frozenset("abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ")
_WORD = _DIGITS | _LETTERS | {"_"}
_SPACE = frozenset(" \t\n\v\f\r")
_NUMBER_PREFIX = re.compile(r"\d+(?:\.\d*)?")


def _c_pow(base: float, exponent: float) -> float:
    """Power with IEEE results (inf/nan) instead of Python exceptions."""
    try:
        return math.pow(base, exponent)
    except OverflowError:
        if base < 0 and float(exponent).is_integer() and exponent % 2:
            return -math.inf
        return math.inf
    except ValueError:
        if base == 0:
            return math.inf
        return math.nan


class Expr(ABC):
    """Base class of all symbolic expressions."""

    @abstractmethod
    def simplify(self) -> Expr:
        """Return an equivalent, algebraically simplified expression."""

    @abstractmethod
    def differentiate(self, var: str) -> Expr:
        """Return the derivative with respect to ``var`` (unsimplified)."""

    @abstractmethod
    def evaluate(self, variables: Mapping[str, float] | None = None) -> float:
        """Compute the numeric value using the given variable bindings."""

    @abstractmethod
    def __str__(self) -> str:
        """Render the expression as text."""


@dataclass(frozen=True)
class Number(Expr):
    """A numeric constant."""

    value: float

    def __post_init__(self) -> None:
        object.__setattr__(self, "value", float(self.value))

    def __str__(self) -> str:
        if math.isfinite(self.value) and self.value.is_integer():
            return str(int(self.value))
        return f"{self.value:f}"

    def simplify(self) -> Expr:
        return self

    def differentiate(self, var: str) -> Expr:
        return Number(0)

    def evaluate(self, variables: Mapping[str, float] | None = None) -> float:
        return self.value

    @property
    def is_zero(self) -> bool:
        return self.value == 0.0

    @property
    def is_one(self) -> bool:
        return self.value == 1.0


@dataclass(frozen=True)
class Variable(Expr):
    """A named variable."""

    name: str

    def __str__(self) -> str:
        return self.name

    def simplify(self) -> Expr:
        return self

    def differentiate(self, var: str) -> Expr:
        return Number(1) if self.name == var else Number(0)

    def evaluate(self, variables: Mapping[str, float] | None = None) -> float:
        bindings = variables or {}
        if self.name in bindings:
            return float(bindings[self.name])
        raise NameError(f"Variable {self.name} not found")


@dataclass(frozen=True)
class Add(Expr):
    """The sum of two expressions."""

    left: Expr
    right: Expr

    def __str__(self) -> str:
        return f"({self.left} + {self.right})"

    def simplify(self) -> Expr:
        left = self.left.simplify()
        right = self.right.simplify()
        if isinstance(left, Number) and left.is_zero:
            return right
        if isinstance(right, Number) and right.is_zero:
            return left
        if isinstance(left, Number) and isinstance(right, Number):
            return Number(left.value + right.value)
        return Add(left, right)

    def differentiate(self, var: str) -> Expr:
        return Add(self.left.differentiate(var), self.right.differentiate(var))

    def evaluate(self, variables: Mapping[str, float] | None = None) -> float:
        return self.left.evaluate(variables) + self.right.evaluate(variables)


@dataclass(frozen=True)
class Multiply(Expr):
    """The product of two expressions."""

    left: Expr
    right: Expr

    def __str__(self) -> str:
        return f"({self.left} * {self.right})"

    def simplify(self) -> Expr:
        left = self.left.simplify()
        right = self.right.simplify()
        if isinstance(left, Number):
            if left.is_zero:
                return Number(0)
            if left.is_one:
                return right
        if isinstance(right, Number):
            if right.is_zero:
                return Number(0)
            if right.is_one:
                return left
        if isinstance(left, Number) and isinstance(right, Number):
            return Number(left.value * right.value)
        return Multiply(left, right)

    def differentiate(self, var: str) -> Expr:
        return Add(
            Multiply(self.left.differentiate(var), self.right),
            Multiply(self.left, self.right.differentiate(var)),
        )

    def evaluate(self, variables: Mapping[str, float] | None = None) -> float:
        return self.left.evaluate(variables) * self.right.evaluate(variables)


@dataclass(frozen=True)
class Power(Expr):
    """``base`` raised to ``exponent``."""

    base: Expr
    exponent: Expr

    def __str__(self) -> str:
        return f"({self.base} ^ {self.exponent})"

    def simplify(self) -> Expr:
        base = self.base.simplify()
        exponent = self.exponent.simplify()
        if isinstance(exponent, Number):
            if exponent.is_zero:
                return Number(1)
            if exponent.is_one:
                return base
        if isinstance(base, Number):
            if base.is_zero and isinstance(exponent, Number) and not exponent.is_zero:
                return Number(0)
            if base.is_one:
                return Number(1)
        return Power(base, exponent)

    def differentiate(self, var: str) -> Expr:
        if isinstance(self.exponent, Number):
            n = self.exponent.value
            reduced = Power(self.base, Number(n - 1))
            return Multiply(Multiply(Number(n), reduced), self.base.differentiate(var))
        raise ValueError("Differentiation of general exponentials is not supported")

    def evaluate(self, variables: Mapping[str, float] | None = None) -> float:
        return _c_pow(self.base.evaluate(variables), self.exponent.evaluate(variables))


class Parser:
    """Recursive-descent parser for ``+``, ``*``, ``^`` and parentheses."""

    def __init__(self, text: str) -> None:
        self._text = text
        self._pos = 0

    def _current(self) -> str:
        return self._text[self._pos] if self._pos < len(self._text) else ""

    def _skip_whitespace(self) -> None:
        while self._current() and self._current() in _SPACE:
            self._pos += 1

    def _take_while(self, allowed: frozenset[str] | set[str]) -> str:
        start = self._pos
        while self._current() and self._current() in allowed:
            self._pos += 1
        return self._text[start:self._pos]

    def _number(self) -> Expr:
        raw = self._take_while(_DIGITS | {"."})
        match = _NUMBER_PREFIX.match(raw)
        if match is None:
            raise ValueError(f"Invalid number: {raw!r}")
        return Number(float(match.group()))

    def _factor(self) -> Expr:
        self._skip_whitespace()
        char = self._current()
        if char == "(":
            self._pos += 1
            result = self._expression()
            self._skip_whitespace()
            if self._current() == ")":
                self._pos += 1
            return result
        if char and char in _DIGITS:
            return self._number()
        if char and (char in _LETTERS or char == "_"):
            return Variable(self._take_while(_WORD))
        raise ValueError("Invalid expression")

    def _power(self) -> Expr:
        left = self._factor()
        self._skip_whitespace()
        if self._current() == "^":
            self._pos += 1
            return Power(left, self._power())
        return left

    def _term(self) -> Expr:
        left = self._power()
        while True:
            self._skip_whitespace()
            if self._current() != "*":
                return left
            self._pos += 1
            left = Multiply(left, self._power())

    def _expression(self) -> Expr:
        left = self._term()
        while True:
            self._skip_whitespace()
            if self._current() != "+":
                return left
            self._pos += 1
            left = Add(left, self._term())

    def parse(self) -> Expr:
        """Parse the text from its start; trailing input is ignored."""
        self._pos = 0
        return self._expression()


def parse_expression(text: str) -> Expr:
    """Parse ``text`` into an expression tree."""
    return Parser(text).parse()