"""Eager built-in functions for the tss runtime.

Each function takes the runtime Environment and the list of already
evaluated argument values, following the same calling convention.
"""
from __future__ import annotations

import math
from functools import reduce
from numbers import Real

from tss import LispValue
from tss.printer import to_display
from tss.reader.tokenizer import NUMBER_RE
from tss.types.environment import Environment
from tss.types.errors import TssTypeError


def _numbers(name: str, args: list[LispValue]) -> list[float]:
    for arg in args:
        if isinstance(arg, bool) or not isinstance(arg, Real):
            raise TssTypeError(f"All arguments to {name} must be numbers, got {to_display(arg)!r}")
    return args


# -------------------------------
# Arithmetic
# -------------------------------
def add(env: Environment, args: list[LispValue]) -> LispValue:
    """Sum of all arguments, 0 for none."""
    return reduce(lambda acc, cur: acc + cur, _numbers("+", args), 0.0)


def sub(env: Environment, args: list[LispValue]) -> LispValue:
    """Unary negation for one argument; else subtract the rest from the first. Null for none."""
    numbers = _numbers("-", args)
    if not numbers:
        return None
    if len(numbers) == 1:
        return -numbers[0]
    return reduce(lambda acc, cur: acc - cur, numbers[1:], numbers[0])


def mul(env: Environment, args: list[LispValue]) -> LispValue:
    """Product of all arguments, 1 for none."""
    return reduce(lambda acc, cur: acc * cur, _numbers("*", args), 1.0)


def _divide(acc: float, cur: float) -> float:
    if cur == 0:
        if acc == 0 or math.isnan(acc):
            return math.nan
        return math.copysign(math.inf, acc) * math.copysign(1.0, cur)
    return acc / cur


def div(env: Environment, args: list[LispValue]) -> LispValue:
    """Fold division starting from an accumulator of 1.

    Every argument divides the running value, so (/ 10 2) is 1/10/2 = 0.05,
    not 10/2. Division by zero yields an infinity or NaN instead of failing.
    """
    return reduce(_divide, _numbers("/", args), 1.0)


# -------------------------------
# Equality
# -------------------------------
def _as_number(value: LispValue) -> float | None:
    if isinstance(value, bool):
        return float(value)
    if isinstance(value, Real):
        return float(value)
    if isinstance(value, str):
        text = value.strip()
        if not text:
            return 0.0
        if NUMBER_RE.fullmatch(text):
            return float(text)
    return None


def loosely_equal(a: LispValue, b: LispValue) -> bool:
    """Equality that lets numbers, booleans and numeric strings compare by value."""
    if a is b:
        return True
    if a is None or b is None:
        return False
    if isinstance(a, str) and isinstance(b, str):
        return a == b
    if isinstance(a, (bool, Real, str)) and isinstance(b, (bool, Real, str)):
        x, y = _as_number(a), _as_number(b)
        return x is not None and y is not None and x == y
    return a == b


def equals(env: Environment, args: list[LispValue]) -> bool:
    """True for no arguments, else True if every argument loosely equals the first."""
    if not args:
        return True
    first = args[0]
    return all(loosely_equal(first, other) for other in args[1:])


# -------------------------------
# Output and sequencing
# -------------------------------
def write(env: Environment, args: list[LispValue]) -> None:
    env.output("".join(to_display(arg) for arg in args))
    return None


def block(env: Environment, args: list[LispValue]) -> LispValue:
    return args[-1] if args else None
