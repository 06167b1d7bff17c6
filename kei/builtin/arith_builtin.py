from __future__ import annotations

import operator
from typing import Callable

from kei import Value
from kei.builtin.validate import check_all, check_at_least, first_error
from kei.config import int_bounds
from kei.types.diagnostics import division_by_zero, integer_overflow
from kei.types.environment import Environment
from kei.types.values import Error, SExpr


def _truncating_div(x: int, y: int) -> Value:
    if y == 0:
        return division_by_zero()
    # Integer division rounds toward zero, not toward negative infinity
    q = abs(x) // abs(y)
    return q if (x < 0) == (y < 0) else -q


def _fold(op: str, args: SExpr, step: Callable[[int, int], Value]) -> Value:
    if err := first_error(
        lambda: check_at_least(op, args, 1),
        lambda: check_all(op, args, int),
    ):
        return err

    lo, hi = int_bounds()
    x = args.pop(0)

    if op == "-" and not args.cells:
        x = -x
        return x if lo <= x <= hi else integer_overflow(op)

    while args.cells:
        x = step(x, args.pop(0))
        if isinstance(x, Error):
            return x
        if not lo <= x <= hi:
            return integer_overflow(op)
    return x


# -------------------------------
# Arithmetic
# -------------------------------
def add(env: Environment, args: SExpr) -> Value:
    """Sum of all arguments."""
    return _fold("+", args, operator.add)


def sub(env: Environment, args: SExpr) -> Value:
    """Subtract the rest from the first argument; negate a single argument."""
    return _fold("-", args, operator.sub)


def mul(env: Environment, args: SExpr) -> Value:
    """Product of all arguments."""
    return _fold("*", args, operator.mul)


def div(env: Environment, args: SExpr) -> Value:
    """Divide the first argument by the rest, rounding toward zero."""
    return _fold("/", args, _truncating_div)
