"""Argument checks shared by the builtins.

Each check returns None when the precondition holds, or the Error value the
builtin should return.
"""

from __future__ import annotations

from kei.types.diagnostics import empty_argument, wrong_arity, wrong_type
from kei.types.values import Error, SExpr


def _expected_name(cls: type) -> str:
    return "Number" if cls is int else cls.type_name


def check_count(func: str, args: SExpr, expected: int) -> Error | None:
    if len(args) != expected:
        return wrong_arity(func, len(args), expected)
    return None


def check_at_least(func: str, args: SExpr, minimum: int) -> Error | None:
    if len(args) < minimum:
        return wrong_arity(func, len(args), f"at least {minimum}")
    return None


def check_type(func: str, args: SExpr, index: int, cls: type) -> Error | None:
    if not isinstance(args[index], cls):
        return wrong_type(func, index, args[index], _expected_name(cls))
    return None


def check_all(func: str, args: SExpr, cls: type) -> Error | None:
    for i in range(len(args)):
        if (err := check_type(func, args, i, cls)) is not None:
            return err
    return None


def check_not_empty(func: str, args: SExpr, index: int) -> Error | None:
    if not args[index].cells:
        return empty_argument(func, index)
    return None


def first_error(*checks) -> Error | None:
    """Run zero-argument checks in order and return the first failure."""
    for check in checks:
        if (err := check()) is not None:
            return err
    return None
