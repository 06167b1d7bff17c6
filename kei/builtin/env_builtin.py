"""Binding forms, the lambda constructor, and builtin registration."""

from __future__ import annotations

import logging
from typing import Callable

from kei import Value, BuiltinFn
from kei.builtin import arith_builtin, list_builtin
from kei.builtin.validate import check_at_least, check_count, check_type, first_error
from kei.types.diagnostics import non_symbol, symbol_count_mismatch
from kei.types.environment import Environment
from kei.types.lambda_fn import Lambda
from kei.types.symbol import Symbol
from kei.types.values import Builtin, QExpr, SExpr

logger = logging.getLogger(__name__)


def _non_symbol_in(func: str, names: QExpr):
    for name in names:
        if not isinstance(name, Symbol):
            return non_symbol(func, name)
    return None


# -------------------------------
# Definitions
# -------------------------------
def _bind(
    func: str,
    args: SExpr,
    binder: Callable[[Symbol, Value], None],
) -> Value:
    if err := first_error(
        lambda: check_at_least(func, args, 1),
        lambda: check_type(func, args, 0, QExpr),
        lambda: _non_symbol_in(func, args[0]),
    ):
        return err

    names = args.pop(0)
    if len(names) != len(args):
        return symbol_count_mismatch(func, len(args), len(names))

    for name, value in zip(names, args):
        binder(name, value)
    return SExpr()


def define(env: Environment, args: SExpr) -> Value:
    """Bind names to values in the root environment."""
    return _bind("def", args, env.define_global)


def assign(env: Environment, args: SExpr) -> Value:
    """Bind names to values in the calling environment."""
    def put(name: Symbol, value: Value) -> None:
        logger.debug("local definition of %s", name)
        env.put(name, value)

    return _bind("=", args, put)


# -------------------------------
# Lambda construction
# -------------------------------
def lambda_builtin(env: Environment, args: SExpr) -> Value:
    """Build a Lambda from a formals list and a body."""
    if err := first_error(
        lambda: check_count("\\", args, 2),
        lambda: check_type("\\", args, 0, QExpr),
        lambda: check_type("\\", args, 1, QExpr),
        lambda: _non_symbol_in("\\", args[0]),
    ):
        return err

    formals = args.pop(0)
    body = args.pop(0)
    return Lambda(formals, body)


# -------------------------------
# Registration
# -------------------------------
BUILTINS: dict[str, BuiltinFn] = {
    # List functions
    'list': list_builtin.list_builtin,
    'head': list_builtin.head,
    'tail': list_builtin.tail,
    'init': list_builtin.init,
    'cons': list_builtin.cons,
    'len': list_builtin.length,
    'join': list_builtin.join,
    'eval': list_builtin.eval_builtin,
    # Arithmetic
    '+': arith_builtin.add,
    '-': arith_builtin.sub,
    '*': arith_builtin.mul,
    '/': arith_builtin.div,
    # Variables and functions
    'def': define,
    '=': assign,
    '\\': lambda_builtin,
}


def register(env: Environment) -> None:
    env.update({Symbol(name): Builtin(name, fn) for name, fn in BUILTINS.items()})
