"""Application engine for Kei.

This module centralizes function application semantics:
- Builtins are dispatched directly; each primitive validates its own
  arguments and returns an Error value on failure.
- Lambdas bind arguments to formals left to right. Too few arguments yield
  a partially applied Lambda; too many yield an Error.
- A fully applied lambda's frame is parented to the *calling* environment
  before the body runs, so free variables resolve at call time.
"""

from __future__ import annotations

import logging
from typing import Callable

from kei import Value
from kei.types.diagnostics import bad_formals, too_many_arguments
from kei.types.environment import Environment
from kei.types.lambda_fn import Lambda
from kei.types.symbol import Symbol
from kei.types.values import Builtin, QExpr, SExpr

logger = logging.getLogger(__name__)

EvaluatorFn = Callable[[Value, Environment], Value]

VARIADIC = Symbol("&")


def apply_lambda(
    env: Environment, fn: Lambda, args: SExpr, evaluate_fn: EvaluatorFn
) -> Value:
    """Apply a Lambda value the caller owns.

    `fn` is consumed: its formals are popped and its frame receives the
    bindings, so callers must pass a copy of any Lambda they want to reuse.
    """
    given = len(args)
    total = len(fn.formals)

    while args.cells:
        if not fn.formals.cells:
            return too_many_arguments(given, total)

        sym = fn.formals.pop(0)

        # '&' collects every remaining argument into a single Q-Expression
        if sym == VARIADIC:
            if len(fn.formals) != 1:
                return bad_formals()
            rest = fn.formals.pop(0)
            fn.env.put(rest, QExpr(args.cells))
            break

        fn.env.put(sym, args.pop(0))

    # '&' left over with no arguments to collect binds an empty list
    if fn.formals.cells and fn.formals[0] == VARIADIC:
        if len(fn.formals) != 2:
            return bad_formals()
        fn.formals.pop(0)
        fn.env.put(fn.formals.pop(0), QExpr())

    if fn.formals.cells:
        logger.debug("partial application of %s, %d formals left", fn, len(fn.formals))
        return fn

    fn.env.outer = env
    logger.debug("applying lambda with bindings %s", fn.env)
    return evaluate_fn(SExpr(fn.body.cells), fn.env)


def apply(
    env: Environment, fn: Builtin | Lambda, args: SExpr, evaluate_fn: EvaluatorFn
) -> Value:
    """Apply either a Builtin or a Lambda to an argument list."""
    if isinstance(fn, Builtin):
        return fn(env, args)
    return apply_lambda(env, fn, args, evaluate_fn)
