"""Core evaluator for the Kei interpreter.

Two mutually recursive steps: `evaluate` resolves symbols and hands
S-Expressions to `evaluate_sexpr`, which reduces every child, collapses to
the first Error it finds, and otherwise applies the head function to the
rest. Every other value is terminal.
"""

from __future__ import annotations

from kei import Value
from kei.evaluation.apply import apply
from kei.types.diagnostics import not_a_function
from kei.types.environment import Environment
from kei.types.symbol import Symbol
from kei.types.values import Error, Function, SExpr


def evaluate(expr: Value, env: Environment) -> Value:
    match expr:
        case Symbol():
            return env.get(expr)
        case SExpr():
            return evaluate_sexpr(expr, env)

    # --- Numbers, errors, Q-Expressions and functions are terminal ---
    return expr


def evaluate_sexpr(expr: SExpr, env: Environment) -> Value:
    # Left to right; the first Error stops evaluation of the remaining cells
    for i, cell in enumerate(expr.cells):
        result = evaluate(cell, env)
        if isinstance(result, Error):
            return result
        expr.cells[i] = result

    if not expr.cells:
        return expr

    if len(expr.cells) == 1:
        return expr.pop(0)

    head = expr.pop(0)
    if not isinstance(head, Function):
        return not_a_function(head)

    return apply(env, head, expr, evaluate)
