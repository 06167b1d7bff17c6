from __future__ import annotations

from kei import Value
from kei.builtin.validate import (
    check_all,
    check_at_least,
    check_count,
    check_not_empty,
    check_type,
    first_error,
)
from kei.evaluation.evaluator import evaluate
from kei.types.environment import Environment
from kei.types.values import QExpr, SExpr


def _single_qexpr(func: str, args: SExpr, non_empty: bool = False):
    checks = [
        lambda: check_count(func, args, 1),
        lambda: check_type(func, args, 0, QExpr),
    ]
    if non_empty:
        checks.append(lambda: check_not_empty(func, args, 0))
    return first_error(*checks)


# -------------------------------
# List construction
# -------------------------------
def list_builtin(env: Environment, args: SExpr) -> Value:
    """Retag the argument list as a Q-Expression."""
    return QExpr(args.cells)


def join(env: Environment, args: SExpr) -> Value:
    """Concatenate Q-Expressions left to right."""
    if err := first_error(
        lambda: check_at_least("join", args, 1),
        lambda: check_all("join", args, QExpr),
    ):
        return err
    joined = args.pop(0)
    while args.cells:
        joined.cells.extend(args.pop(0).cells)
    return joined


def cons(env: Environment, args: SExpr) -> Value:
    """Prepend a value to a Q-Expression."""
    if err := first_error(
        lambda: check_count("cons", args, 2),
        lambda: check_type("cons", args, 1, QExpr),
    ):
        return err
    value = args.pop(0)
    rest = args.pop(0)
    rest.cells.insert(0, value)
    return rest


# -------------------------------
# List access
# -------------------------------
def head(env: Environment, args: SExpr) -> Value:
    """Q-Expression holding only the first element."""
    if err := _single_qexpr("head", args, non_empty=True):
        return err
    q = args.pop(0)
    del q.cells[1:]
    return q


def tail(env: Environment, args: SExpr) -> Value:
    """Q-Expression without its first element."""
    if err := _single_qexpr("tail", args, non_empty=True):
        return err
    q = args.pop(0)
    q.pop(0)
    return q


def init(env: Environment, args: SExpr) -> Value:
    """Q-Expression without its last element."""
    if err := _single_qexpr("init", args, non_empty=True):
        return err
    q = args.pop(0)
    q.pop(-1)
    return q


def length(env: Environment, args: SExpr) -> Value:
    """Number of elements in a Q-Expression."""
    if err := _single_qexpr("len", args):
        return err
    return len(args[0])


# -------------------------------
# Evaluation
# -------------------------------
def eval_builtin(env: Environment, args: SExpr) -> Value:
    """Evaluate a Q-Expression as an S-Expression in the calling environment."""
    if err := _single_qexpr("eval", args):
        return err
    return evaluate(SExpr(args.pop(0).cells), env)
