import pytest

from kei.errors import ErrorKind
from kei.evaluation.evaluator import evaluate
from kei.types.symbol import Symbol
from kei.types.values import Builtin, Error, QExpr, SExpr


def test_terminal_values_evaluate_to_themselves(env):
    q = QExpr([Symbol("undefined"), SExpr([Symbol("+"), 1])])
    err = Error(ErrorKind.DIVISION_BY_ZERO, "division by zero")
    assert evaluate(7, env) == 7
    assert evaluate(q, env) is q
    assert evaluate(err, env) is err


def test_symbol_resolves_to_binding(env, run):
    run("def {x} 42")
    assert evaluate(Symbol("x"), env) == 42
    assert isinstance(evaluate(Symbol("head"), env), Builtin)


def test_unbound_symbol(run):
    result = run("nothing-here")
    assert isinstance(result, Error)
    assert result.kind is ErrorKind.UNBOUND_SYMBOL
    assert str(result) == "Error: Unbound symbol 'nothing-here'"


def test_empty_sexpr_is_unit(run):
    assert run("()") == SExpr()
    assert run("") == SExpr()


def test_single_child_sexpr_unwraps(run):
    assert run("(5)") == 5
    assert run("((((5))))") == 5
    assert run("({1 2})") == QExpr([1, 2])


@pytest.mark.parametrize(
    "source,expected",
    [
        ("+ 1 2", 3),
        ("(+ 1 (* 2 3))", 7),
        ("- (+ 10 5) (* 2 3)", 9),
        ("eval {+ 1 2}", 3),
        ("eval (list + 1 2)", 3),
        ("(eval (head {(+ 1 2) (+ 10 20)}))", 3),
    ],
)
def test_nested_evaluation(run, source, expected):
    assert run(source) == expected


@pytest.mark.parametrize(
    "items",
    ["+ 1 2 3", "head {4 5}", "join {1} {2}", "- 8", "list 1 2 (+ 1 2)"],
)
def test_eval_of_list_matches_direct_evaluation(run, items):
    assert run(f"eval (list {items})") == run(f"({items})")


def test_head_must_be_a_function(run):
    result = run("1 2 3")
    assert result.kind is ErrorKind.NOT_A_FUNCTION
    assert "does not start with a function" in result.message
    assert "Got Number" in result.message

    result = run("{+} 1")
    assert result.kind is ErrorKind.NOT_A_FUNCTION
    assert "Got Q-Expression" in result.message


def test_first_error_wins(run):
    result = run("+ (head {}) (/ 1 0)")
    assert result.kind is ErrorKind.EMPTY_ARGUMENT


def test_error_stops_sibling_evaluation(run):
    result = run("+ (/ 10 0) (def {touched} 1)")
    assert result.kind is ErrorKind.DIVISION_BY_ZERO
    assert "division by zero" in result.message
    assert run("touched").kind is ErrorKind.UNBOUND_SYMBOL


def test_error_propagates_out_of_nested_expressions(run):
    result = run("list 1 (list 2 (/ 3 0) 4) 5")
    assert isinstance(result, Error)
    assert result.kind is ErrorKind.DIVISION_BY_ZERO
