import pytest

from kei.errors import ErrorKind
from kei.types.environment import Environment
from kei.types.lambda_fn import Lambda
from kei.types.symbol import Symbol
from kei.types.values import Builtin, Error, QExpr, SExpr, copy_value, type_name


@pytest.mark.parametrize(
    "value,expected",
    [
        (42, "42"),
        (-7, "-7"),
        (Symbol("head"), "head"),
        (Error(ErrorKind.DIVISION_BY_ZERO, "division by zero"), "Error: division by zero"),
        (SExpr(), "()"),
        (QExpr(), "{}"),
        (SExpr([Symbol("+"), 1, 2]), "(+ 1 2)"),
        (QExpr([1, QExpr([2, 3]), SExpr([Symbol("x")])]), "{1 {2 3} (x)}"),
        (Lambda(QExpr([Symbol("a"), Symbol("b")]), QExpr([Symbol("+"), Symbol("a"), Symbol("b")])),
         "(\\ {a b} {+ a b})"),
    ],
)
def test_printing(value, expected):
    assert str(value) == expected


def test_builtin_prints_as_placeholder():
    assert str(Builtin("head", lambda env, args: args)) == "<builtin>"


@pytest.mark.parametrize(
    "value,name",
    [
        (1, "Number"),
        (Error(ErrorKind.INVALID_NUMBER, "invalid number"), "Error"),
        (Symbol("x"), "Symbol"),
        (SExpr(), "S-Expression"),
        (QExpr(), "Q-Expression"),
        (Builtin("list", lambda env, args: args), "Function"),
        (Lambda(QExpr(), QExpr()), "Function"),
    ],
)
def test_type_names(value, name):
    assert type_name(value) == name


def test_sexpr_and_qexpr_are_not_equal():
    assert SExpr([1, 2]) != QExpr([1, 2])
    assert QExpr([1, QExpr([2])]) == QExpr([1, QExpr([2])])


def test_symbols_compare_by_name():
    assert Symbol("abc") == Symbol("abc")
    assert Symbol("abc") != Symbol("abd")
    assert len({Symbol("x"), Symbol("x")}) == 1


def test_copy_is_deep():
    inner = QExpr([1, 2])
    original = QExpr([inner, 3])
    copied = copy_value(original)
    assert copied == original
    copied[0].pop(0)
    assert inner.cells == [1, 2]


def test_immutable_values_are_not_copied():
    sym = Symbol("x")
    err = Error(ErrorKind.UNBOUND_SYMBOL, "Unbound symbol 'x'")
    assert copy_value(sym) is sym
    assert copy_value(err) is err
    assert copy_value(5) == 5


def test_lambda_copy_owns_its_environment():
    env = Environment()
    env.put(Symbol("a"), QExpr([1]))
    fn = Lambda(QExpr([Symbol("b")]), QExpr([Symbol("a")]), env)
    copied = fn.copy()
    assert copied == fn
    assert copied.env is not fn.env
    copied.env.put(Symbol("a"), 2)
    copied.formals.pop(0)
    assert env.get(Symbol("a")) == QExpr([1])
    assert fn.formals == QExpr([Symbol("b")])
