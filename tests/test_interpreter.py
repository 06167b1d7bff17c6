import pytest

from kei.errors import ErrorKind, KeiConfigError, KeiPreludeError, KeiSyntaxError
from kei.interpreter import Interpreter
from kei.types.symbol import Symbol
from kei.types.values import QExpr, SExpr


@pytest.fixture
def interp():
    return Interpreter()


def test_eval_without_prelude():
    interp = Interpreter(prelude=None)
    assert interp.eval("+ 1 2") == 3
    assert interp.eval("fun").kind is ErrorKind.UNBOUND_SYMBOL


def test_state_persists_between_lines(interp):
    interp.eval("def {x} 40")
    assert interp.eval("+ x 2") == 42


def test_prelude_fun(interp):
    assert interp.eval("fun {add a b} {+ a b}") == SExpr()
    assert interp.eval("add 1 2") == 3
    assert interp.eval("(add 1) 2") == 3


def test_prelude_curry_and_uncurry(interp):
    assert interp.eval("curry + {5 6 7}") == 18
    assert interp.eval("unpack * {2 3}") == 6
    assert interp.eval("uncurry head 5 6 7") == QExpr([5])
    assert interp.eval("pack tail 5 6 7") == QExpr([6, 7])


def test_prelude_defines_in_root(interp):
    for name in ("fun", "unpack", "pack", "curry", "uncurry"):
        assert Symbol(name) in interp.env


def test_explicit_prelude_text():
    interp = Interpreter(prelude="def {answer} 42\n\n; comment only\ndef {twice} (* answer 2)")
    assert interp.eval("twice") == 84


def test_prelude_error_raises():
    with pytest.raises(KeiPreludeError, match="prelude line 2"):
        Interpreter(prelude="def {a} 1\ndef {b c} 1")


def test_prelude_path_from_environment(tmp_path, monkeypatch):
    prelude = tmp_path / "custom.kei"
    prelude.write_text("def {answer} 42\n", encoding="utf-8")
    monkeypatch.setenv("KEI_PRELUDE_PATH", str(prelude))
    interp = Interpreter()
    assert interp.eval("answer") == 42
    assert interp.eval("fun").kind is ErrorKind.UNBOUND_SYMBOL


def test_syntax_error_is_raised(interp):
    with pytest.raises(KeiSyntaxError):
        interp.eval("(+ 1")


@pytest.mark.parametrize("raw", ["abc", "4", "100000"])
def test_bad_int_width_is_rejected(monkeypatch, raw):
    monkeypatch.setenv("KEI_INT_BITS", raw)
    interp = Interpreter(prelude=None)
    with pytest.raises(KeiConfigError):
        interp.eval("+ 1 2")


@pytest.mark.parametrize(
    "setup,source",
    [
        ("", r"(\ {x} {x x}) (\ {x} {x x})"),
        (r"def {loop} (\ {x} {loop x})", "loop 1"),
        ("", "(" * 2000 + "5" + ")" * 2000),
    ],
)
def test_runaway_recursion_is_an_error_value(setup, source):
    interp = Interpreter(prelude=None)
    if setup:
        interp.eval(setup)
    result = interp.eval(source)
    assert result.kind is ErrorKind.RECURSION_DEPTH
    assert str(result) == "Error: recursion depth exceeded"
    assert interp.eval("+ 1 2") == 3
