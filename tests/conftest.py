import pytest

from kei.builtin.env_builtin import register
from kei.evaluation.evaluator import evaluate
from kei.reader.parser import parse
from kei.reader.reader import read
from kei.types.environment import Environment


@pytest.fixture
def env():
    """Fresh root environment with builtins loaded."""
    e = Environment()
    register(e)
    return e


@pytest.fixture
def run(env):
    """Evaluate a line of source in the shared `env`, REPL style."""
    def _run(source):
        return evaluate(read(parse(source)), env)
    return _run

