from __future__ import annotations

import logging
from pathlib import Path
from typing import Literal

from kei import Value
from kei.config import get_prelude_path
from kei.errors import KeiPreludeError
from kei.evaluation.evaluator import evaluate
from kei.reader.parser import parse
from kei.reader.reader import read
from kei.types.diagnostics import recursion_depth_exceeded
from kei.types.environment import Environment
from kei.types.values import Error
from kei.builtin.env_builtin import register

logger = logging.getLogger(__name__)


class Interpreter:
    """
    Orchestrates reading and evaluating Kei code.
    Maintains the root Environment across calls.
    """

    def __init__(self, prelude: str | None | Literal['auto'] = 'auto'):
        self.env: Environment = Environment()
        register(self.env)

        if prelude is None:
            pass  # explicit: no prelude
        elif prelude == 'auto':
            self.load_prelude(get_prelude_path())
        elif prelude:
            self.eval_prelude(prelude)

    def load_prelude(self, path: Path) -> None:
        logger.info("loading prelude from %s", path)
        self.eval_prelude(path.read_text(encoding="utf-8"))

    def eval_prelude(self, code: str) -> None:
        """Evaluate `code` one line at a time; an Error result is fatal."""
        for lineno, line in enumerate(code.splitlines(), start=1):
            if not line.strip():
                continue
            result = self.eval(line)
            if isinstance(result, Error):
                raise KeiPreludeError(f"prelude line {lineno}: {result}")

    def eval(self, code: str) -> Value:
        """Read `code` as one S-Expression and evaluate it in the root environment.

        Raises KeiSyntaxError if the grammar rejects the text; language errors,
        including running out of interpreter stack, come back as Error values.
        """
        try:
            return evaluate(read(parse(code)), self.env)
        except RecursionError:
            logger.warning("recursion limit hit while evaluating %.40r", code)
            return recursion_depth_exceeded()
