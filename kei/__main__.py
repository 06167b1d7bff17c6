"""Interactive prompt: python -m kei"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import TextIO

from kei import __version__
from kei.config import get_log_level, get_prompt
from kei.errors import KeiSyntaxError
from kei.interpreter import Interpreter


def build_arg_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(prog="kei", description="Kei Lispy interpreter")
    ap.add_argument("-e", "--eval", dest="source", help="Evaluate SOURCE, print the result and exit")
    ap.add_argument("--no-prelude", action="store_true", help="Start without the standard prelude")
    ap.add_argument("--prompt", default=None, help="Prompt string (default: $KEI_PROMPT or 'kei> ')")
    ap.add_argument("--log-level", default=None, help="Logging level (default: $KEI_LOG_LEVEL or WARNING)")
    return ap


def eval_line(interp: Interpreter, line: str, out: TextIO) -> None:
    try:
        result = interp.eval(line)
    except KeiSyntaxError as e:
        print(f"Syntax error: {e}", file=out)
        return
    print(result, file=out)


def repl(interp: Interpreter, prompt: str, stdin: TextIO, out: TextIO) -> None:
    print(f"Kei Lispy Version {__version__}", file=out)
    print("Press Ctrl+D to exit\n", file=out)
    while True:
        out.write(prompt)
        out.flush()
        line = stdin.readline()
        if not line:
            out.write("\n")
            break
        if line.strip():
            eval_line(interp, line, out)


def main(argv: list[str] | None = None) -> int:
    args = build_arg_parser().parse_args(argv)
    logging.basicConfig(level=(args.log_level or get_log_level()).upper())

    interp = Interpreter(prelude=None if args.no_prelude else 'auto')
    if args.source is not None:
        eval_line(interp, args.source, sys.stdout)
        return 0

    repl(interp, args.prompt if args.prompt is not None else get_prompt(), sys.stdin, sys.stdout)
    return 0


if __name__ == "__main__":
    sys.exit(main())
