"""Translate a parse tree into a value tree.

Any node object exposing `tag`, `contents` and `children` is accepted;
tags are matched by substring the way the grammar engine emits them.
"""

from __future__ import annotations

import re

from kei import Value
from kei.config import int_bounds
from kei.errors import KeiSyntaxError
from kei.types.diagnostics import invalid_number
from kei.types.symbol import Symbol
from kei.types.values import Expr, QExpr, SExpr

ROOT_TAG = ">"
DELIMITERS = frozenset({"(", ")", "{", "}"})

_NUMBER_RE = re.compile(r"-?[0-9]+")


def read_number(text: str) -> Value:
    """Parse a decimal literal; out-of-range or non-numeric text is an Error."""
    if not _NUMBER_RE.fullmatch(text):
        return invalid_number()
    value = int(text)
    lo, hi = int_bounds()
    if not lo <= value <= hi:
        return invalid_number()
    return value


def read(node) -> Value:
    tag = node.tag
    if "number" in tag:
        return read_number(node.contents)
    if "symbol" in tag:
        return Symbol(node.contents)

    expr: Expr
    if tag == ROOT_TAG or "sexpr" in tag:
        expr = SExpr()
    elif "qexpr" in tag:
        expr = QExpr()
    else:
        raise KeiSyntaxError(f"unexpected parse node {tag!r}")

    for child in node.children:
        if child.contents in DELIMITERS:
            continue
        if child.tag == "regex":
            continue
        expr.add(read(child))
    return expr
