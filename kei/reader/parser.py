"""
  Grammar front end

The grammar engine (lark) turns source text into a tree; this module
flattens that tree into plain ParseNode records with mpc-style tags, which
is the only shape kei.reader.reader understands:

    root            -> tag ">"
    number literal  -> tag "expr|number|regex", contents = literal text
    symbol          -> tag "expr|symbol|regex", contents = symbol text
    ( ... )         -> tag "expr|sexpr", children include "(" and ")"
    { ... }         -> tag "expr|qexpr", children include "{" and "}"
    delimiters      -> tag "char", contents = the delimiter
"""

from __future__ import annotations

from dataclasses import dataclass, field

from lark import Lark, Token, Tree
from lark.exceptions import UnexpectedEOF, UnexpectedInput

from kei.errors import KeiSyntaxError
from kei.reader.reader import ROOT_TAG


GRAMMAR = r"""
    start: expr*

    ?expr: number | symbol | sexpr | qexpr

    number: NUMBER
    symbol: SYMBOL
    sexpr: "(" expr* ")"
    qexpr: "{" expr* "}"

    NUMBER.2: /-?[0-9]+/
    SYMBOL: /[a-zA-Z0-9_+\-*\/\\=<>!&%]+/
    COMMENT: /;[^\n]*/

    %import common.WS
    %ignore WS
    %ignore COMMENT
"""


_PARSER = Lark(
    GRAMMAR,
    parser="lalr",
    keep_all_tokens=True,
)


@dataclass
class ParseNode:
    tag: str
    contents: str = ""
    children: list[ParseNode] = field(default_factory=list)


def _convert(node: Tree | Token) -> ParseNode:
    if isinstance(node, Token):
        return ParseNode("char", str(node))

    if node.data == "start":
        return ParseNode(ROOT_TAG, children=[_convert(c) for c in node.children])
    if node.data in ("number", "symbol"):
        (token,) = node.children
        return ParseNode(f"expr|{node.data}|regex", str(token))
    return ParseNode(
        f"expr|{node.data}",
        children=[_convert(c) for c in node.children],
    )


def parse(source: str) -> ParseNode:
    """Parse `source` into a ParseNode tree rooted at a ">" node.

    Raises KeiSyntaxError if the text is not a sequence of expressions.
    """
    try:
        tree = _PARSER.parse(source)
    except UnexpectedEOF:
        raise KeiSyntaxError("unexpected end of input") from None
    except UnexpectedInput as e:
        raise KeiSyntaxError(
            f"unexpected input at line {e.line}, column {e.column}",
            line=e.line,
            column=e.column,
        ) from None
    return _convert(tree)
