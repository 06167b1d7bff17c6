"""The value union shared by the reader, evaluator and builtins.

Cases:
    Number   -> plain int
    Error    -> Error(kind, message)
    Symbol   -> kei.types.symbol.Symbol
    SExpr    -> SExpr(cells), reduced by the evaluator
    QExpr    -> QExpr(cells), inert data until passed to `eval`
    Function -> Builtin(name, fn) or kei.types.lambda_fn.Lambda

Compound values own their cells. Anything that hands a value to a second
owner (environment lookups, lambda copies) goes through `copy_value`, so no
two live trees share a mutable node.
"""

from __future__ import annotations

from io import StringIO

from kei import Value, BuiltinFn
from kei.errors import ErrorKind


class Error:
    """A first-class error value. Immutable."""

    __slots__ = ("kind", "message")

    type_name = "Error"

    def __init__(self, kind: ErrorKind, message: str):
        self.kind = kind
        self.message = message

    def __eq__(self, other: object) -> bool:
        return (
            isinstance(other, Error)
            and self.kind is other.kind
            and self.message == other.message
        )

    def __hash__(self) -> int:
        return hash((self.kind, self.message))

    def __str__(self) -> str:
        return f"Error: {self.message}"

    def __repr__(self) -> str:
        return f"Error({self.kind.name}, {self.message!r})"


class Expr:
    """Ordered, owned sequence of values. Base of SExpr and QExpr."""

    __slots__ = ("cells",)

    open_char = ""
    close_char = ""

    def __init__(self, cells: list[Value] | None = None):
        self.cells: list[Value] = cells if cells is not None else []

    def add(self, value: Value) -> Expr:
        self.cells.append(value)
        return self

    def pop(self, index: int = 0) -> Value:
        return self.cells.pop(index)

    def copy(self) -> Expr:
        return type(self)([copy_value(c) for c in self.cells])

    def __len__(self) -> int:
        return len(self.cells)

    def __iter__(self):
        return iter(self.cells)

    def __getitem__(self, index):
        return self.cells[index]

    def __eq__(self, other: object) -> bool:
        return type(self) is type(other) and self.cells == other.cells

    __hash__ = None

    def __str__(self) -> str:
        with StringIO() as buffer:
            buffer.write(self.open_char)
            buffer.write(" ".join(str(c) for c in self.cells))
            buffer.write(self.close_char)
            return buffer.getvalue()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.cells!r})"


class SExpr(Expr):
    __slots__ = ()

    type_name = "S-Expression"
    open_char = "("
    close_char = ")"


class QExpr(Expr):
    __slots__ = ()

    type_name = "Q-Expression"
    open_char = "{"
    close_char = "}"


class Function:
    """Common base of Builtin and Lambda."""

    __slots__ = ()

    type_name = "Function"

    def copy(self) -> Function:
        raise NotImplementedError


class Builtin(Function):
    """A primitive operation. Opaque and immutable."""

    __slots__ = ("name", "fn")

    def __init__(self, name: str, fn: BuiltinFn):
        self.name = name
        self.fn = fn

    def copy(self) -> Builtin:
        return self

    def __call__(self, env, args: SExpr) -> Value:
        return self.fn(env, args)

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Builtin) and self.fn is other.fn

    def __hash__(self) -> int:
        return hash(self.name)

    def __str__(self) -> str:
        return "<builtin>"

    def __repr__(self) -> str:
        return f"Builtin({self.name!r})"


def type_name(value: Value) -> str:
    """Name of the value's case, as used in diagnostics."""
    if isinstance(value, int):
        return "Number"
    return value.type_name


def copy_value(value: Value) -> Value:
    """Deep-copy compound values; immutable cases are returned as-is."""
    if isinstance(value, (Expr, Function)):
        return value.copy()
    return value
