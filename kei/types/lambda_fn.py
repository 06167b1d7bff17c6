"""User-defined function values."""

from __future__ import annotations

from io import StringIO

from kei.types.environment import Environment
from kei.types.values import Function, QExpr


class Lambda(Function):
    """A lambda with formal parameters, body, and its own environment frame.

    The frame is owned by this value: copying a Lambda copies the frame, so
    a partially applied lambda never shares bindings with another value.
    """

    __slots__ = ("formals", "body", "env")

    def __init__(self, formals: QExpr, body: QExpr, env: Environment | None = None):
        self.formals: QExpr = formals
        self.body: QExpr = body
        # Avoid shared default Environment across instances
        self.env: Environment = env if env is not None else Environment()

    def copy(self) -> Lambda:
        return Lambda(self.formals.copy(), self.body.copy(), self.env.copy())

    def __eq__(self, other: object) -> bool:
        return (
            isinstance(other, Lambda)
            and self.formals == other.formals
            and self.body == other.body
        )

    __hash__ = None

    def __str__(self) -> str:
        with StringIO() as buffer:
            buffer.write("(\\ ")
            buffer.write(str(self.formals))
            buffer.write(" ")
            buffer.write(str(self.body))
            buffer.write(")")
            return buffer.getvalue()

    def __repr__(self) -> str:
        """Return the Lisp-style representation of the lambda."""
        return str(self)
