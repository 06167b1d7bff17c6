from __future__ import annotations

from enum import Enum


class ErrorKind(Enum):
    """Categories of language-level errors carried by Error values."""

    INVALID_NUMBER = "invalid-number"
    UNBOUND_SYMBOL = "unbound-symbol"
    WRONG_TYPE = "wrong-type"
    WRONG_ARITY = "wrong-arity"
    EMPTY_ARGUMENT = "empty-argument"
    NOT_A_FUNCTION = "not-a-function"
    DIVISION_BY_ZERO = "division-by-zero"
    INTEGER_OVERFLOW = "integer-overflow"
    TOO_MANY_ARGUMENTS = "too-many-arguments"
    NON_SYMBOL = "non-symbol"
    BAD_FORMALS = "bad-formals"
    RECURSION_DEPTH = "recursion-depth"


class KeiError(Exception):
    """ Base class for all Kei host errors"""
    pass


class KeiSyntaxError(KeiError):
    """ Raised when the grammar rejects the input text"""

    def __init__(self, message: str, line: int | None = None, column: int | None = None):
        super().__init__(message)
        self.line = line
        self.column = column


class KeiConfigError(KeiError):
    """ Raised when an environment setting cannot be used"""


class KeiPreludeError(KeiError):
    """ Raised when a prelude line evaluates to an error value"""
