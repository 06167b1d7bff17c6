"""Constructors for Error values.

Messages name the offending function, the argument index and the
expected vs. actual type or count wherever those apply.
"""

from __future__ import annotations

from kei import Value
from kei.errors import ErrorKind
from kei.types.values import Error, type_name


def invalid_number() -> Error:
    return Error(ErrorKind.INVALID_NUMBER, "invalid number")


def unbound_symbol(name: str) -> Error:
    return Error(ErrorKind.UNBOUND_SYMBOL, f"Unbound symbol '{name}'")


def wrong_type(func: str, index: int, got: Value, expected: str) -> Error:
    return Error(
        ErrorKind.WRONG_TYPE,
        f"Function '{func}' passed incorrect type for argument {index}. "
        f"Got {type_name(got)}, Expected {expected}.",
    )


def wrong_arity(func: str, got: int, expected: int | str) -> Error:
    return Error(
        ErrorKind.WRONG_ARITY,
        f"Function '{func}' passed incorrect number of arguments. "
        f"Got {got}, Expected {expected}.",
    )


def symbol_count_mismatch(func: str, got: int, expected: int) -> Error:
    return Error(
        ErrorKind.WRONG_ARITY,
        f"Function '{func}' passed incorrect number of values for symbols. "
        f"Got {got}, Expected {expected}.",
    )


def empty_argument(func: str, index: int) -> Error:
    return Error(
        ErrorKind.EMPTY_ARGUMENT, f"Function '{func}' passed {{}} for argument {index}."
    )


def not_a_function(got: Value) -> Error:
    return Error(
        ErrorKind.NOT_A_FUNCTION,
        f"expression does not start with a function. Got {type_name(got)}, Expected Function.",
    )


def division_by_zero() -> Error:
    return Error(ErrorKind.DIVISION_BY_ZERO, "division by zero")


def integer_overflow(func: str) -> Error:
    return Error(ErrorKind.INTEGER_OVERFLOW, f"integer overflow in '{func}'")


def too_many_arguments(got: int, expected: int) -> Error:
    return Error(
        ErrorKind.TOO_MANY_ARGUMENTS,
        f"Function passed too many arguments. Got {got}, Expected {expected}.",
    )


def non_symbol(func: str, got: Value) -> Error:
    return Error(
        ErrorKind.NON_SYMBOL,
        f"Function '{func}' cannot define non-symbol. Got {type_name(got)}, Expected Symbol.",
    )


def bad_formals() -> Error:
    return Error(
        ErrorKind.BAD_FORMALS,
        "Function format invalid. Symbol '&' not followed by single symbol.",
    )


def recursion_depth_exceeded() -> Error:
    return Error(ErrorKind.RECURSION_DEPTH, "recursion depth exceeded")
