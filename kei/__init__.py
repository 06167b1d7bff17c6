# Core type aliases for Kei's data model.
# Numbers are plain Python ints; every other case of the value union is a
# small class under kei.types (Symbol, Error, SExpr, QExpr, Builtin, Lambda).
#
# Naming guidance:
# - Value:     any member of the value union, used by the evaluator and builtins.
# - BuiltinFn: the Python callable wrapped by a Builtin value.

from typing import Any, Callable

# Runtime value alias
Value = Any

# Primitive operation: receives the calling environment and an argument list
BuiltinFn = Callable[..., Value]

__version__ = "0.4.0"
