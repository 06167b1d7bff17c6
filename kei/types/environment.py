"""Runtime environment for Kei.

The Environment stores bindings of Symbols to values and supports nested
scopes via an `outer` link. Lookups return copies of the bound value so a
caller can never mutate a binding through the value it was handed.
Writes go to the current frame (`put`) or to the root frame
(`define_global`); no write ever lands in an intermediate ancestor.
"""

from __future__ import annotations

import logging
from io import StringIO
from typing import Iterator, Optional

from kei import Value
from kei.types.diagnostics import unbound_symbol
from kei.types.symbol import Symbol
from kei.types.values import copy_value

logger = logging.getLogger(__name__)


class Environment:
    """Hierarchical mapping from Symbols to values."""

    __slots__ = ("vars", "outer")

    def __init__(self, outer: Optional[Environment] = None):
        # Insertion ordered; redefinition keeps the first slot
        self.vars: dict[Symbol, Value] = {}
        # Non-owning: whoever holds this frame keeps the parent alive
        self.outer: Environment | None = outer

    def root(self) -> Environment:
        env = self
        while env.outer is not None:
            env = env.outer
        return env

    def find(self, symbol: Symbol) -> Optional[Environment]:
        """Find the nearest environment in the chain that binds `symbol`."""
        env: Optional[Environment] = self
        while env is not None:
            if symbol in env.vars:
                return env
            env = env.outer
        return None

    def get(self, symbol: Symbol) -> Value:
        """Return a copy of the value bound to `symbol`, or an unbound-symbol Error."""
        env = self.find(symbol)
        if env is None:
            return unbound_symbol(symbol.id)
        return copy_value(env.vars[symbol])

    def put(self, symbol: Symbol, value: Value) -> None:
        """Bind `symbol` in this frame only, replacing any local binding."""
        self.vars[symbol] = copy_value(value)

    def define_global(self, symbol: Symbol, value: Value) -> None:
        """Bind `symbol` in the root frame, wherever the call originated."""
        logger.debug("global definition of %s", symbol)
        self.root().put(symbol, value)

    def update(self, mapping: dict[Symbol, Value]) -> None:
        """Bulk-bind a mapping of Symbol -> value in the current frame."""
        for k, v in mapping.items():
            self.put(k, v)

    def copy(self) -> Environment:
        """Copy this frame's bindings; the parent link is shared, not copied."""
        env = Environment(self.outer)
        env.vars = {k: copy_value(v) for k, v in self.vars.items()}
        return env

    def __contains__(self, symbol: Symbol) -> bool:
        return symbol in self.vars

    def __iter__(self) -> Iterator[Symbol]:
        return iter(self.vars)

    def __len__(self) -> int:
        return len(self.vars)

    def _write_vars(self, buffer: StringIO) -> None:
        """Write this frame's variables into the buffer in a compact form."""
        buffer.write("{")
        buffer.write(", ".join(f"{k}: {v}" for k, v in self.vars.items()))
        buffer.write("}")

    def __str__(self) -> str:
        """Human-readable single-frame view with an indicator for parent."""
        with StringIO() as buffer:
            self._write_vars(buffer)
            if self.outer is not None:
                buffer.write(" -> ...")
            return buffer.getvalue()

    def __repr__(self) -> str:
        """Detailed chain representation for debugging purposes."""
        chain = []
        env: Optional[Environment] = self
        while env is not None:
            with StringIO() as env_buf:
                env._write_vars(env_buf)
                chain.append(env_buf.getvalue())
            env = env.outer
        return "<Environment chain: " + " -> ".join(chain) + ">"
