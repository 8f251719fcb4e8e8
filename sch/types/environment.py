"""Runtime environment for sch.

The Environment stores bindings of Symbols to evaluated values and supports
nested scopes via an `outer` link. Environments are shared by reference: a
closure keeps the environment it captured alive, and every holder observes
mutations made through any other holder.
"""

from __future__ import annotations

from io import StringIO
from typing import Optional

from sch import LispValue
from sch.types.errors import SchDuplicateBinding, SchUnboundVariable
from sch.types.symbol import Symbol


class Environment:
    """Hierarchical mapping from Symbols to values."""

    __slots__ = ("vars", "outer")

    def __init__(self, outer: Optional[Environment] = None):
        self.vars: dict[Symbol, LispValue] = {}
        self.outer: Environment | None = outer

    @classmethod
    def new_root(cls) -> Environment:
        """Create a parentless environment with every native procedure bound."""
        # Lazy import to avoid circular imports
        from sch.evaluation.special_forms import NATIVES
        from sch.types.procedure import Native

        root = cls()
        for name in NATIVES:
            root.vars[Symbol(name)] = Native(name)
        return root

    def new_child(self) -> Environment:
        """Create an empty scope whose parent is this environment."""
        return Environment(outer=self)

    def define(self, name: Symbol, value: LispValue) -> None:
        """Bind `name` to `value` in this frame.

        Raises SchDuplicateBinding if `name` is already bound in this frame.
        Ancestors are not consulted, so shadowing an outer binding is allowed.
        """
        if name in self.vars:
            raise SchDuplicateBinding(f"Identifier is already defined: {name}")
        self.vars[name] = value

    def find(self, name: Symbol) -> Optional[Environment]:
        """Find the nearest environment in the chain that contains `name`."""
        env: Optional[Environment] = self
        while env is not None:
            if name in env.vars:
                return env
            env = env.outer
        return None

    def set(self, name: Symbol, value: LispValue) -> None:
        """Update an existing binding for `name` in the environment chain.

        Raises SchUnboundVariable if the symbol is not found.
        """
        env = self.find(name)
        if env is None:
            raise SchUnboundVariable(f"Cannot set an undefined variable: {name}")
        env.vars[name] = value

    def get(self, name: Symbol) -> LispValue:
        """Look up the value bound to `name`.

        Raises SchUnboundVariable if not found through the root.
        """
        env = self.find(name)
        if env is None:
            raise SchUnboundVariable(f"Used before define: {name}")
        return env.vars[name]

    def __contains__(self, name: Symbol) -> bool:
        return self.find(name) is not None

    def _write_vars(self, buffer: StringIO) -> None:
        """Write this frame's variables into the buffer in a compact form."""
        buffer.write("{")
        buffer.write(", ".join(f"{k}: {v!r}" for k, v in self.vars.items()))
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
        env = self
        while env is not None:
            with StringIO() as env_buf:
                env._write_vars(env_buf)
                chain.append(env_buf.getvalue())
            env = env.outer
        return "<Environment chain: " + " -> ".join(chain) + ">"
