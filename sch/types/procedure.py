"""Procedure values: natives implemented by the evaluator and user closures."""

from __future__ import annotations

from io import StringIO
from typing import TYPE_CHECKING

from sch import LispValue, SExpression
from sch.types.errors import SchArityMismatch
from sch.types.symbol import Symbol

if TYPE_CHECKING:
    from sch.types.environment import Environment


class Native:
    """A built-in procedure, identified by its key in the native table."""

    __slots__ = ("name",)

    def __init__(self, name: str):
        self.name: str = name

    def __eq__(self, other) -> bool:
        return isinstance(other, Native) and self.name == other.name

    def __hash__(self) -> int:
        return hash(("native", self.name))

    def __str__(self) -> str:
        return f"#<procedure:{self.name}>"

    def __repr__(self) -> str:
        return f"Native({self.name!r})"


class Closure:
    """A user procedure: formal parameters, body forms, and the captured env."""

    __slots__ = ("params", "body", "env")

    def __init__(
        self, params: list[Symbol], body: list[SExpression], env: Environment
    ):
        self.params: list[Symbol] = params
        self.body: list[SExpression] = body
        # Shared, never copied: every holder sees the same bindings
        self.env: Environment = env

    def __str__(self) -> str:
        with StringIO() as buffer:
            buffer.write("#<procedure (")
            buffer.write(" ".join(str(p) for p in self.params))
            buffer.write(")>")
            return buffer.getvalue()

    def __repr__(self) -> str:
        return str(self)

    def extend_env(self, args: list[LispValue]) -> Environment:
        """
        Bind already-evaluated `args` to the formal parameters in a new child of
        the captured environment and return it.

        Raises SchArityMismatch unless exactly one argument is supplied per
        parameter.
        """
        if len(args) != len(self.params):
            raise SchArityMismatch(
                f"Procedure expects {len(self.params)} argument(s), got {len(args)}"
            )
        local_env = self.env.new_child()
        for name, value in zip(self.params, args):
            local_env.define(name, value)
        return local_env


Procedure = (Native, Closure)
