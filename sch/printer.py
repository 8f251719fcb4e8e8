"""Display form of runtime values, as shown back to the user."""

from __future__ import annotations

from sch import LispValue
from sch.types.procedure import Closure, Native
from sch.types.symbol import Symbol
from sch.types.unit import UnitType

PROCEDURE_PLACEHOLDER = "#<procedure>"


def display(value: LispValue) -> str:
    """Render a value: () for Unit, names for symbols, digits for integers,
    parenthesized space-joined elements for lists. Procedures are not
    printable data and render as an opaque placeholder."""
    if isinstance(value, UnitType):
        return "()"
    if isinstance(value, Symbol):
        return value.id
    if isinstance(value, list):
        return "(" + " ".join(display(v) for v in value) + ")"
    if isinstance(value, Native):
        return f"#<procedure:{value.name}>"
    if isinstance(value, Closure):
        return PROCEDURE_PLACEHOLDER
    return str(value)
