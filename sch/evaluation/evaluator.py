"""Core evaluator for the sch interpreter.

Walks runtime values, resolving symbols through the environment chain and
dispatching list forms to `apply`. Evaluation is fail-fast: the first error
raised anywhere in a sequence propagates to the caller unchanged.
"""

from __future__ import annotations

from sch import LispValue, SExpression
from sch.evaluation.apply import apply
from sch.evaluation.values import from_nodes
from sch.printer import display
from sch.reader.parser import Node
from sch.types.environment import Environment
from sch.types.errors import SchApplicationError
from sch.types.procedure import Procedure
from sch.types.symbol import Symbol
from sch.types.unit import Unit


def evaluate(nodes: list[Node], env: Environment) -> LispValue:
    """Convert parsed nodes to values and evaluate them in order.

    Returns the value of the last expression, or Unit for an empty program.
    """
    return evaluate_sequence(from_nodes(nodes), env)


def evaluate_sequence(exprs: list[SExpression], env: Environment) -> LispValue:
    """Implicit sequencing: evaluate each form, keep the last result."""
    result: LispValue = Unit
    for expr in exprs:
        result = evaluate_value(expr, env)
    return result


def evaluate_value(expr: SExpression, env: Environment) -> LispValue:
    match expr:
        case Symbol():
            return env.get(expr)
        case []:
            return Unit
        case [head_expr, *arg_exprs]:
            head = evaluate_value(head_expr, env)
            if not isinstance(head, Procedure):
                raise SchApplicationError(
                    f"Head of a list application is not a procedure: {display(head)}"
                )
            return apply(head, arg_exprs, env, evaluate_value)

    # --- Unit, integers and procedures evaluate to themselves ---
    return expr
