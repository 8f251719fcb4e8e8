"""Arithmetic natives.

Both operators evaluate every argument in the calling environment and fold
the resulting integers left to right.
"""
from __future__ import annotations

from sch import EvaluatorFn, LispValue, SExpression
from sch.types.environment import Environment
from sch.types.errors import SchMalformedForm, SchTypeError


def _integer_operands(
    name: str, tail: list[SExpression], env: Environment, evaluate_fn: EvaluatorFn
) -> list[int]:
    """Evaluate each argument, requiring at least one and only integers."""
    if not tail:
        raise SchMalformedForm(f"{name} requires at least 1 argument")
    operands = []
    for expr in tail:
        value = evaluate_fn(expr, env)
        if type(value) is not int:
            raise SchTypeError(f"All arguments to {name} must be integers, got {value}")
        operands.append(value)
    return operands


def add(tail: list[SExpression], env: Environment, evaluate_fn: EvaluatorFn) -> LispValue:
    result, *rest = _integer_operands("+", tail, env, evaluate_fn)
    for x in rest:
        result += x
    return result


def mul(tail: list[SExpression], env: Environment, evaluate_fn: EvaluatorFn) -> LispValue:
    result, *rest = _integer_operands("*", tail, env, evaluate_fn)
    for x in rest:
        result *= x
    return result
