from sch import EvaluatorFn
from sch import SExpression, LispValue
from sch.types.environment import Environment
from sch.types.errors import SchMalformedForm
from sch.types.procedure import Closure
from sch.types.symbol import Symbol


def parse_params(params: SExpression, form: str) -> list[Symbol]:
    """Validate a parameter list: a list of distinct Symbols."""
    if not isinstance(params, list):
        raise SchMalformedForm(f"{form} parameter list must be a list, got {params}")
    for p in params:
        if not isinstance(p, Symbol):
            raise SchMalformedForm(f"{form} parameter must be a Symbol, got {p}")
    if len(set(params)) != len(params):
        raise SchMalformedForm(f"{form} parameter names must be distinct")
    return list(params)


def lambda_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """
    (lambda (params...) body...)
    Nothing is evaluated. The closure captures a fresh child of the defining
    environment; a body with no forms returns Unit when called.
    """
    if not tail:
        raise SchMalformedForm("lambda requires at least a parameter list")

    params = parse_params(tail[0], "lambda")
    return Closure(params, list(tail[1:]), env.new_child())
