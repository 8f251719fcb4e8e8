from sch import EvaluatorFn
from sch import SExpression, LispValue
from sch.types.environment import Environment
from sch.types.errors import SchMalformedForm
from sch.types.symbol import Symbol


def set_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    if len(tail) != 2:
        raise SchMalformedForm("set requires exactly 2 arguments: (set var value)")
    var_sym, val_expr = tail
    if not isinstance(var_sym, Symbol):
        raise SchMalformedForm(f"set first argument must be a Symbol, got {var_sym}")
    value = evaluate_fn(val_expr, env)
    env.set(var_sym, value)

    return value
