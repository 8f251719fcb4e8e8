from sch import EvaluatorFn
from sch import SExpression, LispValue
from sch.evaluation.special_forms.lambda_form import parse_params
from sch.types.environment import Environment
from sch.types.errors import SchMalformedForm
from sch.types.procedure import Closure
from sch.types.symbol import Symbol
from sch.types.unit import Unit


def define_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """
    (define name value)
    (define (name params...) body...)

    Binds in the current environment only; a name already bound in this frame
    raises SchDuplicateBinding.
    """
    if not tail:
        raise SchMalformedForm("define requires a name")

    target = tail[0]

    # Function shorthand: nothing is evaluated, the closure captures env itself
    if isinstance(target, list):
        if not target or not isinstance(target[0], Symbol):
            raise SchMalformedForm(f"define: procedure name must be a Symbol, got {target}")
        name = target[0]
        params = parse_params(target[1:], "define")
        env.define(name, Closure(params, list(tail[1:]), env))
        return Unit

    if not isinstance(target, Symbol):
        raise SchMalformedForm(f"define: first argument must be a Symbol, got {target}")
    if len(tail) != 2:
        raise SchMalformedForm("define requires exactly 2 arguments: (define name value)")

    value = evaluate_fn(tail[1], env)
    env.define(target, value)
    return Unit
