from sch import EvaluatorFn
from sch import SExpression, LispValue
from sch.evaluation.evaluator import evaluate_sequence
from sch.types.environment import Environment
from sch.types.errors import SchMalformedForm
from sch.types.symbol import Symbol


def let_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """
    (let ((name expr)...) body...)

    Every binding expression is evaluated in the outer environment, so a
    binding cannot see its siblings. The body runs in a single child scope
    holding all the bindings.
    """
    if len(tail) < 2:
        raise SchMalformedForm("let requires a binding list and a body")

    bindings, body = tail[0], tail[1:]
    if not isinstance(bindings, list):
        raise SchMalformedForm(f"let bindings must be a list, got {bindings}")

    local_env = env.new_child()
    for binding in bindings:
        if not (isinstance(binding, list) and len(binding) == 2 and isinstance(binding[0], Symbol)):
            raise SchMalformedForm(f"let binding must have the form (name expr), got {binding}")
        name, expr = binding
        local_env.define(name, evaluate_fn(expr, env))

    return evaluate_sequence(body, local_env)
