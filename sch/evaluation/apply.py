"""Application engine for sch.

Centralizes procedure application for the evaluator:
- Natives receive their argument forms unevaluated, together with the calling
  environment and the evaluator, and decide their own evaluation policy.
- Closures evaluate their arguments in the caller's environment and run their
  body in a fresh child of the environment they captured.
"""

from __future__ import annotations

from sch import EvaluatorFn, LispValue, SExpression
from sch.types.environment import Environment
from sch.types.errors import SchApplicationError, SchArityMismatch
from sch.types.procedure import Closure, Native


def apply_closure(
    fn: Closure,
    arg_exprs: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """Apply a user closure.

    Arguments are evaluated left-to-right in `env` (the caller's environment);
    the body runs in a child of `fn.env`, which is what keeps a returned
    closure working after the call that built it has finished.
    Raises SchArityMismatch when the argument count differs from the
    parameter count, before any argument is evaluated.
    """
    from sch.evaluation.evaluator import evaluate_sequence

    if len(arg_exprs) != len(fn.params):
        raise SchArityMismatch(
            f"Procedure expects {len(fn.params)} argument(s), got {len(arg_exprs)}"
        )
    args = [evaluate_fn(arg, env) for arg in arg_exprs]
    new_env = fn.extend_env(args)
    return evaluate_sequence(fn.body, new_env)


def apply(
    head: Native | Closure,
    arg_exprs: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """Apply either a Native or a Closure to raw argument expressions."""
    if isinstance(head, Closure):
        return apply_closure(head, arg_exprs, env, evaluate_fn)
    elif isinstance(head, Native):
        from sch.evaluation.special_forms import NATIVES
        return NATIVES[head.name](arg_exprs, env, evaluate_fn)
    else:
        raise SchApplicationError(f"Cannot apply non-procedure {head}")
