"""Registry of native procedures for the sch evaluator.

Maps names to handler functions. The table is fixed at import time; the root
environment binds one Native per entry and `apply` dispatches through it.
Every handler receives its argument forms unevaluated:

    handler(tail, env, evaluate_fn) -> value
"""

from types import MappingProxyType

from sch.builtin.arithmetic import add, mul
from sch.evaluation.special_forms.define_form import define_form
from sch.evaluation.special_forms.lambda_form import lambda_form
from sch.evaluation.special_forms.let_form import let_form
from sch.evaluation.special_forms.set_form import set_form

NATIVES = MappingProxyType({
    "define": define_form,
    "lambda": lambda_form,
    "let": let_form,
    "set": set_form,
    "+": add,
    "*": mul,
})
