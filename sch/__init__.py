# Core type aliases for the sch data model.
# Runtime values are plain Python objects: int for integers, list for lists,
# Symbol for symbols, the Unit singleton, and Native/Closure for procedures.
#
# Naming guidance:
# - SExpression: use in reader/conversion code for forms (code-as-data).
# - LispValue:  use in evaluator/runtime code for evaluated values.
# Both resolve to `Any`; a list form and a list value are the same Python list.

from typing import Any, Callable

LispValue = Any
SExpression = LispValue

# Evaluator function type handed to native procedures
EvaluatorFn = Callable[..., LispValue]
