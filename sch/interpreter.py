from __future__ import annotations

import logging
import sys
from contextlib import contextmanager
from typing import Iterator

from sch import LispValue
from sch.config import get_recursion_limit
from sch.evaluation.evaluator import evaluate
from sch.printer import display
from sch.reader.parser import Node, parse
from sch.types.environment import Environment
from sch.types.errors import SchError, SchRecursionError

logger = logging.getLogger(__name__)


@contextmanager
def _reported_errors() -> Iterator[None]:
    try:
        yield
    except RecursionError as e:
        raise SchRecursionError("Maximum evaluation depth exceeded") from e
    except SchError as e:
        logger.debug("Evaluation failed: %s: %s", type(e).__name__, e)
        raise


class Interpreter:
    """
    Reads and evaluates sch source text.
    Owns a single root environment, so definitions persist across calls.
    """

    def __init__(self):
        self.env: Environment = Environment.new_root()

        limit = get_recursion_limit()
        if limit is not None and limit > sys.getrecursionlimit():
            sys.setrecursionlimit(limit)

    def eval(self, code: str) -> LispValue:
        """Evaluate every expression in `code` and return the last value."""
        with _reported_errors():
            nodes = parse(code)
        return self.eval_nodes(nodes)

    def eval_nodes(self, nodes: list[Node]) -> LispValue:
        with _reported_errors():
            return evaluate(nodes, self.env)

    def eval_to_string(self, code: str) -> str:
        value = self.eval(code)
        with _reported_errors():
            return display(value)
