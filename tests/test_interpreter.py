import logging
import sys

import pytest

from sch import config
from sch.interpreter import Interpreter
from sch.types.errors import SchError, SchRecursionError, SchSyntaxError, SchUnboundVariable


def test_definitions_persist_across_calls(interp):
    interp.eval("(define (make-adder n) (lambda (x) (+ x n)))")
    interp.eval("(define add5 (make-adder 5))")
    assert interp.eval("(add5 10)") == 15


def test_interpreters_are_isolated():
    a, b = Interpreter(), Interpreter()
    a.eval("(define x 1)")
    with pytest.raises(SchUnboundVariable):
        b.eval("x")


def test_syntax_error_before_evaluation(interp):
    with pytest.raises(SchSyntaxError):
        interp.eval("(define x 1) (+ 1 2")
    # nothing was evaluated
    with pytest.raises(SchUnboundVariable):
        interp.eval("x")


def test_errors_share_a_base_class(interp):
    with pytest.raises(SchError):
        interp.eval("undefined")


def test_session_continues_after_error(interp):
    with pytest.raises(SchUnboundVariable):
        interp.eval("nope")
    assert interp.eval("(+ 1 1)") == 2


def test_runaway_recursion_is_reported(interp):
    with pytest.raises(SchRecursionError):
        interp.eval("(define (f) (f)) (f)")


def test_failure_is_logged_at_debug(interp, caplog):
    with caplog.at_level(logging.DEBUG, logger="sch.interpreter"):
        with pytest.raises(SchUnboundVariable):
            interp.eval("missing")
    assert "SchUnboundVariable" in caplog.text


def test_tokens_logged_at_debug(interp, caplog):
    with caplog.at_level(logging.DEBUG, logger="sch.reader.lexer"):
        interp.eval("(+ 1 2)")
    assert "Token vector from lexer" in caplog.text


# ------------------ config ------------------

def test_recursion_limit_from_env(monkeypatch):
    original = sys.getrecursionlimit()
    monkeypatch.setenv("SCH_RECURSION_LIMIT", str(original + 500))
    try:
        Interpreter()
        assert sys.getrecursionlimit() == original + 500
    finally:
        sys.setrecursionlimit(original)


@pytest.mark.parametrize("raw,expected", [("", None), ("  ", None), ("0", None), ("5000", 5000)])
def test_get_recursion_limit(monkeypatch, raw, expected):
    monkeypatch.setenv("SCH_RECURSION_LIMIT", raw)
    assert config.get_recursion_limit() == expected


def test_get_recursion_limit_rejects_garbage(monkeypatch):
    monkeypatch.setenv("SCH_RECURSION_LIMIT", "lots")
    with pytest.raises(ValueError):
        config.get_recursion_limit()


@pytest.mark.parametrize("raw,expected", [("debug", logging.DEBUG), ("", logging.WARNING), ("bogus", logging.WARNING)])
def test_log_level_from_env(monkeypatch, raw, expected):
    monkeypatch.setenv("SCH_LOGLEVEL", raw)
    assert config._get_log_level() == expected


def test_configure_logging(monkeypatch):
    monkeypatch.setenv("SCH_LOGLEVEL", "INFO")
    root = logging.getLogger()
    saved_handlers, saved_level = root.handlers[:], root.level
    root.handlers = []
    try:
        config.configure_logging()
        assert root.level == logging.INFO
    finally:
        root.handlers = saved_handlers
        root.setLevel(saved_level)


def test_deeply_nested_source_is_reported(interp):
    depth = sys.getrecursionlimit() * 2
    with pytest.raises(SchRecursionError):
        interp.eval("(" * depth + ")" * depth)


def test_deep_value_display_is_reported(interp, monkeypatch):
    def too_deep(value):
        raise RecursionError("maximum recursion depth exceeded")

    monkeypatch.setattr("sch.interpreter.display", too_deep)
    with pytest.raises(SchRecursionError):
        interp.eval_to_string("(+ 1 2)")
