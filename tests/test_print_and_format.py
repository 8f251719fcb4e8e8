import pytest

from sch.printer import display
from sch.types.procedure import Native
from sch.types.symbol import Symbol
from sch.types.unit import Unit


@pytest.mark.parametrize(
    "value,expected",
    [
        (Unit, "()"),
        (Symbol("abc"), "abc"),
        (12345, "12345"),
        ([], "()"),
        ([1, Symbol("x"), [2, 3]], "(1 x (2 3))"),
        (Native("+"), "#<procedure:+>"),
    ]
)
def test_display(value, expected):
    assert display(value) == expected


def test_display_closure_is_opaque(interp):
    assert interp.eval_to_string("(lambda (x) x)") == "#<procedure>"


@pytest.mark.parametrize(
    "source,expected",
    [
        ("(+ 1 2)", "3"),
        ("(define x 2)", "()"),
        ("", "()"),
        ("*", "#<procedure:*>"),
    ]
)
def test_eval_to_string(interp, source, expected):
    assert interp.eval_to_string(source) == expected
