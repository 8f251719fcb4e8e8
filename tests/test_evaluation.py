import pytest

from sch.evaluation.evaluator import evaluate, evaluate_sequence, evaluate_value
from sch.evaluation.values import from_node, from_nodes
from sch.reader.parser import Identifier, parse
from sch.types.errors import SchApplicationError, SchUnboundVariable
from sch.types.procedure import Closure, Native
from sch.types.symbol import Symbol
from sch.types.unit import Unit


def run(source, env):
    return evaluate(parse(source), env)


def test_node_conversion():
    nodes = [Identifier("f"), 1, [Identifier("g"), [2]]]
    assert from_nodes(nodes) == [Symbol("f"), 1, [Symbol("g"), [2]]]
    assert from_node(7) == 7
    assert from_nodes([]) == []


def test_self_evaluating_values(env):
    assert evaluate_value(1, env) == 1
    assert evaluate_value(Unit, env) is Unit
    plus = Native("+")
    assert evaluate_value(plus, env) is plus


def test_symbol_lookup(env):
    env.define(Symbol("x"), 42)
    assert evaluate_value(Symbol("x"), env) == 42
    with pytest.raises(SchUnboundVariable):
        evaluate_value(Symbol("z"), env)


def test_empty_program_is_unit(env):
    assert evaluate([], env) is Unit
    assert evaluate_sequence([], env) is Unit


def test_empty_list_is_unit(env):
    assert run("()", env) is Unit


def test_sequence_returns_last(env):
    assert run("(define x 2) (define y 3) x y", env) == 3


def test_native_head_symbol(env):
    assert evaluate_value([Symbol("+"), 1, 2], env) == 3


def test_head_is_evaluated(env):
    assert run("((lambda (x) (+ x 1)) 5)", env) == 6


@pytest.mark.parametrize("source", ["(1 2 3)", "((+ 1 2) 4)", "(define x 1) (x)"])
def test_non_procedure_head(env, source):
    with pytest.raises(SchApplicationError):
        run(source, env)


def test_error_short_circuits_sequence(env):
    with pytest.raises(SchUnboundVariable):
        run("(define a 1) undefined (define b 2)", env)
    assert env.get(Symbol("a")) == 1
    assert Symbol("b") not in env


def test_bare_procedure_value(env):
    assert run("+", env) == Native("+")
    assert isinstance(run("(lambda (x) x)", env), Closure)
