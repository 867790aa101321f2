# tests/test_evaluator.py
"""
Tests for the big-step evaluator.
"""

import pytest

from simple_lang import (
    Env, Number, Boolean, Variable, Add, Multiply, LessThan,
    DoNothing, Assign, If, Sequence, While, evaluate,
    UnboundVariable, TypeMismatch, InvalidCondition,
)
from programs import BRANCH_ON_X, TRIPLE_UNTIL_FIVE


class TestEvaluateExpressions:

    def test_values_evaluate_to_themselves(self, empty_env):
        assert evaluate(Number(23), empty_env) == Number(23)
        assert evaluate(Boolean(False), empty_env) == Boolean(False)

    def test_variable(self):
        assert evaluate(Variable("x"), Env({"x": Number(23)})) == Number(23)

    def test_compound(self, xy_env):
        expr = LessThan(Add(Variable("x"), Number(2)), Variable("y"))
        assert evaluate(expr, xy_env) == Boolean(True)
        assert evaluate(Multiply(Variable("x"), Variable("y")), xy_env) == Number(10)

    def test_unbound_variable(self, empty_env):
        with pytest.raises(UnboundVariable):
            evaluate(Variable("z"), empty_env)

    def test_ill_typed(self, flag_env):
        with pytest.raises(TypeMismatch) as info:
            evaluate(Multiply(Variable("x"), Number(2)), flag_env)
        assert info.value.operator == "*"


class TestEvaluateStatements:

    def test_do_nothing_keeps_env(self, xy_env):
        assert evaluate(DoNothing(), xy_env) is xy_env

    def test_assign(self, empty_env):
        assert evaluate(Assign("x", Number(4)), empty_env) == Env({"x": Number(4)})
        assert len(empty_env) == 0

    def test_if_true_branch(self, flag_env):
        assert evaluate(BRANCH_ON_X, flag_env) == Env({"x": Boolean(True), "y": Number(1)})

    def test_if_untaken_branch_is_not_evaluated(self, flag_env):
        stmt = If(Variable("x"), Assign("y", Number(1)), Assign("y", Variable("missing")))
        assert evaluate(stmt, flag_env).lookup("y") == Number(1)

    def test_if_rejects_numbers(self, xy_env):
        with pytest.raises(InvalidCondition):
            evaluate(If(Variable("x"), DoNothing(), DoNothing()), xy_env)

    def test_sequence_threads_env(self, empty_env):
        stmt = Sequence(Assign("x", Number(8)), Assign("z", Add(Variable("x"), Number(2))))
        assert evaluate(stmt, empty_env) == Env({"x": Number(8), "z": Number(10)})

    def test_while(self):
        assert evaluate(TRIPLE_UNTIL_FIVE, Env({"x": Number(1)})) == Env({"x": Number(9)})

    def test_while_counts_up(self):
        stmt = While(LessThan(Variable("z"), Number(13)), Assign("z", Add(Variable("z"), Number(1))))
        assert evaluate(stmt, Env({"z": Number(10)})) == Env({"z": Number(13)})

    def test_long_loop_does_not_grow_the_stack(self):
        stmt = While(
            LessThan(Variable("i"), Number(20000)),
            Assign("i", Add(Variable("i"), Number(1))),
        )
        assert evaluate(stmt, Env({"i": Number(0)})).lookup("i") == Number(20000)

    def test_while_condition_must_be_boolean(self):
        with pytest.raises(InvalidCondition):
            evaluate(While(Number(1), DoNothing()), Env())

    def test_unknown_node(self, empty_env):
        with pytest.raises(TypeError):
            evaluate(42, empty_env)
