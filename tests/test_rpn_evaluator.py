"""Test RPNEvaluator."""

import math

import pytest

from rpncalc.errors import EmptyExpression, InvalidOperator, StackUnderflow
from rpncalc.operators import Operators
from rpncalc.rpn_evaluator import RPNEvaluator
from rpncalc.token_system import PLUS, MINUS, MULTIPLY, DIVIDE, LEFT_PAREN, number


@pytest.mark.parametrize("sequence,expected", [
    ([number(8), number(2), MINUS], 6.0),
    ([number(2), number(8), MINUS], -6.0),
    ([number(8), number(2), DIVIDE], 4.0),
    ([number(2), number(8), DIVIDE], 0.25),
    ([number(3), number(4), PLUS], 7.0),
    ([number(3), number(4), MULTIPLY], 12.0),
    ([number(42)], 42.0),
])
def test_evaluate_operand_order(sequence, expected):
    """The first popped value is the right-hand operand."""
    result = RPNEvaluator.evaluate(sequence)
    assert result == expected
    assert type(result) is float


def test_evaluate_division_by_zero():
    assert RPNEvaluator.evaluate([number(1), number(0), DIVIDE]) == math.inf
    assert math.isnan(RPNEvaluator.evaluate([number(0), number(0), DIVIDE]))


def test_evaluate_stack_underflow():
    with pytest.raises(StackUnderflow) as excinfo:
        RPNEvaluator.evaluate([number(1), PLUS])
    assert excinfo.value.operator == "+"
    assert excinfo.value.available == 1


@pytest.mark.parametrize("sequence,remaining", [
    ([], 0),
    ([number(1), number(2)], 2),
])
def test_evaluate_empty_expression(sequence, remaining):
    with pytest.raises(EmptyExpression) as excinfo:
        RPNEvaluator.evaluate(sequence)
    assert excinfo.value.remaining == remaining


def test_evaluate_bracket_in_postfix():
    with pytest.raises(InvalidOperator):
        RPNEvaluator.evaluate([number(1), number(2), LEFT_PAREN])


def test_operators_float_semantics():
    assert Operators.div(-1, 0) == -math.inf
    assert Operators.mul(1e308, 10) == math.inf
    assert Operators.sub(1, 3) == -2.0
