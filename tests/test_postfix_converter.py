"""Test the Shunting-Yard conversion."""

import pytest

from rpncalc.errors import UnbalancedBrackets
from rpncalc.postfix_converter import to_postfix
from rpncalc.token_system import PLUS, MINUS, MULTIPLY, DIVIDE, number
from rpncalc.tokenizer import tokenize


def symbols(tokens):
    return " ".join(t.symbol for t in tokens)


def test_to_postfix_nested():
    tokens = to_postfix(tokenize("133+(15-(125/3)+1)"))
    assert tokens == [
        number(133), number(15), number(0), number(1), MINUS,
        number(125), number(3), DIVIDE, MULTIPLY, PLUS,
        number(1), PLUS, PLUS,
    ]


def test_to_postfix_full_expression():
    tokens = to_postfix(tokenize("125-(145*9+3-2(12/3))-2"))
    assert tokens == [
        number(125), number(0), number(1), MINUS,
        number(145), number(9), MULTIPLY, number(3), PLUS,
        number(2), number(12), number(3), DIVIDE, MULTIPLY, MINUS,
        MULTIPLY, PLUS, number(2), MINUS,
    ]


@pytest.mark.parametrize("expr,expected", [
    ("8-3-2", "8 3 - 2 -"),
    ("8/4/2", "8 4 / 2 /"),
    ("2+3*4", "2 3 4 * +"),
    ("2*3+4", "2 3 * 4 +"),
    ("(2+3)*4", "2 3 + 4 *"),
    ("((7))", "7"),
    ("", ""),
])
def test_to_postfix_various(expr, expected):
    """Precedence and left associativity decide the output order."""
    assert symbols(to_postfix(tokenize(expr))) == expected


@pytest.mark.parametrize("expr", [
    "(12",
    "((1)",
    "12)",
    "1)+(2",
    "(1+2))",
])
def test_to_postfix_unbalanced(expr):
    with pytest.raises(UnbalancedBrackets):
        to_postfix(tokenize(expr))


def test_to_postfix_has_no_brackets():
    tokens = to_postfix(tokenize("2((3+4)*(5-1))"))
    assert all(t.symbol not in "()" for t in tokens)
