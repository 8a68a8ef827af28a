"""Test the tokenizer."""

import pytest

from rpncalc.errors import InvalidCharacter, NumericOverflow
from rpncalc.token_system import (
    NEGATE_GROUP, PLUS, MINUS, MULTIPLY, DIVIDE, LEFT_PAREN, RIGHT_PAREN, number
)
from rpncalc.tokenizer import emit, strip_spaces, tokenize


def test_tokenize_negated_group():
    """'-(' is rewritten to '+(0-1)*('."""
    tokens = tokenize("12-(13+7)*3")
    assert tokens == [
        number(12), PLUS, LEFT_PAREN, number(0), MINUS, number(1), RIGHT_PAREN, MULTIPLY,
        LEFT_PAREN, number(13), PLUS, number(7), RIGHT_PAREN, MULTIPLY, number(3),
    ]


def test_tokenize_implicit_multiplication():
    """A number directly followed by '(' gets a Multiply inserted."""
    assert tokenize("2(3+4)") == [
        number(2), MULTIPLY, LEFT_PAREN, number(3), PLUS, number(4), RIGHT_PAREN,
    ]


def test_tokenize_no_multiplication_between_groups():
    """')(' adjacency is left alone."""
    assert tokenize("(2)(3)") == [
        LEFT_PAREN, number(2), RIGHT_PAREN, LEFT_PAREN, number(3), RIGHT_PAREN,
    ]


def test_tokenize_multi_digit_and_leading_zeros():
    assert tokenize("007*120/4") == [number(7), MULTIPLY, number(120), DIVIDE, number(4)]


def test_tokenize_leading_minus():
    """A leading bare minus stays a binary operator."""
    assert tokenize("-5") == [MINUS, number(5)]
    assert tokenize("-(5)") == list(NEGATE_GROUP) + [LEFT_PAREN, number(5), RIGHT_PAREN]


def test_tokenize_empty():
    assert tokenize("") == []


@pytest.mark.parametrize("expr,char", [
    ("2x3", "x"),
    ("1.5", "."),
    ("2\t3", "\t"),
    ("2^3", "^"),
    ("²", "²"),
    ("sqrt(4)", "s"),
])
def test_tokenize_invalid_character(expr, char):
    """Unsupported characters are reported with the full expression."""
    with pytest.raises(InvalidCharacter) as excinfo:
        tokenize(expr)
    assert excinfo.value.char == char
    assert excinfo.value.context == expr


def test_tokenize_largest_literal():
    assert tokenize("18446744073709551615") == [number(2 ** 64 - 1)]


def test_tokenize_overflow():
    with pytest.raises(NumericOverflow) as excinfo:
        tokenize("1+18446744073709551616")
    assert excinfo.value.literal == "18446744073709551616"
    assert excinfo.value.context == "1+18446744073709551616"


def test_strip_spaces_only_removes_spaces():
    assert strip_spaces(" 12 - ( 13 + 7 ) ") == "12-(13+7)"
    assert strip_spaces("1\t+2") == "1\t+2"


def test_emit():
    assert emit("-", "(") == NEGATE_GROUP
    assert emit("-", "3") == (MINUS,)
    assert emit("-", None) == (MINUS,)
    assert emit("(", "1") == (LEFT_PAREN,)
    assert emit("x", None) is None
