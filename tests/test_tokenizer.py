"""Tests for the tokenizer and number matcher."""
import pytest
from Calculator import error as E
from Calculator.Tokenizer import (
    CharClass,
    classify,
    match_number,
    strip_whitespace,
    translator,
)


def test_match_number_longest_literal():
    """Test that the longest literal starting at the position is returned."""
    assert match_number("12.5+3", 0) == "12.5"
    assert match_number("12.5+3", 5) == "3"
    assert match_number(".5", 0) == ".5"


def test_match_number_trailing_point_not_consumed():
    """A '.' without following digits is not part of the number."""
    assert match_number("12.", 0) == "12"


def test_match_number_no_digit():
    assert match_number("+3", 0) is None
    assert match_number("a", 0) is None
    assert match_number(".", 0) is None


@pytest.mark.parametrize("char, expected", [
    ("^", CharClass.OPERATOR),
    ("-", CharClass.OPERATOR),
    ("(", CharClass.BRACKET),
    (")", CharClass.BRACKET),
    ("7", CharClass.DIGIT),
    (".", CharClass.DECIMAL_POINT),
    (" ", CharClass.WHITESPACE),
    ("x", CharClass.OTHER),
    ("²", CharClass.OTHER),
])
def test_classify(char, expected):
    assert classify(char) == expected


def test_strip_whitespace():
    assert strip_whitespace(" 1 +\t2 \n") == "1+2"


def test_translator_basic():
    """Test numbers and operators become float and str tokens."""
    assert translator("2+3*4") == (2.0, "+", 3.0, "*", 4.0)
    assert translator("(1.5^2)") == ("(", 1.5, "^", 2.0, ")")


def test_translator_folds_signs_into_numbers():
    """Test signs at the start, after an operator and after '('."""
    assert translator("-3*2") == (-3.0, "*", 2.0)
    assert translator("2*-3") == (2.0, "*", -3.0)
    assert translator("2--3") == (2.0, "-", -3.0)
    assert translator("(-2)") == ("(", -2.0, ")")
    assert translator("+4") == (4.0,)


def test_translator_binary_minus_is_not_a_sign():
    assert translator("1-3") == (1.0, "-", 3.0)
    assert translator("(1)-3") == ("(", 1.0, ")", "-", 3.0)


def test_translator_implicit_multiplication():
    """Test '*' is inserted next to brackets."""
    assert translator("2(3)") == (2.0, "*", "(", 3.0, ")")
    assert translator("(1)(2)") == ("(", 1.0, ")", "*", "(", 2.0, ")")
    assert translator("(1)2") == ("(", 1.0, ")", "*", 2.0)


def test_translator_implicit_multiplication_disabled():
    with pytest.raises(E.MalformedExpression) as excinfo:
        translator("2(3)", implicit_multiplication=False)
    assert excinfo.value.code == "3011"


@pytest.mark.parametrize("problem, code", [
    ("", "3031"),
    ("1+a", "3032"),
    (".", "3008"),
    ("1.2.3", "3008"),
    ("1..2", "3008"),
    ("12.", "3008"),
    ("*2", "3028"),
    ("2+", "3029"),
    ("2+*3", "3011"),
    ("2+-", "3011"),
    ("-(2)", "3011"),
    ("1 2", "3011"),
    ("()", "3027"),
    ("(2+)", "3029"),
    ("(1+2", "3009"),
    ("((1)", "3009"),
    ("1+2)", "3010"),
    (")(", "3010"),
])
def test_translator_rejects_malformed(problem, code):
    """Test that malformed input raises MalformedExpression with its code."""
    with pytest.raises(E.MalformedExpression) as excinfo:
        translator(problem)
    assert excinfo.value.code == code


def test_translator_number_too_big():
    with pytest.raises(E.CalculationError) as excinfo:
        translator("9" * 400)
    assert excinfo.value.code == "3026"
