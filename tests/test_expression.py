import pytest

from dskit.expression import (
    ExpressionError,
    evaluate_infix,
    evaluate_postfix,
    infix_to_postfix,
    precedence,
)


@pytest.mark.parametrize(
    "operator, expected",
    [("^", 3), ("*", 2), ("/", 2), ("+", 1), ("-", 1), ("(", 0), ("x", 0)],
)
def test_precedence(operator, expected):
    assert precedence(operator) == expected


def test_infix_to_postfix_respects_precedence():
    assert infix_to_postfix("a+b*c") == "abc*+"


def test_parentheses_override_precedence():
    assert infix_to_postfix("(a+b)*c") == "ab+c*"


def test_whitespace_is_ignored():
    assert infix_to_postfix("a + b * c") == infix_to_postfix("a+b*c")


def test_single_operand_passes_through():
    assert infix_to_postfix("7") == "7"


def test_postfix_keeps_operands_in_order():
    infix = "a*(b-c)/d+e"
    postfix = infix_to_postfix(infix)
    operands = [ch for ch in infix if ch.isalnum()]
    assert [ch for ch in postfix if ch.isalnum()] == operands
    assert "(" not in postfix and ")" not in postfix
    assert sorted(postfix) == sorted(ch for ch in infix if ch not in "()")


@pytest.mark.parametrize(
    "infix",
    ["2+3*4", "(2+3)*4", "9-4-3", "8/2*3", "(1+2)*(3+4)", "5"],
)
def test_evaluate_infix_matches_integer_arithmetic(infix):
    assert evaluate_infix(infix) == int(infix_value(infix))


def infix_value(infix):
    # The expressions above only use exact integer division.
    return {"2+3*4": 14, "(2+3)*4": 20, "9-4-3": 2, "8/2*3": 12,
            "(1+2)*(3+4)": 21, "5": 5}[infix]


def test_evaluate_postfix_direct():
    assert evaluate_postfix("23*4+") == 2 * 3 + 4


def test_division_truncates_toward_zero():
    assert evaluate_postfix("07-2/") == -3
    assert evaluate_postfix("72/") == 3


def test_division_by_zero():
    with pytest.raises(ExpressionError):
        evaluate_postfix("30/")


def test_missing_operand():
    with pytest.raises(ExpressionError):
        evaluate_postfix("3+")


def test_unsupported_symbol():
    with pytest.raises(ExpressionError):
        evaluate_postfix("23^")


def test_empty_expression():
    with pytest.raises(ExpressionError):
        evaluate_postfix("")


def test_letters_cannot_be_evaluated():
    with pytest.raises(ExpressionError):
        evaluate_infix("a+b")


def test_round_trip_is_consistent():
    infix = "1+2*3-4/2"
    assert evaluate_infix(infix) == evaluate_postfix(infix_to_postfix(infix))
    assert evaluate_infix(infix) == 1 + 2 * 3 - 4 // 2