import pytest

from dsakit.expressions import (
    ExpressionError,
    evaluate_infix,
    evaluate_postfix,
    infix_to_postfix,
    infix_to_prefix,
    precedence,
)


def test_precedence_ordering():
    assert precedence("^") > precedence("*")
    assert precedence("*") == precedence("/")
    assert precedence("/") > precedence("+")
    assert precedence("+") == precedence("-")
    assert precedence("+") > precedence("(")
    assert precedence("a") == precedence("(")


def test_postfix_respects_precedence():
    assert infix_to_postfix("a+b*c") == "abc*+"


def test_postfix_respects_parentheses():
    assert infix_to_postfix("(a+b)*c") == "ab+c*"


def test_prefix_of_simple_expression():
    assert infix_to_prefix("a+b*c") == "+a*bc"


@pytest.mark.parametrize(
    "expression",
    ["a+b*c", "(a+b)*(c-d)", "a^b/c-d", "((x))", "p*q+r/s^t"],
)
def test_postfix_keeps_operand_order(expression):
    result = infix_to_postfix(expression)
    operands = [ch for ch in expression if ch.isalpha()]
    assert [ch for ch in result if ch.isalpha()] == operands
    assert "(" not in result and ")" not in result


@pytest.mark.parametrize("expression", ["a+b*c", "(a+b)*(c-d)", "a^b/c-d"])
def test_prefix_keeps_symbols(expression):
    result = infix_to_prefix(expression)
    expected = sorted(ch for ch in expression if ch not in "()")
    assert sorted(result) == expected
    assert result[0] in "+-*/^"


def test_blanks_are_ignored():
    assert infix_to_postfix(" a +\tb * c ") == infix_to_postfix("a+b*c")
    assert infix_to_prefix("a + b") == infix_to_prefix("a+b")


def test_single_operand_is_unchanged():
    assert infix_to_postfix("x") == "x"
    assert infix_to_prefix("x") == "x"


@pytest.mark.parametrize("expression", ["a+b)", ")"])
def test_unmatched_close_raises(expression):
    with pytest.raises(ExpressionError):
        infix_to_postfix(expression)


def test_unmatched_open_raises():
    with pytest.raises(ExpressionError):
        infix_to_postfix("(a+b")


def test_evaluate_follows_precedence():
    assert evaluate_infix("2+3*4") == 2 + 3 * 4
    assert evaluate_infix("(2+3)*4") == (2 + 3) * 4
    assert evaluate_infix("9-4-3") == (9 - 4) - 3


def test_power_is_left_associative():
    assert evaluate_infix("2^3^2") == (2**3) ** 2


def test_evaluate_infix_matches_postfix():
    expression = "(8-2)*3/4+5^2"
    assert evaluate_infix(expression) == evaluate_postfix(infix_to_postfix(expression))


def test_division_truncates_toward_zero():
    assert evaluate_postfix("07-2/") == -3
    assert evaluate_postfix("72/") == 7 // 2


def test_negative_exponent_truncates():
    assert evaluate_postfix("203-^") == 0
    assert evaluate_postfix("103-^") == 1


def test_division_by_zero_raises():
    with pytest.raises(ExpressionError):
        evaluate_infix("5/0")


def test_zero_to_negative_power_raises():
    with pytest.raises(ExpressionError):
        evaluate_postfix("003-^")


@pytest.mark.parametrize("postfix", ["+", "1+", "12", "", "ab+"])
def test_malformed_postfix_raises(postfix):
    with pytest.raises(ExpressionError):
        evaluate_postfix(postfix)


def test_expression_error_is_value_error():
    with pytest.raises(ValueError):
        evaluate_postfix("1*")