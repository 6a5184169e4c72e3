"""Conversion of infix expressions to postfix and prefix form, and evaluation.

Operands are single characters. The operators ``+ - * / ^`` are understood,
all treated as left-associative, with ``^`` binding tightest. Spaces and tabs
in the input are ignored.
"""

from __future__ import annotations

from fractions import Fraction

__all__ = [
    "ExpressionError",
    "precedence",
    "infix_to_postfix",
    "infix_to_prefix",
    "evaluate_postfix",
    "evaluate_infix",
]

_OPERATORS = frozenset("+-*/^")
_BLANKS = frozenset(" \t")
_DIGITS = frozenset("0123456789")
_MIRROR = str.maketrans("()", ")(")


class ExpressionError(ValueError):
    """Raised for a malformed expression or one that cannot be evaluated."""


def precedence(symbol: str) -> int:
    """Return the binding strength of ``symbol``; 0 for non-operators."""
    if symbol == "^":
        return 3
    if symbol in ("*", "/"):
        return 2
    if symbol in ("+", "-"):
        return 1
    return 0


def infix_to_postfix(expression: str) -> str:
    """Convert an infix expression to postfix notation."""
    output: list[str] = []
    stack: list[str] = []
    for symbol in expression:
        if symbol in _BLANKS:
            continue
        if symbol == "(":
            stack.append(symbol)
        elif symbol == ")":
            while True:
                if not stack:
                    raise ExpressionError("unmatched ')' in expression")
                top = stack.pop()
                if top == "(":
                    break
                output.append(top)
        elif symbol in _OPERATORS:
            while stack and precedence(stack[-1]) >= precedence(symbol):
                output.append(stack.pop())
            stack.append(symbol)
        else:
            output.append(symbol)
    while stack:
        top = stack.pop()
        if top == "(":
            raise ExpressionError("unmatched '(' in expression")
        output.append(top)
    return "".join(output)


def infix_to_prefix(expression: str) -> str:
    """Convert an infix expression to prefix notation.

    The expression is mirrored (reversed with parentheses swapped), converted
    to postfix, and the result reversed.
    """
    mirrored = expression[::-1].translate(_MIRROR)
    return infix_to_postfix(mirrored)[::-1]


def _divide(dividend: int, divisor: int) -> int:
    if divisor == 0:
        raise ExpressionError("division by zero")
    quotient = abs(dividend) // abs(divisor)
    return quotient if (dividend < 0) == (divisor < 0) else -quotient


def _power(base: int, exponent: int) -> int:
    if exponent >= 0:
        return base**exponent
    if base == 0:
        raise ExpressionError("zero raised to a negative power")
    return int(Fraction(base) ** exponent)


def _apply(operator: str, left: int, right: int) -> int:
    if operator == "+":
        return left + right
    if operator == "-":
        return left - right
    if operator == "*":
        return left * right
    if operator == "/":
        return _divide(left, right)
    return _power(left, right)


def evaluate_postfix(postfix: str) -> int:
    """Evaluate a postfix expression of single-digit operands.

    Division truncates toward zero; powers with a negative exponent are
    truncated to an integer.
    """
    stack: list[int] = []
    for symbol in postfix:
        if symbol in _BLANKS:
            continue
        if symbol in _DIGITS:
            stack.append(int(symbol))
        elif symbol in _OPERATORS:
            if len(stack) < 2:
                raise ExpressionError(f"operator {symbol!r} is missing an operand")
            right = stack.pop()
            left = stack.pop()
            stack.append(_apply(symbol, left, right))
        else:
            raise ExpressionError(f"cannot evaluate symbol {symbol!r}")
    if len(stack) != 1:
        raise ExpressionError("expression does not reduce to a single value")
    return stack[0]


def evaluate_infix(expression: str) -> int:
    """Evaluate an infix expression of single-digit operands."""
    return evaluate_postfix(infix_to_postfix(expression))