"""Bracket matching and parenthesis checks."""

from __future__ import annotations

from enum import Enum

__all__ = [
    "Balance",
    "is_balanced",
    "check_balance",
    "minimum_cost",
    "has_redundant_parentheses",
]

_PAIRS = {")": "(", "]": "[", "}": "{"}
_OPENERS = frozenset(_PAIRS.values())
_OPERATORS = frozenset("+-*/")


class Balance(Enum):
    """Outcome of checking the brackets of an expression."""

    BALANCED = "brackets are well balanced"
    EXTRA_RIGHT = "right brackets are more than the left brackets"
    MISMATCHED = "mismatched brackets"
    EXTRA_LEFT = "left brackets are more than right"

    @property
    def ok(self) -> bool:
        return self is Balance.BALANCED


def is_balanced(text: str) -> bool:
    """Return whether ``text``, made only of brackets, is properly nested.

    Any character that is not an opening bracket is treated as a closer, so
    other characters make the text unbalanced.
    """
    stack: list[str] = []
    for ch in text:
        if ch in _OPENERS:
            stack.append(ch)
        elif stack and _PAIRS.get(ch) == stack[-1]:
            stack.pop()
        else:
            return False
    return not stack


def check_balance(text: str) -> Balance:
    """Classify the brackets in an expression; other characters are ignored."""
    stack: list[str] = []
    for ch in text:
        if ch in _OPENERS:
            stack.append(ch)
        elif ch in _PAIRS:
            if not stack:
                return Balance.EXTRA_RIGHT
            if stack.pop() != _PAIRS[ch]:
                return Balance.MISMATCHED
    return Balance.EXTRA_LEFT if stack else Balance.BALANCED


def minimum_cost(text: str) -> int:
    """Return the fewest brace flips that balance ``text``, or -1 if impossible.

    Any character other than ``{`` counts as ``}``.
    """
    if len(text) % 2 == 1:
        return -1
    stack: list[str] = []
    for ch in text:
        if ch == "{":
            stack.append(ch)
        elif stack and stack[-1] == "{":
            stack.pop()
        else:
            stack.append("}")
    closers = stack.count("}")
    openers = len(stack) - closers
    return (closers + 1) // 2 + (openers + 1) // 2


def has_redundant_parentheses(text: str) -> bool:
    """Return whether some pair of parentheses encloses no operator."""
    stack: list[str] = []
    for ch in text:
        if ch == "(" or ch in _OPERATORS:
            stack.append(ch)
        elif ch == ")":
            redundant = True
            while True:
                if not stack:
                    raise ValueError("unmatched ')' in expression")
                top = stack.pop()
                if top == "(":
                    break
                redundant = False
            if redundant:
                return True
    return False