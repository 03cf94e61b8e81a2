"""Evaluation of postfix expressions made of single-digit operands."""

from __future__ import annotations

import operator
import string
from typing import Callable

MAX_DEPTH = 100
_SENTINEL = ")"


class PostfixError(ValueError):
    """Raised when a postfix expression cannot be evaluated."""


def _divide(dividend: int, divisor: int) -> int:
    if divisor == 0:
        raise PostfixError("division by zero")
    quotient = abs(dividend) // abs(divisor)
    return quotient if (dividend < 0) == (divisor < 0) else -quotient


_OPERATORS: dict[str, Callable[[int, int], int]] = {
    "+": operator.add,
    "-": operator.sub,
    "*": operator.mul,
    "/": _divide,
}


def evaluate_postfix(expression: str) -> int:
    """Evaluate a postfix expression of single digits and ``+ - * /``.

    Evaluation stops at the first ``)``; other characters are ignored.
    Division truncates toward zero. The value on top of the stack is returned.
    """
    stack: list[int] = []
    for ch in expression:
        if ch == _SENTINEL:
            break
        if ch in string.digits:
            if len(stack) >= MAX_DEPTH:
                raise PostfixError("stack overflow")
            stack.append(int(ch))
        elif ch in _OPERATORS:
            if len(stack) < 2:
                raise PostfixError(f"stack underflow at operator {ch!r}")
            right = stack.pop()
            left = stack.pop()
            stack.append(_OPERATORS[ch](left, right))
    if not stack:
        raise PostfixError("stack underflow: no value to return")
    return stack[-1]