"""Evaluation of postfix expressions over single-digit operands."""

from __future__ import annotations

_DIGITS = "0123456789"


class PostfixError(ValueError):
    """Raised for a malformed or unevaluable postfix expression."""


def _truncating_divide(dividend: int, divisor: int) -> int:
    quotient = abs(dividend) // abs(divisor)
    return quotient if (dividend < 0) == (divisor < 0) else -quotient


def _power(base: int, exponent: int) -> int:
    if exponent >= 0:
        return base**exponent
    if base == 0:
        raise PostfixError("zero raised to a negative power")
    return int(base**exponent)


def _apply(operator: str, left: int, right: int) -> int:
    if operator == "+":
        return left + right
    if operator == "-":
        return left - right
    if operator == "*":
        return left * right
    if operator == "/":
        if right == 0:
            raise PostfixError("division by zero")
        return _truncating_divide(left, right)
    return _power(left, right)


def evaluate_postfix(expression: str) -> int:
    """Evaluate ``expression`` and return the value on top of the stack.

    Operands are single digits; operators are ``+ - * / ^``. Division
    truncates toward zero. Whitespace is ignored.
    """
    stack: list[int] = []
    for char in expression:
        if char.isspace():
            continue
        if char in "+-*/^":
            if len(stack) < 2:
                raise PostfixError(f"operator {char!r} needs two operands")
            right = stack.pop()
            left = stack.pop()
            stack.append(_apply(char, left, right))
        elif char in _DIGITS:
            stack.append(int(char))
        else:
            raise PostfixError(f"unexpected character {char!r}")
    if not stack:
        raise PostfixError("empty expression")
    return stack[-1]