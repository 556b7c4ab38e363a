"""Infix to postfix conversion and evaluation of single-digit expressions."""

from __future__ import annotations


class ExpressionError(ValueError):
    """Raised when an expression cannot be evaluated."""


def precedence(operator: str) -> int:
    """Return the binding strength of ``operator``; 0 for anything else."""
    if operator == "^":
        return 3
    if operator in ("*", "/"):
        return 2
    if operator in ("+", "-"):
        return 1
    return 0


def _is_operand(ch: str) -> bool:
    return ch.isascii() and ch.isalnum()


def infix_to_postfix(infix: str) -> str:
    """Convert an infix expression of single-character operands to postfix.

    Operators of equal precedence associate to the left. Whitespace is ignored.
    """
    output: list[str] = []
    stack: list[str] = []
    for ch in infix:
        if ch.isspace():
            continue
        if _is_operand(ch):
            output.append(ch)
        elif ch == "(":
            stack.append(ch)
        elif ch == ")":
            while stack and stack[-1] != "(":
                output.append(stack.pop())
            if stack:
                stack.pop()
        else:
            while stack and precedence(stack[-1]) >= precedence(ch):
                output.append(stack.pop())
            stack.append(ch)
    output.extend(reversed(stack))
    return "".join(output)


def _truncating_divide(dividend: int, divisor: int) -> int:
    if divisor == 0:
        raise ExpressionError("division by zero")
    quotient = abs(dividend) // abs(divisor)
    return quotient if (dividend < 0) == (divisor < 0) else -quotient


_OPERATIONS = {
    "+": lambda a, b: a + b,
    "-": lambda a, b: a - b,
    "*": lambda a, b: a * b,
    "/": _truncating_divide,
}


def evaluate_postfix(postfix: str) -> int:
    """Evaluate a postfix expression of single-digit operands.

    Division truncates toward zero. The value on top of the stack is returned.
    """
    stack: list[int] = []
    for ch in postfix:
        if ch.isspace():
            continue
        if ch.isascii() and ch.isdigit():
            stack.append(int(ch))
            continue
        operation = _OPERATIONS.get(ch)
        if operation is None:
            raise ExpressionError(f"unsupported symbol {ch!r}")
        if len(stack) < 2:
            raise ExpressionError(f"missing operand for {ch!r}")
        right = stack.pop()
        left = stack.pop()
        stack.append(operation(left, right))
    if not stack:
        raise ExpressionError("empty expression")
    return stack[-1]


def evaluate_infix(infix: str) -> int:
    """Convert ``infix`` to postfix and evaluate it."""
    return evaluate_postfix(infix_to_postfix(infix))