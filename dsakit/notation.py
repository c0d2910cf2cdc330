"""Conversions between infix, prefix and postfix expression notation.

Operands are single ASCII letters or digits. Every other character is
treated as an operator.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable

__all__ = [
    "NotationError",
    "precedence",
    "infix_to_postfix",
    "infix_to_prefix",
    "postfix_to_infix",
    "postfix_to_prefix",
    "prefix_to_infix",
    "prefix_to_postfix",
]

_PRECEDENCE = {"^": 3, "*": 2, "/": 2, "+": 1, "-": 1}


class NotationError(ValueError):
    """Raised when an expression is malformed."""


def _is_operand(symbol: str) -> bool:
    return symbol.isascii() and symbol.isalnum()


def precedence(symbol: str) -> int:
    """Return the binding strength of an operator; 0 for anything else."""
    return _PRECEDENCE.get(symbol, 0)


def _shunting_yard(expression: str) -> str:
    output: list[str] = []
    stack: list[str] = []
    for symbol in expression:
        if _is_operand(symbol):
            output.append(symbol)
        elif symbol == "(":
            stack.append(symbol)
        elif symbol == ")":
            while stack and stack[-1] != "(":
                output.append(stack.pop())
            if not stack:
                raise NotationError("Unbalanced parentheses")
            stack.pop()
        else:
            while stack and precedence(stack[-1]) >= precedence(symbol):
                output.append(stack.pop())
            stack.append(symbol)
    while stack:
        symbol = stack.pop()
        if symbol == "(":
            raise NotationError("Unbalanced parentheses")
        output.append(symbol)
    return "".join(output)


def infix_to_postfix(expression: str) -> str:
    """Convert an infix expression to postfix notation."""
    return _shunting_yard(expression)


_MIRROR = str.maketrans("()", ")(")


def infix_to_prefix(expression: str) -> str:
    """Convert an infix expression to prefix notation."""
    mirrored = expression[::-1].translate(_MIRROR)
    return _shunting_yard(mirrored)[::-1]


def _fold(
    symbols: Iterable[str],
    combine: Callable[[str, str, str], str],
    kind: str,
) -> str:
    """Reduce operand/operator symbols with a stack.

    ``combine`` receives the operator, the first popped and the second
    popped operand.
    """
    stack: list[str] = []
    for symbol in symbols:
        if _is_operand(symbol):
            stack.append(symbol)
            continue
        if len(stack) < 2:
            raise NotationError(f"Malformed {kind} expression")
        first = stack.pop()
        second = stack.pop()
        stack.append(combine(symbol, first, second))
    if len(stack) != 1:
        raise NotationError(f"Invalid {kind} expression")
    return stack[0]


def postfix_to_infix(expression: str) -> str:
    """Convert a postfix expression to fully parenthesised infix."""
    return _fold(expression, lambda op, a, b: f"({b}{op}{a})", "postfix")


def postfix_to_prefix(expression: str) -> str:
    """Convert a postfix expression to prefix notation."""
    return _fold(expression, lambda op, a, b: f"{op}{b}{a}", "postfix")


def prefix_to_infix(expression: str) -> str:
    """Convert a prefix expression to fully parenthesised infix."""
    return _fold(reversed(expression), lambda op, a, b: f"({a}{op}{b})", "prefix")


def prefix_to_postfix(expression: str) -> str:
    """Convert a prefix expression to postfix notation."""
    return _fold(reversed(expression), lambda op, a, b: f"{a}{b}{op}", "prefix")