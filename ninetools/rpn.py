"""Evaluation of single-digit reverse Polish notation expressions."""

from __future__ import annotations

import operator
import sys
from collections.abc import Callable

_OPERATORS: dict[str, Callable[[float, float], float]] = {
    "+": operator.add,
    "-": operator.sub,
    "*": operator.mul,
    "/": operator.truediv,
}
_ALLOWED = frozenset("0123456789+-/*")


def evaluate(expression: str) -> float:
    """Evaluate an RPN expression made of single digits and + - * /."""
    if not expression:
        raise ValueError("Error: empty input!")
    stack: list[float] = []
    for token in expression.split():
        if len(token) > 1 or token not in _ALLOWED:
            raise ValueError("Error: invalid input!")
        apply = _OPERATORS.get(token)
        if apply is None:
            stack.append(float(token))
            continue
        if len(stack) < 2:
            raise ValueError("Error: invalid sequence!")
        second = stack.pop()
        first = stack.pop()
        if token == "/" and second == 0:
            raise ZeroDivisionError("Error: dividing by zero!")
        stack.append(apply(first, second))
    if len(stack) != 1:
        raise ValueError("Error: invalid sequence!")
    return stack[0]


def main(argv: list[str] | None = None) -> int:
    """Evaluate the expression given as the single command-line argument."""
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) != 1:
        print("Provide an RPN string!")
        return 0
    try:
        print(f"{evaluate(args[0]):g}")
    except (ValueError, ZeroDivisionError) as exc:
        print(exc)
    return 0


if __name__ == "__main__":
    sys.exit(main())