"""Checking bracketed arithmetic expressions whose operands read the same both ways."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence

_CLOSING = {")": "(", "]": "[", "}": "{"}
_OPENING = frozenset(_CLOSING.values())
_OPERATORS = frozenset("+-*/")


def is_palindrome(text: str) -> bool:
    """Whether ``text`` reads the same forwards and backwards."""
    return text == text[::-1]


def is_valid_operator(char: str) -> bool:
    """Whether ``char`` is one of the four arithmetic operators."""
    return char in _OPERATORS


def is_valid_expression(expr: str) -> bool:
    """Whether ``expr`` has balanced brackets, no operator just before a closing
    bracket, and operand characters that together form a non-empty palindrome."""
    open_brackets: list[str] = []
    operands: list[str] = []
    for index, char in enumerate(expr):
        if char in _OPENING:
            open_brackets.append(char)
        elif char in _CLOSING:
            if not open_brackets or open_brackets[-1] != _CLOSING[char]:
                return False
            open_brackets.pop()
        elif is_valid_operator(char):
            following = expr[index + 1 : index + 2]
            if following and following in _CLOSING:
                return False
        else:
            operands.append(char)
    return not open_brackets and bool(operands) and is_palindrome("".join(operands))


def main(argv: Sequence[str] | None = None) -> int:
    """Judge one expression, given as an argument or as the first word on stdin."""
    parser = argparse.ArgumentParser(description="Check a palindromic bracketed expression.")
    parser.add_argument("expression", nargs="?", help="expression to check (default: read stdin)")
    args = parser.parse_args(argv)
    expression = args.expression
    if expression is None:
        words = sys.stdin.read().split()
        expression = words[0] if words else ""
    verdict = "Valid Expression." if is_valid_expression(expression) else "Invalid Expression!"
    print(verdict + str(is_palindrome(expression)).lower())
    return 0