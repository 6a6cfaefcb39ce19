"""Arbitrary-length decimal arithmetic on digit strings."""

from __future__ import annotations

import argparse
import sys
from itertools import zip_longest
from typing import Optional, Sequence


def _check_digits(value: str) -> None:
    if not value or not (value.isascii() and value.isdigit()):
        raise ValueError(f"not a decimal digit string: {value!r}")


def add_decimal(left: str, right: str) -> str:
    """Sum of two decimal digit strings, keeping the longer operand's width."""
    _check_digits(left)
    _check_digits(right)
    digits: list[str] = []
    carry = 0
    for a, b in zip_longest(reversed(left), reversed(right), fillvalue="0"):
        carry, digit = divmod(int(a) + int(b) + carry, 10)
        digits.append(str(digit))
    if carry:
        digits.append(str(carry))
    return "".join(reversed(digits))


def _multiply_by_digit(number: str, digit: int) -> str:
    digits: list[str] = []
    carry = 0
    for char in reversed(number):
        carry, value = divmod(int(char) * digit + carry, 10)
        digits.append(str(value))
    if carry:
        digits.append(str(carry))
    return "".join(reversed(digits))


def multiply_decimal(left: str, right: str) -> str:
    """Product of two decimal digit strings, without leading zeros."""
    _check_digits(left)
    _check_digits(right)
    if len(left) < len(right):
        left, right = right, left
    total = "0"
    for shift, digit in enumerate(reversed(right)):
        partial = _multiply_by_digit(left, int(digit)) + "0" * shift
        total = add_decimal(total, partial)
    return total.lstrip("0") or "0"


def factorial_string(n: int) -> str:
    """``n!`` as a decimal string."""
    if n < 0:
        raise ValueError("factorial is undefined for negative numbers")
    result = "1"
    for factor in range(n, 0, -1):
        result = multiply_decimal(result, str(factor))
    return result


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Read a number from standard input and print its factorial."""
    parser = argparse.ArgumentParser(
        prog="superfactorial", description="Exact factorials of large numbers."
    )
    parser.parse_args(argv)
    print("enter a number below 500 for factorial calculation : ", end="", flush=True)
    tokens = sys.stdin.read().split()
    try:
        if not tokens:
            raise ValueError("unexpected end of input")
        value = int(tokens[0])
        answer = factorial_string(value)
    except ValueError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    print(f"factorial of {value} is {answer}")
    return 0