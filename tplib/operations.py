"""Basic arithmetic on two operands and a bounded factorial."""

from __future__ import annotations

import math

MAX_FACTORIAL_OPERAND = 20


def add(a: float, b: float) -> float:
    """Return the sum of ``a`` and ``b``."""
    return a + b


def subtract(a: float, b: float) -> float:
    """Return ``a`` minus ``b``."""
    return a - b


def multiply(a: float, b: float) -> float:
    """Return the product of ``a`` and ``b``."""
    return a * b


def divide(a: float, b: float) -> float:
    """Return ``a`` divided by ``b``.

    Raises ZeroDivisionError when ``b`` is zero.
    """
    if b == 0:
        raise ZeroDivisionError("cannot divide a number by 0")
    return a / b


def factorial(n: float) -> float:
    """Return the product of every whole number from 1 up to ``n``.

    A fractional ``n`` stops at its whole part, so ``factorial(3.5)`` equals
    ``factorial(3)``. Raises ValueError for negative operands and
    OverflowError for operands above 20.
    """
    if n < 0:
        raise ValueError("cannot take the factorial of a number below 0")
    if n > MAX_FACTORIAL_OPERAND:
        raise OverflowError(
            f"factorial operand {n} is too large (maximum {MAX_FACTORIAL_OPERAND})"
        )
    return float(math.prod(range(1, math.floor(n) + 1)))