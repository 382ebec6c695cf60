"""Small numeric helpers used by the solver."""

import math


def _divide(numerator, denominator):
    try:
        return numerator / denominator
    except ZeroDivisionError:
        if numerator == 0 or math.isnan(numerator):
            return math.nan
        return math.copysign(math.inf, numerator) * math.copysign(1.0, denominator)


def power_of_two(number):
    """Return the square of a number."""
    return number * number


def absolute(number):
    """Return the absolute value of a number."""
    return -number if number < 0 else number


def square_root(number):
    """Approximate the square root by Newton's method (1e-7, 1000 steps)."""
    current = number
    result = 0.0
    for _ in range(1000):
        result = (current + _divide(number, current)) / 2
        if absolute(result - current) < 1e-7:
            break
        current = result
    return result