"""Solving reduced polynomial equations of degree up to two."""

from computor.maths import absolute, power_of_two, square_root


def format_number(value):
    """Format a number with six significant digits."""
    return "%.6g" % value


def _solve_constant(constant):
    if constant == 0:
        return "Any real number is a solution.\n"
    return "No solution.\n\n"


def _solve_linear(coefficients):
    result = -coefficients[0] / coefficients[1]
    return f"The solution is:\n{format_number(result)}\n\n"


def _solve_quadratic(coefficients):
    c0, c1, c2 = coefficients
    denominator = 2 * c2
    delta = power_of_two(c1) - 4 * c2 * c0
    if delta == 0:
        result = -c1 / denominator
        return (
            "Discriminant is null, the only real solutions is\n"
            f"{format_number(result)}\n\n"
        )
    root = square_root(absolute(delta))
    middle = -c1 / denominator
    offset = root / denominator
    if delta > 0:
        return (
            "Discriminant is strictly positive, the two real solutions are\n"
            f"{format_number(middle + offset)}\n"
            f"{format_number(middle - offset)}\n\n"
        )
    real = f"{format_number(-c1)}/{format_number(denominator)}"
    imaginary = f"{format_number(root)}i/{format_number(denominator)}"
    return (
        "Discriminant is strictly negative, the two complex solutions are\n"
        f"{real} + {imaginary}\n"
        f"{real} - {imaginary}\n\n"
    )


def solve(coefficients, degree):
    """Return the text describing the solutions for the given degree."""
    header = f"Polynomial degree: {degree}\n" if degree else ""
    if degree == 0:
        body = _solve_constant(coefficients[0])
    elif degree == 1:
        body = _solve_linear(coefficients)
    elif degree == 2:
        body = _solve_quadratic(coefficients)
    else:
        body = "The polynomial degree is strictly greater than 2, I can't solve!\n"
    return header + body