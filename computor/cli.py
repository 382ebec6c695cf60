"""Command line entry point: reduce and solve a polynomial equation."""

import sys

from computor.equation import Equation
from computor.parser import parse_equation
from computor.solver import solve
from computor.textutil import ComputorError, FormatError, NumberTooLargeError

_USAGE = 'computor: use: ./computor "5 + 4 * X + X^2= X^2"'


def error_message(error):
    """Return the message shown for a failed run."""
    if isinstance(error, FormatError):
        return "computor: Incorrect form of equation detected.\n" + _USAGE
    if isinstance(error, NumberTooLargeError):
        return (
            "computor: This version lacks support for numbers larger than integers.\n"
            "computor: number: Ensure the value remains within integer bounds. :)"
        )
    return "computor: error.\n" + _USAGE


def main(argv=None):
    """Parse the single equation argument, print its reduced form and solutions."""
    args = sys.argv[1:] if argv is None else list(argv)
    equation = Equation()
    if len(args) == 1:
        try:
            equation = parse_equation(args[0])
        except ComputorError as error:
            print(error_message(error))
            return error.exit_status
    reduced = equation.reduced_form()
    if reduced:
        print(reduced)
    sys.stdout.write(solve(equation.coefficients(), equation.degree()))
    return 0


if __name__ == "__main__":
    sys.exit(main())