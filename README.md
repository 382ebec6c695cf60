# computor

A small command-line solver for polynomial equations of degree zero, one or
two. It reads an equation written in terms of `X` and moves every term to the
left-hand side. It then prints the reduced form, followed by the solutions.

## Installation

```
pip install .
```

## Usage

Pass the whole equation as one quoted argument:

```
computor "5 * X^0 + 4 * X^1 - 9.3 * X^2 = 1 * X^0"
```

The program prints the following:

- The reduced form, with the terms sorted by ascending power. For the
  example above this is `Reduced form: +4 * X^0 +4 * X^1 -9.3 * X^2 = 0`.
- The polynomial degree, when it is not zero.
- The solutions:
  - Degree 0: either every real number is a solution, or there is no
    solution.
  - Degree 1: the single solution.
  - Degree 2: the result depends on the sign of the discriminant. The
    program gives two real solutions, one repeated solution, or two complex
    solutions written as fractions.

Equations of degree higher than two are reduced but not solved. The program
says so instead.

If you give no argument, or more than one, nothing is parsed. The empty
equation is then treated as `0 = 0`, so the program prints
`Any real number is a solution.`

### Input form

- Terms are separated by `+` or `-`. The two sides are separated by exactly
  one `=`.
- A term is a number, `X`, `X^n`, or two of these joined by `*`. Examples:
  `3 * X^2`, `X * 2.5`, `4`.
- Coefficients are non-negative decimals. A fractional part is read to at
  most six digits. An integer part longer than nine digits is rejected as too
  large.

The program reports an incorrect form and exits with status 1 when the
equation is malformed. That includes:

- a missing `=`
- a second `=`
- an empty term
- an unknown symbol

A number that is too large is reported with exit status 2.

## Library use

You can use the pieces behind the command directly:

- `computor.parser.parse_equation(text)` turns an equation string into an
  `Equation`.
- `computor.equation.Equation` holds `Component(power, coefficient)` terms,
  one for each power. Its methods are:
  - `add(component)`, which merges a term into the equation.
  - `reduced_form()`, which returns the `Reduced form: ... = 0` line.
  - `coefficients()`, which returns the coefficients of `X^0`, `X^1` and
    `X^2`.
  - `degree()`, which returns the highest power with a non-zero coefficient.
- `computor.solver.solve(coefficients, degree)` returns the solution text.
- `computor.cli.main(argv)` runs the command on a list of arguments and
  returns the exit status.

Parse errors are raised as `FormatError` or `NumberTooLargeError`. Both are
subclasses of `ComputorError` from `computor.textutil`, and each has an
`exit_status` attribute.

## Tests

```
pip install ".[test]"
pytest
```