"""Reading an equation string into an Equation."""

from computor.equation import Component, Equation
from computor.textutil import (
    FormatError,
    flip_sign,
    is_float,
    is_number,
    is_separator,
    parse_float,
    split_at_star,
    trim,
)

_EQUALS = 42
_START = 10


def is_variable(text):
    """True for 'X', 'X^' or 'X^' followed by digits."""
    if not text or text[0] != "X":
        return False
    if len(text) > 1 and text[1] != "^":
        return False
    if len(text) > 2 and not is_number(text[2:]):
        return False
    return True


def variable_power(text):
    """Return the power a factor gives X, or None when it says nothing about it."""
    if is_number(text) or not text.startswith("X"):
        return None
    rest = text[1:]
    if not rest:
        return 1
    if not rest.startswith("^"):
        raise FormatError(f"bad variable: {text!r}")
    exponent = rest[1:]
    if is_number(exponent):
        return int(parse_float(exponent))
    return None


def _is_factor(text):
    return is_float(text) or is_variable(text)


def component_from_terms(first, second, sign):
    """Build a term from one or two factors (number and/or variable)."""
    if not _is_factor(first) or (second is not None and not _is_factor(second)):
        raise FormatError(f"bad term: {first!r} * {second!r}")
    coefficient = 1.0
    power = 0
    if is_float(first):
        coefficient = parse_float(first)
    if second is not None and is_float(second):
        coefficient *= parse_float(second)
    for factor in (first, second):
        if factor is not None:
            found = variable_power(factor)
            if found is not None:
                power = found
    return Component(power, coefficient * sign)


def parse_term(text, side, sign):
    """Parse one term between separators; return None for an empty one."""
    if not text:
        return None
    first, second = split_at_star(text)
    return component_from_terms(trim(first), trim(second), side * sign)


def parse_equation(text):
    """Parse 'lhs = rhs' into an Equation with every term moved to the left."""
    equation = Equation()
    side = 1
    sign = _START
    start = 0
    for index, ch in enumerate([*text, ""]):
        next_sign = is_separator(ch)
        if not next_sign:
            continue
        term = trim(text[start:index])
        if not term and (next_sign == _EQUALS or sign not in (_EQUALS, _START)):
            raise FormatError("missing term")
        if sign == _EQUALS:
            side = flip_sign(side)
        if sign in (_EQUALS, _START):
            sign = 1
        component = parse_term(term, side, sign)
        if component is not None:
            equation.add(component)
        start = index + 1
        sign = next_sign
    if side == 1:
        raise FormatError("missing '='")
    return equation