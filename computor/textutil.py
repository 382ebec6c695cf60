"""Text helpers and errors used while reading an equation string."""

INT_MAX = 2**31 - 1
_DIGITS = frozenset("0123456789")
_SEPARATORS = {"+": 1, "-": -1, "=": 42, "": 2, "\0": 2}


class ComputorError(Exception):
    """Base error; ``exit_status`` is the process status it maps to."""

    exit_status = 42


class FormatError(ComputorError):
    """The equation is not written in an accepted form."""

    exit_status = 1


class NumberTooLargeError(ComputorError):
    """A number in the equation does not fit the supported range."""

    exit_status = 2


def is_separator(ch):
    """Return 1 for '+', -1 for '-', 42 for '=', 2 for end of text, else 0."""
    return _SEPARATORS.get(ch, 0)


def trim(text):
    """Strip leading and trailing spaces (only the space character)."""
    if text is None:
        return None
    return text.strip(" ")


def flip_sign(side):
    """Move to the right-hand side of the equation; a second move is an error."""
    if side == -1:
        raise FormatError("more than one '=' in equation")
    return -1


def parse_int(text, sign):
    """Read an unsigned decimal integer that must fit a 32-bit int."""
    if text == "2147483648" and sign == -1:
        return 2147483648
    digits = len(text) - len(text.lstrip("0123456789"))
    value = int(text[:digits]) if digits else 0
    if value > INT_MAX or digits < len(text):
        raise NumberTooLargeError(text)
    return value


def parse_float(text):
    """Read a decimal number: at most 9 integer digits and 6 fraction digits."""
    whole = 0
    fraction = 0.0
    divisor = 10.0
    in_fraction = 0
    for index, ch in enumerate(text):
        if ch in _DIGITS:
            if not in_fraction and index > 8 and whole > 9_999_999:
                raise NumberTooLargeError(text)
            if not in_fraction:
                whole = whole * 10 + int(ch)
            elif in_fraction < 7:
                fraction += int(ch) / divisor
                divisor *= 10.0
                in_fraction += 1
            else:
                break
        elif ch == "." and not in_fraction:
            in_fraction = 1
        else:
            break
    return whole + fraction


def is_number(text):
    """True when every character is a decimal digit (an empty text counts)."""
    if text is None:
        return True
    return all(ch in _DIGITS for ch in text)


def is_float(text):
    """True when the text holds only digits and dots and does not end in a dot."""
    if text is None:
        return True
    if not all(ch in _DIGITS or ch == "." for ch in text):
        return False
    return not text.endswith(".")


def split_at_star(text):
    """Split a term into the part before the first '*' and after the last '*'."""
    if "*" not in text:
        return text, None
    first = text.partition("*")[0]
    second = text.rpartition("*")[2]
    return first, second