"""Numeric built-in functions: trigonometry (in radians) and base conversion."""

import math
import re
import string

from exprcalc.engine.values import is_number, is_text
from exprcalc.functions.arguments import expect
from exprcalc.lang.error import EvalError

DIGITS = string.digits + string.ascii_uppercase
BASE_RANGE = range(2, 37)
DECIMAL_BASE = 10
NUMERIC_TEXT = re.compile(r"[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?", re.ASCII)

USAGE = {
    "base": "base(value, fromBase, toBase)",
    "cos": "cos(number)",
    "sin": "sin(number)",
    "tan": "tan(number)",
}


def _trig(func, value):
    """IEEE-754 semantics: infinities give nan instead of raising a domain error."""
    if math.isinf(value):
        return math.nan
    return func(value)


def sin(arguments):
    expect(arguments, 1, USAGE["sin"], "numeric")
    return _trig(math.sin, arguments[0])


def cos(arguments):
    expect(arguments, 1, USAGE["cos"], "numeric")
    return _trig(math.cos, arguments[0])


def tan(arguments):
    expect(arguments, 1, USAGE["tan"], "numeric")
    return _trig(math.tan, arguments[0])


def _digits(value):
    """Returns the digit string of value, which may be a number or text. A fractional part is only allowed if it is
    made of zeros ('1.', '1.00'), in which case it is dropped.
    """
    if is_number(value):
        if not math.isfinite(value) or not value.is_integer():
            raise EvalError(f"value conversion failed: '{value!r}' contains decimals", diagnosis=False)
        return str(int(value))

    integer, dot, decimals = value.partition(".")
    if dot and decimals.strip("0"):
        raise EvalError(f"value conversion failed: '{value}' contains decimals", diagnosis=False)
    return integer


def _base(base):
    """Returns base as an int, truncating toward zero. base may be a number or numeric text made of ASCII digits with an
    optional sign, decimal point and exponent.
    """
    try:
        if is_text(base) and not NUMERIC_TEXT.fullmatch(base):
            raise ValueError(base)
        number = float(base) if is_text(base) else base
        number = int(number)
    except (ValueError, OverflowError):
        raise EvalError(f"base conversion failed: '{base}' is not a valid number", diagnosis=False)

    if number not in BASE_RANGE:
        raise EvalError(f"invalid base: {number}, base must be between 2 and 36", diagnosis=False)
    return number


def to_decimal(digits, base):
    """Parses digits (optionally signed with '-', case-insensitive) in the given base. Unlike int(), prefixes such as
    '0x', underscores and surrounding whitespace are rejected.
    """
    negative = digits.startswith("-")
    body = digits[1:] if negative else digits
    allowed = set(DIGITS[:base] + DIGITS[DECIMAL_BASE:base].lower())

    if not body or any(char not in allowed for char in body):
        raise EvalError(f"value conversion failed: '{digits}' is not a valid number in base {base}", diagnosis=False)

    result = 0
    for char in body:
        result = result * base + DIGITS.index(char.upper())
    return -result if negative else result


def from_decimal(number, base):
    """Returns number written in the given base, with uppercase letters for digits above 9."""
    if number == 0:
        return "0"

    sign = "-" if number < 0 else ""
    number = abs(number)

    digits = []
    while number:
        number, remainder = divmod(number, base)
        digits.append(DIGITS[remainder])
    return sign + "".join(reversed(digits))


def base(arguments):
    """base(value, fromBase, toBase): converts value from one base to another. The result is a number in base 10 and
    uppercase text in any other base.
    """
    expect(arguments, 3, USAGE["base"])

    value, from_base, to_base = arguments
    digits = _digits(value)
    from_base = _base(from_base)
    to_base = _base(to_base)

    decimal = to_decimal(digits, from_base)

    if to_base == DECIMAL_BASE:
        try:
            return float(decimal)
        except OverflowError:
            raise EvalError(f"value conversion failed: '{digits}' is too large", diagnosis=False)
    return from_decimal(decimal, to_base)
