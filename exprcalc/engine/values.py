"""Runtime values. A value is either a number (always a float, so arithmetic happens in a single IEEE-754 double
domain) or text. Whether a number is integral only matters for display.
"""

import math
from typing import Union

Number = float
Text = str
Value = Union[Number, Text]


def is_number(value):
    return isinstance(value, float)


def is_text(value):
    return isinstance(value, str)


def type_name(value):
    """Name of value's type as used in error messages."""
    return "number" if is_number(value) else "text"


def format_value(value, precision=None):
    """Renders value for display. Integral numbers are shown without a decimal point, other numbers are rounded to
    precision decimal places (if given) with trailing zeros dropped. Text is shown as-is.
    """
    if is_text(value):
        return value

    if not math.isfinite(value):
        return str(value)

    if precision is not None:
        value = round(value, precision)

    if value.is_integer():
        return str(int(value))

    if precision is None:
        return repr(value)
    return f"{value:.{precision}f}".rstrip("0").rstrip(".")
