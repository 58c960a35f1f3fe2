"""Text built-in functions."""

import base64
import binascii

from exprcalc.functions.arguments import expect
from exprcalc.lang.error import EvalError

USAGE = {
    "decode64": "decode64(text)",
    "encode64": "encode64(text)",
    "len": "len(text)",
    "replace": "replace(text, old, new)",
    "reverse": "reverse(text)",
}


def length(arguments):
    expect(arguments, 1, USAGE["len"], "text")
    return float(len(arguments[0]))


def reverse(arguments):
    expect(arguments, 1, USAGE["reverse"], "text")
    return arguments[0][::-1]


def replace(arguments):
    """Replaces all occurrences of old with new. Matching is literal."""
    expect(arguments, 3, USAGE["replace"], "text")
    text, old, new = arguments
    return text.replace(old, new)


def encode64(arguments):
    expect(arguments, 1, USAGE["encode64"], "text")
    return base64.b64encode(arguments[0].encode("utf-8")).decode("ascii")


def decode64(arguments):
    expect(arguments, 1, USAGE["decode64"], "text")
    try:
        return base64.b64decode(arguments[0], validate=True).decode("utf-8")
    except (binascii.Error, ValueError):
        raise EvalError(f"'{arguments[0]}' is not valid base64 encoded text", diagnosis=False)
