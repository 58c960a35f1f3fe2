"""Registry of built-in functions. The registry is built once at import time and is read-only afterwards, so it can be
shared freely between evaluators.
"""

from types import MappingProxyType

from exprcalc.functions import numeric, text
from exprcalc.lang.error import EvalError

FUNCTIONS = MappingProxyType({
    # numeric
    "base": numeric.base,
    "cos": numeric.cos,
    "sin": numeric.sin,
    "tan": numeric.tan,

    # text
    "decode64": text.decode64,
    "encode64": text.encode64,
    "len": text.length,
    "replace": text.replace,
    "reverse": text.reverse,
})

USAGE = MappingProxyType({**numeric.USAGE, **text.USAGE})


def lookup(name, functions=FUNCTIONS):
    """Returns the function registered under name (expected to be lowercase)."""
    try:
        return functions[name]
    except KeyError:
        raise EvalError(f"unknown function: '{name}'", diagnosis=False) from None
