"""Argument validation shared by the built-in functions. Built-ins receive their arguments already evaluated, as a
sequence of values, and are responsible for checking arity and types themselves.
"""

from exprcalc.engine.values import is_number, is_text
from exprcalc.lang.error import EvalError

KINDS = {
    "numeric": is_number,
    "text": is_text,
}


def expect(arguments, count, usage, kind=None):
    """Raises an EvalError unless arguments has exactly count values, all of the given kind (if any)."""
    matches = KINDS[kind] if kind else None

    if len(arguments) != count or (matches and not all(matches(argument) for argument in arguments)):
        plural = "argument" if count == 1 else "arguments"
        described = f"{kind} {plural}" if kind else plural
        raise EvalError(f"required {count} {described}: {usage}", diagnosis=False)
