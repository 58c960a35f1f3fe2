"""Tree-walking evaluator. Reduces an AST to a single value, dispatching operators on numbers and function calls through
a read-only function registry. Evaluation has no side effects, so one Evaluator can be reused for any number of
expressions.
"""

import math

from exprcalc.engine.nodes import BinaryOp, Call, NumberLiteral, TextLiteral, UnaryOp
from exprcalc.engine.parser import Parser
from exprcalc.engine.token import TokenType
from exprcalc.engine.values import is_number, type_name
from exprcalc.functions.registry import FUNCTIONS, lookup
from exprcalc.lang.error import EvalError, ParseError


def divide(left, right):
    """IEEE-754 division: dividing by zero gives a signed infinity (or nan for 0/0) instead of raising."""
    if right == 0:
        if left == 0 or math.isnan(left):
            return math.nan
        return math.copysign(math.inf, left) * math.copysign(1.0, right)
    return left / right


def modulo(left, right):
    """Floating-point remainder whose sign follows the dividend."""
    if right == 0 or math.isinf(left):
        return math.nan
    return math.fmod(left, right)


class Evaluator:
    """Evaluates expressions. functions is the name -> function mapping used to resolve calls."""
    BINARY = {
        TokenType.PLUS: lambda left, right: left + right,
        TokenType.MINUS: lambda left, right: left - right,
        TokenType.MULTIPLY: lambda left, right: left * right,
        TokenType.DIVIDE: divide,
        TokenType.MODULO: modulo,
    }
    UNARY = {
        TokenType.PLUS: lambda operand: operand,
        TokenType.MINUS: lambda operand: -operand,
    }

    def __init__(self, functions=FUNCTIONS):
        self.functions = functions

    @staticmethod
    def parse(expr):
        """Returns the AST of expr, or None if expr is blank."""
        try:
            return Parser(expr).parse()
        except RecursionError:
            raise ParseError("expression is nested too deeply", expr) from None

    def evaluate(self, expr):
        """Evaluates expr and returns its value, or None if expr is blank."""
        return self.run(self.parse(expr), expr)

    def run(self, tree, expr=""):
        """Evaluates an already parsed tree. expr is the source of tree, used for error messages."""
        if tree is None:
            return None

        try:
            return self.reduce(tree)
        except RecursionError:
            raise EvalError("expression is nested too deeply", expr) from None

    def reduce(self, node):
        """Recursively reduces node to a value."""
        if isinstance(node, NumberLiteral):
            return node.value

        elif isinstance(node, TextLiteral):
            return node.value

        elif isinstance(node, UnaryOp):
            operand = self.reduce(node.operand)
            if not is_number(operand):
                msg = f"unary '{node.operator.text}' requires a number, got {type_name(operand)}"
                raise EvalError(msg, diagnosis=False)
            return Evaluator.UNARY[node.operator.kind](operand)

        elif isinstance(node, BinaryOp):
            left = self.reduce(node.left)
            right = self.reduce(node.right)
            if not (is_number(left) and is_number(right)):
                msg = f"operator '{node.operator.text}' requires numbers, got {type_name(left)} and {type_name(right)}"
                raise EvalError(msg, diagnosis=False)
            return Evaluator.BINARY[node.operator.kind](left, right)

        elif isinstance(node, Call):
            function = lookup(node.name, self.functions)
            arguments = [self.reduce(argument) for argument in node.arguments]
            return function(arguments)

        raise EvalError(f"cannot evaluate '{type(node).__name__}'", internal=True)


_default = Evaluator()


def evaluate(expr):
    """Evaluates expr with the built-in functions."""
    return _default.evaluate(expr)
