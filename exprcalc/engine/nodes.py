"""Abstract syntax tree for the expression language. Nodes are immutable and form a tree: every node is owned by exactly
one parent and there are no back-references.
"""

from dataclasses import dataclass
from typing import Tuple, Union

from exprcalc.engine.token import Token


class Node:
    """Superclass for all AST nodes. Provides a readable tree display."""

    @property
    def nodes(self):
        """Child nodes, left to right."""
        return ()

    @property
    def label(self):
        """Short description of this node, without its children."""
        return ""

    def display(self, indents=0):
        """Recursively displays the tree with readable format.

        Format:
        <Node>(<label>, nodes=[
            <Node>(<label>, nodes=[
                ...
                <Node>(<label>)  # <-- if nodes is empty
            ])
        ])
        """
        result = f"{'    ' * indents}{type(self).__name__}({self.label}"
        if self.nodes:
            result += ", nodes=["
            for node in self.nodes:
                result += "\n" + node.display(indents + 1) + ","
            result = result[:-1] + f"\n{'    ' * indents}]"
        return result + ")"

    def __str__(self):
        return self.display()


@dataclass(frozen=True)
class NumberLiteral(Node):
    value: float

    @property
    def label(self):
        return f"value={self.value!r}"


@dataclass(frozen=True)
class TextLiteral(Node):
    value: str

    @property
    def label(self):
        return f"value={self.value!r}"


@dataclass(frozen=True)
class BinaryOp(Node):
    left: "AST"
    operator: Token
    right: "AST"

    @property
    def nodes(self):
        return self.left, self.right

    @property
    def label(self):
        return f"operator='{self.operator.text}'"


@dataclass(frozen=True)
class UnaryOp(Node):
    operator: Token
    operand: "AST"

    @property
    def nodes(self):
        return (self.operand,)

    @property
    def label(self):
        return f"operator='{self.operator.text}'"


@dataclass(frozen=True)
class Call(Node):
    name: str
    arguments: Tuple["AST", ...] = ()

    @property
    def nodes(self):
        return self.arguments

    @property
    def label(self):
        return f"name='{self.name}'"


AST = Union[NumberLiteral, TextLiteral, BinaryOp, UnaryOp, Call]
