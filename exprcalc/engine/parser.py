"""Recursive-descent parser for the expression language. Operator precedence is encoded in the call structure:
expression handles the lowest tier and delegates to term, which delegates to factor.

```
<expression> ::= <term> (("+" | "-") <term>)*           ; left-associative
<term>       ::= <factor> (("*" | "/" | "%") <factor>)*  ; left-associative
<factor>     ::= ("+" | "-") <factor>                    ; unary operators nest: --5, -+5
               | <number> | <text>
               | "(" <expression> ")"
               | <function> "(" [<expression> ("," <expression>)*] ")"
```
"""

from exprcalc.engine.lexical import Lexer
from exprcalc.engine.nodes import BinaryOp, Call, NumberLiteral, TextLiteral, UnaryOp
from exprcalc.engine.token import TokenType
from exprcalc.lang.error import ParseError


class Parser:
    """Consumes tokens one at a time from a Lexer and builds an AST."""
    EXPRESSION_OPS = (TokenType.PLUS, TokenType.MINUS)
    TERM_OPS = (TokenType.MULTIPLY, TokenType.DIVIDE, TokenType.MODULO)
    UNARY_OPS = (TokenType.PLUS, TokenType.MINUS)

    def __init__(self, expr):
        self.expr = expr
        self.lexer = Lexer(expr)
        self.current = self.lexer.next_token()

    def parse(self):
        """Returns the root node of the AST, or None if the input has no tokens."""
        if self.current.kind is TokenType.END:
            return None

        node = self.expression()

        if self.current.kind is not TokenType.END:
            raise self._error(self.current)

        return node

    def expression(self):
        node = self.term()

        while self.current.kind in Parser.EXPRESSION_OPS:
            operator = self.consume(self.current.kind)
            node = BinaryOp(node, operator, self.term())

        return node

    def term(self):
        node = self.factor()

        while self.current.kind in Parser.TERM_OPS:
            operator = self.consume(self.current.kind)
            node = BinaryOp(node, operator, self.factor())

        return node

    def factor(self):
        token = self.current

        if token.kind in Parser.UNARY_OPS:
            self.consume(token.kind)
            return UnaryOp(token, self.factor())

        elif token.kind is TokenType.NUMBER:
            self.consume(TokenType.NUMBER)
            return NumberLiteral(float(token.text))

        elif token.kind is TokenType.TEXT:
            self.consume(TokenType.TEXT)
            return TextLiteral(token.text)

        elif token.kind is TokenType.OPEN_PAREN:
            self.consume(TokenType.OPEN_PAREN)
            node = self.expression()
            self.consume(TokenType.CLOSE_PAREN)
            return node

        elif token.kind is TokenType.FUNCTION:
            self.consume(TokenType.FUNCTION)
            return Call(token.text, self.arguments())

        raise self._error(token)

    def arguments(self):
        """Parses a parenthesized, comma-separated argument list. Returns a (possibly empty) tuple of nodes."""
        arguments = []
        self.consume(TokenType.OPEN_PAREN)

        if self.current.kind is not TokenType.CLOSE_PAREN:
            arguments.append(self.expression())

            while self.current.kind is TokenType.COMMA:
                self.consume(TokenType.COMMA)
                arguments.append(self.expression())

        self.consume(TokenType.CLOSE_PAREN)
        return tuple(arguments)

    def consume(self, kind):
        """Advances to the next token if the current token is of the given kind. Returns the consumed token."""
        token = self.current
        if token.kind is not kind:
            raise self._error(token, expected=kind)

        self.current = self.lexer.next_token()
        return token

    def _error(self, token, expected=None):
        """Builds a ParseError pointing at token."""
        if token.kind is TokenType.END:
            msg = "unexpected end of expression"
        else:
            msg = f"unexpected '{token.kind.value}'"

        if expected is not None:
            msg += f", expected '{expected.value}'"

        end = token.position + max(len(token.text), 1)
        return ParseError(msg, self.expr, start=token.position, end=end)
