"""Lexical analysis for the expression language. The Lexer is pull-based: each call to next_token scans just far enough
to produce one token, so the parser drives tokenization.

Tokens can be loosely defined as follows:

```
<number>    ::= <digit> (<digit> | ".")* [("e" | "E") ["+" | "-"] <digit>+]
                                    ; must be followed by whitespace, an operator, "," or ")"
<text>      ::= '"' <char>* '"'     ; no escape sequences
<function>  ::= (<letter> | "_") (<letter> | <digit> | "_")*
                                    ; case-insensitive, lowercased by the lexer
<operator>  ::= "+" | "-" | "*" | "/" | "%"
<punct>     ::= "(" | ")" | ","
```

Whitespace between tokens is ignored.
"""

from exprcalc.engine.token import OPERATORS, PUNCTUATION, Token, TokenType
from exprcalc.lang.error import LexError


class Lexer:
    """Stateful cursor over an immutable source string."""
    NUMBER_FOLLOWERS = {",", ")"} | set(OPERATORS)  # besides whitespace

    def __init__(self, expr):
        self.expr = expr
        self.length = len(expr)
        self.position = 0

    def next_token(self):
        """Returns the next token and advances past it. Once the input is exhausted, END is returned on every call."""
        self._skip_whitespace()

        if self.position >= self.length:
            return Token(TokenType.END, "", self.length)

        char = self.expr[self.position]

        if self._is_digit(char):
            return self._number()
        elif char == "\"":
            return self._text()
        elif char.isalpha() or char == "_":
            return self._function()
        elif char in OPERATORS:
            return self._single(OPERATORS[char])
        elif char in PUNCTUATION:
            return self._single(PUNCTUATION[char])

        msg = f"unexpected '{char}' at position {self.position}"
        raise LexError(msg, self.expr, start=self.position, end=self.position + 1)

    def _peek(self, offset=0):
        """Returns the character offset characters ahead of the cursor, or an empty string past the end."""
        idx = self.position + offset
        return self.expr[idx] if idx < self.length else ""

    @staticmethod
    def _is_digit(char):
        """ASCII digits only. Empty strings (past the end) are not digits."""
        return "0" <= char <= "9"

    def _skip_whitespace(self):
        while self.position < self.length and self.expr[self.position].isspace():
            self.position += 1

    def _single(self, kind):
        token = Token(kind, self.expr[self.position], self.position)
        self.position += 1
        return token

    def _exponent_length(self):
        """Length of the exponent marker (and sign) at the cursor, if a digit follows it. Otherwise 0."""
        if self._peek() not in ("e", "E"):
            return 0
        if self._is_digit(self._peek(1)):
            return 1
        if self._peek(1) in ("+", "-") and self._is_digit(self._peek(2)):
            return 2
        return 0

    def _number(self):
        start = self.position
        while self._peek() and (self._is_digit(self._peek()) or self._peek() == "."):
            self.position += 1

        exponent = self._exponent_length()
        if exponent:
            self.position += exponent
            while self._is_digit(self._peek()):
                self.position += 1

        literal = self.expr[start:self.position]

        follower = self._peek()
        if follower and not (follower.isspace() or follower in Lexer.NUMBER_FOLLOWERS):
            end = self.position + 1
            raise LexError(f"invalid number format at position {start}", self.expr, start=start, end=end)

        try:
            float(literal)
        except ValueError:
            raise LexError(f"invalid number '{literal}' at position {start}", self.expr, start=start,
                           end=self.position)

        return Token(TokenType.NUMBER, literal, start)

    def _text(self):
        start = self.position
        end = self.expr.find("\"", start + 1)

        if end == -1:
            raise LexError(f"unclosed text starting at position {start}", self.expr, start=start)

        self.position = end + 1
        return Token(TokenType.TEXT, self.expr[start + 1:end], start)

    def _function(self):
        start = self.position
        while self._peek() and (self._peek().isalnum() or self._peek() == "_"):
            self.position += 1
        return Token(TokenType.FUNCTION, self.expr[start:self.position].lower(), start)

    def __iter__(self):
        """Yields tokens until (and including) END."""
        while True:
            token = self.next_token()
            yield token
            if token.kind is TokenType.END:
                return
