import unittest

from exprcalc.engine.lexical import Lexer
from exprcalc.engine.token import Token, TokenType
from exprcalc.lang.error import LexError


def kinds(expr):
    return [token.kind for token in Lexer(expr)]


class LexerTestCase(unittest.TestCase):

    def test_tokens(self):
        cases = {
            "1 + 2": [Token(TokenType.NUMBER, "1"), Token(TokenType.PLUS, "+"), Token(TokenType.NUMBER, "2")],
            "sin(2.5e-3)": [Token(TokenType.FUNCTION, "sin"), Token(TokenType.OPEN_PAREN, "("),
                            Token(TokenType.NUMBER, "2.5e-3"), Token(TokenType.CLOSE_PAREN, ")")],
            "replace(\"a b\",\"a\" , \"\")": [
                Token(TokenType.FUNCTION, "replace"), Token(TokenType.OPEN_PAREN, "("), Token(TokenType.TEXT, "a b"),
                Token(TokenType.COMMA, ","), Token(TokenType.TEXT, "a"), Token(TokenType.COMMA, ","),
                Token(TokenType.TEXT, ""), Token(TokenType.CLOSE_PAREN, ")")
            ],
            "6.02E23*-1%2/3": [
                Token(TokenType.NUMBER, "6.02E23"), Token(TokenType.MULTIPLY, "*"), Token(TokenType.MINUS, "-"),
                Token(TokenType.NUMBER, "1"), Token(TokenType.MODULO, "%"), Token(TokenType.NUMBER, "2"),
                Token(TokenType.DIVIDE, "/"), Token(TokenType.NUMBER, "3")
            ],
            "\t 1.\n": [Token(TokenType.NUMBER, "1.")],
            "1e5": [Token(TokenType.NUMBER, "1e5")],
            "1E+5": [Token(TokenType.NUMBER, "1E+5")],
        }
        for case, expected in cases.items():
            self.assertEqual(expected + [Token(TokenType.END, "")], list(Lexer(case)), case)

    def test_function_names(self):
        cases = {"SIN": "sin", "Encode64": "encode64", "_my_func2": "_my_func2"}
        for case, expected in cases.items():
            self.assertEqual(Token(TokenType.FUNCTION, expected), Lexer(case).next_token(), case)

    def test_text_is_raw(self):
        self.assertEqual(Token(TokenType.TEXT, "a\\nb  +1"), Lexer("\"a\\nb  +1\"").next_token())

    def test_end_is_idempotent(self):
        lexer = Lexer("1 ")
        self.assertEqual(TokenType.NUMBER, lexer.next_token().kind)
        for __ in range(3):
            self.assertEqual(Token(TokenType.END, ""), lexer.next_token())

    def test_blank(self):
        for case in ["", "   ", "\t\n"]:
            self.assertEqual([TokenType.END], kinds(case), repr(case))

    def test_positions(self):
        positions = [token.position for token in Lexer("  12 + \"ab\")")]
        self.assertEqual([2, 5, 7, 11, 12], positions)

    def test_number_followers(self):
        should_pass = ["1)", "1,", "1+", "1-", "1*", "1/", "1%", "1 ", "1\t"]
        for case in should_pass:
            self.assertEqual(TokenType.NUMBER, Lexer(case).next_token().kind, case)

    def test_errors(self):
        should_raise = ["123abc", "1.2.3", "1..", "2(3)", "1e", "1e+", "\"abc", "abc\"", ".5", "1 & 2", "#", "[1]",
                        "1 = 1", "'text'", "٣ + 1", "１", "1٣", "1e٣"]
        for case in should_raise:
            self.assertRaises(LexError, kinds, case)

    def test_error_messages(self):
        cases = {
            "1 + #": ("unexpected '#' at position 4", 4, 5),
            "٣ + 1": ("unexpected '٣' at position 0", 0, 1),
            "123abc": ("invalid number format at position 0", 0, 4),
            "1.2.3 + 1": ("invalid number '1.2.3' at position 0", 0, 5),
            "len(\"abc": ("unclosed text starting at position 4", 4, 8),
        }
        for case, (msg, start, end) in cases.items():
            with self.assertRaises(LexError, msg=case) as context:
                kinds(case)
            self.assertEqual(msg, str(context.exception), case)
            self.assertEqual(case, context.exception.expr, case)
            self.assertEqual((start, end), (context.exception.start, context.exception.end), case)


if __name__ == '__main__':
    unittest.main()
