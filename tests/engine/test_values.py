import math
import unittest

from exprcalc.engine.values import format_value, is_number, is_text, type_name


class ValuesTestCase(unittest.TestCase):

    def test_predicates(self):
        self.assertTrue(is_number(1.0))
        self.assertFalse(is_number("1"))
        self.assertTrue(is_text("1"))
        self.assertFalse(is_text(1.0))
        self.assertEqual("number", type_name(2.5))
        self.assertEqual("text", type_name(""))

    def test_format_value(self):
        cases = [
            (2.0, None, "2"),
            (2.5, None, "2.5"),
            (0.1, None, "0.1"),
            (-3.0, None, "-3"),
            (-0.0, None, "0"),
            (1e20, None, "100000000000000000000"),
            (0.8414709848, 4, "0.8415"),
            (1 / 3, 4, "0.3333"),
            (2.00001, 4, "2"),
            (-0.00001, 4, "0"),
            (2.5, 4, "2.5"),
            (1234.5678, 0, "1235"),
            (math.inf, 4, "inf"),
            (-math.inf, None, "-inf"),
            (math.nan, 4, "nan"),
            ("text", 4, "text"),
            ("", None, ""),
        ]
        for value, precision, expected in cases:
            self.assertEqual(expected, format_value(value, precision), (value, precision))


if __name__ == '__main__':
    unittest.main()
