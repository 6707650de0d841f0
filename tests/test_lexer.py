# -*- coding: utf-8 -*-

import unittest

from strictjson.errors import (
    InvalidEscapeSequence,
    InvalidNumberFormat,
    InvalidUnicodeEscape,
    UnexpectedToken,
    UnterminatedString,
)
from strictjson.lexer import (
    REPLACEMENT_CHARACTER,
    scan_keyword,
    scan_number,
    scan_string,
    skip_space,
)


class SkipSpaceTest(unittest.TestCase):
    def test_skip_space(self) -> None:
        self.assertEqual(skip_space(" \t\r\n x", 0), 5)
        self.assertEqual(skip_space("x ", 0), 0)
        self.assertEqual(skip_space("x  ", 1), 3)

    def test_other_spaces_are_significant(self) -> None:
        self.assertEqual(skip_space("\x0b\x0cx", 0), 0)
        self.assertEqual(skip_space(chr(0xA0) + "x", 0), 0)


class ScanStringTest(unittest.TestCase):
    def test_not_a_string(self) -> None:
        self.assertIsNone(scan_string("abc", 0))
        self.assertIsNone(scan_string(' "abc"', 0))

    def test_simple(self) -> None:
        self.assertEqual(scan_string('"abc", 1', 0), ("abc", 5))
        self.assertEqual(scan_string('x""', 1), ("", 3))

    def test_escapes(self) -> None:
        self.assertEqual(
            scan_string(r'"\" \\ \/ \b \f \n \r \t"', 0),
            ('" \\ / \b \f \n \r \t', 25),
        )

    def test_unicode_escape(self) -> None:
        text = '"\\u%s"' % "00e9"
        self.assertEqual(scan_string(text, 0), (chr(0xE9), 8))

    def test_surrogate_pair(self) -> None:
        text = '"\\u%s\\u%s"' % ("D83D", "DE00")
        self.assertEqual(scan_string(text, 0), (chr(0x1F600), 14))

    def test_lone_surrogates(self) -> None:
        text = '"a\\u%s"' % "dc00"
        with self.assertRaises(InvalidUnicodeEscape) as ctx:
            scan_string(text, 0)
        self.assertEqual(ctx.exception.offset, 2)
        self.assertIn("unpaired surrogate", ctx.exception.msg)
        self.assertEqual(
            scan_string(text, 0, lone_surrogates="replace"),
            ("a" + REPLACEMENT_CHARACTER, 9),
        )

    def test_high_surrogate_followed_by_high_surrogate(self) -> None:
        text = '"\\u%s\\u%s"' % ("d800", "d800")
        self.assertEqual(
            scan_string(text, 0, lone_surrogates="replace"),
            (REPLACEMENT_CHARACTER * 2, 14),
        )

    def test_raw_characters_are_kept(self) -> None:
        self.assertEqual(scan_string('"a\tb\x01"', 0), ("a\tb\x01", 6))

    def test_unterminated(self) -> None:
        for text in ['"abc', '"abc\\', '"a\\"']:
            with self.assertRaises(UnterminatedString) as ctx:
                scan_string(" " + text, 1)
            self.assertEqual(ctx.exception.offset, 1)

    def test_invalid_escape(self) -> None:
        with self.assertRaises(InvalidEscapeSequence) as ctx:
            scan_string(r'"ab\x"', 0)
        self.assertEqual(ctx.exception.offset, 3)
        self.assertEqual(ctx.exception.sequence, "\\x")

    def test_invalid_unicode_escape(self) -> None:
        for text in [r'"\u12"', r'"\uGGGG"', r'"\u"']:
            with self.assertRaises(InvalidUnicodeEscape) as ctx:
                scan_string(text, 0)
            self.assertEqual(ctx.exception.offset, 1)

    def test_offsets_are_in_bytes(self) -> None:
        with self.assertRaises(InvalidEscapeSequence) as ctx:
            scan_string(chr(0x3BB) + r'"\x"', 1)
        self.assertEqual(ctx.exception.offset, 3)


class ScanNumberTest(unittest.TestCase):
    def test_not_a_number(self) -> None:
        self.assertIsNone(scan_number("x", 0))
        self.assertIsNone(scan_number("+1", 0))
        self.assertIsNone(scan_number(".5", 0))
        self.assertIsNone(scan_number("", 0))

    def test_numbers(self) -> None:
        for text, lexeme in [
            ("0", "0"),
            ("-0", "-0"),
            ("123,", "123"),
            ("1.5]", "1.5"),
            ("-0.25 ", "-0.25"),
            ("1e10", "1e10"),
            ("1E-2", "1E-2"),
            ("2.5e+3}", "2.5e+3"),
        ]:
            self.assertEqual(scan_number(text, 0), (lexeme, len(lexeme)))

    def test_empty_fraction(self) -> None:
        self.assertEqual(scan_number("1.e5", 0), ("1.e5", 4))
        with self.assertRaises(InvalidNumberFormat) as ctx:
            scan_number("1.]", 0, allow_empty_fraction=False)
        self.assertEqual(ctx.exception.offset, 2)

    def test_leading_zero(self) -> None:
        with self.assertRaises(InvalidNumberFormat) as ctx:
            scan_number("012", 0)
        self.assertEqual(ctx.exception.offset, 1)
        self.assertEqual(ctx.exception.reason, "leading zero")

    def test_missing_digits(self) -> None:
        for text, offset in [("-", 1), ("-a", 1), ("1e", 2), ("1e+", 3), ("1E-x", 3)]:
            with self.assertRaises(InvalidNumberFormat) as ctx:
                scan_number(text, 0)
            self.assertEqual(ctx.exception.offset, offset)


class ScanKeywordTest(unittest.TestCase):
    def test_keyword(self) -> None:
        self.assertEqual(scan_keyword("true]", 0, "true"), 4)
        self.assertEqual(scan_keyword("[null", 1, "null"), 5)

    def test_not_a_keyword(self) -> None:
        self.assertIsNone(scan_keyword("x", 0, "true"))
        self.assertIsNone(scan_keyword("True", 0, "true"))
        self.assertIsNone(scan_keyword("", 0, "false"))

    def test_partial_keyword(self) -> None:
        with self.assertRaises(UnexpectedToken) as ctx:
            scan_keyword("fals", 0, "false")
        self.assertIsNone(ctx.exception.found)
        self.assertEqual(ctx.exception.offset, 4)
        self.assertEqual(ctx.exception.expected, ("'false'",))

        with self.assertRaises(UnexpectedToken) as ctx:
            scan_keyword("nUll", 0, "null")
        self.assertEqual(ctx.exception.found, "U")
        self.assertEqual(ctx.exception.offset, 1)


if __name__ == "__main__":
    unittest.main()
