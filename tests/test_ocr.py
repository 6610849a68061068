"""Unit tests for OCR bank account parsing."""

import unittest

from kata_pkg import config
from kata_pkg.ocr import GLYPHS, parse_bank_account
from kata_pkg.types import ValidationError

ONE_TO_NINE = (
    "    _  _     _  _  _  _  _ \n"
    "  | _| _||_||_ |_   ||_||_|\n"
    "  ||_  _|  | _||_|  ||_| _|\n"
)

LEADING_ZERO = (
    " _  _  _  _  _  _  _  _  _ \n"
    "| | _| _|| ||_ |_   ||_||_|\n"
    "|_||_  _||_| _||_|  ||_| _|\n"
)

REPEATED_DIGITS = (
    " _  _  _  _  _  _  _  _  _ \n"
    "|_| _| _||_||_ |_ |_||_||_|\n"
    "|_||_  _||_| _||_| _||_| _|\n"
)


def render(digits):
    """Build a scan for ``digits`` from the glyph table."""
    rows = ["", "", ""]
    for digit in digits:
        glyph = GLYPHS[int(digit)]
        for i in range(3):
            rows[i] += glyph[i * 3 : i * 3 + 3]
    return "\n".join(rows) + "\n"


class TestParseBankAccount(unittest.TestCase):
    def test_one_to_nine(self):
        self.assertEqual(parse_bank_account(ONE_TO_NINE), 123456789)

    def test_leading_zero_dropped(self):
        self.assertEqual(parse_bank_account(LEADING_ZERO), 23056789)

    def test_repeated_digits(self):
        self.assertEqual(parse_bank_account(REPEATED_DIGITS), 823856989)

    def test_without_trailing_newline(self):
        self.assertEqual(parse_bank_account(ONE_TO_NINE.rstrip("\n")), 123456789)

    def test_trailing_spaces_stripped(self):
        stripped = "\n".join(line.rstrip() for line in ONE_TO_NINE.split("\n"))
        self.assertEqual(parse_bank_account(stripped), 123456789)

    def test_every_digit_rendered(self):
        self.assertEqual(parse_bank_account(render("490067715")), 490067715)
        self.assertEqual(parse_bank_account(render("000000000")), 0)

    def test_crlf_line_endings(self):
        self.assertEqual(parse_bank_account(ONE_TO_NINE.replace("\n", "\r\n")), 123456789)


class TestMalformedScans(unittest.TestCase):
    def test_unknown_glyph(self):
        broken = ONE_TO_NINE.replace("|_|", "|#|", 1)
        with self.assertRaises(ValidationError) as ctx:
            parse_bank_account(broken)
        self.assertEqual(ctx.exception.code, "UNKNOWN_GLYPH")

    def test_unknown_glyph_reports_position(self):
        lines = ONE_TO_NINE.split("\n")
        lines[0] = "  _" + lines[0][3:]
        with self.assertRaises(ValidationError) as ctx:
            parse_bank_account("\n".join(lines))
        self.assertIn("digit 1", str(ctx.exception))

    def test_wrong_line_count(self):
        two_lines = "\n".join(ONE_TO_NINE.split("\n")[:2])
        with self.assertRaises(ValidationError) as ctx:
            parse_bank_account(two_lines)
        self.assertEqual(ctx.exception.code, "MALFORMED_ACCOUNT")

    def test_line_too_wide(self):
        with self.assertRaises(ValidationError) as ctx:
            parse_bank_account(render("1234567890"))
        self.assertEqual(ctx.exception.code, "MALFORMED_ACCOUNT")

    def test_not_a_string(self):
        for bad in (None, 123456789, [ONE_TO_NINE]):
            with self.assertRaises(ValidationError) as ctx:
                parse_bank_account(bad)
            self.assertEqual(ctx.exception.code, "INVALID_INPUT")

    def test_account_length_is_configurable(self):
        original = config.ACCOUNT_LENGTH
        config.ACCOUNT_LENGTH = 4
        try:
            self.assertEqual(parse_bank_account(render("2024")), 2024)
        finally:
            config.ACCOUNT_LENGTH = original


if __name__ == "__main__":
    unittest.main()
