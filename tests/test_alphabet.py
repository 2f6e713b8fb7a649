"""
<Program Name>
  test_alphabet.py

<Copyright>
  See LICENSE for licensing information.

<Purpose>
  Unit test for 'alphabet.py'
"""

import string
import unittest

import b64buffer.alphabet
from b64buffer.alphabet import (
    INVALID,
    PADDING,
    PADDING_SYMBOL,
    Valid,
    decode_byte,
    encode_symbol,
    is_symbol,
)
from b64buffer.exceptions import FormatError

STANDARD_ALPHABET = (
    string.ascii_uppercase + string.ascii_lowercase + string.digits + "+/"
).encode("ascii")


class TestAlphabet(unittest.TestCase):
    def test_ranges(self):
        self.assertEqual(
            sum(len(r) for r in b64buffer.alphabet.BYTE_RANGES),
            b64buffer.alphabet.SYMBOL_COUNT,
        )
        self.assertEqual(PADDING, ord("="))

    def test_encode_symbol(self):
        for value, expected in enumerate(STANDARD_ALPHABET):
            self.assertEqual(encode_symbol(value), expected)

        self.assertEqual(encode_symbol(0), ord("A"))
        self.assertEqual(encode_symbol(26), ord("a"))
        self.assertEqual(encode_symbol(52), ord("0"))
        self.assertEqual(encode_symbol(62), ord("+"))
        self.assertEqual(encode_symbol(63), ord("/"))

    def test_encode_symbol_out_of_range(self):
        for value in [-1, 64, 255, 1.5, "A", None, True]:
            with self.assertRaises(FormatError):
                encode_symbol(value)

    def test_decode_byte(self):
        for value, byte in enumerate(STANDARD_ALPHABET):
            self.assertEqual(decode_byte(byte), Valid(value))

        self.assertIs(decode_byte(ord("=")), PADDING_SYMBOL)

        for char in b"\n\r\t -_.*@[`{\x00\x7f\x80\xff":
            self.assertIs(decode_byte(char), INVALID)

    def test_bijection(self):
        symbols = {encode_symbol(value) for value in range(64)}
        self.assertEqual(len(symbols), 64)
        self.assertNotIn(PADDING, symbols)

        for value in range(64):
            self.assertEqual(decode_byte(encode_symbol(value)), Valid(value))

    def test_is_symbol(self):
        recognized = [byte for byte in range(256) if is_symbol(byte)]
        self.assertEqual(len(recognized), 65)
        self.assertEqual(set(recognized), set(STANDARD_ALPHABET) | {PADDING})


# Run unit test.
if __name__ == "__main__":
    unittest.main()
