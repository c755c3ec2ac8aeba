"""
(C) 2026 The mldsa-kat authors

Released under the Simplified BSD License (see license.txt)
"""

import unittest

from mldsa_kat.errors import DecodeError, LengthMismatch
from mldsa_kat.hexutil import decode_hex, decode_and_check, hex_encode

class HexDecodingTests(unittest.TestCase):
    def test_decode(self):
        self.assertEqual(decode_hex("00ff10", "pk"), b"\x00\xff\x10")
        self.assertEqual(decode_hex("ABcd", "pk"), b"\xab\xcd")
        self.assertEqual(decode_hex("", "ctx"), b"")

    def test_odd_length(self):
        with self.assertRaises(DecodeError) as cm:
            decode_hex("abc", "msg")
        self.assertEqual(cm.exception.field, "msg")

    def test_non_hex_characters(self):
        with self.assertRaises(DecodeError) as cm:
            decode_hex("zz", "ctx")
        self.assertEqual(cm.exception.field, "ctx")
        self.assertIn("ctx", str(cm.exception))

        with self.assertRaises(DecodeError):
            decode_hex("é00", "ctx")

    def test_length_check(self):
        self.assertEqual(decode_and_check("00" * 32, 32, "xi"), bytes(32))

        with self.assertRaises(LengthMismatch) as cm:
            decode_and_check("00" * 31, 32, "xi")
        self.assertEqual(cm.exception.field, "xi")
        self.assertEqual(cm.exception.expected, 32)
        self.assertEqual(cm.exception.actual, 31)

    def test_length_check_reports_bad_hex_first(self):
        with self.assertRaises(DecodeError):
            decode_and_check("0g" * 32, 32, "rng")

    def test_encode_is_lowercase(self):
        self.assertEqual(hex_encode(b"\xab\xcd\x01"), "abcd01")
        self.assertEqual(hex_encode(b""), "")

if __name__ == '__main__':
    unittest.main()
