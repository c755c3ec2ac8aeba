"""
Hex decoding with size checks

(C) 2026 The mldsa-kat authors

Released under the Simplified BSD License (see license.txt)
"""

import binascii

from .errors import DecodeError, LengthMismatch

def decode_hex(value: str, field: str) -> bytes:
    try:
        return binascii.unhexlify(value)
    except (binascii.Error, ValueError) as e:
        raise DecodeError(field, str(e)) from e

def decode_and_check(value: str, expected_length: int, field: str) -> bytes:
    decoded = decode_hex(value, field)
    if len(decoded) != expected_length:
        raise LengthMismatch(field, expected_length, len(decoded))
    return decoded

def hex_encode(data: bytes) -> str:
    return binascii.hexlify(data).decode('ascii')
