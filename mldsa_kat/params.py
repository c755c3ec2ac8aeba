"""
ML-DSA parameter sets (FIPS 204, Table 2)

(C) 2026 The mldsa-kat authors

Released under the Simplified BSD License (see license.txt)
"""

from __future__ import annotations

from enum import Enum

from .errors import UnsupportedParameterSet
from .primitives import SignatureScheme, PrivateKey, PublicKey, DilithiumPyScheme

SEED_SIZE = 32

class ParameterSet(Enum):
    # display name, public key size, secret key size, signature size
    ML_DSA_44 = ("ML-DSA-44", 1312, 2560, 2420)
    ML_DSA_65 = ("ML-DSA-65", 1952, 4032, 3309)
    ML_DSA_87 = ("ML-DSA-87", 2592, 4896, 4627)

    def __init__(self, display_name: str, public_key_size: int, secret_key_size: int, signature_size: int):
        self.display_name = display_name
        self.public_key_size = public_key_size
        self.secret_key_size = secret_key_size
        self.signature_size = signature_size

    def __str__(self):
        return self.display_name

    @classmethod
    def from_public_key_length(cls, length: int) -> ParameterSet:
        for params in cls:
            if params.public_key_size == length:
                return params
        raise UnsupportedParameterSet(length)

    def expand_seed(self, seed: bytes, scheme: SignatureScheme | None = None) -> tuple[PrivateKey, PublicKey]:
        """
        Expand a 32 byte seed into the keypair of this parameter set.

        A seed of any other length is a caller bug rather than bad input,
        so it raises ValueError instead of a ConversionException.
        """
        if len(seed) != SEED_SIZE:
            raise ValueError("ML-DSA seed must be %d bytes, got %d" % (SEED_SIZE, len(seed)))

        if scheme is None:
            scheme = DilithiumPyScheme()

        private_key = scheme.expand_seed(self, seed)
        return private_key, private_key.public_key()
