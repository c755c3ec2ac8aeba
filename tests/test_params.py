"""
(C) 2026 The mldsa-kat authors

Released under the Simplified BSD License (see license.txt)
"""

import unittest

from mldsa_kat.errors import UnsupportedParameterSet
from mldsa_kat.params import ParameterSet

from .stubs import StubScheme

class ParameterSetTests(unittest.TestCase):
    def test_sizes(self):
        self.assertEqual((ParameterSet.ML_DSA_44.public_key_size,
                          ParameterSet.ML_DSA_44.secret_key_size,
                          ParameterSet.ML_DSA_44.signature_size), (1312, 2560, 2420))
        self.assertEqual((ParameterSet.ML_DSA_65.public_key_size,
                          ParameterSet.ML_DSA_65.secret_key_size,
                          ParameterSet.ML_DSA_65.signature_size), (1952, 4032, 3309))
        self.assertEqual((ParameterSet.ML_DSA_87.public_key_size,
                          ParameterSet.ML_DSA_87.secret_key_size,
                          ParameterSet.ML_DSA_87.signature_size), (2592, 4896, 4627))

    def test_names(self):
        self.assertEqual([p.name for p in ParameterSet], ["ML_DSA_44", "ML_DSA_65", "ML_DSA_87"])
        self.assertEqual([str(p) for p in ParameterSet], ["ML-DSA-44", "ML-DSA-65", "ML-DSA-87"])

    def test_public_key_sizes_are_unique(self):
        sizes = [p.public_key_size for p in ParameterSet]
        self.assertEqual(len(set(sizes)), len(sizes))

    def test_from_public_key_length(self):
        for params in ParameterSet:
            self.assertIs(ParameterSet.from_public_key_length(params.public_key_size), params)

    def test_unknown_public_key_length(self):
        for length in [0, 32, 1311, 1313, 2560]:
            with self.assertRaises(UnsupportedParameterSet) as cm:
                ParameterSet.from_public_key_length(length)
            self.assertEqual(cm.exception.length, length)

    def test_expand_seed_is_deterministic(self):
        scheme = StubScheme()
        seed = bytes(range(32))
        for params in ParameterSet:
            sk1, pk1 = params.expand_seed(seed, scheme)
            sk2, pk2 = params.expand_seed(seed, scheme)
            self.assertEqual(sk1.encode_expanded(), sk2.encode_expanded())
            self.assertEqual(pk1.to_raw(), pk2.to_raw())
            self.assertEqual(len(sk1.encode_expanded()), params.secret_key_size)
            self.assertEqual(len(pk1.to_raw()), params.public_key_size)
        self.assertEqual(scheme.expansions, 6)

    def test_expand_seed_requires_32_bytes(self):
        scheme = StubScheme()
        for length in [0, 31, 33, 64]:
            with self.assertRaises(ValueError):
                ParameterSet.ML_DSA_44.expand_seed(bytes(length), scheme)
        self.assertEqual(scheme.expansions, 0)

if __name__ == '__main__':
    unittest.main()
