"""
Conversion of ML-DSA known-answer tests into JSON test vectors

(C) 2026 The mldsa-kat authors

Released under the Simplified BSD License (see license.txt)
"""

from .errors import ConversionException, DecodeError, LengthMismatch, MalformedLine, MissingField, \
    UnsupportedParameterSet, ContextTooLarge, KeyMismatch, SignatureInvalid, DigestVerificationFailed
from .kat_reader import KATInput, KatReader, stream_kats
from .mu import compute_external_mu
from .params import ParameterSet
from .vector import TestVector, compute_test_vector

__version__ = "1.0.0"
