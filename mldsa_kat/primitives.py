"""
Capability interfaces for the primitives consumed by the converter

The converter never implements ML-DSA or SHAKE256 itself. It talks to
a SignatureScheme (seed expansion, key encodings, verification) and to
an Xof (absorb/squeeze). The default implementations wrap dilithium-py
and hashlib, and tests substitute stubs with fixed outputs.

(C) 2026 The mldsa-kat authors

Released under the Simplified BSD License (see license.txt)
"""

from __future__ import annotations

import hashlib
from abc import ABC, abstractmethod

from dilithium_py.ml_dsa.default_parameters import DEFAULT_PARAMETERS
from dilithium_py.ml_dsa.ml_dsa import ML_DSA

#
# Extendable output functions
#
class Xof(ABC):
    @abstractmethod
    def absorb(self, data: bytes) -> None:
        """Feed more input. Only valid before the first squeeze."""

    @abstractmethod
    def squeeze(self, length: int) -> bytes:
        """Return the next `length` bytes of output."""

    @abstractmethod
    def reset(self) -> None:
        """Return to a fresh absorbing state, dropping all input and output."""

class Shake256(Xof):
    def __init__(self):
        self.reset()

    def absorb(self, data: bytes) -> None:
        if self.__squeezed:
            raise RuntimeError("SHAKE256 cannot absorb after squeezing without a reset")
        self.__state.update(data)

    def squeeze(self, length: int) -> bytes:
        # hashlib only offers digest(n), so keep an offset into the output stream
        end = self.__squeezed + length
        out = self.__state.digest(end)[self.__squeezed:end]
        self.__squeezed = end
        return out

    def reset(self) -> None:
        self.__state = hashlib.shake_256()
        self.__squeezed = 0

#
# Signature scheme
#
class PublicKey(ABC):
    @abstractmethod
    def to_raw(self) -> bytes:
        pass

    @abstractmethod
    def verify(self, message: bytes, signature: bytes, context: bytes = b"") -> bool:
        pass

    @abstractmethod
    def verify_with_external_mu(self, mu: bytes, signature: bytes) -> bool:
        pass

class PrivateKey(ABC):
    @abstractmethod
    def encode_expanded(self) -> bytes:
        pass

    @abstractmethod
    def public_key(self) -> PublicKey:
        pass

class SignatureScheme(ABC):
    @abstractmethod
    def expand_seed(self, params, seed: bytes) -> PrivateKey:
        """
        Deterministically derive the keypair for `params` from a 32 byte seed
        (ML-DSA.KeyGen_internal)
        """

#
# dilithium-py backend
#
class ExternalMuML_DSA(ML_DSA):
    """
    dilithium-py signs with an externally computed mu but only verifies
    formatted messages. This adds the verifying half (FIPS 204 Algorithm 8
    entered with mu instead of M').
    """

    def _verify_internal(self, pk: bytes, m: bytes, sig: bytes, external_mu: bool = False) -> bool:
        rho, t1 = self._unpack_pk(pk)
        try:
            c_tilde, z, h = self._unpack_sig(sig)
        except ValueError:
            return False

        if h.sum_hint() > self.omega:
            return False
        if z.check_norm_bound(self.gamma_1 - self.beta):
            return False

        A_hat = self._expand_matrix_from_seed(rho)

        if external_mu:
            mu = m
        else:
            tr = self._h(pk, 64)
            mu = self._h(tr + m, 64)

        c = self.R.sample_in_ball(c_tilde, self.tau).to_ntt()
        z = z.to_ntt()
        t1 = t1.scale(1 << self.d).to_ntt()

        Az_minus_ct1 = ((A_hat @ z) - t1.scale(c)).from_ntt()
        w_prime = h.use_hint(Az_minus_ct1, 2 * self.gamma_2)
        w_prime_bytes = w_prime.bit_pack_w(self.gamma_2)

        return c_tilde == self._h(mu + w_prime_bytes, self.c_tilde_bytes)

    def verify_external_mu(self, pk: bytes, mu: bytes, sig: bytes) -> bool:
        if len(mu) != 64:
            raise ValueError("mu must be 64 bytes, got %d" % (len(mu)))
        return self._verify_internal(pk, mu, sig, external_mu=True)

class DilithiumPyPublicKey(PublicKey):
    def __init__(self, alg, pk: bytes):
        self.__alg = alg
        self.__pk = pk

    def to_raw(self) -> bytes:
        return self.__pk

    def verify(self, message: bytes, signature: bytes, context: bytes = b"") -> bool:
        # dilithium-py raises on an oversized context, here it just does not verify
        if len(context) > 255:
            return False
        return self.__alg.verify(self.__pk, message, signature, ctx=context)

    def verify_with_external_mu(self, mu: bytes, signature: bytes) -> bool:
        return self.__alg.verify_external_mu(self.__pk, mu, signature)

class DilithiumPyPrivateKey(PrivateKey):
    def __init__(self, alg, pk: bytes, sk: bytes):
        self.__alg = alg
        self.__pk = pk
        self.__sk = sk

    def encode_expanded(self) -> bytes:
        return self.__sk

    def public_key(self) -> PublicKey:
        return DilithiumPyPublicKey(self.__alg, self.__pk)

class DilithiumPyScheme(SignatureScheme):
    # dilithium-py names its parameter sets ML_DSA_44 etc, as does ParameterSet
    def __init__(self):
        self.__algs = {}

    def algorithm(self, params) -> ExternalMuML_DSA:
        if params.name not in self.__algs:
            self.__algs[params.name] = ExternalMuML_DSA(DEFAULT_PARAMETERS[params.name])
        return self.__algs[params.name]

    def expand_seed(self, params, seed: bytes) -> PrivateKey:
        alg = self.algorithm(params)
        pk, sk = alg._keygen_internal(seed) # pylint: disable=protected-access
        return DilithiumPyPrivateKey(alg, pk, sk)
