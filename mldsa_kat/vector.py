"""
Expansion of a KAT record into a self-describing ML-DSA test vector

(C) 2026 The mldsa-kat authors

Released under the Simplified BSD License (see license.txt)
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from .errors import KeyMismatch, SignatureInvalid, DigestVerificationFailed
from .hexutil import decode_hex, decode_and_check, hex_encode
from .kat_reader import KATInput
from .mu import compute_external_mu
from .params import ParameterSet, SEED_SIZE
from .primitives import SignatureScheme, Xof, DilithiumPyScheme

ENTROPY_SIZE = 32

@dataclass(frozen=True)
class TestVector:
    """A single entry of the output JSON"""

    __test__ = False # not a test case, despite the name

    # ML-DSA-44, ML-DSA-65, or ML-DSA-87
    parameter_set: str
    # The seed that derives the expanded keypair
    seed: bytes
    public_key: bytes
    # The expanded secret key
    secret_key: bytes
    # The randomness used during signing
    entropy: bytes
    message: bytes
    context: bytes
    # mu as derived from the public key, context and message
    mu: bytes
    signature: bytes

    def to_json_dict(self) -> dict[str, str]:
        return {
            "ParameterSet": self.parameter_set,
            "Seed": hex_encode(self.seed),
            "PublicKey": hex_encode(self.public_key),
            "SecretKey": hex_encode(self.secret_key),
            "Entropy": hex_encode(self.entropy),
            "Message": hex_encode(self.message),
            "Context": hex_encode(self.context),
            "Mu": hex_encode(self.mu),
            "Signature": hex_encode(self.signature),
        }

def compute_test_vector(kat: KATInput,
                        scheme: SignatureScheme | None = None,
                        xof: Xof | None = None) -> TestVector:
    if scheme is None:
        scheme = DilithiumPyScheme()

    seed = decode_and_check(kat.xi, SEED_SIZE, 'xi')
    entropy = decode_and_check(kat.rng, ENTROPY_SIZE, 'rng')

    # The size of the public key is the only indicator of the parameter set
    public_key = decode_hex(kat.pk, 'pk')
    params = ParameterSet.from_public_key_length(len(public_key))
    logging.debug("Test case uses %s", params)

    secret_key = decode_and_check(kat.sk, params.secret_key_size, 'sk')
    # Message and context lengths vary, ctx is bounded when computing mu
    msg = decode_hex(kat.msg, 'msg')
    ctx = decode_hex(kat.ctx, 'ctx')
    sig_message = decode_and_check(kat.sm, params.signature_size + len(msg), 'sm')
    sig = sig_message[:params.signature_size]

    sk, pk = params.expand_seed(seed, scheme)

    derived_sk = sk.encode_expanded()
    if derived_sk != secret_key:
        raise KeyMismatch('sk', hex_encode(secret_key), hex_encode(derived_sk))

    derived_pk = pk.to_raw()
    if derived_pk != public_key:
        raise KeyMismatch('pk', hex_encode(public_key), hex_encode(derived_pk))

    if not pk.verify(msg, sig, ctx):
        raise SignatureInvalid(str(params))

    mu = compute_external_mu(public_key, ctx, msg, xof)

    if not pk.verify_with_external_mu(mu, sig):
        raise DigestVerificationFailed(str(params), hex_encode(mu))

    return TestVector(
        parameter_set=str(params),
        seed=seed,
        public_key=derived_pk,
        secret_key=derived_sk,
        entropy=entropy,
        message=msg,
        context=ctx,
        mu=mu,
        signature=sig,
    )
