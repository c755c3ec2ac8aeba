"""
External mu computation for ML-DSA in pure (non pre-hash) mode

(C) 2026 The mldsa-kat authors

Released under the Simplified BSD License (see license.txt)
"""

from __future__ import annotations

from .errors import ContextTooLarge
from .primitives import Xof, Shake256

TR_SIZE = 64
MU_SIZE = 64
MAX_CONTEXT_SIZE = 255

def compute_external_mu(pk: bytes, ctx: bytes, msg: bytes, xof: Xof | None = None) -> bytes:
    """
    Compute mu as an external party would (FIPS 204):

      Algorithm 2, line 10: M' = IntegerToBytes(0, 1) || IntegerToBytes(|ctx|, 1) || ctx || M
      Algorithm 6, line 9:  tr = H(pk, 64)
      Algorithm 7, line 6:  mu = H(tr || M', 64)
    """
    if len(ctx) > MAX_CONTEXT_SIZE:
        raise ContextTooLarge(len(ctx))

    if xof is None:
        xof = Shake256()

    xof.absorb(pk)
    tr = xof.squeeze(TR_SIZE)
    xof.reset()

    # M' is fed in by parts
    xof.absorb(tr)
    xof.absorb(bytes([0]))
    xof.absorb(bytes([len(ctx)]))
    xof.absorb(ctx)
    xof.absorb(msg)
    return xof.squeeze(MU_SIZE)
