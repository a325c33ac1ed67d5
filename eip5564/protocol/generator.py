"""
ERC-5564 Stealth Address Generation (sender side)

Protocol:
1. Sender draws a fresh ephemeral scalar r, computes R = r*G
2. Shared secret: s = Keccak256(compress(r * V)) where V is the viewing key
3. View tag: s[0]
4. Stealth public key: P = S + (s mod n)*G where S is the spending key
5. Stealth address: Keccak256(compress(P))[12:32]

r is used once and dropped; it is never returned, logged or cached.
"""

from __future__ import annotations
import logging
from typing import Optional, Union

from eip5564.constants import ENTROPY_MAX_ATTEMPTS, SCHEME_ID_SECP256K1
from eip5564.core.types import (
    PrivateKey,
    StealthAddressResult,
    StealthMetaAddress,
)
from eip5564.crypto.curve import EllipticCurveOps, get_curve
from eip5564.crypto.entropy import RandomSource, default_random_source
from eip5564.errors import EntropyError
from eip5564.protocol.derivation import (
    derive_address,
    public_key_of,
    shared_secret,
    view_tag_of,
)
from eip5564.protocol.meta_address import as_meta_address

logger = logging.getLogger(__name__)


def generate_private_key(
    random_source: RandomSource,
    curve: EllipticCurveOps,
) -> PrivateKey:
    """
    Draw a private scalar from the entropy source.

    Draws that land on zero or >= n are resampled. A source that fails,
    short-reads, or keeps producing invalid scalars is fatal.

    Raises:
        EntropyError: source unavailable or exhausted
    """
    for _ in range(ENTROPY_MAX_ATTEMPTS):
        try:
            candidate = random_source.read(curve.scalar_size)
        except Exception as e:
            raise EntropyError(f"{type(e).__name__}: {e}") from e

        if not isinstance(candidate, (bytes, bytearray)) or len(candidate) != curve.scalar_size:
            raise EntropyError(
                f"expected {curve.scalar_size} bytes from random source"
            )

        if curve.is_valid_scalar(bytes(candidate)):
            return PrivateKey(bytes(candidate))

    raise EntropyError(
        f"no valid scalar after {ENTROPY_MAX_ATTEMPTS} draws"
    )


def generate_stealth_address(
    meta_address: Union[str, StealthMetaAddress],
    random_source: Optional[RandomSource] = None,
    scheme_id: int = SCHEME_ID_SECP256K1,
    *,
    ephemeral_private_key: Optional[PrivateKey] = None,
) -> StealthAddressResult:
    """
    Generate a one-time stealth address for a recipient.

    Every call consumes fresh entropy. Passing ephemeral_private_key replays
    a known vector; using the same ephemeral key twice links the two
    payments and is the caller's responsibility to avoid.

    Args:
        meta_address: Recipient's "st:eth:0x..." text or parsed meta-address
        random_source: Entropy capability (defaults to the OS CSPRNG)
        scheme_id: ERC-5564 scheme id
        ephemeral_private_key: Fixed ephemeral scalar instead of a fresh draw

    Returns:
        StealthAddressResult(stealth_address, ephemeral_public_key, view_tag)
    """
    curve = get_curve(scheme_id)
    meta = as_meta_address(meta_address, scheme_id)

    if ephemeral_private_key is None:
        ephemeral_private_key = generate_private_key(
            random_source or default_random_source(), curve
        )

    # R = r*G
    ephemeral_public_key = public_key_of(curve, ephemeral_private_key)

    # s = Keccak256(compress(r*V))
    secret = shared_secret(curve, meta.viewing_public_key, ephemeral_private_key)
    view_tag = view_tag_of(secret)

    # P = S + s*G
    address = derive_address(curve, meta.spending_public_key, secret)

    logger.debug("Generated stealth address %s (view tag %d)", address.hex(), view_tag)

    return StealthAddressResult(
        stealth_address=address,
        ephemeral_public_key=ephemeral_public_key,
        view_tag=view_tag,
    )
