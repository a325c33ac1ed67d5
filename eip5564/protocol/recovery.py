"""
ERC-5564 Stealth Private Key Recovery (recipient side)

    x = (spending_priv + (s mod n)) mod n

so that x*G = S + s*G = P_stealth. A shared-secret digest >= n is wrapped
by the wide reduction, never rejected.
"""

from __future__ import annotations
import logging
from typing import Union

from eip5564.constants import SCHEME_ID_SECP256K1
from eip5564.core.types import PrivateKey, PublicKey
from eip5564.crypto.curve import get_curve
from eip5564.protocol.derivation import shared_secret

logger = logging.getLogger(__name__)


def compute_stealth_key(
    ephemeral_public_key: Union[PublicKey, bytes],
    viewing_private_key: Union[PrivateKey, bytes],
    spending_private_key: Union[PrivateKey, bytes],
    scheme_id: int = SCHEME_ID_SECP256K1,
) -> PrivateKey:
    """
    Derive the private key that controls a matched stealth address.

    Args:
        ephemeral_public_key: Sender's ephemeral public key R
        viewing_private_key: Our viewing private key v
        spending_private_key: Our spending private key

    Returns:
        Stealth private key

    Raises:
        PrivateKeyOutOfRangeError: the sum is zero mod n
    """
    ephemeral = PublicKey.coerce(ephemeral_public_key)
    viewing = PrivateKey.coerce(viewing_private_key)
    spending = PrivateKey.coerce(spending_private_key)

    curve = get_curve(scheme_id)

    secret = shared_secret(curve, ephemeral, viewing)
    tweak = curve.reduce_scalar(secret)

    stealth_key = PrivateKey(curve.scalar_add(spending.data, tweak))
    logger.debug("Recovered stealth key for ephemeral key %s...", ephemeral.hex()[:16])
    return stealth_key
