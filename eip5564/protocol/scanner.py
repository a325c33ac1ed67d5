"""
ERC-5564 Stealth Address Scanning (recipient side)

For each announcement the recipient recomputes the shared secret with the
viewing key. When the announcement carries a view tag, a mismatch on that
single byte rejects it before the point addition and second hash.
Only ~1/256 of foreign announcements survive the tag check.
"""

from __future__ import annotations
import hmac
import logging
from concurrent.futures import ThreadPoolExecutor
from typing import Iterable, List, Optional, Union

from eip5564.config import StealthConfig
from eip5564.constants import SCHEME_ID_SECP256K1
from eip5564.core.types import (
    Announcement,
    EthereumAddress,
    PrivateKey,
    PublicKey,
    validate_view_tag,
)
from eip5564.crypto.curve import get_curve
from eip5564.protocol.derivation import derive_address, shared_secret, view_tag_of

logger = logging.getLogger(__name__)


def check_stealth_address(
    stealth_address: Union[EthereumAddress, bytes, str],
    ephemeral_public_key: Union[PublicKey, bytes],
    viewing_private_key: Union[PrivateKey, bytes],
    spending_public_key: Union[PublicKey, bytes],
    view_tag: Optional[int] = None,
    scheme_id: int = SCHEME_ID_SECP256K1,
) -> bool:
    """
    Check whether a stealth address belongs to the holder of a viewing key.

    Args:
        stealth_address: Candidate address (20 bytes)
        ephemeral_public_key: Sender's ephemeral public key R
        viewing_private_key: Our viewing private key v
        spending_public_key: Our spending public key S
        view_tag: Announced view tag, or None to skip the fast path

    Returns:
        True if the address was generated for us. A non-match is False,
        never an error.
    """
    candidate = EthereumAddress.coerce(stealth_address)
    ephemeral = PublicKey.coerce(ephemeral_public_key)
    viewing = PrivateKey.coerce(viewing_private_key)
    spending = PublicKey.coerce(spending_public_key)
    view_tag = validate_view_tag(view_tag)

    curve = get_curve(scheme_id)

    # s = Keccak256(compress(v*R))
    secret = shared_secret(curve, ephemeral, viewing)

    if view_tag is not None and view_tag_of(secret) != view_tag:
        return False

    # P' = S + s*G
    expected = derive_address(curve, spending, secret)
    return hmac.compare_digest(expected.data, candidate.data)


def scan_announcements(
    announcements: Iterable[Announcement],
    viewing_private_key: Union[PrivateKey, bytes],
    spending_public_key: Union[PublicKey, bytes],
    max_workers: Optional[int] = None,
    require_view_tag: Optional[bool] = None,
    scheme_id: Optional[int] = None,
    config: Optional[StealthConfig] = None,
) -> List[Announcement]:
    """
    Find the announcements addressed to us.

    Checks are independent, so with max_workers > 1 they run on a thread
    pool. The result keeps input order either way.

    Args:
        announcements: Candidate announcements
        viewing_private_key: Our viewing private key
        spending_public_key: Our spending public key
        max_workers: Thread pool size; None or 1 scans inline
        require_view_tag: Skip announcements that carry no view tag
        scheme_id: ERC-5564 scheme id
        config: Defaults for any of the three arguments above left as None

    Returns:
        Matching announcements in input order
    """
    config = config or StealthConfig()
    if max_workers is None:
        max_workers = config.scan.max_workers
    if require_view_tag is None:
        require_view_tag = config.scan.require_view_tag
    if scheme_id is None:
        scheme_id = config.scheme_id
    get_curve(scheme_id)

    viewing = PrivateKey.coerce(viewing_private_key)
    spending = PublicKey.coerce(spending_public_key)

    candidates = [
        a for a in announcements
        if not (require_view_tag and a.view_tag is None)
    ]

    def _check(announcement: Announcement) -> bool:
        return check_stealth_address(
            announcement.stealth_address,
            announcement.ephemeral_public_key,
            viewing,
            spending,
            announcement.view_tag,
            scheme_id,
        )

    if max_workers is not None and max_workers > 1 and len(candidates) > 1:
        with ThreadPoolExecutor(max_workers=max_workers) as pool:
            verdicts = list(pool.map(_check, candidates))
    else:
        verdicts = [_check(a) for a in candidates]

    matches = [a for a, ok in zip(candidates, verdicts) if ok]

    logger.info(f"Scanned {len(candidates)} announcements, {len(matches)} matched")
    return matches
