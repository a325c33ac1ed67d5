"""
ERC-5564 Core Value Types
"""

from eip5564.core.types import (
    Announcement,
    EthereumAddress,
    PrivateKey,
    PublicKey,
    StealthAddressResult,
    StealthMetaAddress,
    decode_hex,
    validate_view_tag,
)

__all__ = [
    "Announcement",
    "EthereumAddress",
    "PrivateKey",
    "PublicKey",
    "StealthAddressResult",
    "StealthMetaAddress",
    "decode_hex",
    "validate_view_tag",
]
