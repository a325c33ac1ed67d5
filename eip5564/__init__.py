"""
eip5564 - Stealth Addresses for Ethereum
ERC-5564, scheme 0x00 (secp256k1 with view tags)

A sender derives a fresh one-time address for a recipient from the
recipient's published meta-address. Only the holder of the viewing key can
link that address back to the recipient, and only the holder of the
spending key can spend from it.
"""

__version__ = "0.1.0"

from eip5564.config import (
    LogConfig,
    ScanConfig,
    StealthConfig,
    setup_logging,
)
from eip5564.constants import (
    META_ADDRESS_PREFIX,
    SCHEME_ID_SECP256K1,
)
from eip5564.core.types import (
    Announcement,
    EthereumAddress,
    PrivateKey,
    PublicKey,
    StealthAddressResult,
    StealthMetaAddress,
)
from eip5564.crypto.entropy import (
    DeterministicRandomSource,
    RandomSource,
    SystemRandomSource,
)
from eip5564.errors import (
    EntropyError,
    ErrorCode,
    InvalidMetaAddressError,
    InvalidPrivateKeyError,
    InvalidPublicKeyError,
    StealthError,
)
from eip5564.protocol import (
    StealthKeys,
    check_stealth_address,
    compute_stealth_key,
    encode_meta_address,
    generate_stealth_address,
    parse_meta_address,
    scan_announcements,
)

__all__ = [
    # Constants
    "META_ADDRESS_PREFIX",
    "SCHEME_ID_SECP256K1",
    # Types
    "Announcement",
    "EthereumAddress",
    "PrivateKey",
    "PublicKey",
    "StealthAddressResult",
    "StealthMetaAddress",
    "StealthKeys",
    # Entropy
    "RandomSource",
    "SystemRandomSource",
    "DeterministicRandomSource",
    # Protocol
    "parse_meta_address",
    "encode_meta_address",
    "generate_stealth_address",
    "check_stealth_address",
    "scan_announcements",
    "compute_stealth_key",
    # Configuration
    "LogConfig",
    "ScanConfig",
    "StealthConfig",
    "setup_logging",
    # Errors
    "ErrorCode",
    "StealthError",
    "InvalidMetaAddressError",
    "InvalidPublicKeyError",
    "InvalidPrivateKeyError",
    "EntropyError",
    "__version__",
]
