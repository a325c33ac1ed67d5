"""
ERC-5564 Constants

All protocol constants defined here for single source of truth.
"""

from typing import Final

# ==============================================================================
# SCHEME
# ==============================================================================

SCHEME_ID_SECP256K1: Final[int] = 0x00          # secp256k1 with view tags

# ==============================================================================
# SECP256K1
# ==============================================================================

SECP256K1_ORDER: Final[int] = (
    0xFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFEBAAEDCE6AF48A03BBFD25E8CD0364141
)

# ==============================================================================
# BYTE LAYOUTS
# ==============================================================================

PRIVATE_KEY_SIZE: Final[int] = 32               # big-endian scalar
PUBLIC_KEY_SIZE: Final[int] = 33                # SEC1 compressed
ADDRESS_SIZE: Final[int] = 20                   # Keccak256(pubkey)[12:32]
KECCAK256_OUTPUT_SIZE: Final[int] = 32
WIDE_SCALAR_SIZE: Final[int] = 48               # buffer for wide reduction

COMPRESSED_PREFIXES: Final[tuple] = (0x02, 0x03)

VIEW_TAG_MIN: Final[int] = 0
VIEW_TAG_MAX: Final[int] = 0xFF

# ==============================================================================
# META-ADDRESS
# ==============================================================================

META_ADDRESS_PREFIX: Final[str] = "st:eth:0x"
# (spending + viewing) * hex
META_ADDRESS_LENGTH: Final[int] = len(META_ADDRESS_PREFIX) + 2 * 2 * PUBLIC_KEY_SIZE
PUBLIC_KEY_HEX_LENGTH: Final[int] = 2 * PUBLIC_KEY_SIZE

# ==============================================================================
# ENTROPY
# ==============================================================================

ENTROPY_MAX_ATTEMPTS: Final[int] = 16           # draws before giving up on a source
