"""
ERC-5564 Value Types

Fixed-size byte values exchanged by the protocol. All multi-byte integers are
BIG-ENDIAN. Length and range are checked on construction; on-curve validation
of public keys is the curve collaborator's job (see eip5564.crypto.curve).
"""

from __future__ import annotations
import string
from dataclasses import dataclass
from typing import Optional, Union

from eip5564.constants import (
    ADDRESS_SIZE,
    COMPRESSED_PREFIXES,
    META_ADDRESS_PREFIX,
    PRIVATE_KEY_SIZE,
    PUBLIC_KEY_SIZE,
    SECP256K1_ORDER,
    VIEW_TAG_MAX,
    VIEW_TAG_MIN,
)
from eip5564.crypto.hash import keccak256
from eip5564.errors import (
    AddressInvalidHexError,
    AddressWrongLengthError,
    InvalidViewTagError,
    PrivateKeyOutOfRangeError,
    PrivateKeyInvalidHexError,
    PrivateKeyWrongLengthError,
    PublicKeyInvalidHexError,
    PublicKeyNotOnCurveError,
    PublicKeyWrongLengthError,
)


_HEX_DIGITS = frozenset(string.hexdigits)


def _strip_0x(hex_string: str) -> str:
    if hex_string[:2] in ("0x", "0X"):
        return hex_string[2:]
    return hex_string


def decode_hex(hex_string: str) -> Optional[bytes]:
    """
    Strict hex decoding: optional 0x prefix, even length, hex digits only.

    Returns None for malformed input, including embedded whitespace.
    """
    body = _strip_0x(hex_string)
    if len(body) % 2 or not _HEX_DIGITS.issuperset(body):
        return None
    return bytes.fromhex(body)


def validate_view_tag(view_tag: Optional[int]) -> Optional[int]:
    """Check that a view tag is None or a single byte value."""
    if view_tag is None:
        return None
    if isinstance(view_tag, bool) or not isinstance(view_tag, int):
        raise InvalidViewTagError(view_tag)
    if not VIEW_TAG_MIN <= view_tag <= VIEW_TAG_MAX:
        raise InvalidViewTagError(view_tag)
    return view_tag


@dataclass(frozen=True, slots=True)
class PrivateKey:
    """
    secp256k1 private scalar.

    SIZE: 32 bytes
    RANGE: [1, n-1]
    NOTE: repr never shows key material.
    """
    data: bytes

    def __post_init__(self):
        if len(self.data) != PRIVATE_KEY_SIZE:
            raise PrivateKeyWrongLengthError(len(self.data), PRIVATE_KEY_SIZE)
        if not 0 < int.from_bytes(self.data, "big") < SECP256K1_ORDER:
            raise PrivateKeyOutOfRangeError()

    def __bytes__(self) -> bytes:
        return self.data

    def __repr__(self) -> str:
        return "PrivateKey(<redacted>)"

    def to_int(self) -> int:
        return int.from_bytes(self.data, "big")

    @classmethod
    def from_int(cls, value: int) -> PrivateKey:
        if not 0 < value < SECP256K1_ORDER:
            raise PrivateKeyOutOfRangeError()
        return cls(value.to_bytes(PRIVATE_KEY_SIZE, "big"))

    @classmethod
    def from_hex(cls, hex_string: str) -> PrivateKey:
        data = decode_hex(hex_string)
        if data is None:
            raise PrivateKeyInvalidHexError()
        return cls(data)

    @classmethod
    def coerce(cls, value: Union[PrivateKey, bytes, bytearray]) -> PrivateKey:
        if isinstance(value, PrivateKey):
            return value
        return cls(bytes(value))


@dataclass(frozen=True, slots=True)
class PublicKey:
    """
    secp256k1 public key.

    SIZE: 33 bytes
    SERIALIZATION: SEC1 compressed, 0x02/0x03 || x
    """
    data: bytes

    def __post_init__(self):
        if len(self.data) != PUBLIC_KEY_SIZE:
            raise PublicKeyWrongLengthError(len(self.data), PUBLIC_KEY_SIZE)
        if self.data[0] not in COMPRESSED_PREFIXES:
            raise PublicKeyNotOnCurveError(
                f"unexpected SEC1 prefix {self.data[0]:#04x}"
            )

    def __bytes__(self) -> bytes:
        return self.data

    def __repr__(self) -> str:
        return f"PublicKey({self.data.hex()[:16]}...)"

    def hex(self) -> str:
        return self.data.hex()

    @classmethod
    def from_hex(cls, hex_string: str) -> PublicKey:
        data = decode_hex(hex_string)
        if data is None:
            raise PublicKeyInvalidHexError(hex_string)
        return cls(data)

    @classmethod
    def coerce(cls, value: Union[PublicKey, bytes, bytearray]) -> PublicKey:
        if isinstance(value, PublicKey):
            return value
        return cls(bytes(value))

    def to_address(self) -> EthereumAddress:
        """Derive address: low 20 bytes of Keccak256 over the compressed key."""
        return EthereumAddress(keccak256(self.data)[-ADDRESS_SIZE:])


@dataclass(frozen=True, slots=True)
class EthereumAddress:
    """
    Ethereum address.

    SIZE: 20 bytes
    """
    data: bytes

    def __post_init__(self):
        if len(self.data) != ADDRESS_SIZE:
            raise AddressWrongLengthError(len(self.data), ADDRESS_SIZE)

    def __bytes__(self) -> bytes:
        return self.data

    def __eq__(self, other: object) -> bool:
        if isinstance(other, EthereumAddress):
            return self.data == other.data
        if isinstance(other, bytes):
            return self.data == other
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self.data)

    def __repr__(self) -> str:
        return f"EthereumAddress({self.to_checksum()})"

    def hex(self) -> str:
        return "0x" + self.data.hex()

    def to_checksum(self) -> str:
        """EIP-55 mixed-case checksum encoding."""
        lower = self.data.hex()
        digest = keccak256(lower.encode("ascii")).hex()
        return "0x" + "".join(
            c.upper() if int(digest[i], 16) >= 8 else c
            for i, c in enumerate(lower)
        )

    @classmethod
    def from_hex(cls, hex_string: str) -> EthereumAddress:
        data = decode_hex(hex_string)
        if data is None:
            raise AddressInvalidHexError(hex_string)
        return cls(data)

    @classmethod
    def coerce(cls, value: Union[EthereumAddress, bytes, bytearray, str]) -> EthereumAddress:
        if isinstance(value, EthereumAddress):
            return value
        if isinstance(value, str):
            return cls.from_hex(value)
        return cls(bytes(value))


@dataclass(frozen=True, slots=True)
class StealthMetaAddress:
    """
    Recipient's published stealth meta-address.

    TEXT: "st:eth:0x" || hex(spending_public_key) || hex(viewing_public_key)
    """
    spending_public_key: PublicKey
    viewing_public_key: PublicKey

    def to_text(self) -> str:
        return (
            META_ADDRESS_PREFIX
            + self.spending_public_key.hex()
            + self.viewing_public_key.hex()
        )

    def __str__(self) -> str:
        return self.to_text()


@dataclass(frozen=True, slots=True)
class Announcement:
    """
    What a recipient sees when scanning: a candidate stealth address, the
    sender's ephemeral public key and, optionally, the view tag.
    """
    stealth_address: EthereumAddress
    ephemeral_public_key: PublicKey
    view_tag: Optional[int] = None

    def __post_init__(self):
        validate_view_tag(self.view_tag)


@dataclass(frozen=True, slots=True)
class StealthAddressResult:
    """
    Output of stealth address generation.

    The ephemeral public key is always the 33-byte compressed form.
    """
    stealth_address: EthereumAddress
    ephemeral_public_key: PublicKey
    view_tag: int

    def to_announcement(self) -> Announcement:
        return Announcement(
            stealth_address=self.stealth_address,
            ephemeral_public_key=self.ephemeral_public_key,
            view_tag=self.view_tag,
        )
