"""
ERC-5564 Stealth Meta-Address Codec

Text format:

    "st:eth:0x" || hex(spending_public_key) || hex(viewing_public_key)

Both keys are 33-byte SEC1 compressed points, so the text is exactly
9 + 2 * 2 * 33 = 141 characters. Hex may be upper or lower case.
"""

from __future__ import annotations
from typing import Union

from eip5564.constants import (
    META_ADDRESS_LENGTH,
    META_ADDRESS_PREFIX,
    PUBLIC_KEY_HEX_LENGTH,
    PUBLIC_KEY_SIZE,
    SCHEME_ID_SECP256K1,
)
from eip5564.core.types import PublicKey, StealthMetaAddress, decode_hex
from eip5564.crypto.curve import EllipticCurveOps, get_curve
from eip5564.errors import (
    MetaAddressWrongLengthError,
    MetaAddressWrongPrefixError,
    PublicKeyInvalidHexError,
    PublicKeyWrongLengthError,
)


def parse_public_key_hex(hex_string: str, curve: EllipticCurveOps) -> PublicKey:
    """
    Decode a hex public key and check it is on the curve.

    Raises:
        PublicKeyInvalidHexError: non-hex characters
        PublicKeyWrongLengthError: decoded length != 33
        PublicKeyNotOnCurveError: not a valid curve point
    """
    data = decode_hex(hex_string)
    if data is None:
        raise PublicKeyInvalidHexError(hex_string)

    if len(data) != PUBLIC_KEY_SIZE:
        raise PublicKeyWrongLengthError(len(data), PUBLIC_KEY_SIZE)

    return PublicKey(curve.decode_point(data))


def parse_meta_address(
    text: str,
    scheme_id: int = SCHEME_ID_SECP256K1,
) -> StealthMetaAddress:
    """
    Parse a stealth meta-address.

    Length is checked before the prefix, so a short string with the right
    prefix still reports a length error.

    Args:
        text: "st:eth:0x..." meta-address
        scheme_id: ERC-5564 scheme used to validate the points

    Returns:
        StealthMetaAddress with spending and viewing public keys
    """
    if len(text) != META_ADDRESS_LENGTH:
        raise MetaAddressWrongLengthError(len(text), META_ADDRESS_LENGTH)
    if not text.startswith(META_ADDRESS_PREFIX):
        raise MetaAddressWrongPrefixError(META_ADDRESS_PREFIX)

    curve = get_curve(scheme_id)
    body = text[len(META_ADDRESS_PREFIX):]

    spending = parse_public_key_hex(body[:PUBLIC_KEY_HEX_LENGTH], curve)
    viewing = parse_public_key_hex(body[PUBLIC_KEY_HEX_LENGTH:], curve)

    return StealthMetaAddress(
        spending_public_key=spending,
        viewing_public_key=viewing,
    )


def encode_meta_address(
    spending_public_key: Union[PublicKey, bytes],
    viewing_public_key: Union[PublicKey, bytes],
) -> str:
    """Render two public keys as a meta-address (lowercase hex)."""
    return StealthMetaAddress(
        spending_public_key=PublicKey.coerce(spending_public_key),
        viewing_public_key=PublicKey.coerce(viewing_public_key),
    ).to_text()


def as_meta_address(
    value: Union[str, StealthMetaAddress],
    scheme_id: int = SCHEME_ID_SECP256K1,
) -> StealthMetaAddress:
    if isinstance(value, StealthMetaAddress):
        return value
    return parse_meta_address(value, scheme_id)
