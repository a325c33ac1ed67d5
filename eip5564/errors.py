"""
ERC-5564 Error Handling

All error codes and exception classes.

Every error is a deterministic validation failure on caller-supplied data,
except EntropyError, which is fatal to the generate call. None are retried.
"""

from enum import IntEnum
from typing import Optional, Any


class ErrorCode(IntEnum):
    """Error codes."""

    # 1xxx - Meta-address errors
    META_ADDRESS_WRONG_LENGTH = 1001
    META_ADDRESS_WRONG_PREFIX = 1002

    # 2xxx - Public key errors
    PUBLIC_KEY_WRONG_LENGTH = 2001
    PUBLIC_KEY_NOT_ON_CURVE = 2002
    PUBLIC_KEY_INVALID_HEX = 2003

    # 3xxx - Private key errors
    PRIVATE_KEY_WRONG_LENGTH = 3001
    PRIVATE_KEY_OUT_OF_RANGE = 3002
    PRIVATE_KEY_INVALID_HEX = 3003

    # 4xxx - Announcement data errors
    ADDRESS_WRONG_LENGTH = 4001
    INVALID_VIEW_TAG = 4002
    ADDRESS_INVALID_HEX = 4003

    # 5xxx - Entropy errors
    ENTROPY_UNAVAILABLE = 5001

    # 6xxx - Scheme errors
    UNSUPPORTED_SCHEME = 6001


class StealthError(Exception):
    """Base exception for all stealth address errors."""

    def __init__(
        self,
        code: ErrorCode,
        message: str,
        details: Optional[Any] = None
    ):
        self.code = code
        self.message = message
        self.details = details
        super().__init__(f"[{code.value}] {message}")

    def to_dict(self) -> dict:
        """Convert to JSON-serializable dict."""
        result = {
            "code": self.code.value,
            "name": self.code.name,
            "message": self.message,
        }
        if self.details is not None:
            result["details"] = self.details
        return result


# ==============================================================================
# Meta-address Errors (1xxx)
# ==============================================================================

class InvalidMetaAddressError(StealthError):
    """Malformed stealth meta-address text."""


class MetaAddressWrongLengthError(InvalidMetaAddressError):
    def __init__(self, length: int, expected: int):
        super().__init__(
            ErrorCode.META_ADDRESS_WRONG_LENGTH,
            f"Stealth meta-address has wrong length: {length} != {expected}",
            {"length": length, "expected": expected}
        )


class MetaAddressWrongPrefixError(InvalidMetaAddressError):
    def __init__(self, prefix: str):
        super().__init__(
            ErrorCode.META_ADDRESS_WRONG_PREFIX,
            f"Stealth meta-address must start with {prefix!r}",
            {"expected_prefix": prefix}
        )


# ==============================================================================
# Public Key Errors (2xxx)
# ==============================================================================

class InvalidPublicKeyError(StealthError):
    """Public key bytes that do not describe a usable curve point."""


class PublicKeyWrongLengthError(InvalidPublicKeyError):
    def __init__(self, length: int, expected: int):
        super().__init__(
            ErrorCode.PUBLIC_KEY_WRONG_LENGTH,
            f"Public key has wrong length: {length} != {expected}",
            {"length": length, "expected": expected}
        )


class PublicKeyNotOnCurveError(InvalidPublicKeyError):
    def __init__(self, reason: str = ""):
        msg = "Public key is not a valid curve point"
        if reason:
            msg += f": {reason}"
        super().__init__(ErrorCode.PUBLIC_KEY_NOT_ON_CURVE, msg)


class PublicKeyInvalidHexError(InvalidPublicKeyError):
    def __init__(self, value: str):
        super().__init__(
            ErrorCode.PUBLIC_KEY_INVALID_HEX,
            "Public key is not valid hex",
            {"length": len(value)}
        )


# ==============================================================================
# Private Key Errors (3xxx)
# ==============================================================================

class InvalidPrivateKeyError(StealthError):
    """Private key bytes outside the scalar field."""


class PrivateKeyWrongLengthError(InvalidPrivateKeyError):
    def __init__(self, length: int, expected: int):
        super().__init__(
            ErrorCode.PRIVATE_KEY_WRONG_LENGTH,
            f"Private key has wrong length: {length} != {expected}",
            {"length": length, "expected": expected}
        )


class PrivateKeyOutOfRangeError(InvalidPrivateKeyError):
    # Never put the scalar itself in details.
    def __init__(self, reason: str = "must be in [1, n-1]"):
        super().__init__(
            ErrorCode.PRIVATE_KEY_OUT_OF_RANGE,
            f"Private key out of range: {reason}"
        )


class PrivateKeyInvalidHexError(InvalidPrivateKeyError):
    # Never put the input itself in details.
    def __init__(self):
        super().__init__(
            ErrorCode.PRIVATE_KEY_INVALID_HEX,
            "Private key is not valid hex"
        )


# ==============================================================================
# Announcement Data Errors (4xxx)
# ==============================================================================

class AddressWrongLengthError(StealthError):
    def __init__(self, length: int, expected: int):
        super().__init__(
            ErrorCode.ADDRESS_WRONG_LENGTH,
            f"Address has wrong length: {length} != {expected}",
            {"length": length, "expected": expected}
        )


class AddressInvalidHexError(StealthError):
    def __init__(self, value: str):
        super().__init__(
            ErrorCode.ADDRESS_INVALID_HEX,
            f"Address is not valid hex: {value!r}",
            {"value": value}
        )


class InvalidViewTagError(StealthError):
    def __init__(self, value: Any):
        super().__init__(
            ErrorCode.INVALID_VIEW_TAG,
            f"View tag must be an integer in [0, 255], got {value!r}",
            {"value": repr(value)}
        )


# ==============================================================================
# Entropy Errors (5xxx)
# ==============================================================================

class EntropyError(StealthError):
    def __init__(self, reason: str):
        super().__init__(
            ErrorCode.ENTROPY_UNAVAILABLE,
            f"Entropy source failed: {reason}"
        )


# ==============================================================================
# Scheme Errors (6xxx)
# ==============================================================================

class UnsupportedSchemeError(StealthError):
    def __init__(self, scheme_id: int):
        super().__init__(
            ErrorCode.UNSUPPORTED_SCHEME,
            f"Unsupported stealth address scheme: {scheme_id:#04x}",
            {"scheme_id": scheme_id}
        )
