"""
ERC-5564 Elliptic Curve Operations

Narrow interface over the curve arithmetic the protocol needs, so that
additional scheme ids can plug in a different curve without touching the
protocol logic. Only scheme 0x00 (secp256k1 via libsecp256k1) is registered.

All points cross this interface as SEC1 compressed bytes and all scalars as
32-byte big-endian strings.
"""

from __future__ import annotations
import logging
from abc import ABC, abstractmethod
from typing import Dict, Type

import coincurve

from eip5564.constants import (
    PRIVATE_KEY_SIZE,
    PUBLIC_KEY_SIZE,
    SCHEME_ID_SECP256K1,
    SECP256K1_ORDER,
    WIDE_SCALAR_SIZE,
)
from eip5564.errors import (
    PrivateKeyOutOfRangeError,
    PrivateKeyWrongLengthError,
    PublicKeyNotOnCurveError,
    PublicKeyWrongLengthError,
    UnsupportedSchemeError,
)

logger = logging.getLogger(__name__)


class EllipticCurveOps(ABC):
    """Curve collaborator used by generator, scanner and recoverer."""

    order: int
    scalar_size: int
    point_size: int

    @abstractmethod
    def decode_point(self, point: bytes) -> bytes:
        """Validate an encoded point and return its compressed form."""

    @abstractmethod
    def base_multiply(self, scalar: bytes) -> bytes:
        """G * scalar."""

    @abstractmethod
    def multiply(self, point: bytes, scalar: bytes) -> bytes:
        """point * scalar."""

    @abstractmethod
    def add(self, p: bytes, q: bytes) -> bytes:
        """p + q."""

    @abstractmethod
    def add_base_multiple(self, point: bytes, scalar: bytes) -> bytes:
        """point + G * scalar. The scalar may be zero."""

    @abstractmethod
    def scalar_add(self, a: bytes, b: bytes) -> bytes:
        """(a + b) mod order. Fails if the sum is zero."""

    def is_valid_scalar(self, scalar: bytes) -> bool:
        """Check that scalar is a usable private key in [1, order-1]."""
        if len(scalar) != self.scalar_size:
            return False
        return 0 < int.from_bytes(scalar, "big") < self.order

    def reduce_scalar(self, data: bytes) -> bytes:
        """
        Wide reduction of an arbitrary byte string to a scalar.

        The input is left-padded into a WIDE_SCALAR_SIZE buffer and the
        resulting integer reduced mod order. Values >= order wrap instead of
        being rejected.

        Args:
            data: Up to WIDE_SCALAR_SIZE bytes, big-endian

        Returns:
            Scalar in [0, order-1] as scalar_size bytes
        """
        if len(data) > WIDE_SCALAR_SIZE:
            raise ValueError(
                f"Cannot reduce {len(data)} bytes, max is {WIDE_SCALAR_SIZE}"
            )
        padded = bytes(WIDE_SCALAR_SIZE - len(data)) + bytes(data)
        value = int.from_bytes(padded, "big") % self.order
        return value.to_bytes(self.scalar_size, "big")

    def _check_scalar(self, scalar: bytes) -> bytes:
        if len(scalar) != self.scalar_size:
            raise PrivateKeyWrongLengthError(len(scalar), self.scalar_size)
        if not 0 < int.from_bytes(scalar, "big") < self.order:
            raise PrivateKeyOutOfRangeError()
        return bytes(scalar)


class Secp256k1Ops(EllipticCurveOps):
    """
    secp256k1 arithmetic backed by libsecp256k1 (coincurve).

    coincurve raises ValueError for every rejected input; those are mapped to
    the typed errors in eip5564.errors here so callers never see a bare
    ValueError from the curve layer.
    """

    order = SECP256K1_ORDER
    scalar_size = PRIVATE_KEY_SIZE
    point_size = PUBLIC_KEY_SIZE

    def _load(self, point: bytes) -> coincurve.PublicKey:
        if len(point) != self.point_size:
            raise PublicKeyWrongLengthError(len(point), self.point_size)
        try:
            return coincurve.PublicKey(bytes(point))
        except ValueError as e:
            raise PublicKeyNotOnCurveError(str(e))

    def decode_point(self, point: bytes) -> bytes:
        return self._load(point).format(compressed=True)

    def base_multiply(self, scalar: bytes) -> bytes:
        scalar = self._check_scalar(scalar)
        return coincurve.PublicKey.from_secret(scalar).format(compressed=True)

    def multiply(self, point: bytes, scalar: bytes) -> bytes:
        scalar = self._check_scalar(scalar)
        try:
            result = self._load(point).multiply(scalar)
        except ValueError as e:
            raise PublicKeyNotOnCurveError(str(e))
        return result.format(compressed=True)

    def add(self, p: bytes, q: bytes) -> bytes:
        try:
            result = coincurve.PublicKey.combine_keys([self._load(p), self._load(q)])
        except ValueError as e:
            # p == -q
            raise PublicKeyNotOnCurveError(f"sum is the point at infinity: {e}")
        return result.format(compressed=True)

    def add_base_multiple(self, point: bytes, scalar: bytes) -> bytes:
        if len(scalar) != self.scalar_size:
            raise PrivateKeyWrongLengthError(len(scalar), self.scalar_size)
        if int.from_bytes(scalar, "big") >= self.order:
            raise PrivateKeyOutOfRangeError("tweak must be reduced mod n")
        if not any(scalar):
            return self.decode_point(point)
        try:
            result = self._load(point).add(bytes(scalar))
        except ValueError as e:
            raise PublicKeyNotOnCurveError(f"sum is the point at infinity: {e}")
        return result.format(compressed=True)

    def scalar_add(self, a: bytes, b: bytes) -> bytes:
        a = self._check_scalar(a)
        if len(b) != self.scalar_size:
            raise PrivateKeyWrongLengthError(len(b), self.scalar_size)
        if int.from_bytes(b, "big") >= self.order:
            raise PrivateKeyOutOfRangeError("tweak must be reduced mod n")
        try:
            return coincurve.PrivateKey(a).add(bytes(b)).secret
        except ValueError:
            raise PrivateKeyOutOfRangeError("sum is zero mod n")


# ==============================================================================
# Scheme registry
# ==============================================================================

_SCHEMES: Dict[int, Type[EllipticCurveOps]] = {
    SCHEME_ID_SECP256K1: Secp256k1Ops,
}

_INSTANCES: Dict[int, EllipticCurveOps] = {}


def get_curve(scheme_id: int = SCHEME_ID_SECP256K1) -> EllipticCurveOps:
    """
    Get the curve operations for an ERC-5564 scheme id.

    Args:
        scheme_id: Scheme identifier (only 0x00 is defined)

    Returns:
        Shared, stateless EllipticCurveOps instance
    """
    ops = _INSTANCES.get(scheme_id)
    if ops is not None:
        return ops

    cls = _SCHEMES.get(scheme_id)
    if cls is None:
        raise UnsupportedSchemeError(scheme_id)

    ops = cls()
    _INSTANCES[scheme_id] = ops
    logger.debug(f"Curve operations initialized for scheme {scheme_id:#04x}")
    return ops
