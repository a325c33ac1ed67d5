"""
ERC-5564 Shared Derivation Steps

The pieces every role computes the same way:

    S  = ephemeral_priv * view_pub  ==  viewing_priv * ephemeral_pub
    s  = Keccak256(compress(S))
    view_tag = s[0]
    P_stealth = spend_pub + G * (s mod n)
    address   = Keccak256(compress(P_stealth))[12:32]
"""

from __future__ import annotations

from eip5564.core.types import EthereumAddress, PrivateKey, PublicKey
from eip5564.crypto.curve import EllipticCurveOps
from eip5564.crypto.hash import keccak256


def shared_secret(
    curve: EllipticCurveOps,
    public_key: PublicKey,
    private_key: PrivateKey,
) -> bytes:
    """
    Hashed Diffie-Hellman secret between a public point and a private scalar.

    Sender calls this with (view_pub, ephemeral_priv), recipient with
    (ephemeral_pub, viewing_priv); both get the same 32 bytes.
    """
    shared_point = curve.multiply(public_key.data, private_key.data)
    return keccak256(shared_point)


def view_tag_of(secret: bytes) -> int:
    return secret[0]


def stealth_public_key(
    curve: EllipticCurveOps,
    spending_public_key: PublicKey,
    secret: bytes,
) -> PublicKey:
    """spend_pub + G * (secret mod n)."""
    tweak = curve.reduce_scalar(secret)
    return PublicKey(curve.add_base_multiple(spending_public_key.data, tweak))


def derive_address(
    curve: EllipticCurveOps,
    spending_public_key: PublicKey,
    secret: bytes,
) -> EthereumAddress:
    return stealth_public_key(curve, spending_public_key, secret).to_address()


def public_key_of(curve: EllipticCurveOps, private_key: PrivateKey) -> PublicKey:
    return PublicKey(curve.base_multiply(private_key.data))
