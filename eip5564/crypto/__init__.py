"""
ERC-5564 Cryptographic Collaborators
"""

from eip5564.crypto.hash import keccak256
from eip5564.crypto.curve import EllipticCurveOps, Secp256k1Ops, get_curve
from eip5564.crypto.entropy import (
    RandomSource,
    SystemRandomSource,
    DeterministicRandomSource,
    default_random_source,
)

__all__ = [
    # Hash functions
    "keccak256",
    # Curve operations
    "EllipticCurveOps",
    "Secp256k1Ops",
    "get_curve",
    # Entropy
    "RandomSource",
    "SystemRandomSource",
    "DeterministicRandomSource",
    "default_random_source",
]
