"""
ERC-5564 Hash Functions

Keccak-256 as used by Ethereum (original Keccak padding, NOT NIST SHA3-256).
"""

from __future__ import annotations
from typing import Union

from Crypto.Hash import keccak

from eip5564.constants import KECCAK256_OUTPUT_SIZE


def keccak256(data: Union[bytes, bytearray, memoryview]) -> bytes:
    """
    Keccak-256 hash function.

    Args:
        data: Input data to hash

    Returns:
        bytes: 32-byte digest
    """
    hasher = keccak.new(digest_bits=KECCAK256_OUTPUT_SIZE * 8)
    hasher.update(bytes(data))
    return hasher.digest()
