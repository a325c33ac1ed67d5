"""
ERC-5564 Entropy Sources

The generator never reaches for ambient randomness: a RandomSource is passed
in explicitly. Production code uses SystemRandomSource (the OS CSPRNG via
`secrets`); tests can substitute DeterministicRandomSource for reproducible
runs.
"""

from __future__ import annotations
import hashlib
import secrets
import threading
from abc import ABC, abstractmethod


class RandomSource(ABC):
    """Capability that yields uniformly random bytes."""

    @abstractmethod
    def read(self, size: int) -> bytes:
        """Return exactly `size` random bytes or raise."""


class SystemRandomSource(RandomSource):
    """OS CSPRNG. Thread-safe; failures propagate, there is no fallback."""

    def read(self, size: int) -> bytes:
        return secrets.token_bytes(size)


class DeterministicRandomSource(RandomSource):
    """
    Reproducible byte stream for tests.

    Output block i is SHAKE256(seed || i), so two sources built from the same
    seed yield the same sequence. NOT suitable for real keys.
    """

    def __init__(self, seed: bytes):
        self._seed = bytes(seed)
        self._counter = 0
        self._buffer = b""
        self._lock = threading.Lock()

    def read(self, size: int) -> bytes:
        with self._lock:
            while len(self._buffer) < size:
                block = hashlib.shake_256(
                    self._seed + self._counter.to_bytes(8, "big")
                ).digest(64)
                self._counter += 1
                self._buffer += block
            out, self._buffer = self._buffer[:size], self._buffer[size:]
            return out


_DEFAULT_SOURCE = SystemRandomSource()


def default_random_source() -> RandomSource:
    """Shared system CSPRNG source."""
    return _DEFAULT_SOURCE
