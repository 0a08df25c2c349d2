#!/usr/bin/env python3
"""
Secure Random Source
====================
Cryptographically secure randomness for passphrase generation.

Features:
- Byte source injection (os.urandom by default)
- Unbiased bounded integers through rejection sampling
- Deterministic seeded byte streams for reproducible tests

The byte source is any callable taking a byte count and returning that many
bytes. It is never replaced by a weaker source: when it fails, the draw fails.
"""

import hashlib
import logging
import os
import threading
from typing import Any, Callable, Sequence

from .errors import RandomSourceFailure

logger = logging.getLogger(__name__)

ByteSource = Callable[[int], bytes]

# Native draw width
WORD_BYTES = 8
WORD_BITS = WORD_BYTES * 8
WORD_RANGE = 1 << WORD_BITS

# Float resolution, matching random.random()
FLOAT_BITS = 53


# =============================================================================
# Secure Random Number Generator
# =============================================================================

class SecureRandom:
    """
    Random number generator backed by a secure byte source.

    All values are derived from fixed width 64-bit draws. Bounded integers use
    rejection sampling, so the result is exactly uniform for any bound.

    Example:
        >>> rng = SecureRandom()
        >>> 0 <= rng.randbelow(7776) < 7776
        True
    """

    def __init__(self, source: ByteSource = None):
        """
        Args:
            source: Callable returning n random bytes. Defaults to os.urandom.
        """
        self._source = source or os.urandom

    def _draw(self) -> int:
        """Draw one native width unsigned integer."""
        try:
            data = self._source(WORD_BYTES)
        except OSError as e:
            raise RandomSourceFailure(f"secure random source failed: {e}") from e

        if len(data) != WORD_BYTES:
            raise RandomSourceFailure(
                f"secure random source returned {len(data)} bytes, expected {WORD_BYTES}"
            )
        return int.from_bytes(data, 'big')

    def randbelow(self, n: int) -> int:
        """
        Return a uniformly random integer in [0, n).

        Draws falling in the uneven remainder of the 64-bit range are rejected
        and redrawn before reducing modulo n.
        """
        if n <= 0:
            raise ValueError(f"upper bound must be positive, got {n}")
        if n > WORD_RANGE:
            raise ValueError(f"upper bound must be at most 2**{WORD_BITS}, got {n}")

        limit = WORD_RANGE - (WORD_RANGE % n)
        value = self._draw()
        while value >= limit:
            logger.debug(f"Rejected draw above limit for bound {n}, redrawing")
            value = self._draw()
        return value % n

    def random(self) -> float:
        """Return random float in [0.0, 1.0)."""
        return (self._draw() >> (WORD_BITS - FLOAT_BITS)) / (1 << FLOAT_BITS)

    def choice(self, seq: Sequence) -> Any:
        """Return a random element from non-empty sequence."""
        if not seq:
            raise IndexError("Cannot choose from empty sequence")
        return seq[self.randbelow(len(seq))]


# =============================================================================
# Deterministic Sources
# =============================================================================

class _SeededStream:
    """SHA-256 counter mode byte stream. Not secure, only reproducible."""

    def __init__(self, seed):
        self._seed = str(seed).encode('utf-8')
        self._counter = 0
        self._buffer = b''
        self._lock = threading.Lock()

    def __call__(self, n: int) -> bytes:
        with self._lock:
            while len(self._buffer) < n:
                block = hashlib.sha256(
                    self._seed + b':' + self._counter.to_bytes(8, 'big')
                ).digest()
                self._buffer += block
                self._counter += 1
            data, self._buffer = self._buffer[:n], self._buffer[n:]
        return data


def seeded_source(seed) -> ByteSource:
    """
    Build a deterministic byte source from a seed.

    Only meant for tests and reproducible examples, never for real secrets.
    """
    return _SeededStream(seed)


# Global instance
_secure_random = SecureRandom()


def get_rng() -> SecureRandom:
    """Get the global secure random number generator."""
    return _secure_random
