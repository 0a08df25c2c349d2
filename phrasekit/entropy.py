#!/usr/bin/env python3
"""
Passphrase Entropy
==================
Entropy values and the pure functions used to compute them.

Entropy is measured in bits (log2 of the number of equally likely outcomes).
Scheme components report their own contribution as an Entropy value and the
scheme sums them. Nothing in this module touches a random source.
"""

import math
from dataclasses import dataclass
from functools import total_ordering
from numbers import Real


# =============================================================================
# Entropy Value
# =============================================================================

@total_ordering
@dataclass(frozen=True)
class Entropy:
    """
    A non-negative number of entropy bits.

    Supports addition (so ``sum()`` works over components), scaling by a
    number, comparison and ``float()``.

    Example:
        >>> Entropy.from_real(7776)
        Entropy(bits=12.92481250360578)
        >>> str(Entropy.from_bits(6) + Entropy.one())
        '7.000 bits'
    """
    bits: float = 0.0

    def __post_init__(self):
        if self.bits < 0 or math.isnan(self.bits):
            raise ValueError(f"entropy cannot be negative, got {self.bits}")

    @classmethod
    def zero(cls) -> 'Entropy':
        """No entropy."""
        return cls(0.0)

    @classmethod
    def one(cls) -> 'Entropy':
        """One bit, a fair coin flip."""
        return cls(1.0)

    @classmethod
    def from_bits(cls, bits: float) -> 'Entropy':
        return cls(float(bits))

    @classmethod
    def from_real(cls, choices: float) -> 'Entropy':
        """Entropy of a uniform choice among ``choices`` outcomes."""
        return cls(uniform_entropy(choices))

    def __add__(self, other):
        if isinstance(other, Entropy):
            return Entropy(self.bits + other.bits)
        if isinstance(other, Real):
            return Entropy(self.bits + float(other))
        return NotImplemented

    __radd__ = __add__

    def __mul__(self, other):
        if isinstance(other, Real):
            return Entropy(self.bits * float(other))
        return NotImplemented

    __rmul__ = __mul__

    def __lt__(self, other):
        if isinstance(other, Entropy):
            return self.bits < other.bits
        if isinstance(other, Real):
            return self.bits < other
        return NotImplemented

    def __eq__(self, other):
        if isinstance(other, Entropy):
            return self.bits == other.bits
        if isinstance(other, Real):
            return self.bits == other
        return NotImplemented

    def __hash__(self):
        return hash(self.bits)

    def __float__(self):
        return self.bits

    def __str__(self):
        return f"{self.bits:.3f} bits"


# =============================================================================
# Entropy Calculator
# =============================================================================

def binary_entropy(p: float) -> float:
    """
    Entropy in bits of one yes/no event firing with probability ``p``.

    H(p) = -p*log2(p) - (1-p)*log2(1-p), with H(0) = H(1) = 0.
    """
    if p < 0.0 or p > 1.0:
        raise ValueError(f"probability must be in [0, 1], got {p}")
    if p == 0.0 or p == 1.0:
        return 0.0
    q = 1.0 - p
    return -p * math.log2(p) - q * math.log2(q)


def uniform_entropy(choices: float) -> float:
    """Entropy in bits of a uniform choice among ``choices`` outcomes."""
    if choices < 1:
        raise ValueError(f"need at least one choice, got {choices}")
    return math.log2(choices)


def word_set_entropy(word_count: int, source_size: int) -> float:
    """Entropy of drawing ``word_count`` words uniformly, with replacement."""
    if word_count < 0:
        raise ValueError(f"word count cannot be negative, got {word_count}")
    return word_count * uniform_entropy(source_size)


def capitalization_entropy(first: float, whole: float) -> float:
    """
    Per-word entropy of the compound capitalizer.

    The whole-word decision is made first; the first-letter decision only
    changes the word when the whole word was not uppercased. By the chain
    rule this is H(whole) + (1 - whole) * H(first).
    """
    return binary_entropy(whole) + (1.0 - whole) * binary_entropy(first)
