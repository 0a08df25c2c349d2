#!/usr/bin/env python3
"""
Probability
===========
Chance of an optional styling decision firing.

Used by word stylers to randomize capitalization. A probability also reports
the entropy its yes/no decision adds to a passphrase.
"""

import math
from dataclasses import dataclass

from .entropy import Entropy, binary_entropy
from .errors import OutOfRange
from .rng import get_rng


@dataclass(frozen=True)
class Probability:
    """
    An immutable probability in [0.0, 1.0].

    0.0 (never) and 1.0 (always) are valid values. Neither consumes any
    randomness when asked whether it fires.

    Example:
        >>> Probability.always().fires()
        True
        >>> Probability.from_ratio(0.25).entropy()
        Entropy(bits=0.8112781244591328)
    """
    value: float

    def __post_init__(self):
        value = self.value
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise OutOfRange(f"probability must be a number, got {value!r}")
        if math.isnan(value) or value < 0.0 or value > 1.0:
            raise OutOfRange(f"probability must be in [0, 1], got {value}")
        object.__setattr__(self, 'value', float(value))

    @classmethod
    def from_ratio(cls, ratio: float) -> 'Probability':
        """Construct from a ratio in [0, 1]."""
        return cls(ratio)

    @classmethod
    def from_percentage(cls, percentage: float) -> 'Probability':
        """Construct from a percentage in [0, 100]."""
        if math.isnan(percentage) or percentage < 0.0 or percentage > 100.0:
            raise OutOfRange(f"percentage must be in [0, 100], got {percentage}")
        return cls(percentage / 100.0)

    @classmethod
    def from_bool(cls, flag: bool) -> 'Probability':
        return cls.always() if flag else cls.never()

    @classmethod
    def never(cls) -> 'Probability':
        return cls(0.0)

    @classmethod
    def always(cls) -> 'Probability':
        return cls(1.0)

    @classmethod
    def half(cls) -> 'Probability':
        return cls(0.5)

    @property
    def is_never(self) -> bool:
        return self.value == 0.0

    @property
    def is_always(self) -> bool:
        return self.value == 1.0

    @property
    def percentage(self) -> float:
        return self.value * 100.0

    def fires(self, rng=None) -> bool:
        """
        Decide whether this event happens on one invocation.

        Args:
            rng: Random source with a random() method. Defaults to the
                global secure generator.
        """
        if self.is_never:
            return False
        if self.is_always:
            return True
        rng = rng or get_rng()
        return rng.random() < self.value

    def entropy(self) -> Entropy:
        """Bits added by this yes/no decision, H(p)."""
        return Entropy(binary_entropy(self.value))

    def __str__(self):
        return f"{self.percentage:g}%"
