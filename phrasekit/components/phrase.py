#!/usr/bin/env python3
"""
Phrase Components
=================
Passphrase builders and stylers.
"""

from typing import List

from ..entropy import Entropy
from .base import PhraseBuilder


class BasicPhraseBuilder(PhraseBuilder):
    """Joins passphrase words with a fixed separator. Adds no entropy."""

    def __init__(self, separator: str = " "):
        if not isinstance(separator, str):
            raise TypeError(f"separator must be a string, got {type(separator).__name__}")
        self.separator = separator

    def build_phrase(self, words: List[str]) -> str:
        return self.separator.join(words)

    def entropy(self) -> Entropy:
        return Entropy.zero()

    def __repr__(self):
        return f"BasicPhraseBuilder(separator={self.separator!r})"
