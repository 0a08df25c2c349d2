#!/usr/bin/env python3
"""
Scheme Component Interfaces
===========================
Abstract stage kinds a Scheme is composed of:

- WordSetProvider: sources the random words for one passphrase
- WordStyler: transforms passphrase words (capitalization, ...)
- PhraseBuilder: combines the styled words into one phrase
- PhraseStyler: transforms the whole phrase

Every stage reports the entropy it contributes. Stages that consult
randomness must report it exactly, stages that don't report zero. The scheme
only sums these reports, so a new stage cannot drift out of sync with the
scheme's entropy without its own report being wrong.
"""

from abc import ABC, abstractmethod
from typing import Iterator, List

from ..entropy import Entropy


class HasEntropy(ABC):
    """Something that contributes entropy to a passphrase."""

    @abstractmethod
    def entropy(self) -> Entropy:
        """Entropy contributed by this whole component."""


class WordProvider(HasEntropy):
    """
    An infinite provider of random words.

    The same word may be returned more than once. Randomization must be
    cryptographically secure. ``entropy()`` is the entropy of a single word.
    """

    @abstractmethod
    def word(self) -> str:
        """Obtain one random word."""

    def __iter__(self) -> Iterator[str]:
        while True:
            yield self.word()


class WordSetProvider(HasEntropy):
    """Provides the ordered set of random words for one passphrase."""

    @property
    @abstractmethod
    def word_count(self) -> int:
        """Number of words in each set."""

    @abstractmethod
    def words(self) -> List[str]:
        """Source a fresh set of passphrase words."""


class WordStyler(ABC):
    """
    Styles passphrase words.

    Stylers may depend on word position, so they receive the whole ordered
    word list and report their own total entropy for a given word count.
    """

    @abstractmethod
    def style_words(self, words: List[str]) -> List[str]:
        """Return the styled words, in the same order."""

    @abstractmethod
    def entropy(self, word_count: int) -> Entropy:
        """Total entropy added when styling ``word_count`` words."""


class EachWordStyler(WordStyler):
    """A styler making one independent decision for every word."""

    @abstractmethod
    def style_word(self, word: str) -> str:
        """Style a single word."""

    @abstractmethod
    def word_entropy(self) -> Entropy:
        """Entropy added to each single word."""

    def style_words(self, words: List[str]) -> List[str]:
        return [self.style_word(word) for word in words]

    def entropy(self, word_count: int) -> Entropy:
        return self.word_entropy() * word_count


class PhraseBuilder(HasEntropy):
    """Combines a list of passphrase words into one passphrase."""

    @abstractmethod
    def build_phrase(self, words: List[str]) -> str:
        """Build the passphrase from the given words."""


class PhraseStyler(HasEntropy):
    """Styles a passphrase as a whole."""

    @abstractmethod
    def style_phrase(self, phrase: str) -> str:
        """Return the styled passphrase."""
