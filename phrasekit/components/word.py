#!/usr/bin/env python3
"""
Word Components
===============
Word set providers and word stylers.
"""

from typing import Iterable, List

from ..entropy import Entropy, capitalization_entropy
from ..errors import IncompleteScheme
from ..probability import Probability
from ..rng import get_rng
from .base import EachWordStyler, WordProvider, WordSetProvider, WordStyler


def capitalize_first(word: str) -> str:
    """Uppercase the first character, keep the rest."""
    return word[:1].upper() + word[1:]


def uncased_words(words: Iterable[str]) -> List[str]:
    """
    Words that cannot take all three capitalization styles.

    Single characters, words that are not fully lowercase and words without
    letters look the same in at least two styles, so capitalizing them adds
    less entropy than WordCapitalizer reports.
    """
    return [w for w in words if not (len(w) > 1 and w.islower())]


class FixedWordSetProvider(WordSetProvider):
    """
    Provides a fixed number of words per passphrase.

    It is recommended to use at least 5 words with a wordlist of at least
    7776 (6^5) words.
    """

    def __init__(self, provider: WordProvider, words: int):
        if not isinstance(provider, WordProvider):
            raise IncompleteScheme(f"expected a word provider, got {type(provider).__name__}")
        if isinstance(words, bool) or not isinstance(words, int) or words < 1:
            raise IncompleteScheme(f"a passphrase needs at least 1 word, got {words!r}")
        self.provider = provider
        self._words = words

    @property
    def word_count(self) -> int:
        return self._words

    def words(self) -> List[str]:
        return [self.provider.word() for _ in range(self._words)]

    def entropy(self) -> Entropy:
        return self.provider.entropy() * self._words

    def __repr__(self):
        return f"FixedWordSetProvider({self.provider!r}, words={self._words})"


class WordCapitalizer(EachWordStyler):
    """
    Randomly capitalizes passphrase words.

    For each word, the whole word is uppercased with probability ``whole``.
    When that does not fire, the first character is capitalized with
    probability ``first``. These are two chained decisions per word; their
    combined entropy is H(whole) + (1 - whole) * H(first).

    Words are assumed to be lowercase, as in the built-in wordlists.
    """

    def __init__(self, first: Probability = None, whole: Probability = None, rng=None):
        self.first = first or Probability.never()
        self.whole = whole or Probability.never()
        self._rng = rng or get_rng()

    def style_word(self, word: str) -> str:
        if not word:
            return word
        if self.whole.fires(self._rng):
            return word.upper()
        if self.first.fires(self._rng):
            return capitalize_first(word)
        return word

    def word_entropy(self) -> Entropy:
        return Entropy(capitalization_entropy(self.first.value, self.whole.value))

    def __repr__(self):
        return f"WordCapitalizer(first={self.first}, whole={self.whole})"


class FirstWordCapitalizer(WordStyler):
    """
    Capitalizes the first character of the first word only.

    Position dependent: one decision per passphrase, so it contributes H(p)
    regardless of the word count.
    """

    def __init__(self, probability: Probability = None, rng=None):
        self.probability = probability or Probability.always()
        self._rng = rng or get_rng()

    def style_words(self, words: List[str]) -> List[str]:
        if not words or not words[0]:
            return list(words)
        styled = list(words)
        if self.probability.fires(self._rng):
            styled[0] = capitalize_first(styled[0])
        return styled

    def entropy(self, word_count: int) -> Entropy:
        if word_count < 1:
            return Entropy.zero()
        return self.probability.entropy()

    def __repr__(self):
        return f"FirstWordCapitalizer({self.probability})"
