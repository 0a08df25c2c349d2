#!/usr/bin/env python3
"""
Generation Scheme
=================
Defines how passphrases are generated, and how much entropy they carry.

A scheme is composed of four stage kinds, run in this order:

1. A word set provider sources the random words for one passphrase
2. Word stylers modify the words, in registration order
3. A phrase builder combines the styled words into a phrase
4. Phrase stylers modify the full phrase, in registration order

A scheme cannot be modified after creation, so generate() and entropy()
always describe the same configuration.

Usage:
    scheme = (Scheme.build()
              .word_set_provider(FixedWordSetProvider(source.sampler(), 5))
              .add_word_styler(WordCapitalizer(first=Probability.half()))
              .phrase_builder(BasicPhraseBuilder('-'))
              .build())
    print(scheme.generate(), scheme.entropy())
"""

import logging
from typing import Iterable, Iterator, List

from .components.base import PhraseBuilder, PhraseStyler, WordSetProvider, WordStyler
from .entropy import Entropy
from .errors import IncompleteScheme

logger = logging.getLogger(__name__)


def _check_stages(stages, kind, label: str) -> tuple:
    stages = tuple(stages or ())
    for stage in stages:
        if not isinstance(stage, kind):
            raise TypeError(f"{label} must be {kind.__name__} instances, got {type(stage).__name__}")
    return stages


class Scheme:
    """
    A passphrase generation scheme.

    Iterating a scheme yields an infinite stream of passphrases. The returned
    strings are secrets: the scheme never stores or logs them.
    """

    def __init__(self,
                 word_set_provider: WordSetProvider,
                 word_stylers: Iterable[WordStyler] = (),
                 phrase_builder: PhraseBuilder = None,
                 phrase_stylers: Iterable[PhraseStyler] = ()):
        if word_set_provider is None:
            raise IncompleteScheme("scheme has no word set provider")
        if phrase_builder is None:
            raise IncompleteScheme("scheme has no phrase builder")
        if not isinstance(word_set_provider, WordSetProvider):
            raise TypeError(f"word set provider must be a WordSetProvider, got {type(word_set_provider).__name__}")
        if not isinstance(phrase_builder, PhraseBuilder):
            raise TypeError(f"phrase builder must be a PhraseBuilder, got {type(phrase_builder).__name__}")
        if word_set_provider.word_count < 1:
            raise IncompleteScheme(f"word set provider produces {word_set_provider.word_count} words")

        self._word_set_provider = word_set_provider
        self._word_stylers = _check_stages(word_stylers, WordStyler, "word stylers")
        self._phrase_builder = phrase_builder
        self._phrase_stylers = _check_stages(phrase_stylers, PhraseStyler, "phrase stylers")

        logger.debug(
            f"Scheme assembled: {word_set_provider!r}, "
            f"{len(self._word_stylers)} word stylers, {phrase_builder!r}, "
            f"{len(self._phrase_stylers)} phrase stylers"
        )

    @classmethod
    def build(cls) -> 'SchemeBuilder':
        """Start building a scheme with the builder pattern."""
        return SchemeBuilder()

    @classmethod
    def from_config(cls, config) -> 'Scheme':
        """Build a scheme from any object with a ``to_scheme()`` method."""
        return config.to_scheme()

    @property
    def word_count(self) -> int:
        return self._word_set_provider.word_count

    @property
    def word_set_provider(self) -> WordSetProvider:
        return self._word_set_provider

    @property
    def word_stylers(self) -> tuple:
        return self._word_stylers

    @property
    def phrase_builder(self) -> PhraseBuilder:
        return self._phrase_builder

    @property
    def phrase_stylers(self) -> tuple:
        return self._phrase_stylers

    def generate(self) -> str:
        """Generate a single passphrase."""
        words = self._word_set_provider.words()

        for styler in self._word_stylers:
            words = styler.style_words(words)

        phrase = self._phrase_builder.build_phrase(words)

        for styler in self._phrase_stylers:
            phrase = styler.style_phrase(phrase)

        return phrase

    def entropy(self) -> Entropy:
        """
        Entropy of passphrases generated by this scheme.

        Each stage reports its own contribution; word stylers are told the
        word count so position dependent stylers can report correctly.
        """
        word_count = self.word_count
        return (
            self._word_set_provider.entropy()
            + sum((s.entropy(word_count) for s in self._word_stylers), Entropy.zero())
            + self._phrase_builder.entropy()
            + sum((s.entropy() for s in self._phrase_stylers), Entropy.zero())
        )

    def __iter__(self) -> Iterator[str]:
        while True:
            yield self.generate()

    def __repr__(self):
        return (
            f"Scheme(words={self.word_count}, word_stylers={list(self._word_stylers)!r}, "
            f"phrase_builder={self._phrase_builder!r}, phrase_stylers={list(self._phrase_stylers)!r})"
        )


class SchemeBuilder:
    """Fluent builder for a Scheme. ``build()`` validates the stages."""

    def __init__(self):
        self._word_set_provider = None
        self._word_stylers: List[WordStyler] = []
        self._phrase_builder = None
        self._phrase_stylers: List[PhraseStyler] = []

    def word_set_provider(self, provider: WordSetProvider) -> 'SchemeBuilder':
        self._word_set_provider = provider
        return self

    def word_stylers(self, stylers: Iterable[WordStyler]) -> 'SchemeBuilder':
        self._word_stylers = list(stylers)
        return self

    def add_word_styler(self, styler: WordStyler) -> 'SchemeBuilder':
        self._word_stylers.append(styler)
        return self

    def phrase_builder(self, builder: PhraseBuilder) -> 'SchemeBuilder':
        self._phrase_builder = builder
        return self

    def phrase_stylers(self, stylers: Iterable[PhraseStyler]) -> 'SchemeBuilder':
        self._phrase_stylers = list(stylers)
        return self

    def add_phrase_styler(self, styler: PhraseStyler) -> 'SchemeBuilder':
        self._phrase_stylers.append(styler)
        return self

    def build(self) -> Scheme:
        """
        Build the scheme.

        Raises:
            IncompleteScheme: If the word set provider or phrase builder is missing
        """
        return Scheme(
            self._word_set_provider,
            self._word_stylers,
            self._phrase_builder,
            self._phrase_stylers,
        )
