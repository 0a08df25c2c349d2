#!/usr/bin/env python3
"""
Configuration Management
========================
Passphrase configuration that assembles a ready-to-use Scheme.

Defaults come from the settings file (``configs/app.yaml``, or the file
named by $PHRASEKIT_CONFIG). Any field may be overridden.

Usage:
    from phrasekit.config import BasicConfig

    config = BasicConfig.default()
    config.separator = "-"
    scheme = config.to_scheme()
    print(scheme.generate())
"""

import logging
from dataclasses import dataclass, field, fields, replace
from pathlib import Path
from typing import Optional, Union

from .components import BasicPhraseBuilder, FixedWordSetProvider, WordCapitalizer, uncased_words
from .probability import Probability
from .scheme import Scheme
from .settings import get_setting, resolve_path
from .words import DEFAULT_WORDLIST, WordSource

logger = logging.getLogger(__name__)

DEFAULT_WORDS = 5
DEFAULT_SEPARATOR = " "


def _as_probability(value: Union[Probability, float, bool]) -> Probability:
    if isinstance(value, Probability):
        return value
    if isinstance(value, bool):
        return Probability.from_bool(value)
    return Probability.from_ratio(value)


# =============================================================================
# Basic Configuration
# =============================================================================

@dataclass
class BasicConfig:
    """
    Basic passphrase configuration.

    Attributes:
        words: Number of words per passphrase (at least 1)
        separator: Separator placed between words
        capitalize_first: Chance to capitalize the first character of each word
        capitalize_words: Chance to uppercase each whole word
        wordlist: Custom wordlist file, the built-in list is used when unset
        diced: Whether wordlist lines are prefixed with dice numbers
        builtin: Name of the built-in wordlist to fall back to
    """
    words: int = DEFAULT_WORDS
    separator: str = DEFAULT_SEPARATOR
    capitalize_first: Probability = field(default_factory=Probability.half)
    capitalize_words: Probability = field(default_factory=Probability.never)
    wordlist: Optional[Path] = None
    diced: bool = False
    builtin: str = DEFAULT_WORDLIST

    def __post_init__(self):
        if isinstance(self.words, bool) or not isinstance(self.words, int) or self.words < 1:
            raise ValueError(f"words must be an integer of at least 1, got {self.words!r}")
        if not isinstance(self.separator, str):
            raise ValueError(f"separator must be a string, got {self.separator!r}")
        self.capitalize_first = _as_probability(self.capitalize_first)
        self.capitalize_words = _as_probability(self.capitalize_words)
        if self.wordlist is not None:
            self.wordlist = resolve_path(self.wordlist)

    @classmethod
    def default(cls) -> 'BasicConfig':
        """Configuration built from the settings file."""
        return get_config()

    def with_options(self, **overrides) -> 'BasicConfig':
        """Copy of this configuration with some fields replaced. None values are ignored."""
        known = {f.name for f in fields(self)}
        unknown = set(overrides) - known
        if unknown:
            raise ValueError(f"Unknown config options: {', '.join(sorted(unknown))}")
        return replace(self, **{k: v for k, v in overrides.items() if v is not None})

    def load_word_source(self) -> WordSource:
        """Load the configured wordlist."""
        if self.wordlist is None:
            return WordSource.builtin(self.builtin)
        if self.diced:
            return WordSource.load_diced(self.wordlist)
        return WordSource.load(self.wordlist)

    def _check_capitalization(self, source: WordSource):
        if self.capitalize_first.is_never and self.capitalize_words.is_never:
            return
        uncased = uncased_words(source.words)
        if uncased:
            examples = ', '.join(repr(w) for w in uncased[:3])
            logger.warning(
                f"Wordlist has {len(uncased)} words that are not lowercase or are a single "
                f"character ({examples}); capitalization entropy will be overestimated"
            )

    def to_scheme(self, rng=None, source: WordSource = None) -> Scheme:
        """
        Assemble a scheme from this configuration.

        Args:
            rng: Random source for sampling and styling. Defaults to the
                global secure generator.
            source: Already loaded wordlist, skips load_word_source()
        """
        source = source or self.load_word_source()
        self._check_capitalization(source)
        return (
            Scheme.build()
            .word_set_provider(FixedWordSetProvider(source.sampler(rng=rng), self.words))
            .add_word_styler(WordCapitalizer(
                first=self.capitalize_first,
                whole=self.capitalize_words,
                rng=rng,
            ))
            .phrase_builder(BasicPhraseBuilder(self.separator))
            .build()
        )


def get_config(**overrides) -> BasicConfig:
    """Get configuration from settings, with optional field overrides."""
    wordlist = get_setting('passphrase.wordlist')
    config = BasicConfig(
        words=get_setting('passphrase.words', DEFAULT_WORDS),
        separator=get_setting('passphrase.separator', DEFAULT_SEPARATOR),
        capitalize_first=get_setting('passphrase.capitalize_first', 0.5),
        capitalize_words=get_setting('passphrase.capitalize_words', 0.0),
        wordlist=wordlist,
        diced=bool(get_setting('passphrase.diced', False)),
        builtin=get_setting('passphrase.builtin', DEFAULT_WORDLIST),
    )
    logger.debug(f"Loaded passphrase config: words={config.words}, wordlist={config.wordlist or config.builtin}")
    if overrides:
        config = config.with_options(**overrides)
    return config
