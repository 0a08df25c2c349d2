#!/usr/bin/env python3
"""
Words
=====
Wordlists and uniform word sampling.

- WordSource: an immutable, non-empty wordlist
- WordSampler: an infinite iterator drawing uniformly random words from it
- Loaders for plain (one word per line) and diced (``11111 abacus``) files
- Built-in wordlists shipped with the package

Usage:
    from phrasekit.words import WordSource

    source = WordSource.builtin('large')
    sampler = source.sampler()
    print(next(sampler), next(sampler))
"""

import logging
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from typing import Iterable, List, Tuple

from .components.base import WordProvider
from .entropy import Entropy
from .errors import EmptySource
from .rng import get_rng

logger = logging.getLogger(__name__)

# Built-in wordlist directory
WORDLISTS_DIR = Path(__file__).parent / 'wordlists'

BUILTIN_WORDLISTS = {
    'large': 'large.txt',
    'short': 'short.txt',
}

DEFAULT_WORDLIST = 'large'


# =============================================================================
# Parsing
# =============================================================================

def parse_words(text: str) -> List[str]:
    """One word per line. Lines are trimmed, blank lines are discarded."""
    return [line.strip() for line in text.splitlines() if line.strip()]


def parse_diced_words(text: str) -> List[str]:
    """
    Parse a wordlist with dice number prefixes.

    Only the last whitespace separated token of each line is kept, so both
    ``11111 abacus`` and a bare ``abacus`` yield ``abacus``.
    """
    words = []
    for line in text.splitlines():
        parts = line.split()
        if parts:
            words.append(parts[-1])
    return words


# =============================================================================
# Word Source
# =============================================================================

@dataclass(frozen=True)
class WordSource:
    """
    An immutable, ordered wordlist with at least one word.

    Words are not deduplicated. The loader is expected to hand over unique
    words, duplicates make some words likelier and lower the real entropy.
    """
    words: Tuple[str, ...]

    def __post_init__(self):
        words = tuple(self.words)
        if not words:
            raise EmptySource("cannot construct a word source without words")
        if len(set(words)) != len(words):
            logger.warning(
                f"Word source has {len(words) - len(set(words))} duplicate words, "
                f"entropy will be overestimated"
            )
        object.__setattr__(self, 'words', words)

    @classmethod
    def from_words(cls, words: Iterable[str]) -> 'WordSource':
        return cls(tuple(words))

    @classmethod
    def load(cls, path) -> 'WordSource':
        """
        Load a wordlist file with one word per line.

        Raises:
            OSError: If the file cannot be read
            EmptySource: If the file contains no words
        """
        path = Path(path)
        words = parse_words(path.read_text(encoding='utf-8'))
        if not words:
            raise EmptySource(f"wordlist {path} does not contain any words")
        logger.debug(f"Loaded {len(words)} words from {path}")
        return cls.from_words(words)

    @classmethod
    def load_diced(cls, path) -> 'WordSource':
        """Load a wordlist file whose lines are prefixed with dice numbers."""
        path = Path(path)
        words = parse_diced_words(path.read_text(encoding='utf-8'))
        if not words:
            raise EmptySource(f"wordlist {path} does not contain any words")
        logger.debug(f"Loaded {len(words)} diced words from {path}")
        return cls.from_words(words)

    @classmethod
    def builtin(cls, name: str = DEFAULT_WORDLIST) -> 'WordSource':
        """Load one of the built-in wordlists by name."""
        return _load_builtin(name)

    def __len__(self) -> int:
        return len(self.words)

    def __getitem__(self, index: int) -> str:
        return self.get(index)

    def get(self, index: int) -> str:
        """Word at ``index``, for 0 <= index < len(self)."""
        if index < 0 or index >= len(self.words):
            raise IndexError(f"word index {index} out of range for {len(self.words)} words")
        return self.words[index]

    def sampler(self, rng=None) -> 'WordSampler':
        """Build a sampler drawing uniformly random words from this source."""
        return WordSampler(self, rng=rng)

    def entropy(self) -> Entropy:
        """Entropy of a single uniformly drawn word."""
        return Entropy.from_real(len(self.words))

    def __repr__(self):
        return f"WordSource({len(self.words)} words)"


@lru_cache(maxsize=len(BUILTIN_WORDLISTS))
def _load_builtin(name: str) -> WordSource:
    filename = BUILTIN_WORDLISTS.get(name)
    if filename is None:
        available = ', '.join(sorted(BUILTIN_WORDLISTS))
        raise ValueError(f"Unknown wordlist '{name}'. Available wordlists: {available}")
    return WordSource.load(WORDLISTS_DIR / filename)


def builtin_wordlists() -> List[str]:
    """Names of the built-in wordlists."""
    return sorted(BUILTIN_WORDLISTS)


# =============================================================================
# Word Sampler
# =============================================================================

class WordSampler(WordProvider):
    """
    An infinite iterator of uniformly sampled words.

    Draws are independent, with replacement. The sampler only holds a
    reference to its source; many samplers may share one source.

    Example:
        >>> sampler = WordSource.from_words(['apple', 'banana']).sampler()
        >>> next(sampler) in ('apple', 'banana')
        True
    """

    def __init__(self, source: WordSource, rng=None):
        """
        Args:
            source: Wordlist to sample from
            rng: Random source with a randbelow(n) method. Defaults to the
                global secure generator.
        """
        self.source = source
        self._rng = rng or get_rng()

    def word(self) -> str:
        return self.source.get(self._rng.randbelow(len(self.source)))

    def entropy(self) -> Entropy:
        return self.source.entropy()

    def __iter__(self):
        return self

    def __next__(self) -> str:
        return self.word()

    def __repr__(self):
        return f"WordSampler({self.source!r})"
