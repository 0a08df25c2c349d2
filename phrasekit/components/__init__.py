#!/usr/bin/env python3
"""
Scheme Components
=================
Stages used by a Scheme to generate passphrases:

- base: stage interfaces (WordSetProvider, WordStyler, PhraseBuilder, PhraseStyler)
- word: FixedWordSetProvider, WordCapitalizer, FirstWordCapitalizer
- phrase: BasicPhraseBuilder

Implement the interfaces from ``base`` to add custom stages.
"""

from .base import (
    HasEntropy,
    WordProvider,
    WordSetProvider,
    WordStyler,
    EachWordStyler,
    PhraseBuilder,
    PhraseStyler,
)
from .word import (
    FixedWordSetProvider,
    WordCapitalizer,
    FirstWordCapitalizer,
    uncased_words,
)
from .phrase import BasicPhraseBuilder

__all__ = [
    # Interfaces
    'HasEntropy',
    'WordProvider',
    'WordSetProvider',
    'WordStyler',
    'EachWordStyler',
    'PhraseBuilder',
    'PhraseStyler',
    # Word components
    'FixedWordSetProvider',
    'WordCapitalizer',
    'FirstWordCapitalizer',
    'uncased_words',
    # Phrase components
    'BasicPhraseBuilder',
]
