#!/usr/bin/env python3
"""
PhraseKit - Secure Passphrase Generator
=======================================

Generates diceware-style passphrases from a wordlist with a cryptographically
secure random source, and computes the entropy of the scheme that generated
them.

Quick Start
-----------
    from phrasekit import passphrase, BasicConfig

    # Five words with the default configuration
    print(passphrase(5))

    # Customized configuration
    config = BasicConfig(words=6, separator="-", capitalize_words=0.25)
    scheme = config.to_scheme()
    print(scheme.generate(), scheme.entropy())

Modules
-------
    phrasekit.words       - Wordlists and uniform word sampling
    phrasekit.components  - Scheme stages (providers, stylers, builders)
    phrasekit.scheme      - Passphrase generation scheme
    phrasekit.probability - Probabilities for randomized styling
    phrasekit.entropy     - Entropy values and calculations
    phrasekit.config      - Configuration building a ready scheme

CLI Usage
---------
    python -m phrasekit generate -w 6 -s - --entropy
    python -m phrasekit sample -n 8
    python -m phrasekit entropy -w 5
"""

__version__ = "0.4.0"
__author__ = "PhraseKit"

# =============================================================================
# Submodule Imports
# =============================================================================

from . import components
from . import config
from . import entropy
from . import words

from .errors import (
    PhraseKitError,
    EmptySource,
    OutOfRange,
    IncompleteScheme,
    RandomSourceFailure,
)
from .rng import SecureRandom, get_rng, seeded_source
from .entropy import (
    Entropy,
    binary_entropy,
    uniform_entropy,
    word_set_entropy,
    capitalization_entropy,
)
from .probability import Probability
from .words import WordSource, WordSampler, builtin_wordlists
from .components import (
    WordProvider,
    WordSetProvider,
    WordStyler,
    EachWordStyler,
    PhraseBuilder,
    PhraseStyler,
    FixedWordSetProvider,
    WordCapitalizer,
    FirstWordCapitalizer,
    BasicPhraseBuilder,
)
from .scheme import Scheme, SchemeBuilder
from .config import BasicConfig, get_config


# =============================================================================
# Convenience Functions
# =============================================================================

def passphrase(words: int) -> str:
    """
    Generate a passphrase with the given number of words.

    Uses the default configuration. At least 4 words are recommended.

    Raises:
        ValueError: If words is less than 1
    """
    return get_config(words=words).to_scheme().generate()


def word_sampler(rng=None) -> WordSampler:
    """Infinite iterator of random words from the default wordlist."""
    return WordSource.builtin().sampler(rng=rng)


__all__ = [
    # Errors
    'PhraseKitError',
    'EmptySource',
    'OutOfRange',
    'IncompleteScheme',
    'RandomSourceFailure',
    # Randomness
    'SecureRandom',
    'get_rng',
    'seeded_source',
    # Entropy
    'Entropy',
    'binary_entropy',
    'uniform_entropy',
    'word_set_entropy',
    'capitalization_entropy',
    'Probability',
    # Words
    'WordSource',
    'WordSampler',
    'builtin_wordlists',
    # Components
    'WordProvider',
    'WordSetProvider',
    'WordStyler',
    'EachWordStyler',
    'PhraseBuilder',
    'PhraseStyler',
    'FixedWordSetProvider',
    'WordCapitalizer',
    'FirstWordCapitalizer',
    'BasicPhraseBuilder',
    # Scheme
    'Scheme',
    'SchemeBuilder',
    'BasicConfig',
    'get_config',
    # Helpers
    'passphrase',
    'word_sampler',
]
