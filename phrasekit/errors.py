#!/usr/bin/env python3
"""
PhraseKit Errors
================
Exceptions raised by passphrase generation.

All errors derive from PhraseKitError, and from the builtin exception that
best describes them so callers may catch either.
"""


class PhraseKitError(Exception):
    """Base class for all PhraseKit errors."""
    pass


class EmptySource(PhraseKitError, ValueError):
    """A word source was constructed without any words."""
    pass


class OutOfRange(PhraseKitError, ValueError):
    """A probability was given outside of [0, 1]."""
    pass


class IncompleteScheme(PhraseKitError, ValueError):
    """A scheme is missing a required stage, or cannot produce its words."""
    pass


class RandomSourceFailure(PhraseKitError, RuntimeError):
    """The secure random source failed to produce bytes."""
    pass
