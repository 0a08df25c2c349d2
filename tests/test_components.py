"""
Tests for Scheme Components
===========================
Tests for word set providers, word stylers and phrase builders
in phrasekit/components.
"""

import math
import pytest
import sys
from pathlib import Path

# Ensure repo root is on path
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from phrasekit.components import (
    BasicPhraseBuilder,
    EachWordStyler,
    FirstWordCapitalizer,
    FixedWordSetProvider,
    PhraseBuilder,
    WordCapitalizer,
    WordStyler,
    uncased_words,
)
from phrasekit.entropy import Entropy
from phrasekit.errors import IncompleteScheme
from phrasekit.probability import Probability
from phrasekit.rng import SecureRandom, seeded_source
from phrasekit.words import WordSource

FRUITS = ["apple", "banana", "cherry", "date"]


@pytest.fixture
def rng():
    return SecureRandom(seeded_source("components"))


@pytest.fixture
def sampler(rng):
    return WordSource.from_words(FRUITS).sampler(rng=rng)


class TestFixedWordSetProvider:
    """Tests for fixed size word sets."""

    def test_word_count(self, sampler):
        provider = FixedWordSetProvider(sampler, 5)
        words = provider.words()
        assert provider.word_count == 5
        assert len(words) == 5
        assert all(w in FRUITS for w in words)

    def test_fresh_sets(self, sampler):
        """Each call draws new words."""
        provider = FixedWordSetProvider(sampler, 8)
        sets = {tuple(provider.words()) for _ in range(10)}
        assert len(sets) > 1

    def test_zero_words(self, sampler):
        """A provider that cannot produce a word is incomplete."""
        with pytest.raises(IncompleteScheme):
            FixedWordSetProvider(sampler, 0)

    def test_non_integer_words(self, sampler):
        with pytest.raises(IncompleteScheme):
            FixedWordSetProvider(sampler, 2.5)

    def test_not_a_provider(self):
        with pytest.raises(IncompleteScheme):
            FixedWordSetProvider(FRUITS, 3)

    def test_entropy(self, sampler):
        """n uniform words from s choices is n * log2(s)."""
        assert FixedWordSetProvider(sampler, 3).entropy().bits == 6.0
        assert FixedWordSetProvider(sampler, 7).entropy().bits == pytest.approx(7 * math.log2(4))


class TestWordCapitalizer:
    """Tests for randomized capitalization."""

    def test_never(self, rng):
        styler = WordCapitalizer(Probability.never(), Probability.never(), rng=rng)
        assert styler.style_words(["apple", "banana"]) == ["apple", "banana"]
        assert styler.entropy(2).bits == 0.0

    def test_first_always(self, rng):
        styler = WordCapitalizer(first=Probability.always(), rng=rng)
        assert styler.style_word("apple") == "Apple"
        assert styler.entropy(5).bits == 0.0

    def test_whole_always(self, rng):
        styler = WordCapitalizer(whole=Probability.always(), rng=rng)
        assert styler.style_word("apple") == "APPLE"
        assert styler.entropy(5).bits == 0.0

    def test_whole_wins_over_first(self, rng):
        styler = WordCapitalizer(Probability.always(), Probability.always(), rng=rng)
        assert styler.style_word("apple") == "APPLE"

    def test_empty_word(self, rng):
        styler = WordCapitalizer(Probability.always(), Probability.always(), rng=rng)
        assert styler.style_word("") == ""

    def test_per_word_entropy(self, rng):
        """Half chance to uppercase adds one bit per word."""
        styler = WordCapitalizer(whole=Probability.half(), rng=rng)
        assert styler.word_entropy().bits == 1.0
        assert styler.entropy(8).bits == 8.0

    def test_chained_entropy(self, rng):
        styler = WordCapitalizer(Probability.half(), Probability.half(), rng=rng)
        assert styler.word_entropy().bits == pytest.approx(1.5)

    def test_all_styles_occur(self, rng):
        """Half/half styling produces lower, title and upper words."""
        styler = WordCapitalizer(Probability.half(), Probability.half(), rng=rng)
        styled = set(styler.style_words(["apple"] * 200))
        assert styled == {"apple", "Apple", "APPLE"}

    def test_styles_each_word_independently(self, rng):
        styler = WordCapitalizer(whole=Probability.half(), rng=rng)
        styled = styler.style_words(["apple"] * 100)
        assert 20 < styled.count("APPLE") < 80


class TestUncasedWords:
    """Tests for spotting words capitalization cannot fully style."""

    def test_lowercase_words_pass(self):
        assert uncased_words(["apple", "pear", "ox"]) == []

    def test_flags_problem_words(self):
        words = ["a", "Apple", "HTTP", "1234", "pear"]
        assert uncased_words(words) == ["a", "Apple", "HTTP", "1234"]


class TestFirstWordCapitalizer:
    """Tests for the position dependent capitalizer."""

    def test_only_first_word(self, rng):
        styler = FirstWordCapitalizer(Probability.always(), rng=rng)
        assert styler.style_words(["apple", "banana"]) == ["Apple", "banana"]

    def test_entropy_once(self, rng):
        """The decision is made once per phrase, not once per word."""
        styler = FirstWordCapitalizer(Probability.half(), rng=rng)
        assert styler.entropy(1).bits == 1.0
        assert styler.entropy(8).bits == 1.0
        assert styler.entropy(0).bits == 0.0

    def test_does_not_mutate_input(self, rng):
        words = ["apple", "banana"]
        FirstWordCapitalizer(Probability.always(), rng=rng).style_words(words)
        assert words == ["apple", "banana"]

    def test_empty(self, rng):
        assert FirstWordCapitalizer(rng=rng).style_words([]) == []


class TestBasicPhraseBuilder:
    """Tests for separator joining."""

    def test_join(self):
        assert BasicPhraseBuilder("-").build_phrase(["a", "b", "c"]) == "a-b-c"

    def test_default_space(self):
        assert BasicPhraseBuilder().build_phrase(["a", "b"]) == "a b"

    def test_empty_separator(self):
        assert BasicPhraseBuilder("").build_phrase(["a", "b"]) == "ab"

    def test_no_entropy(self):
        assert BasicPhraseBuilder("-").entropy() == Entropy.zero()

    def test_separator_type(self):
        with pytest.raises(TypeError):
            BasicPhraseBuilder(1)


class TestInterfaces:
    """Tests for the stage interfaces."""

    def test_abstract(self):
        with pytest.raises(TypeError):
            WordStyler()
        with pytest.raises(TypeError):
            PhraseBuilder()

    def test_custom_each_word_styler(self):
        """Subclasses only define the single word transform."""

        class Reverser(EachWordStyler):
            def style_word(self, word):
                return word[::-1]

            def word_entropy(self):
                return Entropy.zero()

        styler = Reverser()
        assert styler.style_words(["abc", "de"]) == ["cba", "ed"]
        assert styler.entropy(4).bits == 0.0
