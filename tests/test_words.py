"""
Tests for Words
===============
Tests for WordSource, WordSampler, wordlist parsing and the built-in
wordlists in phrasekit/words.py.
"""

import logging
import math
import pytest
import sys
from collections import Counter
from pathlib import Path

# Ensure repo root is on path
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from phrasekit.errors import EmptySource, RandomSourceFailure
from phrasekit.rng import SecureRandom, seeded_source
from phrasekit.words import (
    WordSampler,
    WordSource,
    builtin_wordlists,
    parse_diced_words,
    parse_words,
)

FRUITS = ["apple", "banana", "cherry", "date"]


def chi_squared(counts: Counter, categories: int, draws: int) -> float:
    expected = draws / categories
    return sum((counts.get(i, 0) - expected) ** 2 / expected for i in range(categories))


class TestWordSource:
    """Tests for the immutable wordlist."""

    def test_from_words(self):
        source = WordSource.from_words(FRUITS)
        assert len(source) == 4
        assert source.get(0) == "apple"
        assert source[3] == "date"

    def test_accepts_any_iterable(self):
        source = WordSource.from_words(w for w in FRUITS)
        assert len(source) == 4

    def test_empty_fails(self):
        """No words means no source."""
        with pytest.raises(EmptySource):
            WordSource.from_words([])

    def test_empty_is_value_error(self):
        with pytest.raises(ValueError):
            WordSource.from_words(iter(()))

    def test_index_out_of_range(self):
        source = WordSource.from_words(FRUITS)
        with pytest.raises(IndexError):
            source.get(4)
        with pytest.raises(IndexError):
            source.get(-1)

    def test_immutable(self):
        """Words are stored as a tuple and cannot be reassigned."""
        words = list(FRUITS)
        source = WordSource.from_words(words)
        words.append("elderberry")
        assert len(source) == 4
        assert isinstance(source.words, tuple)
        with pytest.raises(Exception):
            source.words = ("kiwi",)

    def test_no_deduplication(self, caplog):
        """Duplicates are kept, but a warning is logged."""
        with caplog.at_level(logging.WARNING, logger="phrasekit.words"):
            source = WordSource.from_words(["apple", "apple", "pear"])
        assert len(source) == 3
        assert "duplicate" in caplog.text

    def test_entropy(self):
        assert WordSource.from_words(FRUITS).entropy().bits == 2.0


class TestParsing:
    """Tests for wordlist text parsing."""

    def test_parse_words(self):
        text = "apple\n\n  banana  \n\t\ncherry\n"
        assert parse_words(text) == ["apple", "banana", "cherry"]

    def test_parse_diced_words(self):
        text = "11111 abacus\n\n#2 (1,1,1,1,2)    abdomen\nzebra\n"
        assert parse_diced_words(text) == ["abacus", "abdomen", "zebra"]


class TestLoading:
    """Tests for loading wordlist files."""

    def test_load(self, tmp_path):
        path = tmp_path / "words.txt"
        path.write_text("apple\nbanana\n\ncherry\n", encoding="utf-8")
        source = WordSource.load(path)
        assert source.words == ("apple", "banana", "cherry")

    def test_load_diced(self, tmp_path):
        path = tmp_path / "diced.txt"
        path.write_text("11111\tapple\n11112\tbanana\n", encoding="utf-8")
        source = WordSource.load_diced(str(path))
        assert source.words == ("apple", "banana")

    def test_load_blank_file(self, tmp_path):
        """A file without words is an empty source."""
        path = tmp_path / "blank.txt"
        path.write_text("\n   \n\n", encoding="utf-8")
        with pytest.raises(EmptySource):
            WordSource.load(path)

    def test_load_missing_file(self, tmp_path):
        """IO errors surface before any source is built."""
        with pytest.raises(OSError):
            WordSource.load(tmp_path / "missing.txt")


class TestBuiltinWordlists:
    """Tests for the wordlists shipped with the package."""

    def test_listed(self):
        assert builtin_wordlists() == ["large", "short"]

    @pytest.mark.parametrize("name,size", [
        ("large", 7776),  # 6^5
        ("short", 1296),  # 6^4
    ])
    def test_size(self, name, size):
        source = WordSource.builtin(name)
        assert len(source) == size
        assert source.entropy().bits == pytest.approx(math.log2(size))

    def test_large_is_default(self):
        """The default list carries about 12.9 bits per word."""
        assert len(WordSource.builtin()) == 7776
        assert WordSource.builtin().entropy().bits == pytest.approx(12.925, abs=1e-3)

    @pytest.mark.parametrize("name", ["large", "short"])
    def test_words_are_clean(self, name):
        """Unique, lowercase alphabetic words of at least 3 characters."""
        words = WordSource.builtin(name).words
        assert len(set(words)) == len(words)
        assert all(w.isalpha() and w.islower() and len(w) >= 3 for w in words)

    def test_cached(self):
        assert WordSource.builtin() is WordSource.builtin("large")

    def test_unknown(self):
        with pytest.raises(ValueError):
            WordSource.builtin("klingon")


class TestWordSampler:
    """Tests for uniform word sampling."""

    @pytest.fixture
    def source(self):
        return WordSource.from_words(FRUITS)

    def test_is_iterator(self, source):
        """The sampler is its own, non-restartable iterator."""
        sampler = source.sampler()
        assert iter(sampler) is sampler

    def test_words_from_source(self, source):
        sampler = WordSampler(source)
        for _ in range(100):
            assert next(sampler) in FRUITS

    def test_infinite(self, source):
        sampler = source.sampler()
        words = [w for _, w in zip(range(1000), sampler)]
        assert len(words) == 1000

    def test_seeded_reproducible(self, source):
        """Equal seeded sources give equal word sequences."""
        a = source.sampler(rng=SecureRandom(seeded_source(9)))
        b = source.sampler(rng=SecureRandom(seeded_source(9)))
        assert [next(a) for _ in range(20)] == [next(b) for _ in range(20)]

    def test_shared_source(self, source):
        """Many samplers may read the same source."""
        samplers = [source.sampler() for _ in range(3)]
        assert all(s.source is source for s in samplers)

    def test_entropy(self, source):
        assert source.sampler().entropy() == source.entropy()

    def test_failure_propagates(self, source):
        """A failing random source fails the draw."""
        def broken(n):
            raise OSError("no entropy")

        sampler = source.sampler(rng=SecureRandom(broken))
        with pytest.raises(RandomSourceFailure):
            next(sampler)

    @pytest.mark.parametrize("size,threshold", [
        (10, 40.0),   # df=9
        (7, 35.0),    # df=6, exercises the rejection bound
    ])
    def test_uniform_distribution(self, size, threshold):
        """Index frequencies match a uniform distribution (chi-squared)."""
        words = [f"word{i}" for i in range(size)]
        source = WordSource.from_words(words)
        sampler = source.sampler(rng=SecureRandom(seeded_source(f"uniform-{size}")))

        draws = 2000 * size
        counts = Counter(words.index(next(sampler)) for _ in range(draws))
        assert len(counts) == size
        assert chi_squared(counts, size, draws) < threshold
