"""
Tests for shuffled tokens and random strings.
"""

import pytest

from mock_populate import InvalidConfiguration, shuffler, stringer
from mock_populate.tokens import CHARSETS, CONSONANTS, VOWELS


class TestShuffler:
    """Test list shuffling."""

    def test_default_tokens(self):
        """The default items are the tokens a..j."""
        assert sorted(shuffler(seed=1)) == list("abcdefghij")

    def test_permutation_ignores_count(self):
        """The output is a permutation of the input whatever n is."""
        items = [1, 2, 3, 3, 5]
        results = shuffler(items=items, n=1, seed=2)
        assert sorted(results) == sorted(items)

    def test_input_untouched(self):
        """The caller's list is not shuffled in place."""
        items = list(range(20))
        shuffler(items=items, seed=3)
        assert items == list(range(20))


class TestStringer:
    """Test random string generation."""

    @pytest.mark.parametrize("kind", sorted(CHARSETS))
    def test_character_classes(self, kind):
        """Strings use only characters from their class."""
        results = stringer(kind=kind, length=12, n=9, seed=1)

        assert len(results) == 10
        for value in results:
            assert len(value) == 12
            assert set(value) <= set(CHARSETS[kind])

    def test_pronounceable(self):
        """Pronounceable strings alternate consonants and vowels."""
        for value in stringer(kind="pron", length=9, n=19, seed=2):
            for left, right in zip(value, value[1:]):
                assert (left in VOWELS) != (right in VOWELS)
                assert left in CONSONANTS + VOWELS

    def test_defaults(self):
        """Defaults give ten alphanumeric strings of length 8."""
        results = stringer(seed=3)
        assert len(results) == 10
        assert all(len(value) == 8 and value.isalnum() for value in results)

    @pytest.mark.parametrize("kwargs", [{"kind": "klingon"}, {"length": 0}])
    def test_invalid_options(self, kwargs):
        """Unknown classes and empty lengths are rejected."""
        with pytest.raises(InvalidConfiguration):
            stringer(**kwargs)
