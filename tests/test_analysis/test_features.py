"""Tests for feature extraction."""

import random
import string

import pytest

from preanalysis.analysis import (
    FeatureSet,
    analyze,
    estimate_alphabet_size,
    has_repeating_prefix,
    max_char_repetition_ratio,
    prefix_function,
)


class TestEstimateAlphabetSize:
    """Tests for estimate_alphabet_size."""

    def test_empty_inputs(self):
        """Test that two empty sequences have no alphabet."""
        assert estimate_alphabet_size("", "") == 0

    def test_counts_across_text_and_pattern(self):
        """Test that codes from both sequences are combined."""
        assert estimate_alphabet_size("abc", "cd") == 4
        assert estimate_alphabet_size("", "xyz") == 3
        assert estimate_alphabet_size("aaaa", "") == 1

    def test_reordering_does_not_change_result(self):
        """Test that the count ignores character order."""
        text = "the quick brown fox"
        shuffled = list(text)
        random.Random(7).shuffle(shuffled)

        assert (estimate_alphabet_size(text, "jumps")
                == estimate_alphabet_size("".join(shuffled), "spmuj"))

    def test_monotonic_when_appending_new_characters(self):
        """Test that appending unseen characters never lowers the count."""
        previous = 0
        text = ""
        for ch in string.ascii_letters:
            text += ch
            current = estimate_alphabet_size(text, "")
            assert current == previous + 1
            previous = current

    def test_codes_are_masked_to_eight_bits(self):
        """Test that code points above 255 fold onto their low byte."""
        # U+0161 & 0xFF == ord('a')
        assert estimate_alphabet_size("a", "š") == 1
        assert estimate_alphabet_size("中文", "") <= 2

    def test_never_exceeds_256(self):
        """Test the upper bound on a text covering every byte value."""
        text = "".join(chr(i) for i in range(1024))
        assert estimate_alphabet_size(text, "pattern") == 256

    def test_bytes_input(self):
        """Test that bytes are accepted as well as str."""
        assert estimate_alphabet_size(b"abc", b"abd") == 4
        assert estimate_alphabet_size(bytes(range(256)), b"") == 256

    def test_bounded_by_combined_length(self):
        """Test that the count never exceeds n + m."""
        assert estimate_alphabet_size("ab", "c") <= 3


class TestPrefixFunction:
    """Tests for the LPS array construction."""

    def test_empty_pattern(self):
        """Test that an empty pattern has an empty LPS array."""
        assert prefix_function("") == []

    def test_single_character(self):
        """Test that a single character has no proper border."""
        assert prefix_function("a") == [0]

    @pytest.mark.parametrize("pattern,expected", [
        ("aaaa", [0, 1, 2, 3]),
        ("abcd", [0, 0, 0, 0]),
        ("abab", [0, 0, 1, 2]),
        ("aabaaab", [0, 1, 0, 1, 2, 2, 3]),
        ("abcabcab", [0, 0, 0, 1, 2, 3, 4, 5]),
    ])
    def test_known_arrays(self, pattern, expected):
        """Test LPS arrays for patterns with known borders."""
        assert prefix_function(pattern) == expected


class TestHasRepeatingPrefix:
    """Tests for has_repeating_prefix."""

    @pytest.mark.parametrize("pattern", ["", "a", "aa", "aaa", "aba"])
    def test_short_patterns_never_repeat(self, pattern):
        """Test that patterns shorter than four are never repeating."""
        assert has_repeating_prefix(pattern) is False

    def test_border_covering_a_third(self):
        """Test patterns whose border reaches m // 3."""
        assert has_repeating_prefix("abcabc") is True
        assert has_repeating_prefix("abca") is True
        assert has_repeating_prefix("aaaa") is True

    def test_no_border(self):
        """Test patterns without a long enough border."""
        assert has_repeating_prefix("abcd") is False
        assert has_repeating_prefix("abcdefghia") is False
        assert has_repeating_prefix("abcdefghijklmnopqrst") is False


class TestMaxCharRepetitionRatio:
    """Tests for max_char_repetition_ratio."""

    def test_empty_pattern(self):
        """Test that an empty pattern has ratio 0.0."""
        assert max_char_repetition_ratio("") == 0.0

    def test_single_repeated_character(self):
        """Test that a single repeated character has ratio 1.0."""
        assert max_char_repetition_ratio("a") == 1.0
        assert max_char_repetition_ratio("zzzzzz") == 1.0

    def test_mixed_pattern(self):
        """Test the ratio of the most frequent character."""
        assert max_char_repetition_ratio("aabc") == 0.5
        assert max_char_repetition_ratio("aaab") == 0.75
        assert max_char_repetition_ratio("abcd") == 0.25

    @pytest.mark.parametrize("pattern", ["ab", "abcabc", "hello world", "xyzzy"])
    def test_ratio_in_unit_interval(self, pattern):
        """Test that the ratio stays within (0, 1) for mixed patterns."""
        ratio = max_char_repetition_ratio(pattern)
        assert 0.0 < ratio < 1.0


class TestAnalyze:
    """Tests for the combined FeatureSet."""

    def test_feature_set_fields(self):
        """Test that analyze fills every feature."""
        features = analyze("abracadabra", "abra")

        assert features == FeatureSet(
            text_length=11,
            pattern_length=4,
            alphabet_size=5,
            has_repeating_prefix=True,
            max_char_ratio=0.5,
        )

    def test_empty_inputs(self):
        """Test features of two empty sequences."""
        features = analyze("", "")

        assert features.alphabet_size == 0
        assert features.has_repeating_prefix is False
        assert features.max_char_ratio == 0.0

    def test_feature_set_is_immutable(self):
        """Test that a FeatureSet cannot be modified."""
        features = analyze("abc", "b")
        with pytest.raises(AttributeError):
            features.alphabet_size = 99
