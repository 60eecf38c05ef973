"""Feature extraction over a (text, pattern) pair.

All features are computed over an 8-bit code space: every character code
is masked with 0xFF before it is counted, so tables never grow beyond
256 entries regardless of the input's character set.
"""

from dataclasses import dataclass
from typing import Iterator, List, Union

Sequence = Union[str, bytes, bytearray]

ALPHABET_CAPACITY = 256
MIN_REPETITION_LENGTH = 4


@dataclass(frozen=True)
class FeatureSet:
    """Derived features of one (text, pattern) pair.

    Attributes:
        text_length: Length of the text (n)
        pattern_length: Length of the pattern (m)
        alphabet_size: Distinct masked codes across text and pattern
        has_repeating_prefix: Whether the pattern's longest border covers
            at least a third of it
        max_char_ratio: Highest single-code frequency in the pattern over m
    """
    text_length: int
    pattern_length: int
    alphabet_size: int
    has_repeating_prefix: bool
    max_char_ratio: float


def _codes(seq: Sequence) -> Iterator[int]:
    """Yield the masked 8-bit code of every element in seq."""
    if isinstance(seq, str):
        return (ord(ch) & 0xFF for ch in seq)
    return (b & 0xFF for b in seq)


def estimate_alphabet_size(text: Sequence, pattern: Sequence) -> int:
    """Count distinct character codes across text and pattern.

    Args:
        text: Text to be searched
        pattern: Pattern to search for

    Returns:
        Number of distinct masked codes, between 0 and 256
    """
    seen = [False] * ALPHABET_CAPACITY
    count = 0

    for seq in (text, pattern):
        for code in _codes(seq):
            if not seen[code]:
                seen[code] = True
                count += 1
                if count == ALPHABET_CAPACITY:
                    return count

    return count


def prefix_function(pattern: Sequence) -> List[int]:
    """Compute the longest-proper-prefix-suffix (LPS) array of pattern.

    Entry i holds the length of the longest proper prefix of pattern that
    is also a suffix of pattern[:i + 1].
    """
    m = len(pattern)
    lps = [0] * m
    length = 0
    i = 1

    while i < m:
        if pattern[i] == pattern[length]:
            length += 1
            lps[i] = length
            i += 1
        elif length != 0:
            # Fall back to the next shorter border; i stays put
            length = lps[length - 1]
        else:
            lps[i] = 0
            i += 1

    return lps


def has_repeating_prefix(pattern: Sequence) -> bool:
    """Return True if the pattern's longest border is at least m // 3 long.

    Patterns shorter than four characters never count as repeating.
    """
    m = len(pattern)
    if m < MIN_REPETITION_LENGTH:
        return False
    return prefix_function(pattern)[-1] >= m // 3


def max_char_repetition_ratio(pattern: Sequence) -> float:
    """Return the highest single-code frequency in pattern divided by its length.

    An empty pattern has a ratio of 0.0.
    """
    m = len(pattern)
    if m == 0:
        return 0.0

    freq = [0] * ALPHABET_CAPACITY
    max_freq = 0
    for code in _codes(pattern):
        freq[code] += 1
        if freq[code] > max_freq:
            max_freq = freq[code]

    return max_freq / m


def analyze(text: Sequence, pattern: Sequence) -> FeatureSet:
    """Compute the full FeatureSet for a (text, pattern) pair."""
    return FeatureSet(
        text_length=len(text),
        pattern_length=len(pattern),
        alphabet_size=estimate_alphabet_size(text, pattern),
        has_repeating_prefix=has_repeating_prefix(pattern),
        max_char_ratio=max_char_repetition_ratio(pattern),
    )
