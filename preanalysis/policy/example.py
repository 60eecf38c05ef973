"""Illustrative selection policy with a handful of simple rules."""

from .protocols import Algorithm, Decision, validate_inputs

LEADING_WINDOW = 5
LEADING_REPEATS = 3


def leading_char_repeats(pattern) -> bool:
    """Return True if the first character occurs 3+ times in the first 5."""
    if len(pattern) < 2:
        return False
    first = pattern[0]
    window = pattern[:LEADING_WINDOW]
    return sum(1 for ch in window if ch == first) >= LEADING_REPEATS


class ExamplePolicy:
    """Choose based on pattern length and a quick look at its first characters.

    Falls back to Naive rather than BoyerMoore.
    """

    def choose_algorithm(self, text, pattern) -> Decision:
        validate_inputs(text, pattern)
        n = len(text)
        m = len(pattern)

        if m <= 3:
            return Decision.choose(Algorithm.NAIVE)
        elif leading_char_repeats(pattern):
            return Decision.choose(Algorithm.KMP)
        elif m > 10 and n > 1000:
            return Decision.choose(Algorithm.RABIN_KARP)
        else:
            return Decision.choose(Algorithm.NAIVE)

    def get_strategy_description(self) -> str:
        return "Example strategy: Choose based on pattern length and characteristics"

    def __repr__(self) -> str:
        return 'ExamplePolicy()'
