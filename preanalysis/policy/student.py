"""Feature-driven selection policy.

Rules are evaluated top to bottom and the first one that fires decides:

1. Empty pattern, or pattern longer than text: Naive
2. Very short pattern: Naive
3. Self-overlapping or highly repetitive pattern: KMP
4. Huge text and long pattern: BoyerMoore for a large alphabet,
   RabinKarp otherwise
5. Long text and medium pattern: BoyerMoore for a large alphabet,
   KMP otherwise
6. Anything else: BoyerMoore
"""

import logging
from dataclasses import dataclass, field, fields
from typing import Any, Dict

from preanalysis.analysis import analyze
from .protocols import Algorithm, Decision, validate_inputs

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class StudentThresholds:
    """Tunable limits used by StudentPolicy.

    Attributes:
        short_pattern: Patterns this long or shorter go to Naive
        repetition_ratio: Minimum max-char ratio that selects KMP
        huge_text: Text length at which the huge-input rule applies
        long_pattern: Pattern length at which the huge-input rule applies
        huge_alphabet: Alphabet size above which huge inputs use BoyerMoore
        long_text: Text length at which the long-input rule applies
        medium_pattern: Pattern length at which the long-input rule applies
        medium_alphabet: Alphabet size above which long inputs use BoyerMoore
    """
    short_pattern: int = 3
    repetition_ratio: float = 0.6
    huge_text: int = 50000
    long_pattern: int = 16
    huge_alphabet: int = 32
    long_text: int = 2000
    medium_pattern: int = 8
    medium_alphabet: int = 20

    @classmethod
    def names(cls):
        """Return the names of all thresholds."""
        return [f.name for f in fields(cls)]

    @classmethod
    def from_dict(cls, values: Dict[str, Any]) -> 'StudentThresholds':
        """Build thresholds from a mapping, keeping defaults for missing keys.

        Raises:
            ValueError: If a key is not a known threshold.
        """
        unknown = set(values) - set(cls.names())
        if unknown:
            raise ValueError(f"Unknown thresholds: {sorted(unknown)}")
        return cls(**values)


@dataclass(frozen=True)
class StudentPolicy:
    """Ordered rule set over text length, pattern length and pattern features.

    Always commits to exactly one algorithm; never returns NO_PREFERENCE.
    """

    thresholds: StudentThresholds = field(default_factory=StudentThresholds)

    def choose_algorithm(self, text, pattern) -> Decision:
        validate_inputs(text, pattern)
        limits = self.thresholds
        n = len(text)
        m = len(pattern)

        if m == 0:
            return self._decide(Algorithm.NAIVE, "empty pattern")
        if m > n:
            return self._decide(Algorithm.NAIVE, "pattern longer than text")

        features = analyze(text, pattern)
        logger.debug("Features for n=%d m=%d: %s", n, m, features)

        if m <= limits.short_pattern:
            return self._decide(Algorithm.NAIVE, "short pattern")

        if (features.has_repeating_prefix
                or features.max_char_ratio >= limits.repetition_ratio):
            return self._decide(Algorithm.KMP, "repetitive pattern")

        if n >= limits.huge_text and m >= limits.long_pattern:
            if features.alphabet_size > limits.huge_alphabet:
                return self._decide(Algorithm.BOYER_MOORE, "huge input, large alphabet")
            return self._decide(Algorithm.RABIN_KARP, "huge input, small alphabet")

        if n >= limits.long_text and m >= limits.medium_pattern:
            if features.alphabet_size > limits.medium_alphabet:
                return self._decide(Algorithm.BOYER_MOORE, "long input, large alphabet")
            return self._decide(Algorithm.KMP, "long input, small alphabet")

        return self._decide(Algorithm.BOYER_MOORE, "fallback")

    def get_strategy_description(self) -> str:
        t = self.thresholds
        return (
            "Student strategy:\n"
            f"- Short patterns (m <= {t.short_pattern}): Naive\n"
            f"- Repeating prefix or max char ratio >= {t.repetition_ratio}: KMP\n"
            f"- Very long text and long pattern (n >= {t.huge_text}, m >= {t.long_pattern}): "
            f"BoyerMoore if alphabet > {t.huge_alphabet}, else RabinKarp\n"
            f"- Long text (n >= {t.long_text}) and m >= {t.medium_pattern}: "
            f"BoyerMoore if alphabet > {t.medium_alphabet}, else KMP\n"
            "- Everything else: BoyerMoore"
        )

    @staticmethod
    def _decide(name, reason: str) -> Decision:
        logger.debug("Student policy chose %s (%s)", name, reason)
        return Decision.choose(name)
