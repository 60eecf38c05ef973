"""Protocols and value types for algorithm selection.

This module defines the contract every selection policy implements and
the Decision value it returns.
"""

from dataclasses import dataclass
from typing import NewType, Optional, Protocol, runtime_checkable

AlgorithmName = NewType('AlgorithmName', str)


class Algorithm:
    """Well-known algorithm names.

    The set is open: any string can be wrapped in AlgorithmName and
    returned by a policy. Resolving a name to a matcher is the caller's job.
    """
    NAIVE = AlgorithmName('Naive')
    KMP = AlgorithmName('KMP')
    RABIN_KARP = AlgorithmName('RabinKarp')
    BOYER_MOORE = AlgorithmName('BoyerMoore')
    GO_CRAZY = AlgorithmName('GoCrazy')


class InvalidInputError(ValueError):
    """Text or pattern is missing or not a character sequence."""
    pass


@dataclass(frozen=True)
class Decision:
    """Outcome of a selection policy.

    Either a committed choice of one algorithm, or no preference (the
    caller should run every algorithm it has).
    """
    algorithm: Optional[AlgorithmName] = None

    @classmethod
    def choose(cls, name: str) -> 'Decision':
        """Create a decision committing to the named algorithm."""
        if not name:
            raise ValueError("Algorithm name must be a non-empty string")
        return cls(AlgorithmName(name))

    @property
    def has_preference(self) -> bool:
        """True if this decision names an algorithm."""
        return self.algorithm is not None

    def __str__(self) -> str:
        if self.algorithm is None:
            return "no preference"
        return self.algorithm


NO_PREFERENCE = Decision()


@runtime_checkable
class SelectionPolicy(Protocol):
    """Protocol for objects that pick a matching algorithm.

    Implementations are independent of one another and interchangeable at
    the call site. They must be stateless across calls.
    """

    def choose_algorithm(self, text, pattern) -> Decision:
        """Pick an algorithm for searching text for pattern.

        Returns:
            A committed Decision, or NO_PREFERENCE to run all algorithms.

        Raises:
            InvalidInputError: If text or pattern is None or not a sequence
                of characters.
        """
        ...

    def get_strategy_description(self) -> str:
        """Return a human-readable summary of the policy's rules."""
        ...


def validate_inputs(text, pattern) -> None:
    """Reject anything that is not a str, bytes or bytearray.

    Raises:
        InvalidInputError: If either argument is None or of another type.
    """
    for label, value in (('text', text), ('pattern', pattern)):
        if value is None:
            raise InvalidInputError(f"{label} must not be None")
        if not isinstance(value, (str, bytes, bytearray)):
            raise InvalidInputError(
                f"{label} must be str or bytes, got {type(value).__name__}"
            )
