"""Control policy that never picks an algorithm."""

from .protocols import NO_PREFERENCE, Decision, validate_inputs


class InstructorPolicy:
    """Always defers, so the caller runs every algorithm as a baseline."""

    def choose_algorithm(self, text, pattern) -> Decision:
        validate_inputs(text, pattern)
        return NO_PREFERENCE

    def get_strategy_description(self) -> str:
        return "Instructor's testing implementation"

    def __repr__(self) -> str:
        return 'InstructorPolicy()'
