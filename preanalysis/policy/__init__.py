"""Selection policies that map a (text, pattern) pair to a Decision.

Three independent policies implement the SelectionPolicy protocol:

- StudentPolicy: feature-driven rule set, always commits to an algorithm
- ExamplePolicy: a few simple illustrative rules
- InstructorPolicy: always returns NO_PREFERENCE (run everything)

Example:
    from preanalysis.policy import get_policy

    policy = get_policy('student')
    decision = policy.choose_algorithm(text, pattern)
    if decision.has_preference:
        run(decision.algorithm)
"""

from .protocols import (
    NO_PREFERENCE,
    Algorithm,
    AlgorithmName,
    Decision,
    InvalidInputError,
    SelectionPolicy,
)
from .student import StudentPolicy, StudentThresholds
from .example import ExamplePolicy
from .instructor import InstructorPolicy
from .registry import (
    DEFAULT_POLICY,
    UnknownPolicyError,
    available_policies,
    get_policy,
)

__all__ = [
    # Protocols and values
    'NO_PREFERENCE',
    'Algorithm',
    'AlgorithmName',
    'Decision',
    'InvalidInputError',
    'SelectionPolicy',
    # Policies
    'StudentPolicy',
    'StudentThresholds',
    'ExamplePolicy',
    'InstructorPolicy',
    # Registry
    'DEFAULT_POLICY',
    'UnknownPolicyError',
    'available_policies',
    'get_policy',
]
