"""Run-time selection of an exact string-matching algorithm.

A cheap static analysis of the text and pattern (lengths, alphabet size,
pattern self-repetition) predicts which matcher will be fastest, so the
caller does not have to run all of them.

Example:
    from preanalysis import get_policy

    decision = get_policy('student').choose_algorithm(text, pattern)
    print(decision.algorithm)   # e.g. "BoyerMoore"
"""

from .analysis import FeatureSet, analyze
from .policy import (
    NO_PREFERENCE,
    Algorithm,
    AlgorithmName,
    Decision,
    ExamplePolicy,
    InstructorPolicy,
    InvalidInputError,
    SelectionPolicy,
    StudentPolicy,
    StudentThresholds,
    UnknownPolicyError,
    available_policies,
    get_policy,
)

__all__ = [
    'FeatureSet',
    'analyze',
    'NO_PREFERENCE',
    'Algorithm',
    'AlgorithmName',
    'Decision',
    'ExamplePolicy',
    'InstructorPolicy',
    'InvalidInputError',
    'SelectionPolicy',
    'StudentPolicy',
    'StudentThresholds',
    'UnknownPolicyError',
    'available_policies',
    'get_policy',
]
