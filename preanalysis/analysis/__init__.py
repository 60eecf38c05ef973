"""Cheap static analysis of a (text, pattern) pair.

The features computed here are what selection policies base their choice
on:

- estimate_alphabet_size: distinct 8-bit codes across text and pattern
- has_repeating_prefix: whether the pattern overlaps itself substantially
- max_char_repetition_ratio: dominance of the most frequent pattern code

Example:
    from preanalysis.analysis import analyze

    features = analyze(text, pattern)
    if features.has_repeating_prefix:
        ...
"""

from .features import (
    FeatureSet,
    analyze,
    estimate_alphabet_size,
    has_repeating_prefix,
    max_char_repetition_ratio,
    prefix_function,
)

__all__ = [
    'FeatureSet',
    'analyze',
    'estimate_alphabet_size',
    'has_repeating_prefix',
    'max_char_repetition_ratio',
    'prefix_function',
]
