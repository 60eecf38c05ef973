"""Caller-side dispatch of a Decision to registered matchers.

No matching algorithm lives here; matchers are plain callables taking
(text, pattern) and returning match positions, registered by name.

Example:
    from preanalysis.dispatch import Dispatcher, MatcherRegistry

    registry = MatcherRegistry()
    registry.register("BoyerMoore", boyer_moore)
    result = Dispatcher(policy, registry).search(text, pattern)
"""

from .registry import Matcher, MatcherRegistry, UnknownAlgorithmError
from .engine import Dispatcher, DispatchResult

__all__ = [
    'Matcher',
    'MatcherRegistry',
    'UnknownAlgorithmError',
    'Dispatcher',
    'DispatchResult',
]
