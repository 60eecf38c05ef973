"""Dispatcher that runs matchers according to a policy's decision.

A committed decision runs exactly one matcher. NO_PREFERENCE runs every
registered matcher, in registration order.
"""

import logging
from dataclasses import dataclass, field
from typing import Dict, List

from preanalysis.policy import AlgorithmName, Decision, SelectionPolicy
from .registry import MatcherRegistry

logger = logging.getLogger(__name__)


@dataclass
class DispatchResult:
    """Result of dispatching one search."""

    decision: Decision
    """The decision the policy made."""

    results: Dict[AlgorithmName, List[int]] = field(default_factory=dict)
    """Match positions reported by each matcher that ran."""

    @property
    def algorithms_run(self) -> List[AlgorithmName]:
        """Names of the matchers that ran, in order."""
        return list(self.results)


class Dispatcher:
    """Ask a policy for a decision and run the matchers it calls for.

    Example:
        registry = MatcherRegistry()
        registry.register("KMP", kmp_search)
        registry.register("Naive", naive_search)

        dispatcher = Dispatcher(get_policy('student'), registry)
        result = dispatcher.search(text, pattern)
    """

    def __init__(self, policy: SelectionPolicy, registry: MatcherRegistry):
        self.policy = policy
        self.registry = registry

    def search(self, text, pattern) -> DispatchResult:
        """Search text for pattern using the matcher(s) the policy selects.

        Raises:
            InvalidInputError: If text or pattern is not a character sequence.
            UnknownAlgorithmError: If the policy picks an unregistered name.
        """
        decision = self.policy.choose_algorithm(text, pattern)
        result = DispatchResult(decision=decision)

        if decision.has_preference:
            matcher = self.registry.resolve(decision.algorithm)
            logger.debug("Running %s", decision.algorithm)
            result.results[decision.algorithm] = list(matcher(text, pattern))
            return result

        logger.info("No preference; running all %d matchers", len(self.registry))
        for name in self.registry.names:
            logger.debug("Running %s", name)
            result.results[name] = list(self.registry.resolve(name)(text, pattern))
        return result
