"""Name-to-matcher registry used by the dispatcher."""

from typing import Callable, Dict, List, Optional

from preanalysis.policy import AlgorithmName

Matcher = Callable[[str, str], List[int]]


class UnknownAlgorithmError(LookupError):
    """A decision names an algorithm with no registered matcher."""
    pass


class MatcherRegistry:
    """O(1) lookup of matcher callables by algorithm name.

    Registration order is preserved; it is the order in which all matchers
    run when a policy has no preference.
    """

    def __init__(self):
        self._by_name: Dict[str, Matcher] = {}

    def register(self, name: str, matcher: Matcher) -> None:
        """Register a matcher under an algorithm name.

        Args:
            name: Algorithm name, e.g. "KMP".
            matcher: Callable taking (text, pattern) and returning match
                positions.

        Raises:
            ValueError: If name is already registered or matcher is not
                callable.
        """
        if name in self._by_name:
            raise ValueError(f"Duplicate algorithm: {name}")
        if not callable(matcher):
            raise ValueError(f"Matcher for {name} is not callable")
        self._by_name[name] = matcher

    def find(self, name: str) -> Optional[Matcher]:
        """Return the matcher registered under name, or None."""
        return self._by_name.get(name)

    def resolve(self, name: str) -> Matcher:
        """Return the matcher registered under name.

        Raises:
            UnknownAlgorithmError: If nothing is registered under name.
        """
        matcher = self.find(name)
        if matcher is None:
            raise UnknownAlgorithmError(
                f"No matcher registered for '{name}'. Registered: {self.names}"
            )
        return matcher

    @property
    def names(self) -> List[AlgorithmName]:
        """Registered names in registration order."""
        return [AlgorithmName(name) for name in self._by_name]

    def __contains__(self, name: str) -> bool:
        return name in self._by_name

    def __len__(self) -> int:
        return len(self._by_name)
