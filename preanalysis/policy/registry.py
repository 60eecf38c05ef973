"""Lookup of selection policies by name."""

from typing import Callable, Dict, List

from .example import ExamplePolicy
from .instructor import InstructorPolicy
from .protocols import SelectionPolicy
from .student import StudentPolicy

DEFAULT_POLICY = 'student'

_FACTORIES: Dict[str, Callable[..., SelectionPolicy]] = {
    'student': StudentPolicy,
    'example': ExamplePolicy,
    'instructor': InstructorPolicy,
}


class UnknownPolicyError(KeyError):
    """No policy is registered under the requested name."""

    def __str__(self) -> str:
        return str(self.args[0]) if self.args else ''


def available_policies() -> List[str]:
    """Return the names of all known policies, sorted."""
    return sorted(_FACTORIES)


def get_policy(name: str = DEFAULT_POLICY, **options) -> SelectionPolicy:
    """Create the policy registered under name.

    Args:
        name: Policy name ('student', 'example' or 'instructor')
        **options: Keyword arguments passed to the policy constructor

    Returns:
        A new policy instance

    Raises:
        UnknownPolicyError: If name is not registered
    """
    try:
        factory = _FACTORIES[name]
    except KeyError:
        raise UnknownPolicyError(
            f"Unknown policy '{name}'. Valid policies: {available_policies()}"
        ) from None
    return factory(**options)
