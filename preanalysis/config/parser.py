"""YAML parsing and validation for policy configuration.

Example preanalysis.yaml:
    policy: student
    thresholds:
      huge_text: 100000
      repetition_ratio: 0.5
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Union

import yaml

from preanalysis.policy import (
    DEFAULT_POLICY,
    SelectionPolicy,
    StudentThresholds,
    available_policies,
    get_policy,
)

_TOP_LEVEL_KEYS = {'policy', 'thresholds'}
_RATIO_THRESHOLDS = {'repetition_ratio'}


@dataclass
class PolicyConfig:
    """Parsed policy configuration."""
    policy: str = DEFAULT_POLICY
    thresholds: Dict[str, Any] = field(default_factory=dict)


class ConfigParseError(Exception):
    """Error parsing or validating a configuration file."""
    pass


def parse_config_file(path: Union[str, Path]) -> PolicyConfig:
    """Parse and validate a configuration file.

    Args:
        path: Path to the YAML file

    Returns:
        PolicyConfig with the selected policy and its thresholds

    Raises:
        ConfigParseError: If the file is invalid
        FileNotFoundError: If the file doesn't exist
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")

    with open(path) as f:
        return parse_config_string(f.read())


def parse_config_string(content: str) -> PolicyConfig:
    """Parse configuration from a YAML string.

    An empty document yields the default configuration.
    """
    try:
        data = yaml.safe_load(content)
    except yaml.YAMLError as e:
        raise ConfigParseError(f"Invalid YAML syntax: {e}")

    if data is None:
        data = {}

    if not isinstance(data, dict):
        raise ConfigParseError("Config root must be a mapping")

    return _validate_config_data(data)


def _validate_config_data(data: Dict[str, Any]) -> PolicyConfig:
    unknown = set(data) - _TOP_LEVEL_KEYS
    if unknown:
        raise ConfigParseError(
            f"Unknown config keys: {sorted(unknown)}. "
            f"Valid keys: {sorted(_TOP_LEVEL_KEYS)}"
        )

    policy = data.get('policy', DEFAULT_POLICY)
    if not isinstance(policy, str):
        raise ConfigParseError("'policy' must be a string")
    if policy not in available_policies():
        raise ConfigParseError(
            f"Invalid policy '{policy}'. Valid policies: {available_policies()}"
        )

    thresholds = data.get('thresholds', {})
    if thresholds is None:
        thresholds = {}
    if not isinstance(thresholds, dict):
        raise ConfigParseError("'thresholds' must be a mapping")
    if thresholds and policy != 'student':
        raise ConfigParseError(
            f"Policy '{policy}' does not accept thresholds"
        )

    for name, value in thresholds.items():
        _validate_threshold(name, value)

    return PolicyConfig(policy=policy, thresholds=dict(thresholds))


def _validate_threshold(name: Any, value: Any) -> None:
    """Validate a single threshold entry.

    Raises:
        ConfigParseError: If the name is unknown or the value is out of range
    """
    valid = StudentThresholds.names()
    if name not in valid:
        raise ConfigParseError(
            f"Unknown threshold '{name}'. Valid thresholds: {valid}"
        )

    # bool is an int subclass but never a sensible threshold
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ConfigParseError(f"Threshold '{name}' must be a number")

    if name in _RATIO_THRESHOLDS:
        if not 0 <= value <= 1:
            raise ConfigParseError(
                f"Threshold '{name}' must be between 0 and 1, got {value}"
            )
    elif not isinstance(value, int):
        raise ConfigParseError(f"Threshold '{name}' must be an integer")
    elif value < 0:
        raise ConfigParseError(
            f"Threshold '{name}' must not be negative, got {value}"
        )


def build_policy(config: PolicyConfig) -> SelectionPolicy:
    """Instantiate the policy described by config."""
    if config.policy == 'student':
        thresholds = StudentThresholds.from_dict(config.thresholds)
        return get_policy('student', thresholds=thresholds)
    return get_policy(config.policy)
