"""YAML configuration for choosing and tuning a selection policy.

Usage:
    from preanalysis.config import parse_config_file, build_policy

    policy = build_policy(parse_config_file('preanalysis.yaml'))
"""

from .parser import (
    ConfigParseError,
    PolicyConfig,
    build_policy,
    parse_config_file,
    parse_config_string,
)

__all__ = [
    'ConfigParseError',
    'PolicyConfig',
    'build_policy',
    'parse_config_file',
    'parse_config_string',
]
