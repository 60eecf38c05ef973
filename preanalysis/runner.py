"""Command-line front end for inspecting algorithm selection.

Usage:
    python -m preanalysis [options] pattern

Example:
    python -m preanalysis --text "abracadabra" abra
    python -m preanalysis --text-file corpus.txt --policy example needle
    python -m preanalysis --config preanalysis.yaml --features --text-file corpus.txt needle
"""

import logging
import sys
from pathlib import Path
from typing import List, Optional

from preanalysis.analysis import analyze
from preanalysis.config import build_policy, parse_config_file
from preanalysis.policy import DEFAULT_POLICY, available_policies, get_policy

logger = logging.getLogger(__name__)


def main(args: Optional[List[str]] = None) -> int:
    """CLI entry point.

    Args:
        args: Command line arguments (defaults to sys.argv[1:])

    Returns:
        Exit code (0 for success, 1 for failure)
    """
    import argparse

    parser = argparse.ArgumentParser(
        description='Choose a string-matching algorithm for a text and pattern',
        prog='python -m preanalysis',
    )
    parser.add_argument(
        'pattern',
        nargs='?',
        help='Pattern to search for',
    )
    source = parser.add_mutually_exclusive_group()
    source.add_argument(
        '--text',
        default=None,
        help='Text to search in',
    )
    source.add_argument(
        '--text-file',
        default=None,
        help='Read the text to search in from this file',
    )
    parser.add_argument(
        '--policy',
        default=None,
        help=f'Selection policy (default: {DEFAULT_POLICY})',
    )
    parser.add_argument(
        '--config',
        default=None,
        help='YAML file selecting and tuning the policy',
    )
    parser.add_argument(
        '--features',
        action='store_true',
        help='Print the computed features',
    )
    parser.add_argument(
        '--list-policies',
        action='store_true',
        help='List available policies and exit',
    )
    parser.add_argument(
        '-v', '--verbose',
        action='store_true',
        help='Enable debug logging',
    )

    parsed = parser.parse_args(args)

    logging.basicConfig(
        level=logging.DEBUG if parsed.verbose else logging.WARNING,
        format='%(levelname)s %(name)s: %(message)s',
    )

    try:
        if parsed.list_policies:
            for name in available_policies():
                description = get_policy(name).get_strategy_description()
                print(f"{name}: {description.splitlines()[0]}")
            return 0

        if parsed.pattern is None:
            parser.error('the following arguments are required: pattern')

        if parsed.config is not None:
            policy = build_policy(parse_config_file(parsed.config))
            if parsed.policy is not None:
                logger.warning("--policy ignored because --config was given")
        else:
            policy = get_policy(parsed.policy or DEFAULT_POLICY)

        if parsed.text_file is not None:
            text = Path(parsed.text_file).read_text()
        else:
            text = parsed.text or ''

        print(policy.get_strategy_description())
        print()

        if parsed.features:
            features = analyze(text, parsed.pattern)
            print("Features:")
            print(f"  Text length: {features.text_length}")
            print(f"  Pattern length: {features.pattern_length}")
            print(f"  Alphabet size: {features.alphabet_size}")
            print(f"  Repeating prefix: {features.has_repeating_prefix}")
            print(f"  Max char ratio: {features.max_char_ratio:.3f}")
            print()

        decision = policy.choose_algorithm(text, parsed.pattern)
        if decision.has_preference:
            print(f"Decision: {decision.algorithm}")
        else:
            print("Decision: no preference (run all algorithms)")
        return 0

    except FileNotFoundError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        if parsed.verbose:
            import traceback
            traceback.print_exc()
        return 1


if __name__ == '__main__':
    sys.exit(main())
