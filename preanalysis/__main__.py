"""CLI entry point for preanalysis.

Usage:
    python -m preanalysis [options] pattern
"""

from .runner import main
import sys

if __name__ == '__main__':
    sys.exit(main())
