"""
Entry point for running FlickFinder as a module.

Usage:
    python -m flickfinder <command>
"""

import sys

from .cli import main

if __name__ == "__main__":
    sys.exit(main())
