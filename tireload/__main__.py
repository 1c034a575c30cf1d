"""
Entry point for running tireload as a module.

Usage:
    python -m tireload calculate --input example.json
    python -m tireload make-example
    python -m tireload serve --port 8000
"""

import sys

from tireload.cli.main import cli

if __name__ == "__main__":
    sys.exit(cli())
