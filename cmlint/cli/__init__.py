"""Command Line Interface Package"""

from cmlint.cli.main import main

__all__ = ["main"]
