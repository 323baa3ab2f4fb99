"""
CLI module for message inspection.

Provides command-line tools for batch parsing and debugging.
"""

from mailparse.cli.inspect_mail import main as inspect_main

__all__ = ["inspect_main"]
