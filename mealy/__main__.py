"""
Main entry point for `mealy` command-line utility.

This is to enable `python -m mealy` if that is needed for any reason,
normal use should be to use the `mealy` command-line tool directly.
"""

from mealy.cli import main

main()
