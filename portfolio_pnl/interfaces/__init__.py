"""Interfaces Layer: CLI and API endpoints.

This layer contains:
- cli.py: Command-line interface
"""

from portfolio_pnl.interfaces.cli import main as cli_main

__all__ = ["cli_main"]
