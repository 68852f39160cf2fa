"""Main entry point for portfolio-pnl."""

import sys

from portfolio_pnl.interfaces.cli import main

if __name__ == "__main__":
    sys.exit(main())
