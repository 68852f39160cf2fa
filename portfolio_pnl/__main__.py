"""Entry point for running portfolio_pnl as a module.

Usage:
    python -m portfolio_pnl [--root DIR] [command] [options]

Commands:
    performance   Portfolio performance summary
    monthly       P&L by calendar month
    tickers       P&L by ticker
    dashboard     Overview across all portfolios
    export        Write report tables (csv, parquet, xlsx)
    verify        Verify data integrity

Examples:
    python -m portfolio_pnl performance 1
    python -m portfolio_pnl export 1 --formats csv,xlsx
    python -m portfolio_pnl verify
"""

import sys

from portfolio_pnl.interfaces.cli import main

if __name__ == "__main__":
    sys.exit(main())
