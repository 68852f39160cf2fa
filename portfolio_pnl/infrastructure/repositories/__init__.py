"""Data repositories for portfolio analytics.

Provides abstracted data access through the Repository pattern:
- PortfolioRepository: Portfolio records
- TradeRepository: Trade records for all portfolios
"""

from portfolio_pnl.infrastructure.repositories.base import (
    Repository,
    RepositoryError,
    read_csv_table,
)
from portfolio_pnl.infrastructure.repositories.portfolio_repo import (
    PortfolioRepository,
)
from portfolio_pnl.infrastructure.repositories.trade_repo import TradeRepository

__all__ = [
    "Repository",
    "RepositoryError",
    "read_csv_table",
    "PortfolioRepository",
    "TradeRepository",
]
