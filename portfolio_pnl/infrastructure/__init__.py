"""Infrastructure layer for portfolio analytics.

Contains:
- config: Data paths and analysis configuration
- repositories: Data access abstractions
"""

from portfolio_pnl.infrastructure.config import (
    DataPaths,
    AnalysisConfig,
    DEFAULT_PATHS,
    DEFAULT_CONFIG,
)
from portfolio_pnl.infrastructure.repositories import (
    Repository,
    RepositoryError,
    PortfolioRepository,
    TradeRepository,
)

__all__ = [
    # Config
    "DataPaths",
    "AnalysisConfig",
    "DEFAULT_PATHS",
    "DEFAULT_CONFIG",
    # Repositories
    "Repository",
    "RepositoryError",
    "PortfolioRepository",
    "TradeRepository",
]
