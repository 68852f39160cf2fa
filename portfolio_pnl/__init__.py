"""Portfolio PNL: Trade profit-and-loss analytics.

Derives profit-and-loss series, win-rate statistics and simple risk
metrics from portfolio trade records.

Architecture:
- domain/: Core business logic (models, PNL calculations, formatting)
- infrastructure/: Configuration and data access
- application/: Use cases and services
- interfaces/: CLI
"""

__version__ = "0.3.0"

from portfolio_pnl.domain import (
    Trade,
    Portfolio,
    PerformanceReport,
    trade_pnl,
    effective_pnl,
    cumulative_pnl,
    total_pnl,
    portfolio_performance,
    best_worst_trades,
    pnl_by_ticker,
    average_pnl,
    monthly_pnl,
    format_currency,
    format_pnl,
    format_percentage,
    sharpe_ratio,
)
from portfolio_pnl.infrastructure import (
    DataPaths,
    AnalysisConfig,
    DEFAULT_PATHS,
    RepositoryError,
)

__all__ = [
    # Version
    "__version__",
    # Domain models
    "Trade",
    "Portfolio",
    "PerformanceReport",
    # PNL analytics
    "trade_pnl",
    "effective_pnl",
    "cumulative_pnl",
    "total_pnl",
    "portfolio_performance",
    "best_worst_trades",
    "pnl_by_ticker",
    "average_pnl",
    "monthly_pnl",
    "sharpe_ratio",
    # Formatting
    "format_currency",
    "format_pnl",
    "format_percentage",
    # Infrastructure
    "DataPaths",
    "AnalysisConfig",
    "DEFAULT_PATHS",
    "RepositoryError",
]
