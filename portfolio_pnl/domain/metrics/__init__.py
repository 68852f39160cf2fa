"""Trading metrics for portfolio performance analysis.

- Risk: Simplified Sharpe ratio over per-trade PNL

Usage:
    from portfolio_pnl.domain.metrics import sharpe_ratio
"""

from portfolio_pnl.domain.metrics.risk import (
    DEFAULT_RISK_FREE_RATE,
    TRADING_DAYS_PER_YEAR,
    sharpe_ratio,
)

__all__ = [
    "DEFAULT_RISK_FREE_RATE",
    "TRADING_DAYS_PER_YEAR",
    "sharpe_ratio",
]
