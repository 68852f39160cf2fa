"""Risk Metrics: Simplified risk-adjusted return.

Sharpe Ratio (simplified):
    samples = effective PNL of each trade
    sharpe  = (mean(samples) - risk_free_rate / 252) / std(samples)

Notes:
- Each trade's PNL is treated as one "return" sample. This is not a
  time-bucketed portfolio return series.
- Standard deviation is the population form (ddof=0).
- The risk-free rate is annual and de-annualized naively by 252 days.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Sequence

import numpy as np

from portfolio_pnl.domain.pnl import effective_pnl

if TYPE_CHECKING:
    from portfolio_pnl.domain.models import Trade

TRADING_DAYS_PER_YEAR = 252
DEFAULT_RISK_FREE_RATE = 0.02


def sharpe_ratio(
    trades: Sequence[Trade],
    risk_free_rate: float = DEFAULT_RISK_FREE_RATE,
) -> float:
    """Calculate the simplified Sharpe ratio of a set of trades.

    Args:
        trades: Trades to evaluate (order does not matter)
        risk_free_rate: Annualized risk-free rate (default 2%)

    Returns:
        Sharpe ratio, or 0 for fewer than 2 trades or zero dispersion

    Example:
        >>> sharpe_ratio(trades)  # PNL [100, -500, 160]
        -0.2684...
    """
    if len(trades) < 2:
        return 0.0

    samples = np.array([effective_pnl(t) for t in trades], dtype=float)
    std = float(samples.std())  # population std (ddof=0)

    if np.ptp(samples) == 0 or std == 0:
        return 0.0

    excess = float(samples.mean()) - risk_free_rate / TRADING_DAYS_PER_YEAR
    return excess / std
