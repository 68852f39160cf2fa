"""PNL: Profit-and-loss analytics over trade records.

Pure functions deriving P&L views from a snapshot list of trades:
- Per-trade PNL and the "precomputed wins" policy
- Cumulative PNL series for charting
- Aggregates: totals, win/loss counts, portfolio performance
- Best/worst trade, per-ticker and monthly breakdowns

Every function is total. Empty inputs yield zero/empty results and
zero denominators are guarded, so display code never has to catch.
Inputs are not validated: negative prices or quantities flow through
the arithmetic unchanged.
"""

from __future__ import annotations

import calendar
from collections import defaultdict
from dataclasses import dataclass
from datetime import date
from typing import TYPE_CHECKING, Sequence

if TYPE_CHECKING:
    from portfolio_pnl.domain.models import Portfolio, Trade


# =============================================================================
# Data Classes
# =============================================================================

@dataclass(frozen=True, slots=True)
class PnLPoint:
    """One point of the cumulative PNL series.

    Attributes:
        date: Trade date
        value: PNL of this trade
        cumulative_value: Running PNL up to and including this trade
        ticker: Trade ticker
    """
    date: date
    value: float
    cumulative_value: float
    ticker: str


@dataclass(frozen=True, slots=True)
class PerformanceReport:
    """Aggregate performance of a portfolio.

    Attributes:
        initial_value: Capital base of the portfolio
        total_pnl: Sum of effective PNL over all trades
        current_value: initial_value + total_pnl
        return_percentage: total_pnl / initial_value × 100 (0 if base <= 0)
        total_trades: Number of trades
        profitable_trades: Trades with PNL > 0
        losing_trades: Trades with PNL < 0
        win_rate: profitable_trades / total_trades × 100 (0 if no trades)
    """
    initial_value: float
    total_pnl: float
    current_value: float
    return_percentage: float
    total_trades: int
    profitable_trades: int
    losing_trades: int
    win_rate: float

    @property
    def breakeven_trades(self) -> int:
        """Trades with exactly zero PNL."""
        return self.total_trades - self.profitable_trades - self.losing_trades

    def to_dict(self) -> dict:
        return {
            "initial_value": self.initial_value,
            "total_pnl": self.total_pnl,
            "current_value": self.current_value,
            "return_percentage": self.return_percentage,
            "total_trades": self.total_trades,
            "profitable_trades": self.profitable_trades,
            "losing_trades": self.losing_trades,
            "win_rate": self.win_rate,
        }


@dataclass(frozen=True, slots=True)
class TradeWithPnL:
    """A trade paired with its effective PNL."""
    trade: Trade
    calculated_pnl: float

    @property
    def ticker(self) -> str:
        return self.trade.ticker


@dataclass(frozen=True, slots=True)
class BestWorstTrades:
    """Best and worst trade by PNL (both None for no trades)."""
    best: TradeWithPnL | None
    worst: TradeWithPnL | None


@dataclass(frozen=True, slots=True)
class MonthlyPnL:
    """PNL aggregated over one calendar month.

    Attributes:
        month: Month display name (e.g., "January")
        year: Calendar year
        total_pnl: Sum of effective PNL for trades in the month
        trade_count: Number of trades in the month
        month_number: Month as 1-12
    """
    month: str
    year: int
    total_pnl: float
    trade_count: int
    month_number: int

    def to_dict(self) -> dict:
        return {
            "month": self.month,
            "year": self.year,
            "total_pnl": self.total_pnl,
            "trade_count": self.trade_count,
        }


# =============================================================================
# Per-Trade PNL
# =============================================================================

def trade_pnl(entry_price: float, exit_price: float, quantity: float) -> float:
    """Calculate PNL for a single trade.

    Formula:
        pnl = (exit_price - entry_price) × quantity

    No rounding is applied; format for display with
    domain.formatting.format_currency.

    Example:
        >>> trade_pnl(150, 160, 10)
        100
    """
    return (exit_price - entry_price) * quantity


def effective_pnl(trade: Trade) -> float:
    """PNL of a trade, preferring the stored value.

    A precomputed pnl (including 0) always wins, even if it disagrees
    with the prices. Otherwise the PNL is derived with trade_pnl().
    """
    if trade.pnl is not None:
        return trade.pnl
    return trade_pnl(trade.entry_price, trade.exit_price, trade.quantity)


# =============================================================================
# Series
# =============================================================================

def cumulative_pnl(trades: Sequence[Trade]) -> list[PnLPoint]:
    """Build the cumulative PNL series for charting.

    Trades are sorted by date on a copy; sorting is stable, so trades
    on the same date keep their input order.

    Args:
        trades: Trades in any order

    Returns:
        One PnLPoint per trade in chronological order (empty for no trades)
    """
    points = []
    running = 0
    for trade in sorted(trades, key=lambda t: t.date):
        value = effective_pnl(trade)
        running += value
        points.append(PnLPoint(
            date=trade.date,
            value=value,
            cumulative_value=running,
            ticker=trade.ticker,
        ))
    return points


def recent_trades(trades: Sequence[Trade], n: int = 5) -> list[Trade]:
    """Most recent n trades, newest first."""
    return sorted(trades, key=lambda t: t.date, reverse=True)[:n]


# =============================================================================
# Aggregates
# =============================================================================

def total_pnl(trades: Sequence[Trade]) -> float:
    """Sum of effective PNL (0 for no trades)."""
    return sum(effective_pnl(t) for t in trades)


def average_pnl(trades: Sequence[Trade]) -> float:
    """Mean effective PNL per trade (0 for no trades)."""
    if len(trades) == 0:
        return 0
    return total_pnl(trades) / len(trades)


def total_volume(trades: Sequence[Trade]) -> float:
    """Capital committed at entry across trades (Σ entry_price × quantity)."""
    return sum(t.entry_price * t.quantity for t in trades)


def portfolio_performance(
    portfolio: Portfolio,
    trades: Sequence[Trade],
) -> PerformanceReport:
    """Calculate aggregate performance of a portfolio.

    Does not check that trades belong to the portfolio.

    Args:
        portfolio: Portfolio providing initial_value
        trades: Trades to evaluate

    Returns:
        PerformanceReport. A zero or negative initial value reports a
        return of 0 rather than failing.

    Example:
        >>> report = portfolio_performance(portfolio, trades)
        >>> report.return_percentage
        -2.4
    """
    pnls = [effective_pnl(t) for t in trades]
    total = sum(pnls)
    initial_value = portfolio.initial_value
    n = len(pnls)

    profitable = sum(1 for p in pnls if p > 0)
    losing = sum(1 for p in pnls if p < 0)

    return PerformanceReport(
        initial_value=initial_value,
        total_pnl=total,
        current_value=initial_value + total,
        return_percentage=(total / initial_value) * 100 if initial_value > 0 else 0,
        total_trades=n,
        profitable_trades=profitable,
        losing_trades=losing,
        win_rate=(profitable / n) * 100 if n > 0 else 0,
    )


def best_worst_trades(trades: Sequence[Trade]) -> BestWorstTrades:
    """Find the best and worst trade by effective PNL.

    With a single trade, best and worst are the same trade. Among trades
    with equal PNL, which one is reported is not part of the contract.
    """
    if len(trades) == 0:
        return BestWorstTrades(best=None, worst=None)

    ranked = sorted(
        (TradeWithPnL(trade=t, calculated_pnl=effective_pnl(t)) for t in trades),
        key=lambda x: x.calculated_pnl,
        reverse=True,
    )
    return BestWorstTrades(best=ranked[0], worst=ranked[-1])


def pnl_by_ticker(trades: Sequence[Trade]) -> dict[str, float]:
    """Total effective PNL per ticker (exact, case-sensitive match)."""
    result: dict[str, float] = defaultdict(float)
    for trade in trades:
        result[trade.ticker] += effective_pnl(trade)
    return dict(result)


def monthly_pnl(trades: Sequence[Trade]) -> list[MonthlyPnL]:
    """Aggregate PNL by calendar month.

    Groups on the numeric (year, month) pair and sorts on it; the month
    name is only produced for output.

    Returns:
        MonthlyPnL entries in chronological order
    """
    totals: dict[tuple[int, int], float] = defaultdict(float)
    counts: dict[tuple[int, int], int] = defaultdict(int)

    for trade in trades:
        key = (trade.date.year, trade.date.month)
        totals[key] += effective_pnl(trade)
        counts[key] += 1

    return [
        MonthlyPnL(
            month=calendar.month_name[month],
            year=year,
            total_pnl=totals[(year, month)],
            trade_count=counts[(year, month)],
            month_number=month,
        )
        for year, month in sorted(totals)
    ]
