"""Portfolio Analysis Service: Complete performance view of one portfolio.

Orchestrates the calculation of all portfolio views:
- Performance report (return, win rate, trade counts)
- Cumulative PNL series
- Best/worst trade
- Per-ticker and monthly breakdowns
- Average PNL, volume and simplified Sharpe ratio
- Most recent trades

This service uses repositories for data access and domain logic for calculations.
"""

import logging
from dataclasses import dataclass
from typing import Sequence

from portfolio_pnl.domain.models import Portfolio, Trade
from portfolio_pnl.domain.pnl import (
    PerformanceReport,
    PnLPoint,
    BestWorstTrades,
    MonthlyPnL,
    average_pnl,
    best_worst_trades,
    cumulative_pnl,
    monthly_pnl,
    pnl_by_ticker,
    portfolio_performance,
    recent_trades,
    total_volume,
)
from portfolio_pnl.domain.metrics import sharpe_ratio
from portfolio_pnl.infrastructure.config import (
    AnalysisConfig,
    DataPaths,
    DEFAULT_CONFIG,
    DEFAULT_PATHS,
)
from portfolio_pnl.infrastructure.repositories import (
    PortfolioRepository,
    TradeRepository,
)

logger = logging.getLogger(__name__)


# =============================================================================
# Result Data Class
# =============================================================================

@dataclass(frozen=True, slots=True)
class PortfolioAnalysisResult:
    """Complete analysis result for a single portfolio."""
    # Identity
    portfolio: Portfolio

    # Aggregates
    performance: PerformanceReport
    average_pnl: float
    total_volume: float
    sharpe_ratio: float

    # Breakdowns
    cumulative: tuple[PnLPoint, ...]
    best_worst: BestWorstTrades
    by_ticker: dict[str, float]
    monthly: tuple[MonthlyPnL, ...]
    recent_trades: tuple[Trade, ...]

    def to_dict(self) -> dict:
        """Convert to a JSON-friendly dictionary."""
        best = self.best_worst.best
        worst = self.best_worst.worst
        return {
            "portfolio_id": self.portfolio.id,
            "portfolio_name": self.portfolio.name,
            **self.performance.to_dict(),
            "average_pnl": self.average_pnl,
            "total_volume": self.total_volume,
            "sharpe_ratio": self.sharpe_ratio,
            "best_trade": (
                {**best.trade.to_dict(), "calculated_pnl": best.calculated_pnl}
                if best else None
            ),
            "worst_trade": (
                {**worst.trade.to_dict(), "calculated_pnl": worst.calculated_pnl}
                if worst else None
            ),
            "by_ticker": dict(self.by_ticker),
            "monthly": [m.to_dict() for m in self.monthly],
            "cumulative": [
                {
                    "date": p.date.isoformat(),
                    "value": p.value,
                    "cumulative_value": p.cumulative_value,
                    "ticker": p.ticker,
                }
                for p in self.cumulative
            ],
            "recent_trades": [t.to_dict() for t in self.recent_trades],
        }


def analyze_trades(
    portfolio: Portfolio,
    trades: Sequence[Trade],
    config: AnalysisConfig = DEFAULT_CONFIG,
) -> PortfolioAnalysisResult:
    """Run every portfolio view over an in-memory set of trades.

    Args:
        portfolio: Portfolio providing the capital base
        trades: Trades to analyze (not checked against portfolio.id)
        config: Analysis parameters

    Returns:
        PortfolioAnalysisResult
    """
    return PortfolioAnalysisResult(
        portfolio=portfolio,
        performance=portfolio_performance(portfolio, trades),
        average_pnl=average_pnl(trades),
        total_volume=total_volume(trades),
        sharpe_ratio=sharpe_ratio(trades, config.risk_free_rate),
        cumulative=tuple(cumulative_pnl(trades)),
        best_worst=best_worst_trades(trades),
        by_ticker=pnl_by_ticker(trades),
        monthly=tuple(monthly_pnl(trades)),
        recent_trades=tuple(recent_trades(trades, config.recent_trades_limit)),
    )


# =============================================================================
# Portfolio Analyzer
# =============================================================================

class PortfolioAnalyzer:
    """Analyzes a single portfolio's trading performance.

    Example:
        >>> analyzer = PortfolioAnalyzer()
        >>> result = analyzer.analyze(1)
        >>> result.performance.return_percentage
        -2.4
    """

    def __init__(
        self,
        paths: DataPaths = DEFAULT_PATHS,
        config: AnalysisConfig | None = None,
    ):
        self._paths = paths
        self._config = config or DEFAULT_CONFIG
        self._portfolio_repo = PortfolioRepository(paths)
        self._trade_repo = TradeRepository(paths)

    def get_portfolio(self, portfolio_id: int) -> Portfolio | None:
        """Load a portfolio with its trades attached, or None if not found."""
        portfolio = self._portfolio_repo.find(portfolio_id)
        if portfolio is None:
            logger.info("Portfolio %d not found", portfolio_id)
            return None

        trades = self._trade_repo.get_by_portfolio(portfolio_id)
        return Portfolio(
            id=portfolio.id,
            name=portfolio.name,
            initial_value=portfolio.initial_value,
            trades=tuple(trades),
        )

    def analyze(self, portfolio_id: int) -> PortfolioAnalysisResult | None:
        """Analyze one portfolio.

        Args:
            portfolio_id: Portfolio identifier

        Returns:
            PortfolioAnalysisResult or None if the portfolio does not exist

        Raises:
            RepositoryError: If the data files cannot be read
        """
        portfolio = self.get_portfolio(portfolio_id)
        if portfolio is None:
            return None

        logger.debug(
            "Analyzing portfolio %d (%d trades)", portfolio.id, portfolio.trade_count
        )
        return analyze_trades(portfolio, portfolio.trades, self._config)
