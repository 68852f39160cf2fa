"""Dashboard Service: Cross-portfolio overview.

Summarizes every portfolio for the landing dashboard:
- Portfolio and trade counts
- Total PNL across portfolios
- Best and worst performing portfolio by PNL
- Most recent trades across all portfolios
"""

import logging
from dataclasses import dataclass

from portfolio_pnl.domain.models import Trade
from portfolio_pnl.domain.pnl import portfolio_performance, recent_trades
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


@dataclass(frozen=True, slots=True)
class PortfolioSummary:
    """Headline numbers for one portfolio."""
    id: int
    name: str
    pnl: float
    return_percentage: float


@dataclass(frozen=True, slots=True)
class DashboardStats:
    """Cross-portfolio dashboard figures.

    Attributes:
        total_portfolios: Number of portfolios
        total_trades: Number of trades across all portfolios
        total_pnl: Sum of portfolio PNL
        best_portfolio: Highest-PNL portfolio (None when there are none)
        worst_portfolio: Lowest-PNL portfolio (None when there are none)
        recent_trades: Newest trades across all portfolios
        portfolios: Summary of every portfolio, by PNL descending
    """
    total_portfolios: int
    total_trades: int
    total_pnl: float
    best_portfolio: PortfolioSummary | None
    worst_portfolio: PortfolioSummary | None
    recent_trades: tuple[Trade, ...]
    portfolios: tuple[PortfolioSummary, ...]


class DashboardService:
    """Builds the dashboard overview from the repositories.

    Example:
        >>> stats = DashboardService().get_stats()
        >>> stats.best_portfolio.name
        'Growth'
    """

    def __init__(
        self,
        paths: DataPaths = DEFAULT_PATHS,
        config: AnalysisConfig | None = None,
    ):
        self._config = config or DEFAULT_CONFIG
        self._portfolio_repo = PortfolioRepository(paths)
        self._trade_repo = TradeRepository(paths)

    def get_summaries(self) -> list[PortfolioSummary]:
        """Per-portfolio headline numbers, by PNL descending."""
        summaries = []
        for portfolio in self._portfolio_repo.list_portfolios():
            trades = self._trade_repo.get_by_portfolio(portfolio.id)
            report = portfolio_performance(portfolio, trades)
            summaries.append(PortfolioSummary(
                id=portfolio.id,
                name=portfolio.name,
                pnl=report.total_pnl,
                return_percentage=report.return_percentage,
            ))
        return sorted(summaries, key=lambda s: s.pnl, reverse=True)

    def get_stats(self) -> DashboardStats:
        """Compute the dashboard figures.

        Raises:
            RepositoryError: If the data files cannot be read
        """
        summaries = self.get_summaries()
        all_trades = self._trade_repo.get_trades()
        logger.debug(
            "Dashboard over %d portfolios, %d trades", len(summaries), len(all_trades)
        )

        return DashboardStats(
            total_portfolios=len(summaries),
            total_trades=len(all_trades),
            total_pnl=sum(s.pnl for s in summaries),
            best_portfolio=summaries[0] if summaries else None,
            worst_portfolio=summaries[-1] if summaries else None,
            recent_trades=tuple(
                recent_trades(all_trades, self._config.recent_trades_limit)
            ),
            portfolios=tuple(summaries),
        )
