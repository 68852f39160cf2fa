"""Portfolio Repository: Access to portfolio records.

Provides read access to data/portfolios.csv.
Columns: id, name, initial_value
"""

import logging

import polars as pl

from portfolio_pnl.domain.models import Portfolio
from portfolio_pnl.infrastructure.repositories.base import (
    Repository,
    RepositoryError,
    read_csv_table,
)
from portfolio_pnl.infrastructure.config import DataPaths, DEFAULT_PATHS

logger = logging.getLogger(__name__)

PORTFOLIO_COLUMNS = ("id", "name", "initial_value")


class PortfolioRepository(Repository[pl.DataFrame]):
    """Repository for portfolio records.

    Example:
        >>> repo = PortfolioRepository()
        >>> df = repo.get_all()
        >>> portfolio = repo.get(1)
    """

    def __init__(self, paths: DataPaths = DEFAULT_PATHS):
        self._paths = paths
        self._cache: pl.DataFrame | None = None

    def get_all(self) -> pl.DataFrame:
        """Load all portfolios.

        Returns:
            DataFrame with columns: id (Int64), name (Utf8),
            initial_value (Float64), sorted by id

        Raises:
            RepositoryError: If the file is missing or malformed
        """
        if self._cache is not None:
            return self._cache

        path = self._paths.portfolios_file
        raw = read_csv_table(path, PORTFOLIO_COLUMNS, "Portfolio")

        try:
            df = raw.select(
                pl.col("id").cast(pl.Int64),
                pl.col("name"),
                pl.col("initial_value").cast(pl.Float64),
            ).sort("id")
        except pl.exceptions.PolarsError as e:
            raise RepositoryError(f"Invalid portfolio data: {e}", str(path))

        logger.debug("Loaded %d portfolios from %s", len(df), path)
        self._cache = df
        return self._cache

    def get(self, portfolio_id: int) -> Portfolio:
        """Get a single portfolio.

        Args:
            portfolio_id: Portfolio identifier

        Returns:
            Portfolio (without trades attached)

        Raises:
            RepositoryError: If the portfolio does not exist
        """
        portfolio = self.find(portfolio_id)
        if portfolio is None:
            raise RepositoryError(f"Portfolio {portfolio_id} not found")
        return portfolio

    def find(self, portfolio_id: int) -> Portfolio | None:
        """Get a single portfolio, or None if it does not exist."""
        df = self.get_all().filter(pl.col("id") == portfolio_id)
        if len(df) == 0:
            return None
        return to_portfolio(df.row(0, named=True))

    def list_portfolios(self) -> list[Portfolio]:
        """Get all portfolios as domain objects, ordered by id."""
        return [to_portfolio(row) for row in self.get_all().iter_rows(named=True)]

    def list_ids(self) -> list[int]:
        """Get all portfolio ids in ascending order."""
        return self.get_all()["id"].to_list()

    def clear_cache(self) -> None:
        """Clear cached data."""
        self._cache = None


def to_portfolio(row: dict) -> Portfolio:
    """Convert a portfolio row to a Portfolio."""
    return Portfolio(
        id=row["id"],
        name=row["name"] or "",
        initial_value=row["initial_value"],
    )
