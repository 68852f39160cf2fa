"""Trade Repository: Access to trade records.

Provides read access to data/trades.csv.
Columns: id, ticker, entry_price, exit_price, quantity, date (YYYY-MM-DD),
portfolio_id, and an optional pnl column. Empty or absent pnl cells are
loaded as None, leaving the analytics to derive them.
"""

import logging

import polars as pl

from portfolio_pnl.domain.models import Trade
from portfolio_pnl.infrastructure.repositories.base import (
    Repository,
    RepositoryError,
    read_csv_table,
)
from portfolio_pnl.infrastructure.config import DataPaths, DEFAULT_PATHS

logger = logging.getLogger(__name__)

TRADE_COLUMNS = (
    "id", "ticker", "entry_price", "exit_price",
    "quantity", "date", "portfolio_id",
)


class TradeRepository(Repository[pl.DataFrame]):
    """Repository for trade records.

    Example:
        >>> repo = TradeRepository()
        >>> df = repo.get_all()
        >>> trades = repo.get_by_portfolio(1)
    """

    def __init__(self, paths: DataPaths = DEFAULT_PATHS):
        self._paths = paths
        self._cache: pl.DataFrame | None = None

    def get_all(self) -> pl.DataFrame:
        """Load all trades.

        Rows missing any required field are skipped with a warning.

        Returns:
            DataFrame with typed columns (date as Date, pnl as nullable
            Float64), in file order

        Raises:
            RepositoryError: If the file is missing or malformed
        """
        if self._cache is not None:
            return self._cache

        path = self._paths.trades_file
        raw = read_csv_table(path, TRADE_COLUMNS, "Trade")

        if "pnl" not in raw.columns:
            raw = raw.with_columns(pl.lit(None, dtype=pl.Utf8).alias("pnl"))

        complete = raw.drop_nulls(subset=list(TRADE_COLUMNS))
        skipped = len(raw) - len(complete)
        if skipped:
            logger.warning("Skipped %d incomplete trade rows in %s", skipped, path)

        try:
            df = complete.select(
                pl.col("id").cast(pl.Int64),
                pl.col("ticker").str.strip_chars(),
                pl.col("entry_price").cast(pl.Float64),
                pl.col("exit_price").cast(pl.Float64),
                pl.col("quantity").cast(pl.Int64),
                pl.col("date").str.to_date("%Y-%m-%d"),
                pl.col("portfolio_id").cast(pl.Int64),
                pl.col("pnl").cast(pl.Float64),
            )
        except pl.exceptions.PolarsError as e:
            raise RepositoryError(f"Invalid trade data: {e}", str(path))

        logger.debug("Loaded %d trades from %s", len(df), path)
        self._cache = df
        return self._cache

    def get_trades(self) -> list[Trade]:
        """Get all trades as domain objects."""
        return to_trades(self.get_all())

    def get_by_portfolio(self, portfolio_id: int) -> list[Trade]:
        """Get trades belonging to one portfolio.

        Args:
            portfolio_id: Portfolio identifier

        Returns:
            List of trades (empty if the portfolio has none)
        """
        df = self.get_all().filter(pl.col("portfolio_id") == portfolio_id)
        return to_trades(df)

    def list_tickers(self) -> list[str]:
        """Get sorted list of distinct tickers."""
        return self.get_all()["ticker"].unique().sort().to_list()

    def clear_cache(self) -> None:
        """Clear cached data."""
        self._cache = None


def to_trades(df: pl.DataFrame) -> list[Trade]:
    """Convert typed trade rows to Trade objects."""
    return [
        Trade(
            id=row["id"],
            ticker=row["ticker"],
            entry_price=row["entry_price"],
            exit_price=row["exit_price"],
            quantity=row["quantity"],
            date=row["date"],
            portfolio_id=row["portfolio_id"],
            pnl=row["pnl"],
        )
        for row in df.iter_rows(named=True)
    ]
