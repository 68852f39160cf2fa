"""Shared fixtures for the portfolio_pnl test suite."""

from datetime import date
from pathlib import Path

import pytest

from portfolio_pnl.domain.models import Portfolio, Trade


PORTFOLIOS_CSV = """id,name,initial_value
1,Test Portfolio,10000
2,Growth,5000
3,Empty,1000
"""

TRADES_CSV = """id,ticker,entry_price,exit_price,quantity,date,portfolio_id,pnl
1,AAPL,150,160,10,2024-01-15,1,100
2,GOOGL,2500,2400,5,2024-01-16,1,
3,MSFT,300,320,8,2024-01-17,1,160
4,TSLA,200,260,10,2024-02-03,2,
5,NVDA,400,390,5,2024-03-10,2,
"""


def _make_trade(
    id: int = 1,
    ticker: str = "AAPL",
    entry_price: float = 150.0,
    exit_price: float = 160.0,
    quantity: int = 10,
    trade_date: date = date(2024, 1, 15),
    portfolio_id: int = 1,
    pnl: float | None = None,
) -> Trade:
    """Build a Trade with sensible defaults."""
    return Trade(
        id=id,
        ticker=ticker,
        entry_price=entry_price,
        exit_price=exit_price,
        quantity=quantity,
        date=trade_date,
        portfolio_id=portfolio_id,
        pnl=pnl,
    )


@pytest.fixture
def make_trade():
    """Factory for Trade objects with sensible defaults."""
    return _make_trade


@pytest.fixture
def sample_trades() -> list[Trade]:
    """AAPL +100, GOOGL -500, MSFT +160 (no stored pnl)."""
    return [
        _make_trade(1, "AAPL", 150, 160, 10, date(2024, 1, 15)),
        _make_trade(2, "GOOGL", 2500, 2400, 5, date(2024, 1, 16)),
        _make_trade(3, "MSFT", 300, 320, 8, date(2024, 1, 17)),
    ]


@pytest.fixture
def sample_portfolio() -> Portfolio:
    return Portfolio(id=1, name="Test Portfolio", initial_value=10000)


@pytest.fixture
def data_root(tmp_path: Path) -> Path:
    """Project root with data/portfolios.csv and data/trades.csv."""
    data_dir = tmp_path / "data"
    data_dir.mkdir()
    (data_dir / "portfolios.csv").write_text(PORTFOLIOS_CSV, encoding="utf-8")
    (data_dir / "trades.csv").write_text(TRADES_CSV, encoding="utf-8")
    return tmp_path
