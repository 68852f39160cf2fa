"""Unit tests for domain models."""

from datetime import date

import pytest

from portfolio_pnl.domain.models import (
    Portfolio,
    Trade,
    edit_trade,
    new_trade,
    normalize_ticker,
)


class TestTrade:
    """Tests for Trade dataclass."""

    def test_defaults(self, make_trade):
        """pnl should default to None."""
        trade = make_trade()
        assert trade.pnl is None
        assert trade.has_pnl is False

    def test_total_volume(self, make_trade):
        trade = make_trade(entry_price=150.0, quantity=10)
        assert trade.total_volume == 1500.0

    def test_with_pnl_derives(self, make_trade):
        """with_pnl should fill in the derived value."""
        trade = make_trade(entry_price=150, exit_price=160, quantity=10)
        filled = trade.with_pnl()
        assert filled.pnl == 100
        assert trade.pnl is None  # input untouched

    def test_with_pnl_keeps_stored(self, make_trade):
        """with_pnl should not overwrite a stored value."""
        trade = make_trade(pnl=7.0)
        assert trade.with_pnl() is trade

    def test_no_validation(self, make_trade):
        """Invalid values are accepted; validation lives elsewhere."""
        trade = make_trade(entry_price=-1, quantity=0)
        assert trade.quantity == 0

    def test_to_dict(self, make_trade):
        d = make_trade(trade_date=date(2024, 1, 15)).to_dict()
        assert d["ticker"] == "AAPL"
        assert d["date"] == "2024-01-15"
        assert d["pnl"] is None

    def test_immutable(self, make_trade):
        """Trade should be immutable."""
        trade = make_trade()
        with pytest.raises(AttributeError):
            trade.pnl = 1.0


class TestPortfolio:
    """Tests for Portfolio dataclass."""

    def test_defaults(self):
        portfolio = Portfolio(id=1, name="Main", initial_value=10000)
        assert portfolio.trades == ()
        assert portfolio.trade_count == 0

    def test_with_trades(self, sample_trades):
        portfolio = Portfolio(1, "Main", 10000, trades=tuple(sample_trades))
        assert portfolio.trade_count == 3

    def test_immutable(self):
        portfolio = Portfolio(id=1, name="Main", initial_value=10000)
        with pytest.raises(AttributeError):
            portfolio.initial_value = 0


class TestNewTrade:
    """Tests for the record-creation helpers."""

    def test_normalize_ticker(self):
        assert normalize_ticker("  aapl ") == "AAPL"
        assert normalize_ticker("brk1") == "BRK1"

    def test_new_trade_computes_pnl(self):
        """Stored pnl should match the analytics formula."""
        trade = new_trade(
            id=7, ticker=" msft ", entry_price=300, exit_price=320,
            quantity=8, date=date(2024, 1, 17), portfolio_id=1,
        )
        assert isinstance(trade, Trade)
        assert trade.ticker == "MSFT"
        assert trade.pnl == 160
        assert trade.has_pnl is True

    def test_new_trade_loss(self):
        trade = new_trade(
            id=8, ticker="GOOGL", entry_price=2500, exit_price=2400,
            quantity=5, date=date(2024, 1, 16), portfolio_id=1,
        )
        assert trade.pnl == -500


class TestEditTrade:
    """Tests for edit_trade."""

    def test_price_change_recomputes_pnl(self, make_trade):
        """A stored pnl should follow edited prices, not go stale."""
        trade = make_trade(entry_price=150, exit_price=160, quantity=10, pnl=100)
        edited = edit_trade(trade, exit_price=170)
        assert edited.exit_price == 170
        assert edited.pnl == 200
        assert trade.pnl == 100  # input untouched

    def test_quantity_change_recomputes_pnl(self, make_trade):
        trade = make_trade(entry_price=150, exit_price=160, quantity=10, pnl=100)
        assert edit_trade(trade, quantity=3).pnl == 30

    def test_fills_missing_pnl(self, make_trade):
        trade = make_trade(entry_price=150, exit_price=160, quantity=10)
        assert edit_trade(trade).pnl == 100

    def test_normalizes_ticker(self, make_trade):
        assert edit_trade(make_trade(), ticker=" tsla ").ticker == "TSLA"

    def test_rejects_direct_pnl(self, make_trade):
        with pytest.raises(TypeError):
            edit_trade(make_trade(), pnl=5.0)


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
