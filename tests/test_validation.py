"""Unit tests for domain/validation.py."""

from datetime import date

import pytest

from portfolio_pnl.domain.validation import (
    FormValidationResult,
    ValidationError,
    validate_portfolio_input,
    validate_trade_input,
)

TODAY = date(2024, 6, 30)


def _valid_trade(**overrides):
    fields = dict(
        ticker="AAPL",
        entry_price=150.0,
        exit_price=160.0,
        quantity=10,
        trade_date=date(2024, 1, 15),
        portfolio_id=1,
        today=TODAY,
    )
    fields.update(overrides)
    return validate_trade_input(**fields)


class TestFormValidationResult:
    """Tests for FormValidationResult."""

    def test_empty_is_valid(self):
        assert FormValidationResult().is_valid is True

    def test_messages_first_per_field(self):
        result = FormValidationResult(errors=(
            ValidationError("ticker", "first"),
            ValidationError("ticker", "second"),
            ValidationError("quantity", "bad"),
        ))
        assert result.is_valid is False
        assert result.messages() == {"ticker": "first", "quantity": "bad"}


class TestValidatePortfolio:
    """Tests for validate_portfolio_input."""

    def test_valid(self):
        assert validate_portfolio_input("Growth", 10000).is_valid

    def test_name_required(self):
        result = validate_portfolio_input("   ", 10000)
        assert result.messages()["name"] == "This field is required"

    def test_name_too_short(self):
        result = validate_portfolio_input("A", 10000)
        assert "at least 2" in result.messages()["name"]

    def test_name_too_long(self):
        result = validate_portfolio_input("x" * 101, 10000)
        assert "at most 100" in result.messages()["name"]

    @pytest.mark.parametrize("value", [0, -5, 0.001])
    def test_initial_value_too_small(self, value):
        result = validate_portfolio_input("Growth", value)
        assert "initial_value" in result.messages()

    def test_initial_value_too_large(self):
        result = validate_portfolio_input("Growth", 20_000_000)
        assert "less than" in result.messages()["initial_value"]

    def test_initial_value_not_number(self):
        result = validate_portfolio_input("Growth", float("nan"))
        assert result.messages()["initial_value"] == "Must be a valid number"

    def test_collects_all_errors(self):
        result = validate_portfolio_input("", None)
        assert set(result.messages()) == {"name", "initial_value"}


class TestValidateTrade:
    """Tests for validate_trade_input."""

    def test_valid(self):
        assert _valid_trade().is_valid

    def test_lowercase_ticker_normalized(self):
        """Tickers are checked after uppercasing."""
        assert _valid_trade(ticker=" msft ").is_valid

    @pytest.mark.parametrize("ticker", ["BRK.B", "AA-PL", "ÄPL"])
    def test_invalid_ticker(self, ticker):
        result = _valid_trade(ticker=ticker)
        assert "letters and numbers" in result.messages()["ticker"]

    def test_ticker_too_long(self):
        result = _valid_trade(ticker="ABCDEFGHIJK")
        assert "at most 10" in result.messages()["ticker"]

    def test_ticker_required(self):
        assert "ticker" in _valid_trade(ticker=None).messages()

    @pytest.mark.parametrize("field", ["entry_price", "exit_price"])
    def test_price_bounds(self, field):
        assert field in _valid_trade(**{field: 0}).messages()
        assert field in _valid_trade(**{field: 200_000}).messages()

    def test_quantity_must_be_integer(self):
        result = _valid_trade(quantity=1.5)
        assert result.messages()["quantity"] == "Must be an integer"

    def test_quantity_at_least_one(self):
        assert "quantity" in _valid_trade(quantity=0).messages()

    def test_future_date(self):
        result = _valid_trade(trade_date=date(2024, 7, 1))
        assert result.messages()["date"] == "Date cannot be in the future"

    def test_today_allowed(self):
        assert _valid_trade(trade_date=TODAY).is_valid

    def test_too_old(self):
        result = _valid_trade(trade_date=date(2014, 6, 29))
        assert "10 years" in result.messages()["date"]

    def test_portfolio_required(self):
        assert "portfolio_id" in _valid_trade(portfolio_id=None).messages()
        assert "portfolio_id" in _valid_trade(portfolio_id=0).messages()

    def test_bool_is_not_a_number(self):
        assert "entry_price" in _valid_trade(entry_price=True).messages()


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
