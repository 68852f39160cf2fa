"""Unit tests for domain/formatting.py."""

import pytest

from portfolio_pnl.domain.formatting import (
    format_currency,
    format_percentage,
    format_pnl,
)


class TestFormatCurrency:
    """Tests for format_currency / format_pnl."""

    @pytest.mark.parametrize("value,expected", [
        (150.75, "+$150.75"),
        (-89.5, "-$89.50"),
        (0, "$0.00"),
        (1234.5, "+$1234.50"),
        (0.005, "+$0.01"),
        (-0.001, "$0.00"),
        (0.001, "$0.00"),
        (-0.0, "$0.00"),
    ])
    def test_with_sign(self, value, expected):
        assert format_currency(value) == expected

    def test_without_sign(self):
        """show_sign=False drops only the plus sign."""
        assert format_currency(150.75, show_sign=False) == "$150.75"
        assert format_currency(-89.5, show_sign=False) == "-$89.50"

    def test_alias(self):
        """format_pnl is the same function."""
        assert format_pnl is format_currency
        assert format_pnl(150.75) == "+$150.75"


class TestFormatPercentage:
    """Tests for format_percentage."""

    @pytest.mark.parametrize("value,expected", [
        (12.34, "+12.34%"),
        (-5.67, "-5.67%"),
        (0, "0.00%"),
        (-2.4000000000000004, "-2.40%"),
        (-0.001, "0.00%"),
        (0.004, "0.00%"),
    ])
    def test_with_sign(self, value, expected):
        assert format_percentage(value) == expected

    def test_without_sign(self):
        assert format_percentage(66.666, show_sign=False) == "66.67%"


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
