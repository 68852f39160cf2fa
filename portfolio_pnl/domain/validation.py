"""Input validation for the record-creation path.

Checks applied before a portfolio or trade is persisted. The analytics in
domain/pnl.py never call these; they accept whatever records they are
given.

Validators collect every problem instead of stopping at the first, so a
form can show all messages at once.
"""

from __future__ import annotations

import math
import re
from dataclasses import dataclass, field
from datetime import date
from typing import Any


# =============================================================================
# Rules
# =============================================================================

@dataclass(frozen=True)
class PortfolioRules:
    name_min_length: int = 2
    name_max_length: int = 100
    initial_value_min: float = 0.01
    initial_value_max: float = 10_000_000


@dataclass(frozen=True)
class TradeRules:
    ticker_min_length: int = 1
    ticker_max_length: int = 10
    ticker_pattern: re.Pattern = re.compile(r"^[A-Z0-9]{1,10}$")
    price_min: float = 0.01
    price_max: float = 100_000
    quantity_min: int = 1
    quantity_max: int = 1_000_000
    date_min_years_ago: int = 10


PORTFOLIO_RULES = PortfolioRules()
TRADE_RULES = TradeRules()

MESSAGES = {
    "required": "This field is required",
    "invalid_number": "Must be a valid number",
    "invalid_integer": "Must be an integer",
    "invalid_ticker": "Symbol must contain only letters and numbers (e.g.: AAPL, GOOGL)",
    "future_date": "Date cannot be in the future",
}


def _too_short(n: int) -> str:
    return f"Must have at least {n} characters"


def _too_long(n: int) -> str:
    return f"Must have at most {n} characters"


def _too_small(n: float) -> str:
    return f"Must be greater than {n}"


def _too_large(n: float) -> str:
    return f"Must be less than {n}"


def _past_date(years: int) -> str:
    return f"Date cannot be more than {years} years ago"


# =============================================================================
# Results
# =============================================================================

@dataclass(frozen=True, slots=True)
class ValidationError:
    """A single field-level problem."""
    field: str
    message: str
    value: Any = None


@dataclass(frozen=True)
class FormValidationResult:
    """Outcome of validating one form."""
    errors: tuple[ValidationError, ...] = field(default_factory=tuple)

    @property
    def is_valid(self) -> bool:
        return not self.errors

    def messages(self) -> dict[str, str]:
        """First message per field."""
        result: dict[str, str] = {}
        for err in self.errors:
            result.setdefault(err.field, err.message)
        return result


# =============================================================================
# Helpers
# =============================================================================

def _is_number(value: Any) -> bool:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    return math.isfinite(value)


def _check_range(
    errors: list[ValidationError],
    field_name: str,
    value: Any,
    low: float,
    high: float,
) -> None:
    if value is None:
        errors.append(ValidationError(field_name, MESSAGES["required"], value))
    elif not _is_number(value):
        errors.append(ValidationError(field_name, MESSAGES["invalid_number"], value))
    elif value < low:
        errors.append(ValidationError(field_name, _too_small(low), value))
    elif value > high:
        errors.append(ValidationError(field_name, _too_large(high), value))


def _years_before(d: date, years: int) -> date:
    try:
        return d.replace(year=d.year - years)
    except ValueError:
        # Feb 29 in a non-leap target year
        return d.replace(year=d.year - years, day=28)


# =============================================================================
# Validators
# =============================================================================

def validate_portfolio_input(
    name: str | None,
    initial_value: float | None,
    rules: PortfolioRules = PORTFOLIO_RULES,
) -> FormValidationResult:
    """Validate the fields of a new or updated portfolio."""
    errors: list[ValidationError] = []

    stripped = (name or "").strip()
    if not stripped:
        errors.append(ValidationError("name", MESSAGES["required"], name))
    elif len(stripped) < rules.name_min_length:
        errors.append(ValidationError("name", _too_short(rules.name_min_length), name))
    elif len(stripped) > rules.name_max_length:
        errors.append(ValidationError("name", _too_long(rules.name_max_length), name))

    _check_range(
        errors, "initial_value", initial_value,
        rules.initial_value_min, rules.initial_value_max,
    )

    return FormValidationResult(errors=tuple(errors))


def validate_trade_input(
    ticker: str | None,
    entry_price: float | None,
    exit_price: float | None,
    quantity: int | None,
    trade_date: date | None,
    portfolio_id: int | None,
    today: date | None = None,
    rules: TradeRules = TRADE_RULES,
) -> FormValidationResult:
    """Validate the fields of a new trade.

    The ticker is checked after normalization (trimmed, uppercase), which
    is how it will be stored.

    Args:
        ticker: Raw ticker as entered
        entry_price: Entry price per unit
        exit_price: Exit price per unit
        quantity: Units traded
        trade_date: Trade date
        portfolio_id: Owning portfolio
        today: Reference date for the future/past checks (default: today)
        rules: Limits to apply

    Returns:
        FormValidationResult listing every failing field
    """
    errors: list[ValidationError] = []
    today = today or date.today()

    normalized = (ticker or "").strip().upper()
    if not normalized:
        errors.append(ValidationError("ticker", MESSAGES["required"], ticker))
    elif len(normalized) > rules.ticker_max_length:
        errors.append(ValidationError("ticker", _too_long(rules.ticker_max_length), ticker))
    elif not rules.ticker_pattern.match(normalized):
        errors.append(ValidationError("ticker", MESSAGES["invalid_ticker"], ticker))

    _check_range(errors, "entry_price", entry_price, rules.price_min, rules.price_max)
    _check_range(errors, "exit_price", exit_price, rules.price_min, rules.price_max)

    if quantity is not None and _is_number(quantity) and quantity != int(quantity):
        errors.append(ValidationError("quantity", MESSAGES["invalid_integer"], quantity))
    else:
        _check_range(
            errors, "quantity", quantity, rules.quantity_min, rules.quantity_max,
        )

    if trade_date is None:
        errors.append(ValidationError("date", MESSAGES["required"], trade_date))
    elif trade_date > today:
        errors.append(ValidationError("date", MESSAGES["future_date"], trade_date))
    elif trade_date < _years_before(today, rules.date_min_years_ago):
        errors.append(
            ValidationError("date", _past_date(rules.date_min_years_ago), trade_date)
        )

    if portfolio_id is None or not _is_number(portfolio_id) or portfolio_id < 1:
        errors.append(ValidationError("portfolio_id", MESSAGES["required"], portfolio_id))

    return FormValidationResult(errors=tuple(errors))
