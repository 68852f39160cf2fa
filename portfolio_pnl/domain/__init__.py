"""Domain Layer: Core business logic and entities.

This layer contains:
- models.py: Data structures (Trade, Portfolio)
- pnl.py: PNL series, aggregates and breakdowns
- formatting.py: Display formatting for amounts and percentages
- validation.py: Checks for the record-creation path
- metrics/: Risk-adjusted return metrics
"""

from portfolio_pnl.domain.pnl import (
    PnLPoint,
    PerformanceReport,
    TradeWithPnL,
    BestWorstTrades,
    MonthlyPnL,
    trade_pnl,
    effective_pnl,
    cumulative_pnl,
    recent_trades,
    total_pnl,
    average_pnl,
    total_volume,
    portfolio_performance,
    best_worst_trades,
    pnl_by_ticker,
    monthly_pnl,
)
from portfolio_pnl.domain.models import (
    Trade,
    Portfolio,
    normalize_ticker,
    new_trade,
    edit_trade,
)
from portfolio_pnl.domain.formatting import (
    format_currency,
    format_pnl,
    format_percentage,
)
from portfolio_pnl.domain.validation import (
    ValidationError,
    FormValidationResult,
    validate_portfolio_input,
    validate_trade_input,
)
from portfolio_pnl.domain.metrics import sharpe_ratio

__all__ = [
    # Models
    "Trade",
    "Portfolio",
    "normalize_ticker",
    "new_trade",
    "edit_trade",
    # PNL
    "PnLPoint",
    "PerformanceReport",
    "TradeWithPnL",
    "BestWorstTrades",
    "MonthlyPnL",
    "trade_pnl",
    "effective_pnl",
    "cumulative_pnl",
    "recent_trades",
    "total_pnl",
    "average_pnl",
    "total_volume",
    "portfolio_performance",
    "best_worst_trades",
    "pnl_by_ticker",
    "monthly_pnl",
    # Formatting
    "format_currency",
    "format_pnl",
    "format_percentage",
    # Validation
    "ValidationError",
    "FormValidationResult",
    "validate_portfolio_input",
    "validate_trade_input",
    # Metrics
    "sharpe_ratio",
]
