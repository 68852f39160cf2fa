"""Domain Models: Core data structures for portfolio analytics.

These models represent the fundamental business entities:
- Trade: A closed round-trip trade with entry/exit prices
- Portfolio: A capital base that owns a set of trades

Design Principles:
- Immutable (frozen dataclass); analytics never mutate their inputs
- No validation in the model itself; see domain/validation.py for the
  checks applied on the record-creation path
- Optional precomputed PNL: a stored value always wins over derivation
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from datetime import date

from portfolio_pnl.domain.pnl import trade_pnl


@dataclass(frozen=True, slots=True)
class Trade:
    """A single closed trade.

    Attributes:
        id: Unique trade identifier
        ticker: Instrument symbol, normally uppercase alphanumeric (e.g., "AAPL")
        entry_price: Price per unit when the position was opened
        exit_price: Price per unit when the position was closed
        quantity: Number of units traded
        date: Calendar date of the trade
        portfolio_id: Owning portfolio identifier
        pnl: Precomputed profit/loss, or None to derive it on demand

    Example:
        >>> trade = Trade(
        ...     id=1, ticker="AAPL", entry_price=150.0, exit_price=160.0,
        ...     quantity=10, date=date(2024, 1, 15), portfolio_id=1,
        ... )
        >>> trade.with_pnl().pnl
        100.0
    """

    id: int
    ticker: str
    entry_price: float
    exit_price: float
    quantity: int
    date: date
    portfolio_id: int
    pnl: float | None = None

    @property
    def has_pnl(self) -> bool:
        """Whether a precomputed PNL is attached."""
        return self.pnl is not None

    @property
    def total_volume(self) -> float:
        """Capital committed at entry (entry_price × quantity)."""
        return self.entry_price * self.quantity

    def with_pnl(self) -> Trade:
        """Return a copy with pnl filled in (unchanged if already present)."""
        if self.pnl is not None:
            return self
        return replace(
            self,
            pnl=trade_pnl(self.entry_price, self.exit_price, self.quantity),
        )

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "ticker": self.ticker,
            "entry_price": self.entry_price,
            "exit_price": self.exit_price,
            "quantity": self.quantity,
            "date": self.date.isoformat(),
            "portfolio_id": self.portfolio_id,
            "pnl": self.pnl,
        }


@dataclass(frozen=True, slots=True)
class Portfolio:
    """An investment portfolio.

    Attributes:
        id: Unique portfolio identifier
        name: Display label
        initial_value: Capital base against which returns are measured
        trades: Associated trades, when loaded together with the portfolio
    """

    id: int
    name: str
    initial_value: float
    trades: tuple[Trade, ...] = ()

    @property
    def trade_count(self) -> int:
        return len(self.trades)


def normalize_ticker(ticker: str) -> str:
    """Normalize a ticker symbol as stored (trimmed, uppercase)."""
    return ticker.strip().upper()


def new_trade(
    id: int,
    ticker: str,
    entry_price: float,
    exit_price: float,
    quantity: int,
    date: date,
    portfolio_id: int,
) -> Trade:
    """Build a trade for persistence, computing its PNL once.

    The stored pnl uses the same formula as the analytics, so persisted
    and derived values agree.

    Args:
        id: Trade identifier assigned by the store
        ticker: Raw ticker as entered; normalized here
        entry_price: Entry price per unit
        exit_price: Exit price per unit
        quantity: Units traded
        date: Trade date
        portfolio_id: Owning portfolio

    Returns:
        Trade with normalized ticker and pnl populated
    """
    return Trade(
        id=id,
        ticker=normalize_ticker(ticker),
        entry_price=entry_price,
        exit_price=exit_price,
        quantity=quantity,
        date=date,
        portfolio_id=portfolio_id,
        pnl=trade_pnl(entry_price, exit_price, quantity),
    )


def edit_trade(trade: Trade, **changes) -> Trade:
    """Apply field changes to a stored trade, recomputing its PNL.

    The stored pnl always reflects the edited prices and quantity, so an
    edit never leaves a stale value behind for effective_pnl to pick up.

    Example:
        >>> edited = edit_trade(trade, exit_price=170.0)
        >>> edited.pnl
        200.0
    """
    if "pnl" in changes:
        raise TypeError("pnl is derived and cannot be edited directly")
    if "ticker" in changes:
        changes["ticker"] = normalize_ticker(changes["ticker"])
    edited = replace(trade, **changes)
    return replace(
        edited,
        pnl=trade_pnl(edited.entry_price, edited.exit_price, edited.quantity),
    )
