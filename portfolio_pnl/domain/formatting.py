"""Display formatting for PNL values.

Output contract relied on by dashboards and reports:
- Always two decimal places
- "+" only for values that stay positive after rounding, when show_sign is set
- Negative values carry "-" ahead of the currency symbol ("-$89.50")
- Values that round to zero print unsigned ("$0.00", "0.00%")
"""


def _to_cents(value: float) -> float:
    """Round to two decimals, folding -0.0 into 0.0."""
    return round(value, 2) or 0.0


def format_currency(value: float, show_sign: bool = True) -> str:
    """Format a PNL amount as ±$X.XX.

    Example:
        >>> format_currency(150.75)
        '+$150.75'
        >>> format_currency(-89.5)
        '-$89.50'
    """
    value = _to_cents(value)
    sign = "+" if show_sign and value > 0 else ""
    if value < 0:
        return f"-${-value:.2f}"
    return f"{sign}${value:.2f}"


# Name used by the trade list and dashboard views
format_pnl = format_currency


def format_percentage(value: float, show_sign: bool = True) -> str:
    """Format a percentage as ±X.XX%.

    Example:
        >>> format_percentage(12.34)
        '+12.34%'
    """
    value = _to_cents(value)
    sign = "+" if show_sign and value > 0 else ""
    return f"{sign}{value:.2f}%"
