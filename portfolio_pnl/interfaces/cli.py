"""Command Line Interface for portfolio analytics.

Provides CLI access to analytics functions:
- performance: Portfolio performance summary
- monthly: PNL by calendar month
- tickers: PNL by ticker
- dashboard: Overview across all portfolios
- export: Write report tables to files
- verify: Verify data integrity

Usage:
    python -m portfolio_pnl performance PORTFOLIO_ID
    python -m portfolio_pnl monthly PORTFOLIO_ID
    python -m portfolio_pnl export PORTFOLIO_ID --formats csv,xlsx
    python -m portfolio_pnl verify
"""

import argparse
import logging
import sys
from pathlib import Path

from portfolio_pnl import __version__
from portfolio_pnl.domain import (
    effective_pnl,
    format_currency,
    format_percentage,
    portfolio_performance,
    trade_pnl,
)
from portfolio_pnl.infrastructure import (
    DataPaths,
    DEFAULT_CONFIG,
    RepositoryError,
)
from portfolio_pnl.application import (
    PortfolioAnalyzer,
    DashboardService,
    ReportService,
    ReportConfig,
)


def _paths(args: argparse.Namespace) -> DataPaths:
    return DataPaths(root=Path(args.root))


def _analyze(args: argparse.Namespace):
    """Run the analyzer; prints a message and returns None if not found."""
    analyzer = PortfolioAnalyzer(paths=_paths(args))
    result = analyzer.analyze(args.portfolio_id)
    if result is None:
        print(f"Portfolio not found: {args.portfolio_id}")
    return result


def cmd_performance(args: argparse.Namespace) -> int:
    """Show portfolio performance."""
    result = _analyze(args)
    if result is None:
        return 1

    perf = result.performance
    print(f"[{result.portfolio.id}] {result.portfolio.name}")
    print("=" * 50)
    print()

    print("Value")
    print(f"  Initial value:   {format_currency(perf.initial_value, show_sign=False)}")
    print(f"  Current value:   {format_currency(perf.current_value, show_sign=False)}")
    print(f"  Total P&L:       {format_currency(perf.total_pnl)}")
    print(f"  Return:          {format_percentage(perf.return_percentage)}")
    print()

    print("Trades")
    print(f"  Total trades:    {perf.total_trades:,}")
    print(f"  Profitable:      {perf.profitable_trades:,}")
    print(f"  Losing:          {perf.losing_trades:,}")
    print(f"  Win rate:        {format_percentage(perf.win_rate, show_sign=False)}")
    print(f"  Average P&L:     {format_currency(result.average_pnl)}")
    print(f"  Total volume:    {format_currency(result.total_volume, show_sign=False)}")
    print(f"  Sharpe ratio:    {result.sharpe_ratio:.4f}")

    best, worst = result.best_worst.best, result.best_worst.worst
    if best is not None and worst is not None:
        print()
        print("Best / Worst")
        print(f"  Best:  {best.ticker:<10} {format_currency(best.calculated_pnl)}")
        print(f"  Worst: {worst.ticker:<10} {format_currency(worst.calculated_pnl)}")

    if result.recent_trades:
        print()
        print("Recent trades")
        print("-" * 50)
        for trade in result.recent_trades:
            print(f"  {trade.date.isoformat()}  {trade.ticker:<10} "
                  f"{trade.quantity:>8,}  {format_currency(effective_pnl(trade)):>14}")

    return 0


def cmd_monthly(args: argparse.Namespace) -> int:
    """Show monthly PNL."""
    result = _analyze(args)
    if result is None:
        return 1

    print(f"[{result.portfolio.id}] {result.portfolio.name} - monthly P&L")
    print(f"{'Month':<16} {'Trades':>8} {'P&L':>14}")
    print("-" * 40)
    if not result.monthly:
        print("  No trades")
    for m in result.monthly:
        label = f"{m.month} {m.year}"
        print(f"{label:<16} {m.trade_count:>8} {format_currency(m.total_pnl):>14}")
    return 0


def cmd_tickers(args: argparse.Namespace) -> int:
    """Show PNL per ticker."""
    result = _analyze(args)
    if result is None:
        return 1

    print(f"[{result.portfolio.id}] {result.portfolio.name} - P&L by ticker")
    print(f"{'Ticker':<10} {'P&L':>14}")
    print("-" * 26)
    if not result.by_ticker:
        print("  No trades")
    ranked = sorted(result.by_ticker.items(), key=lambda kv: kv[1], reverse=True)
    for ticker, pnl in ranked:
        print(f"{ticker:<10} {format_currency(pnl):>14}")
    return 0


def cmd_dashboard(args: argparse.Namespace) -> int:
    """Show overview of all portfolios."""
    try:
        stats = DashboardService(paths=_paths(args)).get_stats()
    except RepositoryError as e:
        print(f"Error: {e}")
        return 1

    print(f"Portfolio Analytics v{__version__}")
    print("=" * 60)
    print(f"Portfolios:   {stats.total_portfolios}")
    print(f"Trades:       {stats.total_trades:,}")
    print(f"Total P&L:    {format_currency(stats.total_pnl)}")
    print()

    print(f"{'ID':<6} {'Name':<24} {'P&L':>14} {'Return':>10}")
    print("-" * 60)
    for s in stats.portfolios:
        print(f"{s.id:<6} {s.name[:24]:<24} {format_currency(s.pnl):>14} "
              f"{format_percentage(s.return_percentage):>10}")

    if stats.best_portfolio is not None and stats.worst_portfolio is not None:
        print()
        print(f"Best:  {stats.best_portfolio.name} "
              f"({format_currency(stats.best_portfolio.pnl)})")
        print(f"Worst: {stats.worst_portfolio.name} "
              f"({format_currency(stats.worst_portfolio.pnl)})")

    return 0


def cmd_export(args: argparse.Namespace) -> int:
    """Export report tables."""
    result = _analyze(args)
    if result is None:
        return 1

    paths = _paths(args)
    config = ReportConfig(
        output_dir=Path(args.output_dir) if args.output_dir else paths.reports_dir,
        output_formats=tuple(f.strip() for f in args.formats.split(",") if f.strip()),
    )
    base_name = args.name or f"portfolio_{result.portfolio.id}"

    try:
        saved = ReportService(config).save_report(result, base_name)
    except ValueError as e:
        print(f"Error: {e}")
        return 1

    for path in saved:
        print(f"Saved: {path}")
    return 0


def cmd_verify(args: argparse.Namespace) -> int:
    """Verify data integrity."""
    from portfolio_pnl.infrastructure.repositories import (
        PortfolioRepository,
        TradeRepository,
    )

    paths = _paths(args)
    print("Data verification")
    print("=" * 50)

    errors = []

    # 1. Check data files exist
    print("\n1. Checking data files...")
    missing = paths.validate()
    if missing:
        for m in missing:
            print(f"  x missing: {m}")
            errors.append(f"Missing file: {m}")
    else:
        print("  ok data files present")

    # 2. Load portfolios
    print("\n2. Checking portfolios...")
    portfolios = []
    try:
        portfolios = PortfolioRepository(paths).list_portfolios()
        print(f"  portfolios: {len(portfolios)}")
        non_positive = [p for p in portfolios if p.initial_value <= 0]
        if non_positive:
            print(f"  ! {len(non_positive)} portfolios with non-positive initial value")
    except RepositoryError as e:
        print(f"  x error: {e}")
        errors.append(str(e))

    # 3. Load trades
    print("\n3. Checking trades...")
    trades = []
    try:
        trades = TradeRepository(paths).get_trades()
        print(f"  trades: {len(trades):,}")
    except RepositoryError as e:
        print(f"  x error: {e}")
        errors.append(str(e))

    # 4. Orphans and stored PNL consistency
    if portfolios and trades:
        print("\n4. Checking references and stored P&L...")
        known = {p.id for p in portfolios}
        orphans = [t for t in trades if t.portfolio_id not in known]
        if orphans:
            print(f"  x {len(orphans)} trades reference unknown portfolios")
            errors.append("Orphan trades")
        else:
            print("  ok all trades belong to a portfolio")

        mismatched = [
            t for t in trades
            if t.pnl is not None
            and abs(t.pnl - trade_pnl(t.entry_price, t.exit_price, t.quantity)) > 0.005
        ]
        if mismatched:
            print(f"  ! {len(mismatched)} trades have stored P&L differing from prices")
        else:
            print("  ok stored P&L matches prices")

        total = sum(
            portfolio_performance(p, [t for t in trades if t.portfolio_id == p.id]).total_pnl
            for p in portfolios
        )
        print(f"  total P&L: {format_currency(total)}")

    print("\n" + "=" * 50)
    if errors:
        print(f"Found {len(errors)} problem(s)")
        return 1
    print("All checks passed")
    return 0


def main(argv: list[str] | None = None) -> int:
    """Main entry point for CLI."""
    parser = argparse.ArgumentParser(
        prog="portfolio_pnl",
        description="Portfolio Analytics - Trade PNL and Performance",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "--root",
        default=".",
        help="Project root containing the data/ directory",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable debug logging",
    )

    subparsers = parser.add_subparsers(dest="command", help="Commands")

    for name, help_text in (
        ("performance", "Show portfolio performance"),
        ("monthly", "Show P&L by month"),
        ("tickers", "Show P&L by ticker"),
    ):
        sub = subparsers.add_parser(name, help=help_text)
        sub.add_argument("portfolio_id", type=int, help="Portfolio id (e.g., 1)")

    subparsers.add_parser("dashboard", help="Show overview of all portfolios")

    export_parser = subparsers.add_parser("export", help="Export report tables")
    export_parser.add_argument("portfolio_id", type=int, help="Portfolio id")
    export_parser.add_argument(
        "-f", "--formats",
        default=",".join(DEFAULT_CONFIG.output_formats),
        help="Output formats (comma-separated: csv, parquet, xlsx)",
    )
    export_parser.add_argument(
        "-o", "--output-dir",
        default=None,
        help="Output directory (default: data/reports)",
    )
    export_parser.add_argument(
        "-n", "--name",
        default=None,
        help="Base filename without extension",
    )

    subparsers.add_parser("verify", help="Verify data integrity")

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if args.command is None:
        parser.print_help()
        return 0

    commands = {
        "performance": cmd_performance,
        "monthly": cmd_monthly,
        "tickers": cmd_tickers,
        "dashboard": cmd_dashboard,
        "export": cmd_export,
        "verify": cmd_verify,
    }

    try:
        return commands[args.command](args)
    except RepositoryError as e:
        print(f"Error: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
