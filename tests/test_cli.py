"""Unit tests for interfaces/cli.py.

Tests verify:
1. CLI commands execute without errors
2. Output format is correct
3. Error handling works properly
"""

import pytest

from portfolio_pnl.interfaces.cli import main


class TestCliBasic:
    """Basic CLI tests."""

    def test_version(self, capsys):
        """--version should show version."""
        with pytest.raises(SystemExit) as exc:
            main(["--version"])
        assert exc.value.code == 0

    def test_help(self, capsys):
        """No command should show help."""
        result = main([])
        assert result == 0

    def test_invalid_command(self):
        """Invalid command should fail."""
        with pytest.raises(SystemExit):
            main(["invalid_command"])


class TestPerformanceCommand:
    """Tests for performance command."""

    def test_performance(self, data_root, capsys):
        result = main(["--root", str(data_root), "performance", "1"])
        assert result == 0

        out = capsys.readouterr().out
        assert "Test Portfolio" in out
        assert "-$240.00" in out
        assert "-2.40%" in out
        assert "$9760.00" in out
        assert "66.67%" in out

    def test_performance_unknown(self, data_root, capsys):
        result = main(["--root", str(data_root), "performance", "99"])
        assert result == 1
        assert "Portfolio not found" in capsys.readouterr().out

    def test_performance_missing_data(self, tmp_path, capsys):
        """Missing data files should be reported, not raised."""
        result = main(["--root", str(tmp_path), "performance", "1"])
        assert result == 1
        assert "Error" in capsys.readouterr().out


class TestBreakdownCommands:
    """Tests for monthly and tickers commands."""

    def test_monthly(self, data_root, capsys):
        assert main(["--root", str(data_root), "monthly", "2"]) == 0
        out = capsys.readouterr().out
        assert "February 2024" in out
        assert "March 2024" in out
        assert out.index("February") < out.index("March")

    def test_tickers(self, data_root, capsys):
        assert main(["--root", str(data_root), "tickers", "1"]) == 0
        out = capsys.readouterr().out
        assert out.index("MSFT") < out.index("AAPL") < out.index("GOOGL")

    def test_tickers_empty(self, data_root, capsys):
        assert main(["--root", str(data_root), "tickers", "3"]) == 0
        assert "No trades" in capsys.readouterr().out


class TestDashboardCommand:
    """Tests for dashboard command."""

    def test_dashboard(self, data_root, capsys):
        assert main(["--root", str(data_root), "dashboard"]) == 0
        out = capsys.readouterr().out
        assert "Portfolios:   3" in out
        assert "Best:  Growth" in out


class TestExportCommand:
    """Tests for export command."""

    def test_export_csv(self, data_root, tmp_path, capsys):
        out_dir = tmp_path / "out"
        result = main([
            "--root", str(data_root), "export", "1",
            "-f", "csv", "-o", str(out_dir),
        ])
        assert result == 0
        assert (out_dir / "portfolio_1_cumulative.csv").exists()
        assert "Saved:" in capsys.readouterr().out

    def test_export_bad_format(self, data_root, capsys):
        result = main(["--root", str(data_root), "export", "1", "-f", "pdf"])
        assert result == 1


class TestVerifyCommand:
    """Tests for verify command."""

    def test_verify_passes(self, data_root, capsys):
        assert main(["--root", str(data_root), "verify"]) == 0
        out = capsys.readouterr().out
        assert "Data verification" in out
        assert "All checks passed" in out

    def test_verify_missing_data(self, tmp_path, capsys):
        assert main(["--root", str(tmp_path), "verify"]) == 1

    def test_verify_orphans(self, data_root, capsys):
        trades = data_root / "data" / "trades.csv"
        trades.write_text(
            trades.read_text() + "6,AMD,100,110,1,2024-04-01,42,\n"
        )
        assert main(["--root", str(data_root), "verify"]) == 1
        assert "unknown portfolios" in capsys.readouterr().out
