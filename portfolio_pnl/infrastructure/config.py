"""Configuration: Centralized paths and settings.

This module provides:
- DataPaths: File paths for all data sources
- AnalysisConfig: Parameters for analysis and reporting

Directory Structure:
    data/
    ├── portfolios.csv      # id, name, initial_value
    ├── trades.csv          # id, ticker, entry_price, exit_price,
    │                       # quantity, date, portfolio_id, pnl
    └── reports/            # Exported report tables
"""

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class DataPaths:
    """File paths for data sources.

    Attributes:
        root: Project root directory
    """

    root: Path = Path(".")

    # --- Directories ---

    @property
    def data_dir(self) -> Path:
        """Main data directory."""
        return self.root / "data"

    @property
    def reports_dir(self) -> Path:
        """Exported reports."""
        return self.data_dir / "reports"

    # --- Files ---

    @property
    def portfolios_file(self) -> Path:
        """Portfolio records."""
        return self.data_dir / "portfolios.csv"

    @property
    def trades_file(self) -> Path:
        """Trade records for all portfolios."""
        return self.data_dir / "trades.csv"

    # --- Helper Methods ---

    def report_path(self, base_name: str, fmt: str) -> Path:
        """Path to an exported report file."""
        return self.reports_dir / f"{base_name}.{fmt}"

    def validate(self) -> list[str]:
        """Check which required paths are missing.

        Returns:
            List of missing paths (empty if all exist)
        """
        missing = []

        if not self.data_dir.exists():
            missing.append(str(self.data_dir))
        if not self.portfolios_file.exists():
            missing.append(str(self.portfolios_file))
        if not self.trades_file.exists():
            missing.append(str(self.trades_file))

        return missing

    def ensure_dirs(self) -> None:
        """Create all required directories."""
        self.data_dir.mkdir(parents=True, exist_ok=True)
        self.reports_dir.mkdir(parents=True, exist_ok=True)


@dataclass(frozen=True)
class AnalysisConfig:
    """Configuration for analysis and reporting.

    Attributes:
        risk_free_rate: Annualized risk-free rate for the Sharpe ratio
        recent_trades_limit: Number of trades in "recent trades" views
        output_formats: Default export formats ("csv", "parquet", "xlsx")
    """

    risk_free_rate: float = 0.02
    recent_trades_limit: int = 5
    output_formats: tuple[str, ...] = ("csv", "parquet")


# Default instances
DEFAULT_PATHS = DataPaths()
DEFAULT_CONFIG = AnalysisConfig()
