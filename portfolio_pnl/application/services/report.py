"""Report Service: Export portfolio analysis tables.

Turns a PortfolioAnalysisResult into report tables and writes them out:
1. cumulative - chronological PNL series (chart data)
2. monthly    - PNL per calendar month
3. tickers    - PNL per ticker, highest first

Formats:
- csv / parquet: one file per table ({base_name}_{table}.{fmt})
- xlsx: a single workbook with one sheet per table
"""

import logging
from dataclasses import dataclass
from pathlib import Path

import polars as pl

from portfolio_pnl.application.services.portfolio_analysis import (
    PortfolioAnalysisResult,
)

logger = logging.getLogger(__name__)

SUPPORTED_FORMATS = ("csv", "parquet", "xlsx")

# Columns rendered with a money format in Excel
PNL_COLUMNS = ("value", "cumulative_value", "total_pnl", "pnl")


# =============================================================================
# Report Configuration
# =============================================================================

@dataclass(frozen=True)
class ReportConfig:
    """Configuration for report export.

    Attributes:
        output_dir: Directory for output files
        output_formats: Formats to write ("csv", "parquet", "xlsx")
    """
    output_dir: Path = Path(".")
    output_formats: tuple[str, ...] = ("csv", "parquet")


# =============================================================================
# Report Service
# =============================================================================

class ReportService:
    """Service for exporting portfolio reports.

    Example:
        >>> service = ReportService(ReportConfig(output_dir=Path("reports")))
        >>> tables = service.build_tables(result)
        >>> service.save_report(result, "portfolio_1")
    """

    def __init__(self, config: ReportConfig | None = None):
        self._config = config or ReportConfig()

    def build_tables(self, result: PortfolioAnalysisResult) -> dict[str, pl.DataFrame]:
        """Build the report tables.

        Returns:
            Dict mapping table name to DataFrame
        """
        cumulative = pl.DataFrame(
            {
                "date": [p.date for p in result.cumulative],
                "ticker": [p.ticker for p in result.cumulative],
                "value": [float(p.value) for p in result.cumulative],
                "cumulative_value": [float(p.cumulative_value) for p in result.cumulative],
            },
            schema={
                "date": pl.Date,
                "ticker": pl.Utf8,
                "value": pl.Float64,
                "cumulative_value": pl.Float64,
            },
        )

        monthly = pl.DataFrame(
            {
                "year": [m.year for m in result.monthly],
                "month": [m.month for m in result.monthly],
                "total_pnl": [float(m.total_pnl) for m in result.monthly],
                "trade_count": [m.trade_count for m in result.monthly],
            },
            schema={
                "year": pl.Int64,
                "month": pl.Utf8,
                "total_pnl": pl.Float64,
                "trade_count": pl.Int64,
            },
        )

        tickers = pl.DataFrame(
            {
                "ticker": list(result.by_ticker.keys()),
                "pnl": [float(v) for v in result.by_ticker.values()],
            },
            schema={"ticker": pl.Utf8, "pnl": pl.Float64},
        ).sort(["pnl", "ticker"], descending=[True, False])

        return {"cumulative": cumulative, "monthly": monthly, "tickers": tickers}

    def save_report(
        self,
        result: PortfolioAnalysisResult,
        base_name: str = "portfolio_report",
        formats: tuple[str, ...] | None = None,
    ) -> list[Path]:
        """Save report tables to the specified formats.

        Args:
            result: Analysis result to export
            base_name: Base filename without extension
            formats: Output formats (uses config if not provided)

        Returns:
            List of saved file paths

        Raises:
            ValueError: If a format is not supported
        """
        formats = formats or self._config.output_formats
        unknown = [f for f in formats if f not in SUPPORTED_FORMATS]
        if unknown:
            raise ValueError(f"Unknown format: {', '.join(unknown)}")

        output_dir = self._config.output_dir
        output_dir.mkdir(parents=True, exist_ok=True)
        tables = self.build_tables(result)
        saved = []

        for fmt in formats:
            if fmt == "xlsx":
                path = output_dir / f"{base_name}.xlsx"
                self._save_excel(tables, path)
                saved.append(path)
                continue

            for table_name, df in tables.items():
                path = output_dir / f"{base_name}_{table_name}.{fmt}"
                if fmt == "csv":
                    df.write_csv(path)
                else:
                    df.write_parquet(path)
                saved.append(path)

        logger.info("Saved %d report files to %s", len(saved), output_dir)
        return saved

    def _save_excel(self, tables: dict[str, pl.DataFrame], path: Path) -> None:
        """Save all tables to one Excel workbook, one sheet per table."""
        import xlsxwriter

        workbook = xlsxwriter.Workbook(str(path))
        for table_name, df in tables.items():
            worksheet = workbook.add_worksheet(table_name)
            self._write_sheet(workbook, worksheet, df)
        workbook.close()

    def _write_sheet(self, workbook, worksheet, df: pl.DataFrame) -> None:
        """Write a DataFrame to an Excel worksheet."""
        header_fmt = workbook.add_format({
            "bold": True,
            "bg_color": "#4472C4",
            "font_color": "white",
            "border": 1,
        })
        pnl_fmt = workbook.add_format({"num_format": "#,##0.00"})

        columns = df.columns
        for col_idx, col_name in enumerate(columns):
            worksheet.write(0, col_idx, col_name, header_fmt)

        for row_idx, row in enumerate(df.iter_rows(named=True), 1):
            for col_idx, col_name in enumerate(columns):
                value = row[col_name]
                if value is None:
                    worksheet.write(row_idx, col_idx, "")
                elif col_name in PNL_COLUMNS:
                    worksheet.write(row_idx, col_idx, value, pnl_fmt)
                elif col_name == "date":
                    worksheet.write(row_idx, col_idx, value.isoformat())
                else:
                    worksheet.write(row_idx, col_idx, value)

        for col_idx, col_name in enumerate(columns):
            worksheet.set_column(col_idx, col_idx, max(len(col_name), 10))
