"""Application Layer: Use cases and service orchestration.

This layer contains:
- services/: Business logic orchestration
  - portfolio_analysis.py: Single portfolio analysis
  - dashboard.py: Cross-portfolio overview
  - report.py: Report export
"""

from portfolio_pnl.application.services import (
    PortfolioAnalyzer,
    PortfolioAnalysisResult,
    analyze_trades,
    DashboardService,
    DashboardStats,
    PortfolioSummary,
    ReportService,
    ReportConfig,
)

__all__ = [
    "PortfolioAnalyzer",
    "PortfolioAnalysisResult",
    "analyze_trades",
    "DashboardService",
    "DashboardStats",
    "PortfolioSummary",
    "ReportService",
    "ReportConfig",
]
