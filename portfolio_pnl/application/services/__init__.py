"""Application Services for portfolio analytics.

Services orchestrate repository access to implement use cases.

Available services:
- PortfolioAnalyzer: Single portfolio analysis
- DashboardService: Cross-portfolio overview
- ReportService: Report table export
"""

from portfolio_pnl.application.services.portfolio_analysis import (
    PortfolioAnalyzer,
    PortfolioAnalysisResult,
    analyze_trades,
)
from portfolio_pnl.application.services.dashboard import (
    DashboardService,
    DashboardStats,
    PortfolioSummary,
)
from portfolio_pnl.application.services.report import (
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
