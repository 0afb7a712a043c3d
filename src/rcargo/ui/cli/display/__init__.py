"""Display management for CLI interface."""

from rcargo.ui.cli.display.cache_report import CacheReportDisplay

__all__ = ["CacheReportDisplay"]
