"""Document generators for audit results."""

from .html_report import ReportGenerator

__all__ = ["ReportGenerator"]
