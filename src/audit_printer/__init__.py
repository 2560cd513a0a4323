"""audit-printer - Render and deliver audit results as pretty text, JSON or HTML."""

__version__ = "0.1.0"

from .models import AggregationResultItem, Aggregation, AuditRef, AuditResult, ExtendedInfo, Results
from .modes import OutputMode, get_valid_output_options
from .composer import create_output
from .printer import write

__all__ = [
    "Aggregation",
    "AggregationResultItem",
    "AuditRef",
    "AuditResult",
    "ExtendedInfo",
    "OutputMode",
    "Results",
    "create_output",
    "get_valid_output_options",
    "write",
]
