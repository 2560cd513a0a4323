"""Human-readable terminal report."""

from typing import Optional

from rich.color import ColorSystem

from .colorizer import format_score, paint
from .formatters import FormatterRegistry, default_registry
from .models import AggregationResultItem, AuditResult, Results


class PrettyRenderer:
    """Render a results tree as colorized text.

    Aggregations, items and sub-items are emitted in input order. String
    sub-items are resolved against ``results.audits``; a dangling key raises
    UnresolvedAuditError before any text is returned.
    """

    def __init__(
        self,
        formatters: Optional[FormatterRegistry] = None,
        color_system: Optional[ColorSystem] = ColorSystem.STANDARD,
    ):
        self.formatters = formatters if formatters is not None else default_registry()
        self.color_system = color_system

    def bold(self, text: str) -> str:
        return paint(text, "bold", self.color_system)

    def render(self, results: Results) -> str:
        header = self.bold(f"Lighthouse ({results.version}) results:")
        parts = [f"\n\n{header} {results.url}\n\n"]

        for aggregation in results.aggregations:
            parts.append(f"▫ {self.bold(aggregation.name)}\n\n")
            for item in aggregation.items:
                parts.append(self.render_item(results, item))

        return "".join(parts)

    def render_item(self, results: Results, item: AggregationResultItem) -> str:
        parts = []
        if item.name:
            score = ""
            if item.scored:
                score = format_score(item.percentage, "%", self.color_system)
            parts.append(f"{self.bold(item.name)}: {score}\n")

        for sub_item in item.sub_items:
            parts.append(self.render_audit(results.resolve(sub_item)))

        parts.append("\n")
        return "".join(parts)

    def render_audit(self, audit: AuditResult) -> str:
        line = f" ── {format_score(audit.score, color_system=self.color_system)} {audit.description}"
        if audit.display_value:
            line += f" ({self.bold(audit.display_value)})"
        parts = [f"{line}\n"]

        if audit.debug_string:
            parts.append(f"    {audit.debug_string}\n")

        info = audit.extended_info
        if info is not None and info.value:
            renderer = self.formatters.get_by_name(info.formatter).get_formatter("pretty")
            parts.append(renderer(info.value))

        return "".join(parts)


def render_pretty(
    results: Results,
    formatters: Optional[FormatterRegistry] = None,
    color: bool = True,
) -> str:
    """Render results as the pretty terminal report."""
    color_system = ColorSystem.STANDARD if color else None
    return PrettyRenderer(formatters, color_system).render(results)
