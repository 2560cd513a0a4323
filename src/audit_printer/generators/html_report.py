"""Generate a standalone HTML report from audit results."""

from typing import Any, Optional

from jinja2 import Environment, PackageLoader, select_autoescape
from markupsafe import Markup

from ..colorizer import format_number, score_tier
from ..formatters import FormatterRegistry, default_registry
from ..models import AggregationResultItem, AuditResult, Results


def score_class(score: Any) -> str:
    """CSS class for a score, mirroring the terminal color tiers."""
    if isinstance(score, bool):
        return "pass" if score else "fail"
    if not isinstance(score, (int, float)):
        return "info"
    return score_tier(score)


def score_label(score: Any, suffix: str = "") -> str:
    if isinstance(score, bool):
        return "✓" if score else "✘"
    if not isinstance(score, (int, float)):
        return str(score)
    return f"{format_number(score)}{suffix}"


def score_badge(score: Any, suffix: str = "") -> dict[str, str]:
    return {"css": score_class(score), "label": score_label(score, suffix)}


class ReportGenerator:
    """Build the HTML report document from the report.html template."""

    def __init__(self, formatters: Optional[FormatterRegistry] = None):
        self.formatters = formatters if formatters is not None else default_registry()
        self.env = Environment(
            loader=PackageLoader("audit_printer", "generators/templates"),
            autoescape=select_autoescape(["html"]),
        )

    def generate_html(self, results: Results, inline: bool = True) -> str:
        """Generate the report.

        Args:
            results: The results tree to render
            inline: Embed the stylesheet instead of linking report.css

        Returns:
            A complete HTML document
        """
        # sub-items are resolved before the template renders
        aggregations = [
            {
                "name": aggregation.name,
                "entries": [self._item(results, item) for item in aggregation.items],
            }
            for aggregation in results.aggregations
        ]

        template = self.env.get_template("report.html")
        return template.render(
            url=results.url,
            version=results.version,
            aggregations=aggregations,
            inline=inline,
        )

    def _item(self, results: Results, item: AggregationResultItem) -> dict[str, Any]:
        return {
            "name": item.name,
            "score": score_badge(item.percentage, "%") if item.scored else None,
            "audits": [self._audit(results.resolve(s)) for s in item.sub_items],
        }

    def _audit(self, audit: AuditResult) -> dict[str, Any]:
        details = Markup("")
        info = audit.extended_info
        if info is not None and info.value:
            renderer = self.formatters.get_by_name(info.formatter).get_formatter("html")
            # formatter html renderers return markup they have escaped themselves
            details = Markup(renderer(info.value))

        return {
            "score": score_badge(audit.score),
            "description": audit.description,
            "display_value": audit.display_value,
            "debug_string": audit.debug_string,
            "details": details,
        }
