"""Formatter for lists of URLs (e.g. offending resources)."""

from html import escape
from typing import Any


def _urls(value: Any) -> list[str]:
    """Accept a list of URLs or a newline-separated string."""
    if isinstance(value, str):
        return [line.strip() for line in value.splitlines() if line.strip()]
    urls = []
    for entry in value or []:
        # Entries may be objects like {"url": ..., "label": ...}
        if isinstance(entry, dict):
            entry = entry.get("url", "")
        if entry:
            urls.append(str(entry))
    return urls


def render_pretty(value: Any) -> str:
    return "".join(f"      {url}\n" for url in _urls(value))


def render_html(value: Any) -> str:
    urls = _urls(value)
    if not urls:
        return ""
    items = "".join(f"<li>{escape(url)}</li>" for url in urls)
    return f'<ul class="url-list">{items}</ul>'


def url_list_formatter() -> dict:
    return {"pretty": render_pretty, "html": render_html}
