"""Extended-info formatters.

Audits can carry extra detail (``extendedInfo``) naming the formatter that
knows how to display it. Each formatter exposes one renderer per output
mode; the registry looks formatters up by name.
"""

from typing import Any, Callable, Iterable

from ..errors import UnknownFormatterError
from .null import null_formatter
from .url_list import url_list_formatter

Renderer = Callable[[Any], str]


class Formatter:
    """A named set of per-mode renderers."""

    def __init__(self, name: str, renderers: dict[str, Renderer]):
        self.name = name
        self._renderers = dict(renderers)

    def get_formatter(self, mode: str) -> Renderer:
        """Get the renderer for an output mode ("pretty", "html")."""
        try:
            return self._renderers[mode]
        except KeyError:
            raise UnknownFormatterError(
                f"Formatter {self.name!r} has no {mode!r} renderer"
            ) from None


class FormatterRegistry:
    """Formatters by name."""

    def __init__(self, formatters: Iterable[Formatter] = ()):
        self._formatters: dict[str, Formatter] = {}
        for formatter in formatters:
            self.register(formatter)

    def register(self, formatter: Formatter) -> None:
        self._formatters[formatter.name] = formatter

    def get_by_name(self, name: str) -> Formatter:
        try:
            return self._formatters[name]
        except KeyError:
            raise UnknownFormatterError(f"Unknown formatter: {name!r}") from None

    def names(self) -> list[str]:
        return sorted(self._formatters)


def default_registry() -> FormatterRegistry:
    """Registry holding the built-in formatters."""
    return FormatterRegistry([
        Formatter("null", null_formatter()),
        Formatter("url-list", url_list_formatter()),
    ])


__all__ = [
    "Formatter",
    "FormatterRegistry",
    "Renderer",
    "default_registry",
]
