"""Output modes."""

from enum import Enum

from .errors import InvalidModeError


class OutputMode(Enum):
    """Acceptable output modes.

    pretty: colorized terminal report
    json: indented JSON dump of the results
    html: self-contained HTML report
    """
    PRETTY = "pretty"
    JSON = "json"
    HTML = "html"


def resolve_mode(name: str) -> OutputMode:
    """Get the output mode for a mode name."""
    if isinstance(name, OutputMode):
        return name
    try:
        return OutputMode(name)
    except ValueError:
        raise InvalidModeError(name) from None


def mode_name(mode: OutputMode) -> str:
    """Get the canonical name of an output mode."""
    return mode.value


def get_valid_output_options() -> list[str]:
    """Names of all valid output modes, in display order."""
    return [mode.value for mode in OutputMode]
