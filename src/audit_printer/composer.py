"""Compose the output string for a results tree in a given mode."""

import json
from typing import Optional

from loguru import logger

from .errors import InvalidModeError
from .formatters import FormatterRegistry
from .generators import ReportGenerator
from .models import Results
from .modes import OutputMode
from .pretty import render_pretty


def create_output(
    results: Results,
    mode: OutputMode,
    formatters: Optional[FormatterRegistry] = None,
    color: bool = True,
) -> str:
    """Create the results output in the format given by ``mode``.

    Args:
        results: The results tree
        mode: A resolved output mode (see modes.resolve_mode)
        formatters: Extended-info formatters, defaults to the built-ins
        color: Emit ANSI colors in pretty mode

    Returns:
        The complete output text
    """
    if not isinstance(mode, OutputMode):
        raise InvalidModeError(mode)

    logger.debug(f"Composing {mode.value} output for {results.url}")

    # HTML report
    if mode is OutputMode.HTML:
        return ReportGenerator(formatters).generate_html(results, inline=True)

    # JSON report
    if mode is OutputMode.JSON:
        return json.dumps(results.to_dict(), indent=2, ensure_ascii=False)

    # Pretty printed
    return render_pretty(results, formatters, color=color)
