"""Deliver composed output to stdout or a file."""

import asyncio
import sys
from pathlib import Path
from typing import Optional

from loguru import logger

from .composer import create_output
from .config import DEFAULT_STDOUT_DELAY, PrinterConfig
from .formatters import FormatterRegistry
from .models import Results
from .modes import OutputMode, mode_name, resolve_mode

STDOUT = "stdout"


def check_output_path(path: Optional[str]) -> str:
    """Verify output path to use, either stdout or a file path."""
    if not path:
        logger.warning("Printer: No output path set; using stdout")
        return STDOUT
    return path


async def write_to_stdout(output: str, delay: float = DEFAULT_STDOUT_DELAY) -> None:
    """Write the output to stdout, followed by a newline."""
    # small delay so debug logs on the terminal are flushed first
    await asyncio.sleep(delay)
    sys.stdout.write(f"{output}\n")
    sys.stdout.flush()


async def write_file(file_path: str, output: str, mode: OutputMode) -> None:
    """Write the output to a file, replacing any existing content.

    The parent directory must already exist.
    """
    path = Path(file_path)
    await asyncio.to_thread(path.write_text, output, encoding="utf-8", newline="")
    logger.info(f"Printer: {mode_name(mode)} output written to {file_path}")


async def write(
    results: Results,
    mode: str,
    path: Optional[str] = "",
    config: Optional[PrinterConfig] = None,
    formatters: Optional[FormatterRegistry] = None,
) -> Results:
    """Write the results in the given mode to stdout or a file.

    Args:
        results: The results tree
        mode: Output mode name ("pretty", "json" or "html")
        path: Destination file; empty means stdout
        config: Delay and color settings, defaults to PrinterConfig()
        formatters: Extended-info formatters

    Returns:
        The same results object, for chaining

    Raises:
        InvalidModeError: mode is not a valid output mode; nothing is written
        UnresolvedAuditError: a sub-item references a missing audit
        OSError: the file could not be written
    """
    config = config or PrinterConfig()
    output_mode = resolve_mode(mode)
    output_path = check_output_path(path)

    output = create_output(results, output_mode, formatters, color=config.color)

    if output_path == STDOUT:
        await write_to_stdout(output, delay=config.stdout_delay)
    else:
        await write_file(output_path, output, output_mode)

    return results
