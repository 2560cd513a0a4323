"""CLI interface for audit-printer."""

import asyncio
import sys

import click
from loguru import logger
from rich.console import Console
from rich.markup import escape

from . import __version__
from .config import PrinterConfig
from .errors import PrinterError
from .loader import load_results
from .modes import get_valid_output_options
from .printer import write


err_console = Console(stderr=True)

COMMANDS = ["print", "modes", "--help", "--version"]


def configure_logging(level: str) -> None:
    """Send log records to stderr so stdout carries only the report."""
    logger.remove()
    logger.add(
        sys.stderr,
        level=level,
        format="<green>{time:HH:mm:ss}</green> | <level>{level: <8}</level> | <level>{message}</level>",
    )


@click.group(invoke_without_command=True)
@click.pass_context
@click.version_option(version=__version__)
def cli(ctx):
    """Audit Printer - Render audit results as text, JSON or HTML.

    \b
    Quick start:
        audit-printer print results.json
        audit-printer print results.json --output html --output-path report.html

    \b
    Commands:
        print   Render a results file and write it out
        modes   List the available output modes
    """
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


@cli.command("print")
@click.argument("source")
@click.option("-o", "--output", "mode", type=click.Choice(get_valid_output_options()),
              default="pretty", show_default=True, help="Output mode")
@click.option("--output-path", default="", help="File to write to (default: stdout)")
@click.option("--no-color", is_flag=True, help="Disable colors in pretty output")
@click.option("-t", "--timeout", type=float, default=None, help="Request timeout in seconds for URL sources")
@click.option("-v", "--verbose", is_flag=True, help="Show debug logs on stderr")
def print_results(source: str, mode: str, output_path: str, no_color: bool,
                  timeout: float | None, verbose: bool):
    """Render audit results from SOURCE.

    SOURCE is a results JSON file, "-" for stdin, or an http(s) URL.

    \b
    Examples:
        audit-printer print results.json
        audit-printer print results.json -o json --output-path out.json
        audit-printer print https://example.com/results.json --no-color
    """
    try:
        config = PrinterConfig.from_env()
    except ValueError as e:
        raise click.BadParameter(str(e))
    if no_color:
        config.color = False
    if timeout is not None:
        config.timeout = timeout
    configure_logging("DEBUG" if verbose else config.log_level)

    try:
        results = load_results(source, timeout=config.timeout)
        asyncio.run(write(results, mode, output_path, config=config))
    except (PrinterError, OSError) as e:
        err_console.print(f"[red]Error:[/red] {escape(str(e))}", highlight=False)
        sys.exit(1)


@cli.command()
def modes():
    """List the available output modes."""
    for name in get_valid_output_options():
        click.echo(name)


# Convenience: allow `audit-printer FILE` as shortcut for `audit-printer print FILE`
def main():
    """Entry point that handles both `audit-printer FILE` and `audit-printer print FILE`."""
    args = sys.argv[1:]

    if args and args[0] not in COMMANDS and (args[0] == "-" or not args[0].startswith("-")):
        sys.argv.insert(1, "print")

    cli()


if __name__ == "__main__":
    main()
