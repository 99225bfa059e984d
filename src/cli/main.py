"""Main CLI entry point for confluence-space-export command.

This module provides the Typer application that serves as the entry point
for the confluence-space-export command-line tool. The tool has a single
command; behaviour is controlled with options.
"""

import logging
import sys
from datetime import datetime
from pathlib import Path
from typing import Optional

import typer

from src.cli.export_command import ExportCommand
from src.cli.output import OutputHandler

__version__ = "0.1.0"

app = typer.Typer(
    name="confluence-space-export",
    help="""Download every page of a Confluence space as JSON.

Settings are read from the environment (or a .env file):
  CONFLUENCE_BASE_URL   e.g. https://company.atlassian.net/wiki
  CONFLUENCE_SPACE_KEY  e.g. TEAM
  CONFLUENCE_AUTH       base64 of user:api_token

The JSON array is written to stdout; progress goes to stderr.""",
    add_completion=False,
    rich_markup_mode=None,  # Disable Rich markup to avoid compatibility issues
    no_args_is_help=False,
)

logger = logging.getLogger(__name__)


def _configure_logging(verbosity: int, logdir: Optional[str] = None) -> None:
    """Configure logging based on verbosity level.

    Configures only the 'src' namespace logger to avoid affecting third-party
    libraries. Log records always go to stderr, never stdout.

    Args:
        verbosity: Verbosity level (0=WARNING, 1=INFO, 2=DEBUG)
        logdir: Optional directory for log files (creates timestamped log file)
    """
    if verbosity == 0:
        level = logging.WARNING
    elif verbosity == 1:
        level = logging.INFO
    else:  # verbosity >= 2
        level = logging.DEBUG

    app_logger = logging.getLogger("src")
    app_logger.setLevel(level)
    app_logger.handlers.clear()

    log_format = "%(asctime)s [%(levelname)8s] %(message)s"
    date_format = "%Y-%m-%d %H:%M:%S"

    # Console handler only at debug level; progress lines come from OutputHandler
    if level == logging.DEBUG:
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setLevel(level)
        console_handler.setFormatter(logging.Formatter(log_format, datefmt=date_format))
        app_logger.addHandler(console_handler)
    else:
        # OutputHandler already reports errors; keep logging.lastResort from repeating them
        app_logger.addHandler(logging.NullHandler())

    if logdir:
        log_path = Path(logdir)
        log_path.mkdir(parents=True, exist_ok=True)

        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        log_file = log_path / f"confluence-space-export_{timestamp}.log"

        file_format = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(level)
        file_handler.setFormatter(logging.Formatter(file_format, datefmt=date_format))
        app_logger.addHandler(file_handler)

        logger.info(f"Logging to file: {log_file}")


@app.command()
def main_command(
    output: Optional[str] = typer.Option(
        None,
        "--output",
        "-o",
        help="Write the JSON array to this file instead of stdout",
        metavar="FILE",
    ),
    timeout: Optional[float] = typer.Option(
        None,
        "--timeout",
        help="Per-request timeout in seconds (default: no timeout)",
        min=0.1,
    ),
    logdir: Optional[str] = typer.Option(
        None,
        "--logdir",
        help="Directory for log files (creates timestamped log file)",
    ),
    verbosity: int = typer.Option(
        1,
        "--verbosity",
        "-v",
        help="Verbosity level: 0=errors only, 1=progress, 2=debug",
    ),
    no_color: bool = typer.Option(
        False,
        "--no-color",
        help="Disable colored output",
    ),
    version: bool = typer.Option(
        False,
        "--version",
        "-V",
        help="Show version and exit",
    ),
) -> None:
    """Download every page of a Confluence space as a JSON array."""
    if version:
        typer.echo(f"confluence-space-export version {__version__}")
        raise typer.Exit()

    _configure_logging(verbosity, logdir)

    output_handler = OutputHandler(verbosity=verbosity, no_color=no_color)
    export_cmd = ExportCommand(output_handler=output_handler)

    exit_code = export_cmd.run(output_path=output, timeout=timeout)
    raise typer.Exit(exit_code)


def main() -> None:
    """Main entry point for the CLI application.

    This function is called when the module is executed directly or
    when the console script is invoked.
    """
    app()


# Allow running as: python -m src.cli.main
if __name__ == "__main__":
    main()
