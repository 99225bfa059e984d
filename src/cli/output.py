"""Terminal output handling using Rich library.

This module provides the OutputHandler class for all diagnostic output of the
CLI. Everything it prints goes to stderr, leaving stdout free for the JSON
document. Supports verbosity levels and the --no-color flag.
"""

from typing import List

from rich.console import Console
from rich.markup import escape

from src.models.confluence_page import ConfluencePage


class OutputHandler:
    """Handles all diagnostic terminal output using Rich library.

    Messages are printed literally (Rich markup in page titles or API error
    bodies is escaped).

    Attributes:
        verbosity: Verbosity level (0=errors only, 1=progress, 2=debug)
        console: Rich Console writing to stderr

    Example:
        >>> handler = OutputHandler(verbosity=1, no_color=False)
        >>> handler.info("Downloading pages...")
        >>> handler.success("Done")
    """

    def __init__(self, verbosity: int = 0, no_color: bool = False):
        """Initialize output handler.

        Args:
            verbosity: Verbosity level (0=errors only, 1=progress, 2=debug)
            no_color: Disable color output if True
        """
        self.verbosity = verbosity
        self.console = Console(
            stderr=True,
            no_color=no_color,
            highlight=False,
            soft_wrap=True,  # Never break long URLs across lines
        )

    def success(self, message: str) -> None:
        """Display success message in green (only if verbosity >= 1)."""
        if self.verbosity >= 1:
            self.console.print(f"[green]✓[/green] {escape(message)}")

    def error(self, message: str) -> None:
        """Display error message in red.

        Args:
            message: Error message to display
        """
        self.console.print(f"[red]✗[/red] {escape(message)}", style="red")

    def info(self, message: str) -> None:
        """Display info message (only if verbosity >= 1).

        Args:
            message: Info message to display
        """
        if self.verbosity >= 1:
            self.console.print(escape(message))

    def print_download_summary(self, space_key: str, pages: List[ConfluencePage]) -> None:
        """Display the downloaded page count and one line per page.

        Args:
            space_key: Space the pages were downloaded from
            pages: Downloaded pages in API order
        """
        self.info(f"Downloaded {len(pages)} pages from Confluence space '{space_key}':")
        for page in pages:
            self.info(f"  - [{page.page_id}] {page.title}")
