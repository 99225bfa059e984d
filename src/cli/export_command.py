"""Export command orchestration for CLI.

This module provides the ExportCommand class that runs the whole export:
load settings, download every page of the space, print a summary to stderr,
and write the pages as a JSON array to stdout (or a file).
"""

import json
import logging
import sys
from pathlib import Path
from typing import List, Optional, TextIO

from src.cli.errors import OutputError
from src.cli.models import ExitCode
from src.cli.output import OutputHandler
from src.confluence_client.auth import Authenticator
from src.confluence_client.errors import (
    APIStatusError,
    ConfigurationError,
    ExportError,
    PageFetchError,
    TransportError,
)
from src.confluence_client.page_fetcher import PageFetcher
from src.confluence_client.paginator import download_all_pages
from src.models.confluence_page import ConfluencePage

logger = logging.getLogger(__name__)

AUTH_STATUSES = (401, 403)


def serialize_pages(pages: List[ConfluencePage]) -> str:
    """Serialize pages as a pretty-printed JSON array.

    Raises:
        OutputError: If the pages cannot be encoded
    """
    try:
        return json.dumps([page.to_dict() for page in pages], indent=2, ensure_ascii=False)
    except (TypeError, ValueError) as e:
        raise OutputError(str(e)) from e


class ExportCommand:
    """Orchestrates the export workflow for the CLI.

    The export workflow:
        1. Load settings (base URL, space key, credential) from the environment
        2. Download all pages with the pagination driver
        3. Print a per-page summary to stderr
        4. Write the JSON array to stdout or the output file
        5. Return an exit code; any failure aborts before output is written

    Example:
        >>> output = OutputHandler(verbosity=1)
        >>> export_cmd = ExportCommand(output_handler=output)
        >>> sys.exit(export_cmd.run())
    """

    def __init__(
        self,
        output_handler: Optional[OutputHandler] = None,
        authenticator: Optional[Authenticator] = None,
        stdout: Optional[TextIO] = None,
    ):
        """Initialize export command with dependencies.

        Args:
            output_handler: OutputHandler for diagnostic output (optional)
            authenticator: Authenticator for loading settings (optional)
            stdout: Stream receiving the JSON document (defaults to sys.stdout)
        """
        self.output_handler = output_handler or OutputHandler()
        self.authenticator = authenticator
        self.stdout = stdout

    def run(
        self,
        output_path: Optional[str] = None,
        timeout: Optional[float] = None,
    ) -> ExitCode:
        """Execute the export.

        Args:
            output_path: Write JSON to this file instead of stdout
            timeout: Optional per-request timeout in seconds

        Returns:
            ExitCode describing the result
        """
        try:
            pages = self._export(output_path, timeout)
        except ConfigurationError as e:
            logger.error(f"Configuration error: {e}")
            self.output_handler.error(str(e))
            return ExitCode.GENERAL_ERROR
        except TransportError as e:
            logger.error(f"Confluence API unreachable: {e}")
            self.output_handler.error(str(e))
            return ExitCode.NETWORK_ERROR
        except APIStatusError as e:
            logger.error(f"Confluence API returned status {e.status}: {e}")
            self.output_handler.error(str(e))
            if e.status in AUTH_STATUSES:
                return ExitCode.AUTH_ERROR
            return ExitCode.GENERAL_ERROR
        except PageFetchError as e:
            logger.error(f"Malformed Confluence response: {e}")
            self.output_handler.error(str(e))
            return ExitCode.GENERAL_ERROR
        except ExportError as e:
            logger.error(f"Export failed: {e}")
            self.output_handler.error(str(e))
            return ExitCode.GENERAL_ERROR

        self.output_handler.success(f"Exported {len(pages)} page(s)")
        return ExitCode.SUCCESS

    def _export(self, output_path: Optional[str], timeout: Optional[float]) -> List[ConfluencePage]:
        authenticator = self.authenticator or Authenticator()
        creds = authenticator.get_credentials()

        output = self.output_handler
        output.info(f"Downloading pages from Confluence space '{creds.space_key}'")
        output.info(f"  Base URL: {creds.base_url}")
        output.info(f"  Auth: {creds.auth}")

        with PageFetcher(creds, timeout=timeout, trace=self._trace) as fetcher:
            pages = download_all_pages(fetcher)

        output.print_download_summary(creds.space_key, pages)

        document = serialize_pages(pages)
        self._write(document, output_path)
        return pages

    def _trace(self, url: str) -> None:
        logger.debug(f"GET {url}")
        self.output_handler.info(f"Downloading page from Confluence: {url}")

    def _write(self, document: str, output_path: Optional[str]) -> None:
        if output_path:
            try:
                Path(output_path).write_text(document + "\n", encoding="utf-8")
            except OSError as e:
                raise OutputError(f"{output_path}: {e}") from e
            self.output_handler.info(f"Wrote {output_path}")
            return

        stream = self.stdout or sys.stdout
        stream.write(document + "\n")
        stream.flush()
