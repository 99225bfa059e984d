"""Command-line interface for Confluence space export.

This package provides the `confluence-space-export` CLI tool that downloads
every page of a Confluence space and writes them as one JSON document.
"""

from .export_command import ExportCommand
from .models import ExitCode
from .errors import CLIError, OutputError

__all__ = [
    'ExportCommand',
    'ExitCode',
    'CLIError',
    'OutputError',
]
