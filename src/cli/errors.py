"""Typed exception hierarchy for CLI-related errors.

This module defines all custom exceptions raised by the CLI layer.
All exceptions inherit from CLIError base class for easy catching.
"""

from src.confluence_client.errors import ExportError


class CLIError(ExportError):
    """Base exception for all CLI-related errors."""
    pass


class OutputError(CLIError):
    """Raised when the downloaded pages cannot be serialized or written."""

    def __init__(self, reason: str):
        super().__init__(f"Failed to write output: {reason}")
        self.reason = reason
