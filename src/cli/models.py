"""Data models for CLI operations."""

from enum import IntEnum


class ExitCode(IntEnum):
    """Exit codes for CLI operations.

    - SUCCESS (0): All pages downloaded and written
    - GENERAL_ERROR (1): Configuration, malformed response, API status or output failure
    - AUTH_ERROR (3): The API rejected the credential (401/403)
    - NETWORK_ERROR (4): No response could be obtained from the API

    Example:
        >>> exit_code = ExitCode.SUCCESS
        >>> sys.exit(exit_code)
    """
    SUCCESS = 0
    GENERAL_ERROR = 1
    AUTH_ERROR = 3
    NETWORK_ERROR = 4
