"""Authentication module for loading Confluence export settings.

This module loads the Confluence base URL, space key and pre-encoded
credential from environment variables using python-dotenv. It validates that
all required values are present and raises ConfigurationError naming the
first one that is missing.
"""

import os
from typing import NamedTuple

from dotenv import load_dotenv

from .errors import ConfigurationError

BASE_URL_VAR = 'CONFLUENCE_BASE_URL'
SPACE_KEY_VAR = 'CONFLUENCE_SPACE_KEY'
AUTH_VAR = 'CONFLUENCE_AUTH'


class Credentials(NamedTuple):
    """Confluence export settings."""
    base_url: str
    space_key: str
    auth: str


class Authenticator:
    """Loads and validates Confluence settings from environment variables.

    Values are loaded from a .env file (if present) using python-dotenv,
    then read from the process environment.

    Required environment variables:
        CONFLUENCE_BASE_URL: Confluence instance URL (e.g., https://yourinstance.atlassian.net/wiki)
        CONFLUENCE_SPACE_KEY: Key of the space to export (e.g., TEAM)
        CONFLUENCE_AUTH: Pre-encoded Basic credential (base64 of user:token)

    A variable set to an empty string counts as missing.

    Raises:
        ConfigurationError: If any required value is missing

    Example:
        >>> auth = Authenticator()
        >>> creds = auth.get_credentials()
        >>> print(f"Exporting {creds.space_key} from {creds.base_url}")
    """

    def __init__(self):
        """Initialize the authenticator by loading environment variables from .env file."""
        load_dotenv()

    def get_credentials(self) -> Credentials:
        """Get Confluence settings from environment variables.

        Returns:
            Credentials: A named tuple containing base_url, space_key and auth

        Raises:
            ConfigurationError: If any required value is missing or empty
        """
        values = {}
        for name in (BASE_URL_VAR, SPACE_KEY_VAR, AUTH_VAR):
            value = os.getenv(name)
            if not value:
                raise ConfigurationError(name)
            values[name] = value

        return Credentials(
            base_url=values[BASE_URL_VAR],
            space_key=values[SPACE_KEY_VAR],
            auth=values[AUTH_VAR],
        )
