from __future__ import annotations


class AicpClientError(Exception):
    """Base client error."""


class TokenStoreError(AicpClientError):
    """Persisted token store could not be read or written."""


class ConfigError(AicpClientError):
    """Local configuration file could not be read."""
