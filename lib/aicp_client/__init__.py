from .client import AicpClient
from .config_types import ClientConfig
from .errors import AicpClientError, ConfigError, TokenStoreError

__all__ = ["AicpClient", "ClientConfig", "AicpClientError", "ConfigError", "TokenStoreError"]
