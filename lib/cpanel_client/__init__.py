from .client import CpanelClient
from .config_types import AuthType, ClientConfig
from .errors import (
    ConfigurationError,
    CpanelClientError,
    DecodeError,
    MissingHostError,
    MissingPasswordError,
    MissingUsernameError,
    TransportError,
    UnsetAttributeError,
)

__all__ = [
    "CpanelClient",
    "AuthType",
    "ClientConfig",
    "CpanelClientError",
    "ConfigurationError",
    "MissingUsernameError",
    "MissingPasswordError",
    "MissingHostError",
    "UnsetAttributeError",
    "TransportError",
    "DecodeError",
]
