from __future__ import annotations

from typing import Any


class CpanelClientError(Exception):
    """Base client error."""


class ConfigurationError(CpanelClientError, ValueError):
    code: int = 0

    def __init__(self, message: str):
        super().__init__(message)


class MissingUsernameError(ConfigurationError):
    code = 2301

    def __init__(self, message: str = "Username is not set"):
        super().__init__(message)


class MissingPasswordError(ConfigurationError):
    code = 2302

    def __init__(self, message: str = "Password or hash is not set"):
        super().__init__(message)


class MissingHostError(ConfigurationError):
    code = 2303

    def __init__(self, message: str = "cPanel host is not set"):
        super().__init__(message)


class UnsetAttributeError(CpanelClientError, AttributeError):
    def __init__(self, name: str):
        super().__init__(f"{name} is not set")
        self.name = name


class TransportError(CpanelClientError):
    """Network failure, timeout or HTTP error status."""

    def __init__(self, message: str, *, status_code: int | None = None, response: Any = None):
        super().__init__(message)
        self.status_code = status_code
        self.response = response


class DecodeError(CpanelClientError):
    """Response body is not valid JSON."""

    def __init__(self, message: str, *, lineno: int | None = None, colno: int | None = None, pos: int | None = None):
        super().__init__(message)
        self.lineno = lineno
        self.colno = colno
        self.pos = pos
