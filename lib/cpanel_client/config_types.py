from __future__ import annotations

import os
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Mapping

from .errors import MissingHostError, MissingPasswordError, MissingUsernameError

DEFAULT_TIMEOUT_S = 10.0
DEFAULT_CONNECT_TIMEOUT_S = 2.0


class AuthType(str, Enum):
    HASH = "hash"
    PASSWORD = "password"


@dataclass(frozen=True)
class ClientConfig:
    """Connection state of a client.

    Fields left as ``None`` are unset. Unrecognized ``auth_type`` values are
    kept as given and result in requests without an Authorization header.
    """

    host: str | None = None
    username: str | None = None
    password: str | None = None
    auth_type: str | None = None
    headers: dict[str, str] = field(default_factory=dict)
    timeout: float = DEFAULT_TIMEOUT_S
    connect_timeout: float = DEFAULT_CONNECT_TIMEOUT_S

    @classmethod
    def from_options(cls, options: Mapping[str, Any], base: ClientConfig | None = None) -> ClientConfig:
        """Validate an options mapping (username, password, host, auth_type).

        Other keys are ignored. Raises a ConfigurationError subclass when a
        required key is missing or empty.
        """
        if not options.get("username"):
            raise MissingUsernameError()
        if not options.get("password"):
            raise MissingPasswordError()
        if not options.get("host"):
            raise MissingHostError()

        base = base or cls()
        auth_type = options.get("auth_type") or base.auth_type
        return cls(
            host=str(options["host"]),
            username=str(options["username"]),
            password=str(options["password"]),
            auth_type=_auth_type_value(auth_type),
            headers=dict(base.headers),
            timeout=base.timeout,
            connect_timeout=base.connect_timeout,
        )

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> ClientConfig | None:
        env = os.environ if environ is None else environ
        host = env.get("CPANEL_HOST")
        username = env.get("CPANEL_USERNAME")
        password = env.get("CPANEL_PASSWORD")
        if not all([host, username, password]):
            return None
        return cls(
            host=host,
            username=username,
            password=password,
            auth_type=env.get("CPANEL_AUTH_TYPE") or AuthType.HASH.value,
            timeout=parse_seconds(env.get("CPANEL_TIMEOUT"), DEFAULT_TIMEOUT_S),
            connect_timeout=parse_seconds(env.get("CPANEL_CONNECT_TIMEOUT"), DEFAULT_CONNECT_TIMEOUT_S),
        )


def _auth_type_value(value: Any) -> str | None:
    if value is None:
        return None
    if isinstance(value, AuthType):
        return value.value
    return str(value)


def parse_seconds(value: Any, default: float) -> float:
    """Timeout in seconds from a string or number; blank or missing gives ``default``."""
    if value is None or str(value).strip() == "":
        return default
    try:
        return float(value)
    except (TypeError, ValueError) as exc:
        raise ValueError(f"Invalid timeout value: {value!r}") from exc
