from __future__ import annotations

import base64
import re

from .config_types import AuthType, ClientConfig

_WHITESPACE_RE = re.compile(r"\s")


def build_headers(cfg: ClientConfig) -> dict[str, str]:
    """Request headers for ``cfg``: custom headers plus Authorization.

    Hash tokens are often pasted with line breaks, so all whitespace is
    removed from them. Unknown auth types add no Authorization header.
    """
    headers = dict(cfg.headers)
    username = cfg.username or ""
    secret = cfg.password or ""

    if cfg.auth_type == AuthType.HASH.value:
        headers["Authorization"] = f"WHM {username}:{_WHITESPACE_RE.sub('', secret)}"
    elif cfg.auth_type == AuthType.PASSWORD.value:
        token = base64.b64encode(f"{username}:{secret}".encode("utf-8")).decode("ascii")
        headers["Authorization"] = f"Basic {token}"
    return headers
