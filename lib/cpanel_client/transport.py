from __future__ import annotations

import logging
from typing import Any, Mapping

import httpx

from .errors import ConfigurationError, TransportError

logger = logging.getLogger(__name__)

USER_AGENT = "cpanel-client/0.1.0"


class Transport:
    """Sends POST requests through httpx.

    An injected ``httpx.Client`` is reused for every call and never closed
    here. Without one, a client with certificate verification disabled is
    created for a single call and closed afterwards.
    """

    def __init__(self, http_client: httpx.Client | None = None):
        self._client = http_client

    @property
    def injected(self) -> bool:
        return self._client is not None

    def post(
            self,
            url: str,
            *,
            headers: Mapping[str, str],
            params: Mapping[str, Any],
            timeout: float,
            connect_timeout: float,
    ) -> httpx.Response:
        """POST without a body.

        Raises TransportError on failure or any non-2xx status and
        ConfigurationError when a header value cannot be sent as ASCII.
        """
        if self._client is not None:
            return self._send(self._client, url, headers, params, timeout, connect_timeout)

        try:
            client = httpx.Client(verify=False, headers={"User-Agent": USER_AGENT})
        except Exception as e:
            raise TransportError(f"could not create HTTP client: {e}") from e
        try:
            return self._send(client, url, headers, params, timeout, connect_timeout)
        finally:
            client.close()

    @staticmethod
    def _send(
            client: httpx.Client,
            url: str,
            headers: Mapping[str, str],
            params: Mapping[str, Any],
            timeout: float,
            connect_timeout: float,
    ) -> httpx.Response:
        try:
            r = client.post(
                url,
                headers=dict(headers),
                params=dict(params),
                timeout=httpx.Timeout(timeout, connect=connect_timeout),
            )
        except UnicodeEncodeError as e:
            raise ConfigurationError(f"header values must be ASCII: {e}") from e
        except httpx.TimeoutException as e:
            raise TransportError(f"POST {url} timed out: {e}") from e
        except httpx.RequestError as e:
            raise TransportError(f"POST {url} failed: {e}") from e

        logger.debug("POST %s -> %s", url, r.status_code)
        # redirects are not followed, so 3xx is an error as well
        if not r.is_success:
            raise TransportError(
                f"POST {url} failed with {r.status_code}",
                status_code=r.status_code,
                response=r,
            )
        return r
