from __future__ import annotations

import dataclasses
import logging
from typing import Any, Mapping

import httpx

from .config_types import AuthType, ClientConfig
from .decoding import decode_json
from .errors import TransportError, UnsetAttributeError
from .headers import build_headers
from .shortcuts import CpanelShortcuts
from .transport import Transport

logger = logging.getLogger(__name__)


class CpanelClient(CpanelShortcuts):
    """Generic dispatcher for the cPanel/WHM JSON API.

    Every call is ``POST <host>/json-api/<action>`` with the parameters in the
    query string and credentials in the Authorization header.

    The client is not synchronized. Concurrent callers should each use their
    own instance, or stop calling setters once the instance is shared.
    """

    def __init__(
            self,
            options: Mapping[str, Any] | None = None,
            *,
            config: ClientConfig | None = None,
            http_client: httpx.Client | None = None,
    ):
        self._cfg = config or ClientConfig()
        self._t = Transport(http_client)
        if options:
            self.configure(options)

    @property
    def config(self) -> ClientConfig:
        return self._cfg

    def configure(self, options: Mapping[str, Any]) -> CpanelClient:
        """Apply username, password, host and auth_type from ``options``.

        Either every value is applied or, on a ConfigurationError, none is.
        """
        self._cfg = ClientConfig.from_options(options, base=self._cfg)
        return self

    # --- setters (no validation, chainable) ---
    def set_host(self, host: str) -> CpanelClient:
        return self._replace(host=host)

    def set_authorization(self, username: str, password: str) -> CpanelClient:
        return self._replace(username=username, password=password)

    def set_auth_type(self, auth_type: str | AuthType) -> CpanelClient:
        value = auth_type.value if isinstance(auth_type, AuthType) else auth_type
        return self._replace(auth_type=value)

    def set_header(self, name: str, value: str = "") -> CpanelClient:
        headers = dict(self._cfg.headers)
        headers[name] = value
        return self._replace(headers=headers)

    def set_timeout(self, timeout: float) -> CpanelClient:
        return self._replace(timeout=timeout)

    def set_connection_timeout(self, connect_timeout: float) -> CpanelClient:
        return self._replace(connect_timeout=connect_timeout)

    def _replace(self, **changes: Any) -> CpanelClient:
        self._cfg = dataclasses.replace(self._cfg, **changes)
        return self

    # --- getters (raise UnsetAttributeError when never set) ---
    def get_host(self) -> str:
        return self._require("host")

    def get_username(self) -> str:
        return self._require("username")

    def get_password(self) -> str:
        return self._require("password")

    def get_auth_type(self) -> str:
        return self._require("auth_type")

    def get_timeout(self) -> float:
        return self._cfg.timeout

    def get_connection_timeout(self) -> float:
        return self._cfg.connect_timeout

    def _require(self, name: str) -> Any:
        value = getattr(self._cfg, name)
        if value is None:
            raise UnsetAttributeError(name)
        return value

    # --- API calls ---
    def call(self, action: str, params: Mapping[str, Any] | None = None, /, **kwargs: Any) -> Any:
        """Call any API function by name.

        Keyword arguments are merged into ``params``, so remote arguments named
        ``action`` or ``params`` can be passed either way.

        Transport errors, including HTTP error statuses, are raised as
        TransportError and the response body is not decoded.
        """
        merged = dict(params or {})
        merged.update(kwargs)
        return self.run_query(action, merged, rethrow=True)

    def query(self, action: str, params: Mapping[str, Any] | None = None) -> Any:
        """Call any API function by name, decoding error responses too.

        The server answers failures with a JSON explanation, which is returned
        like any other result.
        """
        return self.run_query(action, params or {})

    def cpanel(
            self,
            module: str,
            function: str,
            username: str,
            params: Mapping[str, Any] | None = None,
    ) -> Any:
        """Call a cPanel API 2 function on behalf of ``username``."""
        merged = dict(params or {})
        merged.update(
            {
                "cpanel_jsonapi_version": 2,
                "cpanel_jsonapi_module": module,
                "cpanel_jsonapi_func": function,
                "cpanel_jsonapi_user": username,
            }
        )
        return self.run_query("cpanel", merged)

    def execute_action(
            self,
            api: int | str,
            module: str,
            function: str,
            username: str,
            params: Mapping[str, Any] | None = None,
    ) -> Any:
        """Call a cPanel function with an explicit API version.

        ``api`` is 1 for cPanel API 1, 2 for cPanel API 2 and 3 for UAPI. It
        is sent as is; the server rejects unknown versions.
        """
        merged = dict(params or {})
        merged.update(
            {
                "cpanel_jsonapi_apiversion": api,
                "cpanel_jsonapi_module": module,
                "cpanel_jsonapi_func": function,
                "cpanel_jsonapi_user": username,
            }
        )
        return self.run_query("cpanel", merged)

    def uapi(self, module: str, function: str, username: str, params: Mapping[str, Any] | None = None) -> Any:
        return self.execute_action(3, module, function, username, params)

    def run_query(self, action: str, params: Mapping[str, Any], *, rethrow: bool = False) -> Any:
        cfg = self._cfg
        url = f"{self.get_host().rstrip('/')}/json-api/{action}"
        logger.debug("Dispatching %s with %d params", action or "/", len(params))
        try:
            response = self._t.post(
                url,
                headers=build_headers(cfg),
                params=params,
                timeout=cfg.timeout,
                connect_timeout=cfg.connect_timeout,
            )
        except TransportError as e:
            if rethrow or e.response is None:
                raise
            logger.warning("%s; decoding error response", e)
            response = e.response
        return decode_json(response.text)
