from __future__ import annotations

from typing import Any, Callable

import typer

from cpanel_client import ConfigurationError, CpanelClient, DecodeError, TransportError
from cpanel_client.errors_utils import extract_api_error

from .. import console
from ..http import make_client, resolve_config
from ..params import parse_params

ParamOption = typer.Option(None, "-p", "--param", help="Request parameter as key=value (repeatable).")
ProfileOption = typer.Option(None, "--profile", help="Settings profile to use.")
HostOption = typer.Option(None, "--host", help="Override server URL.")


def _client(profile: str | None, host: str | None) -> CpanelClient:
    try:
        return make_client(resolve_config(profile, host))
    except ConfigurationError as exc:
        console.err(f"{exc}. Run `cpanel settings init` or set CPANEL_* variables.")
        raise typer.Exit(code=2)
    except ValueError as exc:
        console.err(str(exc))
        raise typer.Exit(code=2)


def _params(items: list[str] | None) -> dict[str, str]:
    try:
        return parse_params(items)
    except ValueError as exc:
        console.err(str(exc))
        raise typer.Exit(code=2)


def _run(fn: Callable[[], Any]) -> None:
    try:
        result = fn()
    except TransportError as exc:
        console.err(str(exc))
        raise typer.Exit(code=1)
    except DecodeError as exc:
        console.err(f"Invalid JSON response: {exc}")
        raise typer.Exit(code=1)

    console.print_json(result)
    api_error = extract_api_error(result)
    if api_error:
        console.warn(f"API reported an error: {api_error}")


def call(
        action: str = typer.Argument(..., help="API function name, e.g. listaccts."),
        param: list[str] | None = ParamOption,
        profile: str | None = ProfileOption,
        host: str | None = HostOption,
):
    """Call an API function; HTTP errors abort the command."""
    params = _params(param)
    client = _client(profile, host)
    _run(lambda: client.call(action, params))


def query(
        action: str = typer.Argument(..., help="API function name, e.g. listaccts."),
        param: list[str] | None = ParamOption,
        profile: str | None = ProfileOption,
        host: str | None = HostOption,
):
    """Call an API function and print the server's answer even on HTTP errors."""
    params = _params(param)
    client = _client(profile, host)
    _run(lambda: client.query(action, params))


def module(
        module_name: str = typer.Argument(..., metavar="MODULE", help="cPanel module, e.g. Email."),
        function: str = typer.Argument(..., help="Module function, e.g. listpops."),
        user: str = typer.Option(..., "--user", "-u", help="cPanel account to act as."),
        api: int | None = typer.Option(None, "--api", help="1 = API 1, 2 = API 2, 3 = UAPI. Default: API 2."),
        param: list[str] | None = ParamOption,
        profile: str | None = ProfileOption,
        host: str | None = HostOption,
):
    """Call a cPanel module function for an account."""
    params = _params(param)
    client = _client(profile, host)
    if api is None:
        _run(lambda: client.cpanel(module_name, function, user, params))
    else:
        _run(lambda: client.execute_action(api, module_name, function, user, params))


def check(
        profile: str | None = ProfileOption,
        host: str | None = HostOption,
):
    """Check that the server is reachable and accepts the credentials."""
    client = _client(profile, host)
    result = client.check_connection()
    if result.get("status"):
        console.ok(str(result.get("verbose")))
        return
    console.err(f"{result.get('error')}: {result.get('verbose')}")
    raise typer.Exit(code=1)
