from __future__ import annotations

import os

import typer

from cpanel_client.config_types import AuthType

from .. import console
from ..config import config_path, default_config, load_config, normalize_host, save_config

app = typer.Typer(help="Manage local CLI settings (~/.config/cpanel-client/config.toml).")

_AUTH_TYPES = {t.value for t in AuthType}


def _load(*, with_env: bool = True):
    try:
        return load_config(with_env=with_env)
    except ValueError as exc:
        console.err(str(exc))
        raise typer.Exit(code=2)


def _check_auth_type(value: str) -> str:
    normalized = value.strip().lower()
    if normalized not in _AUTH_TYPES:
        console.err(f"Unknown auth type: {value}. Use hash or password.")
        raise typer.Exit(code=2)
    return normalized


@app.command("init")
def init_settings(
        force: bool = typer.Option(False, "--force", help="Overwrite existing config."),
        host: str = typer.Option(..., "--host", prompt="Server URL", help="Server URL like https://example.com:2087"),
        username: str = typer.Option(..., "--username", prompt="Username"),
        password: str = typer.Option(
            ..., "--password", prompt="Password or access hash", hide_input=True,
        ),
        auth_type: str = typer.Option(AuthType.HASH.value, "--auth-type", help="hash or password."),
):
    path = config_path()
    if os.path.exists(path) and not force:
        console.info(f"Config already exists: {path}")
        console.info("Use --force to overwrite.")
        return

    cfg = default_config()
    cfg.host = normalize_host(host, warn=True)
    if not cfg.host:
        console.err("Host cannot be empty.")
        raise typer.Exit(code=2)
    cfg.username = username.strip()
    cfg.password = password
    cfg.auth_type = _check_auth_type(auth_type)
    saved = save_config(cfg)
    console.ok(f"Config written: {saved}")


@app.command("show")
def show_settings():
    cfg = _load()
    password_state = "(set)" if cfg.password else "(empty)"
    console.console.print(
        f"host={cfg.host} username={cfg.username} password={password_state} auth_type={cfg.auth_type} "
        f"timeout={cfg.timeout} connect_timeout={cfg.connect_timeout}",
        markup=False,
    )
    if cfg.profiles:
        console.console.print(f"profiles={','.join(sorted(cfg.profiles))}", markup=False)


@app.command("set")
def set_setting(
        host: str | None = typer.Option(None, "--host", help="Set server URL."),
        username: str | None = typer.Option(None, "--username", help="Set username."),
        password: str | None = typer.Option(None, "--password", help="Set password or access hash."),
        auth_type: str | None = typer.Option(None, "--auth-type", help="Set auth type (hash or password)."),
        timeout: float | None = typer.Option(None, "--timeout", help="Request timeout in seconds."),
        connect_timeout: float | None = typer.Option(None, "--connect-timeout", help="Connect timeout in seconds."),
):
    cfg = _load(with_env=False)
    if host is not None:
        cfg.host = normalize_host(host, warn=True)
    if username is not None:
        cfg.username = username.strip()
    if password is not None:
        cfg.password = password
    if auth_type is not None:
        cfg.auth_type = _check_auth_type(auth_type)
    if timeout is not None:
        cfg.timeout = timeout
    if connect_timeout is not None:
        cfg.connect_timeout = connect_timeout
    saved = save_config(cfg)
    console.ok(f"Settings updated: {saved}")
