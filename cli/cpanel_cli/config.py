from __future__ import annotations

import os
import sys
import tomllib
from dataclasses import dataclass, field
from typing import Any, Mapping

import tomli_w
from platformdirs import user_config_dir

from cpanel_client.config_types import (
    DEFAULT_CONNECT_TIMEOUT_S,
    DEFAULT_TIMEOUT_S,
    AuthType,
    parse_seconds,
)

from . import console

APP_NAME = "cpanel-client"
CONFIG_FILENAME = "config.toml"

ENV_HOST = "CPANEL_HOST"
ENV_USERNAME = "CPANEL_USERNAME"
ENV_PASSWORD = "CPANEL_PASSWORD"
ENV_AUTH_TYPE = "CPANEL_AUTH_TYPE"
ENV_TIMEOUT = "CPANEL_TIMEOUT"
ENV_CONNECT_TIMEOUT = "CPANEL_CONNECT_TIMEOUT"

_WARNED_HOST_SCHEME = False


@dataclass
class AppConfig:
    host: str = ""
    username: str = ""
    password: str = ""
    auth_type: str = AuthType.HASH.value
    timeout: float = DEFAULT_TIMEOUT_S
    connect_timeout: float = DEFAULT_CONNECT_TIMEOUT_S
    profiles: dict[str, dict[str, Any]] = field(default_factory=dict)


def config_path() -> str:
    return os.path.join(user_config_dir(APP_NAME), CONFIG_FILENAME)


def default_config() -> AppConfig:
    return AppConfig()


def normalize_host(raw: str | None, *, warn: bool = False) -> str:
    value = (raw or "").strip()
    if not value:
        return ""
    value = value.rstrip("/")
    lowered = value.lower()
    if lowered.startswith("http://") or lowered.startswith("https://"):
        return value

    host = value.split("/", 1)[0]
    host = host.split(":", 1)[0].lower()
    if host in {"localhost", "127.0.0.1", "0.0.0.0"}:
        scheme = "http://"
    else:
        scheme = "https://"

    normalized = f"{scheme}{value}"
    if warn:
        _warn_missing_scheme(normalized)
    return normalized


def _warn_missing_scheme(normalized: str) -> None:
    global _WARNED_HOST_SCHEME
    if _WARNED_HOST_SCHEME:
        return
    if not (sys.stderr.isatty() or sys.stdout.isatty()):
        return
    console.warn(f"host missing scheme, assuming {normalized}")
    _WARNED_HOST_SCHEME = True


def _apply_values(cfg: AppConfig, data: Mapping[str, Any]) -> AppConfig:
    return AppConfig(
        host=normalize_host(str(data.get("host") or cfg.host), warn=True),
        username=str(data.get("username") or cfg.username),
        password=str(data.get("password") or cfg.password),
        auth_type=str(data.get("auth_type") or cfg.auth_type).strip().lower(),
        timeout=parse_seconds(data.get("timeout"), cfg.timeout),
        connect_timeout=parse_seconds(data.get("connect_timeout"), cfg.connect_timeout),
        profiles=cfg.profiles,
    )


def from_toml(data: dict[str, Any]) -> AppConfig:
    cfg = _apply_values(default_config(), data)
    profiles_raw = data.get("profiles") or {}
    if isinstance(profiles_raw, dict):
        cfg.profiles = {str(name): dict(v) for name, v in profiles_raw.items() if isinstance(v, dict)}
    return cfg


def to_toml(cfg: AppConfig) -> dict[str, Any]:
    data: dict[str, Any] = {
        "host": cfg.host,
        "username": cfg.username,
        "password": cfg.password,
        "auth_type": cfg.auth_type,
        "timeout": cfg.timeout,
        "connect_timeout": cfg.connect_timeout,
    }
    if cfg.profiles:
        data["profiles"] = cfg.profiles
    return data


def apply_env(cfg: AppConfig, environ: Mapping[str, str] | None = None) -> AppConfig:
    env = os.environ if environ is None else environ
    overrides = {
        "host": env.get(ENV_HOST),
        "username": env.get(ENV_USERNAME),
        "password": env.get(ENV_PASSWORD),
        "auth_type": env.get(ENV_AUTH_TYPE),
        "timeout": env.get(ENV_TIMEOUT),
        "connect_timeout": env.get(ENV_CONNECT_TIMEOUT),
    }
    return _apply_values(cfg, overrides)


def apply_profile(cfg: AppConfig, profile: str | None) -> AppConfig:
    if not profile:
        return cfg
    prof = cfg.profiles.get(profile)
    if not isinstance(prof, dict):
        console.warn(f"Unknown profile: {profile}")
        return cfg
    return _apply_values(cfg, prof)


def load_config(*, with_env: bool = True) -> AppConfig:
    path = config_path()
    try:
        with open(path, "rb") as f:
            data = tomllib.load(f)
        cfg = from_toml(data)
    except FileNotFoundError:
        cfg = default_config()
    return apply_env(cfg) if with_env else cfg


def save_config(cfg: AppConfig) -> str:
    path = config_path()
    os.makedirs(os.path.dirname(path), exist_ok=True)
    with open(path, "wb") as f:
        f.write(tomli_w.dumps(to_toml(cfg)).encode("utf-8"))
    os.chmod(path, 0o600)
    return path
