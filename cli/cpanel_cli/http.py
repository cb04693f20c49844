from __future__ import annotations

from cpanel_client import CpanelClient
from cpanel_client.config_types import ClientConfig

from .config import AppConfig, apply_env, apply_profile, load_config, normalize_host


def resolve_config(profile: str | None = None, host_override: str | None = None) -> AppConfig:
    """File settings, then the profile, then CPANEL_* environment variables."""
    cfg = apply_env(apply_profile(load_config(with_env=False), profile))
    if host_override:
        cfg.host = normalize_host(host_override, warn=True)
    return cfg


def make_client(cfg: AppConfig) -> CpanelClient:
    client = CpanelClient(
        config=ClientConfig(
            timeout=cfg.timeout,
            connect_timeout=cfg.connect_timeout,
        )
    )
    return client.configure(
        {
            "host": cfg.host,
            "username": cfg.username,
            "password": cfg.password,
            "auth_type": cfg.auth_type,
        }
    )
