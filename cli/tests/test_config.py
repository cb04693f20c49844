from __future__ import annotations

import pytest

from cpanel_cli import config
from cpanel_cli.http import make_client, resolve_config
from cpanel_client import MissingPasswordError

_ENV_KEYS = (
    config.ENV_HOST,
    config.ENV_USERNAME,
    config.ENV_PASSWORD,
    config.ENV_AUTH_TYPE,
    config.ENV_TIMEOUT,
    config.ENV_CONNECT_TIMEOUT,
)


@pytest.fixture(autouse=True)
def _isolated_config(tmp_path, monkeypatch):
    def _config_dir(_: str) -> str:
        return str(tmp_path)

    monkeypatch.setattr(config, "user_config_dir", _config_dir)
    for key in _ENV_KEYS:
        monkeypatch.delenv(key, raising=False)


def _write(tmp_path, text: str) -> None:
    tmp_path.joinpath("config.toml").write_text(text, encoding="utf-8")


def test_load_config_defaults_when_missing() -> None:
    cfg = config.load_config()
    assert cfg.host == ""
    assert cfg.auth_type == "hash"
    assert cfg.timeout == 10.0


def test_save_and_load_round_trip_with_private_mode(tmp_path) -> None:
    cfg = config.AppConfig(host="https://whm.example.test:2087", username="root", password="hash")

    path = config.save_config(cfg)
    loaded = config.load_config()

    assert path.endswith("config.toml")
    assert loaded.host == "https://whm.example.test:2087"
    assert loaded.password == "hash"
    assert (tmp_path.joinpath("config.toml").stat().st_mode & 0o777) == 0o600


def test_env_overrides_file(tmp_path, monkeypatch) -> None:
    _write(tmp_path, 'host = "https://file.test"\nusername = "root"\npassword = "x"\n')
    monkeypatch.setenv(config.ENV_HOST, "https://env.test")
    monkeypatch.setenv(config.ENV_TIMEOUT, "30")

    cfg = config.load_config()

    assert cfg.host == "https://env.test"
    assert cfg.username == "root"
    assert cfg.timeout == 30.0
    assert config.load_config(with_env=False).host == "https://file.test"


def test_profile_overrides_top_level(tmp_path) -> None:
    _write(
        tmp_path,
        "\n".join(
            [
                'host = "https://default.test"',
                'username = "root"',
                'password = "root-hash"',
                "",
                "[profiles.reseller]",
                'username = "reseller"',
                'password = "reseller-pw"',
                'auth_type = "password"',
                "",
            ]
        ),
    )

    cfg = resolve_config("reseller")

    assert cfg.host == "https://default.test"
    assert cfg.username == "reseller"
    assert cfg.auth_type == "password"


def test_resolve_config_host_override_is_normalized() -> None:
    cfg = resolve_config(None, "whm.example.test:2087/")
    assert cfg.host == "https://whm.example.test:2087"


def test_make_client_builds_configured_client() -> None:
    cfg = config.AppConfig(host="https://whm.test", username="root", password="hash", timeout=25.0)
    client = make_client(cfg)
    assert client.get_host() == "https://whm.test"
    assert client.get_auth_type() == "hash"
    assert client.get_timeout() == 25.0


def test_make_client_rejects_incomplete_config() -> None:
    with pytest.raises(MissingPasswordError):
        make_client(config.AppConfig(host="https://whm.test", username="root"))


def test_normalize_host_defaults_to_https() -> None:
    assert config.normalize_host("example.com:2087") == "https://example.com:2087"


def test_normalize_host_defaults_to_http_for_localhost() -> None:
    assert config.normalize_host("127.0.0.1:2086") == "http://127.0.0.1:2086"


def test_normalize_host_strips_trailing_slash() -> None:
    assert config.normalize_host("https://example.com/") == "https://example.com"


def test_bad_env_timeout_is_rejected(monkeypatch) -> None:
    monkeypatch.setenv(config.ENV_TIMEOUT, "fast")
    with pytest.raises(ValueError, match="Invalid timeout value"):
        config.load_config()
