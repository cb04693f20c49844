from __future__ import annotations

import pytest

from cpanel_client import (
    AuthType,
    ClientConfig,
    ConfigurationError,
    CpanelClient,
    MissingHostError,
    MissingPasswordError,
    MissingUsernameError,
    UnsetAttributeError,
)

OPTIONS = {
    "username": "root",
    "password": "secret-hash",
    "host": "https://whm.example.test:2087",
}


def test_configure_sets_values_returned_by_getters() -> None:
    client = CpanelClient({**OPTIONS, "auth_type": "password"})

    assert client.get_username() == "root"
    assert client.get_password() == "secret-hash"
    assert client.get_host() == "https://whm.example.test:2087"
    assert client.get_auth_type() == "password"


def test_configure_ignores_unknown_keys() -> None:
    client = CpanelClient({**OPTIONS, "colour": "blue"})
    assert client.get_username() == "root"
    assert not hasattr(client.config, "colour")


@pytest.mark.parametrize(
    ("missing", "error", "code"),
    [
        ("username", MissingUsernameError, 2301),
        ("password", MissingPasswordError, 2302),
        ("host", MissingHostError, 2303),
    ],
)
def test_configure_missing_option_raises_specific_error(missing, error, code) -> None:
    client = CpanelClient().set_host("https://old.test").set_authorization("old", "pw").set_auth_type("hash")
    before = client.config
    options = {k: v for k, v in OPTIONS.items() if k != missing}

    with pytest.raises(error) as exc_info:
        client.configure(options)

    assert isinstance(exc_info.value, ConfigurationError)
    assert exc_info.value.code == code
    assert client.config == before
    assert client.get_host() == "https://old.test"
    assert client.get_username() == "old"


def test_configure_treats_empty_values_as_missing() -> None:
    with pytest.raises(MissingHostError):
        CpanelClient({**OPTIONS, "host": ""})


def test_username_is_checked_first() -> None:
    with pytest.raises(MissingUsernameError):
        CpanelClient({"auth_type": "hash"})


def test_configure_keeps_previous_auth_type_when_not_given() -> None:
    client = CpanelClient().set_auth_type(AuthType.PASSWORD)
    client.configure(OPTIONS)
    assert client.get_auth_type() == "password"


def test_setters_chain_and_do_not_validate() -> None:
    client = CpanelClient()
    returned = (
        client.set_host("")
        .set_authorization("", "")
        .set_auth_type("token")
        .set_header("X-Trace", "1")
        .set_timeout(30)
        .set_connection_timeout(5)
    )

    assert returned is client
    assert client.get_host() == ""
    assert client.get_auth_type() == "token"
    assert client.get_timeout() == 30
    assert client.get_connection_timeout() == 5
    assert client.config.headers == {"X-Trace": "1"}


def test_getters_raise_when_never_set() -> None:
    client = CpanelClient()
    for getter in (client.get_host, client.get_username, client.get_password, client.get_auth_type):
        with pytest.raises(UnsetAttributeError):
            getter()


def test_timeouts_have_defaults() -> None:
    client = CpanelClient()
    assert client.get_timeout() == 10.0
    assert client.get_connection_timeout() == 2.0


def test_from_env_reads_cpanel_variables() -> None:
    cfg = ClientConfig.from_env(
        {
            "CPANEL_HOST": "https://whm.example.test:2087",
            "CPANEL_USERNAME": "root",
            "CPANEL_PASSWORD": "hash",
            "CPANEL_TIMEOUT": "30",
        }
    )

    assert cfg is not None
    assert cfg.auth_type == "hash"
    assert cfg.timeout == 30.0
    assert cfg.connect_timeout == 2.0


def test_from_env_returns_none_when_incomplete() -> None:
    assert ClientConfig.from_env({"CPANEL_HOST": "https://whm.example.test"}) is None


def test_from_env_rejects_bad_timeout() -> None:
    env = {
        "CPANEL_HOST": "https://whm.example.test:2087",
        "CPANEL_USERNAME": "root",
        "CPANEL_PASSWORD": "hash",
        "CPANEL_CONNECT_TIMEOUT": "soon",
    }
    with pytest.raises(ValueError, match="Invalid timeout value"):
        ClientConfig.from_env(env)
