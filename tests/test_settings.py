import pytest

from tlsrequests.errors import ConfigValidationError
from tlsrequests.settings import TLSSettings

ENV_VARS = (
    "REQUESTS_VERIFY_SERVER_CERT",
    "REQUESTS_CA_CERT_PATH",
    "REQUESTS_MUTUAL_TLS",
    "REQUESTS_CLIENT_KEY_PATH",
    "REQUESTS_CLIENT_CERT_PATH",
    "REQUESTS_TIMEOUT",
)


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch, tmp_path) -> None:
    monkeypatch.chdir(tmp_path)
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)


def test_load_defaults() -> None:
    assert TLSSettings.load() == TLSSettings()


def test_load_reads_environment(monkeypatch) -> None:
    monkeypatch.setenv("REQUESTS_VERIFY_SERVER_CERT", "false")
    monkeypatch.setenv("REQUESTS_CA_CERT_PATH", " /etc/ca.pem ")
    monkeypatch.setenv("REQUESTS_MUTUAL_TLS", "YES")
    monkeypatch.setenv("REQUESTS_CLIENT_KEY_PATH", "/etc/client.key")
    monkeypatch.setenv("REQUESTS_CLIENT_CERT_PATH", "/etc/client.pem")
    monkeypatch.setenv("REQUESTS_TIMEOUT", "2.5")

    settings = TLSSettings.load()

    assert settings == TLSSettings(
        verify_server_cert=False,
        ca_cert_path="/etc/ca.pem",
        use_mutual_tls=True,
        client_key_path="/etc/client.key",
        client_cert_path="/etc/client.pem",
        timeout=2.5,
    )


def test_load_rejects_unknown_boolean(monkeypatch) -> None:
    monkeypatch.setenv("REQUESTS_MUTUAL_TLS", "maybe")
    with pytest.raises(ConfigValidationError):
        TLSSettings.load()


@pytest.mark.parametrize("value", ["soon", "0", "-1"])
def test_load_rejects_bad_timeout(monkeypatch, value: str) -> None:
    monkeypatch.setenv("REQUESTS_TIMEOUT", value)
    with pytest.raises(ConfigValidationError):
        TLSSettings.load()


def test_settings_are_immutable() -> None:
    settings = TLSSettings()
    with pytest.raises(AttributeError):
        settings.verify_server_cert = False  # type: ignore[misc]


def test_validate_accepts_complete_mutual_tls() -> None:
    TLSSettings(use_mutual_tls=True, client_key_path="k", client_cert_path="c").validate()


def test_validate_rejects_partial_mutual_tls() -> None:
    with pytest.raises(ConfigValidationError):
        TLSSettings(use_mutual_tls=True, client_key_path="k").validate()
