"""Environment-driven TLS configuration for the HTTP client."""

import os
from dataclasses import dataclass

from dotenv import load_dotenv

from tlsrequests.errors import ConfigValidationError

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}


def _bool_env(name: str, default: bool) -> bool:
    raw = os.getenv(name, "").strip().lower()
    if not raw:
        return default
    if raw in _TRUE_VALUES:
        return True
    if raw in _FALSE_VALUES:
        return False
    raise ConfigValidationError(f"{name} must be a boolean value, got {raw!r}.")


@dataclass(frozen=True, slots=True)
class TLSSettings:
    """Declarative TLS policy consumed once to build a client."""

    verify_server_cert: bool = True
    ca_cert_path: str = ""
    use_mutual_tls: bool = False
    client_key_path: str = ""
    client_cert_path: str = ""
    timeout: float = 30.0

    def validate(self) -> None:
        """Reject contradictory mutual-TLS settings."""
        if self.use_mutual_tls and (not self.client_key_path or not self.client_cert_path):
            raise ConfigValidationError(
                "Mutual TLS requires both client_key_path and client_cert_path."
            )
        if self.timeout <= 0:
            raise ConfigValidationError("timeout must be greater than zero.")

    @classmethod
    def load(cls) -> "TLSSettings":
        """
        Load configuration from environment variables.

        Python-dotenv is used so developers can rely on a local .env file without
        exporting variables globally.
        """
        load_dotenv()

        timeout_raw = os.getenv("REQUESTS_TIMEOUT", "").strip() or "30"
        try:
            timeout = float(timeout_raw)
        except ValueError as exc:
            raise ConfigValidationError("REQUESTS_TIMEOUT must be a numeric value.") from exc
        if timeout <= 0:
            raise ConfigValidationError("REQUESTS_TIMEOUT must be greater than zero.")

        return cls(
            verify_server_cert=_bool_env("REQUESTS_VERIFY_SERVER_CERT", True),
            ca_cert_path=os.getenv("REQUESTS_CA_CERT_PATH", "").strip(),
            use_mutual_tls=_bool_env("REQUESTS_MUTUAL_TLS", False),
            client_key_path=os.getenv("REQUESTS_CLIENT_KEY_PATH", "").strip(),
            client_cert_path=os.getenv("REQUESTS_CLIENT_CERT_PATH", "").strip(),
            timeout=timeout,
        )
