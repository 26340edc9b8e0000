"""Turn a TLSSettings policy into a ready-to-use SSL context."""

import logging
import re
import ssl

from tlsrequests.errors import CertificateLoadError, ConfigLoadError
from tlsrequests.settings import TLSSettings

logger = logging.getLogger(__name__)

_PEM_CERT_RE = re.compile(
    r"-----BEGIN CERTIFICATE-----.+?-----END CERTIFICATE-----",
    re.DOTALL,
)


def _load_ca_bundle(context: ssl.SSLContext, path: str) -> None:
    """Append every PEM certificate found in ``path`` to the trust store."""
    try:
        with open(path, encoding="ascii", errors="replace") as handle:
            pem_text = handle.read()
    except OSError as exc:
        raise ConfigLoadError(f"Failed to read CA cert file {path}: {exc}", path=path) from exc

    blocks = _PEM_CERT_RE.findall(pem_text)
    if not blocks:
        logger.warning("No PEM certificates found in CA file", extra={"path": path})
        return

    try:
        context.load_verify_locations(cadata="\n".join(blocks))
    except (ssl.SSLError, ValueError) as exc:
        raise CertificateLoadError(
            f"Failed to load CA certificates from {path}: {exc}", path=path
        ) from exc
    logger.debug("Loaded CA certificates", extra={"path": path, "count": len(blocks)})


def _load_client_certificate(context: ssl.SSLContext, settings: TLSSettings) -> None:
    try:
        context.load_cert_chain(
            certfile=settings.client_cert_path,
            keyfile=settings.client_key_path,
        )
    except (OSError, ssl.SSLError) as exc:
        raise CertificateLoadError(
            f"Failed to load client key pair ({settings.client_cert_path}, "
            f"{settings.client_key_path}): {exc}",
            path=settings.client_cert_path,
        ) from exc


def build_ssl_context(settings: TLSSettings) -> ssl.SSLContext:
    """
    Build the SSL context described by ``settings``.

    With a CA path the trust store holds only the certificates from that file;
    without one the platform defaults are loaded. No network I/O happens here.
    """
    settings.validate()

    context = ssl.SSLContext(ssl.PROTOCOL_TLS_CLIENT)
    if settings.ca_cert_path:
        _load_ca_bundle(context, settings.ca_cert_path)
    else:
        context.load_default_certs(ssl.Purpose.SERVER_AUTH)

    if settings.use_mutual_tls:
        _load_client_certificate(context, settings)

    if not settings.verify_server_cert:
        # check_hostname must be cleared before verify_mode can drop to CERT_NONE.
        context.check_hostname = False
        context.verify_mode = ssl.CERT_NONE
        logger.warning("Server certificate verification is disabled")

    return context
