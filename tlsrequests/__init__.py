"""
TLS-aware HTTP client with pluggable body encoders and request decorators.

Build a client from a TLSSettings policy, then call ``get``, ``post`` or
``post_form_data`` with an encoder from ``tlsrequests.encoders`` and any
number of decorators from ``tlsrequests.decorators``.
"""

from tlsrequests.client import RequestsClient
from tlsrequests.decorators import RequestDecorator, add_header, add_query_param
from tlsrequests.encoders import BodyEncoder, FileAttachment, form_data, json_data, multipart_data
from tlsrequests.errors import (
    BodyReadError,
    CertificateLoadError,
    ConfigLoadError,
    ConfigValidationError,
    DeserializationError,
    RequestBuildError,
    RequestsError,
    SerializationError,
    TransportError,
)
from tlsrequests.response import ResponseData
from tlsrequests.settings import TLSSettings
from tlsrequests.version import __version__

__all__ = [
    "BodyEncoder",
    "BodyReadError",
    "CertificateLoadError",
    "ConfigLoadError",
    "ConfigValidationError",
    "DeserializationError",
    "FileAttachment",
    "RequestBuildError",
    "RequestDecorator",
    "RequestsClient",
    "RequestsError",
    "ResponseData",
    "SerializationError",
    "TLSSettings",
    "TransportError",
    "__version__",
    "add_header",
    "add_query_param",
    "form_data",
    "json_data",
    "multipart_data",
]
