"""Core surface for masthead-client (transport, envelope, pagination, config)."""

from .client import (
    DEFAULT_HOST_URL,
    DEFAULT_TIMEOUT_SECONDS,
    TOKEN_HEADER,
    MastheadClient,
)
from .config import (
    ClientConfig,
    create_client_from_env,
    load_env_config,
    resolve_config,
)
from .envelope import (
    Envelope,
    ErrorDetail,
    ListEnvelope,
    Pagination,
    check_no_error,
    decode_value,
    decode_values,
)
from .errors import (
    MastheadAPIError,
    MastheadClientError,
    MastheadHTTPError,
    MastheadModelValidationError,
    MastheadNotFoundError,
    MastheadParseError,
    MastheadTransportError,
    MastheadValidationError,
    MissingBaseUrlError,
    MissingTokenError,
)
from .pagination import MAX_PAGES, collect_pages

__all__ = [
    # Client
    "MastheadClient",
    "DEFAULT_HOST_URL",
    "DEFAULT_TIMEOUT_SECONDS",
    "TOKEN_HEADER",
    # Exceptions
    "MastheadClientError",
    "MastheadTransportError",
    "MastheadHTTPError",
    "MastheadParseError",
    "MastheadModelValidationError",
    "MastheadAPIError",
    "MastheadValidationError",
    "MastheadNotFoundError",
    "MissingTokenError",
    "MissingBaseUrlError",
    # Envelope
    "Envelope",
    "ListEnvelope",
    "ErrorDetail",
    "Pagination",
    "decode_value",
    "decode_values",
    "check_no_error",
    # Pagination
    "collect_pages",
    "MAX_PAGES",
    # Config helpers
    "ClientConfig",
    "load_env_config",
    "resolve_config",
    "create_client_from_env",
]
