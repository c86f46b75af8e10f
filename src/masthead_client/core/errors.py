from .client import (
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

__all__ = [
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
]
