"""masthead-client: Python client for the Masthead client API."""

from .core.client import (
    DEFAULT_HOST_URL,
    MastheadAPIError,
    MastheadClient,
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
from .core.config import ClientConfig, create_client_from_env, resolve_config
from .core.envelope import ErrorDetail, Pagination
from .core.logging import setup_logging
from .models import (
    AlertType,
    DataAsset,
    DataAssetType,
    DataProduct,
    Domain,
    SlackChannel,
    User,
    UserRole,
)
from .resources import (
    create_domain,
    create_product,
    create_user,
    delete_domain,
    delete_product,
    delete_user,
    get_domain,
    get_product,
    get_user,
    list_domains,
    list_products,
    list_users,
    update_domain,
    update_product,
    update_user_role,
)

__version__ = "0.1.0"

__all__ = [
    # Client
    "MastheadClient",
    "ClientConfig",
    "DEFAULT_HOST_URL",
    "create_client_from_env",
    "resolve_config",
    "setup_logging",
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
    "ErrorDetail",
    "Pagination",
    # Models
    "User",
    "UserRole",
    "Domain",
    "SlackChannel",
    "DataProduct",
    "DataAsset",
    "DataAssetType",
    "AlertType",
    # Users
    "list_users",
    "create_user",
    "get_user",
    "update_user_role",
    "delete_user",
    # Domains
    "list_domains",
    "create_domain",
    "get_domain",
    "update_domain",
    "delete_domain",
    # Products
    "list_products",
    "create_product",
    "get_product",
    "update_product",
    "delete_product",
]
