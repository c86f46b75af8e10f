"""Resource modules: users, data domains and data products."""

from .domains import (
    create_domain,
    delete_domain,
    get_domain,
    list_domains,
    update_domain,
)
from .products import (
    create_product,
    delete_product,
    get_product,
    list_products,
    update_product,
)
from .users import create_user, delete_user, get_user, list_users, update_user_role

__all__ = [
    "list_users",
    "create_user",
    "get_user",
    "update_user_role",
    "delete_user",
    "list_domains",
    "create_domain",
    "get_domain",
    "update_domain",
    "delete_domain",
    "list_products",
    "create_product",
    "get_product",
    "update_product",
    "delete_product",
]
