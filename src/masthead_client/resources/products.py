from __future__ import annotations

from typing import List

from masthead_client.core.client import MastheadClient
from masthead_client.models import DataProduct
from masthead_client.resources._rest import RestResource

PRODUCT_PAGE_SIZE = 100

PRODUCTS = RestResource(
    DataProduct,
    name="products",
    base_path="/clientApi/data-product",
    list_path="/clientApi/data-product/list",
    page_size=PRODUCT_PAGE_SIZE,
)


def list_products(client: MastheadClient) -> List[DataProduct]:
    """Return every data product, PRODUCT_PAGE_SIZE per request."""
    return PRODUCTS.list(client)


def create_product(client: MastheadClient, product: DataProduct) -> DataProduct:
    return PRODUCTS.create(client, product)


def get_product(client: MastheadClient, uuid: str) -> DataProduct:
    return PRODUCTS.get(client, uuid)


def update_product(client: MastheadClient, product: DataProduct) -> DataProduct:
    """
    Update a data product.

    The full data_assets list is always sent and replaces the stored list,
    so callers must pass every asset they want to keep.
    """
    return PRODUCTS.update(client, product)


def delete_product(client: MastheadClient, uuid: str) -> None:
    PRODUCTS.delete(client, uuid)


__all__ = [
    "PRODUCTS",
    "PRODUCT_PAGE_SIZE",
    "list_products",
    "create_product",
    "get_product",
    "update_product",
    "delete_product",
]
