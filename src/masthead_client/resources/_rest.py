"""
Generic CRUD helper shared by the user, domain and product resources.
"""

from __future__ import annotations

from typing import Dict, Generic, List, Optional, Tuple, Type, TypeVar
from urllib.parse import quote

from masthead_client.core.client import MastheadClient, MastheadValidationError
from masthead_client.core.envelope import (
    Pagination,
    check_no_error,
    decode_value,
    decode_values,
)
from masthead_client.core.pagination import MAX_PAGES, collect_pages
from masthead_client.models import WireModel

T = TypeVar("T", bound=WireModel)


def require_identifier(identifier: Optional[str], what: str) -> str:
    """Reject empty identifiers before anything touches the network."""
    if identifier is None or not str(identifier).strip():
        raise MastheadValidationError(f"{what} cannot be empty")
    return str(identifier)


class RestResource(Generic[T]):
    """
    One entity kind exposed by the client API.

    base_path serves create (POST) and, suffixed with the identifier,
    get/update/delete. list_path returns an envelope of values; when
    paginated, it is called with page=1, 2, ... until exhausted.
    """

    def __init__(
        self,
        model: Type[T],
        *,
        name: str,
        base_path: str,
        list_path: str,
        identifier: str = "uuid",
        paginated: bool = True,
        page_size: Optional[int] = None,
        update_method: str = "PUT",
        max_pages: int = MAX_PAGES,
    ):
        self.model = model
        self.name = name
        self.base_path = base_path.rstrip("/")
        self.list_path = list_path
        self.identifier = identifier
        self.paginated = paginated
        self.page_size = page_size
        self.update_method = update_method
        self.max_pages = max_pages

    def item_path(self, identifier: Optional[str]) -> str:
        ident = require_identifier(identifier, f"{self.name} {self.identifier}")
        return f"{self.base_path}/{quote(ident, safe='@')}"

    def _page_params(self, page: int) -> Dict[str, int]:
        params = {"page": page}
        if self.page_size is not None:
            params["limit"] = self.page_size
        return params

    def list_page(
        self, client: MastheadClient, page: int
    ) -> Tuple[List[T], Pagination]:
        raw = client.get(
            self.list_path, params=self._page_params(page), resource=self.name
        )
        return decode_values(raw, self.model)

    def list(self, client: MastheadClient) -> List[T]:
        if not self.paginated:
            raw = client.get(self.list_path, resource=self.name)
            items, _ = decode_values(raw, self.model)
            return items

        return collect_pages(
            lambda page: self.list_page(client, page),
            max_pages=self.max_pages,
            resource=self.name,
        )

    def create(self, client: MastheadClient, entity: T) -> T:
        raw = client.post(
            self.base_path, json=entity.to_payload(), resource=self.name
        )
        return decode_value(raw, self.model)

    def get(self, client: MastheadClient, identifier: str) -> T:
        raw = client.get(self.item_path(identifier), resource=self.name)
        return decode_value(raw, self.model)

    def update(
        self, client: MastheadClient, entity: T, *, path: Optional[str] = None
    ) -> T:
        ident = require_identifier(
            getattr(entity, self.identifier, None), f"{self.name} {self.identifier}"
        )
        raw = client.request(
            self.update_method,
            path or self.item_path(ident),
            json=entity.to_payload(),
            resource=self.name,
        )
        return decode_value(raw, self.model)

    def delete(self, client: MastheadClient, identifier: str) -> None:
        raw = client.delete(self.item_path(identifier), resource=self.name)
        check_no_error(raw)


__all__ = ["RestResource", "require_identifier"]
