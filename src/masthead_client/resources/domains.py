from __future__ import annotations

from typing import List

from masthead_client.core.client import MastheadClient
from masthead_client.models import Domain
from masthead_client.resources._rest import RestResource

DOMAINS = RestResource(
    Domain,
    name="domains",
    base_path="/clientApi/data-domain",
    list_path="/clientApi/data-domain/list",
)


def list_domains(client: MastheadClient) -> List[Domain]:
    """Return every data domain, following pages until exhausted."""
    return DOMAINS.list(client)


def create_domain(client: MastheadClient, domain: Domain) -> Domain:
    """
    Create a data domain. The uuid is assigned by the server; the returned
    Domain carries it along with the resolved slack_channel.
    """
    return DOMAINS.create(client, domain)


def get_domain(client: MastheadClient, uuid: str) -> Domain:
    return DOMAINS.get(client, uuid)


def update_domain(client: MastheadClient, domain: Domain) -> Domain:
    return DOMAINS.update(client, domain)


def delete_domain(client: MastheadClient, uuid: str) -> None:
    DOMAINS.delete(client, uuid)


__all__ = [
    "DOMAINS",
    "list_domains",
    "create_domain",
    "get_domain",
    "update_domain",
    "delete_domain",
]
