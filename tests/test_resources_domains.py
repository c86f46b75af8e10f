import json

import pytest
import respx
from httpx import Response
from masthead_client.core.client import (
    MastheadAPIError,
    MastheadHTTPError,
    MastheadValidationError,
)
from masthead_client.models import Domain
from masthead_client.resources.domains import (
    create_domain,
    delete_domain,
    get_domain,
    list_domains,
    update_domain,
)

from payloads import BASE_URL, domain_payload

LIST_URL = f"{BASE_URL}/clientApi/data-domain/list"


def _paged(pages, total):
    """side_effect serving `pages` (lists of payloads) by the page query param."""

    def handler(request):
        page = int(request.url.params["page"])
        values = pages[page - 1] if page <= len(pages) else []
        return Response(
            200, json={"values": values, "pagination": {"total": total, "page": page}}
        )

    return handler


@respx.mock
def test_list_domains_follows_pages(client):
    pages = [
        [domain_payload(uuid="d-1"), domain_payload(uuid="d-2")],
        [domain_payload(uuid="d-3")],
    ]
    route = respx.get(LIST_URL).mock(side_effect=_paged(pages, total=3))

    domains = list_domains(client)

    assert [d.uuid for d in domains] == ["d-1", "d-2", "d-3"]
    assert [c.request.url.params["page"] for c in route.calls] == ["1", "2"]
    assert all("limit" not in c.request.url.params for c in route.calls)


@respx.mock
def test_list_domains_empty(client):
    route = respx.get(LIST_URL).mock(side_effect=_paged([], total=0))

    assert list_domains(client) == []
    assert route.call_count == 1


@respx.mock
def test_list_domains_stops_on_empty_page_before_total(client):
    pages = [[domain_payload(uuid="d-1")]]
    route = respx.get(LIST_URL).mock(side_effect=_paged(pages, total=5))

    domains = list_domains(client)

    assert [d.uuid for d in domains] == ["d-1"]
    assert route.call_count == 2


@respx.mock
def test_list_domains_null_pagination_counts_as_zero(client):
    route = respx.get(LIST_URL).mock(
        return_value=Response(
            200,
            json={
                "values": [domain_payload(uuid="d-1")],
                "pagination": {"total": None, "page": None},
            },
        )
    )

    domains = list_domains(client)

    assert [d.uuid for d in domains] == ["d-1"]
    assert route.call_count == 1


@respx.mock
def test_list_domains_error_on_later_page(client):
    respx.get(LIST_URL).mock(
        side_effect=[
            Response(
                200,
                json={
                    "values": [domain_payload(uuid="d-1")],
                    "pagination": {"total": 2, "page": 1},
                },
            ),
            Response(200, json={"values": [], "error": "RATE", "message": "slow down"}),
        ]
    )

    with pytest.raises(MastheadAPIError) as exc:
        list_domains(client)

    assert exc.value.message == "slow down"


@respx.mock
def test_create_domain_sends_write_fields_only(client):
    route = respx.post(f"{BASE_URL}/clientApi/data-domain").mock(
        return_value=Response(200, json={"value": domain_payload(uuid="d-new")})
    )

    created = create_domain(
        client,
        Domain(
            name="Finance",
            email="finance@example.com",
            slack_channel_name="finance-alerts",
        ),
    )

    assert created.uuid == "d-new"
    assert created.slack_channel.name == "finance-alerts"
    assert created.slack_channel.id == "C123"
    assert created.created_at.year == 2025
    assert json.loads(route.calls[0].request.content) == {
        "name": "Finance",
        "email": "finance@example.com",
        "slackChannelName": "finance-alerts",
    }


@respx.mock
def test_create_then_get_round_trip(client):
    respx.post(f"{BASE_URL}/clientApi/data-domain").mock(
        return_value=Response(200, json={"value": domain_payload(uuid="d-9")})
    )
    respx.get(f"{BASE_URL}/clientApi/data-domain/d-9").mock(
        return_value=Response(200, json={"value": domain_payload(uuid="d-9")})
    )

    created = create_domain(client, Domain(name="Finance", email="finance@example.com"))
    fetched = get_domain(client, created.uuid)

    assert (fetched.name, fetched.email) == (created.name, created.email)
    assert fetched == created


@respx.mock
def test_get_domain_unknown_uuid(client):
    respx.get(f"{BASE_URL}/clientApi/data-domain/bad-uuid").mock(
        return_value=Response(404, text="not found")
    )

    with pytest.raises(MastheadHTTPError) as exc:
        get_domain(client, "bad-uuid")

    assert "404" in str(exc.value)
    assert "not found" in str(exc.value)


@respx.mock
def test_get_domain_envelope_error_returns_no_value(client):
    respx.get(f"{BASE_URL}/clientApi/data-domain/d-1").mock(
        return_value=Response(
            200,
            json={
                "value": domain_payload(uuid="d-1"),
                "error": {"code": "FORBIDDEN", "message": "not your domain"},
            },
        )
    )

    with pytest.raises(MastheadAPIError) as exc:
        get_domain(client, "d-1")

    assert exc.value.detail.code == "FORBIDDEN"


def test_get_domain_empty_uuid_sends_nothing(client):
    with respx.mock(assert_all_called=False) as router:
        route = router.route().mock(return_value=Response(200, json={}))

        with pytest.raises(MastheadValidationError):
            get_domain(client, "")

    assert route.call_count == 0


@respx.mock
def test_update_domain_puts_full_entity(client):
    route = respx.put(f"{BASE_URL}/clientApi/data-domain/d-1").mock(
        return_value=Response(
            200, json={"value": domain_payload(uuid="d-1", name="Finance (Updated)")}
        )
    )
    current = Domain.model_validate(domain_payload(uuid="d-1"))

    updated = update_domain(
        client, current.model_copy(update={"name": "Finance (Updated)"})
    )

    assert updated.name == "Finance (Updated)"
    assert json.loads(route.calls[0].request.content) == {
        "uuid": "d-1",
        "name": "Finance (Updated)",
        "email": "finance@example.com",
    }


def test_update_domain_empty_uuid_sends_nothing(client):
    with respx.mock(assert_all_called=False) as router:
        route = router.route().mock(return_value=Response(200, json={}))

        with pytest.raises(MastheadValidationError):
            update_domain(client, Domain(uuid="", name="x", email="x@example.com"))

    assert route.call_count == 0


@respx.mock
def test_delete_domain(client):
    route = respx.delete(f"{BASE_URL}/clientApi/data-domain/d-1").mock(
        return_value=Response(200, json={"value": None})
    )

    delete_domain(client, "d-1")

    assert route.called


@respx.mock
def test_delete_domain_envelope_error(client):
    respx.delete(f"{BASE_URL}/clientApi/data-domain/d-1").mock(
        return_value=Response(
            200, json={"error": "IN_USE", "message": "domain has products"}
        )
    )

    with pytest.raises(MastheadAPIError) as exc:
        delete_domain(client, "d-1")

    assert "domain has products" in str(exc.value)


@respx.mock
def test_path_identifier_is_escaped(client):
    route = respx.get(f"{BASE_URL}/clientApi/data-domain/a%2Fb").mock(
        return_value=Response(200, json={"value": domain_payload(uuid="a/b")})
    )

    get_domain(client, "a/b")

    assert route.calls[0].request.url.raw_path == b"/clientApi/data-domain/a%2Fb"
