from __future__ import annotations

from unittest.mock import MagicMock

import pytest
import requests

from client_pager.config.model import RequestAttributes
from client_pager.core.exceptions import RemoteFetchError
from client_pager.core.state import SortDirection
from client_pager.services.remote_fetch import HttpFetchAdapter, RemoteQuery


def _make_adapter(payload=None, **kwargs):
    response = MagicMock()
    response.json.return_value = payload
    session = MagicMock()
    session.get.return_value = response
    adapter = HttpFetchAdapter("https://example.test/items", session=session, **kwargs)
    return adapter, session, response


def test_skip_counts_records_before_page():
    assert RemoteQuery(page=3, per_page=10).skip == 20
    assert RemoteQuery(page=3, per_page=10, first_page=0).skip == 30


def test_build_params_uses_attribute_names_and_drops_empty_values():
    adapter, _, _ = _make_adapter(attributes=RequestAttributes(per_page="limit", skip="offset"))
    query = RemoteQuery(
        page=2,
        per_page=10,
        sort_field="name",
        sort_direction=SortDirection.ASC,
        custom_params={"api_key": "k"},
    )

    params = adapter.build_params(query)

    assert params == {
        "limit": 10,
        "offset": 10,
        "orderBy": "name",
        "direction": "asc",
        "api_key": "k",
    }


def test_fetch_sends_get_with_timeout():
    adapter, session, _ = _make_adapter([{"id": 1}], timeout=2.5)

    page = adapter.fetch(RemoteQuery(page=1, per_page=10, query="red"))

    session.get.assert_called_once_with(
        "https://example.test/items",
        params={"perPage": 10, "skip": 0, "q": "red"},
        timeout=2.5,
    )
    assert page.records == ({"id": 1},)
    assert page.total_records is None


def test_fetch_reads_object_payload_with_totals():
    payload = {"results": [{"id": 1}, {"id": 2}], "total": "42", "totalPages": 5}
    adapter, _, _ = _make_adapter(payload)

    page = adapter.fetch(RemoteQuery(page=1, per_page=2))

    assert len(page.records) == 2
    assert page.total_records == 42
    assert page.total_pages == 5


def test_transport_error_surfaces_as_remote_fetch_error():
    adapter, session, _ = _make_adapter()
    session.get.side_effect = requests.ConnectionError("refused")

    with pytest.raises(RemoteFetchError):
        adapter.fetch(RemoteQuery(page=1, per_page=10))


def test_http_error_status_surfaces_as_remote_fetch_error():
    adapter, _, response = _make_adapter()
    response.raise_for_status.side_effect = requests.HTTPError("500 Server Error")

    with pytest.raises(RemoteFetchError):
        adapter.fetch(RemoteQuery(page=1, per_page=10))


def test_invalid_json_surfaces_as_remote_fetch_error():
    adapter, _, response = _make_adapter()
    response.json.side_effect = ValueError("No JSON object could be decoded")

    with pytest.raises(RemoteFetchError):
        adapter.fetch(RemoteQuery(page=1, per_page=10))


@pytest.mark.parametrize(
    "payload",
    [
        "not records",
        {"items": []},
        {"results": [], "total": "lots"},
    ],
)
def test_malformed_payload_is_rejected(payload):
    adapter, _, _ = _make_adapter(payload)

    with pytest.raises(RemoteFetchError):
        adapter.fetch(RemoteQuery(page=1, per_page=10))


def test_custom_params_never_shadow_paging_params():
    adapter, _, _ = _make_adapter()
    query = RemoteQuery(
        page=2,
        per_page=10,
        custom_params={"perPage": 999, "skip": 5, "q": "custom", "api_key": "k"},
    )

    params = adapter.build_params(query)

    assert params["perPage"] == 10
    assert params["skip"] == 10
    # no query of its own, so the custom one goes through
    assert params["q"] == "custom"
    assert params["api_key"] == "k"
