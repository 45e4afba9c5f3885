from __future__ import annotations

import pytest

from client_pager.config.model import PagerConfig, RequestConfig
from client_pager.core.exceptions import ConfigError, RemoteFetchError
from client_pager.core.state import SortDirection
from client_pager.services.remote_fetch import (
    HttpFetchAdapter,
    RemoteFetchAdapter,
    RemotePage,
    RemoteQuery,
)
from client_pager.views.request_view import RequestPagedView


class _FakeAdapter(RemoteFetchAdapter):
    """
    Serves pages out of a list of 95 records and remembers every query.
    """

    def __init__(self, total: int = 95, fail: bool = False):
        self.rows = [{"id": i} for i in range(1, total + 1)]
        self.queries: list[RemoteQuery] = []
        self.fail = fail

    def fetch(self, query: RemoteQuery) -> RemotePage:
        self.queries.append(query)
        if self.fail:
            raise RemoteFetchError("server unavailable")
        start = query.skip
        return RemotePage(
            records=tuple(self.rows[start:start + query.per_page]),
            total_records=len(self.rows),
        )


def _ids(records):
    return [r["id"] for r in records]


def _make_view(**kwargs) -> tuple[RequestPagedView, _FakeAdapter]:
    adapter = _FakeAdapter(fail=kwargs.pop("fail", False))
    return RequestPagedView(adapter, per_page=10, **kwargs), adapter


def test_fetch_replaces_models_with_response():
    view, adapter = _make_view()

    view.fetch()

    assert _ids(view.models) == list(range(1, 11))
    assert adapter.queries[-1].skip == 0


def test_next_and_previous_page_request_again():
    view, adapter = _make_view()
    view.fetch()

    view.next_page()
    assert view.page == 2
    assert adapter.queries[-1].skip == 10
    assert _ids(view.models)[0] == 11

    view.previous_page()
    view.previous_page()
    assert view.page == 1
    assert len(adapter.queries) == 4


def test_zero_based_first_page():
    view, adapter = _make_view(first_page=0)

    view.go_to_page(2)

    assert adapter.queries[-1].skip == 20
    assert _ids(view.models)[0] == 21
    info = view.info()
    assert info.first_page == 0
    assert info.last_page == 9


def test_go_to_page_ignores_non_numeric_input():
    view, adapter = _make_view()

    view.go_to_page(None)
    view.go_to_page("abc")

    assert adapter.queries == []


def test_set_page_size_returns_to_first_page():
    view, adapter = _make_view()
    view.go_to_page(4)

    view.set_page_size(25)

    assert view.page == 1
    assert view.per_page == 25
    assert adapter.queries[-1].per_page == 25
    assert len(view.models) == 25


def test_sort_and_query_are_forwarded_to_the_server():
    view, adapter = _make_view()
    view.go_to_page(3)

    view.set_sort("name", "asc")
    assert adapter.queries[-1].sort_field == "name"
    assert adapter.queries[-1].sort_direction is SortDirection.ASC
    assert adapter.queries[-1].page == 3

    view.set_filter("ignored", "red car")
    assert adapter.queries[-1].query == "red car"
    assert adapter.queries[-1].page == 1


def test_failed_fetch_propagates_and_keeps_previous_state():
    view, adapter = _make_view()
    view.fetch()
    adapter.fail = True

    with pytest.raises(RemoteFetchError):
        view.next_page()

    assert view.page == 1
    assert _ids(view.models) == list(range(1, 11))


def test_info_uses_reported_totals():
    view, _ = _make_view()
    view.go_to_page(5)

    info = view.info()

    assert info.total_records == 95
    assert info.total_pages == 10
    assert info.next == 6
    assert info.page_set == tuple(range(1, 11))
    assert view.information == info


def test_info_before_any_fetch_has_no_pages():
    view, _ = _make_view()

    info = view.info()

    assert info.total_pages == 0
    assert info.last_page is None
    assert info.page_set == ()


def test_from_config_requires_request_section():
    with pytest.raises(ConfigError):
        RequestPagedView.from_config(PagerConfig())


def test_from_config_builds_http_adapter():
    config = PagerConfig(
        adjacent_pages=2,
        request=RequestConfig(url="https://example.test/items", first_page=0, per_page=20),
    )

    view = RequestPagedView.from_config(config)

    assert isinstance(view.adapter, HttpFetchAdapter)
    assert view.adapter.url == "https://example.test/items"
    assert view.first_page == 0
    assert view.page == 0
    assert view.per_page == 20
    assert view.adjacent_pages == 2
