from __future__ import annotations

import logging
from typing import Any, Dict, Iterable, Optional, Tuple, Union

from client_pager.config.model import PagerConfig, RequestConfig
from client_pager.core.base_view import PaginatedView, coerce_int
from client_pager.core.exceptions import ConfigError
from client_pager.core.page_info import PageInfo
from client_pager.core.state import SortDirection
from client_pager.services.remote_fetch import (
    HttpFetchAdapter,
    RemoteFetchAdapter,
    RemotePage,
    RemoteQuery,
)

logger = logging.getLogger(__name__)


class RequestPagedView(PaginatedView):
    """
    Paginator for server-side data requested from a backend/API.

    Sorting, filtering and windowing all happen on the server: every operation
    updates the request parameters and fetches the page again. The records of
    the response replace the current models.

    Remote failures propagate as RemoteFetchError; the view keeps its previous
    page and parameters when a fetch fails.
    """

    def __init__(
            self,
            adapter: RemoteFetchAdapter,
            *,
            first_page: int = 1,
            per_page: int = 10,
            format: Optional[str] = None,
            custom_params: Optional[Dict[str, Any]] = None,
            adjacent_pages: Optional[int] = None,
    ):
        self.adapter = adapter
        self.first_page = first_page
        self.page = first_page
        self.per_page = per_page
        self.format = format
        self.custom_params = dict(custom_params or {})
        self.adjacent_pages = adjacent_pages if adjacent_pages is not None else PagerConfig().adjacent_pages

        self.sort_field: Optional[str] = None
        self.sort_direction: Optional[SortDirection] = None
        self.query: Optional[str] = None

        self.total_records: Optional[int] = None
        self.total_pages: Optional[int] = None
        self._models: Tuple[Any, ...] = ()
        self._information: Optional[PageInfo] = None

    @classmethod
    def from_config(
            cls,
            config: PagerConfig,
            adapter: Optional[RemoteFetchAdapter] = None,
    ) -> RequestPagedView:
        """
        Build a view from PagerConfig.request. Without an explicit adapter an
        HttpFetchAdapter pointed at the configured url is used.
        """
        request: Optional[RequestConfig] = config.request
        if request is None:
            raise ConfigError("PagerConfig has no 'request' section")
        return cls(
            adapter or HttpFetchAdapter.from_config(request),
            first_page=request.first_page,
            per_page=request.per_page,
            format=request.format,
            custom_params=request.custom_params,
            adjacent_pages=config.adjacent_pages,
        )

    @property
    def models(self) -> Tuple[Any, ...]:
        return self._models

    @property
    def information(self) -> Optional[PageInfo]:
        return self._information

    # ------------------------------------------------------------------
    # Request parameters
    # ------------------------------------------------------------------
    def build_query(self, **overrides: Any) -> RemoteQuery:
        params = dict(
            page=self.page,
            per_page=self.per_page,
            first_page=self.first_page,
            sort_field=self.sort_field,
            sort_direction=self.sort_direction,
            query=self.query,
            format=self.format,
            custom_params=dict(self.custom_params),
        )
        params.update(overrides)
        return RemoteQuery(**params)

    def fetch(self, **overrides: Any) -> RemotePage:
        """
        Request the page described by the current parameters (plus `overrides`)
        and adopt it. Parameters and models only change once the fetch succeeds.
        """
        query = self.build_query(**overrides)
        logger.debug("Requesting remote page", extra={"page": query.page, "per_page": query.per_page})

        result = self.adapter.fetch(query)

        self.page = query.page
        self.per_page = query.per_page
        self.sort_field = query.sort_field
        self.sort_direction = query.sort_direction
        self.query = query.query
        self._models = tuple(result.records)
        self.total_records = result.total_records
        self.total_pages = result.total_pages
        return result

    # ------------------------------------------------------------------
    # Paging
    # ------------------------------------------------------------------
    def next_page(self) -> None:
        self.fetch(page=self.page + 1)

    def previous_page(self) -> None:
        self.fetch(page=max(self.first_page, self.page - 1))

    def go_to_page(self, page: Any) -> None:
        if page is None:
            return
        try:
            number = coerce_int(page)
        except (TypeError, ValueError):
            logger.warning("Ignoring non-numeric page", extra={"page": repr(page)})
            return
        self.fetch(page=max(self.first_page, number))

    def set_page_size(self, per_page: Any) -> None:
        if per_page is None:
            return
        try:
            size = coerce_int(per_page)
        except (TypeError, ValueError):
            size = 0
        if size < 1:
            logger.warning("Ignoring invalid page size", extra={"per_page": repr(per_page)})
            return
        self.fetch(page=self.first_page, per_page=size)

    # ------------------------------------------------------------------
    # Ordering / searching (server-side)
    # ------------------------------------------------------------------
    def set_sort(
            self,
            field: Optional[str],
            direction: Optional[Union[SortDirection, str]] = None,
    ) -> None:
        if field is None:
            return
        parsed = self.sort_direction
        if direction is not None:
            try:
                parsed = SortDirection.parse(direction)
            except ValueError:
                logger.warning("Ignoring unknown sort direction", extra={"direction": repr(direction)})
                return
        self.fetch(sort_field=field or None, sort_direction=parsed)

    def set_filter(
            self,
            fields: Optional[Union[str, Iterable[str]]],
            query: Optional[str],
    ) -> None:
        # the server decides which fields a query searches
        if query is None:
            return
        self.fetch(page=self.first_page, query=query or None)

    def info(self) -> PageInfo:
        total_pages = self.total_pages
        if total_pages is None and self.total_records is None:
            total_pages = 0

        info = PageInfo.build(
            total_records=self.total_records,
            page=self.page,
            per_page=self.per_page,
            first_page=self.first_page,
            total_pages=total_pages,
            adjacent=self.adjacent_pages,
        )
        self._information = info
        return info
