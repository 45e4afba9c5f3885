from __future__ import annotations

import logging
from typing import Any, Iterable, Optional, Tuple, Union

from client_pager.config.model import PagerConfig
from client_pager.core.base_view import PaginatedView, coerce_int
from client_pager.core.page_info import PageInfo
from client_pager.core.records import RecordSource, as_records
from client_pager.core.sorter import sort_records
from client_pager.core.state import SortDirection, ViewState, normalise_fields
from client_pager.core.text_filter import filter_records

logger = logging.getLogger(__name__)


class ClientPagedView(PaginatedView):
    """
    Paginator for a single in-memory payload of records.

    Keeps the dataset it was given untouched and derives everything else from it:
    - derived: original -> sort (if active) -> filter (if active)
    - models: the slice [(page-1)*per_page, page*per_page) of derived

    Every mutating operation builds a new ViewState, recomputes derived and the
    page slice, and only then swaps all three in, so `info()` never observes a
    half-applied change. Invalid arguments are logged and ignored.
    """

    def __init__(
            self,
            records: RecordSource = None,
            per_page: Optional[int] = None,
            *,
            config: Optional[PagerConfig] = None,
            sort_field: Optional[str] = None,
            sort_direction: Optional[Union[SortDirection, str]] = None,
            filter_fields: Union[str, Iterable[str]] = (),
            filter_query: Optional[str] = None,
    ) -> None:
        self.config = config or PagerConfig()

        self._original: Tuple[Any, ...] = as_records(records)
        self._derived: Tuple[Any, ...] = ()
        self._models: Tuple[Any, ...] = ()
        self._information: Optional[PageInfo] = None

        if per_page is None:
            per_page = self.config.per_page
        if per_page < 1:
            raise ValueError(f"per_page must be >= 1, got {per_page}")

        state = ViewState(
            per_page=per_page,
            sort_field=sort_field or None,
            sort_direction=SortDirection.parse(sort_direction or self.config.sort_direction),
            filter_fields=normalise_fields(filter_fields),
            filter_query=filter_query or None,
        )
        self._apply(state)

    # ------------------------------------------------------------------
    # Read-only accessors
    # ------------------------------------------------------------------
    @property
    def state(self) -> ViewState:
        return self._state

    @property
    def original(self) -> Tuple[Any, ...]:
        return self._original

    @property
    def derived(self) -> Tuple[Any, ...]:
        """The sorted and filtered collection, before slicing."""
        return self._derived

    @property
    def models(self) -> Tuple[Any, ...]:
        return self._models

    @property
    def information(self) -> Optional[PageInfo]:
        """Last PageInfo computed by `info()` or a sort/filter change."""
        return self._information

    # ------------------------------------------------------------------
    # Paging
    # ------------------------------------------------------------------
    def next_page(self) -> None:
        self._apply(self._state.updated(page=self._state.page + 1))

    def previous_page(self) -> None:
        self._apply(self._state.updated(page=max(1, self._state.page - 1)))

    def go_to_page(self, page: Any) -> None:
        """
        Jump to `page`. There is no upper bound: a page past the last one
        yields an empty slice. Values below 1 are clamped to 1.
        """
        if page is None:
            return
        try:
            number = coerce_int(page)
        except (TypeError, ValueError):
            logger.warning("Ignoring non-numeric page", extra={"page": repr(page)})
            return
        self._apply(self._state.updated(page=max(1, number)))

    def set_page_size(self, per_page: Any) -> None:
        """Change the page size and go back to the first page."""
        if per_page is None:
            return
        try:
            size = coerce_int(per_page)
        except (TypeError, ValueError):
            size = 0
        if size < 1:
            logger.warning("Ignoring invalid page size", extra={"per_page": repr(per_page)})
            return
        self._apply(self._state.updated(per_page=size, page=1))

    # ------------------------------------------------------------------
    # Sorting / filtering
    # ------------------------------------------------------------------
    def set_sort(
            self,
            field: Optional[str],
            direction: Optional[Union[SortDirection, str]],
    ) -> None:
        """
        Order the view by `field` in `direction` ("asc" or "desc").
        An empty field name clears the sort.
        """
        if field is None or direction is None:
            return
        try:
            parsed = SortDirection.parse(direction)
        except ValueError:
            logger.warning("Ignoring unknown sort direction", extra={"direction": repr(direction)})
            return
        self._apply(self._state.updated(sort_field=field or None, sort_direction=parsed))
        self.info()

    def set_filter(
            self,
            fields: Optional[Union[str, Iterable[str]]],
            query: Optional[str],
    ) -> None:
        """
        Keep only records where one of `fields` contains every word of `query`.
        An empty query clears the filter.
        """
        if fields is None or query is None:
            return
        self._apply(
            self._state.updated(
                filter_fields=normalise_fields(fields),
                filter_query=query or None,
            )
        )
        self.info()

    def clear_sort(self) -> None:
        self._apply(self._state.updated(sort_field=None))

    def clear_filter(self) -> None:
        self._apply(self._state.updated(filter_fields=(), filter_query=None))

    def reset(self, records: RecordSource) -> None:
        """
        Replace the original dataset, e.g. after fetching a fresh payload.
        Sort and filter stay active; the page goes back to 1.
        """
        self._original = as_records(records)
        self._apply(self._state.updated(page=1))

    def restore(self, state: ViewState) -> None:
        """
        Adopt a previously saved state, e.g. one rebuilt with ViewState.from_dict.

        Raises:
            ValueError: if the state's per_page is below 1
        """
        if state.per_page < 1:
            raise ValueError(f"per_page must be >= 1, got {state.per_page}")
        self._apply(state.updated(page=max(1, state.page)))
        self.info()

    # ------------------------------------------------------------------
    # Derivation
    # ------------------------------------------------------------------
    def refresh(self) -> None:
        """Recompute the derived collection and page slice for the current state."""
        self._apply(self._state)

    def _derive(self, state: ViewState) -> Tuple[Any, ...]:
        models = self._original
        if state.sort_active:
            models = sort_records(models, state.sort_field, state.sort_direction)
        if state.filter_active:
            models = filter_records(models, state.filter_fields, state.filter_query)
        return tuple(models)

    def _apply(self, state: ViewState) -> None:
        derived = self._derive(state)
        start = (state.page - 1) * state.per_page
        stop = start + state.per_page

        self._state = state
        self._derived = derived
        self._models = derived[start:stop]

        logger.debug(
            "View refreshed",
            extra={
                "page": state.page,
                "per_page": state.per_page,
                "total_records": len(derived),
                "page_records": len(self._models),
            },
        )

    def info(self) -> PageInfo:
        info = PageInfo.build(
            total_records=len(self._derived),
            page=self._state.page,
            per_page=self._state.per_page,
            adjacent=self.config.adjacent_pages,
        )
        self._information = info
        return info
