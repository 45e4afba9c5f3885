from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Tuple

import requests

from client_pager.config.model import RequestAttributes, RequestConfig
from client_pager.core.exceptions import RemoteFetchError
from client_pager.core.records import as_records
from client_pager.core.state import SortDirection

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RemoteQuery:
    """
    Everything a remote source needs to produce one page.
    """

    page: int
    per_page: int
    first_page: int = 1
    sort_field: Optional[str] = None
    sort_direction: Optional[SortDirection] = None
    query: Optional[str] = None
    format: Optional[str] = None
    custom_params: Dict[str, Any] = field(default_factory=dict)

    @property
    def skip(self) -> int:
        """Number of records before this page."""
        return (self.page - self.first_page) * self.per_page


@dataclass(frozen=True)
class RemotePage:
    """
    One page as delivered by a remote source. Totals are None when the
    source does not report them.
    """

    records: Tuple[Any, ...]
    total_records: Optional[int] = None
    total_pages: Optional[int] = None


class RemoteFetchAdapter(ABC):
    """
    Abstract interface for a data source that pages, sorts and filters on its own
    (REST API, database service, etc.).
    """

    @abstractmethod
    def fetch(self, query: RemoteQuery) -> RemotePage:
        """
        Retrieve the page described by `query`.

        Raises:
            RemoteFetchError: if the page could not be delivered
        """
        pass


class HttpFetchAdapter(RemoteFetchAdapter):
    """
    Fetches pages with a GET request, mapping the RemoteQuery onto
    query-string parameters named by RequestAttributes.

    The response body may be a JSON list of records, or a JSON object with the
    records under `attributes.results_key` and optional totals.
    """

    def __init__(
            self,
            url: str,
            *,
            attributes: Optional[RequestAttributes] = None,
            timeout: float = 10.0,
            session: Optional[requests.Session] = None,
    ):
        self.url = url
        self.attributes = attributes or RequestAttributes()
        self.timeout = timeout
        self.session = session or requests.Session()

    @classmethod
    def from_config(cls, config: RequestConfig, session: Optional[requests.Session] = None) -> HttpFetchAdapter:
        return cls(config.url, attributes=config.attributes, timeout=config.timeout, session=session)

    def build_params(self, query: RemoteQuery) -> Dict[str, Any]:
        attrs = self.attributes
        paging: Dict[str, Any] = {
            attrs.per_page: query.per_page,
            attrs.skip: query.skip,
            attrs.order: query.sort_field,
            attrs.direction: query.sort_direction.value if query.sort_direction else None,
            attrs.format: query.format,
            attrs.query: query.query,
        }
        params = {k: v for k, v in query.custom_params.items() if v is not None}
        # paging parameters win over custom ones sharing a name
        params.update({k: v for k, v in paging.items() if v is not None})
        return params

    def fetch(self, query: RemoteQuery) -> RemotePage:
        params = self.build_params(query)
        try:
            response = self.session.get(self.url, params=params, timeout=self.timeout)
            response.raise_for_status()
            payload = response.json()
        except requests.RequestException as e:
            logger.exception("Remote fetch failed", extra={"url": self.url, "page": query.page})
            raise RemoteFetchError(f"Failed to fetch page {query.page} from {self.url}: {e}") from e
        except ValueError as e:
            logger.exception("Remote response is not JSON", extra={"url": self.url, "page": query.page})
            raise RemoteFetchError(f"Invalid JSON from {self.url}: {e}") from e

        return self.parse_payload(payload)

    def parse_payload(self, payload: Any) -> RemotePage:
        if isinstance(payload, list):
            return RemotePage(records=as_records(payload))

        if not isinstance(payload, dict):
            raise RemoteFetchError(f"Unexpected response type: {type(payload).__name__}")

        attrs = self.attributes
        results = payload.get(attrs.results_key)
        if not isinstance(results, list):
            raise RemoteFetchError(f"Response has no '{attrs.results_key}' list")

        return RemotePage(
            records=as_records(results),
            total_records=_optional_int(payload.get(attrs.total_records_key)),
            total_pages=_optional_int(payload.get(attrs.total_pages_key)),
        )


def _optional_int(value: Any) -> Optional[int]:
    if value is None:
        return None
    try:
        return int(value)
    except (TypeError, ValueError) as e:
        raise RemoteFetchError(f"Expected an integer total, got {value!r}") from e
