from __future__ import annotations

from dataclasses import dataclass, field, asdict
from typing import Any, Dict, Optional

from client_pager.core.exceptions import ConfigError
from client_pager.core.page_range import ADJACENT_PAGES
from client_pager.core.state import SortDirection


@dataclass(frozen=True)
class RequestAttributes:
    """
    Names used on the wire when talking to a remote data source.

    The query-string names map each RemoteQuery value onto the parameter the
    server expects; the *_key names locate records and totals in a JSON
    object response.
    """

    per_page: str = "perPage"
    skip: str = "skip"
    order: str = "orderBy"
    direction: str = "direction"
    query: str = "q"
    format: str = "format"

    results_key: str = "results"
    total_records_key: str = "total"
    total_pages_key: str = "totalPages"


@dataclass
class RequestConfig:
    """
    Settings for server-driven paging.
    """

    url: str
    first_page: int = 1
    per_page: int = 10
    format: Optional[str] = "json"
    timeout: float = 10.0
    custom_params: Dict[str, Any] = field(default_factory=dict)
    attributes: RequestAttributes = field(default_factory=RequestAttributes)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> RequestConfig:
        if not isinstance(data, dict):
            raise ConfigError(f"request config must be an object, got {type(data).__name__}")
        if not data.get("url"):
            raise ConfigError("request config requires a 'url'")
        try:
            return cls(
                url=str(data["url"]),
                first_page=int(data.get("first_page", 1)),
                per_page=_positive_int(data.get("per_page", 10), "request.per_page"),
                format=data.get("format", "json"),
                timeout=float(data.get("timeout", 10.0)),
                custom_params=dict(data.get("custom_params", {})),
                attributes=RequestAttributes(**data.get("attributes", {})),
            )
        except (TypeError, ValueError) as e:
            raise ConfigError(f"Invalid request config: {e}") from e


@dataclass
class PagerConfig:
    """
    Top-level pager configuration.

    - per_page: default page size for new views
    - adjacent_pages: pages shown on each side of the current one in PageInfo.page_set
    - sort_direction: direction used when a sort is set without one
    - request: optional server-mode settings
    """

    per_page: int = 10
    adjacent_pages: int = ADJACENT_PAGES
    sort_direction: SortDirection = SortDirection.DESC
    request: Optional[RequestConfig] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> PagerConfig:
        try:
            adjacent = int(data.get("adjacent_pages", ADJACENT_PAGES))
            direction = SortDirection.parse(data.get("sort_direction", "desc"))
        except (TypeError, ValueError) as e:
            raise ConfigError(f"Invalid pager config: {e}") from e

        if adjacent < 0:
            raise ConfigError("adjacent_pages must be >= 0")

        raw_request = data.get("request")
        if raw_request is not None and not isinstance(raw_request, dict):
            raise ConfigError(f"request must be a JSON object, got {type(raw_request).__name__}")

        return cls(
            per_page=_positive_int(data.get("per_page", 10), "per_page"),
            adjacent_pages=adjacent,
            sort_direction=direction,
            request=RequestConfig.from_dict(raw_request) if raw_request else None,
        )

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        data["sort_direction"] = self.sort_direction.value
        return data


def _positive_int(value: Any, name: str) -> int:
    try:
        number = int(value)
    except (TypeError, ValueError) as e:
        raise ConfigError(f"{name} must be an integer, got {value!r}") from e
    if number < 1:
        raise ConfigError(f"{name} must be >= 1, got {number}")
    return number
