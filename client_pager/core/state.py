from __future__ import annotations

from dataclasses import dataclass, field, asdict, replace
from enum import Enum
from typing import Any, Dict, Iterable, Optional, Tuple, Union


class SortDirection(str, Enum):
    ASC = "asc"
    DESC = "desc"

    @classmethod
    def parse(cls, value: Union[SortDirection, str]) -> SortDirection:
        """
        Accept an enum member or "asc"/"desc" in any casing.

        Raises:
            ValueError: for anything else
        """
        if isinstance(value, SortDirection):
            return value
        if isinstance(value, str):
            try:
                return cls(value.strip().lower())
            except ValueError:
                pass
        raise ValueError(f"Unknown sort direction: {value!r}")


def normalise_fields(fields: Union[str, Iterable[str]]) -> Tuple[str, ...]:
    """A single field name or a collection of names, as an ordered tuple."""
    if isinstance(fields, str):
        return (fields,)
    return tuple(str(f) for f in fields)


@dataclass(frozen=True)
class ViewState:
    """
    Represents the current paging/sort/filter selection of a view.

    Fields:

    - page: 1-indexed current page, always >= 1
    - per_page: number of records per page
    - sort_field: field used for ordering, None if no sort is active
    - sort_direction: direction applied when sort_field is set
    - filter_fields: fields searched by the text filter
    - filter_query: free-text query, None if no filter is active

    Instances are never mutated; operations build a new one with `updated`.
    """

    per_page: int
    page: int = 1

    sort_field: Optional[str] = None
    sort_direction: SortDirection = SortDirection.DESC

    filter_fields: Tuple[str, ...] = field(default_factory=tuple)
    filter_query: Optional[str] = None

    @property
    def sort_active(self) -> bool:
        return bool(self.sort_field)

    @property
    def filter_active(self) -> bool:
        return bool(self.filter_query) and bool(self.filter_fields)

    def updated(self, **changes: Any) -> ViewState:
        return replace(self, **changes)

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        data["sort_direction"] = self.sort_direction.value
        data["filter_fields"] = list(self.filter_fields)
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> ViewState:
        """
        Raises:
            ValueError: if per_page is below 1 or a value cannot be parsed
        """
        per_page = int(data["per_page"])
        if per_page < 1:
            raise ValueError(f"per_page must be >= 1, got {per_page}")
        return cls(
            per_page=per_page,
            page=max(1, int(data.get("page", 1))),
            sort_field=data.get("sort_field") or None,
            sort_direction=SortDirection.parse(data.get("sort_direction", "desc")),
            filter_fields=normalise_fields(data.get("filter_fields", ())),
            filter_query=data.get("filter_query") or None,
        )
