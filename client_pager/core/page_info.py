from __future__ import annotations

from dataclasses import dataclass, asdict, field
from typing import Any, Dict, Optional, Tuple

from .page_range import ADJACENT_PAGES, compute_page_range, total_pages_for


@dataclass(frozen=True)
class PageInfo:
    """
    Read-only snapshot of a view's pagination state.

    total_records always counts the sorted/filtered collection, never just the
    current page (None when a remote source did not report it).
    first_page/last_page are None when there are no pages; previous/next are
    None when there is no such page.
    """

    total_records: Optional[int]
    page: int
    per_page: int
    total_pages: int
    first_page: Optional[int]
    last_page: Optional[int]
    previous: Optional[int]
    next: Optional[int]
    start_record: int
    end_record: int
    page_set: Tuple[int, ...] = field(default_factory=tuple)

    @classmethod
    def build(
            cls,
            *,
            total_records: Optional[int],
            page: int,
            per_page: int,
            first_page: int = 1,
            total_pages: Optional[int] = None,
            adjacent: int = ADJACENT_PAGES,
    ) -> PageInfo:
        if total_pages is None:
            total_pages = total_pages_for(total_records or 0, per_page)

        last_page = first_page + total_pages - 1 if total_pages > 0 else None
        offset = page - first_page

        end_record = (offset + 1) * per_page
        if total_records is not None:
            end_record = min(total_records, end_record)

        # computed on whole pages so a server-supplied page count is enough
        page_set = compute_page_range(offset + 1, total_pages * per_page, per_page, adjacent)

        return cls(
            total_records=total_records,
            page=page,
            per_page=per_page,
            total_pages=total_pages,
            first_page=first_page if total_pages > 0 else None,
            last_page=last_page,
            previous=page - 1 if page > first_page else None,
            next=page + 1 if last_page is not None and page < last_page else None,
            start_record=offset * per_page + 1,
            end_record=end_record,
            page_set=tuple(p + first_page - 1 for p in page_set),
        )

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        data["page_set"] = list(self.page_set)
        return data
