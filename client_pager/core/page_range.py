from __future__ import annotations

import logging
from typing import Any, List

logger = logging.getLogger(__name__)

ADJACENT_PAGES = 3


def total_pages_for(total_records: int, per_page: int) -> int:
    """Number of pages needed for `total_records` (0 when there are no records)."""
    if per_page <= 0:
        return 0
    return -(-max(total_records, 0) // per_page)


def compute_page_range(
        current_page: Any,
        total_records: Any,
        per_page: Any,
        adjacent: int = ADJACENT_PAGES,
) -> List[int]:
    """
    Build the compact list of page numbers shown around the current page.

    - one page or fewer: nothing to navigate, empty list
    - fewer than 7 + 2*adjacent pages: every page
    - otherwise a fixed-width run: leading near the start, centred on the
      current page in the middle, trailing near the end

    Malformed numeric input yields an empty list.
    """
    try:
        page = int(current_page)
        total = int(total_records)
        size = int(per_page)
        adjacent = int(adjacent)
    except (TypeError, ValueError):
        logger.debug(
            "Malformed page range input",
            extra={"page": current_page, "total_records": total_records, "per_page": per_page},
        )
        return []

    if size <= 0 or total < 0 or adjacent < 0:
        return []

    last_page = total_pages_for(total, size)
    span = adjacent * 2

    if last_page <= 1:
        return []

    # not enough pages to bother breaking it up
    if last_page < 7 + span:
        return list(range(1, last_page + 1))

    # close to the beginning: only hide later pages
    if page < 1 + span:
        return list(range(1, 4 + span))

    # in the middle: hide some front and some back
    if span < page < last_page - span:
        return list(range(page - adjacent, page + adjacent + 1))

    # close to the end: only hide early pages
    return list(range(last_page - (2 + span), last_page + 1))
