from __future__ import annotations

import re
from functools import cmp_to_key
from typing import Any, Iterable, List, Union

from .records import get_field, scalar_text
from .state import SortDirection

# digits with at most one decimal point, e.g. "10", "3.5", ".5", "7."
_NUMERIC_RE = re.compile(r"(?=.*\d)\d*\.?\d*")


def looks_numeric(text: str) -> bool:
    return _NUMERIC_RE.fullmatch(text) is not None


def compare_values(a: Any, b: Any) -> int:
    """
    Ascending three-way comparison of two field values.

    Absent or falsy values compare equal to anything. Otherwise both sides are
    lower-cased text; plain non-negative numbers compare numerically, the rest
    lexicographically.
    """
    if not a or not b:
        return 0

    a_text = scalar_text(a).lower()
    b_text = scalar_text(b).lower()

    if looks_numeric(a_text) and looks_numeric(b_text):
        left, right = float(a_text), float(b_text)
    else:
        left, right = a_text, b_text

    if left < right:
        return -1
    if left > right:
        return 1
    return 0


def sort_records(
        records: Iterable[Any],
        field: str,
        direction: Union[SortDirection, str] = SortDirection.DESC,
) -> List[Any]:
    """
    Return a new list of records ordered by `field`.

    The input is never reordered in place. `sorted` is stable, so records that
    compare equal keep their input order.
    """
    sign = -1 if SortDirection.parse(direction) is SortDirection.DESC else 1

    def _cmp(left: Any, right: Any) -> int:
        return sign * compare_values(get_field(left, field), get_field(right, field))

    return sorted(records, key=cmp_to_key(_cmp))
