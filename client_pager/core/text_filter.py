from __future__ import annotations

import re
from typing import AbstractSet, Any, FrozenSet, Iterable, List, Union

from .records import get_field, scalar_text
from .state import normalise_fields

_WORD_RE = re.compile(r"\w+")


def tokenize(text: str) -> FrozenSet[str]:
    """Lower-cased, de-duplicated word tokens of `text`."""
    return frozenset(token.lower() for token in _WORD_RE.findall(text))


def field_matches(record: Any, field: str, required: AbstractSet[str]) -> bool:
    value = get_field(record, field)
    # absent and falsy values (None, "", 0, False) never match
    if not value:
        return False
    return required <= tokenize(scalar_text(value))


def matches_query(record: Any, fields: Iterable[str], required: AbstractSet[str]) -> bool:
    """True as soon as one field carries every required token."""
    return any(field_matches(record, field, required) for field in fields)


def filter_records(
        records: Iterable[Any],
        fields: Union[str, Iterable[str]],
        query: Any,
) -> List[Any]:
    """
    AND-of-words text filter.

    Keeps the records where at least one of `fields` contains every word of
    `query` (any order, any casing). Each record appears at most once and the
    input order is preserved. An empty or non-string query, or one without any
    word characters, returns the input unchanged.
    """
    if not isinstance(query, str) or query == "":
        return list(records)

    required = tokenize(query)
    if not required:
        return list(records)

    fields = normalise_fields(fields)
    return [record for record in records if matches_query(record, fields, required)]
