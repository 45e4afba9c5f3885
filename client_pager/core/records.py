from __future__ import annotations

from typing import Any, Iterable, Mapping, Optional, Tuple, Union

import numpy as np
import pandas as pd

Record = Mapping[str, Any]
Scalar = Union[str, int, float, bool]
RecordSource = Union[pd.DataFrame, Iterable[Any], None]


def _is_missing(value: Any) -> bool:
    if value is None:
        return True
    try:
        return bool(pd.isna(value))
    except (TypeError, ValueError):
        # array-likes have no single truth value; they are present
        return False


def normalise_scalar(value: Any) -> Optional[Scalar]:
    """
    Map a raw cell value onto the scalar variants used by sorting and filtering.

    None, NaN, pd.NA and NaT all become None ("absent"). numpy scalars are
    unwrapped to their Python equivalents.
    """
    if _is_missing(value):
        return None
    if isinstance(value, np.generic):
        return value.item()
    return value


def get_field(record: Any, field: str) -> Optional[Scalar]:
    """
    Capability-typed accessor: return the scalar stored under `field`, or None
    when the record does not carry it.

    Mappings are read by key, anything else by attribute, so dataclasses and
    plain objects can be paged as well.
    """
    if isinstance(record, Mapping):
        raw = record.get(field)
    else:
        raw = getattr(record, field, None)
    return normalise_scalar(raw)


def scalar_text(value: Scalar) -> str:
    """
    String form of a scalar as used for comparison and tokenising.
    Booleans are rendered "true"/"false", integral floats drop their ".0".
    """
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def records_from_frame(frame: pd.DataFrame) -> Tuple[dict, ...]:
    """
    Convert a DataFrame into a tuple of plain dict records (one per row, in row
    order). Missing cells become None.
    """
    columns = [str(c) for c in frame.columns]
    records = []
    for row in frame.itertuples(index=False, name=None):
        records.append(
            {col: normalise_scalar(value) for col, value in zip(columns, row)}
        )
    return tuple(records)


def as_records(source: RecordSource) -> Tuple[Any, ...]:
    """Freeze any accepted dataset shape into an immutable tuple of records."""
    if source is None:
        return ()
    if isinstance(source, pd.DataFrame):
        return records_from_frame(source)
    return tuple(source)
