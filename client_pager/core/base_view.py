from __future__ import annotations

import math
import numbers
from abc import ABC, abstractmethod
from typing import Any, Iterable, Optional, Tuple, Union

from .page_info import PageInfo
from .state import SortDirection


def coerce_int(value: Any) -> int:
    """
    Parse a page number or page size.

    Accepts integers (numpy ones included), finite reals (truncated) and
    numeric strings such as "3", " 3 " or "3.0".

    Raises:
        ValueError/TypeError: when the value is not numeric
    """
    if isinstance(value, bool):
        raise TypeError(f"Not a number: {value!r}")
    if isinstance(value, numbers.Integral):
        return int(value)
    if isinstance(value, str):
        value = value.strip()
        try:
            return int(value, 10)
        except ValueError:
            value = float(value)
    if isinstance(value, numbers.Real):
        value = float(value)
        if not math.isfinite(value):
            raise ValueError(f"Not a finite number: {value!r}")
        return int(value)
    raise TypeError(f"Not a number: {value!r}")


class PaginatedView(ABC):
    """
    Abstract interface shared by every paginated view.

    Two implementations exist:
    - ClientPagedView: sorts, filters and slices an in-memory dataset
    - RequestPagedView: delegates all of that to a remote data source

    Hosts (UI layers, tests) talk to either through this contract only.
    """

    @property
    @abstractmethod
    def models(self) -> Tuple[Any, ...]:
        """Records of the current page."""
        raise NotImplementedError()

    @abstractmethod
    def next_page(self) -> None:
        raise NotImplementedError()

    @abstractmethod
    def previous_page(self) -> None:
        raise NotImplementedError()

    @abstractmethod
    def go_to_page(self, page: Any) -> None:
        raise NotImplementedError()

    @abstractmethod
    def set_page_size(self, per_page: Any) -> None:
        raise NotImplementedError()

    @abstractmethod
    def set_sort(
            self,
            field: Optional[str],
            direction: Optional[Union[SortDirection, str]],
    ) -> None:
        raise NotImplementedError()

    @abstractmethod
    def set_filter(
            self,
            fields: Optional[Union[str, Iterable[str]]],
            query: Optional[str],
    ) -> None:
        raise NotImplementedError()

    @abstractmethod
    def info(self) -> PageInfo:
        """
        Compute the pagination metadata for the current state.
        :return: a PageInfo snapshot; calling twice without a change in between yields equal values
        """
        raise NotImplementedError()
