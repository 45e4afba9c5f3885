"""
Top-level package for the client-side pager.

This package exposes the view-derivation engine (sort, filter, paginate) and
its server-driven counterpart. Most code should import from here or from
submodules such as:
    client_pager.core
    client_pager.views
    client_pager.services
"""

from .config import PagerConfig, RequestAttributes, RequestConfig, load_pager_config
from .core import PageInfo, PaginatedView, SortDirection, ViewState
from .core.exceptions import ClientPagerError, ConfigError, RemoteFetchError
from .logging_config import configure_logging
from .views import ClientPagedView, RequestPagedView

__all__ = [
    "ClientPagedView",
    "RequestPagedView",
    "PaginatedView",
    "PageInfo",
    "ViewState",
    "SortDirection",
    "PagerConfig",
    "RequestConfig",
    "RequestAttributes",
    "load_pager_config",
    "ClientPagerError",
    "ConfigError",
    "RemoteFetchError",
    "configure_logging",
]
