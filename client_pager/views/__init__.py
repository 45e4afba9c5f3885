from .client_view import ClientPagedView
from .request_view import RequestPagedView

__all__ = ["ClientPagedView", "RequestPagedView"]
