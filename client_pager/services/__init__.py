from .remote_fetch import HttpFetchAdapter, RemoteFetchAdapter, RemotePage, RemoteQuery

__all__ = ["RemoteFetchAdapter", "HttpFetchAdapter", "RemoteQuery", "RemotePage"]
