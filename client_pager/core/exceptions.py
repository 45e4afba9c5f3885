class ClientPagerError(Exception):
    """Base exception for all client_pager errors"""
    pass

class ConfigError(ClientPagerError):
    """Invalid or inconsistent pager config file or values"""
    pass

class RemoteFetchError(ClientPagerError):
    """
    The remote data source could not deliver a page
    transport failure, HTTP error status, undecodable body, etc
    """
    pass
