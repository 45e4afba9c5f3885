from .config_loader import load_pager_config
from .model import PagerConfig, RequestAttributes, RequestConfig

__all__ = ["PagerConfig", "RequestConfig", "RequestAttributes", "load_pager_config"]
