from .decode import decode
from .http_client import HttpClientManager, http_client_manager

__all__ = ["decode", "HttpClientManager", "http_client_manager"]
