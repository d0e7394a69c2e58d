import logging
import threading
from typing import Optional

import httpx
import sentry_sdk

from twitchemotes.config import HTTP_CONNECT_TIMEOUT, HTTP_READ_TIMEOUT
from twitchemotes.errors import IoFailure, TransportFailure

logger = logging.getLogger(__name__)


class HttpClientManager:
    _instance: Optional["HttpClientManager"] = None
    _client: Optional[httpx.Client] = None
    _transport: Optional[httpx.BaseTransport] = None
    _lock: threading.Lock = threading.Lock()

    def __new__(cls) -> "HttpClientManager":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def get_client(self) -> httpx.Client:
        """Get the shared HTTP client, creating it if necessary"""
        if self._client is None:
            with self._lock:
                if self._client is None:
                    self._client = httpx.Client(
                        limits=httpx.Limits(
                            max_keepalive_connections=5,
                            max_connections=10,
                            keepalive_expiry=30.0,
                        ),
                        timeout=httpx.Timeout(
                            connect=HTTP_CONNECT_TIMEOUT,
                            read=HTTP_READ_TIMEOUT,
                            write=10.0,
                            pool=10.0,
                        ),
                        http2=True,
                        follow_redirects=True,
                        transport=self._transport,
                    )
                    logger.info("HTTP client initialized")
        return self._client

    def close(self) -> None:
        """Close the HTTP client and clean up resources"""
        if self._client is not None:
            with self._lock:
                if self._client is not None:
                    self._client.close()
                    self._client = None
                    logger.info("HTTP client closed")

    def install_transport(self, transport: Optional[httpx.BaseTransport]) -> None:
        """Use ``transport`` for every request made after this call"""
        self.close()
        self._transport = transport

    def get(self, url: str) -> bytes:
        """GET ``url`` and return the full response body"""
        client = self.get_client()
        try:
            with client.stream("GET", url) as response:
                response.raise_for_status()
                return response.read()
        except (httpx.HTTPError, httpx.InvalidURL, httpx.StreamError) as e:
            logger.error(f"HTTP request failed: GET {url} - {e}")
            sentry_sdk.capture_exception(e)
            raise TransportFailure(e) from e
        except OSError as e:
            logger.error(f"Reading response body failed: GET {url} - {e}")
            sentry_sdk.capture_exception(e)
            raise IoFailure(e) from e


# Global instance
http_client_manager = HttpClientManager()
