"""
Lightweight REST client for smoke testing
Records every request to the report before it goes out on the wire
"""

import time
import logging
from typing import Any, Dict, Optional

import httpx

from .models import HttpMethod, MimeType, RequestRecord, ResponseRecord
from .reporting import Reporter
from .settings import SmokeConfig, get_config

logger = logging.getLogger(__name__)

JSON_HEADERS = {"Content-Type": "application/json; charset=utf-8"}


class UnsupportedMethodError(ValueError):
    """Raised for an HTTP method the client has no call for"""


class RestClient:
    """REST client scoped to a single test; use as an async context manager"""

    def __init__(
        self,
        reporter: Reporter,
        config: Optional[SmokeConfig] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.config = config or get_config()
        self.reporter = reporter
        self._transport = transport
        self._client: Optional[httpx.AsyncClient] = None

    async def __aenter__(self) -> "RestClient":
        client_kwargs: Dict[str, Any] = {}
        if self.config.timeout_seconds is not None:
            client_kwargs["timeout"] = self.config.timeout_seconds
        if self._transport is not None:
            client_kwargs["transport"] = self._transport
        self._client = httpx.AsyncClient(**client_kwargs)
        return self

    async def __aexit__(self, exc_type, exc, tb):
        await self.aclose()

    async def aclose(self):
        if self._client is not None:
            await self._client.aclose()
            self._client = None

    @property
    def client(self) -> httpx.AsyncClient:
        if self._client is None:
            raise RuntimeError("RestClient used outside of 'async with'")
        return self._client

    async def send(self, method: HttpMethod, url: str, payload: Optional[Dict[str, Any]] = None) -> ResponseRecord:
        """Send one request, attaching its details to the report first"""
        try:
            method = HttpMethod(method)
        except ValueError:
            raise UnsupportedMethodError(f"Unsupported HTTP method: {method}") from None

        request = RequestRecord.build(method, url, payload)
        self.reporter.attach("Request", MimeType.TEXT, request.render())

        start_time = time.monotonic()
        try:
            response = await self._dispatch(request)
        except httpx.RequestError as e:
            logger.error(f"{method.value} {url} failed: {e!r}")
            raise
        elapsed = time.monotonic() - start_time

        logger.info(f"{method.value} {url} -> {response.status_code} in {elapsed:.3f}s")
        return ResponseRecord(response.status_code, response.text, elapsed)

    async def _dispatch(self, request: RequestRecord) -> httpx.Response:
        if request.method is HttpMethod.GET:
            if request.payload is None:
                return await self.client.get(request.url)
            return await self.client.request("GET", request.url, content=request.payload, headers=JSON_HEADERS)
        elif request.method is HttpMethod.POST:
            return await self.client.post(request.url, content=request.payload, headers=JSON_HEADERS)
        elif request.method is HttpMethod.PUT:
            return await self.client.put(request.url, content=request.payload, headers=JSON_HEADERS)
        elif request.method is HttpMethod.DELETE:
            if request.payload is None:
                return await self.client.delete(request.url)
            return await self.client.request("DELETE", request.url, content=request.payload, headers=JSON_HEADERS)
        raise UnsupportedMethodError(f"Unsupported HTTP method: {request.method}")
