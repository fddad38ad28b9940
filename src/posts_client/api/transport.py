"""
Transport Pipeline

Decorates every outgoing request with the fixed API headers and hands it
to the underlying httpx transport. Responses and network exceptions pass
through untouched; classifying them is the client's job.
"""

import logging
from typing import Optional

import httpx

from ..config import APIConfig


logger = logging.getLogger(__name__)


class HeaderTransport(httpx.AsyncBaseTransport):
    """
    Async transport that adds the fixed header set to each request.

    ``Content-Type: application/json`` is only added when the request body
    has not declared a content type of its own, so form-encoded requests
    keep ``application/x-www-form-urlencoded``. Headers of any other name
    supplied by the caller are preserved.
    """

    def __init__(
        self,
        platform: str,
        auth_token: str,
        transport: Optional[httpx.AsyncBaseTransport] = None
    ):
        self.platform = platform
        self.auth_token = auth_token
        self._transport = transport or httpx.AsyncHTTPTransport()

    def decorate(self, request: httpx.Request) -> httpx.Request:
        """Return a new request carrying the fixed headers."""
        headers = request.headers.copy()
        headers.setdefault("Content-Type", "application/json")
        headers["X-Platform"] = self.platform
        headers["X-Auth-Token"] = self.auth_token

        return httpx.Request(
            request.method,
            request.url,
            headers=headers,
            stream=request.stream,
            extensions=request.extensions,
        )

    async def handle_async_request(self, request: httpx.Request) -> httpx.Response:
        decorated = self.decorate(request)
        logger.debug(f"{decorated.method} {decorated.url}")
        return await self._transport.handle_async_request(decorated)

    async def aclose(self) -> None:
        await self._transport.aclose()


def build_async_client(
    api_config: APIConfig,
    transport: Optional[httpx.AsyncBaseTransport] = None
) -> httpx.AsyncClient:
    """
    Create the ``httpx.AsyncClient`` used by ``APIClient``.

    Args:
        api_config: Base URL, timeout and fixed header values.
        transport: Inner transport to wrap (e.g. ``httpx.MockTransport`` in
            tests). Defaults to a real network transport.

    Returns:
        A client whose every request goes through ``HeaderTransport``.
    """
    return httpx.AsyncClient(
        base_url=api_config.base_url,
        timeout=httpx.Timeout(api_config.timeout_seconds),
        transport=HeaderTransport(
            platform=api_config.platform,
            auth_token=api_config.auth_token,
            transport=transport,
        ),
    )
