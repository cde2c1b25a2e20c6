"""Concrete web service backed by httpx."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

import httpx

from webservice.service import WebService
from webservice.types import as_request

if TYPE_CHECKING:
    from webservice.logger import ErrorLogger
    from webservice.service import RequestLike
    from webservice.types import WebResponse

logger = logging.getLogger(__name__)


def _header_values(headers: dict[str, Any]) -> dict[str, str | bytes]:
    return {k: v if isinstance(v, (str, bytes)) else str(v) for k, v in headers.items()}


class HttpxWebService(WebService):
    """Send requests through an ``httpx.AsyncClient``.

    A client passed in is used as-is and left open; otherwise one is created
    on first use and closed by :meth:`aclose`.

    Usage::

        async with HttpxWebService() as svc:
            result = await svc.get({"uri": {"domain": "example.com", "path": "api/data"}})
    """

    def __init__(self, logger: ErrorLogger | None = None, client: httpx.AsyncClient | None = None) -> None:
        super().__init__(logger)
        self._client = client
        self._owns_client = client is None

    @property
    def client(self) -> httpx.AsyncClient:
        if self._client is None:
            self._client = httpx.AsyncClient(timeout=None, follow_redirects=True)
            logger.debug("transport ready")
        return self._client

    async def call(self, request: RequestLike, method: str) -> WebResponse:
        req = as_request(request)
        options = {**self.build_header(req.headers), **self.get_body(req), "method": method}
        url = self.build_url(req)

        logger.debug("%s %s", method, url)
        try:
            response = await self.client.request(
                options["method"],
                url,
                headers=_header_values(options["headers"]),
                content=options["body"],
            )
            return await self.handle_return(response)
        except Exception as e:
            return await self.handle_error(e)

    async def aclose(self) -> None:
        if self._owns_client and self._client is not None:
            await self._client.aclose()
            self._client = None
            logger.debug("transport closed")

    async def __aenter__(self) -> HttpxWebService:
        return self

    async def __aexit__(self, *exc: Any) -> None:
        await self.aclose()
