"""Abstract web service: verb operations over a single transport seam."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any, Protocol

from webservice import normalize
from webservice.logger import ConsoleLogger

if TYPE_CHECKING:
    from collections.abc import Mapping

    from webservice.logger import ErrorLogger
    from webservice.normalize import TransportResponse
    from webservice.types import WebRequest, WebResponse

    RequestLike = WebRequest | Mapping[str, Any]

logger = logging.getLogger(__name__)


class WebServiceProtocol(Protocol):
    async def get(self, request: RequestLike) -> WebResponse: ...

    async def post(self, request: RequestLike) -> WebResponse: ...

    async def put(self, request: RequestLike) -> WebResponse: ...

    async def patch(self, request: RequestLike) -> WebResponse: ...

    async def delete(self, request: RequestLike) -> WebResponse: ...


class WebService(ABC):
    """Base for HTTP clients returning normalized ``WebResponse`` results.

    Subclasses implement :meth:`call`; URL, header, body and response
    shaping come from :mod:`webservice.normalize`.
    """

    def __init__(self, logger: ErrorLogger | None = None) -> None:
        self.logger: ErrorLogger = logger if logger is not None else ConsoleLogger()

    async def get(self, request: RequestLike) -> WebResponse:
        return await self.call(request, "GET")

    async def post(self, request: RequestLike) -> WebResponse:
        return await self.call(request, "POST")

    async def put(self, request: RequestLike) -> WebResponse:
        return await self.call(request, "PUT")

    async def patch(self, request: RequestLike) -> WebResponse:
        return await self.call(request, "PATCH")

    async def delete(self, request: RequestLike) -> WebResponse:
        return await self.call(request, "DELETE")

    @abstractmethod
    async def call(self, request: RequestLike, method: str) -> WebResponse:
        """Perform the request with the given HTTP method."""

    def build_header(self, headers: Mapping[str, Any] | None) -> dict[str, dict[str, Any]]:
        return normalize.build_header(headers)

    def build_url(self, request: WebRequest) -> str:
        return normalize.build_url(request)

    def get_body(self, request: WebRequest) -> dict[str, bytes | None]:
        return normalize.get_body(request)

    def get_query_string(self, query: Mapping[str, Any] | None) -> str:
        return normalize.get_query_string(query)

    async def handle_return(self, response: TransportResponse) -> WebResponse:
        return normalize.result_from_response(response)

    async def handle_error(self, error: Exception) -> WebResponse:
        """Collapse any transport failure into the generic 500 result."""
        logger.error("request failed: %s", error)
        self.logger.log_error_message(f"{type(error).__name__}: {error}")
        return normalize.failure_result()
