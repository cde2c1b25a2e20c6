"""Request and response normalization shared by every transport."""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any, Protocol
from urllib.parse import urlencode

from webservice.types import WebResponse

if TYPE_CHECKING:
    from collections.abc import Mapping

    from webservice.types import WebRequest

logger = logging.getLogger(__name__)

DEFAULT_SCHEME = "https"
TRANSPORT_FAILURE_STATUS = 500


class TransportResponse(Protocol):
    """What a transport response must expose. ``json`` is optional."""

    status_code: int

    @property
    def is_success(self) -> bool: ...

    @property
    def text(self) -> str: ...


def _stringify(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def get_query_string(query: Mapping[str, Any] | None) -> str:
    """Encode a query mapping as ``application/x-www-form-urlencoded``.

    List values expand to repeated keys in order; None values are dropped.
    """
    if not query:
        return ""

    pairs: list[tuple[str, str]] = []
    for key, value in query.items():
        if value is None:
            continue
        if isinstance(value, (list, tuple)):
            pairs.extend((key, _stringify(item)) for item in value if item is not None)
        else:
            pairs.append((key, _stringify(value)))
    return urlencode(pairs)


def build_url(request: WebRequest) -> str:
    """Render ``{scheme}://{domain}/{path}?{query}``. The path is not encoded."""
    uri = request.uri
    scheme = uri.scheme or DEFAULT_SCHEME
    path = uri.path or ""
    return f"{scheme}://{uri.domain}/{path}?{get_query_string(uri.query)}"


def build_header(headers: Mapping[str, Any] | None) -> dict[str, dict[str, Any]]:
    return {"headers": dict(headers or {})}


def get_body(request: WebRequest) -> dict[str, bytes | None]:
    """Serialize the request body to JSON bytes.

    None and falsy scalars (0, "", False) send no body; empty dicts and lists
    are still serialized.

    Raises whatever ``json.dumps`` raises (TypeError, ValueError); those are
    caller errors and are not turned into a result.
    """
    body = request.body
    if body is None or (not body and not isinstance(body, (dict, list, tuple))):
        return {"body": None}
    return {"body": json.dumps(body).encode("utf-8")}


def _parse_payload(response: TransportResponse) -> Any:
    parse = getattr(response, "json", None)
    if not callable(parse):
        return {}
    content = getattr(response, "content", None)
    if content is not None and not content:
        return None
    return parse()


def result_from_response(response: TransportResponse) -> WebResponse:
    """Map a completed transport response to a result.

    Raises if a success body is present but is not valid JSON.
    """
    if not response.is_success:
        return WebResponse(success=False, status_code=response.status_code, messages=[response.text])

    payload = _parse_payload(response)
    body = payload
    messages: list[str] = []
    if isinstance(payload, dict):
        if payload.get("responseBody") is not None:
            body = payload["responseBody"]
        if payload.get("messages"):
            messages = list(payload["messages"])
    logger.debug("response %d, %d message(s)", response.status_code, len(messages))
    return WebResponse(success=True, status_code=response.status_code, body=body, messages=messages)


def failure_result() -> WebResponse:
    return WebResponse(success=False, status_code=TRANSPORT_FAILURE_STATUS, messages=[])
