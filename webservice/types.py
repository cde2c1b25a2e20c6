"""Request descriptor and result dataclasses."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from collections.abc import Mapping


@dataclass
class Uri:
    domain: str
    scheme: str | None = None
    path: str | None = None
    query: Mapping[str, Any] | None = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Uri:
        return cls(
            domain=data.get("domain"),  # type: ignore[arg-type]
            scheme=data.get("scheme"),
            path=data.get("path"),
            query=data.get("query"),
        )


@dataclass
class WebRequest:
    """Everything needed to describe one HTTP call.

    Only ``uri.domain`` is required. ``headers`` values pass through to the
    transport untouched.
    """

    uri: Uri
    body: Any = None
    headers: dict[str, str | object] | None = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> WebRequest:
        """Build a request from its plain mapping form."""
        uri = data.get("uri") or {}
        return cls(
            uri=uri if isinstance(uri, Uri) else Uri.from_dict(uri),
            body=data.get("body"),
            headers=data.get("headers"),
        )


@dataclass
class WebResponse:
    success: bool
    status_code: int
    body: Any = None
    messages: list[str] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        out: dict[str, Any] = {"success": self.success, "status_code": self.status_code}
        if self.body is not None:
            out["body"] = self.body
        out["messages"] = list(self.messages)
        return out


def as_request(request: WebRequest | Mapping[str, Any]) -> WebRequest:
    """Accept either a ``WebRequest`` or its mapping form."""
    if isinstance(request, WebRequest):
        return request
    return WebRequest.from_dict(request)
