"""websvc: Abstract HTTP client layer with normalized results."""

__version__ = "0.1.0"

from webservice.cli import main
from webservice.fetch import HttpxWebService
from webservice.logger import ConsoleLogger, ErrorLogger, NullLogger
from webservice.normalize import build_header, build_url, get_body, get_query_string
from webservice.service import WebService, WebServiceProtocol
from webservice.types import Uri, WebRequest, WebResponse

__all__ = [
    "ConsoleLogger",
    "ErrorLogger",
    "HttpxWebService",
    "NullLogger",
    "Uri",
    "WebRequest",
    "WebResponse",
    "WebService",
    "WebServiceProtocol",
    "build_header",
    "build_url",
    "get_body",
    "get_query_string",
    "main",
]
