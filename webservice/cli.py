"""CLI application and commands for websvc."""

from __future__ import annotations

import asyncio
import json
import logging
import sys
from importlib.metadata import version
from typing import Annotated, Any

import typer
from rich.console import Console
from rich.logging import RichHandler

from webservice.config import HttpMethod, get_default_headers, get_default_scheme, get_log_level
from webservice.fetch import HttpxWebService
from webservice.logger import ConsoleLogger
from webservice.normalize import build_url
from webservice.types import Uri, WebRequest, WebResponse

console = Console()
err_console = Console(stderr=True)


def _version_callback(value: bool) -> None:
    if value:
        print(f"websvc {version('webservice')}")
        raise typer.Exit


app = typer.Typer(
    name="websvc",
    help="Send HTTP requests and print normalized results.",
    no_args_is_help=True,
)


@app.callback()
def _main(
    _version: Annotated[
        bool,
        typer.Option("--version", "-V", callback=_version_callback, is_eager=True, help="Show version and exit."),
    ] = False,
) -> None:
    """Send HTTP requests and print normalized results."""
    logging.basicConfig(
        level=get_log_level(),
        format="%(message)s",
        handlers=[RichHandler(console=err_console, show_path=False)],
    )


def _parse_query(items: list[str] | None) -> dict[str, Any] | None:
    """Turn key=value pairs into a query mapping; repeated keys become lists."""
    if not items:
        return None
    query: dict[str, Any] = {}
    for item in items:
        key, sep, value = item.partition("=")
        if not sep or not key:
            raise ValueError(f"invalid query parameter: {item!r} (expected key=value)")
        if key in query:
            existing = query[key]
            query[key] = [*existing, value] if isinstance(existing, list) else [existing, value]
        else:
            query[key] = value
    return query


def _parse_headers(items: list[str] | None) -> dict[str, str]:
    headers = get_default_headers()
    for item in items or []:
        name, sep, value = item.partition(":")
        if not sep or not name.strip():
            raise ValueError(f"invalid header: {item!r} (expected 'Name: value')")
        headers[name.strip()] = value.strip()
    return headers


async def _perform(method: HttpMethod, request: WebRequest) -> WebResponse:
    async with HttpxWebService(logger=ConsoleLogger(err_console)) as svc:
        verb = getattr(svc, method.value.lower())
        return await verb(request)  # type: ignore[no-any-return]


@app.command()
def url(
    domain: Annotated[str, typer.Argument(help="Host name, optionally with port")],
    scheme: Annotated[str | None, typer.Option("--scheme", "-s", help="URL scheme")] = None,
    path: Annotated[str | None, typer.Option("--path", "-p", help="Path after the domain (not encoded)")] = None,
    query: Annotated[list[str] | None, typer.Option("--query", "-q", help="Query parameter key=value (repeatable)")] = None,
) -> None:
    """Print the URL a request would be sent to."""
    try:
        params = _parse_query(query)
    except ValueError as e:
        err_console.print(f"[red]Error: {e}[/red]")
        raise typer.Exit(1) from e

    request = WebRequest(uri=Uri(domain=domain, scheme=scheme or get_default_scheme(), path=path, query=params))
    console.print(build_url(request), markup=False, highlight=False, soft_wrap=True)


@app.command()
def call(
    method: Annotated[str, typer.Argument(help="GET, POST, PUT, PATCH or DELETE")],
    domain: Annotated[str, typer.Argument(help="Host name, optionally with port")],
    scheme: Annotated[str | None, typer.Option("--scheme", "-s", help="URL scheme")] = None,
    path: Annotated[str | None, typer.Option("--path", "-p", help="Path after the domain (not encoded)")] = None,
    query: Annotated[list[str] | None, typer.Option("--query", "-q", help="Query parameter key=value (repeatable)")] = None,
    header: Annotated[list[str] | None, typer.Option("--header", "-H", help="Header 'Name: value' (repeatable)")] = None,
    body: Annotated[str | None, typer.Option("--body", "-d", help="JSON request body")] = None,
) -> None:
    """Send a request and print the normalized result as JSON."""
    try:
        verb = HttpMethod.parse(method)
    except ValueError as e:
        err_console.print(f"[red]Error: unsupported method {method!r}[/red]")
        raise typer.Exit(1) from e

    try:
        params = _parse_query(query)
        headers = _parse_headers(header)
    except ValueError as e:
        err_console.print(f"[red]Error: {e}[/red]")
        raise typer.Exit(1) from e

    payload = None
    if body is not None:
        try:
            payload = json.loads(body)
        except json.JSONDecodeError as e:
            err_console.print(f"[red]Error: --body is not valid JSON: {e}[/red]")
            raise typer.Exit(1) from e

    request = WebRequest(
        uri=Uri(domain=domain, scheme=scheme or get_default_scheme(), path=path, query=params),
        body=payload,
        headers=headers,
    )
    result = asyncio.run(_perform(verb, request))
    console.print_json(data=result.to_dict())
    if not result.success:
        raise typer.Exit(1)


def main() -> int:
    """Main entry point."""
    app()
    return 0


if __name__ == "__main__":
    sys.exit(main())
