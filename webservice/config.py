"""Configuration for the websvc CLI."""

from __future__ import annotations

import os
import tomllib
from enum import Enum
from pathlib import Path
from typing import Any

# ============================================================================
# XDG Base Directory Configuration
# ============================================================================

# Config: ~/.config/webservice/config.toml
CONFIG_DIR = Path(os.environ.get("XDG_CONFIG_HOME", Path.home() / ".config")) / "webservice"
CONFIG_FILE = CONFIG_DIR / "config.toml"

DEFAULT_LOG_LEVEL = "WARNING"


class HttpMethod(str, Enum):
    """Verbs exposed by every web service."""

    get = "GET"
    post = "POST"
    put = "PUT"
    patch = "PATCH"
    delete = "DELETE"

    @classmethod
    def parse(cls, value: str) -> HttpMethod:
        return cls(value.upper())


# ============================================================================
# Config Functions
# ============================================================================


def load_config() -> dict[str, Any]:
    """Load configuration from TOML config file."""
    if CONFIG_FILE.exists():
        with CONFIG_FILE.open("rb") as f:
            return tomllib.load(f)
    return {}


def get_default_scheme() -> str:
    """Scheme for CLI requests: WEBSERVICE_SCHEME env, then [request] scheme."""
    env_scheme = os.environ.get("WEBSERVICE_SCHEME")
    if env_scheme:
        return env_scheme

    request_section = load_config().get("request", {})
    if isinstance(request_section, dict):
        scheme = request_section.get("scheme")
        if scheme:
            return str(scheme)
    return "https"


def get_default_headers() -> dict[str, str]:
    """Headers from the [headers] table, sent with every CLI request."""
    headers = load_config().get("headers", {})
    if not isinstance(headers, dict):
        return {}
    return {str(k): str(v) for k, v in headers.items()}


def get_log_level() -> str:
    """Log level from WEBSERVICE_LOG_LEVEL env or the log_level key."""
    env_level = os.environ.get("WEBSERVICE_LOG_LEVEL")
    if env_level:
        return env_level.upper()
    level = load_config().get("log_level")
    if level:
        return str(level).upper()
    return DEFAULT_LOG_LEVEL
