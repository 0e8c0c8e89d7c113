"""Utility modules for the Clash of Clans MCP Server."""

from .tags import normalize_tag, decode_tag, EMPTY_WAR_TAG
from .cache import TTLCache, DEFAULT_TTL
from .errors import ClashToolError, ValidationError, UpstreamError
from .client import ClashClient, Fetched, CLASH_API_BASE
from .envelope import ToolResult, success, notice, failure, handle_errors
from .config import Settings, load_settings
from .logs import setup_logging, log_call

__all__ = [
    "normalize_tag",
    "decode_tag",
    "EMPTY_WAR_TAG",
    "TTLCache",
    "DEFAULT_TTL",
    "ClashToolError",
    "ValidationError",
    "UpstreamError",
    "ClashClient",
    "Fetched",
    "CLASH_API_BASE",
    "ToolResult",
    "success",
    "notice",
    "failure",
    "handle_errors",
    "Settings",
    "load_settings",
    "setup_logging",
    "log_call",
]
