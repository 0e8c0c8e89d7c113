"""Tool result envelope and the error boundary shared by every tool."""

import functools
import json
import logging
from dataclasses import dataclass
from typing import Any, Awaitable, Callable, Dict

from .errors import ClashToolError

logger = logging.getLogger(__name__)


@dataclass
class ToolResult:
    """A single text result, flagged when it describes a failure."""
    text: str
    is_error: bool = False

    def to_dict(self) -> Dict[str, Any]:
        """Render in the MCP CallToolResult shape."""
        return {
            "content": [{"type": "text", "text": self.text}],
            "isError": self.is_error,
        }


def success(data: Any) -> ToolResult:
    """Wrap API data as pretty-printed JSON."""
    return ToolResult(json.dumps(data, indent=2))


def notice(text: str) -> ToolResult:
    """An explanatory result for valid requests that have no data (yet)."""
    return ToolResult(text)


def failure(text: str) -> ToolResult:
    return ToolResult(text, is_error=True)


def handle_errors(label: str) -> Callable[[Callable[..., Awaitable[ToolResult]]], Callable[..., Awaitable[ToolResult]]]:
    """
    Decorate a tool coroutine so that it never raises.

    Any exception is logged and returned as an error result reading
    "Error retrieving <label>: <message>".

    Args:
        label: What the tool retrieves, e.g. "player data"
    """
    def decorator(func: Callable[..., Awaitable[ToolResult]]) -> Callable[..., Awaitable[ToolResult]]:
        @functools.wraps(func)
        async def wrapper(*args, **kwargs) -> ToolResult:
            try:
                return await func(*args, **kwargs)
            except ClashToolError as e:
                logger.error("Error fetching %s: %s", label, e)
                return failure(f"Error retrieving {label}: {e}")
            except Exception as e:
                logger.exception("Unexpected error fetching %s", label)
                return failure(f"Error retrieving {label}: {e}")
        return wrapper
    return decorator
