"""Logging setup for the MCP server."""

import logging
import sys

logger = logging.getLogger("coc_server")


def setup_logging(level: str = "INFO") -> None:
    """
    Send all log output to stderr.

    With the stdio transport, stdout carries the MCP messages, so anything
    printed there would corrupt the protocol stream.
    """
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s [MCP] %(levelname)s %(name)s: %(message)s",
        datefmt="%H:%M:%S",
        stream=sys.stderr,
    )


def log_call(tool_name: str, **params) -> None:
    """Log an incoming tool or prompt call with its arguments."""
    param_str = ", ".join(f"{k}={v!r}" for k, v in params.items())
    logger.info("%s called with: %s", tool_name, param_str)
