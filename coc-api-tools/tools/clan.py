"""Clan, war log and capital raid tools for the Clash of Clans API."""

import logging
from typing import Optional

from utils.client import ClashClient
from utils.envelope import ToolResult, handle_errors, success
from utils.schemas import (
    DEFAULT_LIMIT,
    CapitalRaidsRequest,
    TagRequest,
    WarLogRequest,
    validate,
)
from utils.tags import normalize_tag

logger = logging.getLogger(__name__)


@handle_errors("clan data")
async def get_clan(client: ClashClient, tag: str) -> ToolResult:
    """
    Get a clan's details: level, war stats, league, description and members.

    Args:
        client: API client
        tag: Clan tag, with or without the leading '#'
    """
    request = validate(TagRequest, tag=tag)
    return success(await client.fetch(f"/clans/{normalize_tag(request.tag)}"))


@handle_errors("war log")
async def get_war_log(client: ClashClient, tag: str, limit: int = DEFAULT_LIMIT) -> ToolResult:
    """
    Get a clan's recent war results.

    The API only returns the log for clans with a public war log; private
    logs come back as a 403 error result.

    Args:
        client: API client
        tag: Clan tag, with or without the leading '#'
        limit: Number of wars to return (default 10)
    """
    request = validate(WarLogRequest, tag=tag, limit=limit)
    path = f"/clans/{normalize_tag(request.tag)}/warlog?{request.query()}"
    return success(await client.fetch(path))


@handle_errors("capital raid seasons")
async def get_capital_raids(
    client: ClashClient,
    tag: str,
    limit: int = DEFAULT_LIMIT,
    before: Optional[str] = None,
    after: Optional[str] = None,
) -> ToolResult:
    """
    Get a clan's capital raid seasons, newest first.

    Args:
        client: API client
        tag: Clan tag, with or without the leading '#'
        limit: Number of seasons to return (default 10)
        before: Paging cursor for results before this marker
        after: Paging cursor for results after this marker (ignored if before is set)
    """
    request = validate(CapitalRaidsRequest, tag=tag, limit=limit, before=before, after=after)
    if request.before and request.after:
        logger.debug("Both paging cursors given, using 'before'")
    path = f"/clans/{normalize_tag(request.tag)}/capitalraidseasons?{request.query()}"
    return success(await client.fetch(path))
