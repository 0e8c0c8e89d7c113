#!/usr/bin/env python3
"""
Clash of Clans MCP Server

A FastMCP server exposing the Clash of Clans API as tools (players, clans,
wars, Clan War League and capital raids) plus prompt templates for
analysing that data.

Usage:
    python coc_server.py                      # stdio transport
    python coc_server.py --transport http --port 8000

Requires CLASH_API_KEY in the environment (or a .env file).
"""

import argparse
import logging
import sys
from typing import Annotated, Optional

from fastmcp import FastMCP
from fastmcp.exceptions import ToolError
from pydantic import Field

from tools import (
    get_capital_raids as _get_capital_raids,
    get_clan as _get_clan,
    get_current_war as _get_current_war,
    get_league_group as _get_league_group,
    get_league_war as _get_league_war,
    get_player as _get_player,
    get_war_log as _get_war_log,
    prompts,
)
from utils import (
    ClashClient,
    TTLCache,
    ToolResult,
    load_settings,
    log_call,
    setup_logging,
)

logger = logging.getLogger("coc_server")

SERVER_NAME = "Clash of Clans API"

PlayerTag = Annotated[str, Field(description="Player tag (with or without #)")]
ClanTag = Annotated[str, Field(description="Clan tag (with or without #)")]
Limit = Annotated[int, Field(description="Number of results to return (default: 10)")]


def _respond(result: ToolResult) -> str:
    """Hand a tool result to the transport; error results are raised as ToolError."""
    if result.is_error:
        raise ToolError(result.text)
    return result.text


def create_server(client: ClashClient) -> FastMCP:
    """
    Build the MCP server with all tools and prompts bound to one API client.

    Args:
        client: The API client (and its cache) shared by every tool call

    Returns:
        A FastMCP server ready to run
    """
    mcp = FastMCP(
        name=SERVER_NAME,
        instructions="""
        Clash of Clans API tools return raw JSON from the official API.

        - get-player / get-clan for profiles
        - get-current-war, get-war-log for regular wars
        - clan-war-league-info for the CWL group, clan-war-league-war for a clan's war in a round
        - get-capital-raids for Clan Capital raid seasons

        Tags may be given with or without the leading '#'.
        """,
    )

    # ========================================================================
    # Player and Clan Tools
    # ========================================================================

    @mcp.tool(name="get-player")
    async def get_player(tag: PlayerTag) -> str:
        """Get a Clash of Clans player's profile: town hall, trophies, heroes, troops and achievements."""
        log_call("get-player", tag=tag)
        return _respond(await _get_player(client, tag))

    @mcp.tool(name="get-clan")
    async def get_clan(tag: ClanTag) -> str:
        """Get a clan's details: level, war record, war league, description and member list."""
        log_call("get-clan", tag=tag)
        return _respond(await _get_clan(client, tag))

    @mcp.tool(name="get-war-log")
    async def get_war_log(tag: ClanTag, limit: Limit = 10) -> str:
        """Get a clan's war log (requires a public war log)."""
        log_call("get-war-log", tag=tag, limit=limit)
        return _respond(await _get_war_log(client, tag, limit))

    @mcp.tool(name="get-capital-raids")
    async def get_capital_raids(
        tag: ClanTag,
        limit: Limit = 10,
        before: Annotated[Optional[str], Field(description="Return results before this paging marker")] = None,
        after: Annotated[Optional[str], Field(description="Return results after this paging marker")] = None,
    ) -> str:
        """Get a clan's capital raid seasons. If both before and after are given, before is used."""
        log_call("get-capital-raids", tag=tag, limit=limit, before=before, after=after)
        return _respond(await _get_capital_raids(client, tag, limit, before, after))

    # ========================================================================
    # War Tools
    # ========================================================================

    @mcp.tool(name="get-current-war")
    async def get_current_war(tag: ClanTag) -> str:
        """Get the clan's current regular war: state, both sides, stars, destruction and attacks."""
        log_call("get-current-war", tag=tag)
        return _respond(await _get_current_war(client, tag))

    @mcp.tool(name="clan-war-league-info")
    async def clan_war_league_info(tag: ClanTag) -> str:
        """Get the clan's current Clan War League group: season, clans and war tags per round."""
        log_call("clan-war-league-info", tag=tag)
        return _respond(await _get_league_group(client, tag))

    @mcp.tool(name="clan-war-league-war")
    async def clan_war_league_war(
        clanTag: ClanTag,
        round: Annotated[int, Field(description="CWL round number (1-7)")],
    ) -> str:
        """Get the Clan War League war the clan is fighting in the given round."""
        log_call("clan-war-league-war", clanTag=clanTag, round=round)
        return _respond(await _get_league_war(client, clanTag, round))

    # ========================================================================
    # Prompts
    # ========================================================================

    @mcp.prompt(name="analyze-player")
    def analyze_player(tag: str) -> str:
        """Analyze a player's progress and suggest improvements."""
        return prompts.analyze_player(tag)

    @mcp.prompt(name="analyze-clan")
    def analyze_clan(tag: str) -> str:
        """Analyze a clan's strength, war record and members."""
        return prompts.analyze_clan(tag)

    @mcp.prompt(name="analyze-current-war")
    def analyze_current_war(tag: str) -> str:
        """Analyze the clan's current war and suggest remaining attacks."""
        return prompts.analyze_current_war(tag)

    @mcp.prompt(name="analyze-war-log")
    def analyze_war_log(tag: str) -> str:
        """Analyze trends in the clan's war log."""
        return prompts.analyze_war_log(tag)

    @mcp.prompt(name="analyze-cwl-war")
    def analyze_cwl_war(clanTag: str, round: str) -> str:
        """Analyze the clan's Clan War League war for a round."""
        return prompts.analyze_cwl_war(clanTag, round)

    @mcp.prompt(name="analyze-capital-raids")
    def analyze_capital_raids(tag: str) -> str:
        """Analyze the clan's recent capital raid seasons."""
        return prompts.analyze_capital_raids(tag)

    return mcp


# ============================================================================
# Server Entry Point
# ============================================================================


def main(argv: Optional[list] = None) -> int:
    """Run the MCP server."""
    parser = argparse.ArgumentParser(
        description="Clash of Clans MCP Server",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
    python coc_server.py
    python coc_server.py --transport http --port 8000
        """,
    )
    parser.add_argument(
        "--transport",
        choices=["stdio", "http"],
        default="stdio",
        help="MCP transport to serve on (default: stdio)",
    )
    parser.add_argument(
        "--host",
        default="127.0.0.1",
        help="Host to bind for the http transport (default: 127.0.0.1)",
    )
    parser.add_argument(
        "--port",
        type=int,
        default=8000,
        help="Port for the http transport (default: 8000)",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        help="Logging level (default: LOG_LEVEL or INFO)",
    )

    args = parser.parse_args(argv)

    settings = load_settings()
    setup_logging(args.log_level or settings.log_level)

    if not settings.api_key:
        logger.warning("CLASH_API_KEY is not set; API requests will be rejected")

    cache = TTLCache(ttl=settings.cache_ttl)
    client = ClashClient(
        settings.api_key,
        cache,
        base_url=settings.api_base,
        timeout=settings.http_timeout,
    )
    mcp = create_server(client)

    logger.info("Starting Clash of Clans MCP server with %s transport...", args.transport)
    try:
        if args.transport == "http":
            mcp.run(transport="http", host=args.host, port=args.port)
        else:
            mcp.run(transport="stdio")
    except Exception as e:
        logger.error("Error starting server: %s", e)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
