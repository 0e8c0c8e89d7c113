"""Tool implementations for the Clash of Clans MCP Server."""

from .player import get_player
from .clan import get_clan, get_war_log, get_capital_raids
from .war import get_current_war, get_league_group, get_league_war
from . import prompts

__all__ = [
    "get_player",
    "get_clan",
    "get_war_log",
    "get_capital_raids",
    "get_current_war",
    "get_league_group",
    "get_league_war",
    "prompts",
]
