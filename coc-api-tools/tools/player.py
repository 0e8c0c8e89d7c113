"""Player lookup tool for the Clash of Clans API."""

from utils.client import ClashClient
from utils.envelope import ToolResult, handle_errors, success
from utils.schemas import TagRequest, validate
from utils.tags import normalize_tag


@handle_errors("player data")
async def get_player(client: ClashClient, tag: str) -> ToolResult:
    """
    Get a player's profile.

    Returns town hall level, trophies, heroes, troops, achievements and
    clan membership exactly as the API reports them.

    Args:
        client: API client
        tag: Player tag, with or without the leading '#'

    Returns:
        The player JSON, or an error result
    """
    request = validate(TagRequest, tag=tag)
    return success(await client.fetch(f"/players/{normalize_tag(request.tag)}"))
