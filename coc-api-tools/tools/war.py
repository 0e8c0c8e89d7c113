"""War tools: current war, Clan War League group and CWL round wars."""

import logging
from typing import Any, List, Optional

from utils.client import ClashClient
from utils.envelope import ToolResult, handle_errors, notice, success
from utils.schemas import LeagueWarRequest, TagRequest, validate
from utils.tags import EMPTY_WAR_TAG, decode_tag, normalize_tag

logger = logging.getLogger(__name__)


@handle_errors("current war data")
async def get_current_war(client: ClashClient, tag: str) -> ToolResult:
    """
    Get the clan's current regular war: state, sides, stars, destruction and attacks.

    Args:
        client: API client
        tag: Clan tag, with or without the leading '#'
    """
    request = validate(TagRequest, tag=tag)
    return success(await client.fetch(f"/clans/{normalize_tag(request.tag)}/currentwar"))


@handle_errors("CWL group data")
async def get_league_group(client: ClashClient, tag: str) -> ToolResult:
    """
    Get the clan's current Clan War League group: season, participating clans
    and the war tags of each round.

    Args:
        client: API client
        tag: Clan tag, with or without the leading '#'
    """
    request = validate(TagRequest, tag=tag)
    return success(await client.fetch(f"/clans/{normalize_tag(request.tag)}/currentwar/leaguegroup"))


def _round_war_tags(group: Any, round_number: int) -> Optional[List[str]]:
    """Return the war tags listed for a 1-based round, or None if the round has none."""
    rounds = group.get("rounds") if isinstance(group, dict) else None
    if not rounds or round_number > len(rounds):
        return None
    war_tags = rounds[round_number - 1].get("warTags")
    return war_tags or None


def _has_clan(war: Any, clan_tag: str) -> bool:
    """Check whether either side of a war record is the given (encoded) clan tag."""
    if not isinstance(war, dict):
        return False
    for side in ("clan", "opponent"):
        participant = war.get(side)
        if not isinstance(participant, dict):
            continue
        tag = participant.get("tag")
        if isinstance(tag, str) and normalize_tag(tag) == clan_tag:
            return True
    return False


async def _find_clan_war(client: ClashClient, war_tags: List[str], clan_tag: str) -> Optional[dict]:
    """
    Fetch each war in order and return the first one the clan takes part in.

    A war that cannot be fetched is logged and skipped so that the clan can
    still be found in another war of the same round.
    """
    for war_tag in war_tags:
        result = await client.try_fetch(f"/clanwarleagues/wars/{normalize_tag(war_tag)}")
        if not result.ok:
            logger.warning("Skipping CWL war %s: %s", war_tag, result.error)
            continue
        if _has_clan(result.data, clan_tag):
            return result.data
    return None


@handle_errors("CWL war data")
async def get_league_war(client: ClashClient, clan_tag: str, round_number: int) -> ToolResult:
    """
    Find the Clan War League war a clan is fighting in a given round.

    The league group lists every war of a round without saying which clans
    fight in it, so each war is fetched in turn until one includes the clan.
    Unscheduled wars ("#0") are never fetched.

    Args:
        client: API client
        clan_tag: Clan tag, with or without the leading '#'
        round_number: CWL round, 1 to 7

    Returns:
        The matching war JSON; a plain message when the round has no data,
        is not scheduled yet or does not include the clan; an error result
        when the arguments are invalid or the league group cannot be fetched.
    """
    request = validate(LeagueWarRequest, clan_tag=clan_tag, round=round_number)
    target = normalize_tag(request.clan_tag)

    group = await client.fetch(f"/clans/{target}/currentwar/leaguegroup")

    war_tags = _round_war_tags(group, request.round)
    if not war_tags:
        return notice(f"No data available for round {request.round} yet.")

    scheduled = [tag for tag in war_tags if tag != EMPTY_WAR_TAG]
    if not scheduled:
        return notice(f"Wars for round {request.round} are not scheduled yet.")

    war = await _find_clan_war(client, scheduled, target)
    if war is None:
        return notice(
            f"Clan {decode_tag(target)} is not participating in any war in round {request.round}."
        )
    return success(war)
