"""Prompt templates that point the assistant at the right tools."""


def analyze_player(tag: str) -> str:
    return (
        f"Please analyze the Clash of Clans player with tag {tag}. "
        "Include their town hall level, trophies, and notable achievements. "
        "Suggest potential areas for improvement based on their stats."
    )


def analyze_clan(tag: str) -> str:
    return (
        f"Please analyze the Clash of Clans clan with tag {tag}. "
        "Use the get-clan tool to fetch its details. Cover the clan level, war record "
        "(wins, losses, win streak), war league, capital hall level and member makeup "
        "(town hall spread, donations, roles). Point out strengths and what the clan "
        "could improve."
    )


def analyze_current_war(tag: str) -> str:
    return (
        f"Please analyze the current war for the Clash of Clans clan with tag {tag}. "
        "Use the get-current-war tool. Summarize the war state, stars and destruction "
        "for both sides, and how many attacks remain. Highlight the best attacks, "
        "members who have not attacked yet, and suggest targets for the remaining attacks."
    )


def analyze_war_log(tag: str) -> str:
    return (
        f"Please analyze the war log of the Clash of Clans clan with tag {tag}. "
        "Use the get-war-log tool. Look at wins, losses and ties, average stars and "
        "destruction, and the kind of opponents faced. Describe any trends and suggest "
        "how the clan could improve its war performance."
    )


def analyze_cwl_war(clan_tag: str, round: str) -> str:
    return (
        f"Please analyze round {round} of the Clan War League for the Clash of Clans "
        f"clan with tag {clan_tag}. Use the clan-war-league-war tool to find the clan's "
        "war in that round, and clan-war-league-info for the group standings. Compare "
        "both lineups, summarize stars and destruction, and recommend how the clan can "
        "approach the remaining rounds."
    )


def analyze_capital_raids(tag: str) -> str:
    return (
        f"Please analyze the recent Clan Capital raid seasons of the Clash of Clans clan "
        f"with tag {tag}. Use the get-capital-raids tool. Cover capital loot, raids "
        "completed, attacks used, districts destroyed and offensive and defensive "
        "rewards. Point out the most and least active raiders and suggest how to "
        "raise the clan's raid medal earnings."
    )
