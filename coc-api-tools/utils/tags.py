"""Tag normalization for Clash of Clans player and clan tags."""

from urllib.parse import quote, unquote

TAG_PREFIX = "#"

# Placeholder war tag used by the league group for wars not yet scheduled
EMPTY_WAR_TAG = "#0"


def normalize_tag(raw: str) -> str:
    """
    Convert a user-supplied tag into the form used in API URL paths.

    Adds the leading '#' when it is missing and percent-encodes the result
    exactly once, so "ABC123" and "#ABC123" both become "%23ABC123".
    The input is otherwise left untouched (whitespace included); the API
    decides whether a tag exists.

    Args:
        raw: Player or clan tag, with or without '#'

    Returns:
        The encoded tag, ready to be placed in a path segment
    """
    tag = raw if raw.startswith(TAG_PREFIX) else TAG_PREFIX + raw
    return quote(tag, safe="")


def decode_tag(encoded: str) -> str:
    """Turn an encoded tag back into its display form (e.g. "#ABC123")."""
    return unquote(encoded)
