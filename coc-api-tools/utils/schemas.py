"""Typed arguments for each tool, validated before any API call is made."""

from typing import Optional, Type, TypeVar
from urllib.parse import urlencode

import pydantic
from pydantic import BaseModel, Field

from .errors import ValidationError

DEFAULT_LIMIT = 10
LEAGUE_ROUNDS = 7

M = TypeVar("M", bound=BaseModel)


class TagRequest(BaseModel):
    tag: str = Field(min_length=1, description="Player or clan tag (with or without #)")


class WarLogRequest(TagRequest):
    limit: int = Field(default=DEFAULT_LIMIT, ge=1)

    def query(self) -> str:
        return urlencode({"limit": self.limit})


class CapitalRaidsRequest(TagRequest):
    limit: int = Field(default=DEFAULT_LIMIT, ge=1)
    before: Optional[str] = None
    after: Optional[str] = None

    def query(self) -> str:
        """
        Build the query string: limit first, then a single paging cursor.

        'before' and 'after' are mutually exclusive in the API; when both
        are supplied only 'before' is sent.
        """
        params = {"limit": self.limit}
        if self.before:
            params["before"] = self.before
        elif self.after:
            params["after"] = self.after
        return urlencode(params)


class LeagueWarRequest(BaseModel):
    clan_tag: str = Field(min_length=1)
    round: int = Field(ge=1, le=LEAGUE_ROUNDS)


def _format_errors(error: pydantic.ValidationError) -> str:
    parts = []
    for err in error.errors():
        field = ".".join(str(loc) for loc in err["loc"]) or "arguments"
        parts.append(f"{field}: {err['msg']}")
    return "; ".join(parts)


def validate(model: Type[M], **values) -> M:
    """
    Build a request model, turning pydantic errors into ValidationError.

    Args:
        model: The request model class
        **values: Raw tool arguments

    Returns:
        The validated request

    Raises:
        ValidationError: If any argument is missing or out of range
    """
    try:
        return model(**values)
    except pydantic.ValidationError as e:
        raise ValidationError(f"Invalid arguments - {_format_errors(e)}") from e
