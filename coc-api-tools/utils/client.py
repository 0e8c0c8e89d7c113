"""HTTP client for the Clash of Clans API."""

import logging
from dataclasses import dataclass
from typing import Any, Optional

import httpx

from .cache import MISSING, TTLCache
from .errors import UpstreamError

logger = logging.getLogger(__name__)

CLASH_API_BASE = "https://api.clashofclans.com/v1"


@dataclass
class Fetched:
    """Outcome of a fetch that should not raise: either data or an error."""
    data: Any = None
    error: Optional[UpstreamError] = None

    @property
    def ok(self) -> bool:
        return self.error is None


def _describe_failure(response: httpx.Response) -> str:
    """Build an error message from a failed response, using the API's reason if given."""
    message = f"Request failed with status code {response.status_code}"
    try:
        body = response.json()
    except ValueError:
        return message
    if isinstance(body, dict):
        details = [str(body[k]) for k in ("reason", "message") if body.get(k)]
        if details:
            message = f"{message} ({': '.join(details)})"
    return message


class ClashClient:
    """
    Authenticated GET access to the Clash of Clans API, cached by request path.

    Every call goes through the cache first, keyed on the exact path and query
    string. Responses are only cached after a successful fetch. There are no
    retries: each call makes at most one HTTP request.
    """

    def __init__(
        self,
        api_key: str,
        cache: TTLCache,
        base_url: str = CLASH_API_BASE,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        timeout: Optional[float] = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.cache = cache
        options: dict = {}
        if timeout is not None:
            options["timeout"] = timeout
        self._http = httpx.AsyncClient(
            headers={
                "Authorization": f"Bearer {api_key}",
                "Accept": "application/json",
            },
            transport=transport,
            **options,
        )

    async def fetch(self, path: str) -> Any:
        """
        GET a path from the API and return the decoded JSON body.

        Args:
            path: Endpoint path with tags already encoded (e.g. "/players/%23ABC")

        Returns:
            The parsed JSON response

        Raises:
            UpstreamError: On a network failure, a non-2xx status, or a body
                that is not JSON
        """
        cached = self.cache.get(path, MISSING)
        if cached is not MISSING:
            logger.debug("Cache hit for %s", path)
            return cached

        url = f"{self.base_url}{path}"
        logger.debug("GET %s", url)
        try:
            response = await self._http.get(url)
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            raise UpstreamError(e.response.status_code, _describe_failure(e.response)) from e
        except httpx.HTTPError as e:
            raise UpstreamError("unknown", str(e) or type(e).__name__) from e

        try:
            data = response.json()
        except ValueError as e:
            raise UpstreamError(response.status_code, f"Invalid JSON in response: {e}") from e

        return self.cache.set(path, data)

    async def try_fetch(self, path: str) -> Fetched:
        """Like fetch(), but report an UpstreamError in the result instead of raising it."""
        try:
            return Fetched(data=await self.fetch(path))
        except UpstreamError as e:
            return Fetched(error=e)

    async def aclose(self) -> None:
        await self._http.aclose()

    async def __aenter__(self) -> "ClashClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()
