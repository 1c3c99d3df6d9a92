import json
import logging
import time
from typing import List, Optional, Tuple

import httpx
from pydantic import ValidationError

from randomuser_models import Person, RandomUserResponse


logger = logging.getLogger(__name__)

USER_AGENT = "random-user-sandbox/1.0"


class RandomUserError(Exception):
    """Base class for failures talking to the randomuser.me API."""


class UpstreamError(RandomUserError):
    """Transport failure or a non-200 answer from the API."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


class MalformedResponseError(RandomUserError):
    """The API answered 200 but the body is not the expected shape."""


def parse_results(payload: bytes) -> List[Person]:
    """
    Deserialize a randomuser.me body into Person models.
    Anything that is not JSON with a valid `results` array raises MalformedResponseError.
    """
    try:
        data = json.loads(payload)
    except ValueError as e:
        raise MalformedResponseError(f"Response is not valid JSON: {e}") from e

    try:
        parsed = RandomUserResponse.model_validate(data)
    except ValidationError as e:
        raise MalformedResponseError(
            f"Response does not match the person schema ({e.error_count()} errors)"
        ) from e
    return list(parsed.results)


class RandomUserClient:
    """
    Thin async client for https://randomuser.me/api.

    A new httpx.AsyncClient is opened per call; `transport` lets tests plug in
    an httpx.MockTransport.
    """

    def __init__(
        self,
        base_url: str,
        timeout_seconds: float = 10.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.timeout_seconds = timeout_seconds
        self._transport = transport

    async def _get(self, params: Optional[dict] = None) -> Tuple[bytes, float]:
        headers = {"User-Agent": USER_AGENT, "Accept": "application/json"}
        t0 = time.perf_counter()
        try:
            async with httpx.AsyncClient(
                timeout=self.timeout_seconds,
                headers=headers,
                transport=self._transport,
            ) as client:
                resp = await client.get(self.base_url, params=params)
        except httpx.RequestError as e:
            raise UpstreamError(f"Network error: {type(e).__name__}: {e}") from e

        latency_ms = (time.perf_counter() - t0) * 1000.0

        if resp.status_code != 200:
            snippet = (resp.text or "")[:200]
            raise UpstreamError(
                f"randomuser.me answered {resp.status_code}: {snippet!r}",
                status_code=resp.status_code,
            )
        return resp.content, latency_ms

    async def fetch_people(self, count: int) -> List[Person]:
        """Bulk fetch: GET <base>?results=<count>."""
        body, latency_ms = await self._get(params={"results": count})
        people = parse_results(body)
        logger.info("Fetched %d people (requested %d) in %.1f ms", len(people), count, latency_ms)
        logger.debug("Fetched people: %s", [f"{p.name.first} {p.name.last}" for p in people])
        return people

    async def fetch_one(self) -> Person:
        """Without `results` the API returns a single person."""
        body, _ = await self._get()
        people = parse_results(body)
        if not people:
            raise MalformedResponseError("Response contained no people")
        return people[0]


async def fetch_greeting(client: RandomUserClient) -> str:
    person = await client.fetch_one()
    return f"Welcome, {person.name.first} {person.name.last}"
