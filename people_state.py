"""
People state and the fetch/cache policy
=======================================

Two sequences of Person records drive the page:

- `authoritative`: everything fetched from randomuser.me. Only a fetch
  replaces it, and nothing reorders it.
- `displayed`: what the cards show. Always a truncation, filter or sort of
  `authoritative`, computed at the moment the operation ran.

All operations below are pure: they take a PeopleState and return a new one.
SandboxController owns the current state and is the only place that talks to
the network.
"""

import asyncio
import logging
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Dict, Sequence, Tuple

from pyuca import Collator

from randomuser_api import RandomUserClient
from randomuser_models import Person
from sandbox_settings import Settings


logger = logging.getLogger(__name__)

# Unicode Collation Algorithm with the default table; loading it is slow, do it once
_COLLATOR = Collator()


@dataclass(frozen=True)
class PeopleState:
    authoritative: Tuple[Person, ...] = ()
    displayed: Tuple[Person, ...] = ()


EMPTY_STATE = PeopleState()


# ----------------------------
# Sorting
# ----------------------------

class SortKey(str, Enum):
    FIRST_NAME = "first_name"
    LAST_NAME = "last_name"
    AGE = "age"
    CITY = "city"


def collation_key(value: str) -> Tuple[Tuple[int, ...], str]:
    """
    Locale-style ordering for names and cities, like the browser's
    localeCompare: "Émile" sorts with "emile" and "Ølgaard" between "Nielsen"
    and "Petersen". The raw string breaks exact ties.
    """
    return _COLLATOR.sort_key(value), value


SORT_KEYS: Dict[SortKey, Callable[[Person], object]] = {
    SortKey.FIRST_NAME: lambda p: collation_key(p.name.first),
    SortKey.LAST_NAME: lambda p: collation_key(p.name.last),
    SortKey.AGE: lambda p: p.dob.age,
    SortKey.CITY: lambda p: collation_key(p.location.city),
}


# ----------------------------
# Pure state operations
# ----------------------------

def needs_fetch(state: PeopleState, count: int) -> bool:
    return count > len(state.authoritative)


def truncate(state: PeopleState, count: int) -> PeopleState:
    if count < 0:
        return state
    return PeopleState(state.authoritative, state.authoritative[:count])


def replace_authoritative(state: PeopleState, people: Sequence[Person], count: int) -> PeopleState:
    # A fetch replaces the cache wholesale, it never merges.
    authoritative = tuple(people)
    return PeopleState(authoritative, authoritative[:count])


def show_all(state: PeopleState) -> PeopleState:
    return PeopleState(state.authoritative, state.authoritative)


def filter_by_gender(state: PeopleState, gender: str) -> PeopleState:
    matches = tuple(p for p in state.authoritative if p.gender == gender)
    return PeopleState(state.authoritative, matches)


def sort_by(state: PeopleState, key: SortKey) -> PeopleState:
    # sorted() is stable and returns a new list; authoritative order is kept
    ordered = tuple(sorted(state.authoritative, key=SORT_KEYS[SortKey(key)]))
    return PeopleState(state.authoritative, ordered)


# ----------------------------
# Controller
# ----------------------------

class SandboxController:
    """
    Holds the current PeopleState and applies UI operations to it.

    Every operation bumps a generation number. Count requests are debounced
    and only update state if no other operation was issued meanwhile, so a
    fetch finishing late cannot overwrite a newer count, filter or sort.
    """

    def __init__(self, client: RandomUserClient, debounce_seconds: float = 0.0):
        self.client = client
        self.debounce_seconds = debounce_seconds
        self.state = EMPTY_STATE
        self._generation = 0

    @property
    def generation(self) -> int:
        return self._generation

    def reset(self) -> None:
        self._generation += 1
        self.state = EMPTY_STATE

    async def request_count(self, count: int) -> bool:
        """
        Make `count` people displayed, fetching only when the cache is too small.

        Returns False when a later count, filter, sort or reset superseded the
        request; state is then left alone. Negative counts are ignored (and return True).
        Upstream errors propagate and leave state unchanged.
        """
        if count < 0:
            return True

        self._generation += 1
        token = self._generation

        if self.debounce_seconds > 0:
            await asyncio.sleep(self.debounce_seconds)
            if token != self._generation:
                logger.info("Count %d superseded during debounce", count)
                return False

        if not needs_fetch(self.state, count):
            self.state = truncate(self.state, count)
            return True

        people = await self.client.fetch_people(count)
        if token != self._generation:
            logger.info("Discarding stale fetch for %d people (generation %d < %d)",
                        count, token, self._generation)
            return False

        self.state = replace_authoritative(self.state, people, count)
        return True

    async def start_session(self, initial_count: int) -> bool:
        """Fresh page: empty cache, then load the initial people."""
        self.reset()
        return await self.request_count(initial_count)

    def show_all(self) -> PeopleState:
        self._generation += 1
        self.state = show_all(self.state)
        return self.state

    def filter_by_gender(self, gender: str) -> PeopleState:
        self._generation += 1
        self.state = filter_by_gender(self.state, gender)
        return self.state

    def sort_by(self, key: SortKey) -> PeopleState:
        self._generation += 1
        self.state = sort_by(self.state, key)
        return self.state


def build_controller(settings: Settings) -> SandboxController:
    client = RandomUserClient(settings.api_url, timeout_seconds=settings.timeout_seconds)
    return SandboxController(client, debounce_seconds=settings.debounce_seconds)
