import json
from typing import Dict, List, Optional

import httpx
import pytest

from randomuser_api import RandomUserClient


API_URL = "https://randomuser.test/api"

FIRST_NAMES = ["Émile", "anna", "Zoe", "Bruno", "carla", "Dario", "Ida", "Oskar", "Mette", "Niels"]
LAST_NAMES = ["Rossi", "Bohr", "Andersen", "Klein", "Ølgaard", "berg", "Larsen", "Nielsen", "Aalto", "Young"]
CITIES = ["Roma", "Aarhus", "Odense", "Bergen", "Århus", "milano", "Oslo", "Köln", "Zürich", "Berlin"]


def make_person(i: int) -> Dict:
    gender = "male" if i % 3 else "female"
    return {
        "gender": gender,
        "name": {
            "title": "Mr" if gender == "male" else "Ms",
            "first": FIRST_NAMES[i % len(FIRST_NAMES)],
            "last": LAST_NAMES[(i * 7) % len(LAST_NAMES)],
        },
        "location": {
            "street": {"number": i, "name": "Main Street"},
            "city": CITIES[(i * 3) % len(CITIES)],
            "state": "Region",
            "country": "Denmark",
            "postcode": 2800 + i,
        },
        "email": f"person{i}@example.com",
        "login": {"uuid": f"uuid-{i}", "username": f"user{i}"},
        "dob": {"date": f"{1950 + i % 50}-0{1 + i % 9}-1{i % 10}T09:44:18.674Z", "age": 75 - (i * 11) % 50},
        "phone": f"+45 {i:02d} 00 00 00",
        "cell": f"+45 {i:02d} 11 11 11",
        "picture": {
            "large": f"https://randomuser.me/api/portraits/men/{i}.jpg",
            "medium": f"https://randomuser.me/api/portraits/med/men/{i}.jpg",
            "thumbnail": f"https://randomuser.me/api/portraits/thumb/men/{i}.jpg",
        },
        "nat": "DK",
    }


class FakeRandomUser:
    """
    Stands in for randomuser.me behind an httpx.MockTransport.
    Records the `results` parameter of every request (None for a bare GET).
    """

    def __init__(self):
        self.calls: List[Optional[int]] = []
        self.status_code = 200
        self.body: Optional[bytes] = None
        self._served = 0

    def handler(self, request: httpx.Request) -> httpx.Response:
        raw = request.url.params.get("results")
        count = int(raw) if raw is not None else None
        self.calls.append(count)

        if self.body is not None:
            return httpx.Response(self.status_code, content=self.body)

        n = 1 if count is None else count
        # every fetch returns a fresh batch, like the real API
        start = self._served
        self._served += n
        payload = {
            "results": [make_person(start + i) for i in range(n)],
            "info": {"seed": "abc", "results": n, "page": 1, "version": "1.4"},
        }
        return httpx.Response(self.status_code, content=json.dumps(payload).encode())

    def client(self) -> RandomUserClient:
        return RandomUserClient(API_URL, timeout_seconds=5.0, transport=httpx.MockTransport(self.handler))


@pytest.fixture
def fake_api() -> FakeRandomUser:
    return FakeRandomUser()
