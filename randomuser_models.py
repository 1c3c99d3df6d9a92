from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


# randomuser.me sends many more fields than the cards use; ignore the rest.
class _ApiModel(BaseModel):
    model_config = ConfigDict(extra="ignore", frozen=True)


class Name(_ApiModel):
    title: str
    first: str
    last: str


class Location(_ApiModel):
    city: str
    country: str
    state: Optional[str] = None


class Picture(_ApiModel):
    large: str
    medium: Optional[str] = None
    thumbnail: Optional[str] = None


class DateOfBirth(_ApiModel):
    date: datetime
    age: int


class Person(_ApiModel):
    gender: str
    name: Name
    location: Location
    email: str
    dob: DateOfBirth
    phone: str
    picture: Picture


class ResultsInfo(_ApiModel):
    seed: Optional[str] = None
    results: Optional[int] = None
    page: Optional[int] = None
    version: Optional[str] = None


class RandomUserResponse(_ApiModel):
    results: List[Person]
    info: Optional[ResultsInfo] = None


# ----------------------------
# Sandbox API payloads
# ----------------------------

class CountRequest(BaseModel):
    count: int


class GenderFilterRequest(BaseModel):
    gender: str = Field(min_length=1)


class GreetingResponse(BaseModel):
    greeting: str


class PeopleView(BaseModel):
    displayed: int
    total: int
    superseded: bool = False
    html: str


class PeopleResponse(BaseModel):
    displayed: int
    total: int
    people: List[Person]
