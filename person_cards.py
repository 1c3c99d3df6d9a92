import html
import math
import random
from datetime import datetime
from typing import Iterable, List, Optional

from randomuser_models import Person


GOLDEN_ANGLE = 137.508
SATURATION = 40
LIGHTNESS = 55


def random_color(rng: Optional[random.Random] = None) -> str:
    # golden angle stepping keeps neighbouring cards visually distinct
    # https://stackoverflow.com/a/20129594
    rnd = rng.random() if rng is not None else random.random()
    hue = round(math.floor(rnd * 1000) * GOLDEN_ANGLE, 3)
    return f"hsl({hue},{SATURATION}%,{LIGHTNESS}%)"


def format_date(value: datetime, date_format: Optional[str] = None) -> str:
    """
    Month/day/year without zero padding unless a strftime pattern is given.

    The date is taken as sent by the API (UTC), not shifted to the viewer's
    time zone, so every viewer sees the same day for a given person.
    """
    if date_format:
        return value.strftime(date_format)
    return f"{value.month}/{value.day}/{value.year}"


def _card_bottom(title: str, value: object) -> str:
    return (
        '<div class="card_bottom"><div>'
        f"<p>{html.escape(title)}</p>"
        f"<p>{html.escape(str(value))}</p>"
        "</div></div>"
    )


def render_card(person: Person, color: str, date_format: Optional[str] = None) -> str:
    name = f"{person.name.title} {person.name.first} {person.name.last}"
    place = f"{person.location.city}, {person.location.country}"

    parts: List[str] = [
        f'<div class="person_card" style="background-color: {html.escape(color)};">',
        f"<h2>{html.escape(name)}</h2>",
        f"<h4>{html.escape(place)}</h4>",
        f'<img src="{html.escape(person.picture.large)}" alt="{html.escape(name)}">',
        _card_bottom("Email:", person.email),
        _card_bottom("Age:", person.dob.age),
        _card_bottom("DOB:", format_date(person.dob.date, date_format)),
        _card_bottom("Gender:", person.gender),
        _card_bottom("Phone:", person.phone),
        "</div>",
    ]
    return "".join(parts)


def render_cards(
    people: Iterable[Person],
    rng: Optional[random.Random] = None,
    date_format: Optional[str] = None,
) -> str:
    """
    Build the full contents of the card container.
    Every call rebuilds everything and draws fresh colours.
    """
    return "\n".join(render_card(p, random_color(rng), date_format) for p in people)
