"""
Terminal counterpart of the search form: validates input, calls the
backend, and always hands back something to show.

When the backend cannot be reached or answers with an unexpected shape,
a fixed local sample is returned instead so the user still sees output.
"""
from __future__ import annotations

import logging
import textwrap
from dataclasses import dataclass, field
from typing import Dict, List, Optional

import requests


logger = logging.getLogger(__name__)

DEFAULT_API_URL = "http://localhost:3001"
GENERAL_ERROR = "Unable to get recommendations. Please check your connection and try again."

FIELD_MESSAGES: Dict[str, str] = {
    "city": "City is required",
    "kidsAges": "Kids ages are required",
    "availability": "Availability is required",
    "travelDistance": "Travel distance is required",
}

SAMPLE_ACTIVITIES: List[Dict[str, object]] = [
    {
        "id": 1,
        "title": "Seattle Children's Museum",
        "description": "Interactive exhibits perfect for curious minds aged 6-10. Features hands-on science "
        "experiments, art studios, and imaginative play areas. Located in the heart of Seattle Center, just "
        "8 miles from downtown. Open weekends 10am-5pm with $15 admission.",
    },
    {
        "id": 2,
        "title": "Discovery Park Adventure Trail",
        "description": "Family-friendly hiking trails with stunning Puget Sound views. The easy 2-mile loop "
        "trail is perfect for kids who love nature and wildlife spotting. Free parking and admission, just "
        "12 miles north. Great for Saturday afternoon adventures with picnic areas available.",
    },
    {
        "id": 3,
        "title": "Woodland Park Zoo Safari Experience",
        "description": "Home to over 1,000 animals from around the world in naturalistic habitats. "
        "Educational keeper talks throughout the day make it engaging for school-age children. Located 10 "
        "miles from city center with $25 family passes. Perfect for weekend exploration and learning.",
    },
    {
        "id": 4,
        "title": "Alki Beach Playground & Splash Pad",
        "description": "Beach playground featuring modern equipment and a splash pad for hot days. Kids can "
        "build sandcastles while parents enjoy coffee from nearby cafes. Free public access with plenty of "
        "parking, just 15 miles west. Ideal for active families seeking outdoor fun.",
    },
    {
        "id": 5,
        "title": "Pacific Science Center IMAX Theater",
        "description": "Immersive educational films on a giant screen that captivate kids and adults alike. "
        "Current features include nature documentaries and space exploration films. Located at Seattle "
        "Center, 8 miles from downtown. Weekend shows every hour with $18 tickets including museum access.",
    },
]


@dataclass
class SearchResult:
    """Activities to show for one submission, tagged with where they came from."""

    activities: List[Dict[str, object]]
    source: str  # "server" or "local"
    note: Optional[str] = None
    errors: Dict[str, str] = field(default_factory=dict)


def _check_payload(data: object) -> None:
    if not (isinstance(data, dict) and data.get("success") and isinstance(data.get("activities"), list)):
        raise ValueError("Invalid response format from API")
    for activity in data["activities"]:
        if not (isinstance(activity, dict) and "title" in activity and "description" in activity):
            raise ValueError(f"Invalid activity in API response: {activity!r}")


def validate_form(form: Dict[str, str]) -> Dict[str, str]:
    errors: Dict[str, str] = {}
    for name, message in FIELD_MESSAGES.items():
        if not str(form.get(name) or "").strip():
            errors[name] = message
    return errors


def request_recommendations(
    form: Dict[str, str], base_url: str = DEFAULT_API_URL, timeout: float | None = None
) -> SearchResult:
    """POST the form to the backend. Falls back to the local sample on any failure."""
    url = f"{base_url.rstrip('/')}/api/activities"
    try:
        logger.info("Calling backend API with: %s", form)
        resp = requests.post(url, json=form, timeout=timeout)
        resp.raise_for_status()
        data = resp.json()
        _check_payload(data)
    except (requests.RequestException, ValueError) as exc:
        logger.warning("Error calling API, falling back to sample data: %s", exc)
        return SearchResult(
            activities=[dict(activity) for activity in SAMPLE_ACTIVITIES],
            source="local",
            errors={"general": GENERAL_ERROR},
        )
    return SearchResult(activities=data["activities"], source="server", note=data.get("note"))


def submit_form(form: Dict[str, str], base_url: str = DEFAULT_API_URL) -> SearchResult:
    """Validate then submit. Validation errors abort before any request is made."""
    errors = validate_form(form)
    if errors:
        return SearchResult(activities=[], source="none", errors=errors)
    return request_recommendations(form, base_url)


def render_activities(activities: List[Dict[str, object]], width: int = 78) -> str:
    cards = []
    for activity in activities:
        title = str(activity.get("title", ""))
        body = textwrap.fill(str(activity.get("description", "")), width=width, initial_indent="  ", subsequent_indent="  ")
        cards.append(f"{title}\n{'-' * min(len(title), width)}\n{body}")
    return "\n\n".join(cards)
