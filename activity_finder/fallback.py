"""Canned recommendations served while live search is unavailable."""
from __future__ import annotations

from typing import List, Tuple

from .schemas import Activity, ActivityRequest


DEMO_MODE_NOTE = (
    "Demo mode: Real-time search temporarily unavailable. "
    "These are example recommendations based on your criteria."
)
BUDGET_SUFFIX = " Budget-friendly with affordable admission."

FAMILY_TEMPLATES: List[Tuple[str, str]] = [
    (
        "Local Children's Museum",
        "Interactive exhibits perfect for kids aged {ages}. Features hands-on science experiments, "
        "art studios, and imaginative play areas. Located in {city} area, within {distance} miles. "
        "Great for {availability} with educational activities.",
    ),
    (
        "City Park Adventure Trail",
        "Family-friendly trails with scenic views perfect for children aged {ages}. The easy loop "
        "trail offers nature exploration and wildlife spotting. Free admission within {distance} "
        "miles of {city}. Ideal for {availability} outdoor adventures.",
    ),
    (
        "Local Zoo or Wildlife Experience",
        "Home to diverse animals in naturalistic habitats, educational for kids aged {ages}. "
        "Educational programs throughout the day make it engaging. Located within {distance} miles "
        "of {city}, perfect for {availability} family learning.",
    ),
    (
        "Community Recreation Center",
        "Modern facility featuring activities for children aged {ages}. Indoor and outdoor play "
        "areas with organized activities. Located in {city} area within {distance} miles. Great "
        "for {availability} active family fun.",
    ),
    (
        "Local Library or Cultural Center",
        "Interactive programs and events designed for kids aged {ages}. Features storytimes, maker "
        "spaces, and educational workshops. Located in {city} within {distance} miles. Perfect for "
        "{availability} learning and creativity.",
    ),
]

TEEN_TEMPLATES: List[Tuple[str, str]] = [
    (
        "Escape Room Challenge",
        "Immersive puzzle-solving experience perfect for teenagers aged {ages}. Multiple themed "
        "rooms with varying difficulty levels. Located in {city} within {distance} miles. Great "
        "for {availability} group activities and team building.",
    ),
    (
        "Rock Climbing Gym or Adventure Center",
        "Indoor climbing walls and adventure courses designed for teens aged {ages}. Professional "
        "instruction and safety equipment provided. Located within {distance} miles of {city}. "
        "Perfect for {availability} active entertainment.",
    ),
    (
        "Arcade & Entertainment Complex",
        "Modern gaming center with VR experiences, laser tag, and arcade games for teenagers aged "
        "{ages}. Food court and social areas available. Located in {city} area within {distance} "
        "miles. Ideal for {availability} social activities.",
    ),
    (
        "Mini Golf & Go-Kart Complex",
        "Outdoor entertainment venue featuring mini golf and go-kart racing suitable for teens aged "
        "{ages}. Competitive activities and group packages available. Within {distance} miles of "
        "{city}. Great for {availability} active fun.",
    ),
    (
        "Movie Theater & Entertainment District",
        "Modern cinema complex with latest releases and IMAX experiences for teenagers aged {ages}. "
        "Shopping and dining options nearby. Located in {city} within {distance} miles. Perfect "
        "for {availability} entertainment.",
    ),
]

OUTDOOR_TITLES = {
    1: "Nature Trail & Outdoor Adventure",
    3: "Outdoor Sports Complex",
}


def _fill(templates: List[Tuple[str, str]], request: ActivityRequest) -> List[List[str]]:
    values = {
        "city": request.city,
        "ages": request.kids_ages,
        "availability": request.availability,
        "distance": request.travel_distance,
    }
    return [[title, description.format(**values)] for title, description in templates]


def generate_fallback_activities(request: ActivityRequest) -> List[Activity]:
    """Build five location-aware sample activities for the given search form.

    Preferences are matched case-insensitively. "teenager" swaps in the teen
    set and ignores every other keyword; otherwise "outdoor" renames two
    titles and "budget" appends an affordability sentence to each entry.
    """
    prefs = (request.preferences or "").lower()

    if "teenager" in prefs:
        entries = _fill(TEEN_TEMPLATES, request)
    else:
        entries = _fill(FAMILY_TEMPLATES, request)
        if "outdoor" in prefs:
            for index, title in OUTDOOR_TITLES.items():
                entries[index][0] = title
        if "budget" in prefs:
            for entry in entries:
                entry[1] += BUDGET_SUFFIX

    return [
        Activity(id=position, title=title, description=description)
        for position, (title, description) in enumerate(entries, start=1)
    ]
