from __future__ import annotations

import logging
import re
from typing import Dict, List

from .schemas import Activity


logger = logging.getLogger(__name__)

MAX_ACTIVITIES = 5
MAX_TITLE_LINE_LENGTH = 100
PREVIEW_CHARS = 300

BOLD_SPAN = re.compile(r"\*\*(.*?)\*\*")
NUMBERED_LINE = re.compile(r"^\d+\.")


def parse_activities(response_text: str) -> List[Activity]:
    """Split the model's markdown reply into activities keyed on bold titles.

    Never raises: unexpected faults collapse into a single error entry.
    """
    try:
        return _parse(response_text)
    except Exception:
        logger.exception("Error parsing model response")
        return [
            Activity(
                id=1,
                title="Error Processing Recommendations",
                description="We encountered an issue processing the recommendations. Please try again.",
            )
        ]


def _parse(response_text: str) -> List[Activity]:
    activities: List[Activity] = []
    current: Dict[str, object] | None = None

    def flush() -> None:
        if current and str(current["description"]).strip():
            activities.append(Activity(**current))

    for line in response_text.split("\n"):
        trimmed = line.strip()
        bold = BOLD_SPAN.search(trimmed)
        if bold and len(trimmed) < MAX_TITLE_LINE_LENGTH:
            flush()
            current = {"id": len(activities) + 1, "title": bold.group(1), "description": ""}
        elif current is not None and trimmed and not NUMBERED_LINE.match(trimmed):
            if current["description"]:
                current["description"] = f"{current['description']} {trimmed}"
            else:
                current["description"] = trimmed
    flush()

    if not activities:
        return [
            Activity(
                id=1,
                title="Activity Recommendations",
                description=response_text[:PREVIEW_CHARS] + "...",
            )
        ]
    return activities[:MAX_ACTIVITIES]
