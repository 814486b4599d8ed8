from __future__ import annotations

from .schemas import ActivityRequest


DEFAULT_PREFERENCES = "No specific preferences"

SYSTEM_PROMPT = (
    "You are a family activity finder assistant. Your job is to recommend weekend activities "
    "for families based on their specific criteria. Use the web search tool to find current, "
    "real activities in their area."
)


def build_prompt(request: ActivityRequest) -> str:
    """Render the user message sent to the model for one search form."""

    city = request.city
    ages = request.kids_ages
    availability = request.availability
    prefs = (request.preferences or "").strip() or DEFAULT_PREFERENCES

    return f"""Please help me find family activities with these requirements:

**Location:** {city}
**Kids' Ages:** {ages}
**When:** {availability}
**Travel Distance:** Within {request.travel_distance} miles
**Other Preferences:** {prefs}

Using web search, find 5 current weekend family activities in or near {city}. For each recommendation, provide:

1. **Bold Activity Title**
2. 2-4 sentences with:
   - Brief description of the activity
   - Why it's good for kids aged {ages}
   - Location/venue information
   - Any relevant timing or booking details

Focus on activities that are:
- Age-appropriate for {ages} year olds
- Available during {availability}
- Family-friendly and engaging
- Currently operating/available

Format each recommendation clearly with bold titles."""
