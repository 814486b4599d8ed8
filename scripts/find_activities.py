#!/usr/bin/env python3
"""
Interactive terminal client for the Family Activity Finder API.

Usage (backend running, from repo root):

    python scripts/find_activities.py

Set ACTIVITY_API_URL to point at a backend other than http://localhost:3001.
"""

from __future__ import annotations

import logging
import os
import sys

from activity_finder.client import DEFAULT_API_URL, render_activities, submit_form

PROMPTS = [
    ("city", "City"),
    ("kidsAges", "Kids' ages (e.g. 6-10)"),
    ("availability", "When are you free (e.g. Saturday afternoon)"),
    ("travelDistance", "Max travel distance in miles"),
    ("preferences", "Other preferences (optional)"),
]


def collect_form() -> dict:
    return {name: input(f"{label}: ") for name, label in PROMPTS}


def main() -> int:
    logging.basicConfig(level=logging.WARNING, format="%(asctime)s [%(levelname)s] %(message)s")
    base_url = os.getenv("ACTIVITY_API_URL", DEFAULT_API_URL)

    result = submit_form(collect_form(), base_url)
    for message in result.errors.values():
        print(f"! {message}", file=sys.stderr)
    if not result.activities:
        return 1
    if result.note:
        print(f"\n{result.note}")
    print()
    print(render_activities(result.activities))
    return 0


if __name__ == "__main__":
    sys.exit(main())
