from activity_finder.parser import MAX_ACTIVITIES, parse_activities


SAMPLE_REPLY = """Here are some great options I found for your family:

1. **Pacific Science Center**
Hands-on exhibits for young scientists.
Open 10am-5pm on weekends.

2. **Woodland Park Zoo**
Over 1,000 animals in naturalistic habitats.

3. **Seattle Aquarium**
Touch pools and daily feeding talks.
"""


def test_parses_titles_and_joined_descriptions():
    activities = parse_activities(SAMPLE_REPLY)
    assert [(a.id, a.title) for a in activities] == [
        (1, "Pacific Science Center"),
        (2, "Woodland Park Zoo"),
        (3, "Seattle Aquarium"),
    ]
    assert activities[0].description == "Hands-on exhibits for young scientists. Open 10am-5pm on weekends."
    assert activities[2].description == "Touch pools and daily feeding talks."


def test_blocks_round_trip_for_each_count():
    for count in range(1, MAX_ACTIVITIES + 1):
        blocks = [f"**Title {n}**\nFirst line {n}.\n\nSecond line {n}." for n in range(1, count + 1)]
        activities = parse_activities("\n\n".join(blocks))
        assert [a.title for a in activities] == [f"Title {n}" for n in range(1, count + 1)]
        assert [a.description for a in activities] == [
            f"First line {n}. Second line {n}." for n in range(1, count + 1)
        ]


def test_never_more_than_five():
    text = "\n".join(f"**Activity {n}**\nSomething fun." for n in range(1, 9))
    activities = parse_activities(text)
    assert len(activities) == 5
    assert activities[-1].title == "Activity 5"


def test_no_bold_spans_yields_single_preview_entry():
    text = "Sorry, I could not find anything. " * 20
    activities = parse_activities(text)
    assert len(activities) == 1
    assert activities[0].title == "Activity Recommendations"
    assert activities[0].description == text[:300] + "..."


def test_long_bold_line_is_description_not_title():
    long_line = "**Note:** " + "x" * 100
    text = f"**Zoo Day**\n{long_line}"
    activities = parse_activities(text)
    assert len(activities) == 1
    assert activities[0].title == "Zoo Day"
    assert activities[0].description == long_line


def test_title_without_body_is_dropped_and_ids_stay_sequential():
    text = "**Heading Only**\n\n**Real One**\nHas a description.\n**Another**\nAlso described."
    activities = parse_activities(text)
    assert [(a.id, a.title) for a in activities] == [(1, "Real One"), (2, "Another")]


def test_numbered_lines_and_preamble_are_skipped():
    text = "Intro text before any title.\n**Park**\n1. numbered step\nGreen space.\n  \n"
    activities = parse_activities(text)
    assert activities[0].description == "Green space."


def test_first_bold_span_is_the_title():
    activities = parse_activities("**Museum** and **Cafe**\nGood for kids.")
    assert activities[0].title == "Museum"


def test_windows_line_endings():
    activities = parse_activities("**Library**\r\nStory time at 11.\r\n")
    assert activities[0].title == "Library"
    assert activities[0].description == "Story time at 11."


def test_unexpected_fault_returns_error_entry():
    activities = parse_activities(None)
    assert len(activities) == 1
    assert activities[0].title == "Error Processing Recommendations"
    assert "try again" in activities[0].description
