import pytest


def _heist_lines():
    # Scraped-page style: <pre> block, bold cues with the tag before the indent,
    # one cue whose </b> got pushed onto the next line, CRLF line endings.
    return [
        "<pre>",
        "<b>" + " " * 30 + "THE HEIST</b>",
        "",
        " " * 26 + "Written by",
        "",
        " " * 27 + "Jane Doe",
        "",
        "<b>INT. KITCHEN - DAY</b>",
        "",
        " " * 10 + "Anna walks in and sets a bag on the table. John",
        " " * 10 + "follows her.",
        "",
        "<b>" + " " * 25 + "ANNA",
        "</b>" + " " * 15 + "Where were you?",
        "",
        "<b>" + " " * 25 + "JOHN</b>",
        " " * 20 + "(quietly)",
        " " * 15 + "Out.",
        "",
        "<b>" + " " * 25 + "ANNA</b>",
        " " * 15 + "Out where?",
        "",
        " " * 10 + "John shrugs and opens the fridge.",
        "",
        "<b>" + " " * 25 + "JOHN</b>",
        " " * 15 + "Nowhere special.",
        "",
        " " * 51 + "CUT TO:",
        "",
        "<b>EXT. STREET - NIGHT</b>",
        "",
        " " * 10 + "Anna runs down the street.",
        "",
        "<b>" + " " * 25 + "JOHN</b>",
        " " * 15 + "Wait!",
        "",
        " " * 54 + "42.",
        "</pre>",
    ]


HEIST_EXPECTED = [
    "META",        # THE HEIST
    "META",        # Written by
    "META",        # Jane Doe
    "SCENE",       # INT. KITCHEN - DAY
    "NARRATIVE",   # Anna walks in ... follows her.
    "CHARACTER",   # ANNA
    "SPEECH",      # Where were you?
    "CHARACTER",   # JOHN
    "SPEECH CUE",  # (quietly)
    "SPEECH",      # Out.
    "CHARACTER",   # ANNA
    "SPEECH",      # Out where?
    "NARRATIVE",   # John shrugs ...
    "CHARACTER",   # JOHN
    "SPEECH",      # Nowhere special.
    "META",        # CUT TO:
    "SCENE",       # EXT. STREET - NIGHT
    "NARRATIVE",   # Anna runs down the street.
    "CHARACTER",   # JOHN
    "SPEECH",      # Wait!
]


@pytest.fixture
def heist_raw():
    return "\r\n".join(_heist_lines())


@pytest.fixture
def heist_expected():
    return list(HEIST_EXPECTED)


@pytest.fixture
def office_raw():
    # Plain text, cues at indent 2 and dialogue at indent 4.
    return "\n".join([
        "FADE IN:",
        "",
        "INT. OFFICE - DAY",
        "",
        "Mary types. John enters.",
        "",
        "  JOHN",
        "    Hello there.",
        "",
        "  MARY",
        "    Hi.",
        "",
        "  JOHN",
        "    How are you?",
        "",
        "EXT. PARK - DAY",
        "",
        "  MARY",
        "    Fine.",
    ])
