import pytest

from script_annotator.text.lexicon import (
    clean_character_name,
    is_character_candidate,
    is_meta,
    is_residual,
    is_scene_heading,
    is_speech_cue,
    mentions_any,
)


@pytest.mark.parametrize(
    "cue, name",
    [
        ("                         <b>JOHN</b>", "john"),
        ("<b>JOHN (V.O.)</b>", "john"),
        ("  MARY (CONT'D)", "mary"),
        ("  MARY (O.S.)", "mary"),
        ("DARTH VADER --", "darth vader"),
    ],
)
def test_clean_character_name(cue, name):
    assert clean_character_name(cue) == name


def test_character_exclusions():
    assert is_character_candidate("   JOHN")
    assert is_character_candidate("<b>JOHN (V.O.)</b>")
    assert not is_character_candidate("   AND THEN -")
    assert not is_character_candidate("   <b>(beat)</b>")
    assert not is_character_candidate("   <b>...</b>")


@pytest.mark.parametrize(
    "line",
    [
        "INT. KITCHEN - DAY",
        "<b>EXT. STREET - NIGHT</b>",
        "     12 INT. HALLWAY - NIGHT",
        "EXTERIOR: FOREST",
        "  INSIDE THE CAR",
        "INT./EXT. CAR - MOVING",
        "E/I HOUSE - DAWN",
    ],
)
def test_scene_headings(line):
    assert is_scene_heading(line)


def test_not_scene_headings():
    assert not is_scene_heading("PRINT. THIS")
    assert not is_scene_heading("He walks inside the house.")
    assert not is_scene_heading("INT.")


@pytest.mark.parametrize(
    "line",
    ["CUT TO:", "FADE OUT.", "    (MORE)", "<b>ANGLE ON JOHN</b>", "THE END", "MOMENTS LATER", "CONTINUED:"],
)
def test_meta_lines(line):
    assert is_meta(line)


def test_not_meta_lines():
    assert not is_meta("   JOHN")
    assert not is_meta("Anna walks in.")
    assert not is_meta("MOREAU")


def test_speech_cue():
    assert is_speech_cue("(beat)")
    assert is_speech_cue("      <b>(angrily)</b>  ")
    assert not is_speech_cue("(a) and (b)")
    assert not is_speech_cue("He laughs (loudly).")


def test_residual():
    assert is_residual("   42.")
    assert is_residual("<b>12</b>")
    assert is_residual("--")
    assert not is_residual("Page 3")


def test_mentions_any():
    assert mentions_any("John walks in.", ["john"])
    assert not mentions_any("Anna walks in.", ["john"])
