from __future__ import annotations

import re
from typing import Iterable

from script_annotator.text.markup import strip_bold

# Extensions that follow a character cue, e.g. "JOHN (V.O.)" or "JOHN (CONT'D)".
CHARACTER_SUFFIX_RE = re.compile(
    r"""(
        \s*\((?:
            V\.O\. | VO | V/O |
            O\.S\. | O\.S | OS | O/S |
            O\.C\. | OC |
            CONT'D\.? | CONT\ 'D\. | CONT\.? |
            OFF
        )\)                         |  # (V.O.), (O.S.), (CONT'D) ...
        [ ]--                          # trailing "--"
    )""",
    re.VERBOSE,
)

# Lines that can never be a character cue.
_CHARACTER_EXCLUSION_RE = re.compile(
    r"""(
        [ ]-(?:</b>)?$                          |  # ends with a dangling " -"
        ^\s*(?:<b>)?\(.+\)(?:</b>)?$            |  # all in parenthesis
        ^\s*(?:<b>)?[^\w]+(?:</b>)?$               # no alphanumeric characters
    )""",
    re.VERBOSE,
)

SCENE_RE = re.compile(
    r"""(
        (?:^|[ ])(?:INT\.?/EXT|EXT\.?/INT|I\.?/E|E\.?/I|INT|EXT)\.?:?[ ]  |  # INT. / EXT. / INT./EXT. / E/I
        (?:^|[ ])(?:INTERIOR|EXTERIOR):?[ ]                             |
        ^\s*(?:INSIDE|OUTSIDE)[ ]
    )""",
    re.VERBOSE,
)

_META_PATTERNS = (
    r"FADE ",
    r"FADES ",
    r"DISSOLVE(?::| )",
    r"BLACK:",
    r"THE END",
    r"- END",
    r"CREDITS",
    r"CUT TO",
    r"CUT BACK TO",
    r"WIPE TO",
    r"INTERCUT",
    r"CLOSE ON",
    r"CLOSER ON",
    r"CLOSE UP",
    r"CLOSEUP",
    r"WIDER ON",
    r"WIDE ON",
    r"RESUME ON",
    r"BACK ON ",
    r"UP ON ",
    r"<b>[A-Z]+ (?:ANGLE|SHOT)",  # "WIDER ANGLE", "REACTION SHOT"
    r"<b>ANGLE ON ",
    r"<b>ON ",
    r" LATER",
    r"CONTINUED",
    r"TRANSITION",
    r"\(MORE\)",
    r" SHOT:?\s*$",
    r"THEIR POV",
    r"'S POV",
    r"SUPER:",
    r" BY .+ PLAYS\.?\s*",  # "SURRENDER" BY CHEAP TRICK PLAYS.
    r"<b>CAMERA ",
    r"<b>ZOOM ",
)
META_RE = re.compile("|".join(_META_PATTERNS))

# A parenthetical on its own line, e.g. "(screams)".
SPEECH_CUE_RE = re.compile(r"^\s*(?:<b>)?\([^()]+\)(?:</b>)?\s*$")

_LETTER_RE = re.compile(r"[^\W\d_]")


def clean_character_name(content: str) -> str:
    """Normalize a character cue for name comparison: 'JOHN (V.O.)' -> 'john'."""
    return strip_bold(CHARACTER_SUFFIX_RE.sub("", content).lower()).strip()


def is_character_candidate(content: str) -> bool:
    return not _CHARACTER_EXCLUSION_RE.search(content.rstrip())


def is_scene_heading(content: str) -> bool:
    return bool(SCENE_RE.search(content.replace("<b>", "")))


def is_meta(content: str) -> bool:
    return bool(META_RE.search(content))


def is_speech_cue(content: str) -> bool:
    return bool(SPEECH_CUE_RE.match(content))


def is_residual(content: str) -> bool:
    """Page numbers and other leftovers: no letter once bold tags are gone."""
    return not _LETTER_RE.search(strip_bold(content))


def mentions_any(content: str, names: Iterable[str]) -> bool:
    lowered = content.lower()
    return any(n in lowered for n in names)
