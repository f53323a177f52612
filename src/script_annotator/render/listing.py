"""
listing.py

Human-readable listings of annotated entries, one line per entry:

       0       META	                              <b>THE HEIST</b>
       3      SCENE	<b>INT. KITCHEN - DAY</b>
       5  CHARACTER	                         <b>ANNA</b>

Bold markup is left in the content; in the HTML listing it renders as bold.
"""
from __future__ import annotations

from typing import List, Sequence

from script_annotator.text.entries import AnnotatedEntry

_HTML_HEAD = (
    "<!DOCTYPE html>"
    "<html lang='en'>"
    "<head>"
    "<meta charset='utf-8'>"
    "<style>p {white-space: pre; font-family: monospace;}</style>"
    "</head>"
    "<body>"
)
_HTML_TAIL = "</p></body></html>"


def listing_lines(entries: Sequence[AnnotatedEntry]) -> List[str]:
    return [f"{i:>4}{e.annotation.value:>11}\t{e.content}" for i, e in enumerate(entries)]


def render_text(entries: Sequence[AnnotatedEntry]) -> str:
    return "\n".join(listing_lines(entries))


def render_html(entries: Sequence[AnnotatedEntry]) -> str:
    return _HTML_HEAD + "<p>" + "\n".join(listing_lines(entries)) + _HTML_TAIL
