"""
markup.py

Normalizes raw script markup into canonical text before any line is read.

Scraped script pages only carry two structural conventions: bold spans
(<b>...</b>, used for character cues and scene headings) and line-break
tokens (<br>). Everything else is plain, space-indented text. The source
pages are sloppy about where the bold tags sit relative to the whitespace
and line breaks, e.g.

    <b>                                     THREEPIO
    </b>                         I should have known better than to

which becomes

                                         <b>THREEPIO</b>
                             I should have known better than to

so that the indentation of every line reflects its content, not its markup.
"""
from __future__ import annotations

import re

BOLD_TAG_RE = re.compile(r"</?b>")

_LINE_BREAK_RE = re.compile(r"<br\s*/?>", re.IGNORECASE)
# Whitespace-only line sitting between two newlines.
_BLANK_LINE_RE = re.compile(r"\n[^\S\n]+(?=\n)")
_CLOSING_BOLD_RE = re.compile(r"(\n+)((?:</b>)+)")
_BOLD_LEADING_SPACE_RE = re.compile(r"<b>([ \t]+)")
_EMPTY_BOLD_RE = re.compile(r"<b></b>")


def strip_bold(s: str) -> str:
    return BOLD_TAG_RE.sub("", s)


def preprocess(raw: str, *, tab_width: int = 8) -> str:
    """
    Turn a raw scraped script into canonical text.

    Steps, in order:
      - drop carriage returns
      - line-break tokens become newlines
      - tabs become `tab_width` spaces
      - whitespace-only lines become empty lines
      - a </b> opening a line moves to the end of the previous line
      - whitespace right after <b> moves in front of the tag
      - empty <b></b> pairs are deleted (and lines left blank by it collapsed)

    Args:
        raw: Text as scraped from the script page.
        tab_width: Number of spaces a tab character stands for.

    Returns:
        Normalized text. Running it through preprocess() again is a no-op.
    """
    text = raw.replace("\r", "")
    text = _LINE_BREAK_RE.sub("\n", text)
    text = text.replace("\t", " " * tab_width)
    text = _BLANK_LINE_RE.sub("\n", text)
    text = _CLOSING_BOLD_RE.sub(r"\2\1", text)
    text = _BOLD_LEADING_SPACE_RE.sub(lambda m: m.group(1) + "<b>", text)
    text = _EMPTY_BOLD_RE.sub("", text)
    # lines emptied by the deletion above
    text = _BLANK_LINE_RE.sub("\n", text)
    return text
