"""
entries.py

Entry model and the entry builder.

An Entry is one logical unit of screenplay text (one line after wrapped
continuation lines have been merged back together) carrying exactly one
Annotation. Entries are frozen; every pass returns new Entry values rather
than mutating shared ones.

Entry builder
-------------
The only segmentation signal a scraped script gives us between a wrapped
line and a new paragraph at the same indentation is a blank line:

              Anna walks in and sets a bag on the table. John
              follows her.

is one entry, while

              Anna walks in.

              John follows her.

is two.
"""
from __future__ import annotations

import re
from dataclasses import dataclass, replace
from enum import Enum, IntEnum
from typing import Any, Dict, List, Optional

from script_annotator.text.markup import strip_bold

BLOCK_MARKERS = ("<pre>", "</pre>")

# Whole trimmed content wrapped in a single bold pair.
_BOLD_LINE_RE = re.compile(r"^\s*<b>(?:(?!</?b>).)*</b>\s*$")


class Annotation(str, Enum):
    UNKNOWN = "UNKNOWN"
    META = "META"
    SCENE = "SCENE"
    NARRATIVE = "NARRATIVE"
    SPEECH = "SPEECH"
    SPEECH_CUE = "SPEECH CUE"
    CHARACTER = "CHARACTER"


class Lock(IntEnum):
    """
    How confident a pass was when it assigned an annotation.

    UNSET: free for any later pass.
    SOFT: structural guess (indentation clustering); recorded for auditing,
          later passes may still override it.
    HARD: lexicon match; later passes leave the entry alone.
    """
    UNSET = 0
    SOFT = 1
    HARD = 2


@dataclass(frozen=True)
class EntryMetrics:
    indentation: int
    upper_case_ratio: float
    bold: bool


def compute_indentation(s: str) -> int:
    # all-whitespace strings count as fully indented
    return len(s) - len(s.lstrip())


def compute_upper_case_ratio(s: str) -> float:
    text = strip_bold(s)
    upper = sum(1 for c in text if c.isupper())
    lower = sum(1 for c in text if c.islower())
    if upper + lower == 0:
        return 1.0
    return upper / (upper + lower)


def compute_metrics(s: str) -> EntryMetrics:
    return EntryMetrics(
        indentation=compute_indentation(s),
        upper_case_ratio=compute_upper_case_ratio(s),
        bold=bool(_BOLD_LINE_RE.match(s)),
    )


@dataclass(frozen=True)
class Entry:
    content: str
    annotation: Annotation = Annotation.UNKNOWN
    lock: Lock = Lock.UNSET

    def __post_init__(self) -> None:
        if not self.content.strip():
            raise ValueError("Entry content must contain at least one non-whitespace character.")

    @property
    def metrics(self) -> EntryMetrics:
        return compute_metrics(self.content)

    @property
    def hard_locked(self) -> bool:
        return self.lock == Lock.HARD

    def annotate(self, annotation: Annotation, lock: Lock = Lock.UNSET) -> "Entry":
        """Return a copy with a new annotation. Locks only ever go up."""
        return replace(self, annotation=annotation, lock=max(self.lock, lock))


@dataclass(frozen=True)
class AnnotatedEntry:
    """Read-only entry handed to callers once the pipeline is done."""
    content: str
    annotation: Annotation

    def to_record(self) -> Dict[str, Any]:
        return {"content": self.content, "annotation": self.annotation.value}

    @classmethod
    def from_record(cls, obj: Dict[str, Any]) -> "AnnotatedEntry":
        return cls(content=str(obj["content"]), annotation=Annotation(obj["annotation"]))


def _strip_block_markers(lines: List[str]) -> List[str]:
    kept: List[str] = []
    for ln in lines:
        if ln.strip() in BLOCK_MARKERS:
            continue
        for marker in BLOCK_MARKERS:
            ln = ln.replace(marker, "")
        kept.append(ln)
    return kept


def build_entries(text: str) -> List[Entry]:
    """
    Split normalized text into the initial list of UNKNOWN entries.

    A non-blank line is appended to the previous entry when no blank line
    separates them and it has the same indentation as the physical line right
    before it. Blank lines never become entries.

    Args:
        text: Output of markup.preprocess().

    Returns:
        Entries in reading order. Empty when the text has no visible line.
    """
    entries: List[Entry] = []
    blank_run = 0
    prev_indent: Optional[int] = None

    for ln in _strip_block_markers(text.split("\n")):
        indent = compute_indentation(ln)
        if not ln.strip():
            blank_run += 1
            prev_indent = indent
            continue

        if entries and blank_run == 0 and indent == prev_indent:
            last = entries[-1]
            entries[-1] = replace(last, content=last.content.rstrip() + " " + ln.strip())
        else:
            entries.append(Entry(content=ln))
            blank_run = 0
        prev_indent = indent

    return entries
