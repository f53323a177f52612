from __future__ import annotations

from collections import Counter
from typing import List, Sequence

from script_annotator.scoring.indentation import most_common_indentation
from script_annotator.text.entries import Annotation, Entry
from script_annotator.text.lexicon import clean_character_name, mentions_any


def character_names(entries: Sequence[Entry]) -> List[str]:
    """Distinct cleaned names of CHARACTER entries, in order of first appearance."""
    names: List[str] = []
    for e in entries:
        if e.annotation == Annotation.CHARACTER:
            name = clean_character_name(e.content)
            if name and name not in names:
                names.append(name)
    return names


def infer_narrative(entries: Sequence[Entry]) -> List[Entry]:
    """
    Flag UNKNOWN entries at the narrative indentation as NARRATIVE.

    Action lines are the ones that talk about the characters, so the
    indentation shared by most UNKNOWN entries mentioning a character name is
    taken as the narrative indentation and extrapolated to every UNKNOWN entry
    at that indentation.
    """
    names = character_names(entries)
    histogram: Counter = Counter(
        e.metrics.indentation for e in entries
        if e.annotation == Annotation.UNKNOWN and mentions_any(e.content, names)
    )
    narrative_indent = most_common_indentation(dict(histogram))
    if narrative_indent is None:
        return list(entries)

    return [
        e.annotate(Annotation.NARRATIVE)
        if e.annotation == Annotation.UNKNOWN and e.metrics.indentation == narrative_indent else e
        for e in entries
    ]
