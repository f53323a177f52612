"""
postprocess.py

Resolves adjacent CHARACTER entries once every other pass has run.

Two cues in a row usually mean one of them is not a cue at all: a shouted
line of dialogue ("HELP!") at the cue indentation, or a continuation cue
("JOHN (CONT'D)") repeated after a page break. One entry of each pair is kept:

    1) different indentation: the one at the (rounded) mean CHARACTER
       indentation wins; if neither is, the less indented one wins
    2) same indentation: the shorter one wins (earlier one on a tie)

A losing later entry becomes SPEECH, a losing earlier entry goes back to
UNKNOWN.
"""
from __future__ import annotations

from typing import List, Sequence

from script_annotator.scoring.indentation import mean_indentation_by_kind, round_half_up
from script_annotator.text.entries import Annotation, Entry


def _keep_earlier(prev: Entry, cur: Entry, character_indent: int) -> bool:
    prev_indent = prev.metrics.indentation
    cur_indent = cur.metrics.indentation
    if prev_indent != cur_indent:
        if prev_indent == character_indent:
            return True
        if cur_indent == character_indent:
            return False
        return prev_indent < cur_indent
    return len(prev.content) <= len(cur.content)


def resolve_duplicate_characters(entries: Sequence[Entry]) -> List[Entry]:
    out = list(entries)
    means = mean_indentation_by_kind(out)
    if Annotation.CHARACTER not in means:
        return out
    character_indent = round_half_up(means[Annotation.CHARACTER])

    for i in range(1, len(out)):
        prev, cur = out[i - 1], out[i]
        if prev.annotation != Annotation.CHARACTER or cur.annotation != Annotation.CHARACTER:
            continue
        if _keep_earlier(prev, cur, character_indent):
            out[i] = cur.annotate(Annotation.SPEECH)
        else:
            out[i - 1] = prev.annotate(Annotation.UNKNOWN)
    return out
