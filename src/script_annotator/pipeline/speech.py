"""
speech.py

Dialogue (SPEECH) inference from adjacency.

In a screenplay the line right after a character cue is dialogue:

                         LUKE
                   (very animated)
               ...so I cut off my power, shut down the afterburners

The line after a parenthetical cue is dialogue too, but only when it sits at
an indentation where dialogue has also been seen right after a cue. When the
two histograms share no indentation nothing is inferred here.
"""
from __future__ import annotations

import logging
from collections import Counter, defaultdict
from typing import Dict, List, Sequence

from script_annotator.text.entries import Annotation, Entry

logger = logging.getLogger(__name__)

_SPEECH_LIKE = (Annotation.SPEECH, Annotation.CHARACTER, Annotation.SPEECH_CUE)


def propagate_speech(entries: Sequence[Entry]) -> List[Entry]:
    out = list(entries)
    after_character: Counter = Counter()
    after_cue: Dict[int, List[int]] = defaultdict(list)

    for i in range(1, len(out)):
        prev, e = out[i - 1], out[i]
        indent = e.metrics.indentation
        if prev.annotation == Annotation.CHARACTER:
            if e.annotation == Annotation.UNKNOWN:
                out[i] = e.annotate(Annotation.SPEECH)
            else:
                logger.debug(
                    "entry %d after character cue %r is already %s: %r",
                    i, prev.content.strip(), e.annotation.value, e.content.strip(),
                )
            after_character[indent] += 1
        elif prev.annotation == Annotation.SPEECH_CUE:
            after_cue[indent].append(i)

    for indent in sorted(after_cue):
        if indent not in after_character:
            continue
        for i in after_cue[indent]:
            if out[i].annotation == Annotation.UNKNOWN:
                out[i] = out[i].annotate(Annotation.SPEECH)

    return out


def force_speech_after_characters(entries: Sequence[Entry]) -> List[Entry]:
    """Last resort: whatever directly follows a cue is dialogue, unless hard-locked."""
    out = list(entries)
    for i in range(1, len(out)):
        e = out[i]
        if (
            out[i - 1].annotation == Annotation.CHARACTER
            and not e.hard_locked
            and e.annotation not in _SPEECH_LIKE
        ):
            out[i] = e.annotate(Annotation.SPEECH)
    return out
