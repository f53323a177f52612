"""
diagnostics.py

Read-only report on an annotated script. Nothing here changes annotations;
the report only points at the regions where the heuristics were unsure:

    - speech anomalies: entries right after a CHARACTER cue that did not end
      up as SPEECH or SPEECH CUE
    - UNKNOWN entries left over
    - how often each character speaks (a quick sanity check on the cues)
"""
from __future__ import annotations

import logging
from collections import Counter
from dataclasses import dataclass, field
from typing import Any, Dict, List, Sequence, Tuple

from script_annotator.scoring.indentation import mean_indentation_by_kind
from script_annotator.text.entries import Annotation, Entry
from script_annotator.text.lexicon import clean_character_name

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Diagnostics:
    speech_anomalies: List[int] = field(default_factory=list)
    unknown_lines: List[int] = field(default_factory=list)
    character_occurrences: List[Tuple[str, int]] = field(default_factory=list)
    kind_counts: Dict[str, int] = field(default_factory=dict)
    mean_indentation: Dict[str, float] = field(default_factory=dict)
    clustering_accepted: bool = False

    def to_json(self) -> Dict[str, Any]:
        return {
            "speech_anomalies": list(self.speech_anomalies),
            "unknown_lines": list(self.unknown_lines),
            "character_occurrences": [[name, n] for name, n in self.character_occurrences],
            "kind_counts": dict(self.kind_counts),
            "mean_indentation": dict(self.mean_indentation),
            "clustering_accepted": self.clustering_accepted,
        }


def diagnose(entries: Sequence[Entry], *, clustering_accepted: bool) -> Diagnostics:
    speech_anomalies: List[int] = []
    unknown_lines: List[int] = []
    for i, e in enumerate(entries):
        if (
            i > 0
            and entries[i - 1].annotation == Annotation.CHARACTER
            and e.annotation not in (Annotation.SPEECH, Annotation.SPEECH_CUE)
        ):
            speech_anomalies.append(i)
        if e.annotation == Annotation.UNKNOWN:
            unknown_lines.append(i)

    occurrences = Counter(
        clean_character_name(e.content).upper()
        for e in entries if e.annotation == Annotation.CHARACTER
    )
    kinds = Counter(e.annotation for e in entries)

    return Diagnostics(
        speech_anomalies=speech_anomalies,
        unknown_lines=unknown_lines,
        character_occurrences=occurrences.most_common(),
        kind_counts={a.value: kinds[a] for a in Annotation if kinds[a]},
        mean_indentation={a.value: round(m, 2) for a, m in mean_indentation_by_kind(entries).items()},
        clustering_accepted=clustering_accepted,
    )


def log_diagnostics(diag: Diagnostics) -> None:
    logger.info("screenplay parsing diagnosis: kinds=%s", diag.kind_counts)
    if not diag.clustering_accepted:
        logger.info("indentation clustering was rejected; CHARACTER/SCENE come from lexicons only")
    if diag.speech_anomalies:
        logger.info(
            "%d speech anomalies at entry indices: %s",
            len(diag.speech_anomalies),
            diag.speech_anomalies,
        )
    if diag.unknown_lines:
        logger.info("%d unknown entries at indices: %s", len(diag.unknown_lines), diag.unknown_lines)
    logger.info("character occurrences: %s", dict(diag.character_occurrences))
