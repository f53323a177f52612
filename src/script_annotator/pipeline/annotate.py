"""
annotate.py

End-to-end annotation of one raw screenplay.

Overview
--------
Given the raw text of a scraped script page, this module:

1) Normalizes the markup (markup.preprocess).
2) Builds the initial UNKNOWN entries, merging wrapped lines.
3) Seeds CHARACTER / SCENE entries from indentation statistics.
4) Runs the lexicon and propagation passes, in this exact order:

       scene lexicon -> speech cue lexicon -> speech propagation
       -> meta lexicon -> narrative inference -> residual removal
       -> leading front matter -> speech catch-all
       -> duplicate character cues

5) Computes a read-only diagnostics report.

Every pass is a function List[Entry] -> List[Entry]. Passes only talk to each
other through the annotation and lock of each entry, so the order above is
the whole contract between them.

- Deterministic: the same text always gives the same annotations.
- No I/O: fetching, caching and rendering live in script_annotator.io and
  script_annotator.render.
"""
from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from typing import Any, Callable, Dict, Iterator, List, Optional, Sequence, Tuple

from script_annotator.pipeline.cleanup import flag_leading_meta, remove_residual
from script_annotator.pipeline.clusters import seed_from_indentation
from script_annotator.pipeline.config import AnnotatorConfig
from script_annotator.pipeline.diagnostics import Diagnostics, diagnose, log_diagnostics
from script_annotator.pipeline.lexicon_passes import flag_meta, flag_scenes, flag_speech_cues
from script_annotator.pipeline.narrative import infer_narrative
from script_annotator.pipeline.postprocess import resolve_duplicate_characters
from script_annotator.pipeline.speech import force_speech_after_characters, propagate_speech
from script_annotator.text.entries import AnnotatedEntry, Entry, build_entries
from script_annotator.text.markup import preprocess

logger = logging.getLogger(__name__)

Pass = Callable[[Sequence[Entry]], List[Entry]]

PASSES: Tuple[Tuple[str, Pass], ...] = (
    ("SCENE lexicon", flag_scenes),
    ("SPEECH CUE lexicon", flag_speech_cues),
    ("SPEECH propagation", propagate_speech),
    ("META lexicon", flag_meta),
    ("NARRATIVE from character mentions", infer_narrative),
    ("residual removal", remove_residual),
    ("leading META", flag_leading_meta),
    ("last SPEECH pass", force_speech_after_characters),
    ("duplicate CHARACTER cues", resolve_duplicate_characters),
)


class EmptyScriptError(ValueError):
    """Raised when a script has no visible line to annotate."""


@dataclass(frozen=True)
class AnnotatedScript:
    entries: Tuple[AnnotatedEntry, ...]
    diagnostics: Diagnostics

    def __len__(self) -> int:
        return len(self.entries)

    def __iter__(self) -> Iterator[AnnotatedEntry]:
        return iter(self.entries)

    def to_records(self) -> List[Dict[str, Any]]:
        return [e.to_record() for e in self.entries]


def _run_phase(name: str, fn: Callable[[], Any]) -> Any:
    t0 = time.perf_counter()
    result = fn()
    logger.info("[phase] %s - took %.1f ms", name, (time.perf_counter() - t0) * 1000.0)
    return result


def annotate_script(raw_text: str, *, config: Optional[AnnotatorConfig] = None) -> AnnotatedScript:
    """
    Annotate every line of a raw screenplay.

    Args:
        raw_text: Script text as scraped (may contain <b>, <br> and <pre> markup).
        config: Thresholds and options; defaults to AnnotatorConfig().

    Returns:
        AnnotatedScript with the entries in reading order and a diagnostics report.

    Raises:
        EmptyScriptError: if the text contains no visible line.
    """
    config = config or AnnotatorConfig()

    text = _run_phase("pre-processing", lambda: preprocess(raw_text, tab_width=config.tab_width))
    entries = _run_phase("init entries & merge", lambda: build_entries(text))
    if not entries:
        raise EmptyScriptError("Script contains no annotatable line.")

    entries, cluster_meta = _run_phase(
        "CHARACTER and SCENE indentation",
        lambda: seed_from_indentation(entries, config=config),
    )
    for name, pass_fn in PASSES:
        entries = _run_phase(name, lambda: pass_fn(entries))

    diagnostics = diagnose(entries, clustering_accepted=cluster_meta["accepted"])
    if config.diagnose:
        log_diagnostics(diagnostics)

    return AnnotatedScript(
        entries=tuple(AnnotatedEntry(content=e.content, annotation=e.annotation) for e in entries),
        diagnostics=diagnostics,
    )
