from __future__ import annotations

import logging
from typing import List, Sequence

from script_annotator.text.entries import Annotation, Entry
from script_annotator.text.lexicon import is_residual

logger = logging.getLogger(__name__)


def remove_residual(entries: Sequence[Entry]) -> List[Entry]:
    """Drop UNKNOWN leftovers such as page numbers ("42.")."""
    kept = [e for e in entries if not (e.annotation == Annotation.UNKNOWN and is_residual(e.content))]
    logger.debug("removed %d residual entries", len(entries) - len(kept))
    return kept


def flag_leading_meta(entries: Sequence[Entry]) -> List[Entry]:
    """Everything UNKNOWN before the first annotated entry is front matter (title, credits, draft info)."""
    out = list(entries)
    for i, e in enumerate(out):
        if e.annotation != Annotation.UNKNOWN:
            break
        out[i] = e.annotate(Annotation.META)
    return out
