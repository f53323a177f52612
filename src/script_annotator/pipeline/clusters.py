"""
clusters.py

Seeds CHARACTER and SCENE annotations from indentation statistics.

Screenplays put character cues and scene headings at fixed indentations, and
both are written in capitals (or in bold on scraped pages). Grouping the
uppercase/bold entries by indentation therefore usually yields two dominant
groups:

    - the largest one: character cues (they precede every line of dialogue)
    - the second one: scene headings

If the distribution does not show two such groups, nothing is seeded and the
later lexicon passes have to do all the work.

Once character names are known, smaller indentation groups that contain one
of them (cues placed at an unusual indent in part of the script) are promoted
as well, until no remaining group mentions a known name.
"""
from __future__ import annotations

import logging
from typing import Any, Dict, List, Sequence, Set, Tuple

from script_annotator.pipeline.config import AnnotatorConfig
from script_annotator.scoring.indentation import group_by_indentation, rank_groups
from script_annotator.text.entries import Annotation, Entry, Lock
from script_annotator.text.lexicon import clean_character_name, is_character_candidate

logger = logging.getLogger(__name__)


def _is_reliable(
    ranked: List[Tuple[int, List[int]]],
    total_entries: int,
    total_candidates: int,
    config: AnnotatorConfig,
) -> bool:
    if len(ranked) < 2:
        return False
    first, second = len(ranked[0][1]), len(ranked[1][1])
    return (
        first > total_entries * config.min_primary_share
        and second > total_entries * config.min_secondary_share
        and first + second > total_candidates * config.min_combined_share
    )


def _promote_characters(out: List[Entry], indices: Sequence[int], names: Set[str]) -> None:
    # index 0 is conventionally the title / front matter
    for idx in indices:
        if idx >= 1 and is_character_candidate(out[idx].content):
            out[idx] = out[idx].annotate(Annotation.CHARACTER, Lock.SOFT)
            names.add(clean_character_name(out[idx].content))


def seed_from_indentation(
    entries: Sequence[Entry],
    *,
    config: AnnotatorConfig,
) -> Tuple[List[Entry], Dict[str, Any]]:
    """
    Annotate CHARACTER and SCENE entries from the uppercase/bold indentation groups.

    Returns (entries, meta).
    meta records whether the clustering was accepted and the ranked group sizes.
    """
    candidates = [
        i for i, e in enumerate(entries)
        if e.metrics.upper_case_ratio == 1 or e.metrics.bold
    ]
    ranked = rank_groups(group_by_indentation(entries, candidates))

    meta: Dict[str, Any] = {
        "accepted": False,
        "total_entries": len(entries),
        "uppercase_or_bold": len(candidates),
        "groups": [{"indentation": k, "size": len(v)} for k, v in ranked],
        "character_indentations": [],
        "scene_indentation": None,
    }

    out = list(entries)
    if not _is_reliable(ranked, len(entries), len(candidates), config):
        logger.warning(
            "Cannot rely on indentation for annotating: groups=%s entries=%d uppercase_or_bold=%d",
            [(k, len(v)) for k, v in ranked[:5]],
            len(entries),
            len(candidates),
        )
        return out, meta

    meta["accepted"] = True
    (character_indent, character_indices), (scene_indent, scene_indices) = ranked[0], ranked[1]

    names: Set[str] = set()
    _promote_characters(out, character_indices, names)
    for idx in scene_indices:
        out[idx] = out[idx].annotate(Annotation.SCENE, Lock.SOFT)
    meta["character_indentations"].append(character_indent)
    meta["scene_indentation"] = scene_indent

    # Each round removes at least one group from the pool, so this terminates.
    remaining = ranked[2:]
    while remaining:
        with_names = [
            (indent, indices) for indent, indices in remaining
            if any(clean_character_name(out[i].content) in names for i in indices)
        ]
        if not with_names:
            break
        remaining = [g for g in remaining if g not in with_names]
        for indent, indices in with_names:
            _promote_characters(out, indices, names)
            meta["character_indentations"].append(indent)

    logger.info(
        "indentation clusters: characters at %s, scenes at %d, %d distinct names",
        meta["character_indentations"],
        scene_indent,
        len(names),
    )
    return out, meta
