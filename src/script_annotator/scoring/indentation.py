"""
indentation.py

Small, deterministic statistics over entry indentation.

Every histogram here is keyed by indentation and returned sorted by key, so
that ties between equally-sized groups always resolve the same way (towards
the lowest indentation).
"""
from __future__ import annotations

import math
from collections import defaultdict
from typing import Dict, Iterable, List, Optional, Sequence, Tuple

from script_annotator.text.entries import Annotation, Entry


def group_by_indentation(entries: Sequence[Entry], indices: Iterable[int]) -> Dict[int, List[int]]:
    groups: Dict[int, List[int]] = defaultdict(list)
    for idx in indices:
        groups[entries[idx].metrics.indentation].append(idx)
    return {k: groups[k] for k in sorted(groups)}


def rank_groups(groups: Dict[int, List[int]]) -> List[Tuple[int, List[int]]]:
    """Largest group first; equal sizes ordered by ascending indentation."""
    return sorted(groups.items(), key=lambda kv: (-len(kv[1]), kv[0]))


def most_common_indentation(histogram: Dict[int, int]) -> Optional[int]:
    if not histogram:
        return None
    return min(histogram, key=lambda k: (-histogram[k], k))


def mean_indentation_by_kind(entries: Sequence[Entry]) -> Dict[Annotation, float]:
    totals: Dict[Annotation, int] = defaultdict(int)
    counts: Dict[Annotation, int] = defaultdict(int)
    for e in entries:
        totals[e.annotation] += e.metrics.indentation
        counts[e.annotation] += 1
    return {a: totals[a] / counts[a] for a in Annotation if counts[a]}


def round_half_up(x: float) -> int:
    return int(math.floor(x + 0.5))
