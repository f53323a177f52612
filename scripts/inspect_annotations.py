#!/usr/bin/env python3
"""
Inspect an annotated script JSON (output of annotate_script.py / annotate_all.py).

Use cases:
1) Quick look at the first entries:
   python scripts/inspect_annotations.py --file output/titanic.json --top 40

2) Dialogue lines containing a word:
   python scripts/inspect_annotations.py --file output/titanic.json --kind SPEECH --contains iceberg

3) What is still UNKNOWN:
   python scripts/inspect_annotations.py --file output/titanic.json --kind UNKNOWN --top 100

4) Counts per kind, and who speaks most:
   python scripts/inspect_annotations.py --file output/titanic.json --stats --characters
"""

from __future__ import annotations

import argparse
import csv
import os
from collections import Counter
from typing import Any, Dict, List, Optional, Tuple

from script_annotator.io.jsonio import load_annotated_json, load_json
from script_annotator.text.entries import AnnotatedEntry, Annotation


def normalize(s: str) -> str:
    """Lowercase + collapse whitespace for loose matching."""
    return " ".join(s.lower().split())


def parse_kind(kind: Optional[str]) -> Optional[Annotation]:
    if not kind:
        return None
    label = kind.upper().replace("_", " ")
    try:
        return Annotation(label)
    except ValueError:
        raise SystemExit(f"[error] unknown kind {kind!r}; one of {[a.value for a in Annotation]}")


def matches_filters(
    entry: AnnotatedEntry,
    *,
    kind: Optional[Annotation],
    contains: Optional[str],
) -> bool:
    if kind is not None and entry.annotation != kind:
        return False
    if contains and normalize(contains) not in normalize(entry.content):
        return False
    return True


def print_entry(idx: int, entry: AnnotatedEntry) -> None:
    print(f"{idx:>5}  {entry.annotation.value:<11}  {entry.content.strip()}")


def export_csv(rows: List[Tuple[int, AnnotatedEntry]], out_csv: str) -> None:
    os.makedirs(os.path.dirname(out_csv) or ".", exist_ok=True)
    with open(out_csv, "w", newline="", encoding="utf-8") as f:
        w = csv.DictWriter(f, fieldnames=["index", "annotation", "content"])
        w.writeheader()
        for idx, e in rows:
            w.writerow({"index": idx, "annotation": e.annotation.value, "content": e.content.strip()})


def main() -> None:
    ap = argparse.ArgumentParser(description="Inspect an annotated script JSON.")
    ap.add_argument("--file", required=True, help="Path to annotated JSON file.")
    ap.add_argument("--top", type=int, default=50, help="Number of entries to print after filtering.")
    ap.add_argument("--kind", default=None, help="Filter: annotation kind (e.g. SPEECH, SPEECH_CUE).")
    ap.add_argument("--contains", default=None, help="Filter: content contains this text (case-insensitive).")
    ap.add_argument("--csv", default=None, help="If set, export filtered entries to CSV path.")
    ap.add_argument("--stats", action="store_true", help="Print counts per annotation kind.")
    ap.add_argument("--characters", action="store_true", help="Print character occurrences from diagnostics.")

    args = ap.parse_args()
    entries = load_annotated_json(args.file)

    if args.stats or args.characters:
        if args.stats:
            c = Counter(e.annotation.value for e in entries)
            print(f"Entries: {len(entries)}")
            for k, v in c.most_common():
                print(f"{k}: {v}")
        if args.characters:
            obj: Dict[str, Any] = load_json(args.file)
            for name, n in obj.get("diagnostics", {}).get("character_occurrences", []):
                print(f"{name}: {n}")
        return

    kind = parse_kind(args.kind)
    filtered = [
        (i, e) for i, e in enumerate(entries)
        if matches_filters(e, kind=kind, contains=args.contains)
    ]

    if args.csv:
        export_csv(filtered, args.csv)
        print(f"[ok] wrote CSV: {args.csv}")

    for idx, e in filtered[: args.top]:
        print_entry(idx, e)

    if not filtered:
        print("[info] No entries matched your filters.")


if __name__ == "__main__":
    main()
