#!/usr/bin/env python
"""
Annotate every raw script in the cache.

Writes one <out_dir>/<key>.json per script plus <out_dir>/summary.json with
per-script counts, so that scripts where the indentation heuristics failed
(clustering rejected, many UNKNOWN entries) can be found quickly:

   python scripts/annotate_all.py --cache_dir cache --out_dir output/annotated
"""
from __future__ import annotations

import argparse
import logging
import os
import time
from typing import Any, Dict, List

from tqdm import tqdm

from script_annotator.io.jsonio import safe_write_json, write_annotated_json
from script_annotator.io.script_cache import ScriptCache
from script_annotator.pipeline.annotate import EmptyScriptError, annotate_script
from script_annotator.pipeline.config import AnnotatorConfig


def main() -> None:
    ap = argparse.ArgumentParser(description="Annotate all cached raw scripts.")
    ap.add_argument("--cache_dir", default=os.environ.get("SCRIPT_CACHE_DIR", "cache"))
    ap.add_argument("--out_dir", default="output/annotated")
    ap.add_argument("--limit", type=int, default=None, help="Only annotate the first N cached scripts.")
    args = ap.parse_args()

    # per-phase logs would drown the progress bar
    logging.basicConfig(level=logging.WARNING, format="%(asctime)s - %(levelname)s - %(message)s")

    cache = ScriptCache(args.cache_dir)
    keys = cache.annotatable_keys()
    pdf_only = len(cache.cached_keys()) - len(keys)
    if pdf_only:
        print(f"[warn] skipping {pdf_only} cached scripts published as PDF", flush=True)
    if args.limit:
        keys = keys[: args.limit]
    config = AnnotatorConfig(diagnose=False)

    t0 = time.time()
    rows: List[Dict[str, Any]] = []
    skipped = 0
    for key in tqdm(keys, desc="annotate"):
        lookup = cache.load_raw_script(key)
        if not lookup.ok:
            print(f"[warn] {lookup.error}", flush=True)
            skipped += 1
            continue
        try:
            script = annotate_script(lookup.raw_text, config=config)
        except EmptyScriptError as exc:
            print(f"[warn] skipping {key}: {exc}", flush=True)
            skipped += 1
            continue

        diag = script.diagnostics
        write_annotated_json(
            os.path.join(args.out_dir, f"{key}.json"),
            script.entries,
            diagnostics=diag.to_json(),
            meta={"source": key},
        )
        rows.append(
            {
                "key": key,
                "entries": len(script),
                "unknown": len(diag.unknown_lines),
                "speech_anomalies": len(diag.speech_anomalies),
                "clustering_accepted": diag.clustering_accepted,
                "kind_counts": diag.kind_counts,
            }
        )

    summary = {
        "meta": {
            "cache_dir": args.cache_dir,
            "annotated": len(rows),
            "skipped": skipped,
            "pdf_only": pdf_only,
            "clustering_rejected": sum(1 for r in rows if not r["clustering_accepted"]),
            "elapsed_sec": round(time.time() - t0, 2),
        },
        "scripts": rows,
    }
    out = os.path.join(args.out_dir, "summary.json")
    safe_write_json(out, summary)
    print(f"[ok] annotated={len(rows)} skipped={skipped} -> {out}", flush=True)


if __name__ == "__main__":
    main()
