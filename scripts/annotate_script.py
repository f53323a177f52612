#!/usr/bin/env python
import argparse
import logging
import os

from script_annotator.io.consumers import HtmlFileConsumer, JsonFileConsumer, TextFileConsumer
from script_annotator.io.contracts import ScriptLookup
from script_annotator.io.script_cache import ScriptCache, tokenize_title
from script_annotator.io.sources import PdfScriptSource, TextFileSource
from script_annotator.pipeline.annotate import annotate_script
from script_annotator.pipeline.config import AnnotatorConfig


def _lookup(args: argparse.Namespace) -> ScriptLookup:
    if args.title:
        return ScriptCache(args.cache_dir, min_score=args.min_score).search_by_title(args.title)
    if args.key:
        return ScriptCache(args.cache_dir).load_raw_script(args.key)
    if args.pdf:
        return PdfScriptSource().load_raw_script(args.pdf)
    return TextFileSource().load_raw_script(args.file)


def main() -> None:
    """
    Command-line entry point: annotate one screenplay.

    All the real work happens in script_annotator.pipeline.annotate.annotate_script();
    this script only picks the source and the outputs.
    """
    ap = argparse.ArgumentParser(description="Annotate one screenplay line by line.")
    src = ap.add_mutually_exclusive_group(required=True)
    src.add_argument("--title", help="Fuzzy-search this title in the script cache.")
    src.add_argument("--key", help="Exact cache key (tokenized title), e.g. star-wars-a-new-hope.")
    src.add_argument("--file", help="Path to a saved script page or text file.")
    src.add_argument("--pdf", help="Path to a screenplay PDF.")

    ap.add_argument(
        "--cache_dir",
        default=os.environ.get("SCRIPT_CACHE_DIR", "cache"),
        help="Root of the script cache (metadata.json + raw-scripts/).",
    )
    ap.add_argument("--min_score", type=float, default=60.0, help="Minimum fuzzy title score [0,100].")
    ap.add_argument("--out_dir", default="output", help="Where outputs go when --out is not given.")
    ap.add_argument("--out", default=None, help="Path to the annotated JSON file.")
    ap.add_argument("--html", default=None, help="Also write an HTML listing to this path.")
    ap.add_argument("--txt", default=None, help="Also write a plain-text listing to this path.")

    ap.add_argument("--min_primary_share", type=float, default=0.10)
    ap.add_argument("--min_secondary_share", type=float, default=0.015)
    ap.add_argument("--min_combined_share", type=float, default=0.50)
    ap.add_argument("--tab_width", type=int, default=8)
    ap.add_argument("--verbose", action="store_true", help="Log every phase and anomaly.")

    args = ap.parse_args()
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s - %(levelname)s - %(message)s",
    )

    lookup = _lookup(args)
    if not lookup.ok:
        raise SystemExit(f"[error] {lookup.error}")

    config = AnnotatorConfig(
        min_primary_share=args.min_primary_share,
        min_secondary_share=args.min_secondary_share,
        min_combined_share=args.min_combined_share,
        tab_width=args.tab_width,
    )
    script = annotate_script(lookup.raw_text, config=config)

    name = tokenize_title(lookup.title or os.path.basename(lookup.key))
    out = args.out or os.path.join(args.out_dir, f"{name}.json")
    meta = {"source": lookup.key, "title": lookup.title}
    JsonFileConsumer(out, meta=meta, diagnostics=script.diagnostics.to_json()).consume(script.entries)
    if args.html:
        HtmlFileConsumer(args.html).consume(script.entries)
    if args.txt:
        TextFileConsumer(args.txt).consume(script.entries)

    unknown = len(script.diagnostics.unknown_lines)
    print(f"[ok] title={lookup.title!r} entries={len(script)} unknown={unknown} -> {out}", flush=True)


if __name__ == "__main__":
    main()
