from __future__ import annotations

from typing import Any, Dict, Optional, Sequence

from script_annotator.io.jsonio import safe_write_text, write_annotated_json
from script_annotator.render.listing import render_html, render_text
from script_annotator.text.entries import AnnotatedEntry


class JsonFileConsumer:
    """Writes {"meta", "diagnostics", "entries"} JSON; see jsonio.write_annotated_json."""

    def __init__(
        self,
        path: str,
        *,
        meta: Optional[Dict[str, Any]] = None,
        diagnostics: Optional[Dict[str, Any]] = None,
    ):
        self.path = path
        self.meta = meta
        self.diagnostics = diagnostics

    def consume(self, entries: Sequence[AnnotatedEntry]) -> None:
        write_annotated_json(self.path, entries, diagnostics=self.diagnostics, meta=self.meta)


class HtmlFileConsumer:
    def __init__(self, path: str):
        self.path = path

    def consume(self, entries: Sequence[AnnotatedEntry]) -> None:
        safe_write_text(self.path, render_html(entries))


class TextFileConsumer:
    def __init__(self, path: str):
        self.path = path

    def consume(self, entries: Sequence[AnnotatedEntry]) -> None:
        safe_write_text(self.path, render_text(entries) + "\n")
