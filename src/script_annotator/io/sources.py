"""
sources.py

ScriptSupplier implementations keyed by a file path.

    TextFileSource: a saved script page (HTML fragment or plain text)
    PdfScriptSource: a screenplay PDF

PDF text is extracted with pdfplumber in layout mode so that the left margin
of every line survives. Indentation is the main signal the annotator relies
on, and plain extract_text() collapses it.
"""
from __future__ import annotations

import os
from typing import Any, Callable, List

import pdfplumber
from pdfminer.pdfparser import PDFSyntaxError
from pdfplumber.utils.exceptions import PdfminerException

from script_annotator.io.contracts import ScriptLookup


def _title_from_path(path: str) -> str:
    return os.path.splitext(os.path.basename(path))[0]


class TextFileSource:
    def __init__(self, *, encoding: str = "utf-8"):
        self.encoding = encoding

    def load_raw_script(self, key: str) -> ScriptLookup:
        if not os.path.isfile(key):
            return ScriptLookup.failure(key, f"Script file not found: {key}")
        with open(key, "r", encoding=self.encoding, errors="replace") as f:
            return ScriptLookup(key=key, raw_text=f.read(), title=_title_from_path(key))


class PdfScriptSource:
    def __init__(
        self,
        *,
        layout: bool = True,
        pdf_open: Callable[..., Any] = pdfplumber.open,
    ):
        self.layout = layout
        self.pdf_open = pdf_open

    def load_raw_script(self, key: str) -> ScriptLookup:
        """
        Extract the text of every page of the PDF at `key`, pages joined by newlines.

        Returns a failed ScriptLookup when the file cannot be opened or parsed
        as a PDF, or has no extractable text (scanned PDFs).
        """
        pages: List[str] = []
        try:
            with self.pdf_open(key) as pdf:
                for p in pdf.pages:
                    pages.append(p.extract_text(layout=self.layout) or "")
        except (OSError, PDFSyntaxError, PdfminerException) as exc:
            return ScriptLookup.failure(key, f"Cannot open PDF {key}: {exc}")

        text = "\n".join(pages)
        if not text.strip():
            return ScriptLookup.failure(key, f"No text could be extracted from {key}.", title=_title_from_path(key))
        return ScriptLookup(key=key, raw_text=text, title=_title_from_path(key))
