import json

import pytest
from pdfminer.pdfparser import PDFSyntaxError
from pdfplumber.utils.exceptions import PdfminerException

from script_annotator.io.consumers import HtmlFileConsumer, JsonFileConsumer, TextFileConsumer
from script_annotator.io.jsonio import load_annotated_json, write_annotated_json
from script_annotator.io.sources import PdfScriptSource, TextFileSource
from script_annotator.render.listing import listing_lines, render_html, render_text
from script_annotator.text.entries import AnnotatedEntry, Annotation


class FakePage:
    def __init__(self, text):
        self._text = text

    def extract_text(self, **kwargs):
        return self._text


class FakePDF:
    def __init__(self, pages):
        self.pages = [FakePage(t) for t in pages]

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        return False


def _entries():
    return [
        AnnotatedEntry("<b>INT. ROOM - DAY</b>", Annotation.SCENE),
        AnnotatedEntry("  <b>JOHN</b>", Annotation.CHARACTER),
        AnnotatedEntry("    (beat)", Annotation.SPEECH_CUE),
    ]


def test_pdf_pages_are_joined(tmp_path):
    src = PdfScriptSource(pdf_open=lambda path: FakePDF(["INT. ROOM - DAY", "      JOHN\n   Hi."]))
    lookup = src.load_raw_script(str(tmp_path / "heist.pdf"))
    assert lookup.ok
    assert lookup.raw_text == "INT. ROOM - DAY\n      JOHN\n   Hi."
    assert lookup.title == "heist"


def test_pdf_without_text_is_a_failed_lookup():
    src = PdfScriptSource(pdf_open=lambda path: FakePDF([None, "   "]))
    lookup = src.load_raw_script("scan.pdf")
    assert not lookup.ok
    assert lookup.title == "scan"


def test_unreadable_pdf_is_a_failed_lookup():
    def boom(path):
        raise FileNotFoundError(path)

    lookup = PdfScriptSource(pdf_open=boom).load_raw_script("missing.pdf")
    assert not lookup.ok
    assert "missing.pdf" in lookup.error


@pytest.mark.parametrize(
    "exc",
    [PDFSyntaxError("No /Root object! - Is this really a PDF?"), PdfminerException("bad xref")],
)
def test_invalid_pdf_is_a_failed_lookup(exc):
    def not_a_pdf(path):
        raise exc

    lookup = PdfScriptSource(pdf_open=not_a_pdf).load_raw_script("bad.pdf")
    assert not lookup.ok
    assert "bad.pdf" in lookup.error


def test_text_file_source(tmp_path):
    path = tmp_path / "office.txt"
    path.write_text("  JOHN\n    Hi.", encoding="utf-8")

    lookup = TextFileSource().load_raw_script(str(path))
    assert lookup.ok
    assert lookup.title == "office"
    assert not TextFileSource().load_raw_script(str(tmp_path / "nope.txt")).ok


def test_listing_format():
    assert listing_lines(_entries())[1] == "   1  CHARACTER\t  <b>JOHN</b>"
    assert render_text(_entries()).count("\n") == 2
    html = render_html(_entries())
    assert html.startswith("<!DOCTYPE html>")
    assert "SPEECH CUE\t    (beat)" in html


def test_annotated_json_round_trip(tmp_path):
    path = str(tmp_path / "out" / "room.json")
    obj = write_annotated_json(path, _entries(), meta={"title": "Room"})
    assert obj["meta"] == {"title": "Room", "entries": 3}
    assert load_annotated_json(path) == _entries()


def test_consumers_write_files(tmp_path):
    JsonFileConsumer(str(tmp_path / "a.json"), diagnostics={"unknown_lines": []}).consume(_entries())
    HtmlFileConsumer(str(tmp_path / "a.html")).consume(_entries())
    TextFileConsumer(str(tmp_path / "a.txt")).consume(_entries())

    saved = json.loads((tmp_path / "a.json").read_text(encoding="utf-8"))
    assert saved["diagnostics"] == {"unknown_lines": []}
    assert saved["entries"][2] == {"content": "    (beat)", "annotation": "SPEECH CUE"}
    assert "<p>" in (tmp_path / "a.html").read_text(encoding="utf-8")
    assert (tmp_path / "a.txt").read_text(encoding="utf-8").endswith("(beat)\n")
