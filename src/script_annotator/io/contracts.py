"""
contracts.py

The two seams between the annotation core and the outside world:

    ScriptSupplier: gives raw script text for a key (cached title, file path, PDF path)
    EntryConsumer: takes the finished, ordered annotated entries

Suppliers never raise for expected failures (missing cache file, no matching
title, empty PDF); they return a ScriptLookup whose `error` says what went
wrong.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Protocol, Sequence

from script_annotator.text.entries import AnnotatedEntry


@dataclass(frozen=True)
class ScriptLookup:
    key: str
    raw_text: Optional[str] = None
    title: Optional[str] = None
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None and self.raw_text is not None

    @classmethod
    def failure(cls, key: str, error: str, title: Optional[str] = None) -> "ScriptLookup":
        return cls(key=key, title=title, error=error)


class ScriptSupplier(Protocol):
    def load_raw_script(self, key: str) -> ScriptLookup:
        ...


class EntryConsumer(Protocol):
    def consume(self, entries: Sequence[AnnotatedEntry]) -> None:
        ...
