"""
script_cache.py

Local on-disk cache of movie metadata and raw scripts.

Layout
------
    <cache_dir>/metadata.json               list of MovieMetadata.to_json() objects
    <cache_dir>/raw-scripts/<key>.txt       raw script text, <key> = tokenize_title(title)

The cache is the ScriptSupplier used by the command-line scripts: a raw
script is found either by its exact key or by fuzzy search over the cached
titles (rapidfuzz). Nothing here talks to the network; the cache is filled by
whatever downloaded the pages, or by save_raw_script().
"""
from __future__ import annotations

import os
import re
from dataclasses import dataclass, field, replace
from typing import Any, Dict, List, Optional

from rapidfuzz import fuzz, process, utils

from script_annotator.io.contracts import ScriptLookup
from script_annotator.io.jsonio import load_json, safe_write_json, safe_write_text


def tokenize_title(title: str) -> str:
    """Filename-safe title: 'Star Wars: A New Hope' -> 'star-wars-a-new-hope'."""
    return re.sub(r"[:!?]", "", title.lower().strip().replace(" ", "-"))


@dataclass
class MovieMetadata:
    title: str
    details_url: str = ""
    draft: str = ""
    authors: str = ""
    genres: List[str] = field(default_factory=list)
    script_url: Optional[str] = None

    @property
    def tokenized_title(self) -> str:
        return tokenize_title(self.title)

    def has_script_url(self) -> bool:
        return self.script_url is not None

    def has_fetchable_script(self) -> bool:
        # scripts published as PDF have no HTML page to scrape
        return self.has_script_url() and ".html" in str(self.script_url)

    def to_json(self) -> Dict[str, Any]:
        return {
            "title": self.title,
            "tokenizedTitle": self.tokenized_title,
            "detailsURL": self.details_url,
            "draft": self.draft,
            "authors": self.authors,
            "genres": list(self.genres),
            "scriptURL": self.script_url,
        }

    @classmethod
    def from_json(cls, obj: Dict[str, Any]) -> "MovieMetadata":
        return cls(
            title=str(obj["title"]),
            details_url=obj.get("detailsURL", "") or "",
            draft=obj.get("draft", "") or "",
            authors=obj.get("authors", "") or "",
            genres=list(obj.get("genres") or []),
            script_url=obj.get("scriptURL"),
        )


class ScriptCache:
    def __init__(self, cache_dir: str, *, min_score: float = 60.0):
        """
        Args:
            cache_dir: Root cache directory (holds metadata.json and raw-scripts/).
            min_score: Minimum rapidfuzz WRatio score [0,100] for a title search hit.
        """
        self.cache_dir = cache_dir
        self.metadata_path = os.path.join(cache_dir, "metadata.json")
        self.scripts_dir = os.path.join(cache_dir, "raw-scripts")
        self.min_score = min_score

    def script_path(self, key: str) -> str:
        return os.path.join(self.scripts_dir, f"{key}.txt")

    def load_metadata(self) -> List[MovieMetadata]:
        if not os.path.exists(self.metadata_path):
            return []
        obj = load_json(self.metadata_path)
        if not isinstance(obj, list):
            raise RuntimeError(f"{self.metadata_path} does not contain a list of movies.")
        return [MovieMetadata.from_json(m) for m in obj]

    def save_metadata(self, movies: List[MovieMetadata]) -> None:
        safe_write_json(self.metadata_path, [m.to_json() for m in movies])

    def cached_keys(self) -> List[str]:
        if not os.path.isdir(self.scripts_dir):
            return []
        return sorted(
            name[: -len(".txt")] for name in os.listdir(self.scripts_dir) if name.endswith(".txt")
        )

    def annotatable_keys(self) -> List[str]:
        """
        Cached keys minus the titles whose metadata points at a PDF-only script.

        Keys without metadata, or without a script URL, are kept.
        """
        by_key = {m.tokenized_title: m for m in self.load_metadata()}
        keys: List[str] = []
        for k in self.cached_keys():
            movie = by_key.get(k)
            if movie is None or not movie.has_script_url() or movie.has_fetchable_script():
                keys.append(k)
        return keys

    def save_raw_script(self, key: str, raw_text: str) -> None:
        safe_write_text(self.script_path(key), raw_text)

    def load_raw_script(self, key: str) -> ScriptLookup:
        path = self.script_path(key)
        if not os.path.exists(path):
            return ScriptLookup.failure(key, f"No cached raw script for '{key}' (expected {path}).")
        with open(path, "r", encoding="utf-8", errors="replace") as f:
            return ScriptLookup(key=key, raw_text=f.read())

    def search_by_title(self, query: str) -> ScriptLookup:
        """
        Find the cached movie whose title best matches `query` and load its script.

        Returns a failed ScriptLookup when there is no metadata, when no title
        scores at least `min_score`, or when the matching movie has no cached script.
        """
        movies = self.load_metadata()
        if not movies:
            return ScriptLookup.failure(query, f"No movie metadata cached in {self.cache_dir}.")

        match = process.extractOne(
            query,
            [m.title for m in movies],
            scorer=fuzz.WRatio,
            processor=utils.default_process,
            score_cutoff=self.min_score,
        )
        if match is None:
            return ScriptLookup.failure(query, f"No title matches '{query}' (min_score={self.min_score}).")

        movie = movies[match[2]]
        return replace(self.load_raw_script(movie.tokenized_title), title=movie.title)
