import json
import os
from typing import Any, Dict, List, Optional, Sequence

from script_annotator.text.entries import AnnotatedEntry


def _atomic_write(path: str, text: str) -> None:
    os.makedirs(os.path.dirname(path) or ".", exist_ok=True)
    tmp = path + ".tmp"
    with open(tmp, "w", encoding="utf-8") as f:
        f.write(text)
    os.replace(tmp, path)


def safe_write_text(path: str, text: str) -> None:
    _atomic_write(path, text)


def safe_write_json(path: str, obj: Any) -> None:
    _atomic_write(path, json.dumps(obj, indent=2))


def load_json(path: str) -> Any:
    with open(path, "r", encoding="utf-8") as f:
        return json.load(f)


def write_annotated_json(
    path: str,
    entries: Sequence[AnnotatedEntry],
    *,
    diagnostics: Optional[Dict[str, Any]] = None,
    meta: Optional[Dict[str, Any]] = None,
) -> Dict[str, Any]:
    obj = {
        "meta": dict(meta or {}),
        "diagnostics": diagnostics or {},
        "entries": [e.to_record() for e in entries],
    }
    obj["meta"]["entries"] = len(entries)
    safe_write_json(path, obj)
    return obj


def load_annotated_json(path: str) -> List[AnnotatedEntry]:
    obj = load_json(path)
    records = obj.get("entries") if isinstance(obj, dict) else None
    if not isinstance(records, list):
        raise RuntimeError(f"{path} does not contain a list under key 'entries'.")
    return [AnnotatedEntry.from_record(r) for r in records]
