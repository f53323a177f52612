"""
lexicon_passes.py

Classification passes driven by the fixed patterns in text/lexicon.py.

Scene headings and parenthetical cues are recognized with enough certainty
that they are hard-locked: no later pass may re-annotate them. The META pass
runs later and is allowed to overrule CHARACTER/SCENE guesses that came from
indentation alone.
"""
from __future__ import annotations

from typing import List, Sequence

from script_annotator.text.entries import Annotation, Entry, Lock
from script_annotator.text.lexicon import is_meta, is_scene_heading, is_speech_cue

_META_OVERRIDABLE = (Annotation.UNKNOWN, Annotation.CHARACTER, Annotation.SCENE)


def flag_scenes(entries: Sequence[Entry]) -> List[Entry]:
    return [
        e.annotate(Annotation.SCENE, Lock.HARD)
        if not e.hard_locked and is_scene_heading(e.content) else e
        for e in entries
    ]


def flag_speech_cues(entries: Sequence[Entry]) -> List[Entry]:
    return [
        e.annotate(Annotation.SPEECH_CUE, Lock.HARD)
        if e.annotation == Annotation.UNKNOWN and is_speech_cue(e.content) else e
        for e in entries
    ]


def flag_meta(entries: Sequence[Entry]) -> List[Entry]:
    return [
        e.annotate(Annotation.META)
        if not e.hard_locked and e.annotation in _META_OVERRIDABLE and is_meta(e.content) else e
        for e in entries
    ]
