from script_annotator.pipeline.cleanup import flag_leading_meta, remove_residual
from script_annotator.pipeline.lexicon_passes import flag_meta, flag_scenes, flag_speech_cues
from script_annotator.pipeline.narrative import character_names, infer_narrative
from script_annotator.pipeline.speech import force_speech_after_characters, propagate_speech
from script_annotator.text.entries import Annotation, Entry, Lock

A = Annotation


def _e(content, annotation=A.UNKNOWN, lock=Lock.UNSET):
    return Entry(content, annotation, lock)


def _kinds(entries):
    return [e.annotation for e in entries]


# ---------------------------
# lexicon passes
# ---------------------------

def test_scene_lexicon_overrides_soft_guess_and_hard_locks():
    out = flag_scenes([
        _e("INT. ROOM - DAY", A.CHARACTER, Lock.SOFT),
        _e("EXT. ROAD - DAY", A.META, Lock.HARD),
        _e("Hello."),
    ])
    assert _kinds(out) == [A.SCENE, A.META, A.UNKNOWN]
    assert out[0].lock == Lock.HARD


def test_speech_cue_lexicon_only_touches_unknown():
    out = flag_speech_cues([_e("   (beat)"), _e("   (BEAT)", A.CHARACTER, Lock.SOFT)])
    assert _kinds(out) == [A.SPEECH_CUE, A.CHARACTER]
    assert out[0].hard_locked


def test_meta_lexicon():
    out = flag_meta([
        _e("<b>ANGLE ON JOHN</b>", A.CHARACTER, Lock.SOFT),
        _e("INT. ROOM - CONTINUED", A.SCENE, Lock.HARD),
        _e("FADE OUT.", A.NARRATIVE),
        _e("CUT TO:"),
    ])
    assert _kinds(out) == [A.META, A.SCENE, A.NARRATIVE, A.META]


# ---------------------------
# speech
# ---------------------------

def _dialogue(answer_indent):
    return [
        _e(" " * 25 + "JOHN", A.CHARACTER, Lock.SOFT),
        _e(" " * 20 + "(beat)", A.SPEECH_CUE, Lock.HARD),
        _e(" " * answer_indent + "Fine."),
        _e(" " * 25 + "ANNA", A.CHARACTER, Lock.SOFT),
        _e(" " * 15 + "Yes."),
    ]


def test_line_after_character_is_speech():
    out = propagate_speech(_dialogue(15))
    assert out[4].annotation == A.SPEECH


def test_line_after_cue_at_dialogue_indent_is_speech():
    out = propagate_speech(_dialogue(15))
    assert _kinds(out) == [A.CHARACTER, A.SPEECH_CUE, A.SPEECH, A.CHARACTER, A.SPEECH]


def test_line_after_cue_elsewhere_stays_unknown():
    out = propagate_speech(_dialogue(12))
    assert out[2].annotation == A.UNKNOWN


def test_speech_catch_all():
    out = force_speech_after_characters([
        _e("  JOHN", A.CHARACTER),
        _e("INT. ROOM", A.SCENE, Lock.HARD),
        _e("  MARY", A.CHARACTER),
        _e("He nods.", A.NARRATIVE),
        _e("  BOB", A.CHARACTER),
        _e("(beat)", A.SPEECH_CUE, Lock.HARD),
    ])
    assert _kinds(out) == [A.CHARACTER, A.SCENE, A.CHARACTER, A.SPEECH, A.CHARACTER, A.SPEECH_CUE]


# ---------------------------
# narrative
# ---------------------------

def test_character_names_skip_empty_names():
    entries = [_e("  <b>JOHN</b>", A.CHARACTER), _e("  (V.O.)", A.CHARACTER), _e("  JOHN (CONT'D)", A.CHARACTER)]
    assert character_names(entries) == ["john"]


def test_narrative_indentation_tie_goes_to_lowest():
    out = infer_narrative([
        _e(" " * 20 + "JOHN", A.CHARACTER),
        _e(" " * 10 + "John runs."),
        _e(" " * 4 + "John sits."),
        _e(" " * 4 + "She waits."),
        _e(" " * 10 + "Rain falls."),
    ])
    assert _kinds(out) == [A.CHARACTER, A.UNKNOWN, A.NARRATIVE, A.NARRATIVE, A.UNKNOWN]


def test_no_character_no_narrative():
    entries = [_e("John runs."), _e("She waits.")]
    assert infer_narrative(entries) == entries


# ---------------------------
# cleanup
# ---------------------------

def test_residual_unknown_entries_are_removed():
    out = remove_residual([_e("   42."), _e("<b>12</b>"), _e("12", A.NARRATIVE), _e("Hello")])
    assert [e.content for e in out] == ["12", "Hello"]


def test_leading_unknown_entries_become_meta():
    out = flag_leading_meta([_e("TITLE"), _e("by Someone"), _e("INT. ROOM", A.SCENE), _e("Later.")])
    assert _kinds(out) == [A.META, A.META, A.SCENE, A.UNKNOWN]


def test_all_unknown_becomes_meta():
    out = flag_leading_meta([_e("one"), _e("two")])
    assert _kinds(out) == [A.META, A.META]
