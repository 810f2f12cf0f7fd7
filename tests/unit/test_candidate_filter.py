"""Tests for the layered candidate filter."""

from __future__ import annotations

from attach_picker.candidate_filter import filter_candidates
from attach_picker.filter_config import FilterConfig
from attach_picker.process_models import ProcessRecord

GAME = ProcessRecord(pid=1234, title="Game", path="C:\\G\\Game.exe")
EDITOR = ProcessRecord(pid=200, title="Unreal Editor", path="C:\\UE\\UE4Editor-Win64.exe")
NOTEPAD = ProcessRecord(pid=300, title="notes.txt - Notepad", path="C:\\Windows\\notepad.exe")
REPORTER = ProcessRecord(pid=400, title="Unreal Editor", path="C:\\UE\\crashreporter\\UE4Editor-CrashReporter.exe")


def _pids(candidates):
    return [candidate.pid for candidate in candidates]


def test_empty_hint_and_default_config_keeps_everything_in_order():
    records = [NOTEPAD, GAME, EDITOR]

    assert _pids(filter_candidates(records, "", FilterConfig())) == [300, 1234, 200]


def test_hint_matches_title_or_short_name():
    records = [GAME, EDITOR, NOTEPAD]

    assert _pids(filter_candidates(records, "Editor", FilterConfig())) == [200]
    assert _pids(filter_candidates(records, "notepad", FilterConfig())) == [300]


def test_engine_filter_keeps_only_engine_processes():
    config = FilterConfig(filter_by_engine_type=True, engine_process_name_patterns=("ue4editor",))

    assert _pids(filter_candidates([EDITOR, NOTEPAD], "", config)) == [200]


def test_engine_patterns_are_ignored_when_engine_filter_is_off():
    config = FilterConfig(filter_by_engine_type=False, engine_process_name_patterns=("ue4editor",))

    assert _pids(filter_candidates([EDITOR, NOTEPAD], "", config)) == [200, 300]


def test_engine_filter_with_no_patterns_keeps_nothing():
    config = FilterConfig(filter_by_engine_type=True)

    assert filter_candidates([EDITOR, NOTEPAD], "", config) == []


def test_blacklist_wins_over_hint_and_engine_match():
    config = FilterConfig(
        filter_by_engine_type=True,
        engine_process_name_patterns=("ue4editor",),
        blacklist_patterns=("crashreporter",),
    )

    candidates = filter_candidates([REPORTER, EDITOR], "Unreal", config)

    assert _pids(candidates) == [200]


def test_duplicates_are_preserved():
    assert _pids(filter_candidates([GAME, GAME], "Game", FilterConfig())) == [1234, 1234]


def test_candidates_carry_short_name_and_label():
    (candidate,) = filter_candidates([GAME], "", FilterConfig())

    assert candidate.name == "Game.exe"
    assert candidate.label == "1234 : Game.exe"
