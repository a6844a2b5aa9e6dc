"""Tests for core data models."""

import dataclasses

import pytest

from audiosrt.core.models import (
    BackendDescriptor,
    BackendKind,
    Segment,
    SubtitleEntry,
    to_entries,
)


def test_segment_strips_text():
    seg = Segment(start=0.0, end=1.0, text="  Bonjour \n")
    assert seg.text == "Bonjour"


def test_segment_is_immutable():
    seg = Segment(0.0, 1.0, "x")
    with pytest.raises(dataclasses.FrozenInstanceError):
        seg.text = "y"


def test_segment_allows_zero_duration():
    assert Segment(2.0, 2.0, "x").end == 2.0


@pytest.mark.parametrize("start, end", [(-1.0, 1.0), (2.0, 1.0), (0.0, float("inf"))])
def test_segment_rejects_invalid_times(start, end):
    with pytest.raises(ValueError):
        Segment(start, end, "x")


def test_entry_render():
    entry = SubtitleEntry.from_segment(3, Segment(3.5, 7.2, "b"))
    assert entry.render() == "3\n00:00:03,500 --> 00:00:07,200\nb\n\n"


def test_to_entries_numbers_from_one_regardless_of_gaps():
    segments = [Segment(10.0, 12.0, "a"), Segment(1.0, 30.0, "b"), Segment(100.0, 101.0, "c")]
    assert [e.index for e in to_entries(segments)] == [1, 2, 3]


def test_backend_descriptor():
    desc = BackendDescriptor(kind=BackendKind.SYSTEM_WHISPER, path="/usr/bin/whisper")
    assert desc.kind.value == "whisper"
    assert desc.path == "/usr/bin/whisper"
