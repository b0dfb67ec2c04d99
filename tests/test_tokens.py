"""Tests for the pure command-text helpers (core/tokens.py)."""

from __future__ import annotations

import pytest

from taskpal.core.models import TaskKind
from taskpal.core.tokens import (
    extract_fields,
    first_word,
    locate_fields,
    normalize,
    parse_task_number,
    slice_fields,
    task_kind_for,
)
from taskpal.exceptions import (
    EmptyDescriptionError,
    IndexOutOfBoundsError,
    InvalidIndexError,
    MissingByDateError,
    MissingEventDatesError,
)


def _fields(kind: TaskKind, raw: str) -> tuple[str, ...]:
    return extract_fields(kind, raw, normalize(raw))


# ---------------------------------------------------------------------------
# Normalization
# ---------------------------------------------------------------------------

class TestNormalize:
    def test_trims_and_uppercases(self) -> None:
        assert normalize("  todo Read Book \n") == "TODO READ BOOK"

    def test_keeps_length_of_trimmed_line(self) -> None:
        raw = "todo Straße fixen"
        normalized = normalize(raw)
        assert len(normalized) == len(raw)
        assert normalized.startswith("TODO STRA")

    @pytest.mark.parametrize(
        ("normalized", "word"),
        [("LIST", "LIST"), ("MARK 2", "MARK"), ("TODO READ A BOOK", "TODO"), ("", "")],
    )
    def test_first_word(self, normalized: str, word: str) -> None:
        assert first_word(normalized) == word

    @pytest.mark.parametrize(
        ("normalized", "kind"),
        [
            ("EVENT PARTY /FROM 1 /TO 2", TaskKind.EVENT),
            ("DEADLINE ESSAY /BY MON", TaskKind.DEADLINE),
            ("TODO READ", TaskKind.TODO),
        ],
    )
    def test_task_kind_for(self, normalized: str, kind: TaskKind) -> None:
        assert task_kind_for(normalized) is kind


# ---------------------------------------------------------------------------
# Task numbers
# ---------------------------------------------------------------------------

class TestParseTaskNumber:
    @pytest.mark.parametrize(
        ("normalized", "number"),
        [("MARK 3", 3), ("UNMARK 12", 12), ("DELETE   7", 7), ("MARK 0", 0)],
    )
    def test_valid(self, normalized: str, number: int) -> None:
        assert parse_task_number(normalized) == number

    @pytest.mark.parametrize("normalized", ["MARK", "MARK X", "DELETE -1", "UNMARK 1.5", "MARK 2 3"])
    def test_invalid_raises(self, normalized: str) -> None:
        with pytest.raises(InvalidIndexError):
            parse_task_number(normalized)

    def test_invalid_index_is_out_of_bounds(self) -> None:
        with pytest.raises(IndexOutOfBoundsError):
            parse_task_number("DELETE ONE")


# ---------------------------------------------------------------------------
# Field extraction
# ---------------------------------------------------------------------------

class TestLocateFields:
    def test_deadline_spans(self) -> None:
        spans = locate_fields(TaskKind.DEADLINE, "DEADLINE SUBMIT REPORT /BY FRIDAY")
        assert spans == (slice(8, 23), slice(26, None))

    def test_todo_span(self) -> None:
        assert locate_fields(TaskKind.TODO, "TODO READ") == (slice(4, None),)

    def test_slice_rejects_foreign_normalized_line(self) -> None:
        with pytest.raises(ValueError):
            slice_fields("todo a", "TODO ABC", (slice(4, None),))


class TestExtractFields:
    def test_todo(self) -> None:
        assert _fields(TaskKind.TODO, "todo Read Book") == ("Read Book",)

    def test_deadline(self) -> None:
        assert _fields(TaskKind.DEADLINE, "deadline Submit report /by Friday") == (
            "Submit report",
            "Friday",
        )

    def test_event(self) -> None:
        assert _fields(TaskKind.EVENT, "event Trip /from Mon /to Wed") == ("Trip", "Mon", "Wed")

    def test_markers_are_case_insensitive(self) -> None:
        assert _fields(TaskKind.EVENT, "EvEnT Trip /FROM Mon 9am /To Wed") == (
            "Trip",
            "Mon 9am",
            "Wed",
        )

    def test_raw_casing_is_preserved(self) -> None:
        raw = "  deadline Return iPhone /by Next TUESDAY  "
        assert _fields(TaskKind.DEADLINE, raw) == ("Return iPhone", "Next TUESDAY")

    def test_offsets_survive_multichar_uppercase(self) -> None:
        assert _fields(TaskKind.DEADLINE, "deadline Straße kehren /by Montag") == (
            "Straße kehren",
            "Montag",
        )

    @pytest.mark.parametrize(
        ("kind", "raw"),
        [
            (TaskKind.TODO, "todo"),
            (TaskKind.TODO, "todo    "),
            (TaskKind.DEADLINE, "deadline"),
            (TaskKind.EVENT, "event  "),
        ],
    )
    def test_empty_description(self, kind: TaskKind, raw: str) -> None:
        with pytest.raises(EmptyDescriptionError):
            _fields(kind, raw)

    @pytest.mark.parametrize("raw", ["deadline essay", "deadline essay /by", "deadline essay /by   "])
    def test_missing_by_date(self, raw: str) -> None:
        with pytest.raises(MissingByDateError):
            _fields(TaskKind.DEADLINE, raw)

    @pytest.mark.parametrize(
        "raw",
        [
            "event party",
            "event party /from 2pm",
            "event party /to 4pm",
            "event party /to 4pm /from 2pm",
            "event party /from /to 4pm",
            "event party /from 2pm /to",
        ],
    )
    def test_missing_event_dates(self, raw: str) -> None:
        with pytest.raises(MissingEventDatesError):
            _fields(TaskKind.EVENT, raw)

    def test_extraction_is_repeatable(self) -> None:
        first = _fields(TaskKind.EVENT, "event A /from 1 /to 2")
        second = _fields(TaskKind.EVENT, "event Much longer name /from 10 /to 20")
        assert first == ("A", "1", "2")
        assert second == ("Much longer name", "10", "20")
