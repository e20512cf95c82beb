import dataclasses

import pytest

from gita.chapters import CHAPTERS, filter_chapters


def test_table_is_total_and_ordered():
    assert len(CHAPTERS) == 18
    assert [c.number for c in CHAPTERS] == list(range(1, 19))
    assert sum(c.verse_count for c in CHAPTERS) == 701


def test_entries_are_immutable():
    with pytest.raises(dataclasses.FrozenInstanceError):
        CHAPTERS[0].verse_count = 1


def test_filter_empty_query_returns_all():
    assert filter_chapters(CHAPTERS, "") == list(CHAPTERS)


def test_filter_by_name_case_insensitive():
    result = filter_chapters(CHAPTERS, "karma")

    assert [c.number for c in result] == [3, 4, 5]


def test_filter_by_sanskrit_name():
    result = filter_chapters(CHAPTERS, "भक्ति")

    assert [c.number for c in result] == [12]


def test_filter_by_number_substring():
    result = filter_chapters(CHAPTERS, "8")

    assert [c.number for c in result] == [8, 18]


def test_filter_no_match():
    assert filter_chapters(CHAPTERS, "zzz") == []
