from gita.navigation import (
    VersePosition,
    has_next,
    has_previous,
    next_position,
    previous_position,
)


def test_first_verse_has_no_previous():
    start = VersePosition(1, 1)

    assert has_previous(start) is False
    assert previous_position(start) is None
    assert next_position(start) == VersePosition(1, 2)


def test_last_verse_has_no_next():
    end = VersePosition(18, 78)

    assert has_next(end) is False
    assert next_position(end) is None
    assert previous_position(end) == VersePosition(18, 77)


def test_next_crosses_chapter_boundary():
    assert next_position(VersePosition(2, 72)) == VersePosition(3, 1)


def test_previous_crosses_chapter_boundary():
    assert previous_position(VersePosition(3, 1)) == VersePosition(2, 72)


def test_position_str():
    assert str(VersePosition(2, 47)) == "2.47"
