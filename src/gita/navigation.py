"""Previous/next verse stepping across chapter boundaries."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Sequence

from .chapters import CHAPTERS, ChapterInfo


@dataclass(frozen=True)
class VersePosition:
    chapter: int
    verse: int

    def __str__(self) -> str:
        return f"{self.chapter}.{self.verse}"


def _verse_count(chapter: int, chapters: Sequence[ChapterInfo]) -> int:
    for info in chapters:
        if info.number == chapter:
            return info.verse_count
    raise ValueError(f"Unknown chapter {chapter}")


def has_previous(position: VersePosition) -> bool:
    return position.verse > 1 or position.chapter > 1


def has_next(position: VersePosition, chapters: Sequence[ChapterInfo] = CHAPTERS) -> bool:
    return (
        position.verse < _verse_count(position.chapter, chapters)
        or position.chapter < len(chapters)
    )


def previous_position(
    position: VersePosition, chapters: Sequence[ChapterInfo] = CHAPTERS
) -> Optional[VersePosition]:
    """Step back one verse; from verse 1 go to the last verse of the previous chapter."""
    if not has_previous(position):
        return None
    if position.verse > 1:
        return VersePosition(position.chapter, position.verse - 1)
    prior = position.chapter - 1
    return VersePosition(prior, _verse_count(prior, chapters))


def next_position(
    position: VersePosition, chapters: Sequence[ChapterInfo] = CHAPTERS
) -> Optional[VersePosition]:
    if not has_next(position, chapters):
        return None
    if position.verse < _verse_count(position.chapter, chapters):
        return VersePosition(position.chapter, position.verse + 1)
    return VersePosition(position.chapter + 1, 1)
