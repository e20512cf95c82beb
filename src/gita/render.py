"""Plain-text rendering of chapter listings and verses."""

from __future__ import annotations

from typing import Any, Dict, Iterable, Sequence

from .chapters import CHAPTERS, ChapterInfo
from .navigation import VersePosition, next_position, previous_position


def extract_commentary(verse: Dict[str, Any]) -> str:
    """Commentaries arrive as a string or as {author: text}; take the first text."""
    commentaries = verse.get("commentaries")
    if not commentaries:
        return ""
    if isinstance(commentaries, str):
        return commentaries
    if isinstance(commentaries, dict):
        for text in commentaries.values():
            return text or ""
    return ""


def render_chapter_list(chapters: Iterable[ChapterInfo]) -> str:
    lines = [
        f"{chapter.number:02d}  {chapter.name}  ({chapter.sanskrit_name})  "
        f"{chapter.verse_count} Verses"
        for chapter in chapters
    ]
    return "\n".join(lines)


def _section(title: str, body: str) -> str:
    return f"{title}\n{'-' * len(title)}\n{body}"


def render_verse(verse: Dict[str, Any], chapter_info: ChapterInfo) -> str:
    parts = [
        f"Chapter {chapter_info.number} • Verse {verse.get('verse')}",
        chapter_info.name,
        chapter_info.sanskrit_name,
        "",
        str(verse.get("text", "")).strip(),
    ]

    transliteration = verse.get("transliteration")
    if transliteration:
        parts += ["", _section("Transliteration", transliteration)]

    translation = verse.get("translation")
    if translation:
        parts += ["", _section("Translation", translation)]

    commentary = extract_commentary(verse)
    if commentary:
        parts += ["", _section("Commentary", commentary)]

    return "\n".join(parts)


def render_navigation(position: VersePosition, chapters: Sequence[ChapterInfo] = CHAPTERS) -> str:
    """One-line navigation bar; ends with no neighbour are left out."""
    previous = previous_position(position, chapters)
    following = next_position(position, chapters)

    segments = []
    if previous is not None:
        segments.append(f"← {previous}")
    segments.append(f"Chapter {position.chapter} of {len(chapters)}")
    if following is not None:
        segments.append(f"{following} →")
    return " | ".join(segments)
