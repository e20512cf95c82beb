"""Error kinds raised by chapter data access."""

from __future__ import annotations

from typing import Optional


class GitaError(Exception):
    """Base class for failures surfaced to callers."""


class FetchError(GitaError):
    """Remote read failed: non-success status, or no response at all (status None)."""

    def __init__(self, message: str, status: Optional[int] = None, url: Optional[str] = None) -> None:
        super().__init__(message)
        self.status = status
        self.url = url


class ParseError(GitaError):
    """Response body was not valid JSON."""


class StructureError(GitaError):
    """Payload is missing the expected verse sequence."""


class NotFoundError(GitaError):
    def __init__(self, chapter: int, verse: int) -> None:
        super().__init__(f"Verse {verse} not found in chapter {chapter}")
        self.chapter = chapter
        self.verse = verse
