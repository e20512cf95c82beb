#!/usr/bin/env python3
"""
Chapter Data Access: cache-then-fetch for Bhagavad Gita chapters

Implements:
- fetch_chapter_data(chapter) -> payload
- get_all_chapters() -> list[ChapterInfo]
- get_chapter_info(chapter) -> ChapterInfo | None
- get_verse(chapter, verse) -> dict
- clear_cache() -> int
- warm_cache(chapters) -> {cached, failed}

Design principles:
- Cache first: a hit never touches the network
- Caching is best-effort: a failed cache write never fails the request
- No retries and no request coalescing; two concurrent misses both fetch
- Errors other than cache failures propagate to the caller unchanged
"""

import logging
import sqlite3
from typing import Any, Dict, Iterable, List, Optional, Sequence

from jsonschema import Draft7Validator

from cache import CacheStore, KeyValueStore, MemoryKeyValueStore, SQLiteKeyValueStore

from .chapters import CHAPTERS, ChapterInfo
from .config import GITHUB_BASE_URL, GitaConfig
from .errors import FetchError, GitaError, NotFoundError, ParseError, StructureError
from .fetcher import Fetcher, RequestsFetcher

logger = logging.getLogger(__name__)

CHAPTER_KEY_PREFIX = "chapter_"
DEFAULT_CHAPTER_FIELD = "BhagavadGitaChapter"


def chapter_schema(chapter_field: str) -> Dict[str, Any]:
    """Shallow shape check: an object holding a list of verse objects."""
    return {
        "$schema": "http://json-schema.org/draft-07/schema#",
        "type": "object",
        "required": [chapter_field],
        "properties": {
            chapter_field: {
                "type": "array",
                "items": {"type": "object"},
            },
        },
    }


class ChapterDataLoader:
    """
    Resolves chapter metadata and serves chapter payloads from cache or remote.

    All collaborators are injected: the cache store (and through it the
    storage substrate), the fetcher, and the chapter table.
    """

    def __init__(
        self,
        cache: CacheStore,
        fetcher: Fetcher,
        base_url: str = GITHUB_BASE_URL,
        chapters: Sequence[ChapterInfo] = CHAPTERS,
        chapter_field: str = DEFAULT_CHAPTER_FIELD,
    ):
        self.cache = cache
        self.fetcher = fetcher
        self.base_url = base_url.rstrip("/")
        self.chapters = tuple(chapters)
        self.chapter_field = chapter_field
        self._validator = Draft7Validator(chapter_schema(chapter_field))

    @staticmethod
    def cache_key(chapter_number: int) -> str:
        return f"{CHAPTER_KEY_PREFIX}{chapter_number}"

    def chapter_url(self, chapter_number: int) -> str:
        return f"{self.base_url}/bhagavad_gita_chapter_{chapter_number}.json"

    def fetch_chapter_data(self, chapter_number: int) -> Any:
        """
        Return the chapter payload, from cache when fresh, otherwise remote.

        Raises:
            FetchError: remote answered with a non-success status or not at all
            ParseError: remote body is not JSON
        """
        key = self.cache_key(chapter_number)

        cached = self.cache.get(key)
        if cached is not None:
            logger.info(f"Chapter {chapter_number} loaded from cache")
            return cached

        url = self.chapter_url(chapter_number)
        try:
            response = self.fetcher.get(url)

            if not response.ok:
                raise FetchError(
                    f"HTTP error! status: {response.status_code}",
                    status=response.status_code,
                    url=url,
                )

            try:
                data = response.json()
            except ValueError as e:
                raise ParseError(f"Chapter {chapter_number} response is not valid JSON: {e}") from e

        except GitaError as e:
            logger.error(f"Error fetching chapter {chapter_number}: {e}")
            raise

        self.cache.set(key, data)
        logger.info(f"Chapter {chapter_number} fetched from remote")
        return data

    def get_all_chapters(self) -> List[ChapterInfo]:
        return list(self.chapters)

    def get_chapter_info(self, chapter_number: int) -> Optional[ChapterInfo]:
        for chapter in self.chapters:
            if chapter.number == chapter_number:
                return chapter
        return None

    def get_verse(self, chapter_number: int, verse_number: int) -> Dict[str, Any]:
        """
        Return one verse record from a chapter.

        Raises:
            StructureError: payload lacks the verse sequence
            NotFoundError: no record with that verse number
            FetchError / ParseError: propagated from fetch_chapter_data
        """
        try:
            data = self.fetch_chapter_data(chapter_number)

            errors = sorted(self._validator.iter_errors(data), key=lambda e: e.path)
            if errors:
                messages = ", ".join(error.message for error in errors)
                raise StructureError(f"Invalid chapter data structure: {messages}")

            for record in data[self.chapter_field]:
                if record.get("verse") == verse_number:
                    return record

            raise NotFoundError(chapter_number, verse_number)

        except GitaError as e:
            logger.error(f"Error getting verse {chapter_number}.{verse_number}: {e}")
            raise

    def clear_cache(self) -> int:
        cleared = self.cache.clear(CHAPTER_KEY_PREFIX)
        logger.info("Cache cleared successfully")
        return cleared

    def warm_cache(self, chapter_numbers: Optional[Iterable[int]] = None) -> Dict[str, Any]:
        """Fetch chapters so later reads are cache hits. Failures are collected, not raised."""
        if chapter_numbers is None:
            chapter_numbers = [chapter.number for chapter in self.chapters]

        cached: List[int] = []
        failed: Dict[int, str] = {}
        for number in chapter_numbers:
            try:
                self.fetch_chapter_data(number)
                cached.append(number)
            except GitaError as e:
                failed[number] = str(e)

        logger.info(f"Warmed {len(cached)} chapters ({len(failed)} failed)")
        return {"cached": cached, "failed": failed}


def open_backend(db_path) -> KeyValueStore:
    """Open the SQLite substrate; an unusable path degrades to an in-memory cache."""
    try:
        return SQLiteKeyValueStore(str(db_path))
    except (OSError, sqlite3.Error) as e:
        logger.warning(f"Cache storage unavailable at {db_path} ({e}), using in-memory cache")
        return MemoryKeyValueStore()


def build_loader(config: GitaConfig) -> ChapterDataLoader:
    """Wire a loader over the persistent SQLite substrate and the HTTP fetcher."""
    backend = open_backend(config.cache_db_path)
    cache = CacheStore(
        backend,
        namespace=config.cache_namespace,
        ttl_seconds=config.cache_ttl_sec,
    )
    fetcher = RequestsFetcher(timeout=config.request_timeout_sec)
    return ChapterDataLoader(
        cache,
        fetcher,
        base_url=config.base_url,
        chapter_field=config.chapter_field,
    )
