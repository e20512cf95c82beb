"""Static chapter table for the Bhagavad Gita."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List, Tuple


@dataclass(frozen=True)
class ChapterInfo:
    number: int
    name: str
    sanskrit_name: str
    verse_count: int


CHAPTERS: Tuple[ChapterInfo, ...] = (
    ChapterInfo(1, "Arjuna Vishada Yoga", "अर्जुन विषाद योग", 47),
    ChapterInfo(2, "Sankhya Yoga", "सांख्य योग", 72),
    ChapterInfo(3, "Karma Yoga", "कर्म योग", 43),
    ChapterInfo(4, "Jnana Karma Sanyasa Yoga", "ज्ञान कर्म संन्यास योग", 42),
    ChapterInfo(5, "Karma Sanyasa Yoga", "कर्म संन्यास योग", 29),
    ChapterInfo(6, "Dhyana Yoga", "ध्यान योग", 47),
    ChapterInfo(7, "Jnana Vijnana Yoga", "ज्ञान विज्ञान योग", 30),
    ChapterInfo(8, "Aksara Brahma Yoga", "अक्षर ब्रह्म योग", 28),
    ChapterInfo(9, "Raja Vidya Raja Guhya Yoga", "राज विद्या राज गुह्य योग", 34),
    ChapterInfo(10, "Vibhuti Yoga", "विभूति योग", 42),
    ChapterInfo(11, "Vishvarupa Darshana Yoga", "विश्वरूप दर्शन योग", 55),
    ChapterInfo(12, "Bhakti Yoga", "भक्ति योग", 20),
    ChapterInfo(13, "Ksetra Ksetrajna Vibhaga Yoga", "क्षेत्र क्षेत्रज्ञ विभाग योग", 35),
    ChapterInfo(14, "Gunatraya Vibhaga Yoga", "गुणत्रय विभाग योग", 27),
    ChapterInfo(15, "Purushottama Yoga", "पुरुषोत्तम योग", 20),
    ChapterInfo(16, "Daivasura Sampad Vibhaga Yoga", "दैवासुर सम्पद् विभाग योग", 24),
    ChapterInfo(17, "Sraddhatraya Vibhaga Yoga", "श्रद्धात्रय विभाग योग", 28),
    ChapterInfo(18, "Moksha Sanyasa Yoga", "मोक्ष संन्यास योग", 78),
)


def filter_chapters(chapters: Iterable[ChapterInfo], query: str) -> List[ChapterInfo]:
    """Match on English name (case-insensitive), Sanskrit name, or chapter number."""
    chapters = list(chapters)
    if not query:
        return chapters

    lowered = query.lower()
    return [
        chapter
        for chapter in chapters
        if lowered in chapter.name.lower()
        or query in chapter.sanskrit_name
        or query in str(chapter.number)
    ]
