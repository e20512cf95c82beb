from gita.chapters import CHAPTERS
from gita.navigation import VersePosition
from gita.render import (
    extract_commentary,
    render_chapter_list,
    render_navigation,
    render_verse,
)

VERSE = {
    "verse": 47,
    "text": "कर्मण्येवाधिकारस्ते मा फलेषु कदाचन",
    "transliteration": "karmaṇy evādhikāras te",
    "translation": "You have a right to perform your prescribed duties",
    "commentaries": {"Swami Sivananda": "Thy concern is with action alone.", "Other": "ignored"},
}


def test_extract_commentary_variants():
    assert extract_commentary({"commentaries": "plain"}) == "plain"
    assert extract_commentary(VERSE) == "Thy concern is with action alone."
    assert extract_commentary({"commentaries": {}}) == ""
    assert extract_commentary({}) == ""


def test_render_chapter_list():
    text = render_chapter_list(CHAPTERS[:2])

    lines = text.splitlines()
    assert len(lines) == 2
    assert lines[0].startswith("01  Arjuna Vishada Yoga")
    assert lines[1].endswith("72 Verses")


def test_render_verse_full():
    text = render_verse(VERSE, CHAPTERS[1])

    assert text.startswith("Chapter 2 • Verse 47")
    assert "Sankhya Yoga" in text
    assert "Transliteration" in text
    assert "Translation" in text
    assert "Commentary" in text
    assert "ignored" not in text


def test_render_verse_skips_missing_sections():
    text = render_verse({"verse": 1, "text": "धृतराष्ट्र उवाच"}, CHAPTERS[0])

    assert "धृतराष्ट्र उवाच" in text
    assert "Transliteration" not in text
    assert "Translation" not in text
    assert "Commentary" not in text


def test_render_navigation_middle():
    assert render_navigation(VersePosition(2, 47)) == "← 2.46 | Chapter 2 of 18 | 2.48 →"


def test_render_navigation_ends():
    assert render_navigation(VersePosition(1, 1)) == "Chapter 1 of 18 | 1.2 →"
    assert render_navigation(VersePosition(18, 78)) == "← 18.77 | Chapter 18 of 18"
