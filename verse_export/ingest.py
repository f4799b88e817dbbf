"""
Helpers that load export input files into typed objects.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Dict, List, Mapping

from .localization import StaticLocalizer
from .models import Book, Note, TranslationInfo, Verse


_VERSE_FIELDS = {
    "book_id": "bibleBookShortTitle",
    "chapter": "chapter",
    "verse_nr": "verseNr",
    "absolute_verse_nr": "absoluteVerseNr",
}


def _read_json(path: Path):
    return json.loads(path.read_text(encoding="utf-8"))


def _positive_int(record: Mapping, key: str, where: str) -> int:
    """Return ``record[key]`` as a positive integer or raise ``ValueError``."""

    value = record.get(key)
    try:
        number = int(value)
    except (TypeError, ValueError):
        raise ValueError(f"{where}: {key!r} must be an integer, got {value!r}") from None
    if number < 1:
        raise ValueError(f"{where}: {key!r} must be positive, got {number}")
    return number


def verse_from_record(record: Mapping, index: int = 0) -> Verse:
    """Build a Verse from a JSON record.

    Example:
        >>> verse_from_record({'bibleBookShortTitle': 'Gen', 'chapter': 1,
        ...     'verseNr': 1, 'absoluteVerseNr': 1, 'content': 'In'}).book_id
        'Gen'
    """

    where = f"verse #{index}"
    book_id = record.get(_VERSE_FIELDS["book_id"])
    if not isinstance(book_id, str) or not book_id:
        raise ValueError(f"{where}: missing 'bibleBookShortTitle'")
    return Verse(
        book_id=book_id,
        chapter=_positive_int(record, _VERSE_FIELDS["chapter"], where),
        verse_nr=_positive_int(record, _VERSE_FIELDS["verse_nr"], where),
        absolute_verse_nr=_positive_int(record, _VERSE_FIELDS["absolute_verse_nr"], where),
        content=str(record.get("content") or ""),
    )


def load_verses(path: Path) -> List[Verse]:
    """Load verses and sort them by absolute verse number."""

    records = _read_json(path)
    if not isinstance(records, list):
        raise ValueError(f"{path}: expected a list of verses")
    verses = [verse_from_record(record, index) for index, record in enumerate(records)]
    return sorted(verses, key=lambda verse: verse.absolute_verse_nr)


def load_books(path: Path) -> List[Book]:
    """Load the books of a tagged verse list, keeping file order."""

    records = _read_json(path)
    if not isinstance(records, list):
        raise ValueError(f"{path}: expected a list of books")
    books: List[Book] = []
    for index, record in enumerate(records):
        short_title = record.get("shortTitle")
        if not short_title:
            raise ValueError(f"book #{index}: missing 'shortTitle'")
        books.append(
            Book(short_title=short_title, long_title=record.get("longTitle") or short_title)
        )
    return books


def load_notes(path: Path) -> Dict[str, Note]:
    """Load notes keyed by book (``gen``) or verse (``gen-12``).

    Values may be ``{"text": ...}`` objects or bare strings.
    """

    raw = _read_json(path)
    if not isinstance(raw, dict):
        raise ValueError(f"{path}: expected an object of notes")
    notes: Dict[str, Note] = {}
    for key, value in raw.items():
        text = value.get("text") if isinstance(value, dict) else value
        if not isinstance(text, str):
            raise ValueError(f"note {key!r}: missing text")
        notes[key.lower()] = Note(text=text)
    return notes


def load_translation(path: Path) -> TranslationInfo:
    """Load the translation metadata shown in the footer."""

    raw = _read_json(path)
    if not isinstance(raw, dict) or not raw.get("id"):
        raise ValueError(f"{path}: expected an object with an 'id'")
    return TranslationInfo(
        translation_id=raw["id"],
        description=raw.get("description") or raw["id"],
        distribution_license=raw.get("distributionLicense"),
        short_copyright=raw.get("shortCopyright"),
        copyright=raw.get("copyright"),
    )


def load_localizer(path: Path) -> StaticLocalizer:
    """Load labels and book title translations for the export.

    Example file::

        {"separator": ",", "chapter": "Kapitel",
         "quoteFrom": "Bibeltext aus", "bookTitles": {"Genesis": "1. Mose"}}
    """

    raw = _read_json(path)
    if not isinstance(raw, dict):
        raise ValueError(f"{path}: expected an object of labels")
    defaults = StaticLocalizer()
    return StaticLocalizer(
        book_titles=dict(raw.get("bookTitles") or {}),
        separator=raw.get("separator") or defaults.separator,
        chapter=raw.get("chapter") or defaults.chapter,
        quote_from=raw.get("quoteFrom") or defaults.quote_from,
        separators=dict(raw.get("separators") or {}),
    )
