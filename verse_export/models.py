"""
Typed containers for exported verses, books, notes and translations.
"""

from dataclasses import dataclass
from typing import List, Mapping


@dataclass(frozen=True, slots=True)
class Verse:
    """A single verse as handed over by the Bible module.

    Attributes:
        book_id: Short title of the owning book (e.g. ``"Gen"``).
        chapter: Chapter number.
        verse_nr: Verse number within the chapter.
        absolute_verse_nr: Position of the verse within the whole translation.
        content: Raw verse HTML, possibly with wrapper ``div`` markup.
    """

    book_id: str
    chapter: int
    verse_nr: int
    absolute_verse_nr: int
    content: str


@dataclass(frozen=True, slots=True)
class Book:
    """A Bible book selected for export."""

    short_title: str
    long_title: str


@dataclass(frozen=True, slots=True)
class Note:
    """Markdown note attached to a book or a verse."""

    text: str


@dataclass(frozen=True, slots=True)
class TranslationInfo:
    """Module metadata printed in the document footer."""

    translation_id: str
    description: str
    distribution_license: str | None = None
    short_copyright: str | None = None
    copyright: str | None = None

    def copyright_line(self) -> str | None:
        """Return the short copyright when present, else the full one.

        Example:
            >>> TranslationInfo('KJV', 'King James', copyright='Public').copyright_line()
            'Public'
        """

        return self.short_copyright or self.copyright


VerseBlock = List[Verse]
NotesMap = Mapping[str, Note]


def book_note_key(book_id: str) -> str:
    """Return the notes key for a book-level note.

    Example:
        >>> book_note_key('Gen')
        'gen'
    """

    return book_id.lower()


def verse_note_key(verse: Verse) -> str:
    """Return the notes key for a verse-level note.

    Example:
        >>> verse_note_key(Verse('Gen', 1, 1, 1, ''))
        'gen-1'
    """

    return f"{verse.book_id.lower()}-{verse.absolute_verse_nr}"
