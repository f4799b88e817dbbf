"""
Verse block layouts: tagged verse lists and verse/notes tables.
"""

from __future__ import annotations

from typing import Callable, List, Sequence

from .cleaning import verse_plain_text
from .markup_render import render_markdown
from .models import Book, NotesMap, Verse, book_note_key, verse_note_key
from .nodes import (
    DocumentNode,
    Paragraph,
    RunFormat,
    Table,
    TableCell,
    TableRow,
    TextRun,
)

NOTES_STYLE = "notes"
BLOCK_HEADING_LEVEL = 3
BLOCK_HEADING_SPACE_BEFORE = 10.0
NOTES_COLUMN_WIDTHS = (95.0, 95.0)

_SUPERSCRIPT = RunFormat(superscript=True)


def verse_paragraph(verse: Verse) -> Paragraph:
    """Return a paragraph with the superscript verse number and verse text.

    Example:
        >>> verse_paragraph(Verse('Gen', 1, 3, 3, 'Let there be light')).text
        '3 Let there be light'
    """

    return Paragraph(
        [
            TextRun(str(verse.verse_nr), _SUPERSCRIPT),
            TextRun(" " + verse_plain_text(verse.content)),
        ]
    )


def reference_label(block: Sequence[Verse], book_title: str, separator: str = ":") -> str:
    """Return the reference of a verse block, e.g. ``'John 3:16-18'``.

    Args:
        block: Non-empty verse block.
        book_title: Display title of the book.
        separator: Chapter/verse separator of the translation.
    Returns:
        The reference text.

    Example:
        >>> vs = [Verse('John', 3, 10, 1, ''), Verse('John', 4, 1, 2, '')]
        >>> reference_label(vs, 'John')
        'John 3:10 - 4:1'
    """

    first, last = block[0], block[-1]
    label = f"{book_title} {first.chapter}{separator}{first.verse_nr}"
    if len(block) >= 2:
        if last.chapter == first.chapter:
            label += f"-{last.verse_nr}"
        else:
            label += f" - {last.chapter}{separator}{last.verse_nr}"
    return label


def layout_tag_view(
    block: Sequence[Verse],
    book: Book,
    separator: str = ":",
    title_resolver: Callable[[str], str] | None = None,
) -> List[DocumentNode]:
    """Return a reference heading followed by one paragraph per verse.

    Args:
        block: Verse block of ``book``.
        book: Book the verses belong to.
        separator: Chapter/verse separator of the translation.
        title_resolver: Maps the book's long title to its display title.
    Returns:
        Document nodes for the block; empty for an empty block.
    """

    if not block:
        return []
    title = title_resolver(book.long_title) if title_resolver else book.long_title
    heading = Paragraph(
        [TextRun(reference_label(block, title, separator))],
        heading=BLOCK_HEADING_LEVEL,
        space_before=BLOCK_HEADING_SPACE_BEFORE,
    )
    return [heading, *(verse_paragraph(verse) for verse in block)]


def layout_notes_view(
    block: Sequence[Verse],
    notes: NotesMap,
    is_first_chapter: bool,
    has_multiple_chapters: bool,
    chapter_label: str,
) -> List[DocumentNode]:
    """Return the verse/notes table of one chapter block.

    The book note is prepended for the first chapter, and a chapter heading
    is added when the export spans several chapters.
    """

    if not block:
        return []
    first = block[0]
    nodes: List[DocumentNode] = []
    if is_first_chapter:
        book_note = notes.get(book_note_key(first.book_id))
        if book_note:
            nodes.extend(render_markdown(book_note.text, NOTES_STYLE))
    if has_multiple_chapters:
        nodes.append(
            Paragraph(
                [TextRun(f"{chapter_label} {first.chapter}")],
                heading=BLOCK_HEADING_LEVEL,
            )
        )
    nodes.append(
        Table(
            rows=[_notes_row(verse=verse, notes=notes) for verse in block],
            column_widths=NOTES_COLUMN_WIDTHS,
        )
    )
    return nodes


def _notes_row(*, verse: Verse, notes: NotesMap) -> TableRow:
    note = notes.get(verse_note_key(verse))
    note_nodes = render_markdown(note.text, NOTES_STYLE) if note else []
    return TableRow(
        cells=[TableCell([verse_paragraph(verse)]), TableCell(note_nodes)],
        cant_split=True,
    )
