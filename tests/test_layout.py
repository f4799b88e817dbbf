"""
Tests for verse block layouts.

Tests:
- Reference labels
- Verse paragraphs
- Tag view
- Notes view tables
"""

from verse_export.layout import (
    BLOCK_HEADING_LEVEL,
    BLOCK_HEADING_SPACE_BEFORE,
    NOTES_STYLE,
    layout_notes_view,
    layout_tag_view,
    reference_label,
    verse_paragraph,
)
from verse_export.models import Book, Note, Verse
from verse_export.nodes import Paragraph, RunFormat, Table


def make_verse(chapter, verse_nr, absolute, book_id="Gen", content=None):
    return Verse(
        book_id=book_id,
        chapter=chapter,
        verse_nr=verse_nr,
        absolute_verse_nr=absolute,
        content=content if content is not None else f"text {chapter}:{verse_nr}",
    )


class TestReferenceLabel:
    """Test reference headings of verse blocks."""

    def test_single_verse(self):
        """Should show only the first verse."""
        assert reference_label([make_verse(3, 5, 70)], "Gen") == "Gen 3:5"

    def test_range_within_chapter(self):
        """Should append the last verse number."""
        block = [make_verse(3, 5, 70), make_verse(3, 6, 71), make_verse(3, 7, 72)]

        assert reference_label(block, "") == " 3:5-7"

    def test_range_across_chapters(self):
        """Should spell out chapter and verse of the end point."""
        block = [make_verse(3, 10, 80), make_verse(4, 1, 81)]

        assert reference_label(block, "John") == "John 3:10 - 4:1"

    def test_custom_separator(self):
        """Should use the translation's separator."""
        block = [make_verse(3, 16, 10), make_verse(3, 17, 11)]

        assert reference_label(block, "Joh", ",") == "Joh 3,16-17"


class TestVerseParagraph:
    """Test verse paragraphs."""

    def test_runs(self):
        """Should put the verse number in superscript before the text."""
        para = verse_paragraph(make_verse(1, 3, 3, content="Let there be light"))

        assert [run.text for run in para.runs] == ["3", " Let there be light"]
        assert para.runs[0].fmt == RunFormat(superscript=True)
        assert para.runs[1].fmt == RunFormat()

    def test_wrapper_markup_is_dropped(self):
        """Should strip wrapper divs from the verse content."""
        para = verse_paragraph(
            make_verse(1, 1, 1, content='<div class="title">Creation</div>In the beginning')
        )

        assert para.text == "1 In the beginning"


class TestTagView:
    """Test the tagged verse layout."""

    def test_heading_and_verses(self):
        """Should emit a spaced reference heading followed by verse paragraphs."""
        block = [make_verse(1, 1, 1), make_verse(1, 2, 2)]

        nodes = layout_tag_view(block, Book("Gen", "Genesis"))

        heading = nodes[0]
        assert heading.text == "Genesis 1:1-2"
        assert heading.heading == BLOCK_HEADING_LEVEL
        assert heading.space_before == BLOCK_HEADING_SPACE_BEFORE
        assert [node.text for node in nodes[1:]] == ["1 text 1:1", "2 text 1:2"]

    def test_title_resolver(self):
        """Should display the resolved book title."""
        nodes = layout_tag_view(
            [make_verse(1, 1, 1)],
            Book("Gen", "Genesis"),
            title_resolver={"Genesis": "1. Mose"}.get,
        )

        assert nodes[0].text == "1. Mose 1:1"

    def test_empty_block(self):
        """Should emit nothing for an empty block."""
        assert layout_tag_view([], Book("Gen", "Genesis")) == []


class TestNotesView:
    """Test the verse/notes table layout."""

    def test_table_rows(self):
        """Should pair every verse with its rendered note."""
        block = [make_verse(1, 1, 1), make_verse(1, 2, 2)]
        notes = {"gen-1": Note("**first** note")}

        nodes = layout_notes_view(
            block, notes, is_first_chapter=False, has_multiple_chapters=False, chapter_label="Chapter"
        )

        assert len(nodes) == 1
        table = nodes[0]
        assert isinstance(table, Table)
        assert len(table.rows) == 2
        assert all(row.cant_split for row in table.rows)
        first_row = table.rows[0].cells
        assert first_row[0].children[0].text == "1 text 1:1"
        note = first_row[1].children[0]
        assert note.text == "first note"
        assert note.style == NOTES_STYLE
        assert table.rows[1].cells[1].children == []

    def test_book_note_on_first_chapter(self):
        """Should render the book note above the first chapter's table."""
        block = [make_verse(1, 1, 1)]
        notes = {"gen": Note("About Genesis")}

        nodes = layout_notes_view(
            block, notes, is_first_chapter=True, has_multiple_chapters=False, chapter_label="Chapter"
        )

        assert isinstance(nodes[0], Paragraph)
        assert nodes[0].text == "About Genesis"
        assert isinstance(nodes[1], Table)

    def test_missing_book_note_is_omitted(self):
        """Should start with the table when the book has no note."""
        nodes = layout_notes_view(
            [make_verse(1, 1, 1)], {}, is_first_chapter=True, has_multiple_chapters=False, chapter_label="Chapter"
        )

        assert len(nodes) == 1
        assert isinstance(nodes[0], Table)

    def test_chapter_heading(self):
        """Should add a chapter heading when several chapters are exported."""
        nodes = layout_notes_view(
            [make_verse(2, 1, 40)],
            {"gen": Note("not shown")},
            is_first_chapter=False,
            has_multiple_chapters=True,
            chapter_label="Kapitel",
        )

        assert nodes[0].text == "Kapitel 2"
        assert nodes[0].heading == BLOCK_HEADING_LEVEL
        assert isinstance(nodes[1], Table)

    def test_empty_block(self):
        """Should emit nothing for an empty block."""
        assert layout_notes_view([], {}, True, True, "Chapter") == []
