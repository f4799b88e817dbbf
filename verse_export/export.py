"""Assemble verse exports into documents and write them to disk."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import date
from pathlib import Path
from typing import Callable, List, Mapping, Sequence

from tqdm import tqdm

from .blocks import block_by_chapter, block_by_contiguity
from .cleaning import normalize_whitespace
from .layout import layout_notes_view, layout_tag_view
from .localization import Localizer, StaticLocalizer
from .markup_render import render_markdown
from .models import Book, NotesMap, TranslationInfo, Verse, VerseBlock
from .nodes import (
    TITLE_LEVEL,
    DocumentNode,
    Paragraph,
    RunFormat,
    TextRun,
    plain_text,
)
from .pdf.builder import build_pdf

logger = logging.getLogger(__name__)

BOOK_HEADING_LEVEL = 2
EXPORT_CREATOR = "verse-export"
EXPORT_DESCRIPTION = "Automatically generated by verse-export"


@dataclass(slots=True)
class ExportDocument:
    """Everything the PDF builder needs for one export.

    Attributes:
        title: Plain-text document title (Markdown stripped).
        nodes: Body nodes in reading order.
        footer: Paragraphs repeated at the bottom of every page.
    """

    title: str
    nodes: List[DocumentNode]
    footer: List[Paragraph] = field(default_factory=list)
    creator: str = EXPORT_CREATOR
    description: str = EXPORT_DESCRIPTION


def render_verse_blocks(
    blocks: Sequence[VerseBlock],
    *,
    book: Book | None = None,
    notes: NotesMap | None = None,
    separator: str = ":",
    chapter_label: str = "Chapter",
    title_resolver: Callable[[str], str] | None = None,
) -> List[DocumentNode]:
    """Lay out verse blocks, as tag view when ``book`` is given, else as notes view.

    Args:
        blocks: Verse blocks in document order.
        book: Book of a tagged verse list.
        notes: Notes keyed by book or verse.
        separator: Chapter/verse separator.
        chapter_label: Label used for chapter headings in the notes view.
        title_resolver: Maps long book titles to display titles.
    Returns:
        Document nodes for all blocks.
    """

    nodes: List[DocumentNode] = []
    for index, block in enumerate(blocks):
        if book is not None:
            nodes.extend(
                layout_tag_view(block, book, separator, title_resolver=title_resolver)
            )
        else:
            nodes.extend(
                layout_notes_view(
                    block,
                    notes or {},
                    is_first_chapter=index == 0,
                    has_multiple_chapters=len(blocks) > 1,
                    chapter_label=chapter_label,
                )
            )
    return nodes


def translation_footer(
    translation: TranslationInfo, localizer: Localizer
) -> List[Paragraph]:
    """Return the footer paragraph naming the quoted translation.

    Example:
        >>> info = TranslationInfo('KJV', 'King James Version', 'Public Domain')
        >>> translation_footer(info, StaticLocalizer())[0].text
        'Scripture quotations from King James Version (Public Domain)'
    """

    runs: List[TextRun] = [
        TextRun(f"{localizer.scripture_quote_from()} "),
        TextRun(translation.description, RunFormat(bold=True)),
    ]
    if translation.distribution_license:
        runs.append(TextRun(f" ({translation.distribution_license})"))
    copyright_line = translation.copyright_line()
    if copyright_line:
        runs.append(TextRun("\n" + copyright_line))
    return [Paragraph(runs)]


def document_title(title: str) -> str:
    """Return the plain text of a Markdown title.

    Example:
        >>> document_title('Notes on *Genesis*')
        'Notes on Genesis'
    """

    return normalize_whitespace(plain_text(render_markdown(title)))


def build_export(
    title: str,
    verses: Sequence[Verse],
    *,
    translation: TranslationInfo | None = None,
    books: Sequence[Book] | None = None,
    notes: Mapping | None = None,
    localizer: Localizer | None = None,
    progress: bool = False,
) -> ExportDocument:
    """Build the document for a tagged verse list or a notes export.

    With ``books`` every book gets a heading and its contiguous verse blocks
    (tag view). Without, the verses are grouped by chapter and paired with
    their notes (notes view).

    Args:
        title: Markdown title of the export.
        verses: Verses sorted by absolute verse number.
        translation: Translation the verses were taken from; no footer when omitted.
        books: Books of a tagged verse list.
        notes: Notes keyed by book or verse.
        localizer: Label lookups; defaults to English labels.
        progress: Show a progress bar while rendering books.
    Returns:
        ExportDocument ready for ``build_pdf``.
    """

    localizer = localizer or StaticLocalizer()
    notes = notes or {}
    translation_id = translation.translation_id if translation else ""
    separator = localizer.reference_separator(translation_id)
    nodes: List[DocumentNode] = []

    if books:
        nodes.extend(render_markdown(f"# {title}"))
        for book in tqdm(books, desc="Rendering books", unit="book", disable=not progress):
            blocks = block_by_contiguity(verses, book.short_title)
            nodes.append(
                Paragraph(
                    [TextRun(localizer.book_title(book.long_title))],
                    heading=BOOK_HEADING_LEVEL,
                )
            )
            nodes.extend(
                render_verse_blocks(
                    blocks,
                    book=book,
                    separator=separator,
                    title_resolver=localizer.book_title,
                )
            )
    else:
        nodes.append(Paragraph([TextRun(title)], heading=TITLE_LEVEL))
        blocks = block_by_chapter(verses)
        chapter_label = localizer.chapter_label(blocks[0][0].book_id) if blocks else ""
        nodes.extend(
            render_verse_blocks(
                blocks,
                notes=notes,
                separator=separator,
                chapter_label=chapter_label,
            )
        )

    logger.debug("export %r: %d node(s)", title, len(nodes))
    return ExportDocument(
        title=document_title(title),
        nodes=nodes,
        footer=translation_footer(translation, localizer) if translation else [],
    )


def default_export_filename(title: str, today: date | None = None) -> str:
    """Return the suggested file name for an export.

    Example:
        >>> default_export_filename('Faith', date(2021, 3, 7))
        '2021_03_07__Faith.pdf'
    """

    today = today or date.today()
    return f"{today:%Y_%m_%d}__{title}.pdf"


def export_verses(
    output_path: Path,
    title: str,
    verses: Sequence[Verse],
    *,
    translation: TranslationInfo | None = None,
    books: Sequence[Book] | None = None,
    notes: Mapping | None = None,
    localizer: Localizer | None = None,
    progress: bool = False,
) -> Path:
    """Build an export and write it as PDF to ``output_path``."""

    document = build_export(
        title,
        verses,
        translation=translation,
        books=books,
        notes=notes,
        localizer=localizer,
        progress=progress,
    )
    output_path.parent.mkdir(parents=True, exist_ok=True)
    logger.info("Generating document %s", output_path)
    build_pdf(document=document, output_path=output_path)
    return output_path
