"""Page template and footer assembly for PDF output."""

from __future__ import annotations

from typing import Dict, List, Sequence

from reportlab.lib.styles import ParagraphStyle
from reportlab.platypus import Frame, PageTemplate
from reportlab.platypus import Paragraph as PdfParagraph

from ..nodes import Paragraph
from .pdf_markup import paragraph_markup
from .pdf_settings import PageSettings


def _footer_flowables(
    *, footer: Sequence[Paragraph], styles: Dict[str, ParagraphStyle]
) -> List[PdfParagraph]:
    """Return footer paragraphs styled with the small footer style.

    Args:
        footer: Footer paragraph nodes.
        styles: Paragraph styles.
    Returns:
        List of ReportLab paragraphs.
    """

    return [
        PdfParagraph(paragraph_markup(node, hyphenate=False), styles["footer"])
        for node in footer
    ]


def _on_page_factory(
    *,
    footer: Sequence[Paragraph],
    styles: Dict[str, ParagraphStyle],
    settings: PageSettings,
):
    """Create an onPage callback that draws the footer at the page bottom.

    Args:
        footer: Footer paragraph nodes.
        styles: Paragraph styles.
        settings: Page settings.
    Returns:
        onPage callback function.
    """

    def draw(canvas, doc):
        canvas.saveState()
        y = settings.margin_bottom
        for para in reversed(_footer_flowables(footer=footer, styles=styles)):
            _, height = para.wrap(settings.body_width, settings.footer_height)
            para.drawOn(canvas, settings.margin_left, y)
            y += height
        canvas.restoreState()

    return draw


def _content_template(
    *,
    footer: Sequence[Paragraph],
    styles: Dict[str, ParagraphStyle],
    settings: PageSettings,
) -> PageTemplate:
    """Return the single-column page template with a footer area.

    Args:
        footer: Footer paragraph nodes.
        styles: Paragraph styles.
        settings: Page settings.
    Returns:
        PageTemplate for every page of the export.
    """

    frame = Frame(
        settings.margin_left,
        settings.margin_bottom + settings.footer_height,
        settings.body_width,
        settings.body_height,
        leftPadding=0,
        rightPadding=0,
        topPadding=0,
        bottomPadding=0,
        id="content-frame",
    )
    return PageTemplate(
        id="content",
        frames=[frame],
        onPage=_on_page_factory(footer=footer, styles=styles, settings=settings),
        pagesize=(settings.page_width, settings.page_height),
    )
