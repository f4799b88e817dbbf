"""PDF generation for verse exports."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING

from reportlab.platypus import BaseDocTemplate

from .pdf_flowables import flowables_for_nodes
from .pdf_settings import PageSettings, build_styles
from .pdf_story import _content_template

if TYPE_CHECKING:
    from ..export import ExportDocument

logger = logging.getLogger(__name__)

__all__ = ["PageSettings", "build_pdf", "build_styles"]


def build_pdf(
    *,
    document: "ExportDocument",
    output_path: Path,
    settings: PageSettings | None = None,
) -> None:
    """Render an export document into a PDF.

    Args:
        document: Title, body nodes and footer of the export.
        output_path: Destination file for the generated PDF.
        settings: Optional ``PageSettings`` override.
    Returns:
        None. Writes the generated PDF to ``output_path``.

    Example:
        >>> build_pdf(document=doc, output_path=Path("out/verses.pdf"))  # doctest: +SKIP
    """

    settings = settings or PageSettings()
    styles = build_styles(settings)
    doc = _build_doc(output_path=output_path, settings=settings, document=document)
    doc.addPageTemplates(
        [_content_template(footer=document.footer, styles=styles, settings=settings)]
    )
    story = flowables_for_nodes(document.nodes, styles=styles, settings=settings)
    logger.debug("rendering %d flowable(s) into %s", len(story), output_path)
    doc.build(story)


def _build_doc(
    *, output_path: Path, settings: PageSettings, document: "ExportDocument"
) -> BaseDocTemplate:
    """Return a BaseDocTemplate configured with page geometry and metadata.

    Args:
        output_path: Destination for the PDF.
        settings: Page settings.
        document: Export document providing the metadata.
    Returns:
        BaseDocTemplate instance.
    """

    return BaseDocTemplate(
        str(output_path),
        pagesize=(settings.page_width, settings.page_height),
        leftMargin=settings.margin_left,
        rightMargin=settings.margin_right,
        topMargin=settings.margin_top,
        bottomMargin=settings.margin_bottom,
        title=document.title,
        author=document.creator,
        creator=document.creator,
        subject=document.description,
    )
