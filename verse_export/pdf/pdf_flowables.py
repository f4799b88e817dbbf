"""Conversion of document nodes into ReportLab flowables."""

from __future__ import annotations

from typing import Dict, List, Sequence

from reportlab.lib import colors
from reportlab.lib.styles import ParagraphStyle
from reportlab.lib.units import mm
from reportlab.platypus import Paragraph as PdfParagraph
from reportlab.platypus import Spacer, Table
from reportlab.platypus.flowables import Flowable, HRFlowable
from reportlab.platypus.tables import TableStyle

from ..nodes import TITLE_LEVEL, DocumentNode, Paragraph
from ..nodes import Table as TableNode
from .pdf_markup import paragraph_markup
from .pdf_settings import NUMBERING, PageSettings

BLOCKQUOTE_RULE_WIDTH = 1.5
BLOCKQUOTE_RULE_GAP = 4.0


class LeftRule(Flowable):
    """Wrap a flowable and draw a vertical rule along its left edge."""

    def __init__(
        self,
        *,
        content: Flowable,
        indent: float,
        line_width: float,
        line_color: colors.Color,
    ) -> None:
        super().__init__()
        self.content = content
        self.indent = indent
        self.line_width = line_width
        self.line_color = line_color
        self.width = 0.0
        self.height = 0.0

    def wrap(self, aW: float, aH: float) -> tuple[float, float]:
        self.width, self.height = self.content.wrap(aW, aH)
        return self.width, self.height

    def getSpaceBefore(self) -> float:
        return self.content.getSpaceBefore()

    def getSpaceAfter(self) -> float:
        return self.content.getSpaceAfter()

    def split(self, aW: float, aH: float) -> list[Flowable]:
        parts = self.content.split(aW, aH)
        return [
            LeftRule(
                content=part,
                indent=self.indent,
                line_width=self.line_width,
                line_color=self.line_color,
            )
            for part in parts
        ]

    def draw(self) -> None:
        """Draw the content then the rule left of the indented text."""

        self.content.drawOn(self.canv, 0, 0)
        x = max(self.indent - BLOCKQUOTE_RULE_GAP - self.line_width, 0)
        self.canv.saveState()
        self.canv.setStrokeColor(self.line_color)
        self.canv.setLineWidth(self.line_width)
        self.canv.line(x, 0, x, self.height)
        self.canv.restoreState()


def style_for(paragraph: Paragraph, styles: Dict[str, ParagraphStyle]) -> ParagraphStyle:
    """Return the style for a paragraph node.

    Headings map to ``Title``/``HeadingN``; unknown style names fall back to
    ``Normal``.
    """

    if paragraph.heading is not None:
        if paragraph.heading == TITLE_LEVEL:
            return styles["Title"]
        level = min(max(paragraph.heading, 1), 6)
        return styles[f"Heading{level}"]
    return styles.get(paragraph.style or "Normal", styles["Normal"])


def flowables_for_nodes(
    nodes: Sequence[DocumentNode],
    *,
    styles: Dict[str, ParagraphStyle],
    settings: PageSettings,
    width: float | None = None,
) -> List[Flowable]:
    """Convert document nodes into flowables.

    Each numbering reference keeps its own counter while list items follow
    each other, so a nested list does not reset its parent list. Any node
    that is not a list item restarts all counters.

    Args:
        nodes: Document nodes in reading order.
        styles: Paragraph styles from ``build_styles``.
        settings: Page settings.
        width: Available width, defaults to the page body width.
    Returns:
        Flowables in reading order.
    """

    width = settings.body_width if width is None else width
    flowables: List[Flowable] = []
    counters: Dict[str, int] = {}
    for node in nodes:
        if isinstance(node, TableNode):
            flowables.append(_table(node=node, styles=styles, settings=settings, width=width))
            counters.clear()
            continue
        counter = 1
        if node.numbering is None:
            counters.clear()
        else:
            reference = node.numbering.reference
            counter = counters[reference] + 1 if reference in counters else node.numbering.start
            counters[reference] = counter
        flowables.append(_paragraph(node=node, styles=styles, counter=counter))
    return flowables


def _paragraph(
    *, node: Paragraph, styles: Dict[str, ParagraphStyle], counter: int
) -> Flowable:
    """Return the flowable for one paragraph node."""

    style = style_for(node, styles)
    if node.bottom_border:
        return HRFlowable(
            width="100%",
            thickness=0.5,
            color=colors.black,
            spaceBefore=1,
            spaceAfter=7.5,
        )
    if not node.runs and node.numbering is None:
        return Spacer(1, style.leading)
    if node.space_before:
        style = ParagraphStyle(
            f"{style.name}-spaced", parent=style, spaceBefore=node.space_before
        )
    markup = paragraph_markup(node)
    if node.numbering is not None:
        return _numbered_paragraph(node=node, markup=markup, style=style, counter=counter)
    para = PdfParagraph(markup, style)
    if style.name == "blockquote":
        return LeftRule(
            content=para,
            indent=style.leftIndent,
            line_width=BLOCKQUOTE_RULE_WIDTH,
            line_color=style.borderColor or colors.lightgrey,
        )
    return para


def _numbered_paragraph(
    *, node: Paragraph, markup: str, style: ParagraphStyle, counter: int
) -> Flowable:
    levels = NUMBERING.get(node.numbering.reference, {})
    level = levels.get(node.numbering.level) or levels.get(0)
    if level is None:
        return PdfParagraph(markup, style)
    list_style = ParagraphStyle(
        f"{style.name}-{node.numbering.reference}",
        parent=style,
        leftIndent=level.indent,
        bulletIndent=level.indent - level.hanging,
    )
    return PdfParagraph(markup, list_style, bulletText=level.marker(counter))


def _table(
    *,
    node: TableNode,
    styles: Dict[str, ParagraphStyle],
    settings: PageSettings,
    width: float,
) -> Table:
    """Return a fixed-width table whose rows never break across pages."""

    col_widths = _column_widths(node=node, width=width)
    data = []
    for row in node.rows:
        cells = []
        for cell, cell_width in zip(row.cells, col_widths):
            content = flowables_for_nodes(
                cell.children,
                styles=styles,
                settings=settings,
                width=cell_width - 2 * settings.cell_padding,
            )
            cells.append(content or "")
        data.append(cells)
    table = Table(
        data,
        colWidths=col_widths,
        splitByRow=1,
        splitInRow=0 if all(row.cant_split for row in node.rows) else 1,
    )
    table.setStyle(
        TableStyle(
            [
                ("VALIGN", (0, 0), (-1, -1), "TOP"),
                ("LEFTPADDING", (0, 0), (-1, -1), settings.cell_padding),
                ("RIGHTPADDING", (0, 0), (-1, -1), settings.cell_padding),
                ("TOPPADDING", (0, 0), (-1, -1), settings.cell_padding),
                ("BOTTOMPADDING", (0, 0), (-1, -1), settings.cell_padding),
                ("GRID", (0, 0), (-1, -1), settings.grid_width, settings.grid_color),
            ]
        )
    )
    return table


def _column_widths(*, node: TableNode, width: float) -> List[float]:
    """Return column widths in points, scaled down to fit ``width``.

    Example:
        >>> from verse_export.nodes import Table as T
        >>> [round(w / mm) for w in _column_widths(node=T(rows=[]), width=100 * mm)]
        [50, 50]
    """

    requested = [value * mm for value in node.column_widths]
    total = sum(requested)
    if total <= width or not total:
        return requested
    scale = width / total
    return [value * scale for value in requested]
