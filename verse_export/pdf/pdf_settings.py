"""Fonts, styles, numbering and page settings for PDF generation."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict

from reportlab.lib import colors
from reportlab.lib.enums import TA_LEFT
from reportlab.lib.pagesizes import A4
from reportlab.lib.styles import ParagraphStyle, getSampleStyleSheet
from reportlab.lib.units import mm

from ..nodes import BULLET_NUMBERING, DECIMAL_NUMBERING

NOTES_COLOR = colors.HexColor("#2779AA")
HEADING_COLOR = colors.HexColor("#FF0000")
BLOCKQUOTE_RULE_COLOR = colors.HexColor("#BBBBBB")
HYPERLINK_COLOR = colors.blue


@dataclass(slots=True)
class PageSettings:
    """Geometry constants used during layout.

    Example:
        >>> settings = PageSettings()
        >>> round(settings.body_width / mm)
        190
    """

    page_width: float = A4[0]
    page_height: float = A4[1]
    margin_left: float = 10 * mm
    margin_right: float = 10 * mm
    margin_top: float = 10 * mm
    margin_bottom: float = 10 * mm
    footer_height: float = 12 * mm
    cell_padding: float = 2 * mm
    grid_color: colors.Color = colors.lightgrey
    grid_width: float = 0.5
    font_name: str = "Helvetica"
    font_bold_name: str = "Helvetica-Bold"
    font_bold_italic_name: str = "Helvetica-BoldOblique"

    @property
    def body_width(self) -> float:
        """Return the width available for content inside margins.

        Returns:
            Width in points.
        """

        return self.page_width - self.margin_left - self.margin_right

    @property
    def body_height(self) -> float:
        """Return the content height left above the footer.

        Returns:
            Height in points.
        """

        return (
            self.page_height - self.margin_top - self.margin_bottom - self.footer_height
        )


@dataclass(frozen=True, slots=True)
class NumberingLevel:
    """Marker and indentation (points) of one numbering level.

    ``%1`` in ``text`` stands for the running counter.
    """

    text: str
    indent: float
    hanging: float

    def marker(self, counter: int) -> str:
        """Return the marker for the ``counter``-th item.

        Example:
            >>> NumberingLevel('%1.', 15, 12.5).marker(3)
            '3.'
        """

        return self.text.replace("%1", str(counter))


NUMBERING: Dict[str, Dict[int, NumberingLevel]] = {
    BULLET_NUMBERING: {0: NumberingLevel("\u2022", 15.0, 7.5)},
    DECIMAL_NUMBERING: {0: NumberingLevel("%1.", 15.0, 12.5)},
}


def build_styles(settings: PageSettings | None = None) -> Dict[str, ParagraphStyle]:
    """Create paragraph styles used in the document.

    Args:
        settings: Page settings carrying the font names.
    Returns:
        Mapping of style keys to ParagraphStyle objects.

    Example:
        >>> styles = build_styles()
        >>> {"Normal", "Title", "Heading3", "notes", "blockquote"} <= set(styles)
        True
    """

    settings = settings or PageSettings()
    base = getSampleStyleSheet()
    normal = ParagraphStyle(
        "Normal",
        parent=base["Normal"],
        fontName=settings.font_name,
        fontSize=11,
        leading=14,
        alignment=TA_LEFT,
        spaceAfter=4,
    )
    notes = ParagraphStyle("notes", parent=normal, textColor=NOTES_COLOR)
    styles = {
        "Normal": normal,
        "Title": _title_style(base=base, settings=settings),
        **_heading_styles(base=base, settings=settings),
        "notes": notes,
        "blockquote": _blockquote_style(notes=notes),
        "Hyperlink": ParagraphStyle("Hyperlink", parent=normal, textColor=HYPERLINK_COLOR),
        "footer": ParagraphStyle("footer", parent=normal, fontSize=8, leading=10),
    }
    return styles


def _title_style(*, base, settings: PageSettings) -> ParagraphStyle:
    return ParagraphStyle(
        "Title",
        parent=base["Title"],
        fontName=settings.font_bold_name,
        fontSize=16,
        leading=20,
        textColor=HEADING_COLOR,
        alignment=TA_LEFT,
        spaceAfter=5 * mm,
    )


def _heading_styles(*, base, settings: PageSettings) -> Dict[str, ParagraphStyle]:
    """Return Heading1..Heading6; the first two follow the export's look.

    Args:
        base: ReportLab sample styles.
        settings: Page settings.
    Returns:
        Mapping of heading style names to ParagraphStyle objects.
    """

    headings = {
        "Heading1": ParagraphStyle(
            "Heading1",
            parent=base["Heading1"],
            fontName=settings.font_bold_italic_name,
            fontSize=14,
            leading=18,
            textColor=HEADING_COLOR,
            spaceAfter=6,
        ),
        "Heading2": ParagraphStyle(
            "Heading2",
            parent=base["Heading2"],
            fontName=settings.font_bold_name,
            fontSize=13,
            leading=16,
            spaceBefore=12,
            spaceAfter=6,
        ),
    }
    for level in range(3, 7):
        name = f"Heading{level}"
        headings[name] = ParagraphStyle(
            name, parent=base[name], fontName=settings.font_bold_name
        )
    return headings


def _blockquote_style(*, notes: ParagraphStyle) -> ParagraphStyle:
    return ParagraphStyle(
        "blockquote",
        parent=notes,
        fontSize=11,
        leftIndent=10 * mm,
        spaceBefore=3 * mm,
        spaceAfter=3 * mm,
        borderColor=BLOCKQUOTE_RULE_COLOR,
    )
