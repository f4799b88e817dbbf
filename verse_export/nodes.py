"""
Document nodes produced by the layout and consumed by the PDF builder.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import List, Sequence, Union

TITLE_LEVEL = 0

BULLET_NUMBERING = "custom-bullets"
DECIMAL_NUMBERING = "custom-numbers"


@dataclass(frozen=True, slots=True)
class RunFormat:
    """Inline formatting flags shared by a run of text.

    Example:
        >>> RunFormat(bold=True).merged(italic=True)
        RunFormat(bold=True, italic=True, highlight=None, superscript=False)
    """

    bold: bool = False
    italic: bool = False
    highlight: str | None = None
    superscript: bool = False

    def merged(self, **overrides) -> "RunFormat":
        """Return a copy with ``overrides`` applied on top of these flags."""

        return replace(self, **overrides) if overrides else self


PLAIN = RunFormat()


@dataclass(frozen=True, slots=True)
class TextRun:
    """A span of text sharing one format."""

    text: str
    fmt: RunFormat = PLAIN
    style: str | None = None


@dataclass(frozen=True, slots=True)
class Hyperlink:
    """Runs that link to an external target."""

    runs: tuple[TextRun, ...]
    target: str

    @property
    def text(self) -> str:
        return "".join(run.text for run in self.runs)


Inline = Union[TextRun, Hyperlink]


@dataclass(frozen=True, slots=True)
class Numbering:
    """Reference to a numbering definition and its level.

    ``start`` is the number of the first item when a list does not count
    from one.
    """

    reference: str
    level: int = 0
    start: int = 1


@dataclass(slots=True)
class Paragraph:
    """A block of inline content.

    Attributes:
        runs: Inline content in reading order.
        style: Named paragraph style (``None`` for the default body style).
        heading: Heading level, ``TITLE_LEVEL`` for the document title.
        numbering: List numbering, if the paragraph is a list item.
        bottom_border: Draw a rule below the paragraph.
        space_before: Extra space above the paragraph in points.
    """

    runs: List[Inline] = field(default_factory=list)
    style: str | None = None
    heading: int | None = None
    numbering: Numbering | None = None
    bottom_border: bool = False
    space_before: float = 0.0

    @property
    def text(self) -> str:
        """Return the concatenated text of all runs.

        Example:
            >>> Paragraph([TextRun('a'), TextRun('b')]).text
            'ab'
        """

        return "".join(run.text for run in self.runs)


@dataclass(slots=True)
class TableCell:
    """A table cell holding its own node sequence."""

    children: List["DocumentNode"] = field(default_factory=list)


@dataclass(slots=True)
class TableRow:
    cells: List[TableCell]
    cant_split: bool = True


@dataclass(slots=True)
class Table:
    """Rows of cells laid out with fixed column widths (millimetres)."""

    rows: List[TableRow]
    column_widths: Sequence[float] = (95.0, 95.0)


DocumentNode = Union[Paragraph, Table]


def plain_text(nodes: Sequence[DocumentNode]) -> str:
    """Return the text of all paragraphs, tables flattened cell by cell.

    Example:
        >>> plain_text([Paragraph([TextRun('a')]), Paragraph([TextRun('b')])])
        'a\\nb'
    """

    lines: List[str] = []
    for node in nodes:
        if isinstance(node, Table):
            for row in node.rows:
                for cell in row.cells:
                    text = plain_text(cell.children)
                    if text:
                        lines.append(text)
        else:
            lines.append(node.text)
    return "\n".join(lines)
