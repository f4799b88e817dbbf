"""ReportLab paragraph markup for document runs."""

from __future__ import annotations

import html
from functools import lru_cache
from typing import Iterable

from pyphen import Pyphen

from ..nodes import Hyperlink, Inline, Paragraph, TextRun
from ..text import hyphenate_markup
from .pdf_constants import HYPHENATE, HYPHENATION_LANG

UNDERLINED_HEADINGS = frozenset({2})


@lru_cache(maxsize=None)
def _hyphenator(lang: str) -> Pyphen:
    return Pyphen(lang=lang)


def run_markup(run: TextRun) -> str:
    """Return para-markup for one run.

    Example:
        >>> from verse_export.nodes import RunFormat
        >>> run_markup(TextRun('a < b', RunFormat(bold=True, italic=True)))
        '<b><i>a &lt; b</i></b>'
    """

    text = html.escape(run.text, quote=False).replace("\n", "<br/>")
    fmt = run.fmt
    if fmt.superscript:
        text = f"<super>{text}</super>"
    if fmt.highlight:
        text = f'<font backcolor="{fmt.highlight}">{text}</font>'
    if fmt.italic:
        text = f"<i>{text}</i>"
    if fmt.bold:
        text = f"<b>{text}</b>"
    return text


def hyperlink_markup(link: Hyperlink) -> str:
    """Return an underlined, blue ``<a>`` element for a hyperlink.

    Example:
        >>> hyperlink_markup(Hyperlink((TextRun('site'),), 'https://a.org/?x=1&y=2'))
        '<a href="https://a.org/?x=1&amp;y=2" color="blue"><u>site</u></a>'
    """

    inner = "".join(run_markup(run) for run in link.runs)
    target = html.escape(link.target, quote=True)
    return f'<a href="{target}" color="blue"><u>{inner}</u></a>'


def inline_markup(runs: Iterable[Inline]) -> str:
    parts = []
    for run in runs:
        if isinstance(run, Hyperlink):
            parts.append(hyperlink_markup(run))
        else:
            parts.append(run_markup(run))
    return "".join(parts)


def paragraph_markup(paragraph: Paragraph, *, hyphenate: bool = HYPHENATE) -> str:
    """Return the para-markup of a whole paragraph.

    Body text is soft-hyphenated; headings are not, and level-2 headings are
    underlined.

    Args:
        paragraph: Paragraph node.
        hyphenate: Whether to insert soft hyphens into long words.
    Returns:
        Markup string for ``reportlab.platypus.Paragraph``.
    """

    markup = inline_markup(paragraph.runs)
    if paragraph.heading is not None:
        if paragraph.heading in UNDERLINED_HEADINGS and markup:
            markup = f"<u>{markup}</u>"
        return markup
    if hyphenate and markup:
        markup = hyphenate_markup(markup, _hyphenator(HYPHENATION_LANG))
    return markup
