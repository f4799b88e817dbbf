"""Markdown token tree to document node conversion."""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from typing import List, Sequence, Tuple

from .markup import (
    BLOCKQUOTE,
    CODESPAN,
    EM,
    HEADING,
    HR,
    LINK,
    LIST,
    LIST_ITEM,
    PARAGRAPH,
    SPACE,
    STRONG,
    MarkupToken,
    decode_entities,
    lex,
)
from .nodes import (
    BULLET_NUMBERING,
    DECIMAL_NUMBERING,
    PLAIN,
    DocumentNode,
    Hyperlink,
    Inline,
    Numbering,
    Paragraph,
    RunFormat,
    TextRun,
)

logger = logging.getLogger(__name__)

BLOCKQUOTE_STYLE = "blockquote"
HYPERLINK_STYLE = "Hyperlink"

_INLINE_FORMATS = {
    EM: {"italic": True},
    STRONG: {"bold": True},
    CODESPAN: {"highlight": "yellow"},
}

Runs = Tuple[Inline, ...]


@dataclass(frozen=True, slots=True)
class RenderContext:
    """Formatting and block context inherited by a token's descendants.

    Attributes:
        fmt: Inline format applied to text runs.
        ordered: Whether list items belong to an ordered list.
        start: First number of the enclosing ordered list.
        blockquote: Whether paragraphs sit inside a blockquote.
        top_level: True only for tokens directly at the document root.
        style_name: Paragraph style for plain paragraphs and list items.
    """

    fmt: RunFormat = PLAIN
    ordered: bool = False
    start: int = 1
    blockquote: bool = False
    top_level: bool = True
    style_name: str | None = None

    def enter(self, token: MarkupToken) -> "RenderContext":
        """Return the context seen by the children of ``token``."""

        is_list = token.kind == LIST
        return replace(
            self,
            fmt=self.fmt.merged(**_INLINE_FORMATS.get(token.kind, {})),
            ordered=token.ordered if is_list else self.ordered,
            start=token.start if is_list else self.start,
            blockquote=self.blockquote or token.kind == BLOCKQUOTE,
            top_level=False,
        )


def render_markdown(text: str, style_name: str | None = None) -> List[DocumentNode]:
    """Lex Markdown ``text`` and render it into document nodes.

    Args:
        text: Markdown source.
        style_name: Paragraph style for body paragraphs and list items.
    Returns:
        Paragraph nodes in document order.

    Example:
        >>> [p.text for p in render_markdown('hello world')]
        ['hello world']
    """

    return render_tokens(lex(text), style_name)


def render_tokens(
    tokens: Sequence[MarkupToken], style_name: str | None = None
) -> List[DocumentNode]:
    """Render an already lexed token list.

    Runs left open after the last block token are discarded.
    """

    nodes, leftover = _render_sequence(
        tokens=tokens, ctx=RenderContext(style_name=style_name), runs=()
    )
    if leftover:
        logger.debug("dropping %d unterminated run(s)", len(leftover))
    return nodes


def _render_sequence(
    *, tokens: Sequence[MarkupToken], ctx: RenderContext, runs: Runs
) -> Tuple[List[DocumentNode], Runs]:
    """Render sibling tokens, threading the open run buffer through them."""

    nodes: List[DocumentNode] = []
    for token in tokens:
        produced, runs = _render_token(token=token, ctx=ctx, runs=runs)
        nodes.extend(produced)
    return nodes, runs


def _render_token(
    *, token: MarkupToken, ctx: RenderContext, runs: Runs
) -> Tuple[List[DocumentNode], Runs]:
    """Render one token and return (completed nodes, open runs)."""

    if token.kind == LINK:
        return _render_link(token=token, ctx=ctx, runs=runs)
    if token.kind == LIST_ITEM:
        return _render_list_item(token=token, ctx=ctx, runs=runs)

    inner = ctx.enter(token)
    nodes: List[DocumentNode] = []
    if token.tokens is not None:
        nodes, runs = _render_sequence(tokens=token.tokens, ctx=inner, runs=runs)
    elif token.items is not None:
        nodes, runs = _render_sequence(tokens=token.items, ctx=inner, runs=runs)
    elif token.text:
        return nodes, runs + (TextRun(decode_entities(token.text), inner.fmt),)

    if token.kind == PARAGRAPH:
        style = BLOCKQUOTE_STYLE if ctx.blockquote else ctx.style_name
        nodes.append(Paragraph(list(runs), style=style))
        runs = ()
    elif token.kind == HEADING:
        nodes.append(Paragraph(list(runs), heading=token.depth))
        runs = ()
    elif token.kind == HR:
        nodes.append(Paragraph(bottom_border=True))
    elif token.kind == SPACE:
        nodes.append(Paragraph())
    return nodes, runs


def _render_link(
    *, token: MarkupToken, ctx: RenderContext, runs: Runs
) -> Tuple[List[DocumentNode], Runs]:
    """Render a link inline, or as its own paragraph at the document root."""

    label = TextRun(decode_entities(token.text or ""), ctx.fmt, style=HYPERLINK_STYLE)
    target = token.href or ""
    if not ctx.top_level:
        return [], runs + (Hyperlink((label,), target),)
    wrapped = Hyperlink(tuple(_text_runs(runs)) + (label,), target)
    return [Paragraph([wrapped])], ()


def _render_list_item(
    *, token: MarkupToken, ctx: RenderContext, runs: Runs
) -> Tuple[List[DocumentNode], Runs]:
    """Render a list item as one numbered paragraph.

    Text collected before a nested list is flushed as the item's paragraph
    so that the nested items follow their parent.
    """

    inner = ctx.enter(token)
    nodes: List[DocumentNode] = []
    flushed = False
    for child in token.tokens or ():
        if child.kind == LIST and runs:
            nodes.append(_item_paragraph(runs=runs, ctx=ctx))
            runs = ()
            flushed = True
        produced, runs = _render_token(token=child, ctx=inner, runs=runs)
        nodes.extend(produced)
    if runs or not flushed:
        nodes.append(_item_paragraph(runs=runs, ctx=ctx))
    return nodes, ()


def _item_paragraph(*, runs: Runs, ctx: RenderContext) -> Paragraph:
    if ctx.ordered:
        numbering = Numbering(DECIMAL_NUMBERING, 0, start=ctx.start)
    else:
        numbering = Numbering(BULLET_NUMBERING, 0)
    return Paragraph(list(runs), style=ctx.style_name, numbering=numbering)


def _text_runs(runs: Runs) -> List[TextRun]:
    """Flatten hyperlinks so that their runs can be re-wrapped."""

    flat: List[TextRun] = []
    for run in runs:
        if isinstance(run, Hyperlink):
            flat.extend(run.runs)
        else:
            flat.append(run)
    return flat
