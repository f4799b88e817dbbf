"""
Markdown lexing into a small token tree.

Python-Markdown renders the note text to HTML and BeautifulSoup walks the
result, so every note is tokenized with the same Markdown dialect that the
rest of the tooling uses.
"""

from __future__ import annotations

import html
import re
from dataclasses import dataclass
from typing import List, Sequence

import markdown
from bs4 import BeautifulSoup, Comment, NavigableString, Tag

PARAGRAPH = "paragraph"
HEADING = "heading"
LIST = "list"
LIST_ITEM = "list_item"
BLOCKQUOTE = "blockquote"
HR = "hr"
SPACE = "space"
LINK = "link"
EM = "em"
STRONG = "strong"
CODESPAN = "codespan"
TEXT = "text"

_HEADING_TAG = re.compile(r"^h([1-6])$")
_SOFT_BREAK = re.compile(r"\s*\n\s*")
_BLOCK_CONTAINERS = frozenset({"[document]", "blockquote", "ul", "ol", "li"})


@dataclass(frozen=True, slots=True)
class MarkupToken:
    """One node of the lexed Markdown tree.

    Only one of ``tokens``, ``items`` and ``text`` is meaningful for a
    given kind: containers carry ``tokens``, lists carry ``items`` and leaves
    carry ``text``. Leaf text keeps HTML entities escaped, the renderer
    decodes it once. ``kind`` is a free string so that unknown elements
    survive lexing. ``start`` is the first number of an ordered list.
    """

    kind: str
    tokens: tuple["MarkupToken", ...] | None = None
    items: tuple["MarkupToken", ...] | None = None
    text: str | None = None
    depth: int = 0
    ordered: bool = False
    href: str | None = None
    start: int = 1


def decode_entities(text: str) -> str:
    """Decode HTML entities left in literal text.

    Example:
        >>> decode_entities('Tom &amp; Jerry &quot;ok&quot;')
        'Tom & Jerry "ok"'
    """

    return html.unescape(text)


def lex(text: str) -> List[MarkupToken]:
    """Return the top-level tokens of a Markdown document.

    Example:
        >>> [t.kind for t in lex('# Title\\n\\nBody')]
        ['heading', 'paragraph']
    """

    rendered = markdown.markdown(text, output_format="html")
    soup = BeautifulSoup(rendered, "html.parser")
    return _tokens_from_children(soup)


def _literal(value: str) -> str:
    return html.escape(value, quote=False)


def _tokens_from_children(node: Tag) -> List[MarkupToken]:
    block_level = node.name in _BLOCK_CONTAINERS
    tokens: List[MarkupToken] = []
    for child in node.children:
        if isinstance(child, Comment):
            continue
        if isinstance(child, NavigableString):
            value = str(child)
            if block_level and not value.strip() and "\n" in value:
                continue
            tokens.append(MarkupToken(TEXT, text=_literal(_SOFT_BREAK.sub(" ", value))))
            continue
        if isinstance(child, Tag):
            tokens.append(_token_from_tag(child))
    return tokens


def _token_from_tag(tag: Tag) -> MarkupToken:
    name = tag.name
    heading = _HEADING_TAG.match(name)
    if heading:
        return MarkupToken(
            HEADING, tokens=tuple(_tokens_from_children(tag)), depth=int(heading.group(1))
        )
    if name == "p":
        return MarkupToken(PARAGRAPH, tokens=tuple(_tokens_from_children(tag)))
    if name in {"ul", "ol"}:
        items = tuple(
            _token_from_tag(child)
            for child in tag.children
            if isinstance(child, Tag) and child.name == "li"
        )
        return MarkupToken(
            LIST, items=items, ordered=name == "ol", start=_list_start(tag)
        )
    if name == "li":
        return MarkupToken(LIST_ITEM, tokens=tuple(_list_item_tokens(tag)))
    if name == "blockquote":
        return MarkupToken(BLOCKQUOTE, tokens=tuple(_tokens_from_children(tag)))
    if name == "hr":
        return MarkupToken(HR)
    if name == "a":
        return MarkupToken(LINK, text=_literal(tag.get_text()), href=tag.get("href", ""))
    if name in {"em", "i"}:
        return MarkupToken(EM, tokens=tuple(_tokens_from_children(tag)))
    if name in {"strong", "b"}:
        return MarkupToken(STRONG, tokens=tuple(_tokens_from_children(tag)))
    if name == "code":
        return MarkupToken(CODESPAN, text=_literal(tag.get_text()))
    if name == "pre":
        return MarkupToken(
            PARAGRAPH,
            tokens=(MarkupToken(CODESPAN, text=_literal(tag.get_text().rstrip("\n"))),),
        )
    if name == "br":
        return MarkupToken(TEXT, text="\n")
    return MarkupToken(name, tokens=tuple(_tokens_from_children(tag)))


def _list_start(tag: Tag) -> int:
    try:
        return int(tag.get("start", 1))
    except (TypeError, ValueError):
        return 1


def _list_item_tokens(tag: Tag) -> Sequence[MarkupToken]:
    """Return list item content with wrapping paragraphs unwrapped.

    Loose lists wrap every item in ``<p>``; the item itself is the paragraph,
    so consecutive paragraphs are joined with a line break instead.
    """

    tokens: List[MarkupToken] = []
    unwrapped_previous = False
    for token in _tokens_from_children(tag):
        if token.kind == PARAGRAPH:
            if unwrapped_previous:
                tokens.append(MarkupToken(TEXT, text="\n"))
            tokens.extend(token.tokens or ())
            unwrapped_previous = True
            continue
        tokens.append(token)
        unwrapped_previous = False
    return tokens
