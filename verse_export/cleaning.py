"""
Small, focused text cleaning utilities.
"""

import re

from bs4 import BeautifulSoup, Comment, NavigableString, Tag


_ZERO_WIDTH = re.compile("[\u200b\u200c\u200d\u2060]")
_NON_BREAKING_SPACES = re.compile("[\u00a0\u202f]")
_SELF_CLOSING_TAG = re.compile(r"<([a-z]+)(\s?[^>]*?)/>")

# Wrapper elements carry module markup (titles, notes) that is not verse text.
_WRAPPER_TAGS = frozenset({"div"})


def normalize_whitespace(value: str) -> str:
    """Collapse unusual whitespace into single ASCII spaces.

    Example:
        >>> normalize_whitespace("a\\u00a0b\\u200bb")
        'a bb'
    """

    clean = _NON_BREAKING_SPACES.sub(" ", value)
    clean = _ZERO_WIDTH.sub("", clean)
    clean = re.sub(r"\s+", " ", clean)
    return clean.strip()


def expand_self_closing_tags(html: str) -> str:
    """Rewrite ``<tag/>`` into an explicit ``<tag></tag>`` pair.

    Example:
        >>> expand_self_closing_tags('a<br/>b<milestone type="x"/>')
        'a<br></br>b<milestone type="x"></milestone>'
    """

    return _SELF_CLOSING_TAG.sub(r"<\1\2></\1>", html)


def verse_plain_text(content: str) -> str:
    """Return the readable text of a verse, dropping wrapper elements.

    Only top-level nodes are inspected: text nodes and inline elements
    contribute their text, ``div`` wrappers are skipped with everything
    inside them.

    Example:
        >>> verse_plain_text('<div class="x">skip</div>keep<br/>')
        'keep'
    """

    soup = BeautifulSoup(expand_self_closing_tags(content), "html.parser")
    parts: list[str] = []
    for node in soup.contents:
        if isinstance(node, Tag):
            if node.name in _WRAPPER_TAGS:
                continue
            parts.append(node.get_text())
        elif isinstance(node, NavigableString) and not isinstance(node, Comment):
            parts.append(str(node))
    return "".join(parts)
