"""
Text helpers for hyphenation and paragraph prep.
"""

from __future__ import annotations

import re

from bs4 import BeautifulSoup
from pyphen import Pyphen


WORD_RE = re.compile(r"[^\W\d_]{7,}")


def hyphenate_markup(markup: str, dic: Pyphen) -> str:
    """Insert soft hyphens into long words of a paragraph markup fragment.

    Tags and attribute values are left untouched; only text nodes change.

    Example:
        >>> dic = Pyphen(lang='en_US')
        >>> out = hyphenate_markup('<b>everlasting</b> <i>a</i>', dic)
        >>> '\\xad' in out, out.replace('\\xad', '')
        (True, '<b>everlasting</b> <i>a</i>')
    """

    soup = BeautifulSoup(markup, "html.parser")
    for text_node in list(soup.strings):
        source = str(text_node)

        def repl(match: re.Match[str]) -> str:
            return dic.inserted(match.group(0), hyphen="\u00ad")

        hyphenated = WORD_RE.sub(repl, source)
        if hyphenated != source:
            text_node.replace_with(hyphenated)
    return soup.decode_contents()
