"""
Partition ordered verse lists into contiguous display blocks.
"""

from __future__ import annotations

import logging
from typing import Iterable, List

from .models import Verse, VerseBlock

logger = logging.getLogger(__name__)


def block_by_contiguity(verses: Iterable[Verse], book_id: str) -> List[VerseBlock]:
    """Group the verses of one book into runs of consecutive verses.

    A new block starts whenever the absolute verse number jumps by more than
    one. Verses of other books are skipped. Empty blocks are never returned.

    Args:
        verses: Verses sorted by absolute verse number.
        book_id: Short title of the book to keep.
    Returns:
        List of non-empty verse blocks in input order.

    Example:
        >>> vs = [Verse('Gen', 1, n, n, '') for n in (1, 2, 5)]
        >>> [[v.verse_nr for v in b] for b in block_by_contiguity(vs, 'Gen')]
        [[1, 2], [5]]
    """

    blocks: List[VerseBlock] = []
    current: VerseBlock = []
    last_verse_nr = 0
    for verse in verses:
        if verse.book_id != book_id:
            continue
        if verse.absolute_verse_nr > last_verse_nr + 1 and current:
            blocks.append(current)
            current = []
        current.append(verse)
        last_verse_nr = verse.absolute_verse_nr
    if current:
        blocks.append(current)
    logger.debug("book %s: %d contiguous block(s)", book_id, len(blocks))
    return blocks


def block_by_chapter(verses: Iterable[Verse]) -> List[VerseBlock]:
    """Group verses into one block per run of identical chapter numbers.

    Example:
        >>> vs = [Verse('Gen', c, 1, i, '') for i, c in enumerate((1, 1, 2), 1)]
        >>> [len(b) for b in block_by_chapter(vs)]
        [2, 1]
    """

    blocks: List[VerseBlock] = []
    current: VerseBlock = []
    previous_chapter: int | None = None
    for verse in verses:
        if verse.chapter != previous_chapter and current:
            blocks.append(current)
            current = []
        previous_chapter = verse.chapter
        current.append(verse)
    if current:
        blocks.append(current)
    logger.debug("%d chapter block(s)", len(blocks))
    return blocks
