"""
Localized labels used while laying out an export.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Mapping, Protocol


class Localizer(Protocol):
    """Lookups the exporter needs from the surrounding application."""

    def book_title(self, long_title: str) -> str:
        ...

    def reference_separator(self, translation_id: str) -> str:
        ...

    def chapter_label(self, book_id: str) -> str:
        ...

    def scripture_quote_from(self) -> str:
        ...


@dataclass(slots=True)
class StaticLocalizer:
    """Localizer backed by fixed strings.

    Book titles missing from ``book_titles`` are shown as given.

    Example:
        >>> StaticLocalizer(book_titles={'Genesis': '1. Mose'}).book_title('Genesis')
        '1. Mose'
    """

    book_titles: Mapping[str, str] = field(default_factory=dict)
    separator: str = ":"
    chapter: str = "Chapter"
    quote_from: str = "Scripture quotations from"
    separators: Dict[str, str] = field(default_factory=dict)

    def book_title(self, long_title: str) -> str:
        return self.book_titles.get(long_title, long_title)

    def reference_separator(self, translation_id: str) -> str:
        """Return the separator for ``translation_id``, falling back to the default."""

        return self.separators.get(translation_id, self.separator)

    def chapter_label(self, book_id: str) -> str:
        return self.chapter

    def scripture_quote_from(self) -> str:
        return self.quote_from
