"""Shared constants for PDF layout and text processing."""

from __future__ import annotations

import os

HYPHENATION_LANG = os.getenv("VERSE_EXPORT_HYPHENATION_LANG", "en_US")
HYPHENATE = os.getenv("VERSE_EXPORT_HYPHENATE", "1") not in {
    "",
    "0",
    "false",
    "False",
}
