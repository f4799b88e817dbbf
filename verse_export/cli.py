"""
Command line entry point: export verses and notes from JSON files to PDF.
"""

from __future__ import annotations

import argparse
import logging
from pathlib import Path
from typing import Sequence

from .export import default_export_filename, export_verses
from .ingest import (
    load_books,
    load_localizer,
    load_notes,
    load_translation,
    load_verses,
)

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def _parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    """Return CLI arguments for the export."""

    parser = argparse.ArgumentParser(
        description="Export selected verses (tagged or with notes) to a PDF document."
    )
    parser.add_argument(
        "--verses",
        type=Path,
        required=True,
        help="JSON list of verses (bibleBookShortTitle, chapter, verseNr, absoluteVerseNr, content).",
    )
    parser.add_argument(
        "--books",
        type=Path,
        help=(
            "JSON list of books (shortTitle, longTitle). When given the export "
            "lists tagged verses per book, otherwise verses are paired with notes."
        ),
    )
    parser.add_argument(
        "--notes",
        type=Path,
        help="JSON object of notes keyed by book ('gen') or verse ('gen-12').",
    )
    parser.add_argument(
        "--translation",
        type=Path,
        help="JSON object with translation metadata (id, description, ...).",
    )
    parser.add_argument(
        "--labels",
        type=Path,
        help="JSON object with localized labels and book titles.",
    )
    parser.add_argument("--title", default="Verses", help="Markdown title of the export.")
    parser.add_argument(
        "--output-file",
        "-o",
        type=Path,
        default=None,
        help="PDF file to write (default: output/<date>__<title>.pdf).",
    )
    parser.add_argument(
        "--log-level",
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging verbosity.",
    )
    return parser.parse_args(argv)


def main(argv: Sequence[str] | None = None) -> int:
    """Run the export and return the process exit status.

    Example:
        >>> main(["--verses", "verses.json"])  # doctest: +SKIP
        0
    """

    args = _parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level), format=LOG_FORMAT)
    try:
        verses = load_verses(args.verses)
        books = load_books(args.books) if args.books else None
        notes = load_notes(args.notes) if args.notes else {}
        translation = load_translation(args.translation) if args.translation else None
        localizer = load_localizer(args.labels) if args.labels else None
    except (OSError, ValueError) as exc:
        logger.error("Cannot read export input: %s", exc)
        return 1

    output_path = args.output_file or Path("output") / default_export_filename(args.title)
    export_verses(
        output_path,
        args.title,
        verses,
        translation=translation,
        books=books,
        notes=notes,
        localizer=localizer,
        progress=True,
    )
    logger.info("Wrote PDF to %s", output_path)
    return 0
