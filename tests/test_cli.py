"""
Tests for the command line entry point.
"""

import json

from verse_export.cli import main


def write_json(path, payload):
    path.write_text(json.dumps(payload), encoding="utf-8")
    return path


def verses_file(tmp_path):
    return write_json(
        tmp_path / "verses.json",
        [
            {
                "bibleBookShortTitle": "Gen",
                "chapter": 1,
                "verseNr": 1,
                "absoluteVerseNr": 1,
                "content": "In the beginning God created the heaven and the earth.",
            }
        ],
    )


class TestMain:
    """Test running exports from the command line."""

    def test_notes_export(self, tmp_path):
        """Should write the PDF and exit with status 0."""
        notes = write_json(tmp_path / "notes.json", {"gen-1": "A **note**"})
        translation = write_json(tmp_path / "kjv.json", {"id": "KJV", "description": "KJV"})
        output = tmp_path / "out" / "study.pdf"

        status = main(
            [
                "--verses", str(verses_file(tmp_path)),
                "--notes", str(notes),
                "--translation", str(translation),
                "--title", "Study",
                "-o", str(output),
            ]
        )

        assert status == 0
        assert output.read_bytes().startswith(b"%PDF")

    def test_tag_export(self, tmp_path):
        """Should export a tagged verse list when books are given."""
        books = write_json(tmp_path / "books.json", [{"shortTitle": "Gen", "longTitle": "Genesis"}])
        output = tmp_path / "tag.pdf"

        status = main(
            ["--verses", str(verses_file(tmp_path)), "--books", str(books), "-o", str(output)]
        )

        assert status == 0
        assert output.exists()

    def test_invalid_input(self, tmp_path):
        """Should report bad input with status 1 and write nothing."""
        bad = write_json(tmp_path / "verses.json", {"not": "a list"})
        output = tmp_path / "never.pdf"

        assert main(["--verses", str(bad), "-o", str(output)]) == 1
        assert not output.exists()

    def test_missing_file(self, tmp_path):
        assert main(["--verses", str(tmp_path / "missing.json")]) == 1
