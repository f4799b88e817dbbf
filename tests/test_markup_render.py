"""
Tests for Markdown to document node rendering.

Tests:
- Plain paragraphs and headings
- Inherited inline formatting
- Lists and numbering references
- Blockquote and list context scoping
- Links, rules, spaces and unknown tokens
"""

from verse_export.markup import MarkupToken
from verse_export.markup_render import render_markdown, render_tokens
from verse_export.nodes import (
    BULLET_NUMBERING,
    DECIMAL_NUMBERING,
    PLAIN,
    Hyperlink,
    Paragraph,
    RunFormat,
    TextRun,
)


def text(value):
    return MarkupToken("text", text=value)


def paragraph(*tokens):
    return MarkupToken("paragraph", tokens=tuple(tokens))


class TestParagraphs:
    """Test plain paragraphs and headings."""

    def test_plain_text(self):
        """Should produce one unformatted paragraph."""
        nodes = render_markdown("hello world")

        assert len(nodes) == 1
        assert isinstance(nodes[0], Paragraph)
        assert nodes[0].text == "hello world"
        assert all(run.fmt == PLAIN for run in nodes[0].runs)
        assert nodes[0].style is None

    def test_style_name_is_applied(self):
        """Should use the passed style for body paragraphs."""
        nodes = render_markdown("note text", "notes")

        assert nodes[0].style == "notes"

    def test_heading_level(self):
        """Should tag headings with their depth."""
        nodes = render_markdown("## Section\n\nBody")

        assert nodes[0].heading == 2
        assert nodes[0].text == "Section"
        assert nodes[1].heading is None

    def test_each_call_starts_fresh(self):
        """Should not share state between render calls."""
        render_markdown("> quoted")

        nodes = render_markdown("plain", "notes")

        assert nodes[0].style == "notes"


class TestInlineFormatting:
    """Test inherited bold/italic/highlight flags."""

    def test_nested_emphasis_inside_strong(self):
        """Should combine bold and italic for the nested segment only."""
        runs = render_markdown("**bold *and italic* text**")[0].runs

        assert [run.text for run in runs] == ["bold ", "and italic", " text"]
        assert runs[0].fmt == RunFormat(bold=True)
        assert runs[1].fmt == RunFormat(bold=True, italic=True)
        assert runs[2].fmt == RunFormat(bold=True)

    def test_code_span_is_highlighted(self):
        """Should highlight code spans in yellow."""
        runs = render_markdown("run `make` now")[0].runs

        assert runs[1].text == "make"
        assert runs[1].fmt.highlight == "yellow"
        assert runs[0].fmt.highlight is None

    def test_entities_in_literal_text_are_decoded(self):
        """Should decode entities left in hand-built tokens."""
        nodes = render_tokens([paragraph(text("a &amp; b"))])

        assert nodes[0].text == "a & b"

    def test_escaped_source_text_is_kept(self):
        """Should decode Markdown text only once."""
        nodes = render_markdown("see ?a=1&copy=2 and `&lt;p&gt;`")

        assert nodes[0].text == "see ?a=1&copy=2 and &lt;p&gt;"

    def test_link_label_with_ampersand(self):
        link = render_markdown("[Tom &amp;amp; Jerry](https://x.org)")[0].runs[0]

        assert link.text == "Tom &amp; Jerry"


class TestLists:
    """Test list items and numbering references."""

    def test_unordered_items(self):
        """Should emit bullet paragraphs at level 0."""
        nodes = render_markdown("- one\n- two")

        assert [node.text for node in nodes] == ["one", "two"]
        for node in nodes:
            assert node.numbering.reference == BULLET_NUMBERING
            assert node.numbering.level == 0

    def test_ordered_items(self):
        """Should emit decimal numbering for ordered lists."""
        nodes = render_markdown("1. first\n2. second", "notes")

        assert [node.numbering.reference for node in nodes] == [
            DECIMAL_NUMBERING,
            DECIMAL_NUMBERING,
        ]
        assert all(node.style == "notes" for node in nodes)

    def test_hand_built_unordered_list(self):
        """Should render a list token with two items as two bullets."""
        token = MarkupToken(
            "list",
            ordered=False,
            items=(
                MarkupToken("list_item", tokens=(text("a"),)),
                MarkupToken("list_item", tokens=(text("b"),)),
            ),
        )

        nodes = render_tokens([token])

        assert [(n.text, n.numbering.reference) for n in nodes] == [
            ("a", BULLET_NUMBERING),
            ("b", BULLET_NUMBERING),
        ]

    def test_ordered_list_start_is_kept(self):
        """Should number a list from its first Markdown number."""
        nodes = render_markdown("3. third\n4. fourth")

        assert [node.numbering.start for node in nodes] == [3, 3]

    def test_ordered_state_does_not_leak_to_siblings(self):
        """Should not number a later stray item like the previous ordered list."""
        tokens = [
            MarkupToken(
                "list",
                ordered=True,
                items=(MarkupToken("list_item", tokens=(text("a"),)),),
            ),
            MarkupToken("list_item", tokens=(text("b"),)),
        ]

        nodes = render_tokens(tokens)

        assert nodes[0].numbering.reference == DECIMAL_NUMBERING
        assert nodes[1].numbering.reference == BULLET_NUMBERING

    def test_nested_list_follows_parent_item(self):
        """Should emit the parent item before its nested items."""
        nodes = render_markdown("- parent\n    1. child")

        assert [node.text.strip() for node in nodes] == ["parent", "child"]
        assert nodes[0].numbering.reference == BULLET_NUMBERING
        assert nodes[1].numbering.reference == DECIMAL_NUMBERING


class TestBlockquotes:
    """Test blockquote style scoping."""

    def test_quoted_paragraph_style(self):
        """Should style quoted paragraphs as blockquote."""
        nodes = render_markdown("> quoted\n\nafter", "notes")

        assert [node.style for node in nodes] == ["blockquote", "notes"]

    def test_blockquote_scope_ends_with_token(self):
        """Should restore the outer style after a hand-built blockquote."""
        tokens = [
            MarkupToken("blockquote", tokens=(paragraph(text("q")),)),
            paragraph(text("after")),
        ]

        nodes = render_tokens(tokens, "notes")

        assert [node.style for node in nodes] == ["blockquote", "notes"]


class TestOtherTokens:
    """Test links, rules, spaces and unknown kinds."""

    def test_inline_link(self):
        """Should append a hyperlink run to the paragraph."""
        runs = render_markdown("see [site](https://example.org) now")[0].runs

        link = runs[1]
        assert isinstance(link, Hyperlink)
        assert link.target == "https://example.org"
        assert link.runs == (TextRun("site", PLAIN, style="Hyperlink"),)
        assert runs[2].text == " now"

    def test_top_level_link_becomes_paragraph(self):
        """Should wrap a block-level link into its own paragraph."""
        nodes = render_tokens([MarkupToken("link", text="site", href="https://x.org")])

        assert len(nodes) == 1
        link = nodes[0].runs[0]
        assert isinstance(link, Hyperlink)
        assert link.target == "https://x.org"
        assert link.text == "site"

    def test_horizontal_rule(self):
        """Should emit an empty bordered paragraph."""
        nodes = render_markdown("above\n\n---\n\nbelow")

        assert nodes[1].bottom_border is True
        assert nodes[1].runs == []

    def test_space_token(self):
        """Should emit an empty paragraph for blank space."""
        nodes = render_tokens([paragraph(text("a")), MarkupToken("space"), paragraph(text("b"))])

        assert [node.text for node in nodes] == ["a", "", "b"]

    def test_unknown_kind_emits_nothing(self):
        """Should ignore unknown kinds but keep their text flowing."""
        assert render_tokens([MarkupToken("table", tokens=(text("x"),))]) == []

        nodes = render_tokens([paragraph(MarkupToken("del", tokens=(text("gone"),)))])

        assert nodes[0].text == "gone"
