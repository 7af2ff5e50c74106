"""Tests for the fluent construction helpers."""

import pytest

from mdsink import (
    CodeBlock,
    CompositionError,
    Heading,
    LinkStylingError,
    ListItem,
    Paragraph,
    Span,
    Text,
    as_element,
    bold,
    bullet_list,
    code,
    code_block,
    heading,
    italic,
    link,
    ordered_list,
    paragraph,
    quote,
    text,
)


class TestConstruction:
    """Tests for element helpers."""

    def test_strings_become_text(self) -> None:
        p = paragraph("a", bold("b"))
        assert isinstance(p, Paragraph)
        assert p.children[0] == Text(text="a")
        assert isinstance(p.children[1], Span)

    def test_heading_defaults_to_level_one(self) -> None:
        h = heading("t")
        assert isinstance(h, Heading)
        assert h.level == 1

    def test_append_chains(self) -> None:
        h = heading("a", 2).append(" b").append(italic("c"))
        assert [type(c) for c in h.children] == [Text, Text, Span]

    def test_as_element_passes_elements_through(self) -> None:
        element = text("x")
        assert as_element(element) is element

    def test_as_element_rejects_other_types(self) -> None:
        with pytest.raises(TypeError, match="int"):
            as_element(42)  # type: ignore[arg-type]

    def test_list_items_wrapped(self) -> None:
        block = ordered_list("a", "b", start=0)
        assert block.ordered is True
        assert block.start == 0
        assert all(isinstance(i, ListItem) for i in block.items)

    def test_code_block_fragments(self) -> None:
        block = code_block("a", "py").append("b")
        assert isinstance(block, CodeBlock)
        assert [c.text for c in block.children] == ["a", "b"]


class TestStyling:
    """Tests for bold/italic/code toggles."""

    def test_flags_compose(self) -> None:
        span = code(italic(bold("x")))
        assert (span.bold, span.italic, span.code) == (True, True, True)

    def test_styling_copies_span(self) -> None:
        original = italic("x")
        styled = bold(original)
        assert original.bold is False
        assert styled.bold is True
        assert styled.italic is True

    @pytest.mark.parametrize("style", [bold, italic, code])
    def test_styling_link_rejected(self, style) -> None:
        with pytest.raises(LinkStylingError, match="link text"):
            style(link("a", "u"))

    def test_style_link_text_instead(self) -> None:
        assert isinstance(link(bold("a"), "u").children[0], Span)

    @pytest.mark.parametrize("element", [paragraph("x"), heading("x"), quote("x"), bullet_list("x")])
    def test_styling_blocks_rejected(self, element) -> None:
        with pytest.raises(CompositionError, match="Only text"):
            bold(element)
