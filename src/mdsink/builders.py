"""Fluent helpers for building element trees.

Example:
    doc.write(heading("Install", level=2))
    doc.write(
        paragraph("Run ", code("pip install mdsink"), " or see ")
        .append(link("the docs", "https://example.com/docs"))
    )
    doc.write(bullet_list("fast", bold("safe"), item("nested", bullet_list("a", "b"))))
"""

from __future__ import annotations

from mdsink.config import get_settings
from mdsink.elements import (
    CodeBlock,
    Element,
    Heading,
    Link,
    ListBlock,
    ListItem,
    Paragraph,
    Quote,
    Rule,
    Span,
    Text,
    as_element,
)
from mdsink.exceptions import CompositionError, LinkStylingError


def text(value: str) -> Text:
    """Plain text."""
    return Text(text=value)


def heading(content: Element | str, level: int = 1) -> Heading:
    """Heading of the given level (1-6) starting with ``content``."""
    return Heading(level=level, children=[as_element(content)])


def paragraph(*content: Element | str) -> Paragraph:
    """Paragraph made of the given inline elements."""
    return Paragraph(children=[as_element(c) for c in content])


def link(content: Element | str, url: str) -> Link:
    """Link to ``url`` whose visible text is ``content``."""
    return Link(url=url, children=[as_element(content)])


def _styled(value: Element | str, style: str) -> Span:
    element = as_element(value)
    if isinstance(element, Link):
        raise LinkStylingError(style)
    if isinstance(element, Text):
        return Span(text=element.text, **{style: True})
    if isinstance(element, Span):
        return element.model_copy(update={style: True})
    raise CompositionError(f"Only text can be styled as {style}, got a {element.kind.value}")


def bold(value: Element | str) -> Span:
    """Bold span. Composes with italic() and code()."""
    return _styled(value, "bold")


def italic(value: Element | str) -> Span:
    """Italic span. Composes with bold() and code()."""
    return _styled(value, "italic")


def code(value: Element | str) -> Span:
    """Inline code span. Composes with bold() and italic()."""
    return _styled(value, "code")


def item(*content: Element | str) -> ListItem:
    """List item; use it to put nested lists or quotes under an entry."""
    return ListItem(children=[as_element(c) for c in content])


def _list(items: tuple[Element | str, ...], **options: object) -> ListBlock:
    block = ListBlock(**options)
    for entry in items:
        block.append(entry)
    return block


def bullet_list(*items: Element | str, bullet: str | None = None) -> ListBlock:
    """Bullet list. The marker defaults to the configured bullet."""
    return _list(items, bullet=bullet or get_settings().bullet)


def ordered_list(*items: Element | str, start: int = 1) -> ListBlock:
    """Numbered list counting from ``start``."""
    return _list(items, ordered=True, start=start)


def quote(*content: Element | str) -> Quote:
    """Block quote of the given elements."""
    return Quote(children=[as_element(c) for c in content])


def code_block(source: str = "", language: str = "", fence_char: str | None = None) -> CodeBlock:
    """Fenced code block. More source can be added with ``append``."""
    block = CodeBlock(language=language, fence_char=fence_char or get_settings().fence_char)
    if source:
        block.append(source)
    return block


def rule() -> Rule:
    """Thematic break."""
    return Rule()


__all__ = [
    "as_element",
    "bold",
    "bullet_list",
    "code",
    "code_block",
    "heading",
    "italic",
    "item",
    "link",
    "ordered_list",
    "paragraph",
    "quote",
    "rule",
    "text",
]
