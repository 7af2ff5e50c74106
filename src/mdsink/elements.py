"""Element models for Markdown documents.

Every element is a pydantic model tagged with an ``ElementKind``. The set of
kinds is closed: ``Element`` is a discriminated union of all of them, and
``mdsink.writer.write_element`` matches on the model class.

Elements hold the caller's strings as-is. Nothing is escaped or copied until
the tree is written.
"""

from enum import Enum
from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator
from typing_extensions import Self

from mdsink.exceptions import CompositionError, HeadingLevelError, NestedLinkError


class ElementKind(str, Enum):
    """Element kind enumeration."""

    # Inline
    TEXT = "text"
    SPAN = "span"
    LINK = "link"

    # Top-level only
    HEADING = "heading"
    PARAGRAPH = "paragraph"

    # Blocks
    LIST = "list"
    ITEM = "item"
    QUOTE = "quote"
    CODE_BLOCK = "code_block"
    RULE = "rule"


# Kinds that always start on a fresh line when written inside another element
BLOCK_KINDS = frozenset(
    {ElementKind.LIST, ElementKind.QUOTE, ElementKind.CODE_BLOCK, ElementKind.RULE}
)


class BaseElement(BaseModel):
    """Common base for all element models."""

    model_config = ConfigDict(validate_assignment=True)

    kind: ElementKind


class Text(BaseElement):
    """Plain text. Markdown-significant characters are escaped on write."""

    kind: Literal[ElementKind.TEXT] = ElementKind.TEXT
    text: str


class Span(BaseElement):
    """A single text fragment with bold, italic and code styling.

    The three flags are independent; bold and italic combine into one
    ``***`` marker, and code is fenced inside the emphasis markers.
    """

    kind: Literal[ElementKind.SPAN] = ElementKind.SPAN
    text: str
    bold: bool = False
    italic: bool = False
    code: bool = False


class Container(BaseElement):
    """Element holding an ordered list of child elements."""

    children: list["Element"] = Field(default_factory=list)

    def append(self, child: "Element | str") -> Self:
        """Add a child element (strings become Text) and return self."""
        self.children.append(as_element(child))
        return self


class Link(Container):
    """Link whose children form the visible text.

    Only text and spans can make up the link text; the address is a plain
    string, never a subtree.
    """

    kind: Literal[ElementKind.LINK] = ElementKind.LINK
    url: str

    @field_validator("children")
    @classmethod
    def _inline_children(cls, children: list["Element"]) -> list["Element"]:
        for child in children:
            _check_link_child(child)
        return children

    def append(self, child: "Element | str") -> Self:
        element = as_element(child)
        _check_link_child(element)
        self.children.append(element)
        return self


class Heading(Container):
    """ATX heading, ``#`` to ``######``. Top-level only.

    Newlines in the heading text are written as spaces.
    """

    kind: Literal[ElementKind.HEADING] = ElementKind.HEADING
    level: int = 1

    @field_validator("level")
    @classmethod
    def _level_in_range(cls, level: int) -> int:
        if not 1 <= level <= 6:
            raise HeadingLevelError(level)
        return level


class Paragraph(Container):
    """Block of inline content followed by a blank line. Top-level only."""

    kind: Literal[ElementKind.PARAGRAPH] = ElementKind.PARAGRAPH


class ListItem(Container):
    """One entry of a ListBlock. Nested blocks go after the item's text."""

    kind: Literal[ElementKind.ITEM] = ElementKind.ITEM


class ListBlock(BaseElement):
    """Ordered or bullet list."""

    kind: Literal[ElementKind.LIST] = ElementKind.LIST
    ordered: bool = False
    start: int = Field(default=1, ge=0)
    bullet: Literal["-", "*", "+"] = "-"
    items: list[ListItem] = Field(default_factory=list)

    def append(self, item: "Element | str") -> Self:
        """Add an item; anything that is not a ListItem is wrapped in one."""
        element = as_element(item)
        if not isinstance(element, ListItem):
            element = ListItem(children=[element])
        self.items.append(element)
        return self


class Quote(Container):
    """Block quote. Every line of its content is prefixed with ``> ``."""

    kind: Literal[ElementKind.QUOTE] = ElementKind.QUOTE


class CodeBlock(BaseElement):
    """Fenced code block holding verbatim text fragments."""

    kind: Literal[ElementKind.CODE_BLOCK] = ElementKind.CODE_BLOCK
    language: str = ""
    fence_char: Literal["`", "~"] = "`"
    children: list[Text] = Field(default_factory=list)

    def append(self, code: "Text | str") -> Self:
        """Add a fragment of code. Fragments are written back to back."""
        element = as_element(code)
        if not isinstance(element, Text):
            raise CompositionError("A code block can only hold plain text")
        self.children.append(element)
        return self


class Rule(BaseElement):
    """Thematic break."""

    kind: Literal[ElementKind.RULE] = ElementKind.RULE


Element = Annotated[
    Union[Text, Span, Link, Heading, Paragraph, ListBlock, ListItem, Quote, CodeBlock, Rule],
    Field(discriminator="kind"),
]

for _model in (Container, Link, Heading, Paragraph, ListItem, ListBlock, Quote):
    _model.model_rebuild()


def as_element(value: "Element | str") -> "Element":
    """Return ``value`` as an element, wrapping strings in Text."""
    if isinstance(value, str):
        return Text(text=value)
    if isinstance(value, BaseElement):
        return value
    raise TypeError(f"Expected an element or str, got {type(value).__name__}")


def _check_link_child(child: "Element") -> None:
    if isinstance(child, Link):
        raise NestedLinkError()
    if not isinstance(child, (Text, Span)):
        raise CompositionError(f"Link text can only hold text and spans, got a {child.kind.value}")
