"""mdsink: build Markdown element trees and write them to a byte stream.

This package provides:
- Element models for headings, paragraphs, links, styled spans, lists,
  quotes and code blocks
- Context-aware escaping, so literal text always renders as written
- Code fences sized to never collide with backticks in the content
- A Document sink that writes straight to any binary stream
"""

from mdsink.builders import (
    as_element,
    bold,
    bullet_list,
    code,
    code_block,
    heading,
    italic,
    item,
    link,
    ordered_list,
    paragraph,
    quote,
    rule,
    text,
)
from mdsink.config import MdsinkSettings, clear_settings_cache, get_settings
from mdsink.document import Document
from mdsink.elements import (
    BaseElement,
    CodeBlock,
    Element,
    ElementKind,
    Heading,
    Link,
    ListBlock,
    ListItem,
    Paragraph,
    Quote,
    Rule,
    Span,
    Text,
)
from mdsink.escape import Escaping, escape, unescape, write_escaped
from mdsink.exceptions import (
    CompositionError,
    HeadingLevelError,
    LinkStylingError,
    MdsinkError,
    NestedBlockError,
    NestedLinkError,
)
from mdsink.output import Output, PrefixedOutput, SingleLineOutput, StreamOutput
from mdsink.streak import count_max_streak
from mdsink.writer import longest_run, write_element

__all__ = [
    # Document
    "Document",
    # Builders
    "text",
    "heading",
    "paragraph",
    "link",
    "bold",
    "italic",
    "code",
    "item",
    "bullet_list",
    "ordered_list",
    "quote",
    "code_block",
    "rule",
    "as_element",
    # Elements
    "BaseElement",
    "Element",
    "ElementKind",
    "Text",
    "Span",
    "Link",
    "Heading",
    "Paragraph",
    "ListBlock",
    "ListItem",
    "Quote",
    "CodeBlock",
    "Rule",
    # Serialization
    "write_element",
    "longest_run",
    "count_max_streak",
    "Escaping",
    "escape",
    "unescape",
    "write_escaped",
    "Output",
    "StreamOutput",
    "PrefixedOutput",
    "SingleLineOutput",
    # Settings
    "MdsinkSettings",
    "get_settings",
    "clear_settings_cache",
    # Errors
    "MdsinkError",
    "CompositionError",
    "NestedBlockError",
    "NestedLinkError",
    "LinkStylingError",
    "HeadingLevelError",
]
