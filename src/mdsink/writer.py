"""Serialization of element trees.

``write_element`` is the single entry point. It walks the tree depth first and
writes as it goes, with no second pass. The only state passed down is:

- ``inner``: False for the element handed to the document, True for every
  element below it
- ``escaping``: the escaping context inherited from the parent
"""

from collections.abc import Sequence

from mdsink.elements import (
    BLOCK_KINDS,
    CodeBlock,
    Container,
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
)
from mdsink.escape import Escaping, write_escaped
from mdsink.exceptions import CompositionError, NestedBlockError, NestedLinkError
from mdsink.output import Output, PrefixedOutput, SingleLineOutput
from mdsink.streak import count_max_streak

BLOCK_SEPARATOR = "\n\n"
QUOTE_PREFIX = "> "
RULE_MARKER = "***"
MIN_CODE_FENCE = 3

# Leading whitespace would indent the line into a code block or be dropped
_LINE_START_ENTITIES = {" ": "&#32;", "\t": "&#9;"}


def write_element(element: Element, output: Output, inner: bool, escaping: Escaping) -> None:
    """Serialize an element and its children into ``output``.

    Args:
        element: Element to write
        output: Destination for the Markdown text
        inner: True when the element is a child of another element
        escaping: Escaping context inherited from the parent

    Raises:
        CompositionError: The tree cannot be rendered as Markdown
        OSError: The underlying stream failed
    """
    if inner and element.kind in BLOCK_KINDS:
        _start_line(output)

    match element:
        case Text():
            _write_literal(output, element.text, escaping)
            if not inner:
                output.write(BLOCK_SEPARATOR)
        case Span():
            _write_span(element, output, inner, escaping)
        case Link():
            _write_link(element, output, escaping)
        case Heading():
            _write_heading(element, output, inner)
        case Paragraph():
            if inner:
                raise NestedBlockError("paragraph")
            _write_children(element, output, escaping)
            output.write(BLOCK_SEPARATOR)
        case ListBlock():
            _write_list(element, output, inner, escaping)
        case ListItem():
            if not inner:
                raise CompositionError("A list item can only be written inside a list")
            _write_children(element, output, escaping)
        case Quote():
            _write_quote(element, output, inner, escaping)
        case CodeBlock():
            _write_code_block(element, output, inner)
        case Rule():
            output.write(RULE_MARKER + "\n")
            if not inner:
                output.write("\n")
        case _:
            raise CompositionError(f"Unknown element kind: {element.kind}")


def _start_line(output: Output) -> None:
    if not output.at_line_start:
        output.write("\n")


def _write_children(element: Container, output: Output, escaping: Escaping) -> None:
    for child in element.children:
        write_element(child, output, True, escaping)


def _write_literal(output: Output, fragment: str, escaping: Escaping) -> None:
    """Write escaped text, keeping whitespace at the start of a line literal.

    Under NORMAL escaping, a space or tab that begins a line is written as a
    character reference so renderers neither strip it nor read the line as
    indented code.
    """
    if escaping is not Escaping.NORMAL:
        write_escaped(output, fragment, escaping)
        return
    for index, line in enumerate(fragment.split("\n")):
        if index:
            output.write("\n")
        if line[:1] in _LINE_START_ENTITIES and output.at_line_start:
            output.write(_LINE_START_ENTITIES[line[0]])
            line = line[1:]
        write_escaped(output, line, escaping)


def code_fence(text: str) -> str:
    """Return the backtick fence for an inline code span over ``text``."""
    longest, _ = count_max_streak(text, "`")
    return "`" * (longest + 1)


def _write_span(element: Span, output: Output, inner: bool, escaping: Escaping) -> None:
    text = element.text
    marker = "*" * (2 * element.bold + element.italic)
    if element.code:
        if text:
            fence = code_fence(text)
            # Renderers only strip the padding when the content is not all spaces
            pad = " " if text.strip(" ") else ""
            output.write(marker + fence + pad)
            write_escaped(output, text, Escaping.INLINE_CODE)
            output.write(pad + fence + marker)
    else:
        core = text.strip()
        if core and marker:
            # Emphasis markers must touch non-whitespace to open and close
            start = text.index(core)
            _write_literal(output, text[:start], escaping)
            output.write(marker)
            _write_literal(output, core, escaping)
            output.write(marker)
            _write_literal(output, text[start + len(core) :], escaping)
        else:
            _write_literal(output, text, escaping)
    if not inner:
        output.write(BLOCK_SEPARATOR)


def _write_link(element: Link, output: Output, escaping: Escaping) -> None:
    # Link text is written under BRACKETS, so seeing it here means link-in-link
    if escaping is Escaping.BRACKETS:
        raise NestedLinkError()
    output.write("[")
    _write_children(element, output, Escaping.BRACKETS)
    output.write("](")
    write_escaped(output, element.url, Escaping.PARENTHESES)
    output.write(")")


def _write_heading(element: Heading, output: Output, inner: bool) -> None:
    if inner:
        raise NestedBlockError("heading")
    output.write("#" * element.level + " ")
    # Headings end at the first newline
    _write_children(element, SingleLineOutput(output), Escaping.NORMAL)
    output.write("\n")


def _write_list(element: ListBlock, output: Output, inner: bool, escaping: Escaping) -> None:
    if not element.items:
        return
    for number, item in enumerate(element.items, start=element.start):
        _start_line(output)
        marker = f"{number}. " if element.ordered else f"{element.bullet} "
        output.write(marker)
        # Continuation lines and nested blocks line up with the item text
        body = PrefixedOutput(output, " " * len(marker), at_line_start=False)
        write_element(item, body, True, escaping)
    _start_line(output)
    if not inner:
        output.write("\n")


def _write_quote(element: Container, output: Output, inner: bool, escaping: Escaping) -> None:
    if not element.children:
        return
    body = PrefixedOutput(output, QUOTE_PREFIX)
    _write_children(element, body, escaping)
    _start_line(body)
    if not inner:
        output.write("\n")


def _write_code_block(element: CodeBlock, output: Output, inner: bool) -> None:
    fence_char = element.fence_char
    # Backticks are not allowed in the info string of a backtick fence
    if fence_char == "`" and "`" in element.language:
        fence_char = "~"
    longest, _ = longest_run(element, fence_char)
    fence = fence_char * max(MIN_CODE_FENCE, longest + 1)
    info = " ".join(element.language.split())

    output.write(fence + info + "\n")
    for child in element.children:
        write_escaped(output, child.text, Escaping.INLINE_CODE)
    _start_line(output)
    output.write(fence + "\n")
    if not inner:
        output.write("\n")


def longest_run(element: Element, char: str, carry_in: int = 0) -> tuple[int, int]:
    """Longest run of ``char`` in the literal text of an element tree.

    Text and spans continue a run left open by the previous sibling. Every
    other element starts its content with a fresh count and closes the run at
    its end. A link's address is measured on its own and competes with the
    link text for the maximum.

    Returns:
        ``(max_streak, trailing_streak)`` as for ``count_max_streak``
    """
    match element:
        case Text() | Span():
            return count_max_streak(element.text, char, carry_in)
        case Link():
            text_longest, _ = _children_run(element.children, char)
            address_longest, _ = count_max_streak(element.url, char)
            return max(text_longest, address_longest), 0
        case ListBlock():
            return max((longest_run(item, char)[0] for item in element.items), default=0), 0
        case Heading() | Paragraph() | ListItem() | Quote() | CodeBlock():
            longest, _ = _children_run(element.children, char)
            return longest, 0
        case _:
            return 0, 0


def _children_run(children: Sequence[Element], char: str) -> tuple[int, int]:
    longest = carry = 0
    for child in children:
        child_longest, carry = longest_run(child, char, carry)
        longest = max(longest, child_longest)
    return longest, carry
