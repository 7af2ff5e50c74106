"""mdsink exception hierarchy.

Two kinds of failure can end a write:

- I/O errors raised by the destination stream. These are plain ``OSError``
  instances and are never wrapped, retried or suppressed.
- Composition errors. The element tree was assembled in a way that has no
  valid Markdown rendering (a paragraph inside a paragraph, a link inside a
  link, ...). They signal a bug in the calling code, not bad input.

Usage:
    from mdsink.exceptions import CompositionError

    try:
        document.write(tree)
    except CompositionError as e:
        print(f"Bad element tree: {e.message}")
"""


class MdsinkError(Exception):
    """Base exception for all mdsink errors."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class CompositionError(MdsinkError):
    """Element tree was composed incorrectly.

    Text content is never rejected; only the shape of the tree is.
    """

    pass


class NestedBlockError(CompositionError):
    """A top-level-only element was found inside another element.

    Raised when a heading or paragraph is serialized as a child.
    """

    def __init__(self, kind: str) -> None:
        self.kind = kind
        super().__init__(f"A {kind} can only be written at the top level of a document")


class NestedLinkError(CompositionError):
    """A link was placed inside the text of another link."""

    def __init__(self) -> None:
        super().__init__("A link cannot contain another link")


class LinkStylingError(CompositionError):
    """Bold, italic or code styling was applied to a finished link.

    Style the link text before building the link instead.
    """

    def __init__(self, style: str) -> None:
        self.style = style
        super().__init__(
            f"Cannot apply {style} to a link; apply it to the link text before building the link"
        )


class HeadingLevelError(CompositionError):
    """Heading level outside the range 1-6."""

    def __init__(self, level: int) -> None:
        self.level = level
        super().__init__(f"Heading level must be between 1 and 6, got {level}")
