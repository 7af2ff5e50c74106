"""Output adapters between the element writer and the destination stream.

Elements write text; the stream takes bytes. ``StreamOutput`` does the
encoding, and ``PrefixedOutput`` puts a prefix in front of every line written
through it (``"> "`` for quotes, indentation for list items). Prefixed outputs
nest, so a quote inside a quote gets ``"> > "``. ``SingleLineOutput`` keeps
heading text on the heading line.
"""

from typing import BinaryIO, Protocol, runtime_checkable


@runtime_checkable
class Output(Protocol):
    """Text sink that elements serialize into."""

    @property
    def at_line_start(self) -> bool:
        """True when nothing has been written on the current line yet."""
        ...

    def write(self, text: str) -> None:
        """Append text. I/O errors from the underlying stream propagate."""
        ...


class StreamOutput:
    """Encodes text and appends it to a binary stream."""

    def __init__(self, stream: BinaryIO, encoding: str = "utf-8") -> None:
        self.stream = stream
        self.encoding = encoding
        self._at_line_start = True

    @property
    def at_line_start(self) -> bool:
        return self._at_line_start

    def write(self, text: str) -> None:
        if not text:
            return
        self.stream.write(text.encode(self.encoding))
        self._at_line_start = text.endswith("\n")


class PrefixedOutput:
    """Writes ``prefix`` at the start of every line.

    The prefix is written lazily, when the first character of a line arrives,
    so a trailing newline never leaves a dangling prefix behind. Empty lines
    get the prefix with trailing whitespace removed.
    """

    def __init__(self, parent: Output, prefix: str, *, at_line_start: bool = True) -> None:
        """Initialize a prefixed output.

        Args:
            parent: Output receiving the prefixed text
            prefix: Text written at the start of each line
            at_line_start: False when the parent already holds the start of the
                current line (e.g. a list marker), so the first line is not
                prefixed
        """
        self.parent = parent
        self.prefix = prefix
        self._at_line_start = at_line_start

    @property
    def at_line_start(self) -> bool:
        return self._at_line_start

    def write(self, text: str) -> None:
        for index, line in enumerate(text.split("\n")):
            if index:
                if self._at_line_start:
                    self.parent.write(self.prefix.rstrip())
                self.parent.write("\n")
                self._at_line_start = True
            if not line:
                continue
            if self._at_line_start:
                self.parent.write(self.prefix)
                self._at_line_start = False
            self.parent.write(line)


class SingleLineOutput:
    """Writes newlines as spaces, for content that must stay on one line."""

    def __init__(self, parent: Output) -> None:
        self.parent = parent

    @property
    def at_line_start(self) -> bool:
        return self.parent.at_line_start

    def write(self, text: str) -> None:
        self.parent.write(text.replace("\n", " "))
