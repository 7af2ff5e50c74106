"""Document sink: writes top-level elements to a binary stream."""

from __future__ import annotations

import logging
from typing import BinaryIO

from mdsink.config import MdsinkSettings, get_settings
from mdsink.elements import BLOCK_KINDS, Element, ElementKind, as_element
from mdsink.escape import Escaping
from mdsink.output import StreamOutput
from mdsink.writer import BLOCK_SEPARATOR, write_element

logger = logging.getLogger(__name__)

# Kinds that may not continue a line left open by a top-level link
_LINE_START_KINDS = BLOCK_KINDS | {ElementKind.HEADING, ElementKind.PARAGRAPH}


class Document:
    """Markdown document written straight to a stream.

    Example:
        doc = Document(io.BytesIO())
        doc.write(heading("Title"))
        doc.write(paragraph("Body text ").append(link("docs", "https://example.com")))
        print(doc.into_inner().getvalue().decode())

    Nothing is buffered: each ``write`` call appends to the stream right away.
    When a write fails, whatever was written before the failure stays in the
    stream.
    """

    def __init__(self, stream: BinaryIO, settings: MdsinkSettings | None = None) -> None:
        self.settings = settings or get_settings()
        self._output = StreamOutput(stream, encoding=self.settings.encoding)
        self._after_heading = False

    @property
    def stream(self) -> BinaryIO:
        return self._output.stream

    def write(self, element: Element | str) -> Document:
        """Write one top-level element.

        Strings are written as plain text.

        Raises:
            CompositionError: The element tree cannot be rendered
            OSError: The stream failed; the error is passed on unchanged
        """
        element = as_element(element)
        logger.debug("Writing %s element", element.kind.value)

        is_heading = element.kind is ElementKind.HEADING
        if self._after_heading and not is_heading:
            # Headings stack tightly; anything else is set off by a blank line
            self._output.write("\n")
        elif not self._output.at_line_start and element.kind in _LINE_START_KINDS:
            self._output.write(BLOCK_SEPARATOR)

        write_element(element, self._output, False, Escaping.NORMAL)
        self._after_heading = is_heading
        return self

    def write_all(self, *elements: Element | str) -> Document:
        """Write several top-level elements in order."""
        for element in elements:
            self.write(element)
        return self

    def into_inner(self) -> BinaryIO:
        """Return the underlying stream."""
        return self._output.stream
