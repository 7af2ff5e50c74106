"""Tests for stream and prefixed outputs."""

import io

from mdsink import Output, PrefixedOutput, SingleLineOutput, StreamOutput


class TestStreamOutput:
    """Tests for StreamOutput."""

    def test_encodes_utf8(self) -> None:
        stream = io.BytesIO()
        StreamOutput(stream).write("héllo")
        assert stream.getvalue() == b"h\xc3\xa9llo"

    def test_custom_encoding(self) -> None:
        stream = io.BytesIO()
        StreamOutput(stream, encoding="latin-1").write("é")
        assert stream.getvalue() == b"\xe9"

    def test_tracks_line_start(self) -> None:
        output = StreamOutput(io.BytesIO())
        assert output.at_line_start is True
        output.write("a")
        assert output.at_line_start is False
        output.write("\n")
        assert output.at_line_start is True
        output.write("")
        assert output.at_line_start is True

    def test_satisfies_protocol(self) -> None:
        assert isinstance(StreamOutput(io.BytesIO()), Output)


class TestPrefixedOutput:
    """Tests for PrefixedOutput."""

    def _pair(self) -> tuple[io.BytesIO, StreamOutput]:
        stream = io.BytesIO()
        return stream, StreamOutput(stream)

    def test_prefixes_each_line(self) -> None:
        stream, parent = self._pair()
        PrefixedOutput(parent, "> ").write("a\nb\n")
        assert stream.getvalue() == b"> a\n> b\n"

    def test_prefix_is_lazy(self) -> None:
        stream, parent = self._pair()
        output = PrefixedOutput(parent, "> ")
        output.write("a\n")
        assert stream.getvalue() == b"> a\n"
        assert output.at_line_start is True

    def test_empty_lines_strip_prefix(self) -> None:
        stream, parent = self._pair()
        PrefixedOutput(parent, "> ").write("a\n\nb")
        assert stream.getvalue() == b"> a\n>\n> b"

    def test_indent_leaves_empty_lines_empty(self) -> None:
        stream, parent = self._pair()
        PrefixedOutput(parent, "  ").write("a\n\nb")
        assert stream.getvalue() == b"  a\n\n  b"

    def test_continuation_after_marker(self) -> None:
        stream, parent = self._pair()
        parent.write("- ")
        PrefixedOutput(parent, "  ", at_line_start=False).write("a\nb")
        assert stream.getvalue() == b"- a\n  b"

    def test_split_writes(self) -> None:
        stream, parent = self._pair()
        output = PrefixedOutput(parent, "> ")
        for piece in ["a", "b\n", "c"]:
            output.write(piece)
        assert stream.getvalue() == b"> ab\n> c"

    def test_nested_prefixes(self) -> None:
        stream, parent = self._pair()
        inner = PrefixedOutput(PrefixedOutput(parent, "> "), "> ")
        inner.write("x\n\ny\n")
        assert stream.getvalue() == b"> > x\n> >\n> > y\n"


class TestSingleLineOutput:
    """Tests for SingleLineOutput."""

    def test_newlines_become_spaces(self) -> None:
        stream = io.BytesIO()
        SingleLineOutput(StreamOutput(stream)).write("a\nb\n")
        assert stream.getvalue() == b"a b "

    def test_line_start_follows_parent(self) -> None:
        parent = StreamOutput(io.BytesIO())
        output = SingleLineOutput(parent)
        assert output.at_line_start
        output.write("x")
        assert not output.at_line_start
        assert isinstance(output, Output)
