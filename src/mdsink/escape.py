"""Markdown escaping for literal text.

Each escaping context has a fixed set of characters that are written with a
backslash in front of them. Everything else passes through untouched.
"""

import re
from collections.abc import Iterator
from enum import Enum
from functools import lru_cache
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from mdsink.output import Output

# Backslash and emphasis markers are escaped in every context except code.
BASE_ESCAPES = frozenset("\\`*_")

# "<" opens autolinks and HTML, "&" entity references.
NORMAL_ESCAPES = BASE_ESCAPES | frozenset("{}[]()#+-.!<>~=&|")
BRACKET_ESCAPES = BASE_ESCAPES | frozenset("[]<&")
PARENTHESIS_ESCAPES = BASE_ESCAPES | frozenset("().<&")

_UNESCAPE_PATTERN = re.compile(r"\\([!-/:-@\[-`{-~])")


class Escaping(str, Enum):
    """Escaping context threaded down the element tree."""

    NORMAL = "normal"
    INLINE_CODE = "inline_code"
    BRACKETS = "brackets"  # link text
    PARENTHESES = "parentheses"  # link address

    @property
    def escapes(self) -> frozenset[str]:
        """Characters that get a backslash in this context."""
        return _ESCAPE_SETS[self]


_ESCAPE_SETS = {
    Escaping.NORMAL: NORMAL_ESCAPES,
    Escaping.INLINE_CODE: frozenset(),
    Escaping.BRACKETS: BRACKET_ESCAPES,
    Escaping.PARENTHESES: PARENTHESIS_ESCAPES,
}


@lru_cache(maxsize=None)
def _special_pattern(escaping: Escaping) -> re.Pattern[str]:
    chars = "".join(sorted(escaping.escapes))
    return re.compile(f"[{re.escape(chars)}]")


def _escaped_pieces(fragment: str, escaping: Escaping) -> Iterator[str]:
    """Yield the output of escaping ``fragment`` in a single forward scan."""
    if not escaping.escapes:
        if fragment:
            yield fragment
        return

    pattern = _special_pattern(escaping)
    pos = 0
    while (match := pattern.search(fragment, pos)) is not None:
        if match.start() > pos:
            yield fragment[pos : match.start()]
        yield "\\" + match.group()
        pos = match.end()
    if pos < len(fragment):
        yield fragment[pos:]


def write_escaped(output: "Output", fragment: str, escaping: Escaping) -> None:
    """Write a fragment to ``output``, escaping it for the given context."""
    for piece in _escaped_pieces(fragment, escaping):
        output.write(piece)


def escape(text: str, escaping: Escaping = Escaping.NORMAL) -> str:
    """Return ``text`` escaped for the given context."""
    return "".join(_escaped_pieces(text, escaping))


def unescape(text: str) -> str:
    """Remove backslash escapes in front of ASCII punctuation.

    This is the CommonMark unescape rule. It inverts :func:`escape` for every
    context except ``INLINE_CODE``, which escapes nothing.
    """
    return _UNESCAPE_PATTERN.sub(r"\1", text)
