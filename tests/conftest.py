"""Shared pytest fixtures for mdsink tests.

Provides rendering helpers and isolates tests from MDSINK_* settings.
"""

from __future__ import annotations

import io
from collections.abc import Callable, Iterator

import pytest

from mdsink import Document, Element, Escaping, MdsinkSettings, StreamOutput, write_element
from mdsink.config import clear_settings_cache


@pytest.fixture(autouse=True)
def clean_settings(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Drop MDSINK_* variables and the cached settings around each test."""
    for name in ("MDSINK_ENCODING", "MDSINK_BULLET", "MDSINK_FENCE_CHAR"):
        monkeypatch.delenv(name, raising=False)
    clear_settings_cache()
    yield
    clear_settings_cache()


@pytest.fixture
def render() -> Callable[..., str]:
    """Write top-level elements to a fresh document and return the text.

    Returns:
        Function taking elements (or strings) and returning the document text
    """

    def _render(*elements: Element | str) -> str:
        doc = Document(io.BytesIO(), settings=MdsinkSettings())
        doc.write_all(*elements)
        return doc.into_inner().getvalue().decode("utf-8")

    return _render


@pytest.fixture
def render_inline() -> Callable[..., str]:
    """Write a single element as a child (inner=True) and return the text.

    Returns:
        Function taking an element and an optional escaping context
    """

    def _render_inline(element: Element, escaping: Escaping = Escaping.NORMAL) -> str:
        stream = io.BytesIO()
        write_element(element, StreamOutput(stream), True, escaping)
        return stream.getvalue().decode("utf-8")

    return _render_inline
