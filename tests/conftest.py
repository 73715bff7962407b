"""Pytest configuration and shared fixtures"""

import os

import pytest

from xml_suggest.config import Config
from xml_suggest.models import Position, Range
from xml_suggest.nodes import ElementNode


class FakeDocument:
    """In-memory DocumentResolver over a small XML snippet.

    Elements are registered explicitly with add_element(), which locates the
    name tokens of the start and end tags in the text.
    """

    def __init__(self, text: str):
        self.text = text
        self._spans = []  # (start, end, node)

    def position_at(self, offset: int) -> Position:
        line = self.text.count("\n", 0, offset)
        line_start = self.text.rfind("\n", 0, offset) + 1
        return Position(line=line, character=offset - line_start)

    def offset_at(self, position: Position) -> int:
        lines = self.text.split("\n")
        if position.line >= len(lines):
            raise IndexError(f"Line {position.line} outside document")
        preceding = sum(len(line) + 1 for line in lines[: position.line])
        return preceding + position.character

    def node_at(self, offset: int):
        containing = [
            (start, node) for start, end, node in self._spans if start <= offset < end
        ]
        if not containing:
            return None
        return max(containing, key=lambda item: item[0])[1]

    def add_element(
        self, start: int, parent: ElementNode | None = None, namespace_uri=None
    ) -> ElementNode:
        """Register the element whose start tag opens at `start`."""
        name_start = start + 1
        name_end = name_start
        while self.text[name_end] not in " \t\n/>":
            name_end += 1
        qname = self.text[name_start:name_end]
        prefix, _, local_name = qname.rpartition(":")

        tag_end = self.text.index(">", name_end)
        end_tag_name = None
        if self.text[tag_end - 1] == "/":
            span_end = tag_end + 1
        else:
            close = self.text.index(f"</{qname}>", tag_end)
            end_tag_name = Range(
                start=self.position_at(close + 2),
                end=self.position_at(close + 2 + len(qname)),
            )
            span_end = close + len(qname) + 3

        node = ElementNode(
            local_name=local_name,
            start=start,
            start_tag_name=Range(
                start=self.position_at(name_start), end=self.position_at(name_end)
            ),
            end_tag_name=end_tag_name,
            prefix=prefix or None,
            namespace_uri=namespace_uri,
            parent=parent,
        )
        self._spans.append((start, span_end, node))
        return node

    def add_node(self, node, end: int):
        self._spans.append((node.start, end, node))
        return node


class FakeContentModel:
    """In-memory ContentModelProvider recording the lookups it serves."""

    def __init__(self, children=None, namespaces=None):
        self.children = children or {}  # parent local name -> names
        self.namespaces = namespaces or {}  # namespace URI -> names
        self.calls = []

    def legal_child_names(self, parent, at_offset):
        self.calls.append(("legal_child_names", parent.local_name, at_offset))
        return self.children.get(parent.local_name)

    def all_element_names(self, namespace_uri):
        self.calls.append(("all_element_names", namespace_uri))
        return self.namespaces.get(namespace_uri)


@pytest.fixture
def make_document():
    """Factory fixture building FakeDocument instances"""
    return FakeDocument


@pytest.fixture
def make_content_model():
    """Factory fixture building FakeContentModel instances"""
    return FakeContentModel


@pytest.fixture
def clean_env():
    """Fixture that temporarily clears XMLSUGGEST_* environment variables.

    This ensures Config tests see the true defaults without interference
    from environment variables that might be set in the user's shell.
    """
    suggest_vars = {
        key: value
        for key, value in os.environ.items()
        if key.upper().startswith("XMLSUGGEST_")
    }

    for key in suggest_vars:
        os.environ.pop(key, None)

    try:
        yield
    finally:
        for key in list(os.environ):
            if key.upper().startswith("XMLSUGGEST_"):
                os.environ.pop(key, None)
        for key, value in suggest_vars.items():
            os.environ[key] = value


@pytest.fixture
def clean_config(clean_env):
    """Fixture that provides a Config instance with clean environment."""
    return Config()
