"""Pytest fixtures for doctags tests."""

import pytest

from doctags import Document, Tag, TagCollection


@pytest.fixture
def make_doc():
    """
    Factory for documents with parsed tags.

    Example:
        def test_param(make_doc):
            doc = make_doc(Tag("param", "first", starting_line=2))
            assert doc.tags.get_tags("param")[0].description == "first"
    """

    def _make_doc(
        *tags,
        file="src/example.js",
        starting_line=10,
        aliases=None,
        **properties,
    ):
        return Document(
            file=file,
            starting_line=starting_line,
            tags=TagCollection(tags, aliases=aliases),
            properties=dict(properties),
        )

    return _make_doc


@pytest.fixture
def bad_tag():
    """A tag the parser rejected."""
    return Tag(
        "param",
        "the options passed to the constructor",
        starting_line=12,
        name="options",
        type_expression="Object",
        errors=["Unterminated type expression"],
    )


@pytest.fixture
def reports():
    """Bad-tag sink that records every (doc, message) it receives."""

    class Recorder(list):
        def __call__(self, doc, message):
            self.append((doc, message))

    return Recorder()
