"""Exceptions raised while building extractors and extracting tags."""

from __future__ import annotations


class DocTagsError(Exception):
    """Base exception for doctags operations."""

    def __init__(self, message: str, tag_name: str | None = None):
        super().__init__(message)
        self.tag_name = tag_name


class ConfigurationError(DocTagsError):
    """Raised when a tag definition is malformed (e.g., invalid transforms)."""

    pass


class DocumentError(DocTagsError):
    """Raised when a document's tags violate a tag definition.

    Carries the document location so the offending comment can be found
    without inspecting the extractor.
    """

    def __init__(
        self,
        message: str,
        tag_name: str,
        file: str | None,
        starting_line: int | None,
    ):
        super().__init__(message, tag_name)
        self.file = file
        self.starting_line = starting_line


class MissingTagError(DocumentError):
    """Raised when a required tag is absent from a document."""

    def __init__(self, tag_name: str, file: str | None, starting_line: int | None):
        super().__init__(
            f'Missing tag "{tag_name}" in file "{file}" at line {starting_line}',
            tag_name,
            file,
            starting_line,
        )


class DuplicateTagError(DocumentError):
    """Raised when a single-valued tag (or one of its aliases) appears more than once."""

    def __init__(
        self,
        tag_name: str,
        count: int,
        file: str | None,
        starting_line: int | None,
    ):
        super().__init__(
            f'Only one of "{tag_name}" (or its aliases) allowed. '
            f'There were {count} in file "{file}" at line {starting_line}',
            tag_name,
            file,
            starting_line,
        )
        self.count = count
