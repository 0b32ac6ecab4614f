"""Reporting of tags the parser could not make sense of."""

from __future__ import annotations

import logging
import threading

log = logging.getLogger(__name__)

DESCRIPTION_PREVIEW_LENGTH = 20


def _describe_bad_tag(bad_tag) -> str:
    description = ""
    if isinstance(bad_tag.description, str):
        description = bad_tag.description[:DESCRIPTION_PREVIEW_LENGTH] + "..."
    if bad_tag.name:
        description = f"{bad_tag.name} {description}"
    if bad_tag.type_expression:
        description = f"{{{bad_tag.type_expression}}} {description}"
    return description


def format_bad_tags(doc) -> str:
    """Format all of a document's bad tags as one warning message.

    Example output:
        Invalid tags found in doc "foo", starting at line 10, from file "src/foo.js"
        Line: 12: @param {string} name a parameter that is ...
            * Unterminated type expression
    """
    doc_id = doc.id or doc.name
    label = f' "{doc_id}"' if doc_id else ""
    lines = [
        f"Invalid tags found in doc{label}, "
        f'starting at line {doc.starting_line}, from file "{doc.file}"'
    ]

    for bad_tag in doc.tags.bad_tags:
        lines.append(
            f"Line: {bad_tag.starting_line}: @{bad_tag.tag_name} "
            f"{_describe_bad_tag(bad_tag)}".rstrip()
        )
        for error in bad_tag.errors:
            lines.append(f"    * {error}")

    return "\n".join(lines) + "\n\n"


class LoggingBadTagReporter:
    """Bad-tag sink that logs a document's bad tags once per extraction.

    The extractor reports a document's bad tags after every tag definition,
    so the same text arrives repeatedly while one document is processed.
    A report is skipped when it repeats the previous one for the same
    document object; a new document, or a changed message, is always
    logged. Pass ``dedupe=False`` to log every report.

    Safe to share between threads extracting different documents.
    """

    def __init__(self, logger: logging.Logger | None = None, dedupe: bool = True):
        self.logger = logger or log
        self.dedupe = dedupe
        self._last = threading.local()

    def __call__(self, doc, message: str) -> None:
        if self.dedupe:
            # Keyed on the doc object itself, not id(doc)
            last = getattr(self._last, "report", None)
            if last is not None and last[0] is doc and last[1] == message:
                return
            self._last.report = (doc, message)
        self.logger.warning(message)

    def reset(self) -> None:
        """Forget the last report made on this thread."""
        self._last.report = None
