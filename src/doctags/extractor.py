"""Extraction of tag values onto documents."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Mapping
from typing import Any

from .config import TagDefinition
from .definitions import ResolvedTagDefinition, normalize_tag_definitions
from .diagnostics import LoggingBadTagReporter, format_bad_tags
from .errors import DuplicateTagError, MissingTagError

log = logging.getLogger(__name__)

BadTagReporter = Callable[[Any, str], None]  # (doc, message) -> None
Extractor = Callable[[Any], None]


def _collection(doc, doc_property: str) -> list:
    values = doc.get(doc_property)
    if values is None:
        values = doc[doc_property] = []
    return values


def _extract_one(doc, tag_def: ResolvedTagDefinition) -> None:
    doc_property = tag_def.doc_property
    log.debug(f"extracting tags for: {tag_def.name}")
    log.debug(f" - to be attached to doc.{doc_property}")

    tags = doc.tags.get_tags(tag_def.name)

    if not tags:
        if tag_def.required:
            raise MissingTagError(tag_def.name, doc.file, doc.starting_line)

        if tag_def.default_fn is None:
            return

        log.debug(" - tag not found, applying default value function")
        default_value = tag_def.default_fn(doc)
        if default_value is None:
            return

        if tag_def.multi:
            # Appended as one element, even if it is itself a list
            _collection(doc, doc_property).append(default_value)
        else:
            doc[doc_property] = default_value
        return

    if tag_def.multi:
        values = _collection(doc, doc_property)
        for tag in tags:
            values.append(tag_def.get_property(doc, tag))
        return

    if len(tags) > 1:
        raise DuplicateTagError(tag_def.name, len(tags), doc.file, doc.starting_line)

    doc[doc_property] = tag_def.get_property(doc, tags[0])


def build_extractor(
    tag_defs: Iterable[ResolvedTagDefinition],
    report_bad_tags: BadTagReporter | None = None,
) -> Extractor:
    """Create a function that extracts tag values onto a document.

    The returned function walks the definitions in order, writing each
    value to ``doc[tag_def.doc_property]``. After each definition, any bad
    tags on the document are formatted and passed to ``report_bad_tags``.

    Args:
        tag_defs: Resolved definitions from normalize_tag_definitions
        report_bad_tags: Sink called with (doc, message); defaults to a
            LoggingBadTagReporter

    Returns:
        ``extract(doc)``, which mutates doc and returns None. It raises
        MissingTagError or DuplicateTagError and stops at the offending
        definition if the document breaks one.
    """
    tag_defs = tuple(tag_defs)
    report = report_bad_tags if report_bad_tags is not None else LoggingBadTagReporter()

    def extract(doc) -> None:
        for tag_def in tag_defs:
            _extract_one(doc, tag_def)
            if doc.tags.bad_tags:
                report(doc, format_bad_tags(doc))

    return extract


def create_tag_extractor(
    tag_definitions: Iterable[TagDefinition | Mapping[str, Any]],
    default_transforms: Any = None,
    report_bad_tags: BadTagReporter | None = None,
) -> Extractor:
    """Normalize tag definitions and build an extractor in one step.

    Example:
        extract = create_tag_extractor(
            [{"name": "param", "multi": True}, {"name": "returns"}],
            default_transforms=trim_whitespace,
        )
        extract(doc)
        doc["param"]  # ["first", "second"]

    Raises:
        ConfigurationError: If any definition or transform is invalid.
    """
    return build_extractor(
        normalize_tag_definitions(tag_definitions, default_transforms),
        report_bad_tags,
    )


def extract_documents(extract: Extractor, docs: Iterable[Any]) -> list[Any]:
    """Run an extractor over documents, stopping at the first invalid one.

    Returns:
        The processed documents, in order
    """
    processed = []
    for doc in docs:
        extract(doc)
        processed.append(doc)
    log.debug(f"extracted tags from {len(processed)} documents")
    return processed
