"""Normalization of tag definitions into their resolved, immutable form."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Mapping
from dataclasses import dataclass
from typing import Any

from .config import TagDefinition, load_tag_definition
from .transforms import Transform, build_pipeline

log = logging.getLogger(__name__)

DEFAULT_TRANSFORMS_NAME = "<default transforms>"


@dataclass(frozen=True)
class ResolvedTagDefinition:
    """A validated tag definition with its property getter attached."""

    definition: TagDefinition
    get_property: Callable[[Any, Any], Any]  # (doc, tag) -> value

    @property
    def name(self) -> str:
        return self.definition.name

    @property
    def doc_property(self) -> str:
        return self.definition.target_property

    @property
    def required(self) -> bool:
        return self.definition.required

    @property
    def multi(self) -> bool:
        return self.definition.multi

    @property
    def default_fn(self) -> Callable[[Any], Any] | None:
        return self.definition.default_fn


def _property_getter(
    tag_property: str, transform: Transform, default_transform: Transform
) -> Callable[[Any, Any], Any]:
    def get_property(doc, tag):
        value = getattr(tag, tag_property, None)
        value = transform(doc, tag, value)
        return default_transform(doc, tag, value)

    return get_property


def normalize_tag_definitions(
    tag_definitions: Iterable[TagDefinition | Mapping[str, Any]],
    default_transforms: Any = None,
) -> tuple[ResolvedTagDefinition, ...]:
    """Resolve tag definitions for extraction.

    Each definition's own transforms run first, then the shared default
    transforms. Caller-supplied descriptors are not modified.

    Args:
        tag_definitions: Descriptors (dicts or TagDefinition), in the order
            they should be applied to each document
        default_transforms: Function or sequence of functions applied to
            every extracted value

    Returns:
        Tuple of ResolvedTagDefinition in input order

    Raises:
        ConfigurationError: If a descriptor or any transform declaration is
            invalid.
    """
    default_transform = build_pipeline(default_transforms, DEFAULT_TRANSFORMS_NAME)

    resolved = []
    for raw in tag_definitions:
        definition = load_tag_definition(raw)
        transform = build_pipeline(definition.transforms, definition.name)
        resolved.append(
            ResolvedTagDefinition(
                definition=definition,
                get_property=_property_getter(
                    definition.tag_property, transform, default_transform
                ),
            )
        )

    log.debug(f"normalized {len(resolved)} tag definitions")
    return tuple(resolved)
