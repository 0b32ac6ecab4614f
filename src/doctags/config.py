"""Tag definition descriptors and their validation."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from .errors import ConfigurationError


class TagDefinition(BaseModel):
    """Declares how one kind of tag is extracted onto a document.

    Accepts snake_case or camelCase keys, so descriptors written for other
    doc tools load unchanged:

        TagDefinition.model_validate({"name": "param", "multi": True})
        TagDefinition.model_validate({"name": "returns", "docProperty": "returns"})
    """

    model_config = ConfigDict(
        frozen=True,
        populate_by_name=True,
        extra="forbid",
        arbitrary_types_allowed=True,
    )

    name: str = Field(min_length=1)
    doc_property: str | None = Field(default=None, alias="docProperty")
    tag_property: str = Field(default="description", alias="tagProperty")
    required: bool = False
    multi: bool = False
    # Called with the doc when no tag matched; None means "no value"
    default_fn: Callable[[Any], Any] | None = Field(default=None, alias="defaultFn")
    # Function or sequence of functions; shape is checked by build_pipeline
    transforms: Any = None
    aliases: tuple[str, ...] = ()

    @property
    def target_property(self) -> str:
        """Document property the extracted value is written to."""
        return self.doc_property or self.name


def _describe(e: ValidationError) -> str:
    return "; ".join(
        f"{'.'.join(str(p) for p in err['loc']) or 'definition'}: {err['msg']}"
        for err in e.errors(include_context=False)
    )


def load_tag_definition(raw: TagDefinition | Mapping[str, Any]) -> TagDefinition:
    """Validate one descriptor.

    Raises:
        ConfigurationError: If the descriptor has missing or invalid fields.
    """
    if isinstance(raw, TagDefinition):
        return raw
    name = raw.get("name") if isinstance(raw, Mapping) else None
    try:
        return TagDefinition.model_validate(raw)
    except ValidationError as e:
        raise ConfigurationError(
            f"Invalid tag definition, {name} - {_describe(e)}", name
        ) from e


def load_tag_definitions(
    raw: Iterable[TagDefinition | Mapping[str, Any]],
) -> tuple[TagDefinition, ...]:
    """Validate a sequence of descriptors, preserving order."""
    return tuple(load_tag_definition(item) for item in raw)


def alias_map(definitions: Iterable[TagDefinition]) -> dict[str, str]:
    """Map every declared alias to its definition's tag name.

    Suitable for ``TagCollection(tags, aliases=...)``.
    """
    return {
        alias: definition.name
        for definition in definitions
        for alias in definition.aliases
    }
