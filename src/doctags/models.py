"""Data models for parsed documentation tags and documents."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass, field
from typing import Any


@dataclass
class Tag:
    """One parsed tag from a doc comment (e.g. an ``@param`` entry)."""

    tag_name: str  # "param", "returns"
    description: Any = ""  # Usually text, transforms may expect otherwise
    starting_line: int = 0
    name: str | None = None  # "@param {string} name ..." -> "name"
    type_expression: str | None = None  # "{string}" -> "string"
    errors: list[str] = field(default_factory=list)  # Non-empty for bad tags

    @property
    def is_bad(self) -> bool:
        """True if the parser could not make sense of this tag."""
        return bool(self.errors)


# A tag that failed upstream parsing; kept for diagnostics only
BadTag = Tag


class TagCollection:
    """Tags parsed from a single doc comment.

    Well-formed tags are indexed by canonical name so that aliases
    (``@return`` for ``@returns``) are merged before extraction.
    Malformed tags are kept separately in ``bad_tags``.

    Example:
        tags = TagCollection(
            [Tag("return", "the result", starting_line=3)],
            aliases={"return": "returns"},
        )
        tags.get_tags("returns")  # [Tag(tag_name="return", ...)]
    """

    def __init__(
        self,
        tags: Iterable[Tag] = (),
        aliases: Mapping[str, str] | None = None,
    ) -> None:
        self._aliases = dict(aliases or {})
        self._tags: list[Tag] = []
        self._by_name: dict[str, list[Tag]] = {}
        self.bad_tags: list[Tag] = []
        for tag in tags:
            self.add_tag(tag)

    def canonical_name(self, tag_name: str) -> str:
        return self._aliases.get(tag_name, tag_name)

    def add_tag(self, tag: Tag) -> None:
        """Add a tag, routing malformed ones to ``bad_tags``."""
        if tag.is_bad:
            self.bad_tags.append(tag)
            return
        self._tags.append(tag)
        self._by_name.setdefault(self.canonical_name(tag.tag_name), []).append(tag)

    def get_tags(self, tag_name: str) -> list[Tag]:
        """Return the well-formed tags for a name (or any of its aliases), in order."""
        return list(self._by_name.get(self.canonical_name(tag_name), []))

    def __iter__(self) -> Iterator[Tag]:
        return iter(self._tags)

    def __len__(self) -> int:
        return len(self._tags)


@dataclass
class Document:
    """A documented item whose properties are filled in from its tags.

    Extracted values live in ``properties`` and are read/written with
    item access (``doc["params"]``). ``id`` and ``name`` are looked up there
    too, so a ``@name`` tag definition names the document.
    """

    file: str | None
    starting_line: int | None
    tags: TagCollection = field(default_factory=TagCollection)
    properties: dict[str, Any] = field(default_factory=dict)

    @property
    def id(self) -> Any:
        return self.properties.get("id")

    @property
    def name(self) -> Any:
        return self.properties.get("name")

    def get(self, key: str, default: Any = None) -> Any:
        return self.properties.get(key, default)

    def __getitem__(self, key: str) -> Any:
        return self.properties[key]

    def __setitem__(self, key: str, value: Any) -> None:
        self.properties[key] = value

    def __contains__(self, key: object) -> bool:
        return key in self.properties
