"""Standard tag definitions for API documentation comments."""

from __future__ import annotations

from .config import TagDefinition, load_tag_definitions
from .transforms import split_lines, to_bool, trim_whitespace, whole_tag


def _default_kind(doc):
    # Documents that declare @module describe a module, anything else a member
    if doc.tags.get_tags("module"):
        return "module"
    return None


STANDARD_TAG_DEFINITIONS: tuple[TagDefinition, ...] = load_tag_definitions(
    [
        {"name": "name", "transforms": trim_whitespace},
        {"name": "module", "transforms": trim_whitespace},
        {"name": "kind", "transforms": trim_whitespace, "defaultFn": _default_kind},
        {"name": "description", "aliases": ("desc",)},
        {
            "name": "param",
            "aliases": ("arg", "argument"),
            "docProperty": "params",
            "multi": True,
            "transforms": whole_tag,
        },
        {"name": "returns", "aliases": ("return",), "transforms": whole_tag},
        {"name": "example", "multi": True, "docProperty": "examples"},
        # Each @see tag yields its own list of references, one per line
        {"name": "see", "multi": True, "transforms": [trim_whitespace, split_lines]},
        {"name": "deprecated"},
        {"name": "private", "transforms": to_bool},
    ]
)
