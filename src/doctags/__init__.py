"""doctags - Bind parsed documentation tags to document properties."""

from doctags.config import (
    TagDefinition,
    alias_map,
    load_tag_definition,
    load_tag_definitions,
)
from doctags.definitions import ResolvedTagDefinition, normalize_tag_definitions
from doctags.diagnostics import LoggingBadTagReporter, format_bad_tags
from doctags.errors import (
    ConfigurationError,
    DocTagsError,
    DocumentError,
    DuplicateTagError,
    MissingTagError,
)
from doctags.extractor import build_extractor, create_tag_extractor, extract_documents
from doctags.models import BadTag, Document, Tag, TagCollection
from doctags.tagdefs import STANDARD_TAG_DEFINITIONS
from doctags.transforms import (
    TransformPipeline,
    build_pipeline,
    split_lines,
    to_bool,
    trim_whitespace,
    whole_tag,
)

__all__ = [
    "BadTag",
    "ConfigurationError",
    "DocTagsError",
    "Document",
    "DocumentError",
    "DuplicateTagError",
    "LoggingBadTagReporter",
    "MissingTagError",
    "ResolvedTagDefinition",
    "STANDARD_TAG_DEFINITIONS",
    "Tag",
    "TagCollection",
    "TagDefinition",
    "TransformPipeline",
    "alias_map",
    "build_extractor",
    "build_pipeline",
    "create_tag_extractor",
    "extract_documents",
    "format_bad_tags",
    "load_tag_definition",
    "load_tag_definitions",
    "normalize_tag_definitions",
    "split_lines",
    "to_bool",
    "trim_whitespace",
    "whole_tag",
]
