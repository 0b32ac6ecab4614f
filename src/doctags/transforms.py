"""Tag value transforms and the pipeline that chains them.

A transform is a function ``(doc, tag, value) -> value``. Tag definitions
declare zero, one or a sequence of transforms; ``build_pipeline`` turns that
declaration into a single callable once, at setup time.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from .errors import ConfigurationError

Transform = Callable[[Any, Any, Any], Any]


def identity(doc, tag, value):
    return value


@dataclass(frozen=True)
class TransformPipeline:
    """Transforms applied left-to-right, each receiving the previous value.

    No stages means no transform, one stage a single transform, more a
    sequence. The shape is checked once in ``from_config``.
    """

    stages: tuple[Transform, ...] = ()

    @classmethod
    def from_config(cls, transforms: Any, tag_name: str) -> TransformPipeline:
        """Validate a transform declaration from a tag definition.

        Raises:
            ConfigurationError: If transforms is neither a function nor a
                sequence of functions.
        """
        if not transforms:
            return cls()
        if callable(transforms):
            return cls((transforms,))
        if isinstance(transforms, (list, tuple)) and all(
            callable(t) for t in transforms
        ):
            return cls(tuple(transforms))
        raise ConfigurationError(
            f"Invalid transform in tag definition, {tag_name} - "
            "transform must be a function or a sequence of functions",
            tag_name,
        )

    def __call__(self, doc, tag, value):
        for stage in self.stages:
            value = stage(doc, tag, value)
        return value


def build_pipeline(transforms: Any, tag_name: str) -> Transform:
    """Build one ``(doc, tag, value) -> value`` function from a declaration.

    Args:
        transforms: None/False (no transform), a function, or a list/tuple
            of functions to apply in order
        tag_name: Name of the declaring tag definition, used in errors

    Returns:
        The identity function, the given function unchanged, or a
        TransformPipeline folding the sequence.
    """
    pipeline = TransformPipeline.from_config(transforms, tag_name)
    if not pipeline.stages:
        return identity
    if callable(transforms):
        return transforms
    return pipeline


# Built-in transforms


def trim_whitespace(doc, tag, value):
    """Strip surrounding whitespace from text values."""
    if isinstance(value, str):
        return value.strip()
    return value


def whole_tag(doc, tag, value):
    """Use the tag object itself as the value (e.g. for ``@param``)."""
    return tag


def to_bool(doc, tag, value):
    """Presence flag: a matched tag means True (e.g. ``@private``)."""
    return True


def split_lines(doc, tag, value):
    """Split text into stripped, non-empty lines."""
    if not isinstance(value, str):
        return value
    return [line.strip() for line in value.splitlines() if line.strip()]
