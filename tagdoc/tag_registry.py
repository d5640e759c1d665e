"""Registry of known tags, their types and aliases."""

import logging
from dataclasses import dataclass
from typing import Any

from tagdoc.errors import ConfigurationError

logger = logging.getLogger(__name__)

TAG_MULTI = "M"  # may repeat, e.g. @param
TAG_ID = "id"  # a single identifier, e.g. @name
TAG_SINGLE = "S"  # a single line of text, e.g. @release
TAG_TYPE = "T"  # @TYPE NAME shorthand, e.g. @function foo
TAG_FLAG = "N"  # presence only, e.g. @local

TAG_TYPES = {TAG_MULTI, TAG_ID, TAG_SINGLE, TAG_TYPE, TAG_FLAG}


@dataclass(frozen=True)
class TagDefinition:
    """How a tag is interpreted."""

    name: str
    type: str
    project_level: bool = False


DEFAULT_TAGS: list[TagDefinition] = [
    TagDefinition("param", TAG_MULTI),
    TagDefinition("see", TAG_MULTI),
    TagDefinition("usage", TAG_MULTI),
    TagDefinition("return", TAG_MULTI),
    TagDefinition("field", TAG_MULTI),
    TagDefinition("author", TAG_MULTI),
    TagDefinition("class", TAG_ID),
    TagDefinition("name", TAG_ID),
    TagDefinition("pragma", TAG_ID),
    TagDefinition("alias", TAG_ID),
    TagDefinition("copyright", TAG_SINGLE),
    TagDefinition("summary", TAG_SINGLE),
    TagDefinition("description", TAG_SINGLE),
    TagDefinition("release", TAG_SINGLE),
    TagDefinition("license", TAG_SINGLE),
    TagDefinition("module", TAG_TYPE, project_level=True),
    TagDefinition("script", TAG_TYPE, project_level=True),
    TagDefinition("function", TAG_TYPE),
    TagDefinition("table", TAG_TYPE),
    TagDefinition("local", TAG_FLAG),
]


class TagRegistry:
    """Known tags plus user aliases, used while extracting tags."""

    def __init__(self, tags: list[TagDefinition] | None = None) -> None:
        """Initialize with the default tag set unless one is given."""
        self.tags: dict[str, TagDefinition] = {}
        self.aliases: dict[str, str] = {}
        for spec in DEFAULT_TAGS if tags is None else tags:
            self.tags[spec.name] = spec

    def add_alias(self, alias: str, tag: str) -> None:
        """Make @alias behave as @tag, e.g. 'p' for 'param'."""
        if alias == tag:
            msg = f"tag alias {alias!r} refers to itself"
            raise ConfigurationError(msg)
        self.aliases[alias] = tag

    def add_tag(self, tag: str, tag_type: str, project_level: bool = False) -> None:
        """Register a new tag; existing tags keep their definition."""
        if tag_type not in TAG_TYPES:
            msg = f"unknown tag type {tag_type!r} for @{tag}"
            raise ConfigurationError(msg)
        if tag in self.tags:
            logger.debug("Tag @%s is already known", tag)
            return
        self.tags[tag] = TagDefinition(tag, tag_type, project_level)

    def canonical(self, tag: str) -> str:
        """Resolve an alias to the tag it stands for."""
        seen = set()
        while tag in self.aliases and tag not in seen:
            seen.add(tag)
            tag = self.aliases[tag]
        return tag

    def tag_type(self, tag: str) -> str | None:
        """Return the type of a known tag, or None for extension tags."""
        spec = self.tags.get(tag)
        return spec.type if spec else None

    def project_level(self, kind: Any) -> bool:
        """Check if a class name introduces a module-like grouping."""
        spec = self.tags.get(kind) if isinstance(kind, str) else None
        return bool(spec and spec.project_level)

    def check_tag(self, tags: dict[str, Any], tag: str) -> str:
        """Resolve aliases and the @TYPE NAME shorthand.

        For a type tag the class is recorded in tags and 'name' is returned,
        so the tag value becomes the item name.
        """
        tag = self.canonical(tag)
        if self.tag_type(tag) == TAG_TYPE:
            tags["class"] = tag
            return "name"
        return tag
