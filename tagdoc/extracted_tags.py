"""Result of tag extraction for one doc comment."""

from dataclasses import dataclass, field
from typing import Any


@dataclass
class ExtractedTags:
    """Summary, description and tag values of a doc comment."""

    summary: str = ""
    description: str = ""
    tags: dict[str, Any] = field(default_factory=dict)  # tag -> str | list[str]

    @property
    def kind(self) -> str | None:
        """Return the item class named by the tags, if any."""
        value = self.tags.get("class")
        return value[0] if isinstance(value, list) else value

    @property
    def name(self) -> str | None:
        """Return the item name named by the tags, if any."""
        value = self.tags.get("name")
        return value[0] if isinstance(value, list) else value
