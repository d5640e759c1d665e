"""Data model for one logical doc comment block."""

from dataclasses import dataclass, field

from tagdoc.declaration import Declaration


@dataclass
class CommentBlock:
    """Trimmed text of consecutive comments and what follows them."""

    text: str
    line: int
    first: bool = False  # the first comment of the file
    declaration: Declaration = field(default_factory=Declaration)

    @property
    def has_tags(self) -> bool:
        """Check if the block text might carry tags."""
        return "@" in self.text
