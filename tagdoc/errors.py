"""Exceptions raised while extracting documentation."""

from pathlib import Path


class TagdocError(Exception):
    """Base class for all tagdoc failures."""


class ConfigurationError(TagdocError):
    """Raised for a broken configuration or extension registration."""


class UnknownKindError(ConfigurationError):
    """Raised when an item's kind was never registered with a kind registry."""

    def __init__(self, kind: str | None, fieldname: str) -> None:
        """Record the missing kind and the registry it was looked up in."""
        super().__init__(f"unknown {fieldname} kind: {kind!r}")
        self.kind = kind
        self.fieldname = fieldname


class StructuralError(TagdocError):
    """Raised when a source file does not follow the doc comment layout."""

    def __init__(self, path: Path | str, line: int | None, message: str) -> None:
        """Attach file and line context to the message."""
        super().__init__(f"{path}:{line}: {message}")
        self.path = path
        self.line = line
        self.message = message


class SourceDecodeError(StructuralError):
    """Raised when a source file is not valid UTF-8."""
