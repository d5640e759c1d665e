"""Ordered registries mapping kinds to display sections.

A single registry type serves both scopes: the module scope groups items by
their class into a ``section`` (Functions, Tables, ...), the project scope
groups modules into a ``type`` (Modules, Scripts). Only the discriminant
field name and the registered kinds differ.
"""

from dataclasses import dataclass
from typing import Any

from tagdoc.errors import UnknownKindError

MODULE_FIELDNAME = "section"
PROJECT_FIELDNAME = "type"


@dataclass(frozen=True)
class KindEntry:
    """Display information for one kind."""

    kind: str
    title: str
    child_title: str | None = None  # e.g. 'Parameters' for functions


class KindRegistry:
    """Ordered kind -> (title, child title) mapping."""

    def __init__(self, fieldname: str) -> None:
        """Initialize an empty registry writing to the given item attribute."""
        self.fieldname = fieldname
        self._entries: dict[str, KindEntry] = {}

    def register(self, kind: str, title: str, child_title: str | None = None) -> None:
        """Register a kind; re-registering replaces the title in place."""
        self._entries[kind] = KindEntry(kind, title, child_title)

    def __contains__(self, kind: object) -> bool:
        """Check if a kind has been registered."""
        return kind in self._entries

    def __len__(self) -> int:
        """Return the number of registered kinds."""
        return len(self._entries)

    def entries(self) -> list[KindEntry]:
        """Return registered kinds in registration order."""
        return list(self._entries.values())

    def lookup(self, kind: str | None) -> KindEntry:
        """Return the entry for a kind or raise UnknownKindError."""
        entry = self._entries.get(kind) if kind is not None else None
        if entry is None:
            raise UnknownKindError(kind, self.fieldname)
        return entry

    def classify(self, member: Any) -> KindEntry:
        """Classify a member by its ``kind`` and tag it with the title."""
        entry = self.lookup(member.kind)
        setattr(member, self.fieldname, entry.title)
        return entry


class KindMap:
    """Members of one scope grouped into the sections of a registry."""

    def __init__(self, registry: KindRegistry) -> None:
        """Initialize empty groups over the given registry."""
        self.registry = registry
        self._groups: dict[str, list[Any]] = {}

    def add(self, member: Any) -> KindEntry:
        """Classify a member and append it to its section."""
        entry = self.registry.classify(member)
        self._groups.setdefault(entry.kind, []).append(member)
        return entry

    def hide(self, kind: str) -> list[Any]:
        """Remove a section, returning the members it held."""
        return self._groups.pop(kind, [])

    def sections(self) -> dict[str, list[Any]]:
        """Return non-empty sections, title -> members, in registry order."""
        out: dict[str, list[Any]] = {}
        for entry in self.registry.entries():
            members = self._groups.get(entry.kind)
            if members:
                out.setdefault(entry.title, []).extend(members)
        return out

    def child_title(self, title: str) -> str | None:
        """Return the sub-field title (e.g. Parameters) for a section title."""
        for entry in self.registry.entries():
            if entry.title == title:
                return entry.child_title
        return None


def module_kinds() -> KindRegistry:
    """Return the registry for items inside a module."""
    registry = KindRegistry(MODULE_FIELDNAME)
    registry.register("function", "Functions", "Parameters")
    registry.register("table", "Tables", "Fields")
    registry.register("field", "Fields")
    registry.register("local-function", "Local Functions", "Parameters")
    return registry


def project_kinds() -> KindRegistry:
    """Return the registry for modules across the project."""
    registry = KindRegistry(PROJECT_FIELDNAME)
    registry.register("module", "Modules")
    registry.register("script", "Scripts")
    return registry
