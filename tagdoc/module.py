"""Data model for a module: a named group of documented items."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from tagdoc.as_list import as_list
from tagdoc.kind_registry import KindMap, KindRegistry
from tagdoc.see_reference import SeeReference
from tagdoc.split_dotted_name import split_dotted_name

if TYPE_CHECKING:
    from tagdoc.item import Item
    from tagdoc.source_file import SourceFile

logger = logging.getLogger(__name__)

LOCAL_KIND = "local-function"


@dataclass
class Module:
    """A module or script with the items declared under it."""

    name: str
    kinds: KindMap
    kind: str = "module"
    summary: str = ""
    description: str = ""
    tags: dict[str, Any] = field(default_factory=dict)
    line: int | None = None
    package: str = ""  # 'pl' for 'pl.utils'
    mod_name: str = ""  # 'utils' for 'pl.utils'
    old_style: bool = False
    name_inferred: bool = False
    items: list[Item] = field(default_factory=list)
    items_by_name: dict[str, Item] = field(default_factory=dict)
    see: list[SeeReference] = field(default_factory=list)
    type: str | None = None  # project section title, set when classified
    file: SourceFile | None = field(default=None, repr=False, compare=False)

    def __post_init__(self) -> None:
        """Derive package and short name from the dotted module name."""
        package, mod_name = split_dotted_name(self.name)
        if package and ":" not in self.name:
            self.package, self.mod_name = package, mod_name
        else:
            self.package, self.mod_name = "", self.name

    @classmethod
    def from_item(cls, item: Item, registry: KindRegistry) -> Module:
        """Promote a finished module seed item to a Module."""
        return cls(
            name=item.name,
            kinds=KindMap(registry),
            kind=item.kind or "module",
            summary=item.summary,
            description=item.description,
            tags=item.tags,
            line=item.line,
            old_style=item.old_style,
            name_inferred=item.name_inferred,
            file=item.file,
        )

    def warning(self, msg: str) -> None:
        """Log a warning with file and line context."""
        path = self.file.path if self.file else "<unknown>"
        logger.warning("%s:%s: %s", path, self.line, msg)

    def add_item(self, item: Item) -> None:
        """Attach an item, shortening 'mod.foo' to 'foo' inside module 'mod'."""
        prefix, short = split_dotted_name(item.name)
        strip = self.tags.get("pragma") != "nostrip"
        own_names = (self.mod_name, self.name, self.tags.get("alias"))
        if prefix and strip and prefix in own_names:
            item.name = short
        item.module = self
        self.items.append(item)
        if item.name in self.items_by_name:
            item.warning(f"{item.name!r} is already documented in module {self.name}")
        else:
            self.items_by_name[item.name] = item
        self.kinds.add(item)

    def merge(self, other: Module) -> None:
        """Extend this module with a later module of the same name."""
        if not self.summary:
            self.summary = other.summary
        if not self.description:
            self.description = other.description
        for tag, value in other.tags.items():
            self.tags.setdefault(tag, value)
        for item in other.items:
            self.add_item(item)

    def mask_locals(self) -> list[Item]:
        """Hide local functions from the module's sections."""
        return self.kinds.hide(LOCAL_KIND)

    def sections(self) -> dict[str, list[Item]]:
        """Return section title -> items for rendering."""
        return self.kinds.sections()

    def resolve_references(
        self,
        modules_by_name: dict[str, Module],
        item_index: dict[str, list[Item]] | None = None,
    ) -> None:
        """Turn @see labels into references to modules and items.

        Unresolved labels are kept as plain text references.
        """
        index = item_index or {}
        holders: list[Any] = [self, *self.items]
        for holder in holders:
            labels = as_list(holder.tags.get("see"))
            holder.see = [
                self._resolve_see(holder, label.strip(), modules_by_name, index)
                for label in labels
                if label.strip()
            ]

    def _resolve_see(
        self,
        holder: Any,
        label: str,
        modules_by_name: dict[str, Module],
        item_index: dict[str, list[Item]],
    ) -> SeeReference:
        # a fully qualified module name
        if label in modules_by_name:
            return SeeReference(label, label)
        packmod, name = split_dotted_name(label)
        if packmod:
            mod_ref = modules_by_name.get(packmod) or modules_by_name.get(
                self.qualify(packmod)
            )
            if mod_ref is None:
                holder.warning(f"module not found: {packmod}")
                return SeeReference(label)
            if name in mod_ref.items_by_name:
                return SeeReference(label, mod_ref.name, name)
            holder.warning(f"function not found: {label} in {mod_ref.name}")
            return SeeReference(label)

        # a plain name: a module in this package, then an item in this module
        sibling = modules_by_name.get(self.qualify(label))
        if sibling is not None:
            return SeeReference(label, sibling.name)
        if label in self.items_by_name:
            return SeeReference(label, self.name, label)
        candidates = item_index.get(label, [])
        if len(candidates) == 1 and candidates[0].module is not None:
            return SeeReference(label, candidates[0].module.name, label)
        holder.warning(f"function not found: {label} in this module")
        return SeeReference(label)

    def qualify(self, name: str) -> str:
        """Qualify a name with this module's package."""
        return f"{self.package}.{name}" if self.package else name
