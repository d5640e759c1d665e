"""Data model for one parsed source file."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING, Any

from tagdoc.item import Item
from tagdoc.kind_registry import KindMap
from tagdoc.module import Module

if TYPE_CHECKING:
    from tagdoc.run_context import RunContext

logger = logging.getLogger(__name__)


@dataclass
class SourceFile:
    """Items found in one file, and the modules they are grouped into."""

    path: Path
    items: list[Item] = field(default_factory=list)
    modules: list[Module] = field(default_factory=list)

    def new_item(
        self,
        tags: dict[str, Any],
        line: int | None,
        summary: str = "",
        description: str = "",
    ) -> Item:
        """Create an item in discovery order."""
        item = Item(
            tags=tags, summary=summary, description=description, line=line, file=self
        )
        self.items.append(item)
        return item

    def warning(self, msg: str, line: int | None = None) -> None:
        """Log a warning with file and line context."""
        logger.warning("%s:%s: %s", self.path, line, msg)

    def finish(self, context: RunContext) -> None:
        """Finish items and distribute them over this file's modules.

        Module and script items open a new module; other items join the most
        recently opened one. Items seen before any module join the first
        module, or one named after the file when the file declares none.
        """
        this_mod: Module | None = None
        orphans: list[Item] = []
        for item in self.items:
            item.finish(context.tags)
            if context.tags.project_level(item.kind):
                this_mod = Module.from_item(item, context.module_kinds)
                self.modules.append(this_mod)
                for orphan in orphans:
                    this_mod.add_item(orphan)
                orphans = []
            elif this_mod is None:
                orphans.append(item)
            else:
                this_mod.add_item(item)
        if orphans:
            name = context.module_name_for(self.path)
            self.warning(f"no module declared, using {name!r}")
            this_mod = Module(
                name=name,
                kinds=KindMap(context.module_kinds),
                name_inferred=True,
                file=self,
            )
            self.modules.append(this_mod)
            for orphan in orphans:
                this_mod.add_item(orphan)
