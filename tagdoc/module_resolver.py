"""Second pass: merge modules across files and resolve references."""

import logging

from tagdoc.item import Item
from tagdoc.kind_registry import KindMap
from tagdoc.module import Module
from tagdoc.run_context import RunContext
from tagdoc.source_file import SourceFile

logger = logging.getLogger(__name__)


class ModuleResolver:
    """Builds the project's module list once every file has been parsed."""

    def __init__(self, context: RunContext) -> None:
        """Initialize with the run's registries and settings."""
        self.context = context

    def resolve(self, files: list[SourceFile]) -> list[Module]:
        """Merge, cross-reference, classify and sort the modules of all files."""
        modules = self.merge_modules(files)
        by_name = {mod.name: mod for mod in modules}
        item_index = build_item_index(modules)
        project = KindMap(self.context.project_kinds)
        for mod in modules:
            mod.resolve_references(by_name, item_index)
            project.add(mod)
        if not self.context.show_locals:
            for mod in modules:
                hidden = mod.mask_locals()
                if hidden:
                    logger.debug(
                        "Hiding %d local functions in %s", len(hidden), mod.name
                    )
        modules.sort(key=lambda m: m.name)
        self.context.modules = modules
        self.context.modules_by_name = by_name
        self.context.project = project
        return modules

    def merge_modules(self, files: list[SourceFile]) -> list[Module]:
        """Fold same-named modules into the first one seen, in file order."""
        modules: list[Module] = []
        by_name: dict[str, Module] = {}
        for source_file in files:
            for mod in source_file.modules:
                base = by_name.get(mod.name)
                if base is None:
                    by_name[mod.name] = mod
                    modules.append(mod)
                    continue
                logger.info(
                    "Merging module %s from %s into %s",
                    mod.name,
                    source_file.path,
                    base.file.path if base.file else "<unknown>",
                )
                base.merge(mod)
        return modules


def build_item_index(modules: list[Module]) -> dict[str, list[Item]]:
    """Index every item in the project by its short name."""
    index: dict[str, list[Item]] = {}
    for mod in modules:
        for item in mod.items:
            index.setdefault(item.name, []).append(item)
    return index
