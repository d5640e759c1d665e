"""State shared by every stage of one extraction run."""

import logging
from dataclasses import dataclass, field
from pathlib import Path

from tagdoc.errors import ConfigurationError
from tagdoc.kind_registry import KindMap, KindRegistry, module_kinds, project_kinds
from tagdoc.language_registry import LanguageRegistry
from tagdoc.module import Module
from tagdoc.source_file import SourceFile
from tagdoc.tag_registry import TAG_TYPE, TagRegistry
from tagdoc.this_module_name import this_module_name

logger = logging.getLogger(__name__)


@dataclass
class RunContext:
    """Registries, settings and accumulated results of a run.

    The extension hooks (``alias``, ``add_section``, ``new_type`` and
    ``add_language_extension``) must be called before any file is parsed.
    """

    tags: TagRegistry = field(default_factory=TagRegistry)
    module_kinds: KindRegistry = field(default_factory=module_kinds)
    project_kinds: KindRegistry = field(default_factory=project_kinds)
    languages: LanguageRegistry = field(default_factory=LanguageRegistry)
    package_base: Path | None = None
    show_locals: bool = False
    strict: bool = False
    files: list[SourceFile] = field(default_factory=list)
    modules: list[Module] = field(default_factory=list)
    modules_by_name: dict[str, Module] = field(default_factory=dict)
    project: KindMap | None = None

    def alias(self, alias: str, tag: str) -> None:
        """Make @alias an alternative spelling of @tag."""
        self.tags.add_alias(alias, tag)

    def add_section(self, kind: str, title: str, subtitle: str | None = None) -> None:
        """Register (or retitle) a section for items of the given class."""
        self.module_kinds.register(kind, title, subtitle)

    def new_type(
        self,
        tag: str,
        header: str,
        project_level: bool = False,
        subfield: str | None = None,
    ) -> None:
        """Add a @TYPE NAME tag with its own section.

        Project level types group whole modules, like @module and @script.
        """
        if not tag or not header:
            msg = f"new type needs a tag and a header, got {tag!r} / {header!r}"
            raise ConfigurationError(msg)
        self.tags.add_tag(tag, TAG_TYPE, project_level)
        if project_level:
            self.project_kinds.register(tag, header, subfield)
        else:
            self.module_kinds.register(tag, header, subfield)

    def add_language_extension(self, ext: str, lang: str) -> None:
        """Parse files with the given extension as 'lua' or 'c'."""
        self.languages.add_language_extension(ext, lang)

    def module_name_for(self, path: Path) -> str:
        """Return the module name deduced from a file's path."""
        return this_module_name(self.package_base, path)
