"""Data model for one documented entity."""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from tagdoc.as_list import as_list, as_text, first_value

if TYPE_CHECKING:
    from tagdoc.module import Module
    from tagdoc.see_reference import SeeReference
    from tagdoc.source_file import SourceFile
    from tagdoc.tag_registry import TagRegistry

logger = logging.getLogger(__name__)

PARAM_RE = re.compile(r"\s*([\w.:]+)(.*)", re.DOTALL)
FUNCTION_KINDS = {"function", "local-function"}
DEFAULT_KIND = "function"


@dataclass
class Param:
    """A documented parameter or table field."""

    name: str
    description: str = ""


@dataclass
class Item:
    """A documented function, table, field, or module seed."""

    tags: dict[str, Any]
    summary: str = ""
    description: str = ""
    line: int | None = None
    name: str = ""
    kind: str | None = None  # the item class, e.g. function/table
    inferred: bool = False  # function-ness read from the code, not tags
    is_local: bool = False  # declared in a local scope
    formal_args: list[str] = field(default_factory=list)
    params: list[Param] = field(default_factory=list)
    returns: list[str] = field(default_factory=list)
    see: list[SeeReference] = field(default_factory=list)
    section: str | None = None  # display section, set when classified
    old_style: bool = False  # module seed declared through module(...)
    name_inferred: bool = False  # module seed named from the file path
    file: SourceFile | None = field(default=None, repr=False, compare=False)
    module: Module | None = field(default=None, repr=False, compare=False)

    @property
    def args(self) -> str:
        """Render the parameter list, e.g. '(a, b)'."""
        return "(" + ", ".join(p.name for p in self.params) + ")"

    @property
    def is_function(self) -> bool:
        """Check if the item is a function of any scope."""
        return self.kind in FUNCTION_KINDS

    def param(self, name: str) -> Param | None:
        """Return the parameter with the given name."""
        for p in self.params:
            if p.name == name:
                return p
        return None

    def warning(self, msg: str) -> None:
        """Log a warning with file and line context."""
        path = self.file.path if self.file else "<unknown>"
        logger.warning("%s:%s: %s", path, self.line, msg)

    def finish(self, registry: TagRegistry) -> None:
        """Lift structural tags into attributes and build the parameter list."""
        tags = self.tags
        raw_name = tags.pop("name", None)
        name = first_value(raw_name)
        if isinstance(raw_name, list):
            self.warning(f"item has several names, using {name!r}")
        kind = first_value(tags.pop("class", None))
        self.name = name or self.name
        self.kind = kind or self.kind or DEFAULT_KIND
        if "summary" in tags:
            self.summary = as_text(tags.pop("summary"))
        if "description" in tags:
            self.description = as_text(tags.pop("description"))

        if registry.project_level(self.kind):
            return
        if self.kind == "function" and (self.is_local or "local" in tags):
            self.kind = "local-function"

        if self.is_function:
            documented = as_list(tags.get("param"))
            self.returns = [as_text(r) for r in as_list(tags.get("return"))]
        else:
            documented = as_list(tags.get("field"))
        self.params = merge_params(documented, self.formal_args)


def merge_params(documented: list[str], formal_args: list[str]) -> list[Param]:
    """Combine @param/@field values with argument names read from the code.

    Declared arguments come first in declaration order, undocumented ones get
    an empty description; documented names the code does not declare follow
    in tag order.
    """
    described: list[Param] = []
    for value in documented:
        m = PARAM_RE.match(value)
        if m:
            described.append(Param(m.group(1), m.group(2).strip()))
        elif value.strip():
            described.append(Param(value.strip()))
    if not formal_args:
        return described
    by_name = {p.name: p for p in described}
    params = [by_name.get(arg) or Param(arg) for arg in formal_args]
    params.extend(p for p in described if p.name not in formal_args)
    return params
