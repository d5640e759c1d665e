"""Export the document model as plain data (YAML or JSON)."""

import json
from pathlib import Path
from typing import Any

import yaml

from tagdoc.item import Item
from tagdoc.module import Module
from tagdoc.see_reference import SeeReference


def see_to_dict(ref: SeeReference) -> dict[str, Any]:
    """Convert a @see reference to a plain mapping."""
    return {"label": ref.label, "module": ref.module, "name": ref.name}


def item_to_dict(item: Item) -> dict[str, Any]:
    """Convert an item to a plain mapping without back references."""
    return {
        "name": item.name,
        "kind": item.kind,
        "section": item.section,
        "summary": item.summary,
        "description": item.description,
        "line": item.line,
        "inferred": item.inferred,
        "params": [{"name": p.name, "description": p.description} for p in item.params],
        "returns": list(item.returns),
        "see": [see_to_dict(ref) for ref in item.see],
        "tags": dict(item.tags),
    }


def module_to_dict(mod: Module) -> dict[str, Any]:
    """Convert a module and its sections to a plain mapping."""
    return {
        "name": mod.name,
        "kind": mod.kind,
        "type": mod.type,
        "summary": mod.summary,
        "description": mod.description,
        "file": str(mod.file.path) if mod.file else None,
        "tags": dict(mod.tags),
        "see": [see_to_dict(ref) for ref in mod.see],
        "sections": {
            title: [item_to_dict(item) for item in items]
            for title, items in mod.sections().items()
        },
    }


def write_export(modules: list[Module], path: Path) -> None:
    """Write the modules to a .json file, or YAML for any other suffix."""
    data = [module_to_dict(mod) for mod in modules]
    path.parent.mkdir(parents=True, exist_ok=True)
    if path.suffix.lower() == ".json":
        text = json.dumps(data, indent=2, ensure_ascii=False)
    else:
        text = yaml.safe_dump(data, sort_keys=False, allow_unicode=True)
    path.write_text(text, encoding="utf-8")
