"""Plain text dumps of the document model, for quick inspection."""

from tagdoc.item import Item
from tagdoc.module import Module


def dump_item(item: Item, verbose: bool = True) -> str:
    """Render one item as indented text."""
    header = f"{item.name}{item.args}" if item.is_function else item.name
    lines = [f"* {header} [{item.kind}]", f"    {item.summary}"]
    if not verbose:
        return "\n".join(lines)
    if item.description:
        lines.append(f"    {item.description}")
    child_title = item.module.kinds.child_title(item.section) if item.module else None
    if item.params:
        lines.append(f"    {child_title or 'Parameters'}:")
        lines.extend(f"      {p.name}: {p.description}" for p in item.params)
    for ret in item.returns:
        lines.append(f"    returns: {ret}")
    for ref in item.see:
        lines.append(f"    see: {_see_target(ref.label, ref.module, ref.name)}")
    return "\n".join(lines)


def dump_module(mod: Module, verbose: bool = True) -> str:
    """Render a module and its sections as indented text."""
    lines = [
        "-" * 40,
        f"{mod.type or mod.kind}: {mod.name}",
        mod.summary,
    ]
    if mod.description:
        lines.append(mod.description)
    for title, items in mod.sections().items():
        lines.append("")
        lines.append(f"{title}:")
        lines.extend(dump_item(item, verbose) for item in items)
    return "\n".join(lines)


def _see_target(label: str, module: str | None, name: str | None) -> str:
    if module is None:
        return label
    return f"{module}.{name}" if name else module
