"""Orchestration logic for extracting documentation from source files."""

import argparse
import logging
from pathlib import Path
from typing import Any

from tagdoc.apply_config import apply_config
from tagdoc.collect_source_files import collect_source_files
from tagdoc.dump import dump_item, dump_module
from tagdoc.errors import ConfigurationError, StructuralError
from tagdoc.export_modules import write_export
from tagdoc.find_config import find_config
from tagdoc.load_config import load_config
from tagdoc.module import Module
from tagdoc.module_resolver import ModuleResolver
from tagdoc.package_base import resolve_package_base
from tagdoc.parse_file import parse_file
from tagdoc.run_context import RunContext
from tagdoc.source_file import SourceFile

logger = logging.getLogger(__name__)


def extract_project(sources: list[Path], context: RunContext) -> list[Module]:
    """Parse every source file, then resolve the project's modules.

    A file that is not valid UTF-8, or whose first comment is not a doc
    comment, is skipped with an error message, unless the context is strict.
    """
    files: list[SourceFile] = []
    for path in sources:
        language = context.languages.for_path(path)
        if language is None:
            logger.debug("Skipping %s: unknown extension", path)
            continue
        logger.info("Parsing %s", path)
        try:
            files.append(parse_file(path, language, context))
        except StructuralError as e:
            if context.strict:
                raise
            logger.error("%s (file skipped)", e)
    context.files = files
    return ModuleResolver(context).resolve(files)


def run_extraction(args: argparse.Namespace) -> int:
    """Execute the full extraction pipeline."""
    config, targets = _init_config(args)
    context = RunContext()
    apply_config(config, context)
    if args.all:
        context.show_locals = True
    if args.strict:
        context.strict = True

    sources = collect_source_files(targets, context.languages)
    source_dir = targets[0] if targets[0].is_dir() else targets[0].parent
    package = args.package or config.get("package")
    context.package_base = resolve_package_base(package, source_dir)

    modules = extract_project(sources, context)
    if not modules:
        msg = "no modules found"
        raise ConfigurationError(msg)

    if args.module is not None:
        print(_dump_selected(context, args.module, args.verbose))
        return 0
    if args.dump:
        for mod in modules:
            print(dump_module(mod, verbose=True))
        return 0
    if args.export:
        write_export(modules, args.export)
        print(f"output written to {args.export}")
        return 0

    project = args.project or config.get("project") or "project"
    title = args.title or config.get("title")
    print(f"{title} for {project}: {len(modules)} modules, {len(context.files)} files")
    sections = context.project.sections() if context.project else {}
    for section, mods in sections.items():
        print(f"  {section}: {', '.join(m.name for m in mods)}")
    return 0


def _init_config(args: argparse.Namespace) -> tuple[dict[str, Any], list[Path]]:
    """Load the configuration and decide which paths to scan."""
    source = Path(args.file)
    config_path = Path(args.config) if args.config else find_config(source)
    config = load_config(config_path)
    if config_path:
        logger.info("Read config %s", config_path)

    if str(source) == "." and config.get("file"):
        # relative paths in the config are relative to the config file
        base = config_path.parent if config_path else Path()
        files = config["file"]
        targets = [base / f for f in ([files] if isinstance(files, str) else files)]
    else:
        targets = [source]
    return config, [t.resolve() for t in targets]


def _dump_selected(context: RunContext, selection: str, verbose: bool) -> str:
    """Dump the first module, a named module, or 'module.item'."""
    modules = context.modules
    if not selection:
        return dump_module(modules[0], verbose)
    by_name = context.modules_by_name
    if selection in by_name:
        return dump_module(by_name[selection], verbose)
    mod_name, _, item_name = selection.rpartition(".")
    mod = by_name.get(mod_name) if mod_name else modules[0]
    item = mod.items_by_name.get(item_name) if mod else None
    if item is None:
        msg = f"{selection!r} is not part of the documented modules"
        raise ConfigurationError(msg)
    return dump_item(item, verbose=True)
