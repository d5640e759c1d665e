"""Extract LuaDoc-style documentation from Lua and C sources.

Scans doc comments (``---`` in Lua, ``/**`` in C), extracts their tags and
groups the documented functions, tables and fields into modules. The result
can be dumped as text or exported as YAML/JSON for a renderer.
"""

import argparse
import logging
from pathlib import Path

from tagdoc.errors import TagdocError
from tagdoc.run_extraction import run_extraction

logger = logging.getLogger(__name__)


def main() -> int:
    """Run the extraction process."""
    ap = argparse.ArgumentParser(
        description="Extract tag-based documentation from Lua and C sources.",
    )
    ap.add_argument(
        "file",
        help="Source file or directory ('.' reads everything from ./tagdoc.yml)",
    )
    ap.add_argument(
        "-b",
        "--package",
        help="Package base for module names: '.', '..' or a directory name",
    )
    ap.add_argument("-p", "--project", help="Project name")
    ap.add_argument("-t", "--title", help="Title of the documentation")
    ap.add_argument(
        "-a",
        "--all",
        action="store_true",
        help="Show local functions as well",
    )
    ap.add_argument(
        "-m",
        "--module",
        nargs="?",
        const="",
        default=None,
        help="Dump the first module, or the named module or module.item",
    )
    ap.add_argument(
        "--dump",
        action="store_true",
        help="Dump every module as text",
    )
    ap.add_argument(
        "--export",
        type=Path,
        help="Write the document model to this .yml or .json file",
    )
    ap.add_argument("--config", help="Path to configuration file")
    ap.add_argument(
        "--strict",
        action="store_true",
        help="Abort when a file's first comment is not a doc comment",
    )
    ap.add_argument("-v", "--verbose", action="store_true", help="Verbose logging")
    ap.add_argument("-q", "--quiet", action="store_true", help="Only log errors")
    args = ap.parse_args()

    level = logging.WARNING
    if args.verbose:
        level = logging.DEBUG
    elif args.quiet:
        level = logging.ERROR
    logging.basicConfig(level=level, format="%(levelname)s %(message)s")

    try:
        return run_extraction(args)
    except TagdocError as e:
        logger.error("%s", e)
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
