"""Turn the doc comments of one source file into items."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING

from tagdoc.comment_block import CommentBlock
from tagdoc.comment_scanner import CommentScanner
from tagdoc.declaration import NONE
from tagdoc.errors import SourceDecodeError
from tagdoc.extract_tags import extract_tags
from tagdoc.extracted_tags import ExtractedTags
from tagdoc.language import Language
from tagdoc.source_file import SourceFile
from tagdoc.token_stream import TokenStream

if TYPE_CHECKING:
    from tagdoc.run_context import RunContext

logger = logging.getLogger(__name__)

# module discovery states
SEARCHING = "searching"
FOUND_EXPLICIT = "found_explicit"
FOUND_INFERRED = "found_inferred"
CLOSED = "closed"


class FileParser:
    """Collect the items of one file, tracking where its module comes from.

    The first doc comment decides the module: either it carries a module
    tag, or the name is inferred from a ``module(...)`` call or the file
    path. After that block the search is closed, and any later module tag
    opens a new module scope.
    """

    def __init__(
        self, path: Path, language: Language, context: RunContext, text: str
    ) -> None:
        """Initialize a parser for one file's source text."""
        self.path = path
        self.language = language
        self.context = context
        self.text = text
        self.state = SEARCHING
        self.file = SourceFile(path)

    def parse(self) -> SourceFile:
        """Scan the file and return its items (not yet finished)."""
        stream = TokenStream(self.language.lex(self.text))
        for block in CommentScanner(self.language, stream, self.path).blocks():
            self._handle_block(block, stream)
        return self.file

    def _handle_block(self, block: CommentBlock, stream: TokenStream) -> None:
        registry = self.context.tags
        decl = block.declaration
        fun_follows, is_local = decl.is_function, decl.is_local
        extracted: ExtractedTags | None = None
        if fun_follows or block.has_tags:
            extracted = extract_tags(block.text, registry)
            explicit = registry.project_level(extracted.kind) and extracted.name
            if explicit and block.first:
                self.state = FOUND_EXPLICIT
            if extracted.kind == "function":
                # explicitly documented; the code that follows is not its header
                fun_follows, is_local = False, False

        if block.first and self.state == SEARCHING:
            extracted = self._infer_module(block, extracted, fun_follows, stream)
        if extracted is not None:
            self._add_item(block, extracted, fun_follows, is_local)
        if self.state != SEARCHING:
            self.state = CLOSED

    def _infer_module(
        self,
        block: CommentBlock,
        extracted: ExtractedTags | None,
        fun_follows: bool,
        stream: TokenStream,
    ) -> ExtractedTags | None:
        """Open the file's module from a module(...) call or the file path.

        Returns the block's tags when the block still documents an item, or
        None when it became the module's own documentation.
        """
        found = self.language.find_module(stream)
        if found is None or found == "...":
            name = self.context.module_name_for(self.path)
        else:
            name = found
        logger.debug("%s: inferred module %r", self.path, name)
        self.state = FOUND_INFERRED

        registry = self.context.tags
        documents_item = extracted is not None and (
            fun_follows
            or bool(extracted.kind and not registry.project_level(extracted.kind))
        )
        if documents_item:
            seed = ExtractedTags()
        else:
            seed = extracted or extract_tags(block.text, registry)
            extracted = None
        seed.tags["name"] = name
        seed.tags.setdefault("class", "module")
        item = self.file.new_item(seed.tags, block.line, seed.summary, seed.description)
        item.old_style = found is not None
        item.name_inferred = found is None or found == "..."
        return extracted

    def _add_item(
        self,
        block: CommentBlock,
        extracted: ExtractedTags,
        fun_follows: bool,
        is_local: bool,
    ) -> None:
        tags = extracted.tags
        decl = block.declaration
        formal_args: list[str] = []
        project_level = self.context.tags.project_level(extracted.kind)
        if not project_level:
            if fun_follows:
                formal_args = self.language.parse_function_header(tags, decl)
            else:
                formal_args = self.language.parse_extra(tags, decl)
            if decl.unclosed:
                self.file.warning("table constructor is not closed", decl.line)
        if not tags.get("name"):
            if tags:
                self.file.warning("doc comment has tags but no name", block.line)
            return
        has_decl = decl.kind != NONE and decl.line is not None
        line = decl.line if has_decl and not project_level else block.line
        item = self.file.new_item(tags, line, extracted.summary, extracted.description)
        item.inferred = fun_follows
        item.is_local = is_local and fun_follows
        item.formal_args = formal_args


def parse_file(
    path: Path, language: Language, context: RunContext, text: str | None = None
) -> SourceFile:
    """Parse one file into items, then group them into its modules."""
    if text is None:
        text = read_source(path)
    source_file = FileParser(path, language, context, text).parse()
    source_file.finish(context)
    return source_file


def read_source(path: Path) -> str:
    """Read a source file as UTF-8, reporting the line of a bad byte."""
    raw = path.read_bytes()
    try:
        return raw.decode("utf-8")
    except UnicodeDecodeError as e:
        line = raw.count(b"\n", 0, e.start) + 1
        msg = f"not valid UTF-8 ({e.reason})"
        raise SourceDecodeError(path, line, msg) from e
