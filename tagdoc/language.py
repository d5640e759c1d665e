"""Base class describing how a source language marks up documentation."""

import re
from collections.abc import Callable, Iterator
from typing import Any

from tagdoc.declaration import VARIABLE, Declaration
from tagdoc.declaration_probe import DeclarationProbe
from tagdoc.source_token import Token
from tagdoc.token_stream import TokenStream

NON_FUNCTION_CLASSES = {"table", "field"}


class Language:
    """Comment conventions, tokenizer and declaration grammar of a language."""

    name = ""
    doc_comment_re: re.Pattern[str]
    block_comment_re: re.Pattern[str]
    empty_comment_re: re.Pattern[str]
    line_marker_re: re.Pattern[str]

    def __init__(
        self, lexer: Callable[[str], Iterator[Token]], probe: DeclarationProbe
    ) -> None:
        """Initialize with a tokenizer and a configured declaration probe."""
        self.lexer = lexer
        self.probe = probe

    def lex(self, text: str) -> Iterator[Token]:
        """Tokenize source text."""
        return self.lexer(text)

    def is_doc_comment(self, text: str) -> bool:
        """Check if a comment token opens a doc comment."""
        return bool(self.doc_comment_re.match(text))

    def is_block_comment(self, text: str) -> bool:
        """Check if a comment token is a block (multi-line) comment."""
        return bool(self.block_comment_re.match(text))

    def is_empty_comment(self, text: str) -> bool:
        """Check if a comment token is a bare marker line with no content."""
        return bool(self.empty_comment_re.match(text))

    def trim_comment(self, text: str) -> str:
        """Strip comment markers, returning the text with a final newline."""
        if self.is_block_comment(text):
            body = self.block_body(text)
        else:
            body = self.line_marker_re.sub("", text, count=1)
        return body if body.endswith("\n") else body + "\n"

    def block_body(self, text: str) -> str:
        """Return the inner text of a block comment."""
        raise NotImplementedError

    def read_declaration(self, stream: TokenStream) -> Declaration:
        """Describe the declaration at the front of the stream."""
        return self.probe.probe(stream)

    def find_module(self, stream: TokenStream) -> str | None:
        """Look ahead for a module declaration idiom.

        Returns the declared module name, '...' when the name has to come from
        the file path, or None when the language has no such idiom or none is
        found.
        """
        return None

    def parse_function_header(
        self, tags: dict[str, Any], decl: Declaration
    ) -> list[str]:
        """Fill name and class from a function definition; return its arguments."""
        if not tags.get("name") and decl.name:
            tags["name"] = decl.name
        tags.setdefault("class", "function")
        return list(decl.params)

    def parse_extra(self, tags: dict[str, Any], decl: Declaration) -> list[str]:
        """Fill in details for tables and fields declared after the comment."""
        if decl.kind != VARIABLE or tags.get("class") not in NON_FUNCTION_CLASSES:
            return []
        if not tags.get("name") and decl.name:
            tags["name"] = decl.name
        if tags.get("class") == "table" and "field" not in tags:
            return list(decl.fields)
        return []
