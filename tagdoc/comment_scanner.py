"""Group comment tokens into doc comment blocks."""

import logging
from collections.abc import Iterator
from pathlib import Path

from tagdoc.comment_block import CommentBlock
from tagdoc.errors import StructuralError
from tagdoc.language import Language
from tagdoc.source_token import COMMENT, SPACE, Token
from tagdoc.token_stream import TokenStream

logger = logging.getLogger(__name__)


class CommentScanner:
    """Walk a token stream and yield its doc comment blocks in order.

    Consecutive comment tokens form one block; a blank source line or any
    code ends it. Ordinary comments are skipped, but the first comment of a
    file must be a doc comment.
    """

    def __init__(
        self, language: Language, stream: TokenStream, path: Path | str
    ) -> None:
        """Initialize a scanner over one file's tokens."""
        self.language = language
        self.stream = stream
        self.path = path

    def blocks(self) -> Iterator[CommentBlock]:
        """Yield doc comment blocks, each with the declaration that follows it."""
        first = True
        while True:
            tok = self.stream.next()
            if tok is None:
                return
            if tok.kind != COMMENT:
                continue
            is_doc = self.language.is_doc_comment(tok.text)
            if first and not is_doc:
                msg = "first comment must be a doc comment"
                raise StructuralError(self.path, tok.line, msg)
            text = self._read_block(tok)
            if not is_doc:
                logger.debug("%s:%s: skipping plain comment", self.path, tok.line)
                first = False
                continue
            declaration = self.language.read_declaration(self.stream)
            yield CommentBlock(text, tok.line, first=first, declaration=declaration)
            first = False

    def _read_block(self, opener: Token) -> str:
        parts = []
        if not self.language.is_empty_comment(opener.text):
            parts.append(self.language.trim_comment(opener.text))
        while True:
            tok = self.stream.peek()
            if tok is None:
                break
            if tok.kind == SPACE:
                after = self.stream.peek(1)
                # indentation between comments on consecutive lines
                if "\n" in tok.text or after is None or after.kind != COMMENT:
                    break
                self.stream.next()
                continue
            if tok.kind != COMMENT:
                break
            self.stream.next()
            parts.append(self.language.trim_comment(tok.text))
        return "".join(parts)
