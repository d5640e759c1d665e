"""Buffered access to a lazy token sequence."""

from collections.abc import Iterable, Iterator

from tagdoc.source_token import Token


class TokenStream:
    """Wraps a token iterator with unlimited lookahead.

    Tokens are pulled from the underlying iterator only when they are
    consumed or peeked, so tokenizing stays lazy.
    """

    def __init__(self, tokens: Iterable[Token]) -> None:
        """Initialize the stream over an iterable of tokens."""
        self._source: Iterator[Token] = iter(tokens)
        self._buffer: list[Token] = []

    def _fill(self, n: int) -> bool:
        while len(self._buffer) < n:
            tok = next(self._source, None)
            if tok is None:
                return False
            self._buffer.append(tok)
        return True

    def peek(self, n: int = 0) -> Token | None:
        """Return the token n places ahead without consuming it."""
        if not self._fill(n + 1):
            return None
        return self._buffer[n]

    def next(self) -> Token | None:
        """Consume and return the next token, or None at end of input."""
        if not self._fill(1):
            return None
        return self._buffer.pop(0)

    def lookahead(self, limit: int | None = None) -> Iterator[Token]:
        """Yield upcoming tokens without consuming them, at most limit if given."""
        i = 0
        while limit is None or i < limit:
            tok = self.peek(i)
            if tok is None:
                return
            yield tok
            i += 1
