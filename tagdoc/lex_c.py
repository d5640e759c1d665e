"""Tokenizer for C and C++ source."""

import re
from collections.abc import Iterator

from tagdoc.source_token import COMMENT, OTHER, SPACE, STRING, WORD, Token

C_TOKEN_RE = re.compile(
    r"""
    (?P<block_comment>/\*.*?\*/)
    |(?P<comment>//[^\n]*\n?)
    |(?P<space>\s+)
    |(?P<preprocessor>\#[^\n]*)
    |(?P<string>"(?:\\.|[^"\\\n])*"|'(?:\\.|[^'\\\n])*')
    |(?P<number>0[xX][0-9a-fA-F]+[uUlL]*|(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?[fFuUlL]*)
    |(?P<word>[A-Za-z_]\w*)
    |(?P<other>->|::|\.\.\.|.)
    """,
    re.VERBOSE | re.DOTALL,
)

_KINDS = {
    "block_comment": COMMENT,
    "comment": COMMENT,
    "space": SPACE,
    "preprocessor": OTHER,
    "string": STRING,
    "number": WORD,
    "word": WORD,
    "other": OTHER,
}


def lex_c(text: str) -> Iterator[Token]:
    """Yield tokens for C source text."""
    pos = 0
    line = 1
    while pos < len(text):
        m = C_TOKEN_RE.match(text, pos)
        if m is None:  # pragma: no cover
            break
        value = m.group(0)
        yield Token(_KINDS[m.lastgroup or "other"], value, line)
        line += value.count("\n")
        pos = m.end()
