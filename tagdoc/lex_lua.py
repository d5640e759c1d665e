"""Tokenizer for Lua source."""

import re
from collections.abc import Iterator

from tagdoc.source_token import COMMENT, OTHER, SPACE, STRING, WORD, Token

LUA_TOKEN_RE = re.compile(
    r"""
    (?P<long_comment>--\[(?P<eq1>=*)\[.*?\](?P=eq1)\])
    |(?P<comment>--[^\n]*\n?)
    |(?P<space>\s+)
    |(?P<long_string>\[(?P<eq2>=*)\[.*?\](?P=eq2)\])
    |(?P<string>"(?:\\.|[^"\\\n])*"|'(?:\\.|[^'\\\n])*')
    |(?P<number>0[xX][0-9a-fA-F]+|(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)
    |(?P<word>[A-Za-z_]\w*)
    |(?P<other>\.\.\.|\.\.|==|~=|<=|>=|::|.)
    """,
    re.VERBOSE | re.DOTALL,
)

_KINDS = {
    "long_comment": COMMENT,
    "comment": COMMENT,
    "space": SPACE,
    "long_string": STRING,
    "string": STRING,
    "number": WORD,
    "word": WORD,
    "other": OTHER,
}


def lex_lua(text: str) -> Iterator[Token]:
    """Yield tokens for Lua source text.

    Line comments keep their trailing newline. A leading shebang line is
    reported as a space token.
    """
    pos = 0
    line = 1
    if text.startswith("#!"):
        end = text.find("\n")
        end = len(text) if end < 0 else end + 1
        yield Token(SPACE, text[:end], line)
        line += text.count("\n", 0, end)
        pos = end

    while pos < len(text):
        m = LUA_TOKEN_RE.match(text, pos)
        if m is None:  # pragma: no cover - the 'other' branch matches any char
            break
        value = m.group(0)
        yield Token(_KINDS[m.lastgroup or "other"], value, line)
        line += value.count("\n")
        pos = m.end()
