"""Lua doc comment conventions (LuaDoc style triple dashes)."""

import re

from tagdoc.declaration_probe import DeclarationProbe
from tagdoc.language import Language
from tagdoc.lex_lua import lex_lua
from tagdoc.source_token import COMMENT, SPACE, STRING
from tagdoc.token_stream import TokenStream

LUA_STOP_WORDS = {
    "and", "break", "do", "else", "elseif", "end", "false", "for", "goto",
    "if", "in", "nil", "not", "or", "repeat", "return", "then", "true",
    "until", "while",
}  # fmt: skip

LONG_BLOCK_RE = re.compile(r"--\[(=*)\[(.*)\]\1\]\s*$", re.DOTALL)
MODULE_SCAN_LIMIT = 2000


class LuaLanguage(Language):
    """Lua: `---` line comments and `--[[-- ]]` block comments."""

    name = "lua"
    doc_comment_re = re.compile(r"---|--\[=*\[--")
    block_comment_re = re.compile(r"--\[=*\[")
    empty_comment_re = re.compile(r"-{3,}\s*$")
    line_marker_re = re.compile(r"^--+ ?")

    def __init__(self) -> None:
        """Initialize the Lua tokenizer and declaration grammar."""
        super().__init__(
            lex_lua,
            DeclarationProbe(
                local_keywords={"local"},
                function_keyword="function",
                stop_words=LUA_STOP_WORDS,
            ),
        )

    def block_body(self, text: str) -> str:
        """Return the inner text of a long comment, minus doc dashes."""
        m = LONG_BLOCK_RE.match(text)
        body = m.group(2) if m else text
        # --[[-- opens a doc block and --]] is a common way to close one
        body = re.sub(r"^-+[ \t]*\n?", "", body, count=1)
        return re.sub(r"\n?[ \t]*-+[ \t]*$", "\n", body, count=1)

    def find_module(self, stream: TokenStream) -> str | None:
        """Find a module("name") or module(...) call before the next doc comment."""
        toks = list(stream.lookahead(MODULE_SCAN_LIMIT))
        for i, tok in enumerate(toks):
            if tok.kind == COMMENT and self.is_doc_comment(tok.text):
                return None
            if not tok.is_word("module"):
                continue
            if i > 0 and toks[i - 1].kind not in (SPACE, COMMENT):
                # field access such as package.module
                continue
            args = [t for t in toks[i + 1 : i + 8] if t.kind not in (SPACE, COMMENT)]
            if args and args[0].is_other("("):
                args = args[1:]
            if not args:
                return None
            if args[0].is_other("..."):
                return "..."
            if args[0].kind == STRING:
                return unquote_lua_string(args[0].text)
        return None


def unquote_lua_string(text: str) -> str:
    """Return the contents of a quoted or long-bracket Lua string."""
    m = re.match(r"\[(=*)\[(.*)\]\1\]$", text, re.DOTALL)
    if m:
        return m.group(2)
    return text[1:-1]
