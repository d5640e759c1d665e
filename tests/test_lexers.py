"""Tests for the Lua and C tokenizers."""

from tagdoc.lex_c import lex_c
from tagdoc.lex_lua import lex_lua
from tagdoc.source_token import COMMENT, OTHER, SPACE, STRING, WORD


def significant(tokens: list) -> list[tuple[str, str]]:
    """Drop whitespace tokens and keep (kind, text) pairs."""
    return [(t.kind, t.text) for t in tokens if t.kind != SPACE]


def test_lua_comments_and_words() -> None:
    """Verify line and long comments are single tokens."""
    tokens = list(lex_lua("local x = 1 -- note\n--[[ block\n]] y"))
    assert significant(tokens) == [
        (WORD, "local"),
        (WORD, "x"),
        (OTHER, "="),
        (WORD, "1"),
        (COMMENT, "-- note\n"),
        (COMMENT, "--[[ block\n]]"),
        (WORD, "y"),
    ]
    assert tokens[-1].line == 3


def test_lua_line_comment_keeps_newline() -> None:
    """Verify a blank line between comments shows up as a space token."""
    tokens = list(lex_lua("--- a\n\n--- b\n"))
    assert [(t.kind, t.text) for t in tokens] == [
        (COMMENT, "--- a\n"),
        (SPACE, "\n"),
        (COMMENT, "--- b\n"),
    ]


def test_lua_strings_and_varargs() -> None:
    """Verify long strings, quoted strings and '...' are recognized."""
    tokens = significant(list(lex_lua("s = [==[a]]b]==] .. 'q' f(...)")))
    assert (STRING, "[==[a]]b]==]") in tokens
    assert (OTHER, "..") in tokens
    assert (STRING, "'q'") in tokens
    assert (OTHER, "...") in tokens


def test_lua_shebang_is_space() -> None:
    """Verify a shebang line is skipped as whitespace."""
    tokens = list(lex_lua("#!/usr/bin/env lua\nprint(1)\n"))
    assert tokens[0].kind == SPACE
    assert tokens[1].text == "print"
    assert tokens[1].line == 2


def test_c_tokens() -> None:
    """Verify C comments, preprocessor lines and line numbers."""
    tokens = list(lex_c("/** doc */\nint f(void); // x\n#include <a.h>\n"))
    pairs = significant(tokens)
    assert pairs[0] == (COMMENT, "/** doc */")
    assert (COMMENT, "// x\n") in pairs
    assert (OTHER, "#include <a.h>") in pairs
    include = next(t for t in tokens if t.text.startswith("#include"))
    assert include.line == 3
