"""Tests for reading declarations that follow a doc comment."""

from tagdoc.c_language import CLanguage
from tagdoc.declaration import FUNCTION, NONE, VARIABLE, Declaration
from tagdoc.lua_language import LuaLanguage
from tagdoc.token_stream import TokenStream


def probe_lua(src: str) -> Declaration:
    """Read the declaration at the start of a Lua snippet."""
    lang = LuaLanguage()
    return lang.read_declaration(TokenStream(lang.lex(src)))


def probe_c(src: str) -> Declaration:
    """Read the declaration at the start of a C snippet."""
    lang = CLanguage()
    return lang.read_declaration(TokenStream(lang.lex(src)))


def test_lua_global_function() -> None:
    """Verify a plain function definition with parameters."""
    decl = probe_lua("function add(a, b)\n  return a + b\nend\n")
    assert decl.kind == FUNCTION
    assert decl.name == "add"
    assert decl.params == ["a", "b"]
    assert not decl.is_local
    assert decl.line == 1


def test_lua_local_function_with_varargs() -> None:
    """Verify local scope and '...' parameters."""
    decl = probe_lua("local function log(fmt, ...) end")
    assert decl.kind == FUNCTION
    assert decl.name == "log"
    assert decl.params == ["fmt", "..."]
    assert decl.is_local


def test_lua_method_and_assigned_function() -> None:
    """Verify dotted names, methods and 'name = function' forms."""
    assert probe_lua("function M:push(x) end").name == "M:push"
    decl = probe_lua("M.add = function(a, b) end")
    assert decl.kind == FUNCTION
    assert decl.name == "M.add"
    assert decl.params == ["a", "b"]


def test_lua_table_constructor_fields() -> None:
    """Verify table constructor keys are collected as fields."""
    decl = probe_lua("M.config = {\n  debug = false,\n  level = { 1, 2 },\n}\n")
    assert decl.kind == VARIABLE
    assert decl.name == "M.config"
    assert decl.fields == ["debug", "level"]


def test_long_table_constructor_keeps_every_key() -> None:
    """Verify keys beyond the lookahead limit are still collected."""
    keys = [f"k{i}" for i in range(90)]
    body = ", ".join(f"{key} = {i}" for i, key in enumerate(keys))
    decl = probe_lua(f"opts = {{ {body} }}\n")
    assert decl.kind == VARIABLE
    assert decl.name == "opts"
    assert decl.fields == keys
    assert not decl.unclosed


def test_unclosed_table_constructor() -> None:
    """Verify a table running to end of input keeps its keys and is flagged."""
    decl = probe_lua("opts = {\n  a = 1,\n  b = 2,\n")
    assert decl.kind == VARIABLE
    assert decl.name == "opts"
    assert decl.fields == ["a", "b"]
    assert decl.unclosed


def test_lua_variable() -> None:
    """Verify a simple assignment is a variable."""
    decl = probe_lua('M.version = "1.0"\n')
    assert decl.kind == VARIABLE
    assert decl.name == "M.version"


def test_lua_call_is_not_a_declaration() -> None:
    """Verify a call such as module(...) declares nothing."""
    assert probe_lua('module("foo", package.seeall)').kind == NONE
    assert probe_lua("return M").kind == NONE


def test_lua_comment_ends_the_probe() -> None:
    """Verify a following comment means nothing is declared right away."""
    assert probe_lua("\n--- Next.\nfunction f() end").kind == NONE


def test_probe_does_not_consume() -> None:
    """Verify the stream is left untouched."""
    lang = LuaLanguage()
    stream = TokenStream(lang.lex("function f(a) end"))
    lang.read_declaration(stream)
    first = stream.peek()
    assert first is not None
    assert first.text == "function"


def test_c_function() -> None:
    """Verify the name is the last word before the parameter list."""
    decl = probe_c("int add(int a, int b) { return a + b; }")
    assert decl.kind == FUNCTION
    assert decl.name == "add"
    assert decl.params == ["a", "b"]


def test_c_static_void_and_pointers() -> None:
    """Verify static scope, (void) and pointer declarators."""
    decl = probe_c("static void helper(void);")
    assert decl.is_local
    assert decl.name == "helper"
    assert decl.params == []
    decl = probe_c("char *dup(const char *s);")
    assert decl.name == "dup"
    assert decl.params == ["s"]
