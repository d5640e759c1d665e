"""Tests for turning one source file into items and modules."""

import logging
from pathlib import Path

import pytest

from tagdoc.c_language import CLanguage
from tagdoc.errors import StructuralError, UnknownKindError
from tagdoc.lua_language import LuaLanguage
from tagdoc.parse_file import CLOSED, FileParser, parse_file
from tagdoc.run_context import RunContext
from tagdoc.source_file import SourceFile

MATHX = """\
--- A small math module.
-- Provides arithmetic helpers.
-- @module mathx
-- @alias M

local M = {}

--- Add two numbers.
-- @param a first number
-- @param b second number
-- @return the sum
function M.add(a, b)
  return a + b
end

--- Internal helper.
local function clamp(x, lo, hi)
  return x
end

--- Options.
-- @table options
-- @field precision digits kept
M.options = { precision = 2, mode = "round" }

return M
"""


def parse_lua(
    src: str, name: str = "mathx.lua", ctx: RunContext | None = None
) -> SourceFile:
    """Parse a Lua snippet as if read from the named file."""
    return parse_file(Path(name), LuaLanguage(), ctx or RunContext(), text=src)


def test_explicit_module() -> None:
    """Verify an explicit @module collects the file's items."""
    source = parse_lua(MATHX)
    assert len(source.modules) == 1
    mod = source.modules[0]
    assert mod.name == "mathx"
    assert mod.summary == "A small math module."
    assert mod.description == "Provides arithmetic helpers."
    assert [i.name for i in mod.items] == ["add", "clamp", "options"]


def test_function_parameters_follow_declaration() -> None:
    """Verify @param text is matched to the declared arguments."""
    add = parse_lua(MATHX).modules[0].items_by_name["add"]
    assert add.kind == "function"
    assert add.inferred
    assert [(p.name, p.description) for p in add.params] == [
        ("a", "first number"),
        ("b", "second number"),
    ]
    assert add.returns == ["the sum"]
    assert add.args == "(a, b)"
    assert add.line == 12


def test_param_tag_order() -> None:
    """Verify repeated @param tags keep source order."""
    add = parse_lua(MATHX).modules[0].items_by_name["add"]
    assert add.tags["param"] == ["a first number", "b second number"]


def test_local_declaration_becomes_local_function() -> None:
    """Verify a function declared local is classified as local-function."""
    clamp = parse_lua(MATHX).modules[0].items_by_name["clamp"]
    assert clamp.kind == "local-function"
    assert clamp.section == "Local Functions"
    assert [p.name for p in clamp.params] == ["x", "lo", "hi"]
    assert all(p.description == "" for p in clamp.params)


def test_local_tag_becomes_local_function() -> None:
    """Verify @local reclassifies a global function."""
    src = "--- @module m\n\n--- Helper.\n-- @local\nfunction h() end\n"
    item = parse_lua(src, "m.lua").modules[0].items[0]
    assert item.kind == "local-function"


def test_table_fields() -> None:
    """Verify documented fields come first, then undocumented constructor keys."""
    src = "--- @module m\n\n--- Options.\n-- @table opts\nopts = { a = 1, b = 2 }\n"
    opts = parse_lua(src, "m.lua").modules[0].items_by_name["opts"]
    assert opts.kind == "table"
    assert [p.name for p in opts.params] == ["a", "b"]
    field_item = parse_lua(MATHX).modules[0].items_by_name["options"]
    assert [(p.name, p.description) for p in field_item.params] == [
        ("precision", "digits kept")
    ]


def test_bare_table_takes_name_and_keys_from_code() -> None:
    """Verify a nameless @table takes every key of a long constructor."""
    keys = [f"k{i}" for i in range(120)]
    body = ",\n  ".join(f"{key} = {i}" for i, key in enumerate(keys))
    src = f"--- @module m\n\n--- Settings.\n-- @table\nopts = {{\n  {body}\n}}\n"
    items = parse_lua(src, "m.lua").modules[0].items
    assert [i.name for i in items] == ["opts"]
    assert [p.name for p in items[0].params] == keys


def test_unclosed_table_warns(caplog: pytest.LogCaptureFixture) -> None:
    """Verify a table constructor cut off by end of file is reported."""
    src = "--- @module m\n\n--- Settings.\n-- @table opts\nopts = { a = 1,\n"
    with caplog.at_level(logging.WARNING):
        source = parse_lua(src, "m.lua")
    opts = source.modules[0].items_by_name["opts"]
    assert [p.name for p in opts.params] == ["a"]
    assert "m.lua:5: table constructor is not closed" in caplog.text


def test_module_inferred_from_file_name() -> None:
    """Verify a tagless first doc comment documents an inferred module."""
    src = "--- Utility helpers.\n\n--- Greet someone.\nfunction greet(name) end\n"
    source = parse_lua(src, "utils.lua")
    mod = source.modules[0]
    assert mod.name == "utils"
    assert mod.name_inferred
    assert mod.summary == "Utility helpers."
    assert [i.name for i in mod.items] == ["greet"]


def test_first_block_documenting_a_function() -> None:
    """Verify a module is synthesized when the first block documents a function."""
    src = "--- Greet someone.\n-- @param name who\nfunction greet(name) end\n"
    mod = parse_lua(src, "hello.lua").modules[0]
    assert mod.name == "hello"
    assert mod.summary == ""
    assert mod.items[0].name == "greet"
    assert mod.items[0].summary == "Greet someone."


def test_old_style_module_call() -> None:
    """Verify module("name") supplies the module name."""
    src = (
        "--- Old style.\n"
        'module("legacy.core", package.seeall)\n\n'
        "--- Hi.\nfunction hi() end\n"
    )
    mod = parse_lua(src, "core.lua").modules[0]
    assert mod.name == "legacy.core"
    assert mod.old_style
    assert mod.package == "legacy"
    assert mod.mod_name == "core"
    assert [i.name for i in mod.items] == ["hi"]


def test_module_varargs_uses_file_name() -> None:
    """Verify module(...) falls back to the file name."""
    src = "--- Vararg module.\nmodule(...)\n\n--- Hi.\nfunction hi() end\n"
    mod = parse_lua(src, "vmod.lua").modules[0]
    assert mod.name == "vmod"
    assert mod.old_style
    assert mod.name_inferred


def test_second_module_opens_new_scope() -> None:
    """Verify a later @module starts a new module in the same file."""
    src = (
        "--- @module one\n\n--- A.\nfunction a() end\n\n"
        "--- @module two\n\n--- B.\nfunction b() end\n"
    )
    source = parse_lua(src, "multi.lua")
    assert [m.name for m in source.modules] == ["one", "two"]
    assert [i.name for i in source.modules[1].items] == ["b"]


def test_parser_state_closes_after_first_block() -> None:
    """Verify module discovery stops after the first doc comment."""
    parser = FileParser(Path("m.lua"), LuaLanguage(), RunContext(), MATHX)
    parser.parse()
    assert parser.state == CLOSED


def test_narrative_block_is_dropped() -> None:
    """Verify a tagless block with no declaration produces no item."""
    src = "--- @module m\n\n--- Just some prose.\n\nlocal x\n"
    assert parse_lua(src, "m.lua").modules[0].items == []


def test_tags_without_name_warn(caplog: pytest.LogCaptureFixture) -> None:
    """Verify a tagged block with no derivable name is dropped with a warning."""
    src = "--- @module m\n\n--- Orphan.\n-- @see other\n"
    with caplog.at_level(logging.WARNING):
        source = parse_lua(src, "m.lua")
    assert source.modules[0].items == []
    assert "no name" in caplog.text


def test_unknown_class_is_fatal() -> None:
    """Verify an unregistered class raises UnknownKindError."""
    src = "--- @module m\n\n--- Thing.\n-- @class widget\n-- @name w\n"
    with pytest.raises(UnknownKindError):
        parse_lua(src, "m.lua")


def test_structural_error() -> None:
    """Verify a file starting with a plain comment is rejected."""
    with pytest.raises(StructuralError):
        parse_lua("-- just a comment\nlocal x = 1\n", "bad.lua")


def test_new_type_items() -> None:
    """Verify items of a registered new type get their own section."""
    ctx = RunContext()
    ctx.new_type("event", "Events")
    src = (
        "--- @module ui\n\n"
        "--- Fired on click.\n-- @event clicked\n-- @field x position\n"
    )
    item = parse_lua(src, "ui.lua", ctx).modules[0].items[0]
    assert item.kind == "event"
    assert item.section == "Events"
    assert item.params[0].name == "x"


def test_c_file() -> None:
    """Verify C sources yield functions in a module named after the file."""
    src = (
        "/** String helpers.\n * @module strutil\n */\n\n"
        "/** Duplicate a string.\n * @param s the source\n */\n"
        "char *dup(const char *s);\n\n"
        "/// Internal.\nstatic int count(void);\n"
    )
    source = parse_file(Path("strutil.c"), CLanguage(), RunContext(), text=src)
    mod = source.modules[0]
    assert mod.name == "strutil"
    assert [(i.name, i.kind) for i in mod.items] == [
        ("dup", "function"),
        ("count", "local-function"),
    ]
    assert mod.items[0].params[0].description == "the source"


def test_items_before_any_module(caplog: pytest.LogCaptureFixture) -> None:
    """Verify early items join the next module, or one named after the file."""
    ctx = RunContext()
    source = SourceFile(Path("loose.lua"))
    source.new_item({"class": "function", "name": "early"}, 1)
    source.new_item({"class": "module", "name": "loose"}, 3)
    source.new_item({"class": "function", "name": "late"}, 5)
    source.finish(ctx)
    assert [m.name for m in source.modules] == ["loose"]
    assert [i.name for i in source.modules[0].items] == ["early", "late"]

    bare = SourceFile(Path("bare.lua"))
    bare.new_item({"class": "function", "name": "f"}, 1)
    with caplog.at_level(logging.WARNING):
        bare.finish(ctx)
    assert [m.name for m in bare.modules] == ["bare"]
    assert bare.modules[0].name_inferred
    assert [i.name for i in bare.modules[0].items] == ["f"]
    assert "no module declared, using 'bare'" in caplog.text
