"""Tests for configuration loading and extension hooks."""

from pathlib import Path

import pytest
import yaml

from tagdoc.apply_config import apply_config
from tagdoc.deep_merge import deep_merge
from tagdoc.errors import ConfigurationError
from tagdoc.find_config import find_config
from tagdoc.load_config import load_config
from tagdoc.lua_language import LuaLanguage
from tagdoc.run_context import RunContext


def test_deep_merge_nested() -> None:
    """Verify recursive merging of dictionaries."""
    base = {"aliases": {"p": "param"}, "title": "A"}
    update = {"aliases": {"r": "return"}, "title": "B"}
    merged = deep_merge(base, update)
    assert merged == {"aliases": {"p": "param", "r": "return"}, "title": "B"}


def test_deep_merge_additive_lists() -> None:
    """Verify sections and new_types are additive while other lists replace."""
    base = {"sections": [{"name": "a"}], "file": ["x"]}
    update = {"sections": [{"name": "a"}, {"name": "b"}], "file": ["y"]}
    merged = deep_merge(base, update)
    assert merged["sections"] == [{"name": "a"}, {"name": "b"}]
    assert merged["file"] == ["y"]


def test_load_config_defaults() -> None:
    """Verify defaults are returned without a file."""
    config = load_config(None)
    assert config["package"] == "."
    assert config["all"] is False
    assert config["aliases"] == {}


def test_load_config_with_file(tmp_path: Path) -> None:
    """Verify user config overrides defaults."""
    config_file = tmp_path / "tagdoc.yml"
    config_file.write_text(yaml.dump({"project": "demo", "all": True}))
    loaded = load_config(config_file)
    assert loaded["project"] == "demo"
    assert loaded["all"] is True
    assert loaded["strict"] is False


def test_load_config_does_not_mutate_defaults(tmp_path: Path) -> None:
    """Verify loading twice starts from clean defaults."""
    config_file = tmp_path / "tagdoc.yml"
    config_file.write_text(yaml.dump({"aliases": {"p": "param"}}))
    load_config(config_file)
    assert load_config(None)["aliases"] == {}


def test_load_config_invalid_yaml(tmp_path: Path) -> None:
    """Verify malformed YAML is a configuration error."""
    config_file = tmp_path / "tagdoc.yml"
    config_file.write_text("aliases: [p, q\n")
    with pytest.raises(ConfigurationError):
        load_config(config_file)


def test_apply_config_hooks() -> None:
    """Verify each configured extension reaches its registry."""
    ctx = RunContext()
    config = load_config(None)
    config.update(
        {
            "all": True,
            "aliases": {"p": "param"},
            "sections": [{"name": "table", "title": "Data"}],
            "new_types": [
                {"tag": "event", "header": "Events"},
                {"tag": "example", "header": "Examples", "project_level": True},
            ],
            "extensions": {"luax": "lua"},
        }
    )
    apply_config(config, ctx)
    assert ctx.show_locals
    assert ctx.tags.canonical("p") == "param"
    assert ctx.module_kinds.lookup("table").title == "Data"
    assert "event" in ctx.module_kinds
    assert "example" in ctx.project_kinds
    assert ctx.tags.project_level("example")
    assert isinstance(ctx.languages.for_path(Path("x.luax")), LuaLanguage)


def test_apply_config_rejects_bad_entries() -> None:
    """Verify malformed hook entries and unknown languages are rejected."""
    with pytest.raises(ConfigurationError):
        apply_config({"sections": ["table"]}, RunContext())
    with pytest.raises(ConfigurationError):
        apply_config({"new_types": [{"tag": "event"}]}, RunContext())
    with pytest.raises(ConfigurationError):
        apply_config({"extensions": {"py": "python"}}, RunContext())


def test_find_config_in_tree(tmp_path: Path) -> None:
    """Verify a directory uses the first config file in its tree."""
    (tmp_path / "b").mkdir()
    (tmp_path / "b" / "tagdoc.yml").write_text("project: b\n")
    assert find_config(tmp_path) == tmp_path / "b" / "tagdoc.yml"


def test_find_config_beside_file(tmp_path: Path) -> None:
    """Verify a single file picks up a config next to it."""
    source = tmp_path / "m.lua"
    source.write_text("--- @module m\n")
    assert find_config(source) is None
    (tmp_path / "tagdoc.yml").write_text("all: true\n")
    assert find_config(source) == tmp_path / "tagdoc.yml"


def test_find_config_dot_requires_file(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    """Verify '.' without a config file in the current directory fails."""
    monkeypatch.chdir(tmp_path)
    with pytest.raises(ConfigurationError):
        find_config(Path("."))
