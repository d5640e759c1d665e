"""Registry mapping file extensions to source languages."""

from pathlib import Path

from tagdoc.c_language import CLanguage
from tagdoc.errors import ConfigurationError
from tagdoc.language import Language
from tagdoc.lua_language import LuaLanguage

DEFAULT_EXTENSIONS = {
    ".lua": "lua",
    ".ldoc": "lua",
    ".luadoc": "lua",
    ".c": "c",
    ".cpp": "c",
    ".cxx": "c",
    ".C": "c",
}


class LanguageRegistry:
    """Maps extensions such as '.lua' to a Language instance."""

    def __init__(self) -> None:
        """Initialize with the built-in languages and extensions."""
        self.languages: dict[str, Language] = {"lua": LuaLanguage(), "c": CLanguage()}
        self.extensions: dict[str, Language] = {}
        for ext, lang in DEFAULT_EXTENSIONS.items():
            self.add_language_extension(ext, lang)

    def add_language_extension(self, ext: str, lang: str) -> None:
        """Parse files with this extension as the named language ('lua' or 'c')."""
        language = self.languages.get(lang)
        if language is None:
            msg = f"unknown language {lang!r} for extension {ext!r}"
            raise ConfigurationError(msg)
        if not ext.startswith("."):
            ext = "." + ext
        self.extensions[ext] = language

    def for_path(self, path: Path) -> Language | None:
        """Return the language for a file, or None if it is not a source file."""
        return self.extensions.get(path.suffix)
