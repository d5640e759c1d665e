"""Data model for a declaration found after a doc comment."""

from dataclasses import dataclass, field

FUNCTION = "function"
VARIABLE = "variable"
NONE = "none"


@dataclass
class Declaration:
    """What the code right after a comment block declares."""

    kind: str = NONE  # function/variable/none
    name: str | None = None
    params: list[str] = field(default_factory=list)
    fields: list[str] = field(default_factory=list)  # table constructor keys
    is_local: bool = False
    line: int | None = None
    unclosed: bool = False  # table constructor ran to end of input

    @property
    def is_function(self) -> bool:
        """Check if a function definition follows."""
        return self.kind == FUNCTION
