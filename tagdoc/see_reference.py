"""Data model for a resolved (or unresolved) @see reference."""

from dataclasses import dataclass


@dataclass(frozen=True)
class SeeReference:
    """A @see target; unresolved targets keep only their label."""

    label: str
    module: str | None = None
    name: str | None = None  # item name within module, None for the module itself

    @property
    def resolved(self) -> bool:
        """Check if the reference points at a known module or item."""
        return self.module is not None
