"""Token model shared by the language tokenizers."""

from dataclasses import dataclass

COMMENT = "comment"
SPACE = "space"
WORD = "word"
STRING = "string"
OTHER = "other"


@dataclass(frozen=True)
class Token:
    """A single lexeme with the line it starts on."""

    kind: str  # comment/space/word/string/other
    text: str
    line: int

    def is_word(self, text: str | None = None) -> bool:
        """Check if this is a word token, optionally with the given text."""
        return self.kind == WORD and (text is None or self.text == text)

    def is_other(self, text: str) -> bool:
        """Check if this is a punctuation token with the given text."""
        return self.kind == OTHER and self.text == text
