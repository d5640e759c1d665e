"""C and C++ doc comment conventions (`/** */` and `///`)."""

import re

from tagdoc.declaration_probe import DeclarationProbe
from tagdoc.language import Language
from tagdoc.lex_c import lex_c

C_QUALIFIERS = {
    "const", "extern", "inline", "register", "signed", "struct", "union",
    "unsigned", "void", "volatile", "enum",
}  # fmt: skip
C_STOP_WORDS = {
    "break", "case", "continue", "do", "else", "for", "goto", "if", "return",
    "switch", "typedef", "while",
}  # fmt: skip


class CLanguage(Language):
    """C family: Javadoc style block comments and triple slash lines."""

    name = "c"
    doc_comment_re = re.compile(r"/\*\*(?!/)|///")
    block_comment_re = re.compile(r"/\*")
    empty_comment_re = re.compile(r"(/\*\*+/|//[/-]*)\s*$")
    line_marker_re = re.compile(r"^//+ ?")

    def __init__(self) -> None:
        """Initialize the C tokenizer and declaration grammar."""
        super().__init__(
            lex_c,
            DeclarationProbe(
                local_keywords={"static"},
                ignored_words=C_QUALIFIERS,
                stop_words=C_STOP_WORDS,
            ),
        )

    def block_body(self, text: str) -> str:
        """Return the inner text of a /* */ comment without leading stars."""
        body = re.sub(r"^/\*+", "", text)
        body = re.sub(r"\*+/$", "", body)
        lines = [re.sub(r"^[ \t]*\*+ ?", "", line) for line in body.split("\n")]
        if lines and not lines[0].strip():
            lines = lines[1:]
        return "\n".join(lines)
