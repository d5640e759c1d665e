"""State machine that recognises the declaration following a comment block.

The probe only peeks at the token stream, so the caller keeps full control
over what gets consumed. It understands the small grammar shared by the
supported languages:

    [local-keyword]* function-keyword name ( params )      # Lua
    [local-keyword]* name = function-keyword ( params )    # Lua
    [local-keyword]* word* name ( params )                 # C
    [local-keyword]* name = { key = value, ... }           # table
    [local-keyword]* name = ...                            # variable
"""

from tagdoc.declaration import FUNCTION, NONE, VARIABLE, Declaration
from tagdoc.source_token import COMMENT, OTHER, SPACE, STRING, WORD, Token
from tagdoc.token_stream import TokenStream

AWAITING_DECL = "awaiting_decl"
IN_DECL = "in_decl"
IN_PARAMS = "in_params"
IN_TABLE = "in_table"
DONE = "done"

MAX_LOOKAHEAD = 400

NAME_JOINERS = {".", ":", "->", "::"}
C_DECORATORS = {"*", "&"}


class DeclarationProbe:
    """Reads one declaration from upcoming tokens without consuming them."""

    def __init__(
        self,
        local_keywords: set[str],
        function_keyword: str | None = None,
        ignored_words: set[str] | None = None,
        stop_words: set[str] | None = None,
        max_lookahead: int = MAX_LOOKAHEAD,
    ) -> None:
        """Configure the probe for a language.

        function_keyword: when set, a declaration is only a function if the
        keyword is present (Lua); otherwise any `name(` is a function (C).
        ignored_words: qualifiers that never form part of a name (void, const).
        stop_words: statement keywords that cannot start a declaration.
        """
        self.local_keywords = local_keywords
        self.function_keyword = function_keyword
        self.ignored_words = ignored_words or set()
        self.stop_words = stop_words or set()
        self.max_lookahead = max_lookahead

    def probe(self, stream: TokenStream) -> Declaration:
        """Return the declaration at the front of the stream."""
        self.state = AWAITING_DECL
        self.decl = Declaration()
        self._name: list[str] = []
        self._joined = False
        self._saw_function_kw = False
        self._after_assign = False
        self._group: list[Token] = []
        self._depth = 0
        self._pending_key: str | None = None

        handlers = {
            AWAITING_DECL: self._awaiting_decl,
            IN_DECL: self._in_decl,
            IN_PARAMS: self._in_params,
            IN_TABLE: self._in_table,
        }
        for i, tok in enumerate(stream.lookahead()):
            if self.state == DONE:
                break
            if i >= self.max_lookahead and self.state != IN_TABLE:
                break
            if tok.kind == COMMENT and self.state != AWAITING_DECL:
                continue
            handlers[self.state](tok)

        if self.state == IN_PARAMS:
            # ran out of tokens inside the parameter list
            self.decl.kind = NONE
        elif self.state == IN_DECL and self._name and not self._saw_function_kw:
            self._finish(VARIABLE)
        elif self.state == IN_TABLE:
            self.decl.unclosed = True
            self._finish(VARIABLE)
        return self.decl

    def _finish(self, kind: str) -> None:
        self.decl.kind = kind
        if self._name:
            self.decl.name = "".join(self._name)
        self.state = DONE

    def _awaiting_decl(self, tok: Token) -> None:
        if tok.kind == SPACE:
            return
        if self.decl.line is None:
            self.decl.line = tok.line
        if tok.kind == WORD and tok.text in self.stop_words:
            self.state = DONE
        elif tok.kind == WORD and tok.text in self.local_keywords:
            self.decl.is_local = True
        elif tok.kind == WORD and tok.text == self.function_keyword:
            self._saw_function_kw = True
            self.state = IN_DECL
        elif tok.kind == WORD and tok.text not in self.ignored_words:
            self._name = [tok.text]
            self.state = IN_DECL
        elif tok.kind == WORD or tok.text in C_DECORATORS:
            return
        else:
            self.state = DONE

    def _in_decl(self, tok: Token) -> None:
        if tok.kind == SPACE:
            return
        if tok.kind == WORD:
            if self._after_assign:
                if tok.text == self.function_keyword:
                    self._saw_function_kw = True
                    return
                self._finish(VARIABLE)
            elif self._joined or not self._name:
                self._name.append(tok.text)
            elif self.function_keyword:
                # no type prefixes here, so a second bare word is a new statement
                self._finish(VARIABLE)
                return
            elif tok.text not in self.ignored_words:
                # C style: type words precede the name, the last one wins
                self._name = [tok.text]
            self._joined = False
            return
        if tok.kind == OTHER and tok.text in NAME_JOINERS and not self._after_assign:
            self._name.append(tok.text)
            self._joined = True
        elif tok.kind == OTHER and tok.text in C_DECORATORS:
            return
        elif tok.is_other("("):
            if self.function_keyword and not self._saw_function_kw:
                # a call such as module(...) or print(x)
                self.state = DONE
                return
            self.decl.kind = FUNCTION
            self.state = IN_PARAMS
        elif tok.is_other("=") and not self._after_assign:
            self._after_assign = True
        elif tok.is_other("{") and self._after_assign:
            self.decl.kind = VARIABLE
            self._depth = 1
            self.state = IN_TABLE
        elif self._name and (self._after_assign or tok.text in (";", ",", "{", "[")):
            self._finish(VARIABLE)
        else:
            self.state = DONE

    def _in_params(self, tok: Token) -> None:
        if tok.is_other(")") and self._depth == 0:
            self._close_group()
            self._finish(FUNCTION)
            return
        if tok.is_other("("):
            self._depth += 1
        elif tok.is_other(")"):
            self._depth -= 1
        if tok.is_other(",") and self._depth == 0:
            self._close_group()
        elif tok.kind != SPACE:
            self._group.append(tok)

    def _close_group(self) -> None:
        words = [t.text for t in self._group if t.kind == WORD]
        if any(t.is_other("...") for t in self._group):
            self.decl.params.append("...")
        elif words and words != ["void"]:
            self.decl.params.append(words[-1])
        self._group = []

    def _in_table(self, tok: Token) -> None:
        if tok.kind == SPACE:
            return
        if tok.is_other("{") or tok.is_other("(") or tok.is_other("["):
            self._depth += 1
            self._pending_key = None
        elif tok.is_other("}") or tok.is_other(")") or tok.is_other("]"):
            self._depth -= 1
            if self._depth == 0:
                self._finish(VARIABLE)
        elif self._depth == 1 and tok.kind == WORD:
            self._pending_key = tok.text
        elif self._depth == 1 and tok.is_other("=") and self._pending_key:
            self.decl.fields.append(self._pending_key)
            self._pending_key = None
        elif tok.kind in (OTHER, STRING):
            self._pending_key = None
