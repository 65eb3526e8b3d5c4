"""Token-level cursor over an input line with backtracking support."""

from .codes import Special
from .stack import DataStack, ParsedData


class Parser:
    """Reads tokens from an input string and records them on a stack.

    ``lexer`` is a callable taking the unread rest of the input and returning
    ``(code, lexeme)`` for the token at its start. Whitespace is reported with
    the code :attr:`Special.WHITESPACE`; the parser records it and reads on.
    """

    def __init__(self, lexer):
        self.lexer = lexer
        self.stack = DataStack()
        self.text = ""
        self.position = 0

    def scan(self, text):
        """Start reading ``text`` from its beginning."""
        self.text = text
        self.position = 0

    def _lex(self):
        while True:
            code, lexeme = self.lexer(self.text[self.position:])
            if code != Special.WHITESPACE:
                return int(code), lexeme
            if not lexeme:
                raise ValueError("lexer reported whitespace of zero length")
            self.skip_whitespace(len(lexeme))

    def _consume(self, code, lexeme):
        self.position += len(lexeme)
        self.stack.push(ParsedData(code=code, text=lexeme, length=len(lexeme)))

    def forward(self):
        """Read the next token, push it and return its code."""
        code, lexeme = self._lex()
        self._consume(code, lexeme)
        return code

    def fastforward(self):
        """Read tokens until one is not recognised or the input runs out.

        The unrecognised token is left unread. Returns the codes read.
        """
        codes = []
        while self.position < len(self.text):
            code, lexeme = self._lex()
            if code == Special.NOT_IN_A_DICTIONARY:
                break
            self._consume(code, lexeme)
            codes.append(code)
        return codes

    def rewind(self, count):
        """Undo the last ``count`` stack entries, moving the cursor back."""
        if count <= 0 or self.position == 0:
            return
        if count > len(self.stack):
            raise IndexError(
                f"cannot rewind {count} entries, only {len(self.stack)} recorded"
            )
        for _ in range(count):
            self.position -= self.stack.pop().length

    def skip_whitespace(self, count):
        """Consume ``count`` whitespace characters and record them."""
        self.position += count
        self.stack.push(ParsedData(code=int(Special.WHITESPACE), text=None, length=count))

    def checkpoint(self):
        """Return a marker of the current parsing state."""
        return len(self.stack)

    def restore(self, checkpoint):
        """Return to the state saved by :meth:`checkpoint`."""
        while len(self.stack) > checkpoint:
            self.position -= self.stack.pop().length