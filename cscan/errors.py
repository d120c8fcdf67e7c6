from __future__ import annotations
from typing import Optional

class LexError(Exception):
    """A problem found while lexing. Collected as a diagnostic, raised only in strict mode."""
    def __init__(self, message: str, lexeme: str = "", offset: Optional[int] = None,
                 line: int = 0, column: int = 0):
        super().__init__(message)
        self.message = message
        self.lexeme = lexeme
        self.offset = offset
        self.line = line
        self.column = column

    def where(self) -> str:
        return f"{self.line}:{self.column}"

    def located(self, line: int, column: int) -> "LexError":
        self.line = line; self.column = column
        return self

    def to_dict(self) -> dict:
        return {
            "kind": type(self).__name__,
            "message": self.message,
            "lexeme": self.lexeme,
            "line": self.line,
            "column": self.column,
        }

class UnrecognizedTokenError(LexError):
    """Punctuation that is not an operator, or a buffered word that is neither number nor identifier."""
    def __init__(self, lexeme: str, reason: str, offset: Optional[int] = None):
        if reason == "operator":
            msg = f"unrecognized character {lexeme!r}"
        else:
            msg = f"malformed token {lexeme!r}"
        super().__init__(msg, lexeme, offset)
        self.reason = reason

class UnterminatedCommentError(LexError):
    def __init__(self, offset: Optional[int] = None):
        super().__init__("unterminated block comment", "/*", offset)
