from __future__ import annotations
import re
import string
from dataclasses import dataclass, field
from enum import Enum
from typing import AbstractSet, List, Optional, Union
from .errors import LexError, UnrecognizedTokenError
from .lineage import Cursor, Locator, Text
from .whitespace import WHITESPACE

KEYWORDS = frozenset({
    "auto","break","case","char","const","continue","default","do",
    "double","else","enum","extern","float","for","goto","if",
    "int","long","register","return","short","signed","sizeof","static",
    "struct","switch","typedef","union","unsigned","void","volatile","while"
})

# At most two characters: "<<=" lexes as "<<" then "=".
OPERATORS = frozenset({
    "+","-","*","/","%","=","==","!=","<",">","<=",">=",
    "&&","||","!","&","|","^","~","<<",">>","+=","-=","*=",
    "/=","%=","&=","|=","^=","++","--","->","."
})

PUNCTUATION = frozenset(string.punctuation) - {"_"}
DIGITS = frozenset(string.digits)

NUMBER_RE = re.compile(r"[0-9]+(\.[0-9]+)?")
IDENT_RE = re.compile(r"[A-Za-z_][A-Za-z0-9_]*")

class TokenKind(Enum):
    KEYWORD = "Keyword"
    OPERATOR = "Operator"
    NUMERIC_CONSTANT = "NumericConstant"
    IDENTIFIER = "Identifier"

@dataclass(frozen=True)
class Token:
    kind: TokenKind
    lexeme: str
    line: int = 0
    column: int = 0

@dataclass
class LexResult:
    tokens: List[Token] = field(default_factory=list)
    diagnostics: List[LexError] = field(default_factory=list)
    # token count at each newline of the scanned text
    breaks: List[int] = field(default_factory=list)

def classify(lexeme: str, keywords: AbstractSet[str] = KEYWORDS) -> Optional[TokenKind]:
    """Keyword, then numeric constant, then identifier; None when nothing matches."""
    if lexeme in keywords:
        return TokenKind.KEYWORD
    if NUMBER_RE.fullmatch(lexeme):
        return TokenKind.NUMERIC_CONSTANT
    if IDENT_RE.fullmatch(lexeme):
        return TokenKind.IDENTIFIER
    return None

def _all_digits(s: str) -> bool:
    return bool(s) and all(c in DIGITS for c in s)

def lex(src: Union[str, Text], *, locator: Optional[Locator] = None,
        keywords: AbstractSet[str] = KEYWORDS,
        operators: AbstractSet[str] = OPERATORS) -> LexResult:
    """Split normalized text into maximal tokens.

    Positions come from ``src.origin`` when a ``Text`` is given, resolved
    through ``locator`` (defaults to the scanned text itself).
    """
    text = src if isinstance(src, Text) else Text.of(src)
    loc = locator or Locator(text.text)
    origin = text.origin
    out = LexResult()
    cur = Cursor(text.text)
    buf = ""
    start = 0

    def flush():
        nonlocal buf
        if not buf:
            return
        line, col = loc.locate(origin[start])
        kind = classify(buf, keywords)
        if kind is None:
            err = UnrecognizedTokenError(buf, "malformed", origin[start])
            out.diagnostics.append(err.located(line, col))
        else:
            out.tokens.append(Token(kind, buf, line, col))
        buf = ""

    while not cur.at_end():
        ch = cur.peek()
        if ch == "." and _all_digits(buf) and cur.peek(1) in DIGITS:
            buf += ch; cur.advance(); continue
        if ch in PUNCTUATION:
            flush()
            line, col = loc.locate(origin[cur.pos])
            two = cur.pair()
            if len(two) == 2 and two in operators:
                out.tokens.append(Token(TokenKind.OPERATOR, two, line, col))
                cur.advance(2); continue
            if ch in operators:
                out.tokens.append(Token(TokenKind.OPERATOR, ch, line, col))
            else:
                err = UnrecognizedTokenError(ch, "operator", origin[cur.pos])
                out.diagnostics.append(err.located(line, col))
            cur.advance(); continue
        if ch in WHITESPACE:
            flush()
            if ch == "\n":
                out.breaks.append(len(out.tokens))
            cur.advance(); continue
        if not buf:
            start = cur.pos
        buf += ch; cur.advance()
    flush()
    return out

def tokenize(source: str) -> List[Token]:
    return lex(source).tokens
