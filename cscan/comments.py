from __future__ import annotations
from typing import List, Tuple
from .errors import LexError, UnterminatedCommentError
from .lineage import Builder, Cursor, Text

NORMAL, LINE, BLOCK = "normal", "line", "block"

def strip_text(src: Text) -> Tuple[Text, List[LexError]]:
    """Remove // and /* */ comments. Only the active mode's terminator is checked."""
    cur = Cursor(src.text)
    out = Builder()
    mode = NORMAL
    opened = 0
    while not cur.at_end():
        ch = cur.peek()
        if mode == LINE:
            if ch == "\n":
                out.emit(ch, src.origin[cur.pos]); mode = NORMAL
            cur.advance(); continue
        if mode == BLOCK:
            if cur.pair() == "*/":
                mode = NORMAL; cur.advance(2)
            else:
                cur.advance()
            continue
        pair = cur.pair()
        if pair == "//":
            mode = LINE; cur.advance(2); continue
        if pair == "/*":
            mode = BLOCK; opened = src.origin[cur.pos]; cur.advance(2); continue
        out.emit(ch, src.origin[cur.pos]); cur.advance()
    diags: List[LexError] = []
    if mode == BLOCK:
        # the rest of the input was swallowed
        diags.append(UnterminatedCommentError(opened))
    return out.build(), diags

def strip_comments(source: str) -> str:
    return strip_text(Text.of(source))[0].text
