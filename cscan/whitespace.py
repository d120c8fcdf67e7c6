from __future__ import annotations
from .lineage import Builder, Text

# C isspace() in the "C" locale
WHITESPACE = frozenset(" \t\n\v\f\r")

def normalize_text(src: Text) -> Text:
    out = Builder()
    last_was_space = True  # trims leading whitespace
    for ch, at in zip(src.text, src.origin):
        if ch == "\n":
            out.emit("\n", at)
            last_was_space = True
        elif ch in WHITESPACE:
            if not last_was_space:
                out.emit(" ", at)
                last_was_space = True
        else:
            out.emit(ch, at)
            last_was_space = False
    return out.build()

def normalize_whitespace(source: str) -> str:
    """Collapse horizontal whitespace runs to one space; newlines always survive."""
    return normalize_text(Text.of(source)).text
