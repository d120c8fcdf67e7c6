from __future__ import annotations
from bisect import bisect_right
from dataclasses import dataclass
from typing import List, Optional, Tuple

@dataclass(frozen=True)
class Text:
    """A stage's output string plus, for every character, its offset in the original source."""
    text: str
    origin: Tuple[int, ...]

    @classmethod
    def of(cls, source: str) -> "Text":
        return cls(source, tuple(range(len(source))))

    def __len__(self) -> int:
        return len(self.text)

class Cursor:
    """Scan position owned by a single stage; starts at 0 and only moves forward."""
    __slots__ = ("text", "pos")
    def __init__(self, text: str):
        self.text = text; self.pos = 0
    def at_end(self) -> bool:
        return self.pos >= len(self.text)
    def peek(self, offset: int = 0) -> str:
        i = self.pos + offset
        return self.text[i] if i < len(self.text) else ""
    def pair(self) -> str:
        return self.text[self.pos:self.pos+2]
    def advance(self, n: int = 1) -> None:
        self.pos += n

class Builder:
    """Accumulates emitted characters together with their origins."""
    def __init__(self):
        self.chars: List[str] = []
        self.origin: List[int] = []
    def emit(self, ch: str, at: int) -> None:
        self.chars.append(ch); self.origin.append(at)
    def build(self) -> Text:
        return Text("".join(self.chars), tuple(self.origin))

class Locator:
    """Maps offsets in a source string to 1-based (line, column)."""
    def __init__(self, source: str):
        self.starts = [0]
        for i, ch in enumerate(source):
            if ch == "\n":
                self.starts.append(i+1)
        self.size = len(source)

    def locate(self, offset: Optional[int]) -> Tuple[int, int]:
        if offset is None:
            return 0, 0
        offset = min(max(offset, 0), self.size)
        line = bisect_right(self.starts, offset)
        return line, offset - self.starts[line-1] + 1
