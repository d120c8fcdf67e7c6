from __future__ import annotations
import logging
from collections import Counter
from dataclasses import dataclass, field
from typing import List
from .comments import strip_text
from .errors import LexError
from .lexer import Token, TokenKind, lex
from .lineage import Locator, Text
from .whitespace import normalize_text

logger = logging.getLogger(__name__)

@dataclass
class Analysis:
    source: str
    stripped: str
    normalized: str
    tokens: List[Token]
    diagnostics: List[LexError]
    breaks: List[int]
    statistics: Counter = field(default_factory=Counter)

    @property
    def total(self) -> int:
        return sum(self.statistics.values())

def analyze(source: str, strict: bool = False) -> Analysis:
    """Strip comments, normalize whitespace, then tokenize.

    Token and diagnostic positions point into ``source``. With ``strict``
    the first diagnostic is raised instead of collected.
    """
    loc = Locator(source)
    stripped, diags = strip_text(Text.of(source))
    for d in diags:
        d.located(*loc.locate(d.offset))
    logger.debug("strip: %d -> %d chars", len(source), len(stripped))
    normalized = normalize_text(stripped)
    logger.debug("normalize: %d -> %d chars", len(stripped), len(normalized))
    res = lex(normalized, locator=loc)
    logger.debug("lex: %d tokens, %d diagnostics", len(res.tokens), len(res.diagnostics))

    diagnostics = sorted(res.diagnostics + diags, key=lambda d: d.offset or 0)
    if strict and diagnostics:
        raise diagnostics[0]
    stats = Counter({k: 0 for k in TokenKind})
    stats.update(t.kind for t in res.tokens)
    return Analysis(source, stripped.text, normalized.text, res.tokens,
                    diagnostics, res.breaks, stats)
