from __future__ import annotations
import json
from .lexer import TokenKind
from .pipeline import Analysis

def transcript(path: str, analysis: Analysis, show_clean: bool = False) -> str:
    """Banner, then one "<Kind>: <lexeme>" line per token, blank lines where the source broke lines."""
    out = [f"Processing file: {path}", ""]
    if show_clean:
        out += ["Clean source:", "-------------", analysis.normalized, ""]
    out += ["Tokens:", "-------"]
    breaks = analysis.breaks
    b = 0
    for i, tok in enumerate(analysis.tokens):
        while b < len(breaks) and breaks[b] <= i:
            out.append(""); b += 1
        out.append(f"{tok.kind.value}: {tok.lexeme}")
    out.extend("" for _ in breaks[b:])
    return "\n".join(out)

def format_statistics(analysis: Analysis) -> str:
    out = ["Statistics:", "-----------"]
    for kind in TokenKind:
        out.append(f"{kind.value}: {analysis.statistics[kind]}")
    out.append(f"Total: {analysis.total}")
    return "\n".join(out)

def format_diagnostic(d, level: str = "warning") -> str:
    return f"[lex {level}] {d.where()}: {d.message}"

def to_json(path: str, analysis: Analysis) -> str:
    doc = {
        "file": path,
        "tokens": [
            {"kind": t.kind.value, "lexeme": t.lexeme, "line": t.line, "column": t.column}
            for t in analysis.tokens
        ],
        "diagnostics": [d.to_dict() for d in analysis.diagnostics],
        "statistics": {k.value: analysis.statistics[k] for k in TokenKind},
    }
    return json.dumps(doc, indent=2)
