from __future__ import annotations
import argparse, logging, sys
from .errors import LexError
from .pipeline import analyze
from .report import format_diagnostic, format_statistics, to_json, transcript

def read_file(p):
    with open(p, "r", encoding="utf-8") as f:
        return f.read()

def main(argv=None):
    ap = argparse.ArgumentParser(prog="cscan", description="Lex a C source file into classified tokens.")
    ap.add_argument("src")
    ap.add_argument("--stats", action="store_true", help="append per-kind token counts")
    ap.add_argument("--json", action="store_true", help="print a JSON document instead of the transcript")
    ap.add_argument("--show-clean", action="store_true", help="print the comment-free, normalized source")
    ap.add_argument("--diagnostics", action="store_true", help="report dropped characters and tokens on stderr")
    ap.add_argument("--strict", action="store_true", help="treat the first diagnostic as fatal")
    ap.add_argument("-v", "--verbose", action="store_true")
    args = ap.parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING,
                        format="%(name)s: %(message)s")

    try:
        src = read_file(args.src)
    except (OSError, UnicodeDecodeError):
        print(f"Error: Could not open file {args.src}", file=sys.stderr); sys.exit(1)

    try:
        analysis = analyze(src, strict=args.strict)
    except LexError as e:
        print(format_diagnostic(e, "error"), file=sys.stderr); sys.exit(2)

    if args.diagnostics:
        for d in analysis.diagnostics:
            print(format_diagnostic(d), file=sys.stderr)

    if args.json:
        print(to_json(args.src, analysis))
        return
    print(transcript(args.src, analysis, show_clean=args.show_clean))
    if args.stats:
        print()
        print(format_statistics(analysis))

if __name__ == "__main__":
    main()
