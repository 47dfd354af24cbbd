from __future__ import annotations
import argparse, json, logging, os, sys
from dataclasses import asdict

from . import config as CFG
from .engine import Engine
from .errors import CorpusFormatError


def _supports_color() -> bool:
    return sys.stdout.isatty() and os.environ.get("NO_COLOR", "") == ""

CSI = "\033["
def _c(text: str, code: str) -> str:
    if not _supports_color(): return text
    return f"{CSI}{code}m{text}{CSI}0m"


def _report(eng: Engine, q: str, threshold: int) -> dict:
    hit = eng.locate(q)
    return {
        "query": q,
        "ratio": eng.ratio_of_words_present(q, threshold),
        "any": eng.any_words_present(q, threshold),
        "words": eng.which_words_present(q),
        "location": asdict(hit) if hit else None,
    }


def _print_report(row: dict) -> None:
    print(f"ratio  {row['ratio']:.3f}")
    if not row["any"]:
        print(_c("none of those words are in the bible", "1;31"))
        return
    print(f"words  {' '.join(row['words']) or '-'}")
    loc = row["location"]
    if loc is None:
        print(_c("(no location)", "2;37")); return
    ref = f" {loc['verse'][0]}:{loc['verse'][1]}" if loc["verse"] else ""
    print(_c(f"{loc['division_title']} / {loc['document_title']}{ref}", "1;37"))
    print(loc["excerpt"].strip())


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(description="Are these words in the bible? (CLI)")
    p.add_argument("--q", default=None, help="Single query to run once")
    p.add_argument("--repl", action="store_true", help="Interactive loop")
    p.add_argument("--threshold", type=int, default=CFG.DEFAULT_THRESHOLD,
                   help="Inputs with fewer words than this always score 1.0")
    p.add_argument("--corpus", default=None, help="Path to a corpus file (default: bundled)")
    p.add_argument("--json", action="store_true", help="Emit JSON rows")
    p.add_argument("--verbose", action="store_true")
    args = p.parse_args(argv)

    if args.verbose or CFG.VERBOSE:
        logging.basicConfig(level=logging.INFO)

    eng = Engine(path=args.corpus)
    try:
        eng.warm()
    except (OSError, CorpusFormatError) as e:
        print(f"error: cannot load corpus: {e}", file=sys.stderr)
        return 2

    def run_query(q: str) -> None:
        row = _report(eng, q, args.threshold)
        if args.json:
            print(json.dumps(row, ensure_ascii=False, indent=2))
        else:
            _print_report(row)

    if args.q:
        run_query(args.q)

    if args.repl:
        print("Type some words (empty line to exit).")
        while True:
            try:
                q = input("> ").strip()
            except (EOFError, KeyboardInterrupt):
                break
            if not q:
                break
            run_query(q)

    return 0

if __name__ == "__main__":
    raise SystemExit(main())
