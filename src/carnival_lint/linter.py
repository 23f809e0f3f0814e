from __future__ import annotations
import argparse, logging, sys
from typing import List

from .completion import completions
from .diagnostics import Diagnostic
from .quickfix import apply_edits, code_actions
from .validator import validate

logger = logging.getLogger(__name__)

def lint_text(text: str, *, filename: str | None = None) -> List[Diagnostic]:
    """Valida un documento Carnival y devuelve sus diagnósticos."""
    return validate(text, filename=filename)

def fix_text(text: str, diags: List[Diagnostic]) -> str:
    """Inserta al principio las claves meta que faltan."""
    return apply_edits(text, [a.edit for a in code_actions(diags)])

def main(argv=None) -> int:
    ap = argparse.ArgumentParser(description="Carnival (.cnvl) linter")
    ap.add_argument("sources", nargs="*", help="archivos .cnvl de entrada")
    ap.add_argument("--fix", action="store_true", help="insert missing meta keys in place")
    ap.add_argument("--list-instructions", action="store_true",
                    help="print the known instructions and exit")
    ap.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    args = ap.parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

    if args.list_instructions:
        for item in completions():
            print(item.label)
        return 0
    if not args.sources:
        ap.error("at least one source file is required")

    # el peor código gana: 3 escritura, 2 lectura, 1 errores
    status = 0
    for path in args.sources:
        try:
            # utf-8-sig descarta el BOM inicial si lo hay
            with open(path, "r", encoding="utf-8-sig", newline="") as f:
                text = f.read()
        except Exception as ex:
            print(f"ERROR: could not read {path}: {ex}", file=sys.stderr)
            status = max(status, 2)
            continue

        diags = lint_text(text, filename=path)

        if args.fix:
            fixed = fix_text(text, diags)
            if fixed != text:
                try:
                    with open(path, "w", encoding="utf-8", newline="") as f:
                        f.write(fixed)
                except Exception as ex:
                    print(f"ERROR: could not write {path}: {ex}", file=sys.stderr)
                    status = max(status, 3)
                else:
                    logger.info("fixed meta keys in %s", path)
                    diags = lint_text(fixed, filename=path)

        for d in diags:
            print(d, file=sys.stderr)
            if d.severity == "error":
                status = max(status, 1)

    return status

if __name__ == "__main__":
    raise SystemExit(main())
