from __future__ import annotations

import argparse
import logging
import sys

from .api import parse_file, read_text, write_file
from .errors import PtcrError
from .format import format_records
from .render import print_ptcr_file


def _non_negative(value: str) -> int:
    try:
        n = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"not an integer: {value!r}") from None
    if n < 0:
        raise argparse.ArgumentTypeError(f"must be >= 0: {n}")
    return n


def _build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(prog="ptcr", description="PTCR command line tool")
    ap.add_argument("-v", "--verbose", action="store_true", help="Log debug output to stderr")
    sub = ap.add_subparsers(dest="command", required=True)

    p = sub.add_parser("print", help="Print comments with surrounding source code")
    p.add_argument("ptcr_file", help="PTCR file to read")
    p.add_argument("-C", "--context", type=_non_negative, default=0, help="Number of context lines")

    f = sub.add_parser("fmt", help="Rewrite a PTCR file in canonical form")
    f.add_argument("ptcr_file", help="PTCR file to rewrite")
    f.add_argument("--check", action="store_true", help="Only report whether the file is canonical")
    return ap


def _fmt(path: str, *, check: bool) -> int:
    records = parse_file(path)
    if not check:
        write_file(path, records)
        return 0
    if read_text(path) != format_records(records):
        print(f"{path}: not canonical", file=sys.stderr)
        return 1
    return 0


def main(argv: list[str] | None = None) -> int:
    args = _build_parser().parse_args(argv)
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    try:
        if args.command == "print":
            print_ptcr_file(args.ptcr_file, context=args.context)
            return 0
        if args.command == "fmt":
            return _fmt(args.ptcr_file, check=args.check)
    except PtcrError as e:
        print(f"ptcr: error: {e}", file=sys.stderr)
        return 1
    raise AssertionError(f"unhandled command: {args.command}")
