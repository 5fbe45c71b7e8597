"""``deskini`` command line tool — parse files and print what was found.

Usage::

    deskini app.desktop                 # one line per entry
    deskini --sections mimeapps.list    # grouped by section header
    deskini --quiet *.desktop           # exit status only
    cat app.desktop | deskini -
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import IO

from .document import Document
from .entries import Comment, Entry, Property, Section
from .errors import EncodingError, ParseError
from .grouping import RepeatPolicy, SectionGroup, group_sections
from .parser import parse_bytes

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_INVALID = 1
EXIT_USAGE = 2


# ---------------------------------------------------------------------------
# Formatting helpers
# ---------------------------------------------------------------------------

def _fmt_entry(entry: Entry) -> str:
    """Format a single entry for one-line display."""
    if isinstance(entry, Section):
        return f"section   [{entry.name}]"
    if isinstance(entry, Property):
        return f'property  {entry.name} = "{entry.value}"'
    if isinstance(entry, Comment):
        return f'comment   "{entry.text}"'
    return repr(entry)


def _show_entries(doc: Document, dest: IO[str]) -> None:
    if not doc:
        print("  (no entries)", file=dest)
        return
    for entry in doc:
        print(f"  {_fmt_entry(entry)}", file=dest)


def _show_groups(groups: list[SectionGroup], dest: IO[str]) -> None:
    if not groups:
        print("  (no sections)", file=dest)
        return
    for group in groups:
        header = "(no section)" if group.name is None else f"[{group.name}]"
        print(f"  {header}", file=dest)
        if not group.properties:
            continue
        width = max(len(p.name) for p in group.properties)
        for prop in group.properties:
            print(f"    {prop.name:<{width}} = {prop.value}", file=dest)


# ---------------------------------------------------------------------------
# File handling
# ---------------------------------------------------------------------------

def _read(path: str) -> bytes:
    if path == "-":
        return sys.stdin.buffer.read()
    with open(path, "rb") as fh:
        return fh.read()


def _check_file(path: str, args: argparse.Namespace, dest: IO[str]) -> int:
    """Parse one file and report on it. Returns its exit status."""
    try:
        data = _read(path)
    except OSError as exc:
        print(f"Error reading '{path}': {exc}", file=sys.stderr)
        return EXIT_USAGE

    try:
        doc = parse_bytes(data)
    except ParseError as exc:
        print(f"{path}: {exc}", file=sys.stderr)
        return EXIT_INVALID
    except EncodingError as exc:
        print(f"{path}: {exc}", file=sys.stderr)
        return EXIT_INVALID

    logger.info("%s: %d entries", path, len(doc))
    if args.quiet:
        return EXIT_OK

    print(f"{path}:", file=dest)
    if args.sections:
        _show_groups(group_sections(doc, RepeatPolicy(args.policy)), dest)
    else:
        _show_entries(doc, dest)
    return EXIT_OK


# ---------------------------------------------------------------------------
# Entry point
# ---------------------------------------------------------------------------

def build_arg_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="deskini",
        description="Parse desktop-entry and association-list files.",
    )
    ap.add_argument("files", nargs="+", metavar="FILE", help="file to parse ('-' for stdin)")
    ap.add_argument("--sections", action="store_true", help="group properties by section")
    ap.add_argument(
        "--policy",
        choices=[p.value for p in RepeatPolicy],
        default=RepeatPolicy.MERGE.value,
        help="how repeated section headers are grouped (default: merge)",
    )
    ap.add_argument("-q", "--quiet", action="store_true", help="only set the exit status")
    ap.add_argument("-v", "--verbose", action="store_true", help="enable debug logging")
    return ap


def main(argv: list[str] | None = None, dest: IO[str] | None = None) -> int:
    args = build_arg_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    out = dest if dest is not None else sys.stdout

    status = EXIT_OK
    for path in args.files:
        status = max(status, _check_file(path, args, out))
    return status


if __name__ == "__main__":
    sys.exit(main())
