"""Command-line interface for mindmap-opml."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from . import generate, read
from .dates import DATE_FORMATTER
from .errors import OPMLError
from .logger import configure_logging, get_logger

logger = get_logger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="mindmap-opml",
        description="Inspect and re-format OPML mind map files",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    sub = parser.add_subparsers(dest="command", required=True)

    # --- info ---
    p_info = sub.add_parser("info", help="Show document summary")
    p_info.add_argument("file", help="Path to .opml file")
    p_info.add_argument("--depth", type=int, default=2, help="Tree depth to show (default: 2)")

    # --- tree ---
    p_tree = sub.add_parser("tree", help="Print full outline tree")
    p_tree.add_argument("file", help="Path to .opml file")
    p_tree.add_argument("--depth", type=int, default=99, help="Max depth")

    # --- find ---
    p_find = sub.add_parser("find", help="Search for outlines by text")
    p_find.add_argument("file", help="Path to .opml file")
    p_find.add_argument("query", help="Text to search for")

    # --- format ---
    p_format = sub.add_parser("format", help="Re-emit the file as canonical OPML")
    p_format.add_argument("file", help="Path to .opml file")
    p_format.add_argument("-o", "--output", help="Output file (default: stdout)")

    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(args.verbose)

    commands = {
        "info": cmd_info,
        "tree": cmd_tree,
        "find": cmd_find,
        "format": cmd_format,
    }
    try:
        commands[args.command](args)
    except (OPMLError, FileNotFoundError) as e:
        logger.debug("Command %s failed", args.command, exc_info=True)
        print(f"error: {e}", file=sys.stderr)
        return 1
    return 0


def _label(outline) -> str:
    return outline.text if outline.text is not None else "(untitled)"


def _print_tree(outlines, max_depth: int, depth: int = 0) -> None:
    if depth > max_depth:
        return
    for outline in outlines:
        desc_count = outline.count() - 1
        suffix = f" ({desc_count} items)" if desc_count > 0 else ""
        print("  " * depth + f"• {_label(outline)}{suffix}")
        _print_tree(outline.children, max_depth, depth + 1)


def cmd_info(args):
    doc = read(args.file)
    head = doc.head
    print(f"File: {args.file}")
    print(f"Title: {head.title or ''}")
    print(f"Version: {doc.version}")
    if head.owner_name:
        print(f"Owner: {head.owner_name}")
    if head.date_modified is not None:
        print(f"Modified: {DATE_FORMATTER.format(head.date_modified)}")
    print(f"Outlines: {doc.outline_count}")
    print()
    _print_tree(doc.outlines, args.depth)


def cmd_tree(args):
    doc = read(args.file)

    def show(outline, depth):
        if depth > args.depth:
            return
        print("  " * depth + _label(outline))
        for child in outline.children:
            show(child, depth + 1)

    for outline in doc.outlines:
        show(outline, 0)


def cmd_find(args):
    doc = read(args.file)
    query = args.query.lower()

    def search(outline, path):
        path = path + [_label(outline)]
        if outline.text is not None and query in outline.text.lower():
            print(" → ".join(path))
        for child in outline.children:
            search(child, path)

    for outline in doc.outlines:
        search(outline, [])


def cmd_format(args):
    text = generate(read(args.file))

    if args.output:
        Path(args.output).write_text(text, encoding="utf-8")
        print(f"Formatted to {args.output}")
    else:
        print(text)


if __name__ == "__main__":
    sys.exit(main())
