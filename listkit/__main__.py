"""CLI entry point: python -m listkit {slug,list,inventory} [options]"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any

from rich import box
from rich.console import Console
from rich.table import Table

from listkit.config import load_theme_config
from listkit.content import DEFAULT_DATE_FORMAT, NormalizeOptions, normalize_entries
from listkit.inventory import (
    DEFAULT_CONTENT_ROOTS,
    REPORT_FILENAME,
    build_inventory,
    write_inventory,
)
from listkit.items import NormalizedEntry
from listkit.paginate import Paginator
from listkit.slug import slugify

logger = logging.getLogger(__name__)

_LOG_FORMAT = "%(asctime)s [%(name)s] %(levelname)s: %(message)s"


def _positive_int(value: str) -> int:
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected an integer, got {value!r}") from None
    if number <= 0:
        raise argparse.ArgumentTypeError(f"must be > 0, got {number}")
    return number


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="listkit",
        description=(
            "Content listing helpers for static sites.\n"
            "Slugify titles, preview paginated listings, inventory MDX content."
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--log-level", default="WARNING",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
                        metavar="{DEBUG,INFO,WARNING,ERROR}",
                        help="Logging level (default: WARNING)")
    sub = parser.add_subparsers(dest="command", required=True)

    p_slug = sub.add_parser("slug", help="Print a URL slug for each TEXT argument")
    p_slug.add_argument("text", nargs="+", metavar="TEXT")

    p_list = sub.add_parser("list", help="Normalize, sort and paginate raw entries")
    p_list.add_argument("entries", metavar="ENTRIES_JSON",
                        help="JSON array of raw entries ({metadata, location} objects)")
    p_list.add_argument("--page", default="1", metavar="N",
                        help="Page to show; out-of-range values are clamped (default: 1)")
    p_list.add_argument("--page-size", type=_positive_int, default=None, metavar="N",
                        help="Items per page (default: from --config, else 10)")
    p_list.add_argument("--config", default=None, metavar="THEME_YAML",
                        help="Theme configuration file")
    p_list.add_argument("--date-format", default=DEFAULT_DATE_FORMAT, metavar="FMT",
                        help=f"strptime pattern for publishDate (default: {DEFAULT_DATE_FORMAT!r})")
    p_list.add_argument("--json", action="store_true", default=False,
                        help="Print the page as JSON instead of a table")

    p_inv = sub.add_parser("inventory", help="Count MDX files per content root")
    p_inv.add_argument("--root", default=".", metavar="DIR",
                       help="Project root the content roots are relative to (default: .)")
    p_inv.add_argument("--content-root", action="append", default=None, metavar="PATH",
                       dest="content_roots",
                       help="Content root to count (repeatable; default: blog, solutions, industries)")
    p_inv.add_argument("--out", default=None, metavar="FILE",
                       help=f"Report path (default: <root>/{REPORT_FILENAME})")
    return parser


# ---------------------------------------------------------------------------
# Commands
# ---------------------------------------------------------------------------

def _cmd_slug(args: argparse.Namespace) -> int:
    for text in args.text:
        print(slugify(text))
    return 0


def _entry_to_json(entry: NormalizedEntry) -> dict[str, Any]:
    return entry.model_dump(mode="json")


def _print_table(entries: list[NormalizedEntry], page: int, pager: Paginator) -> None:
    console = Console()
    tbl = Table(
        title=f"[bold green]Page {page} of {pager.total_pages}[/bold green]",
        box=box.SIMPLE_HEAVY,
        show_lines=False,
    )
    tbl.add_column("Published", style="yellow", width=12, no_wrap=True)
    tbl.add_column("Title",     style="cyan",   max_width=48, no_wrap=True)
    tbl.add_column("Slug",      style="green",  max_width=32, no_wrap=True)
    tbl.add_column("Tags",      style="dim",    max_width=24)
    for entry in entries:
        published = entry.publish_date.date().isoformat() if entry.has_date else "-"
        tags = entry.tags if isinstance(entry.tags, list) else [entry.tags]
        tbl.add_row(
            published,
            str(entry.title),
            slugify(entry.title),
            ", ".join(str(t) for t in tags),
        )
    console.print(tbl)


def _cmd_list(args: argparse.Namespace) -> int:
    theme = load_theme_config(args.config)
    raw = json.loads(Path(args.entries).read_text(encoding="utf-8"))
    if not isinstance(raw, list):
        print(f"ERROR: {args.entries} must contain a JSON array of entries", file=sys.stderr)
        return 1

    entries = normalize_entries(raw, NormalizeOptions(date_format=args.date_format))
    pager = Paginator(entries, args.page_size or theme.pagination.page_size)
    page = pager.clamp(args.page)
    items = pager.slice(page)
    logger.info("Showing page %d/%d (%d entries total)", page, pager.total_pages, len(entries))

    if args.json:
        payload = {
            "page": page,
            "total_pages": pager.total_pages,
            "page_size": pager.page_size,
            "entries": [_entry_to_json(e) for e in items],
        }
        print(json.dumps(payload, indent=2, ensure_ascii=False))
    else:
        _print_table(items, page, pager)
    return 0


def _cmd_inventory(args: argparse.Namespace) -> int:
    root = Path(args.root)
    report = build_inventory(root, args.content_roots or DEFAULT_CONTENT_ROOTS)
    out = write_inventory(report, args.out or root / REPORT_FILENAME)
    logger.info("Inventory written to %s", out)
    print(report.to_markdown())
    return 0


_COMMANDS = {
    "slug": _cmd_slug,
    "list": _cmd_list,
    "inventory": _cmd_inventory,
}


def main(argv: list[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level), format=_LOG_FORMAT)

    try:
        return _COMMANDS[args.command](args)
    except (OSError, ValueError) as exc:
        # ConfigError, JSONDecodeError and pydantic's ValidationError are ValueErrors
        print(f"ERROR: {exc}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
