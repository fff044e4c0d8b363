"""Baseline content inventory: count MDX documents per content root."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass, field
from datetime import UTC, datetime
from pathlib import Path

logger = logging.getLogger(__name__)

DEFAULT_CONTENT_ROOTS: tuple[str, ...] = (
    "src/pages/blog/posts",
    "src/pages/solutions/items",
    "src/pages/industries/items",
)
CONTENT_SUFFIX = ".mdx"
REPORT_FILENAME = "BASELINE_CONTENT.md"


def count_content_files(directory: Path, suffix: str = CONTENT_SUFFIX) -> int:
    """Count entries in *directory* whose name ends with *suffix*.

    Subdirectories are not descended into.  A missing or unreadable
    directory counts as 0.
    """
    try:
        return sum(1 for child in directory.iterdir() if child.name.endswith(suffix))
    except OSError as exc:
        logger.debug("Cannot list %s: %s", directory, exc)
        return 0


@dataclass
class InventoryReport:
    counts: dict[str, int]
    generated_at: datetime = field(default_factory=lambda: datetime.now(UTC))

    @property
    def total(self) -> int:
        return sum(self.counts.values())

    def to_markdown(self) -> str:
        lines = "\n".join(f"- {root}: {n} MDX files" for root, n in self.counts.items())
        stamp = self.generated_at.astimezone(UTC).isoformat(timespec="milliseconds")
        stamp = stamp.replace("+00:00", "Z")
        return f"# Baseline Content Inventory\n\n{lines}\n\nGenerated: {stamp}\n"


def build_inventory(
    project_root: str | Path = ".",
    content_roots: Iterable[str] = DEFAULT_CONTENT_ROOTS,
    *,
    suffix: str = CONTENT_SUFFIX,
    now: datetime | None = None,
) -> InventoryReport:
    """Count content files under each of *content_roots* (relative to *project_root*)."""
    base = Path(project_root).resolve()
    counts = {root: count_content_files(base / root, suffix) for root in content_roots}
    logger.info("Inventoried %d content roots under %s", len(counts), base)
    return InventoryReport(counts=counts, generated_at=now or datetime.now(UTC))


def write_inventory(report: InventoryReport, path: str | Path) -> Path:
    """Write *report* as Markdown to *path* and return the path."""
    out = Path(path)
    out.parent.mkdir(parents=True, exist_ok=True)
    out.write_text(report.to_markdown(), encoding="utf-8")
    return out
