"""Shared pytest fixtures."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

FIXTURES_DIR = Path(__file__).parent / "fixtures"


def _read_fixture(name: str) -> str:
    return (FIXTURES_DIR / name).read_text(encoding="utf-8")


@pytest.fixture
def entries_path() -> Path:
    return FIXTURES_DIR / "entries.json"


@pytest.fixture
def raw_entries() -> list[dict]:
    return json.loads(_read_fixture("entries.json"))


@pytest.fixture
def theme_path() -> Path:
    return FIXTURES_DIR / "theme.yaml"


@pytest.fixture
def content_tree(tmp_path: Path) -> Path:
    """Project root with 3 blog posts, 1 solution and no industries dir."""
    posts = tmp_path / "src/pages/blog/posts"
    posts.mkdir(parents=True)
    for name in ("a.mdx", "b.mdx", "c.mdx", "notes.md"):
        (posts / name).write_text("---\ntitle: x\n---\n", encoding="utf-8")
    solutions = tmp_path / "src/pages/solutions/items"
    solutions.mkdir(parents=True)
    (solutions / "audit.mdx").write_text("", encoding="utf-8")
    return tmp_path
