"""URL-safe slug generation for titles and other free text."""

from __future__ import annotations

import re
import unicodedata
from typing import Any

_NON_ALNUM_RE = re.compile(r"[^a-z0-9]+")
_LEADING_TRAILING_DASH_RE = re.compile(r"^-+|-+$")


def slugify(value: Any) -> str:
    """Create a URL-safe slug from *value*.

    - ``None`` becomes ``""``; anything else goes through ``str()``
    - Unicode is decomposed (NFD) and combining marks are dropped
    - Lowercased and trimmed
    - Every run of characters outside ``[a-z0-9]`` becomes one hyphen
    - Leading/trailing hyphens are removed

    Example:
        Café déjà-vu! → cafe-deja-vu
    """
    if value is None:
        return ""
    text = unicodedata.normalize("NFD", str(value))
    text = "".join(ch for ch in text if not unicodedata.combining(ch))
    text = text.lower().strip()
    text = _NON_ALNUM_RE.sub("-", text)
    return _LEADING_TRAILING_DASH_RE.sub("", text)


def unique_slug(value: Any, seen: set[str], fallback: str = "index") -> str:
    """Slugify *value* and append -2, -3, … until it is not in *seen*.

    The chosen slug is added to *seen*.  Values that slugify to ``""`` use
    *fallback* as the base.
    """
    base = slugify(value) or fallback
    candidate = base
    counter = 2
    while candidate in seen:
        candidate = f"{base}-{counter}"
        counter += 1
    seen.add(candidate)
    return candidate
