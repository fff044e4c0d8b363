"""Normalize raw content entries into a sorted listing.

Each raw entry's ``publishDate`` is parsed against a single date pattern;
entries whose date is missing or does not match keep ``publish_date=None``
and sink to the end of the listing.  Order::

    dated entries, most recent first  →  undated entries, in input order
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Mapping
from dataclasses import dataclass
from datetime import UTC, datetime
from typing import Any

import dateparser

from listkit.items import NormalizedEntry, RawEntry

logger = logging.getLogger(__name__)

# "March 1, 2024"
DEFAULT_DATE_FORMAT = "%B %d, %Y"

ExtendHook = Callable[[dict[str, Any], str], Mapping[str, Any]]

# Only the caller's pattern is tried: no relative dates, no free-form parsing.
_DATEPARSER_SETTINGS: dict[str, Any] = {
    "PARSERS": ["custom-formats"],
    "RETURN_AS_TIMEZONE_AWARE": False,
}

# Hooks receive front-matter keys and may return them unchanged.
_HOOK_KEY_ALIASES: dict[str, str] = {
    "publishDate": "publish_date",
    "featuredImage": "featured_image",
}


@dataclass(frozen=True)
class NormalizeOptions:
    """Options for :func:`normalize_entries`.

    Attributes:
        date_format: ``strptime``-style pattern every ``publishDate`` is
                     parsed against.  Defaults to ``"%B %d, %Y"``.
        extend:      Optional ``(metadata, location) -> mapping`` hook.  The
                     returned fields are merged over the base fields, so a
                     key the hook returns always wins.  ``publishDate`` and
                     ``featuredImage`` name the matching base fields; values
                     are stored unvalidated.
    """

    date_format: str = DEFAULT_DATE_FORMAT
    extend: ExtendHook | None = None


def parse_publish_date(
    raw: str | None,
    date_format: str = DEFAULT_DATE_FORMAT,
) -> datetime | None:
    """Parse *raw* with *date_format*; return ``None`` when absent or invalid."""
    if not raw:
        return None
    try:
        return dateparser.parse(
            raw,
            date_formats=[date_format],
            languages=["en"],
            settings=_DATEPARSER_SETTINGS,
        )
    except Exception as exc:
        logger.debug("Date parse failed for %r with %r: %s", raw, date_format, exc)
    return None


def _coerce_raw(entry: RawEntry | Mapping[str, Any]) -> RawEntry:
    if isinstance(entry, RawEntry):
        return entry
    return RawEntry.model_validate(entry)


def _normalize_one(raw: RawEntry, options: NormalizeOptions) -> NormalizedEntry:
    meta = raw.metadata
    published = parse_publish_date(meta.publish_date, options.date_format)
    if meta.publish_date and published is None:
        logger.debug("Unparseable publishDate %r on %s", meta.publish_date, raw.location)

    entry = NormalizedEntry(
        title=meta.title,
        description=meta.description,
        excerpt=meta.excerpt,
        publish_date=published,
        featured_image=meta.featured_image,
        href=raw.location,
        tags=list(meta.tags or []),
    )
    if options.extend is None:
        return entry
    extra = options.extend(raw.metadata_dict(), raw.location)
    # last write wins; hook values are stored as given
    return entry.model_copy(update=_hook_fields(extra))


def _hook_fields(extra: Mapping[str, Any]) -> dict[str, Any]:
    """Map front-matter spellings returned by a hook onto entry field names."""
    return {_HOOK_KEY_ALIASES.get(key, key): value for key, value in extra.items()}


def _date_key(entry: NormalizedEntry) -> datetime:
    value: datetime = entry.publish_date  # type: ignore[assignment]
    # aware values (e.g. supplied by an extension hook) compare as naive UTC
    if value.tzinfo is not None:
        return value.astimezone(UTC).replace(tzinfo=None)
    return value


def sort_entries(entries: Iterable[NormalizedEntry]) -> list[NormalizedEntry]:
    """Return *entries* ordered newest first, undated entries last.

    Anything other than a datetime in ``publish_date`` counts as undated.
    The sort is stable: entries sharing a date, and all undated entries,
    keep their relative input order.
    """
    dated: list[NormalizedEntry] = []
    undated: list[NormalizedEntry] = []
    for entry in entries:
        (dated if entry.has_date else undated).append(entry)
    dated.sort(key=_date_key, reverse=True)
    return dated + undated


def normalize_entries(
    entries: Iterable[RawEntry | Mapping[str, Any]],
    options: NormalizeOptions | None = None,
) -> list[NormalizedEntry]:
    """Normalize and sort raw content entries for a listing page.

    *entries* may be :class:`~listkit.items.RawEntry` instances or mappings
    of the same shape (``{"metadata": ..., "location": ...}`` or the
    ``{"frontmatter": ..., "url": ...}`` form).  Date parse failures never
    propagate; the entry is kept without a date.
    """
    opts = options or NormalizeOptions()
    normalized = [_normalize_one(_coerce_raw(entry), opts) for entry in entries]
    logger.debug(
        "Normalized %d entries (%d undated)",
        len(normalized),
        sum(1 for e in normalized if not e.has_date),
    )
    return sort_entries(normalized)
