"""listkit - normalize, order, paginate and slug content listings for a static site.

Listing page usage::

    from listkit import NormalizeOptions, normalize_entries, paginate

    entries = normalize_entries(raw_entries)          # newest first, undated last
    pager = paginate(entries, page_size=10)
    for entry in pager.slice(page):
        print(entry.title, entry.publish_date)

Extra per-entry fields::

    def with_category(metadata, location):
        return {"category": metadata.get("category", "general")}

    entries = normalize_entries(raw_entries, NormalizeOptions(extend=with_category))

Link identifiers::

    from listkit import slugify

    slugify("Café déjà-vu!")   # "cafe-deja-vu"
"""

from listkit.config import ConfigError, ThemeConfig, load_theme_config
from listkit.content import (
    DEFAULT_DATE_FORMAT,
    NormalizeOptions,
    normalize_entries,
    parse_publish_date,
    sort_entries,
)
from listkit.items import EntryMetadata, NormalizedEntry, RawEntry
from listkit.paginate import Paginator, paginate
from listkit.slug import slugify, unique_slug

__version__ = "0.1.0"
__all__ = [
    "DEFAULT_DATE_FORMAT",
    "ConfigError",
    "EntryMetadata",
    "NormalizeOptions",
    "NormalizedEntry",
    "Paginator",
    "RawEntry",
    "ThemeConfig",
    "load_theme_config",
    "normalize_entries",
    "paginate",
    "parse_publish_date",
    "slugify",
    "sort_entries",
    "unique_slug",
]
