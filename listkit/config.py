"""YAML-based theme configuration.

Example ``theme.yaml``::

    pagination:
      pageSize: 10
    features:
      search: false
      rss: true
    seo:
      siteName: Dark Business Theme
    performance:
      maxJSBundleKB: 350
      maxCSSBundleKB: 300

Keys may use either the camelCase spelling shown above or the snake_case
field names.  Missing sections fall back to their defaults.
"""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path
from typing import Any, TypeVar

import yaml
from pydantic import BaseModel, ConfigDict, Field, PositiveInt, ValidationError

from listkit.paginate import Paginator

T = TypeVar("T")

_MODEL_CONFIG = ConfigDict(populate_by_name=True)


class ConfigError(ValueError):
    """Raised when a theme configuration file cannot be loaded.

    Attributes:
        path -- the file that failed (``None`` for in-memory data)
    """

    def __init__(self, message: str, path: Path | None = None) -> None:
        super().__init__(message)
        self.path = path


class PaginationConfig(BaseModel):
    model_config = _MODEL_CONFIG

    page_size: PositiveInt = Field(default=10, alias="pageSize")


class FeatureFlags(BaseModel):
    """Optional site features; every flag is off unless enabled."""

    model_config = _MODEL_CONFIG

    search: bool = False
    rss: bool = False
    taxonomy: bool = False
    relationships: bool = False

    def enabled(self) -> list[str]:
        return [name for name, on in self.model_dump().items() if on]


class SeoConfig(BaseModel):
    model_config = _MODEL_CONFIG

    site_name: str = Field(default="Dark Business Theme", alias="siteName")


class PerformanceBudget(BaseModel):
    """Bundle size budgets in KB, read by the build tooling."""

    model_config = _MODEL_CONFIG

    max_js_bundle_kb: PositiveInt = Field(default=350, alias="maxJSBundleKB")
    max_css_bundle_kb: PositiveInt = Field(default=300, alias="maxCSSBundleKB")


class ThemeConfig(BaseModel):
    """Root theme configuration."""

    model_config = _MODEL_CONFIG

    pagination: PaginationConfig = Field(default_factory=PaginationConfig)
    features: FeatureFlags = Field(default_factory=FeatureFlags)
    seo: SeoConfig = Field(default_factory=SeoConfig)
    performance: PerformanceBudget = Field(default_factory=PerformanceBudget)

    def paginator(self, items: Sequence[T]) -> Paginator[T]:
        """Paginate *items* with the configured page size."""
        return Paginator(items, self.pagination.page_size)


def theme_config_from_dict(data: Any, path: Path | None = None) -> ThemeConfig:
    """Validate already-parsed configuration data."""
    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ConfigError(
            f"Theme config must be a mapping, not {type(data).__name__}",
            path=path,
        )
    try:
        return ThemeConfig.model_validate(data)
    except ValidationError as exc:
        where = f" in {path}" if path else ""
        raise ConfigError(f"Invalid theme config{where}: {exc}", path=path) from exc


def load_theme_config(path: str | Path | None = None) -> ThemeConfig:
    """Load a YAML theme config; ``None`` returns the defaults."""
    if path is None:
        return ThemeConfig()
    filepath = Path(path)
    try:
        text = filepath.read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigError(f"Cannot read theme config {filepath}: {exc}", path=filepath) from exc
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Malformed YAML in {filepath}: {exc}", path=filepath) from exc
    return theme_config_from_dict(data, path=filepath)
