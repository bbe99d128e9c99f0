"""Configuration for postindex sites.

Settings come from three layers, highest priority first:

1. Environment variables (``POSTINDEX_SECTION__KEY``)
2. ``.postindex.toml`` in the site root
3. Defaults
"""

from __future__ import annotations

import logging
import tomllib
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from postindex.config.exceptions import ConfigLoadError, ConfigValidationError
from postindex.constants import CONFIG_FILENAME, DEFAULT_INDEX_FILE, DEFAULT_LAYOUT, DEFAULT_POSTS_DIR

logger = logging.getLogger(__name__)


def _deep_merge(destination: dict[str, Any], source: Mapping[str, Any]) -> dict[str, Any]:
    """Merge source into destination, with source values overwriting."""
    for key, value in source.items():
        if isinstance(value, Mapping) and key in destination and isinstance(destination[key], Mapping):
            destination[key] = _deep_merge(dict(destination[key]), value)
        else:
            destination[key] = value
    return destination


class PathsSettings(BaseModel):
    """Path configuration.

    ``posts_dir`` and ``index_file`` are relative to ``site_root`` unless absolute.
    """

    site_root: Path = Field(default_factory=Path.cwd, description="Root directory of the site")
    posts_dir: Path = Field(default=Path(DEFAULT_POSTS_DIR), description="Directory holding post files")
    index_file: Path = Field(default=Path(DEFAULT_INDEX_FILE), description="Curated index document")

    @property
    def abs_posts_dir(self) -> Path:
        return self._resolve(self.posts_dir)

    @property
    def abs_index_file(self) -> Path:
        return self._resolve(self.index_file)

    def _resolve(self, path: Path) -> Path:
        if path.is_absolute():
            return path
        return self.site_root / path


class SiteSettings(BaseModel):
    """Presentation defaults used when writing posts and index documents."""

    title: str = Field(default="Blog", description="Title written into a generated index document")
    default_author: str = Field(default="", description="Author used when a new post names none")
    default_layout: str = Field(default=DEFAULT_LAYOUT, description="Layout key for new posts")
    link_prefix: str = Field(default="/", description="Prefix for index links, e.g. '/' gives '/_posts/x.md'")

    @field_validator("link_prefix")
    @classmethod
    def _normalize_prefix(cls, value: str) -> str:
        value = value.strip()
        if not value:
            return ""
        return value if value.endswith("/") else f"{value}/"


class PostIndexConfig(BaseSettings):
    """Root configuration.

    Supports environment variable overrides with the pattern
    ``POSTINDEX_SECTION__KEY`` (e.g. ``POSTINDEX_PATHS__POSTS_DIR``).
    """

    paths: PathsSettings = Field(default_factory=PathsSettings)
    site: SiteSettings = Field(default_factory=SiteSettings)

    model_config = SettingsConfigDict(
        extra="ignore",
        env_prefix="POSTINDEX_",
        env_nested_delimiter="__",
    )

    @classmethod
    def load(cls, site_root: Path | None = None) -> PostIndexConfig:
        """Load configuration for ``site_root`` (defaults to the working directory).

        Raises:
            ConfigLoadError: If the TOML file cannot be read or parsed.
            ConfigValidationError: If any layer holds invalid values.

        """
        root_path = (site_root if site_root is not None else Path.cwd()).expanduser().resolve()
        config_file = root_path / CONFIG_FILENAME

        file_settings: dict[str, Any] = {}
        if config_file.is_file():
            logger.debug("Loading config from %s", config_file)
            try:
                with config_file.open("rb") as f:
                    file_settings = tomllib.load(f)
            except tomllib.TOMLDecodeError as exc:
                raise ConfigLoadError(config_file, str(exc)) from exc
            except OSError as exc:
                raise ConfigLoadError(config_file, exc.strerror or str(exc)) from exc

        try:
            env_settings = cls().model_dump(exclude_unset=True)
            merged = _deep_merge(file_settings, env_settings)
            merged.setdefault("paths", {})["site_root"] = root_path
            return cls.model_validate(merged)
        except ValidationError as exc:
            raise ConfigValidationError(exc.errors()) from exc


def load_config(site_root: Path | None = None) -> PostIndexConfig:
    """Load the configuration for a site root."""
    return PostIndexConfig.load(site_root)


__all__ = [
    "PathsSettings",
    "PostIndexConfig",
    "SiteSettings",
    "load_config",
]
