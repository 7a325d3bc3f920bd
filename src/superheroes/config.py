"""Spacing and typography configuration read by the hero list renderer.

Defaults come from ``superheroes.constants``. A TOML file may override any of
them through a ``[dimens]`` table::

    [dimens]
    padding_medium = 20
    card_image_size = 96
"""
from __future__ import annotations

import logging
import tomllib
from dataclasses import dataclass, fields, replace
from pathlib import Path

from superheroes.constants import (
    CARD_ELEVATION,
    CARD_IMAGE_SIZE,
    CARD_MIN_CONTENT_HEIGHT,
    DESCRIPTION_FONT_SIZE,
    LINE_HEIGHT_FACTOR,
    NAME_FONT_SIZE,
    PADDING_MEDIUM,
    PADDING_SMALL,
    TOP_BAR_FONT_SIZE,
    TOP_BAR_HEIGHT,
)
from superheroes.errors import ConfigError

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class Dimens:
    """Opaque visual constants; the renderer reads them but never derives them."""

    padding_small: float = PADDING_SMALL
    padding_medium: float = PADDING_MEDIUM
    card_elevation: float = CARD_ELEVATION
    card_image_size: float = CARD_IMAGE_SIZE
    card_min_content_height: float = CARD_MIN_CONTENT_HEIGHT
    top_bar_height: float = TOP_BAR_HEIGHT
    top_bar_font_size: float = TOP_BAR_FONT_SIZE
    name_font_size: float = NAME_FONT_SIZE
    description_font_size: float = DESCRIPTION_FONT_SIZE
    line_height_factor: float = LINE_HEIGHT_FACTOR

    @property
    def name_line_height(self) -> float:
        return self.name_font_size * self.line_height_factor

    @property
    def description_line_height(self) -> float:
        return self.description_font_size * self.line_height_factor


DEFAULT_DIMENS = Dimens()


def apply_overrides(base: Dimens, overrides: dict) -> Dimens:
    """Return ``base`` with the given fields replaced, validating each value."""
    known = {f.name for f in fields(Dimens)}
    cleaned: dict[str, float] = {}
    for key, value in overrides.items():
        if key not in known:
            raise ConfigError(f"unknown dimension {key!r}")
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise ConfigError(f"dimension {key!r} must be a number, got {value!r}")
        if value < 0:
            raise ConfigError(f"dimension {key!r} must not be negative")
        cleaned[key] = float(value)
    return replace(base, **cleaned)


def load_dimens(path: str | Path | None = None) -> Dimens:
    """Load dimension overrides from *path*, falling back to the defaults.

    A missing path or file yields ``DEFAULT_DIMENS``. A file without a
    ``[dimens]`` table is accepted and also yields the defaults.
    """
    if path is None:
        return DEFAULT_DIMENS
    path = Path(path)
    if not path.exists():
        logger.info("Dimension overrides %s not found, using defaults", path)
        return DEFAULT_DIMENS
    try:
        with open(path, "rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as exc:
        raise ConfigError(f"cannot parse {path}: {exc}") from exc
    table = data.get("dimens", {})
    if not isinstance(table, dict):
        raise ConfigError(f"[dimens] in {path} must be a table")
    dimens = apply_overrides(DEFAULT_DIMENS, table)
    logger.info("Loaded %d dimension overrides from %s", len(table), path)
    return dimens
