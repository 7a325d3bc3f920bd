"""Resolution of string and image references to displayable values."""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, Mapping, Protocol

from superheroes.components.hero import Hero
from superheroes.constants import IMAGE_DIR_NAME, IMAGE_EXTENSION
from superheroes.data.heroes import STRINGS
from superheroes.errors import MissingResourceError

logger = logging.getLogger(__name__)

ASSETS_DIR = Path(__file__).resolve().parents[1] / "assets"


class Resources(Protocol):
    def string(self, key: str) -> str: ...

    def image(self, key: str) -> str: ...


class ResourceResolver:
    """Looks up display strings in a table and images in a directory."""

    def __init__(
        self,
        strings: Mapping[str, str],
        image_dir: str | Path,
        *,
        image_extension: str = IMAGE_EXTENSION,
    ):
        self._strings = dict(strings)
        self._image_dir = Path(image_dir)
        self._image_extension = image_extension

    @property
    def image_dir(self) -> Path:
        return self._image_dir

    def string(self, key: str) -> str:
        try:
            return self._strings[key]
        except KeyError:
            raise MissingResourceError("string", key) from None

    def image(self, key: str) -> str:
        path = self._image_dir / f"{key}{self._image_extension}"
        if not path.is_file():
            raise MissingResourceError("image", key)
        return str(path)


class LiteralResources:
    """Treats every reference as its own resolved value.

    Useful when heroes are built from display text directly, e.g. fixtures.
    """

    def string(self, key: str) -> str:
        return key

    def image(self, key: str) -> str:
        return key


def default_resources() -> ResourceResolver:
    return ResourceResolver(STRINGS, ASSETS_DIR / IMAGE_DIR_NAME)


def validate_catalog(heroes: Iterable[Hero], resources: Resources) -> None:
    """Resolve every reference of every hero, raising on the first miss."""
    for index, hero in enumerate(heroes):
        try:
            resources.string(hero.name)
            resources.string(hero.description)
            resources.image(hero.image)
        except MissingResourceError:
            logger.error("Hero at index %d has an unresolved reference: %r", index, hero)
            raise
