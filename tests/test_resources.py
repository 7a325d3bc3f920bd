from pathlib import Path

import pytest

from superheroes.components.hero import Hero
from superheroes.data.heroes import APP_NAME_KEY, STRINGS, default_catalog
from superheroes.data.resources import (
    LiteralResources,
    ResourceResolver,
    default_resources,
    validate_catalog,
)
from superheroes.errors import MissingResourceError


def test_default_catalog_resolves_every_reference():
    validate_catalog(default_catalog(), default_resources())


def test_default_resources_resolve_app_name_and_images():
    resources = default_resources()
    assert resources.string(APP_NAME_KEY) == "Superheroes"
    image = Path(resources.image("android_superhero1"))
    assert image.is_file()
    assert image.suffix == ".png"


def test_missing_string_is_reported_with_kind_and_key(tmp_path):
    resources = ResourceResolver({"known": "Known"}, tmp_path)
    with pytest.raises(MissingResourceError) as excinfo:
        resources.string("unknown")
    assert excinfo.value.kind == "string"
    assert excinfo.value.key == "unknown"


def test_missing_image_file_is_reported(tmp_path):
    resources = ResourceResolver({}, tmp_path)
    with pytest.raises(MissingResourceError) as excinfo:
        resources.image("ghost")
    assert excinfo.value.kind == "image"


def test_image_resolves_to_file_in_directory(tmp_path):
    (tmp_path / "hero.png").write_bytes(b"png")
    resources = ResourceResolver({}, tmp_path)
    assert resources.image("hero") == str(tmp_path / "hero.png")


def test_validate_catalog_raises_on_unresolved_hero(tmp_path):
    (tmp_path / "img.png").write_bytes(b"png")
    resources = ResourceResolver({"n": "Name", "d": "Desc"}, tmp_path)
    heroes = [Hero("n", "d", "img"), Hero("n", "missing", "img")]
    with pytest.raises(MissingResourceError) as excinfo:
        validate_catalog(heroes, resources)
    assert excinfo.value.key == "missing"


def test_literal_resources_pass_values_through():
    resources = LiteralResources()
    assert resources.string("El Duo") == "El Duo"
    assert resources.image("X") == "X"


def test_every_string_key_is_used_or_app_name():
    used = {APP_NAME_KEY}
    for hero in default_catalog():
        used.update((hero.name, hero.description))
    assert used == set(STRINGS)
