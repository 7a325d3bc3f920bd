"""Compiled-in hero table and display strings."""
from __future__ import annotations

from superheroes.components.hero import Hero
from superheroes.data.catalog import HeroCatalog

APP_NAME_KEY = "app_name"

STRINGS: dict[str, str] = {
    APP_NAME_KEY: "Superheroes",
    "hero1": "Nick the Night and Day",
    "description1": "The Jetpack hero",
    "hero2": "Reality Protector",
    "description2": "Understands the absolute truth",
    "hero3": "Andre the Giant",
    "description3": "Mimics the light and night to blend in",
    "hero4": "Benjamin the Brave",
    "description4": "Harnesses the power of canary to develop bravely",
    "hero5": "Magnificent Maru",
    "description5": "Effortlessly glides in to save the day",
    "hero6": "Dynamic Yasmine",
    "description6": "Ability to shift to any form and energize",
}

HERO_TABLE: tuple[Hero, ...] = (
    Hero(name="hero1", description="description1", image="android_superhero1"),
    Hero(name="hero2", description="description2", image="android_superhero2"),
    Hero(name="hero3", description="description3", image="android_superhero3"),
    Hero(name="hero4", description="description4", image="android_superhero4"),
    Hero(name="hero5", description="description5", image="android_superhero5"),
    Hero(name="hero6", description="description6", image="android_superhero6"),
)


def default_catalog() -> HeroCatalog:
    """Catalog shown by the application."""
    return HeroCatalog(HERO_TABLE)


def preview_catalog() -> HeroCatalog:
    """Short catalog for layout previews and screenshots."""
    return HeroCatalog(HERO_TABLE[:3])


def select_catalog(preview: bool) -> tuple[HeroCatalog, bool]:
    """Catalog and inspection mode for a launch.

    Preview launches show the short catalog already settled, with no entrance
    animation.
    """
    if preview:
        return preview_catalog(), True
    return default_catalog(), False
