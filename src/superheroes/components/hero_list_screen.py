from dataclasses import dataclass

from superheroes.data.catalog import HeroCatalog


@dataclass(slots=True)
class HeroListScreen:
    """Marks the entity owning the hero list; holds the injected catalog."""
    catalog: HeroCatalog
    title: str = ""
