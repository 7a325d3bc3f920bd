from esper import World

from superheroes.data.catalog import HeroCatalog
from superheroes.factories.screen import spawn_hero_list_screen


def create_world(
    catalog: HeroCatalog,
    *,
    title: str = "",
    inspection_mode: bool = False,
) -> World:
    world = World()
    spawn_hero_list_screen(world, catalog, title=title, inspection_mode=inspection_mode)
    return world
