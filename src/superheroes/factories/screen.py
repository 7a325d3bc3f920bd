"""Factory helpers for creating the hero list screen entity."""
from esper import World

from superheroes.components.entrance_animation import EntranceAnimation, EntrancePhase
from superheroes.components.hero_list_screen import HeroListScreen
from superheroes.components.scroll_state import ScrollState
from superheroes.data.catalog import HeroCatalog


def spawn_hero_list_screen(
    world: World,
    catalog: HeroCatalog,
    *,
    title: str = "",
    inspection_mode: bool = False,
) -> int:
    """Create the screen entity holding the catalog, scroll position and entrance state.

    In inspection mode the entrance starts settled so previews show the final layout.
    """
    phase = EntrancePhase.SETTLED if inspection_mode else EntrancePhase.HIDDEN
    return world.create_entity(
        HeroListScreen(catalog=catalog, title=title),
        EntranceAnimation(phase=phase, row_count=len(catalog)),
        ScrollState(),
    )
