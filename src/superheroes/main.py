"""Entry point for the Superheroes catalog browser.

Sets up ECS world, event bus, systems, and Arcade window.
"""
import logging
import os

import click
from arcade import Window, run, set_background_color

from superheroes.config import Dimens, load_dimens
from superheroes.constants import (
    BACKGROUND_COLOR,
    DIMENS_ENV_VAR,
    UPDATE_RATE,
    WINDOW_HEIGHT,
    WINDOW_WIDTH,
)
from superheroes.data.catalog import HeroCatalog
from superheroes.data.heroes import APP_NAME_KEY, select_catalog
from superheroes.data.resources import Resources, default_resources, validate_catalog
from superheroes.events.bus import (
    EVENT_MOUSE_SCROLL,
    EVENT_RESIZE,
    EVENT_SCREEN_CLOSED,
    EVENT_SCREEN_SHOWN,
    EVENT_TICK,
    EventBus,
)
from superheroes.systems.animation import EntranceAnimationSystem
from superheroes.systems.render import RenderSystem
from superheroes.systems.scroll import ScrollSystem
from superheroes.world import create_world

logger = logging.getLogger(__name__)


class SuperheroesWindow(Window):
    def __init__(
        self,
        catalog: HeroCatalog,
        resources: Resources,
        dimens: Dimens,
        *,
        inspection_mode: bool = False,
    ):
        title = resources.string(APP_NAME_KEY)
        super().__init__(WINDOW_WIDTH, WINDOW_HEIGHT, title, resizable=True)
        self.set_update_rate(UPDATE_RATE)
        self.event_bus = EventBus()
        self.world = create_world(catalog, title=title, inspection_mode=inspection_mode)
        self._shown = False

        self.animation_system = EntranceAnimationSystem(self.world, self.event_bus)
        self.scroll_system = ScrollSystem(self.world, self.event_bus, dimens=dimens)
        self.render_system = RenderSystem(
            self.world,
            self.event_bus,
            self,
            resources=resources,
            dimens=dimens,
        )
        set_background_color(BACKGROUND_COLOR)

    def on_resize(self, width: int, height: int):
        self.event_bus.emit(EVENT_RESIZE, width=width, height=height)
        return super().on_resize(width, height)

    def on_draw(self):
        self.clear()
        self.render_system.process()

    def on_update(self, delta_time: float):
        # The first update follows the first frame, so the list is on screen.
        if not self._shown:
            self._shown = True
            self.event_bus.emit(EVENT_SCREEN_SHOWN)
        self.event_bus.emit(EVENT_TICK, dt=delta_time)

    def on_mouse_scroll(self, x: int, y: int, scroll_x: int, scroll_y: int):
        self.event_bus.emit(EVENT_MOUSE_SCROLL, x=x, y=y, scroll_x=scroll_x, scroll_y=scroll_y)

    def on_close(self):
        self.event_bus.emit(EVENT_SCREEN_CLOSED)
        super().on_close()


@click.command()
@click.option(
    "--preview",
    is_flag=True,
    help="Show the first three heroes already settled, without the entrance animation.",
)
def main(preview: bool) -> None:
    """Browse the superhero catalog."""
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    dimens = load_dimens(os.environ.get(DIMENS_ENV_VAR))
    catalog, inspection_mode = select_catalog(preview)
    resources = default_resources()
    validate_catalog(catalog, resources)
    logger.info("Showing %d heroes%s", len(catalog), " (preview)" if preview else "")
    SuperheroesWindow(catalog, resources, dimens, inspection_mode=inspection_mode)
    run()


if __name__ == "__main__":
    main()
