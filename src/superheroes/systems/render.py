from __future__ import annotations

from esper import World

from superheroes.components.entrance_animation import EntranceAnimation, SETTLED_SNAPSHOT
from superheroes.components.hero_list_screen import HeroListScreen
from superheroes.components.scroll_state import ScrollState
from superheroes.config import DEFAULT_DIMENS, Dimens
from superheroes.data.resources import Resources
from superheroes.events.bus import EventBus
from superheroes.rendering.entrance import DEFAULT_TIMING, EntranceTiming
from superheroes.rendering.hero_list import render
from superheroes.rendering.hero_list_renderer import HeroListRenderer
from superheroes.rendering.sprite_cache import SpriteCache
from superheroes.rendering.visual_tree import VisualTree


class RenderSystem:
    """Rebuilds the hero list tree every frame and hands it to the arcade renderer."""

    def __init__(
        self,
        world: World,
        event_bus: EventBus,
        window,
        *,
        resources: Resources | None = None,
        dimens: Dimens = DEFAULT_DIMENS,
        timing: EntranceTiming = DEFAULT_TIMING,
        sprite_cache: SpriteCache | None = None,
    ):
        self.world = world
        self.event_bus = event_bus
        self.window = window
        self.resources = resources
        self.dimens = dimens
        self.timing = timing
        self.sprite_cache = sprite_cache or SpriteCache()
        self._renderer = HeroListRenderer(self.sprite_cache, dimens)
        self.last_tree: VisualTree | None = None

    @property
    def renderer(self) -> HeroListRenderer:
        return self._renderer

    def build_tree(self) -> VisualTree | None:
        """Render the current screen state, or ``None`` once the screen is gone."""
        screen_entry = self._screen()
        if screen_entry is None:
            return None
        ent, screen = screen_entry
        anim = self.world.try_component(ent, EntranceAnimation)
        snapshot = anim.snapshot() if anim is not None else SETTLED_SNAPSHOT
        scroll = self.world.try_component(ent, ScrollState)
        viewport_height = max(0.0, self.window.height - self.dimens.top_bar_height)
        tree = render(
            screen.catalog.list(),
            snapshot=snapshot,
            dimens=self.dimens,
            resources=self.resources,
            timing=self.timing,
            viewport_width=self.window.width,
            viewport_height=viewport_height,
            scroll_offset=scroll.offset if scroll is not None else 0.0,
        )
        if scroll is not None:
            scroll.content_height = tree.content_height
            scroll.viewport_height = viewport_height
            scroll.offset = tree.scroll_offset
        return tree

    def process(self, arcade_module=None):
        if arcade_module is None:
            # Local import keeps tests headless without creating a window.
            import arcade as arcade_module
        # Headless safeguard: without an active window skip draw calls but still build the tree.
        headless = False
        try:
            arcade_module.get_window()
        except Exception:
            headless = True
        tree = self.build_tree()
        self.last_tree = tree
        if tree is None:
            return
        _, screen = self._screen()
        self._renderer.render(
            arcade_module,
            tree,
            window_width=self.window.width,
            window_height=self.window.height,
            title=screen.title,
            headless=headless,
        )

    def _screen(self) -> tuple[int, HeroListScreen] | None:
        for ent, screen in self.world.get_component(HeroListScreen):
            return ent, screen
        return None
