import logging

from esper import World

from superheroes.components.entrance_animation import EntranceAnimation, EntrancePhase
from superheroes.components.hero_list_screen import HeroListScreen
from superheroes.events.bus import (
    EVENT_ANIMATION_COMPLETE,
    EVENT_ANIMATION_START,
    EVENT_SCREEN_CLOSED,
    EVENT_SCREEN_SHOWN,
    EVENT_TICK,
    EventBus,
)
from superheroes.rendering.entrance import DEFAULT_TIMING, EntranceTiming

logger = logging.getLogger(__name__)


class EntranceAnimationSystem:
    """Drives the one-shot hidden -> animating -> settled entrance on the frame clock."""

    def __init__(self, world: World, event_bus: EventBus, timing: EntranceTiming = DEFAULT_TIMING):
        self.world = world
        self.event_bus = event_bus
        self.timing = timing
        event_bus.subscribe(EVENT_SCREEN_SHOWN, self.on_screen_shown)
        event_bus.subscribe(EVENT_SCREEN_CLOSED, self.on_screen_closed)
        event_bus.subscribe(EVENT_TICK, self.on_tick)

    def on_screen_shown(self, sender, **kwargs):
        for _, anim in self.world.get_component(EntranceAnimation):
            if anim.phase != EntrancePhase.HIDDEN:
                continue
            anim.phase = EntrancePhase.ANIMATING
            anim.elapsed = 0.0
            logger.debug("Entrance animation started for %d rows", anim.row_count)
            self.event_bus.emit(EVENT_ANIMATION_START, kind="entrance", rows=anim.row_count)

    def on_screen_closed(self, sender, **kwargs):
        # Partial animation state goes away with the screen.
        for ent, _ in list(self.world.get_component(HeroListScreen)):
            self.world.delete_entity(ent, immediate=True)

    def on_tick(self, sender, **kwargs):
        dt = kwargs.get("dt", 1 / 60)
        for _, anim in self.world.get_component(EntranceAnimation):
            if anim.phase != EntrancePhase.ANIMATING:
                continue
            anim.elapsed += max(0.0, float(dt))
            if self.timing.is_settled(anim.elapsed, anim.row_count):
                anim.phase = EntrancePhase.SETTLED
                logger.debug("Entrance animation settled after %.3fs", anim.elapsed)
                self.event_bus.emit(EVENT_ANIMATION_COMPLETE, kind="entrance", elapsed=anim.elapsed)
