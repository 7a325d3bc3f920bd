from esper import World

from superheroes.components.scroll_state import ScrollState
from superheroes.config import DEFAULT_DIMENS, Dimens
from superheroes.constants import SCROLL_STEP
from superheroes.events.bus import EVENT_MOUSE_SCROLL, EVENT_RESIZE, EventBus


class ScrollSystem:
    """Moves the list's scroll offset in response to wheel input."""

    def __init__(
        self,
        world: World,
        event_bus: EventBus,
        *,
        step: float = SCROLL_STEP,
        dimens: Dimens = DEFAULT_DIMENS,
    ):
        self.world = world
        self.dimens = dimens
        self.step = step
        event_bus.subscribe(EVENT_MOUSE_SCROLL, self.on_mouse_scroll)
        event_bus.subscribe(EVENT_RESIZE, self.on_resize)

    def on_mouse_scroll(self, sender, **payload):
        scroll_y = payload.get("scroll_y")
        if scroll_y is None:
            return
        try:
            notches = float(scroll_y)
        except (TypeError, ValueError):
            return
        for _, scroll in self.world.get_component(ScrollState):
            # Wheel up reveals earlier rows.
            scroll.offset -= notches * self.step
            scroll.clamp()

    def on_resize(self, sender, **payload):
        height = payload.get("height")
        for _, scroll in self.world.get_component(ScrollState):
            if height is not None:
                scroll.viewport_height = max(0.0, float(height) - self.dimens.top_bar_height)
            scroll.clamp()
