import pytest

from superheroes.components.scroll_state import ScrollState
from superheroes.config import DEFAULT_DIMENS
from superheroes.constants import SCROLL_STEP
from superheroes.data.heroes import default_catalog
from superheroes.events.bus import EVENT_MOUSE_SCROLL, EVENT_RESIZE, EventBus
from superheroes.systems.render import RenderSystem
from superheroes.systems.scroll import ScrollSystem
from superheroes.world import create_world
from tests.helpers import DummyWindow, HeadlessArcade


def _setup(height=300):
    bus = EventBus()
    world = create_world(default_catalog())
    window = DummyWindow(height=height)
    ScrollSystem(world, bus)
    render = RenderSystem(world, bus, window)
    render.process(HeadlessArcade())
    scroll = next(iter(world.get_component(ScrollState)))[1]
    return bus, world, window, render, scroll


def _wheel(bus, scroll_y):
    bus.emit(EVENT_MOUSE_SCROLL, x=10, y=10, scroll_x=0, scroll_y=scroll_y)


def test_render_publishes_content_and_viewport_height():
    _, _, window, render, scroll = _setup()
    assert scroll.content_height == render.last_tree.content_height
    assert scroll.viewport_height == window.height - DEFAULT_DIMENS.top_bar_height
    assert scroll.max_offset > 0


def test_wheel_down_moves_content_and_clamps_at_end():
    bus, _, _, _, scroll = _setup()
    _wheel(bus, -1)
    assert scroll.offset == SCROLL_STEP
    _wheel(bus, -1000)
    assert scroll.offset == pytest.approx(scroll.max_offset)


def test_wheel_up_clamps_at_start():
    bus, _, _, _, scroll = _setup()
    _wheel(bus, -2)
    _wheel(bus, 5)
    assert scroll.offset == 0.0


def test_scroll_offset_reaches_rendered_tree():
    bus, _, _, render, _ = _setup()
    _wheel(bus, -2)
    render.process(HeadlessArcade())
    assert render.last_tree.scroll_offset == 2 * SCROLL_STEP


def test_malformed_scroll_payload_is_ignored():
    bus, _, _, _, scroll = _setup()
    bus.emit(EVENT_MOUSE_SCROLL, x=0, y=0)
    _wheel(bus, "not a number")
    assert scroll.offset == 0.0


def test_growing_window_reclamps_offset():
    bus, _, window, _, scroll = _setup()
    _wheel(bus, -1000)
    window.height = 4000
    bus.emit(EVENT_RESIZE, width=window.width, height=window.height)
    assert scroll.max_offset == 0.0
    assert scroll.offset == 0.0


def test_short_list_cannot_scroll():
    bus, _, _, _, scroll = _setup(height=2000)
    _wheel(bus, -3)
    assert scroll.offset == 0.0
