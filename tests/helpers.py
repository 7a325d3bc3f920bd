from __future__ import annotations


class DummyWindow:
    def __init__(self, width=480, height=800):
        self.width = width
        self.height = height


class HeadlessArcade:
    """Stand-in arcade module without a window; any draw call fails the test."""

    def get_window(self):
        raise RuntimeError("No window is active")

    def __getattr__(self, name):  # pragma: no cover - defensive path
        raise AssertionError(f"Unexpected draw call: {name}")


class RecordingArcade:
    """Stand-in arcade module with an active window that records draw calls."""

    def __init__(self):
        self.calls: list[tuple[str, tuple, dict]] = []

    def get_window(self):
        return object()

    def __getattr__(self, name):
        def record(*args, **kwargs):
            self.calls.append((name, args, kwargs))
        return record

    def texts(self) -> list[str]:
        return [args[0] for name, args, _ in self.calls if name == "draw_text"]


def drive(bus, ticks, dt=0.02):
    for _ in range(ticks):
        bus.emit('tick', dt=dt)


class StubTexture:
    def __init__(self, image, hash=None):
        self.image = image
        self.hash = hash
        self.width, self.height = image.size


class StubSprite:
    def __init__(self):
        self.texture = None
        self.center_x = 0.0
        self.center_y = 0.0
        self.scale = 1.0
        self.alpha = 255
        self.sprite_lists = []

    def remove_from_sprite_lists(self):
        for sprite_list in list(self.sprite_lists):
            sprite_list.remove(self)


class StubSpriteList:
    def __init__(self):
        self.sprites = []
        self.drawn: list[list[StubSprite]] = []

    def append(self, sprite):
        self.sprites.append(sprite)
        sprite.sprite_lists.append(self)

    def remove(self, sprite):
        self.sprites.remove(sprite)
        sprite.sprite_lists.remove(self)

    def draw(self):
        self.drawn.append(list(self.sprites))

    def __contains__(self, sprite):
        return sprite in self.sprites

    def __len__(self):
        return len(self.sprites)


class SpriteArcade(RecordingArcade):
    """Recording arcade that also provides sprite and texture classes."""

    Sprite = StubSprite
    SpriteList = StubSpriteList
    Texture = StubTexture
