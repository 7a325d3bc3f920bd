from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

logger = logging.getLogger(__name__)


class SpriteCache:
    """Caches one sprite per list row and one texture per image path.

    Rows that share an image share the texture but each get their own sprite,
    so every row is drawn at its own position.
    """

    def __init__(self, max_dim: int | None = 256):
        self._max_dim = max_dim
        self._smoothed_texture_cache: dict[tuple[str, int | None], Any] = {}
        self._hero_sprite_map: dict[tuple[int, str], Any] = {}
        self._hero_sprites: Any | None = None
        self._failed: set[str] = set()

    def ensure_hero_sprite(self, arcade_module, row_index: int, source: str):
        """Return the sprite showing ``source`` for row ``row_index``, creating it on first use.

        Returns ``None`` when the image cannot be loaded; callers draw a
        placeholder instead.
        """
        if not source or source in self._failed:
            return None
        key = (row_index, source)
        sprite = self._hero_sprite_map.get(key)
        if sprite is None:
            texture = self._load_smoothed_texture(arcade_module, Path(source), max_dim=self._max_dim)
            if texture is None:
                self._failed.add(source)
                return None
            try:
                sprite = arcade_module.Sprite()
                sprite.texture = texture
            except Exception:
                logger.warning("Could not create sprite for %s", source, exc_info=True)
                self._failed.add(source)
                return None
            self._hero_sprite_map[key] = sprite
        hero_list = self._hero_sprites
        if hero_list is None:
            hero_list = arcade_module.SpriteList()
            self._hero_sprites = hero_list
        sprite_lists = getattr(sprite, "sprite_lists", None)
        if not sprite_lists or hero_list not in sprite_lists:
            hero_list.append(sprite)
        return sprite

    def draw_hero_sprites(self) -> None:
        if self._hero_sprites is not None:
            self._hero_sprites.draw()

    def cleanup_hero_sprites(self, active_keys: set[tuple[int, str]]) -> None:
        """Detach sprites of rows that are no longer visible."""
        if not self._hero_sprite_map:
            return
        for key, sprite in list(self._hero_sprite_map.items()):
            if key not in active_keys and sprite is not None:
                sprite.remove_from_sprite_lists()

    def update_sprite_visuals(
        self,
        sprite,
        center_x: float,
        center_y: float,
        size: float,
        alpha: int,
    ) -> None:
        sprite.center_x = center_x
        sprite.center_y = center_y
        texture = sprite.texture
        if texture and texture.width and texture.height:
            # Fill the square by width; height follows the aspect ratio.
            sprite.scale = size / texture.width
        sprite.alpha = max(0, min(255, int(alpha)))

    def _load_smoothed_texture(self, arcade_module, path: Path, max_dim: int | None = None):
        from PIL import Image

        key = (str(path), max_dim)
        cached = self._smoothed_texture_cache.get(key)
        if cached is not None:
            return cached
        if not path.exists():
            logger.warning("Hero image %s does not exist", path)
            return None
        try:
            img = Image.open(path).convert("RGBA")
        except OSError:
            logger.warning("Could not decode hero image %s", path, exc_info=True)
            return None
        if max_dim is not None and max(img.size) > max_dim:
            w, h = img.size
            scale = max_dim / max(w, h)
            new_w = max(1, int(w * scale))
            new_h = max(1, int(h * scale))
            img = img.resize((new_w, new_h), Image.Resampling.LANCZOS)
        try:
            texture = arcade_module.Texture(img, hash=f"smooth:{path.name}:{max_dim}")
        except Exception:
            try:
                texture = arcade_module.load_texture(path)
            except Exception:
                logger.warning("Could not load texture for %s", path, exc_info=True)
                return None
        self._smoothed_texture_cache[key] = texture
        return texture
