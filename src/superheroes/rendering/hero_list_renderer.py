"""Draws a hero list ``VisualTree`` with arcade."""
from __future__ import annotations

from superheroes.config import DEFAULT_DIMENS, Dimens
from superheroes.constants import (
    BACKGROUND_COLOR,
    CARD_COLOR,
    CARD_SHADOW_COLOR,
    DESCRIPTION_TEXT_COLOR,
    IMAGE_PLACEHOLDER_COLOR,
    NAME_TEXT_COLOR,
    SHADOW_ALPHA,
    TOP_BAR_TEXT_COLOR,
)
from superheroes.rendering.sprite_cache import SpriteCache
from superheroes.rendering.visual_tree import Box, VisualTree


def _with_alpha(rgb: tuple[int, int, int], alpha: float) -> tuple[int, int, int, int]:
    r, g, b = rgb[:3]
    return (r, g, b, max(0, min(255, int(alpha))))


class HeroListRenderer:
    """Converts content-space boxes to window coordinates and issues draw calls."""

    def __init__(self, sprite_cache: SpriteCache | None, dimens: Dimens = DEFAULT_DIMENS) -> None:
        self._sprite_cache = sprite_cache
        self._dimens = dimens
        self._drawn_rows: list[int] = []

    def drawn_rows(self) -> list[int]:
        """Indexes of the rows drawn in the last non-headless frame."""
        return list(self._drawn_rows)

    def render(
        self,
        arcade,
        tree: VisualTree,
        *,
        window_width: float,
        window_height: float,
        title: str,
        headless: bool,
    ) -> None:
        if headless:
            self._drawn_rows = []
            return

        list_top = window_height - self._dimens.top_bar_height
        alpha = 255 * tree.alpha
        active_keys: set[tuple[int, str]] = set()
        drawn: list[int] = []

        def to_screen(box: Box, offset_y: float) -> tuple[float, float]:
            top = list_top - (box.y - tree.scroll_offset + offset_y)
            return top, top - box.height

        for row in tree.visible_rows():
            card_top, card_bottom = to_screen(row.bounds, row.offset_y)
            if row.elevation > 0:
                arcade.draw_lbwh_rectangle_filled(
                    row.bounds.x + row.elevation / 2,
                    card_bottom - row.elevation,
                    row.bounds.width,
                    row.bounds.height,
                    _with_alpha(CARD_SHADOW_COLOR, SHADOW_ALPHA * tree.alpha),
                )
            arcade.draw_lbwh_rectangle_filled(
                row.bounds.x,
                card_bottom,
                row.bounds.width,
                row.bounds.height,
                _with_alpha(CARD_COLOR, alpha),
            )

            name_top, _ = to_screen(row.name.box, row.offset_y)
            arcade.draw_text(
                row.name.text,
                row.name.box.x,
                name_top,
                _with_alpha(NAME_TEXT_COLOR, alpha),
                row.name.font_size,
                width=int(row.name.box.width),
                anchor_x="left",
                anchor_y="top",
                multiline=True,
                bold=True,
            )
            description_top, _ = to_screen(row.description.box, row.offset_y)
            arcade.draw_text(
                row.description.text,
                row.description.box.x,
                description_top,
                _with_alpha(DESCRIPTION_TEXT_COLOR, alpha),
                row.description.font_size,
                width=int(row.description.box.width),
                anchor_x="left",
                anchor_y="top",
                multiline=True,
            )

            image_top, image_bottom = to_screen(row.image.box, row.offset_y)
            sprite = None
            if self._sprite_cache is not None:
                sprite = self._sprite_cache.ensure_hero_sprite(arcade, row.index, row.image.source)
            if sprite is not None:
                active_keys.add((row.index, row.image.source))
                self._sprite_cache.update_sprite_visuals(
                    sprite,
                    row.image.box.x + row.image.box.width / 2,
                    (image_top + image_bottom) / 2,
                    row.image.box.width,
                    alpha,
                )
            else:
                arcade.draw_lbwh_rectangle_filled(
                    row.image.box.x,
                    image_bottom,
                    row.image.box.width,
                    row.image.box.height,
                    _with_alpha(IMAGE_PLACEHOLDER_COLOR, alpha),
                )
            drawn.append(row.index)

        if self._sprite_cache is not None:
            self._sprite_cache.draw_hero_sprites()
            self._sprite_cache.cleanup_hero_sprites(active_keys)

        # The bar is drawn last so scrolled cards pass underneath it.
        arcade.draw_lrbt_rectangle_filled(
            0.0,
            window_width,
            list_top,
            window_height,
            _with_alpha(BACKGROUND_COLOR, 255),
        )
        arcade.draw_text(
            title,
            window_width / 2.0,
            list_top + self._dimens.top_bar_height / 2.0,
            _with_alpha(TOP_BAR_TEXT_COLOR, 255),
            self._dimens.top_bar_font_size,
            anchor_x="center",
            anchor_y="center",
            bold=True,
        )
        self._drawn_rows = drawn
