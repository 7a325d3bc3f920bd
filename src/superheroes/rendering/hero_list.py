"""Pure mapping from a hero sequence and animation snapshot to a visual tree."""
from __future__ import annotations

import math
from dataclasses import replace
from typing import Sequence

from superheroes.components.entrance_animation import SETTLED_SNAPSHOT, EntranceSnapshot
from superheroes.components.hero import Hero
from superheroes.config import DEFAULT_DIMENS, Dimens
from superheroes.constants import WINDOW_HEIGHT, WINDOW_WIDTH
from superheroes.data.resources import LiteralResources, Resources
from superheroes.rendering.entrance import DEFAULT_TIMING, EntranceTiming, list_alpha, row_offset
from superheroes.rendering.visual_tree import Box, CardNode, ImageNode, TextNode, VisualTree

# Average glyph advance as a fraction of font size, used to estimate wrapping.
AVERAGE_GLYPH_WIDTH = 0.55


def estimate_text_lines(text: str, font_size: float, width: float) -> int:
    """Approximate wrapped line count of ``text`` in a column ``width`` wide."""
    if not text:
        return 1
    glyph = font_size * AVERAGE_GLYPH_WIDTH
    per_line = max(1, int(width // glyph)) if glyph > 0 else len(text)
    lines = 0
    for paragraph in text.split("\n"):
        lines += max(1, math.ceil(len(paragraph) / per_line))
    return lines


def _card_content_height(name: str, description: str, info_width: float, dimens: Dimens) -> float:
    name_height = estimate_text_lines(name, dimens.name_font_size, info_width) * dimens.name_line_height
    description_height = (
        estimate_text_lines(description, dimens.description_font_size, info_width)
        * dimens.description_line_height
    )
    return max(dimens.card_min_content_height, dimens.card_image_size, name_height + description_height)


def _build_card(
    index: int,
    hero: Hero,
    top: float,
    card_width: float,
    dimens: Dimens,
    resources: Resources,
) -> CardNode:
    pad = dimens.padding_medium
    image_size = dimens.card_image_size
    name = resources.string(hero.name)
    description = resources.string(hero.description)
    image = resources.image(hero.image)

    left = pad
    info_width = max(0.0, card_width - 2 * pad - pad - image_size)
    content_height = _card_content_height(name, description, info_width, dimens)
    bounds = Box(left, top, card_width, content_height + 2 * pad)

    inner_left = left + pad
    inner_top = top + pad
    name_lines = estimate_text_lines(name, dimens.name_font_size, info_width)
    name_box = Box(inner_left, inner_top, info_width, name_lines * dimens.name_line_height)
    description_box = Box(
        inner_left,
        name_box.bottom,
        info_width,
        max(0.0, content_height - name_box.height),
    )
    # Image is vertically centered in the content row.
    image_box = Box(
        bounds.right - pad - image_size,
        inner_top + (content_height - image_size) / 2,
        image_size,
        image_size,
    )
    return CardNode(
        index=index,
        hero=hero,
        bounds=bounds,
        name=TextNode(name, dimens.name_font_size, name_box),
        description=TextNode(description, dimens.description_font_size, description_box),
        image=ImageNode(image, image_box),
        elevation=dimens.card_elevation,
    )


def render(
    heroes: Sequence[Hero],
    *,
    snapshot: EntranceSnapshot | None = None,
    dimens: Dimens = DEFAULT_DIMENS,
    resources: Resources | None = None,
    timing: EntranceTiming = DEFAULT_TIMING,
    viewport_width: float = WINDOW_WIDTH,
    viewport_height: float = WINDOW_HEIGHT,
    scroll_offset: float = 0.0,
) -> VisualTree:
    """Lay out ``heroes`` as a padded column of cards.

    Rows appear in input order and are never filtered. Without a snapshot the
    tree is the settled state: full opacity and no row displacement.
    """
    if heroes is None:
        raise TypeError("heroes must be a sequence, not None")
    if snapshot is None:
        snapshot = SETTLED_SNAPSHOT
    if resources is None:
        resources = LiteralResources()

    pad = dimens.padding_medium
    spacing = dimens.padding_medium
    card_width = max(0.0, viewport_width - 2 * pad)

    rows: list[CardNode] = []
    top = pad
    for index, hero in enumerate(heroes):
        card = _build_card(index, hero, top, card_width, dimens, resources)
        offset = row_offset(snapshot, index, card.bounds.height, timing)
        if offset:
            card = replace(card, offset_y=offset)
        rows.append(card)
        top = card.bounds.bottom + spacing

    if rows:
        content_height = rows[-1].bounds.bottom + pad
    else:
        content_height = 2 * pad

    max_scroll = max(0.0, content_height - viewport_height)
    clamped_scroll = min(max(0.0, scroll_offset), max_scroll)

    return VisualTree(
        rows=tuple(rows),
        alpha=list_alpha(snapshot, timing),
        width=viewport_width,
        viewport_height=viewport_height,
        content_height=content_height,
        scroll_offset=clamped_scroll,
        content_padding=pad,
        spacing=spacing,
    )
