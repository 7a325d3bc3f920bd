"""Immutable snapshot of the hero list produced by ``render``.

Coordinates are in content space: ``x`` grows right and ``y`` grows down from
the top edge of the scrollable content. Boxes describe settled positions; a
card's ``offset_y`` is the extra downward displacement of the entrance slide.
"""
from __future__ import annotations

from dataclasses import dataclass

from superheroes.components.hero import Hero


@dataclass(frozen=True, slots=True)
class Box:
    x: float
    y: float
    width: float
    height: float

    @property
    def right(self) -> float:
        return self.x + self.width

    @property
    def bottom(self) -> float:
        return self.y + self.height


@dataclass(frozen=True, slots=True)
class TextNode:
    text: str
    font_size: float
    box: Box


@dataclass(frozen=True, slots=True)
class ImageNode:
    source: str
    box: Box


@dataclass(frozen=True, slots=True)
class CardNode:
    """One row of the list: info column on the left, image on the right."""

    index: int
    hero: Hero
    bounds: Box
    name: TextNode
    description: TextNode
    image: ImageNode
    elevation: float
    offset_y: float = 0.0


@dataclass(frozen=True, slots=True)
class VisualTree:
    """Scrollable column of cards."""

    rows: tuple[CardNode, ...]
    alpha: float
    width: float
    viewport_height: float
    content_height: float
    scroll_offset: float
    content_padding: float
    spacing: float

    @property
    def max_scroll(self) -> float:
        return max(0.0, self.content_height - self.viewport_height)

    def visible_rows(self) -> tuple[CardNode, ...]:
        """Rows intersecting the viewport at their current animated position."""
        top = self.scroll_offset
        bottom = top + self.viewport_height
        return tuple(
            row for row in self.rows
            if row.bounds.y + row.offset_y < bottom and row.bounds.bottom + row.offset_y > top
        )
