"""Immutable, ordered hero catalog."""
from __future__ import annotations

from typing import Iterable, Iterator

from superheroes.components.hero import Hero


class HeroCatalog:
    """Fixed ordered sequence of heroes.

    The sequence is captured once at construction; every call to ``list()``
    returns the same tuple in the same order, so a catalog can be read any
    number of times and shared between renders.
    """

    __slots__ = ("_heroes",)

    def __init__(self, heroes: Iterable[Hero] = ()):
        self._heroes: tuple[Hero, ...] = tuple(heroes)

    def list(self) -> tuple[Hero, ...]:
        return self._heroes

    def __len__(self) -> int:
        return len(self._heroes)

    def __iter__(self) -> Iterator[Hero]:
        return iter(self._heroes)

    def __getitem__(self, index: int) -> Hero:
        return self._heroes[index]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, HeroCatalog):
            return NotImplemented
        return self._heroes == other._heroes

    def __hash__(self) -> int:
        return hash(self._heroes)

    def __repr__(self) -> str:
        return f"HeroCatalog({list(self._heroes)!r})"
