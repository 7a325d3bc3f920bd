"""Timing of the hero list entrance: list fade-in plus staggered row slide-in."""
from __future__ import annotations

from dataclasses import dataclass

from superheroes.components.entrance_animation import EntrancePhase, EntranceSnapshot
from superheroes.constants import (
    DAMPING_RATIO_LOW_BOUNCY,
    DAMPING_RATIO_NO_BOUNCY,
    ROW_STAGGER,
    SPRING_SETTLE_THRESHOLD,
    STIFFNESS_MEDIUM,
    STIFFNESS_VERY_LOW,
)
from superheroes.utils.spring import spring_progress, spring_settle_time


@dataclass(frozen=True, slots=True)
class EntranceTiming:
    fade_damping: float = DAMPING_RATIO_LOW_BOUNCY
    fade_stiffness: float = STIFFNESS_MEDIUM
    slide_damping: float = DAMPING_RATIO_NO_BOUNCY
    slide_stiffness: float = STIFFNESS_VERY_LOW
    row_stagger: float = ROW_STAGGER
    settle_threshold: float = SPRING_SETTLE_THRESHOLD

    def row_start(self, index: int) -> float:
        """Seconds after the entrance begins when row ``index`` starts sliding."""
        return self.row_stagger * (index + 1)

    def fade_duration(self) -> float:
        return spring_settle_time(self.fade_damping, self.fade_stiffness, self.settle_threshold)

    def slide_duration(self) -> float:
        return spring_settle_time(self.slide_damping, self.slide_stiffness, self.settle_threshold)

    def total_duration(self, row_count: int) -> float:
        """Seconds until the fade and every row have settled."""
        total = self.fade_duration()
        if row_count > 0:
            total = max(total, self.row_start(row_count - 1) + self.slide_duration())
        return total

    def is_settled(self, elapsed: float, row_count: int) -> bool:
        return elapsed >= self.total_duration(row_count)


DEFAULT_TIMING = EntranceTiming()


def list_alpha(snapshot: EntranceSnapshot, timing: EntranceTiming = DEFAULT_TIMING) -> float:
    if snapshot.phase == EntrancePhase.SETTLED:
        return 1.0
    if snapshot.phase == EntrancePhase.HIDDEN:
        return 0.0
    if snapshot.elapsed >= timing.fade_duration():
        return 1.0
    progress = spring_progress(snapshot.elapsed, timing.fade_damping, timing.fade_stiffness)
    return min(max(progress, 0.0), 1.0)


def row_offset(
    snapshot: EntranceSnapshot,
    index: int,
    row_height: float,
    timing: EntranceTiming = DEFAULT_TIMING,
) -> float:
    """Downward displacement of row ``index``; zero once the row has settled.

    Each row starts ``row_height * (index + 1)`` below its place, so later rows
    travel further as well as starting later.
    """
    if snapshot.phase == EntrancePhase.SETTLED:
        return 0.0
    initial = row_height * (index + 1)
    if snapshot.phase == EntrancePhase.HIDDEN:
        return initial
    local = snapshot.elapsed - timing.row_start(index)
    if local <= 0.0:
        return initial
    if local >= timing.slide_duration():
        return 0.0
    progress = spring_progress(local, timing.slide_damping, timing.slide_stiffness)
    return initial * (1.0 - progress)
