"""One-shot entrance animation state for the hero list screen."""
from dataclasses import dataclass
from enum import Enum, auto


class EntrancePhase(Enum):
    """Lifecycle of the entrance animation; transitions only move forward."""
    HIDDEN = auto()
    ANIMATING = auto()
    SETTLED = auto()


@dataclass(frozen=True, slots=True)
class EntranceSnapshot:
    """Immutable view of the animation clock handed to the pure renderer."""
    phase: EntrancePhase = EntrancePhase.SETTLED
    elapsed: float = 0.0


SETTLED_SNAPSHOT = EntranceSnapshot()


@dataclass(slots=True)
class EntranceAnimation:
    phase: EntrancePhase = EntrancePhase.HIDDEN
    elapsed: float = 0.0
    row_count: int = 0

    def snapshot(self) -> EntranceSnapshot:
        return EntranceSnapshot(phase=self.phase, elapsed=self.elapsed)
