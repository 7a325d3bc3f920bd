from dataclasses import dataclass


@dataclass(slots=True)
class ScrollState:
    """Vertical scroll position of the list container, in content pixels."""

    offset: float = 0.0
    content_height: float = 0.0
    viewport_height: float = 0.0

    @property
    def max_offset(self) -> float:
        return max(0.0, self.content_height - self.viewport_height)

    def clamp(self) -> None:
        self.offset = min(max(0.0, self.offset), self.max_offset)
