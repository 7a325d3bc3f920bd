from blinker import Signal
from typing import Dict

class EventBus:
    """Simple event bus leveraging blinker Signal objects."""
    def __init__(self):
        self._signals: Dict[str, Signal] = {}

    def subscribe(self, name: str, fn):
        sig = self._signals.setdefault(name, Signal(name))
        # Use weak=False to retain strong reference to bound methods so systems not kept in a variable still receive events.
        sig.connect(fn, weak=False)

    def emit(self, name: str, **payload):
        sig = self._signals.get(name)
        if sig:
            sig.send(self, **payload)


# ============================================================================
# SYSTEM & TIMING
# ============================================================================
EVENT_TICK = "tick"                        # payload: dt=float
EVENT_RESIZE = "resize"                    # payload: width=int, height=int


# ============================================================================
# SCREEN LIFECYCLE
# ============================================================================
EVENT_SCREEN_SHOWN = "screen_shown"        # payload: None
EVENT_SCREEN_CLOSED = "screen_closed"      # payload: None


# ============================================================================
# INPUT
# ============================================================================
EVENT_MOUSE_SCROLL = "mouse_scroll"        # payload: x, y, scroll_x, scroll_y


# ============================================================================
# ANIMATION
# ============================================================================
EVENT_ANIMATION_START = "animation_start"          # payload: kind=str, rows=int
EVENT_ANIMATION_COMPLETE = "animation_complete"    # payload: kind=str, elapsed=float
