"""Input signals read by the view loop: viewport size, scroll offset, cursor.

Host callbacks never touch the loop directly. They turn raw window events
into small event records and `reduce()` applies each one to an immutable
InputState. The InputChannel holds the latest state and is shared by
reference between the event pump and the loop.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field, replace
from typing import Callable, List, Union

from config import HEIGHT, MAX_PIXEL_RATIO, SECTIONS_COUNT, WIDTH

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Viewport:
    width: int = WIDTH
    height: int = HEIGHT

    def __post_init__(self) -> None:
        # Sizes are divisors for aspect, cursor and scroll math
        object.__setattr__(self, "width", max(int(self.width), 1))
        object.__setattr__(self, "height", max(int(self.height), 1))

    @property
    def aspect(self) -> float:
        return self.width / self.height


@dataclass(frozen=True)
class Cursor:
    x: float = 0.0
    y: float = 0.0


@dataclass(frozen=True)
class InputState:
    viewport: Viewport = field(default_factory=Viewport)
    scroll_y: float = 0.0
    cursor: Cursor = field(default_factory=Cursor)
    pixel_ratio: float = 1.0
    sections: int = SECTIONS_COUNT

    @property
    def max_scroll(self) -> float:
        """Bottom of the emulated page: one viewport height per section."""
        return float(max(self.sections - 1, 0) * self.viewport.height)


# --------------------------------------------------------------------------
# Events
# --------------------------------------------------------------------------
@dataclass(frozen=True)
class Resize:
    width: int
    height: int
    pixel_ratio: float = 1.0


@dataclass(frozen=True)
class Scroll:
    scroll_y: float


@dataclass(frozen=True)
class ScrollBy:
    delta: float


@dataclass(frozen=True)
class PointerMove:
    x: float
    y: float


InputEvent = Union[Resize, Scroll, ScrollBy, PointerMove]


def clamp_pixel_ratio(ratio: float, maximum: float = MAX_PIXEL_RATIO) -> float:
    if ratio <= 0:
        raise ValueError(f"Pixel ratio must be positive, got {ratio}")
    return min(float(ratio), maximum)


def normalize_cursor(x: float, y: float, viewport: Viewport) -> Cursor:
    """Pixel coordinates -> roughly [-0.5, 0.5] per axis, centre is (0, 0)."""
    return Cursor(x / viewport.width - 0.5, y / viewport.height - 0.5)


def reduce(state: InputState, event: InputEvent) -> InputState:
    """Return the state after applying one input event."""
    if isinstance(event, Resize):
        return replace(
            state,
            viewport=Viewport(event.width, event.height),
            pixel_ratio=clamp_pixel_ratio(event.pixel_ratio),
        )
    if isinstance(event, Scroll):
        return replace(state, scroll_y=float(event.scroll_y))
    if isinstance(event, ScrollBy):
        scroll_y = min(max(state.scroll_y + event.delta, 0.0), state.max_scroll)
        return replace(state, scroll_y=scroll_y)
    if isinstance(event, PointerMove):
        return replace(state, cursor=normalize_cursor(event.x, event.y, state.viewport))
    raise TypeError(f"Unsupported input event: {event!r}")


Listener = Callable[[InputState, InputEvent], None]


class InputChannel:
    """Latest InputState plus listeners told about each applied event."""

    def __init__(self, state: InputState | None = None) -> None:
        self.state = state or InputState()
        self._listeners: List[Listener] = []

    def subscribe(self, listener: Listener) -> None:
        self._listeners.append(listener)

    def dispatch(self, event: InputEvent) -> InputState:
        self.state = reduce(self.state, event)
        if isinstance(event, Resize):
            logger.debug("Viewport resized to %dx%d", self.state.viewport.width, self.state.viewport.height)
        for listener in self._listeners:
            listener(self.state, event)
        return self.state


__all__ = [
    "Viewport",
    "Cursor",
    "InputState",
    "Resize",
    "Scroll",
    "ScrollBy",
    "PointerMove",
    "InputEvent",
    "clamp_pixel_ratio",
    "normalize_cursor",
    "reduce",
    "InputChannel",
]
