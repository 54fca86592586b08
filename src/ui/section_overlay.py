"""Section headings that scroll with the page over the 3D view.

Each section is one viewport tall; its heading sits at the vertical middle of
the section and moves up the screen as the page scrolls, while the camera
moves down through the meshes. Headings alternate left and right.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Sequence

from config import SECTION_TITLES
from landing.input_state import InputState


@dataclass(frozen=True)
class HeadingPlacement:
    section: int
    title: str
    x: float
    y: float
    align: str


class SectionOverlay:
    def __init__(self, titles: Sequence[str] = SECTION_TITLES, *, margin: float = 0.1) -> None:
        self.titles = tuple(titles)
        self.margin = margin

    def heading_positions(self, state: InputState) -> List[HeadingPlacement]:
        """Screen placement of every heading that is at least partly on screen."""
        width = state.viewport.width
        height = state.viewport.height
        placements = []
        for i, title in enumerate(self.titles):
            y = i * height + height / 2 - state.scroll_y
            # Keep headings within half a viewport of the screen edges
            if y < -height / 2 or y > height * 1.5:
                continue
            if i % 2 == 0:
                placements.append(HeadingPlacement(i, title, width * self.margin, y, "midleft"))
            else:
                placements.append(HeadingPlacement(i, title, width * (1 - self.margin), y, "midright"))
        return placements

    def draw(self, text, state: InputState, buffer_size=None) -> None:  # pragma: no cover - visual
        text.resize(state.viewport.width, state.viewport.height)
        text.begin(buffer_size)
        for placement in self.heading_positions(state):
            text.draw_text(placement.title, placement.x, placement.y, align=placement.align)
        text.end()
