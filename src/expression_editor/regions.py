"""Fixed on-screen geometry of the five editable regions."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from expression_editor.slots import SLOT_COUNT

PANEL_WIDTH = 500
PANEL_HEIGHT = 300

REGION_WIDTH = 50
REGION_HEIGHT = 50

# Top-left corner of the first region and x step between corners
REGION_START_X = 50
REGION_START_Y = 50
REGION_INC_X = 60

# Five slots, "=" and the result
TEXT_POINT_COUNT = SLOT_COUNT + 2


@dataclass(frozen=True)
class Region:
    """Axis-aligned rectangle, half-open on the right and bottom edges."""

    x: int
    y: int
    width: int
    height: int

    def contains(self, px: float, py: float) -> bool:
        return self.x <= px < self.x + self.width and self.y <= py < self.y + self.height

    @property
    def bounds(self) -> tuple[int, int, int, int]:
        """(x0, y0, x1, y1) corners."""
        return (self.x, self.y, self.x + self.width, self.y + self.height)


def build_regions() -> tuple[Region, ...]:
    """Regions for slots 0..4, left to right."""
    return tuple(
        Region(REGION_INC_X + i * REGION_INC_X, REGION_START_Y, REGION_WIDTH, REGION_HEIGHT)
        for i in range(SLOT_COUNT)
    )


def text_points() -> tuple[tuple[int, int], ...]:
    """Anchor points for the expression text, the equals sign and the result."""
    start_x = REGION_START_X + 20
    start_y = REGION_START_Y + 30
    return tuple((start_x + i * REGION_INC_X, start_y) for i in range(TEXT_POINT_COUNT))


def slot_at(px: float, py: float, regions: Sequence[Region] | None = None) -> int | None:
    """
    Hit-test a point against the regions.

    Returns:
        The slot whose region contains the point, or None
    """
    if regions is None:
        regions = build_regions()
    for slot, region in enumerate(regions):
        if region.contains(px, py):
            return slot
    return None
