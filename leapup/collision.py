"""Axis-aligned rectangles, alpha masks and pixel-perfect collision tests."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Optional, Sequence, Tuple


@dataclass(frozen=True)
class Rect:
    """An axis-aligned rectangle given by its top-left corner and size."""

    left: float
    top: float
    width: float
    height: float

    @property
    def right(self) -> float:
        return self.left + self.width

    @property
    def bottom(self) -> float:
        return self.top + self.height

    def intersection(self, other: "Rect") -> Optional["Rect"]:
        """Return the overlapping area of two rectangles, or None if they do not overlap."""
        left = max(min(self.left, self.right), min(other.left, other.right))
        top = max(min(self.top, self.bottom), min(other.top, other.bottom))
        right = min(max(self.left, self.right), max(other.left, other.right))
        bottom = min(max(self.top, self.bottom), max(other.top, other.bottom))
        if left < right and top < bottom:
            return Rect(left, top, right - left, bottom - top)
        return None

    def contains(self, x: float, y: float) -> bool:
        """Whether a point lies inside; the right and bottom edges are excluded."""
        min_x, max_x = sorted((self.left, self.right))
        min_y, max_y = sorted((self.top, self.bottom))
        return min_x <= x < max_x and min_y <= y < max_y


@dataclass(frozen=True)
class AlphaMask:
    """The alpha channel of an image, row by row."""

    width: int
    height: int
    rows: Tuple[Tuple[int, ...], ...]

    @classmethod
    def from_rows(cls, rows: Iterable[Sequence[int]]) -> "AlphaMask":
        """Build a mask from rows of alpha values in the range 0-255."""
        frozen = tuple(tuple(int(value) for value in row) for row in rows)
        width = len(frozen[0]) if frozen else 0
        for row in frozen:
            if len(row) != width:
                raise ValueError("all rows of an alpha mask must have the same length")
            for value in row:
                if not 0 <= value <= 255:
                    raise ValueError(f"alpha value out of range: {value}")
        return cls(width=width, height=len(frozen), rows=frozen)

    def alpha_at(self, x: int, y: int) -> int:
        """Return the alpha value of the pixel at (x, y)."""
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"pixel ({x}, {y}) is outside a {self.width}x{self.height} mask")
        return self.rows[y][x]


def _local(mask: AlphaMask, origin: Tuple[float, float], x: float, y: float) -> Optional[Tuple[int, int]]:
    local_x = x - origin[0]
    local_y = y - origin[1]
    if 0 <= local_x < mask.width and 0 <= local_y < mask.height:
        return int(local_x), int(local_y)
    return None


def pixel_perfect_collision(
    first_mask: AlphaMask,
    first_origin: Tuple[float, float],
    second_mask: AlphaMask,
    second_origin: Tuple[float, float],
    region: Rect,
) -> bool:
    """Whether two masks placed with their top-left corners at the given origins
    share a pixel inside ``region`` where both are not fully transparent."""
    x_range = range(int(region.left), int(region.left + region.width))
    y_range = range(int(region.top), int(region.top + region.height))
    for x in x_range:
        for y in y_range:
            first = _local(first_mask, first_origin, x, y)
            second = _local(second_mask, second_origin, x, y)
            if first is None or second is None:
                continue
            if first_mask.alpha_at(*first) > 0 and second_mask.alpha_at(*second) > 0:
                return True
    return False