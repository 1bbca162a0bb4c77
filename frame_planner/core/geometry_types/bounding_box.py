from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class BoundingBox:
    """Axis-aligned extent of a transformed frame, rounded to whole pixels."""

    width: int
    height: int

    @property
    def is_portrait(self) -> bool:
        return self.width < self.height
