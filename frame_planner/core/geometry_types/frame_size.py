from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class FrameSize:
    """Pixel dimensions of a frame; both sides must be positive."""

    width: int
    height: int

    def __post_init__(self) -> None:
        for name in ("width", "height"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise ValueError(f"FrameSize.{name} must be an int, got {value!r}")
            if value <= 0:
                raise ValueError(f"FrameSize.{name} must be > 0, got {value}")

    @property
    def aspect_ratio(self) -> float:
        return self.width / self.height

    @property
    def is_portrait(self) -> bool:
        return self.width < self.height

    def swapped(self) -> "FrameSize":
        return FrameSize(width=self.height, height=self.width)
