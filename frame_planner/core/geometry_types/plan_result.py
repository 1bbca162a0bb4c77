from __future__ import annotations

from dataclasses import dataclass, field

from frame_planner.core.geometry_types.affine_transform import AffineTransform
from frame_planner.core.geometry_types.frame_size import FrameSize


@dataclass(frozen=True, slots=True)
class PlanResult:
    """Output geometry for one (input size, transform, resolution request) triple."""

    output_width: int
    output_height: int
    output_rotation_degrees: int
    should_process: bool
    # Transform the resampling pass applies in normalized device coordinates.
    residual_transform: AffineTransform = field(default_factory=AffineTransform.identity)

    def __post_init__(self) -> None:
        if self.output_width <= 0 or self.output_height <= 0:
            raise ValueError(
                f"Output dimensions must be positive, got {self.output_width}x{self.output_height}"
            )
        if self.output_rotation_degrees not in (0, 90):
            raise ValueError(f"Output rotation must be 0 or 90, got {self.output_rotation_degrees}")

    @property
    def output_size(self) -> FrameSize:
        return FrameSize(width=self.output_width, height=self.output_height)
