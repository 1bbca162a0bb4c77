from __future__ import annotations

from frame_planner.core.geometry_types.affine_transform import AffineTransform
from frame_planner.core.geometry_types.bounding_box import BoundingBox
from frame_planner.core.geometry_types.frame_size import FrameSize
from frame_planner.core.geometry_types.plan_result import PlanResult
from frame_planner.core.geometry_types.planner_state import (
    UNCONFIGURED,
    Configured,
    PlannerState,
    Unconfigured,
)

__all__ = [
    "AffineTransform",
    "BoundingBox",
    "FrameSize",
    "PlanResult",
    "PlannerState",
    "Configured",
    "Unconfigured",
    "UNCONFIGURED",
]
