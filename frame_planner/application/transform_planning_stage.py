from __future__ import annotations

from typing import Any

from frame_planner.application.output_dimension_planner import OutputDimensionPlanner
from frame_planner.core.geometry_types import (
    UNCONFIGURED,
    AffineTransform,
    Configured,
    FrameSize,
    PlannerState,
    PlanResult,
)
from frame_planner.core.gpu_resource_binder import GpuResourceBinder
from logger.filtered_logger import LogChannel, debug as log_debug, info as log_info


class TransformPlanningStage:
    """Two-phase gate: plan the output geometry first, then touch GPU resources.

    One instance belongs to one frame-processing stage and is discarded with it.
    Not thread-safe; call it from the thread that owns the GPU context.
    """

    def __init__(
        self,
        binder: GpuResourceBinder | None = None,
        planner: OutputDimensionPlanner | None = None,
    ) -> None:
        self._binder = binder
        self._planner = planner or OutputDimensionPlanner()
        self._state: PlannerState = UNCONFIGURED
        self._bound = False

    @property
    def state(self) -> PlannerState:
        return self._state

    def configure(
        self,
        input_size: FrameSize,
        transform: AffineTransform,
        requested_height: int | None = None,
    ) -> FrameSize:
        """Plan the output geometry and cache it.

        Calling again recomputes and overwrites the plan; resources bound for
        the previous plan are released and must be initialized again.
        """
        plan = self._planner.plan(input_size, transform, requested_height)
        self.release()
        self._state = Configured(plan)
        log_info(
            LogChannel.PLANNER,
            f"Configured {input_size.width}x{input_size.height} -> {plan.output_width}x{plan.output_height} "
            f"(rotation={plan.output_rotation_degrees}, process={plan.should_process})",
        )
        return plan.output_size

    def plan_result(self) -> PlanResult:
        return self._require_plan("plan_result")

    def output_rotation_degrees(self) -> int:
        return self._require_plan("output_rotation_degrees").output_rotation_degrees

    def output_dimensions(self) -> FrameSize:
        return self._require_plan("output_dimensions").output_size

    def should_process(self) -> bool:
        return self._require_plan("should_process").should_process

    def initialize_gpu_resource(self, resource_handle: Any) -> None:
        plan = self._require_plan("initialize_gpu_resource")
        if self._binder is None:
            raise RuntimeError("No GPU resource binder was provided to this stage")
        log_debug(LogChannel.GPU, f"Binding resource {resource_handle!r} for {plan.output_width}x{plan.output_height}")
        self._binder.bind(resource_handle, plan)
        self._bound = True

    def release(self) -> None:
        if not self._bound or self._binder is None:
            return
        self._binder.release()
        self._bound = False
        log_debug(LogChannel.GPU, "Released GPU resources")

    def _require_plan(self, operation: str) -> PlanResult:
        state = self._state
        if isinstance(state, Configured):
            return state.plan
        raise RuntimeError(f"{operation}() called before configure()")
