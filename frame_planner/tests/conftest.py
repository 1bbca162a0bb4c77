from __future__ import annotations

from typing import Any, Iterator

import pytest

from frame_planner.core.geometry_types import FrameSize, PlanResult
from frame_planner.core.gpu_resource_binder import GpuResourceBinder
from logger.filtered_logger import configure_logger


class RecordingBinder(GpuResourceBinder):
    """Binder double that records calls instead of touching a GPU."""

    def __init__(self) -> None:
        self.bound: list[tuple[Any, PlanResult]] = []
        self.release_count = 0

    def bind(self, resource_handle: Any, plan: PlanResult) -> None:
        self.bound.append((resource_handle, plan))

    def release(self) -> None:
        self.release_count += 1


@pytest.fixture
def recording_binder() -> RecordingBinder:
    return RecordingBinder()


@pytest.fixture
def frame_200x150() -> FrameSize:
    return FrameSize(width=200, height=150)


@pytest.fixture(autouse=True)
def _reset_log_channels() -> Iterator[None]:
    # Channel flags live on a process-wide logger; keep tests independent.
    yield
    configure_logger(extreme_debug=False, planner_debug=False, gpu_debug=False)
