from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

from frame_planner.core.geometry_types import PlanResult


class GpuResourceBinder(ABC):
    """Boundary to the GPU side that allocates and binds resources for a planned frame."""

    @abstractmethod
    def bind(self, resource_handle: Any, plan: PlanResult) -> None:
        """Bind the input resource and prepare an output target sized by ``plan``."""

    @abstractmethod
    def release(self) -> None:
        """Free whatever ``bind`` allocated. Safe to call when nothing is bound."""
