from __future__ import annotations

from typing import Any

from frame_planner.core.geometry_types import PlanResult
from frame_planner.core.gpu_resource_binder import GpuResourceBinder
from logger.filtered_logger import LogChannel, debug as log_debug

try:
    import torch
except Exception:  # pragma: no cover - torch missing on host
    torch = None  # type: ignore[assignment]


class TorchResourceBinder(GpuResourceBinder):
    """Allocates the planned output buffer and residual matrix as torch tensors."""

    def __init__(self, *, device: str = "cuda", channels: int = 3, dtype: Any = None) -> None:
        if channels < 1:
            raise ValueError("channels must be >= 1")
        self._device = device
        self._channels = channels
        self._dtype = dtype
        self.input_resource: Any | None = None
        self.output_tensor: Any | None = None
        self.residual_matrix: Any | None = None

    @property
    def is_bound(self) -> bool:
        return self.output_tensor is not None

    def bind(self, resource_handle: Any, plan: PlanResult) -> None:
        if torch is None:
            raise RuntimeError("PyTorch is required to allocate GPU resources")
        if self._device.startswith("cuda") and not torch.cuda.is_available():
            raise RuntimeError("CUDA is required for GPU resource binding")

        dtype = self._dtype if self._dtype is not None else torch.float16
        self.input_resource = resource_handle
        self.output_tensor = torch.empty(
            (self._channels, plan.output_height, plan.output_width),
            dtype=dtype,
            device=self._device,
        )
        self.residual_matrix = torch.tensor(
            plan.residual_transform.as_matrix(),
            dtype=torch.float32,
            device=self._device,
        )
        log_debug(
            LogChannel.GPU,
            f"Allocated output {tuple(self.output_tensor.shape)} on {self._device} for input {resource_handle!r}",
        )

    def release(self) -> None:
        self.input_resource = None
        self.output_tensor = None
        self.residual_matrix = None
