from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from frame_planner.core.geometry_types import AffineTransform, FrameSize


@dataclass(frozen=True, slots=True)
class TransformRequest:
    """Planner inputs read from configuration."""

    input_size: FrameSize
    transform: AffineTransform
    requested_height: int | None = None


class TransformRequestBuilder:
    """Builds a TransformRequest from planner-like configuration."""

    _OPERATIONS = ("scale", "rotate", "shear", "translate")

    def configure(self, metadata: dict[str, Any]) -> TransformRequest:
        input_cfg = metadata.get("input")
        if not isinstance(input_cfg, dict):
            raise ValueError("input configuration must be a mapping with width and height")
        for key in ("width", "height"):
            if input_cfg.get(key) is None:
                raise ValueError(f"input configuration missing '{key}'")
        input_size = FrameSize(
            width=self._integer("input.width", input_cfg["width"]),
            height=self._integer("input.height", input_cfg["height"]),
        )

        steps = metadata.get("transform") or []
        if not isinstance(steps, list):
            raise ValueError("transform must be a list of operations")
        transform = AffineTransform.identity()
        for index, step in enumerate(steps):
            transform = self._apply_step(transform, index, step)

        requested_height = metadata.get("requested_output_height")
        if requested_height is not None:
            requested_height = self._integer("requested_output_height", requested_height)
            if requested_height <= 0:
                raise ValueError(f"requested_output_height must be > 0, got {requested_height}")

        return TransformRequest(
            input_size=input_size,
            transform=transform,
            requested_height=requested_height,
        )

    def _apply_step(self, transform: AffineTransform, index: int, step: Any) -> AffineTransform:
        if not isinstance(step, dict) or len(step) != 1:
            raise ValueError(f"transform[{index}] must be a single-key mapping, got {step!r}")
        operation, args = next(iter(step.items()))
        if operation not in self._OPERATIONS:
            raise ValueError(f"transform[{index}] has unsupported operation '{operation}'")

        try:
            if operation == "rotate":
                return transform.post_rotate(self._number(index, operation, args))
            pair = self._pair(index, operation, args)
            if operation == "scale":
                return transform.post_scale(*pair)
            if operation == "shear":
                return transform.post_shear(*pair)
            return transform.post_translate(*pair)
        except (TypeError, ValueError) as exc:
            raise ValueError(f"transform[{index}].{operation} is invalid: {exc}") from exc

    @classmethod
    def _pair(cls, index: int, operation: str, args: Any) -> tuple[float, float]:
        if not isinstance(args, (list, tuple)) or len(args) != 2:
            raise ValueError(f"transform[{index}].{operation} expects two values, got {args!r}")
        return cls._number(index, operation, args[0]), cls._number(index, operation, args[1])

    @staticmethod
    def _number(index: int, operation: str, value: Any) -> float:
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise ValueError(f"transform[{index}].{operation} expects numbers, got {value!r}")
        return float(value)

    @staticmethod
    def _integer(name: str, value: Any) -> int:
        # YAML may hand back 1920.0; anything with a fractional part is rejected.
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise ValueError(f"{name} must be an integer, got {value!r}")
        if isinstance(value, float) and not value.is_integer():
            raise ValueError(f"{name} must be an integer, got {value!r}")
        return int(value)
