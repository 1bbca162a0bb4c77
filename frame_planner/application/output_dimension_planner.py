from __future__ import annotations

import numpy as np

from frame_planner.application.transform_analyzer import TransformAnalyzer
from frame_planner.core.geometry_types import AffineTransform, FrameSize, PlanResult
from frame_planner.core.rounding import round_half_away_from_zero
from logger.filtered_logger import LogChannel, debug as log_debug

# Corners of the normalized device coordinate square.
_NDC_CORNERS = np.array([[-1.0, -1.0], [-1.0, 1.0], [1.0, -1.0], [1.0, 1.0]], dtype=np.float64)
_NDC_EXTENT = 2.0


class OutputDimensionPlanner:
    """Turns an input size, transform and optional target height into a PlanResult."""

    def __init__(self, analyzer: TransformAnalyzer | None = None) -> None:
        self._analyzer = analyzer or TransformAnalyzer()

    def plan(
        self,
        input_size: FrameSize,
        transform: AffineTransform,
        requested_height: int | None = None,
    ) -> PlanResult:
        self._validate(transform, requested_height)

        bbox, rotation = self._analyzer.analyze(transform, input_size)
        if rotation == 90:
            # Keep the reported frame landscape-major; orientation goes into metadata.
            base_width, base_height = bbox.height, bbox.width
        else:
            base_width, base_height = bbox.width, bbox.height
        if base_width <= 0 or base_height <= 0:
            raise ValueError(
                f"Transform collapses {input_size.width}x{input_size.height} to {base_width}x{base_height}"
            )

        if requested_height is None:
            output_width, output_height = base_width, base_height
        else:
            output_height = requested_height
            output_width = round_half_away_from_zero(requested_height * base_width / base_height)
            if output_width <= 0:
                raise ValueError(
                    f"Requested height {requested_height} yields a zero-width output for {base_width}x{base_height}"
                )

        should_process = not (transform.is_identity and requested_height is None)
        residual = self.residual_transform(input_size, transform, rotation)
        log_debug(
            LogChannel.PLANNER,
            f"plan output {output_width}x{output_height}, rotation {rotation}, process={should_process}",
        )
        return PlanResult(
            output_width=output_width,
            output_height=output_height,
            output_rotation_degrees=rotation,
            should_process=should_process,
            residual_transform=residual,
        )

    @staticmethod
    def residual_transform(input_size: FrameSize, transform: AffineTransform, rotation: int) -> AffineTransform:
        """Transform for the resampling pass, expressed in normalized device coordinates.

        The frame is stretched by its aspect ratio so pixels stay rectangular in
        the square NDC space, then recentred and rescaled so the transformed
        frame exactly fills the output, then rotated by ``rotation``.
        """
        if transform.is_identity:
            return AffineTransform.identity()
        aspect = input_size.aspect_ratio
        adjusted = transform.pre_scale(aspect, 1.0).post_scale(1.0 / aspect, 1.0)

        mapped = adjusted.map_points(_NDC_CORNERS)
        low = mapped.min(axis=0)
        high = mapped.max(axis=0)
        center = (high + low) / 2.0
        scale = (high - low) / _NDC_EXTENT

        adjusted = adjusted.post_translate(-center[0], -center[1])
        adjusted = adjusted.post_scale(1.0 / scale[0], 1.0 / scale[1])
        if rotation:
            adjusted = adjusted.post_rotate(rotation)
        return adjusted

    @staticmethod
    def _validate(transform: AffineTransform, requested_height: int | None) -> None:
        if transform.determinant == 0.0:
            raise ValueError(f"Transform is not invertible: {transform.coefficients}")
        if requested_height is None:
            return
        if isinstance(requested_height, bool) or not isinstance(requested_height, int):
            raise ValueError(f"requested_height must be an int or None, got {requested_height!r}")
        if requested_height <= 0:
            raise ValueError(f"requested_height must be > 0, got {requested_height}")
