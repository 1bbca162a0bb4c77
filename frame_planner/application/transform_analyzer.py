from __future__ import annotations

import numpy as np

from frame_planner.core.geometry_types import AffineTransform, BoundingBox, FrameSize
from frame_planner.core.rounding import round_half_away_from_zero
from logger.filtered_logger import LogChannel, debug as log_debug


class TransformAnalyzer:
    """Derives the bounding box and quantized rotation of a transformed frame.

    The rotation comes from the shape of the result, not from decomposing the
    matrix: a portrait bounding box selects a 90 degree compensating rotation
    so the reported frame stays landscape-major.
    """

    def analyze(self, transform: AffineTransform, input_size: FrameSize) -> tuple[BoundingBox, int]:
        corners = self.frame_corners(input_size)
        mapped = transform.map_points(corners)
        extent = mapped.max(axis=0) - mapped.min(axis=0)
        bbox = BoundingBox(
            width=round_half_away_from_zero(float(extent[0])),
            height=round_half_away_from_zero(float(extent[1])),
        )
        rotation = 90 if bbox.is_portrait else 0
        log_debug(
            LogChannel.PLANNER,
            f"analyze {input_size.width}x{input_size.height} -> bbox {bbox.width}x{bbox.height}, rotation {rotation}",
        )
        return bbox, rotation

    @staticmethod
    def frame_corners(input_size: FrameSize) -> np.ndarray:
        width = float(input_size.width)
        height = float(input_size.height)
        return np.array(
            [[0.0, 0.0], [width, 0.0], [0.0, height], [width, height]],
            dtype=np.float64,
        )
