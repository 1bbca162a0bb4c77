from __future__ import annotations

from frame_planner.application.transform_analyzer import TransformAnalyzer
from frame_planner.core.geometry_types import AffineTransform, BoundingBox, FrameSize


def test_transform_analyzer_identity_keeps_frame(frame_200x150: FrameSize) -> None:
    bbox, rotation = TransformAnalyzer().analyze(AffineTransform.identity(), frame_200x150)

    assert bbox == BoundingBox(width=200, height=150)
    assert rotation == 0


def test_transform_analyzer_narrow_scale_is_portrait(frame_200x150: FrameSize) -> None:
    bbox, rotation = TransformAnalyzer().analyze(AffineTransform.scaling(0.5, 1.0), frame_200x150)

    assert bbox == BoundingBox(width=100, height=150)
    assert rotation == 90


def test_transform_analyzer_rotate_45_is_square(frame_200x150: FrameSize) -> None:
    bbox, rotation = TransformAnalyzer().analyze(AffineTransform.rotation(45), frame_200x150)

    assert bbox == BoundingBox(width=247, height=247)
    assert rotation == 0


def test_transform_analyzer_shear_and_translation(frame_200x150: FrameSize) -> None:
    transform = AffineTransform.shearing(0.5, 0.0).post_translate(10.0, -5.0)

    bbox, rotation = TransformAnalyzer().analyze(transform, frame_200x150)

    # x' = x + 0.5 * y spans 0..275; translation never changes the extent.
    assert bbox == BoundingBox(width=275, height=150)
    assert rotation == 0


def test_transform_analyzer_rounds_half_pixels_away_from_zero() -> None:
    bbox, rotation = TransformAnalyzer().analyze(AffineTransform.scaling(0.5, 1.0), FrameSize(width=201, height=150))

    assert bbox == BoundingBox(width=101, height=150)
    assert rotation == 90


def test_transform_analyzer_rotated_and_stretched_follows_bounding_box_shape(frame_200x150: FrameSize) -> None:
    # A 90 degree turn followed by a 3x horizontal stretch embeds a quarter turn,
    # yet the result is landscape (450x200), so no compensating rotation is chosen.
    transform = AffineTransform.rotation(90).post_scale(3.0, 1.0)

    bbox, rotation = TransformAnalyzer().analyze(transform, frame_200x150)

    assert bbox == BoundingBox(width=450, height=200)
    assert rotation == 0
