from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterable, Sequence

import numpy as np

# Exact values for quarter turns so rotated corners land on whole pixels.
_QUARTER_TURN_SIN_COS: dict[int, tuple[float, float]] = {
    0: (0.0, 1.0),
    90: (1.0, 0.0),
    180: (0.0, -1.0),
    270: (-1.0, 0.0),
}


def _sin_cos(degrees: float) -> tuple[float, float]:
    if float(degrees).is_integer() and int(degrees) % 90 == 0:
        return _QUARTER_TURN_SIN_COS[int(degrees) % 360]
    radians = math.radians(degrees)
    return math.sin(radians), math.cos(radians)


@dataclass(frozen=True, slots=True)
class AffineTransform:
    """Immutable 2D affine map.

    Points map as::

        x' = scale_x * x + skew_x * y + translate_x
        y' = skew_y * x + scale_y * y + translate_y

    The ``post_*`` helpers apply the extra operation after this transform and
    the ``pre_*`` helpers apply it before, like a graphics matrix API.
    """

    scale_x: float = 1.0
    skew_x: float = 0.0
    translate_x: float = 0.0
    skew_y: float = 0.0
    scale_y: float = 1.0
    translate_y: float = 0.0

    def __post_init__(self) -> None:
        if not self.is_finite:
            raise ValueError(f"AffineTransform coefficients must be finite: {self.coefficients}")

    @classmethod
    def identity(cls) -> "AffineTransform":
        return cls()

    @classmethod
    def scaling(cls, sx: float, sy: float) -> "AffineTransform":
        return cls(scale_x=float(sx), scale_y=float(sy))

    @classmethod
    def rotation(cls, degrees: float) -> "AffineTransform":
        """Rotation about the origin; positive angles turn +x towards +y."""
        sin, cos = _sin_cos(degrees)
        return cls(scale_x=cos, skew_x=-sin, skew_y=sin, scale_y=cos)

    @classmethod
    def shearing(cls, kx: float, ky: float) -> "AffineTransform":
        return cls(skew_x=float(kx), skew_y=float(ky))

    @classmethod
    def translation(cls, tx: float, ty: float) -> "AffineTransform":
        return cls(translate_x=float(tx), translate_y=float(ty))

    @classmethod
    def from_matrix(cls, matrix: Sequence[Sequence[float]] | np.ndarray) -> "AffineTransform":
        values = np.asarray(matrix, dtype=np.float64)
        if values.shape not in ((2, 3), (3, 3)):
            raise ValueError(f"Expected a 2x3 or 3x3 matrix, got shape {values.shape}")
        if values.shape == (3, 3) and not np.array_equal(values[2], [0.0, 0.0, 1.0]):
            raise ValueError("Last row of an affine matrix must be [0, 0, 1]")
        return cls(
            scale_x=float(values[0, 0]),
            skew_x=float(values[0, 1]),
            translate_x=float(values[0, 2]),
            skew_y=float(values[1, 0]),
            scale_y=float(values[1, 1]),
            translate_y=float(values[1, 2]),
        )

    @property
    def coefficients(self) -> tuple[float, float, float, float, float, float]:
        return (
            self.scale_x,
            self.skew_x,
            self.translate_x,
            self.skew_y,
            self.scale_y,
            self.translate_y,
        )

    @property
    def is_finite(self) -> bool:
        return all(math.isfinite(value) for value in self.coefficients)

    @property
    def is_identity(self) -> bool:
        return self.coefficients == (1.0, 0.0, 0.0, 0.0, 1.0, 0.0)

    @property
    def determinant(self) -> float:
        return self.scale_x * self.scale_y - self.skew_x * self.skew_y

    def as_matrix(self) -> np.ndarray:
        return np.array(
            [
                [self.scale_x, self.skew_x, self.translate_x],
                [self.skew_y, self.scale_y, self.translate_y],
                [0.0, 0.0, 1.0],
            ],
            dtype=np.float64,
        )

    def map_points(self, points: Iterable[Sequence[float]] | np.ndarray) -> np.ndarray:
        """Map an ``(N, 2)`` array of points; returns a new ``(N, 2)`` float array."""
        coords = np.asarray(points, dtype=np.float64).reshape(-1, 2)
        linear = self.as_matrix()[:2, :2]
        offset = np.array([self.translate_x, self.translate_y], dtype=np.float64)
        return coords @ linear.T + offset

    def post_concat(self, other: "AffineTransform") -> "AffineTransform":
        """Return the transform that applies ``self`` first, then ``other``."""
        return AffineTransform.from_matrix(other.as_matrix() @ self.as_matrix())

    def pre_concat(self, other: "AffineTransform") -> "AffineTransform":
        """Return the transform that applies ``other`` first, then ``self``."""
        return AffineTransform.from_matrix(self.as_matrix() @ other.as_matrix())

    def post_scale(self, sx: float, sy: float) -> "AffineTransform":
        return self.post_concat(AffineTransform.scaling(sx, sy))

    def pre_scale(self, sx: float, sy: float) -> "AffineTransform":
        return self.pre_concat(AffineTransform.scaling(sx, sy))

    def post_rotate(self, degrees: float) -> "AffineTransform":
        return self.post_concat(AffineTransform.rotation(degrees))

    def post_shear(self, kx: float, ky: float) -> "AffineTransform":
        return self.post_concat(AffineTransform.shearing(kx, ky))

    def post_translate(self, tx: float, ty: float) -> "AffineTransform":
        return self.post_concat(AffineTransform.translation(tx, ty))
