"""
Quaternion algebra for rotations and points.

A quaternion ``q0 + q1 i + q2 j + q3 k`` is used two ways:

- as a rotation: a *unit* quaternion (norm 1)
- as a point or vector: a *pure* quaternion (``q0 == 0``) holding (x, y, z)

Components are stored scalar-first (q0 is the real part). Note that scipy's
``Rotation`` is scalar-last; see `frametree.utils.orientation` for conversion.

References
----------
.. [1] https://en.wikipedia.org/wiki/Quaternions_and_spatial_rotation
"""
from __future__ import annotations

from dataclasses import dataclass

import numpy as np
from numpy.typing import ArrayLike, NDArray

# Tolerance for the unit/zero/pure predicates and for degenerate inputs
EPSILON = 1e-10


@dataclass(frozen=True, slots=True)
class Quaternion:
    """
    Immutable quaternion value.

    Parameters
    ----------
    q0 : float
        Real (scalar) part
    q1, q2, q3 : float
        Imaginary parts along i, j, k

    Notes
    -----
    Equality is exact componentwise equality; use `isclose` for tolerance
    based comparison. Multiplication is the (non-commutative) Hamilton
    product: ``p * q`` performs ``q`` then ``p``.
    """

    q0: float = 0.0
    q1: float = 0.0
    q2: float = 0.0
    q3: float = 0.0

    # ------------------------------------------------------------------
    # Predicates
    # ------------------------------------------------------------------

    def is_unit(self, epsilon: float = EPSILON) -> bool:
        """Return True if the norm is 1.0 within `epsilon`."""
        return abs(self.norm - 1.0) <= epsilon

    def is_zero(self, epsilon: float = EPSILON) -> bool:
        """Return True if the norm is 0.0 within `epsilon`."""
        return self.norm <= epsilon

    def is_pure(self, epsilon: float = EPSILON) -> bool:
        """Return True if the scalar part is 0.0 within `epsilon`."""
        return abs(self.q0) <= epsilon

    def isclose(self, other: Quaternion, epsilon: float = EPSILON) -> bool:
        """Componentwise comparison within `epsilon`."""
        return (
            abs(self.q0 - other.q0) <= epsilon
            and abs(self.q1 - other.q1) <= epsilon
            and abs(self.q2 - other.q2) <= epsilon
            and abs(self.q3 - other.q3) <= epsilon
        )

    # ------------------------------------------------------------------
    # Norm
    # ------------------------------------------------------------------

    @property
    def norm(self) -> float:
        """Euclidean norm sqrt(q0² + q1² + q2² + q3²)."""
        return float(np.sqrt(self.dot(self)))

    def normalize(self) -> Quaternion | None:
        """
        Return the unit quaternion in the direction of `self`.

        Returns
        -------
        Quaternion | None
            Normalized quaternion, or None if the norm is (near) zero.
        """
        n = self.norm
        if n <= EPSILON:
            return None
        return Quaternion(self.q0 / n, self.q1 / n, self.q2 / n, self.q3 / n)

    # ------------------------------------------------------------------
    # Basic operators
    # ------------------------------------------------------------------

    def dot(self, other: Quaternion) -> float:
        """Four-component dot product."""
        return (
            self.q0 * other.q0
            + self.q1 * other.q1
            + self.q2 * other.q2
            + self.q3 * other.q3
        )

    @property
    def conjugate(self) -> Quaternion:
        """Conjugate (q0, -q1, -q2, -q3)."""
        return Quaternion(self.q0, -self.q1, -self.q2, -self.q3)

    @property
    def inverse(self) -> Quaternion | None:
        """
        Multiplicative inverse, conjugate / dot(self, self).

        For a unit quaternion this equals the conjugate. None when `self` is
        (near) zero.
        """
        d = self.dot(self)
        if d <= EPSILON * EPSILON:
            return None
        return Quaternion(self.q0 / d, -self.q1 / d, -self.q2 / d, -self.q3 / d)

    def __add__(self, other: Quaternion) -> Quaternion:
        if not isinstance(other, Quaternion):
            return NotImplemented
        return Quaternion(
            self.q0 + other.q0,
            self.q1 + other.q1,
            self.q2 + other.q2,
            self.q3 + other.q3,
        )

    def __sub__(self, other: Quaternion) -> Quaternion:
        if not isinstance(other, Quaternion):
            return NotImplemented
        return Quaternion(
            self.q0 - other.q0,
            self.q1 - other.q1,
            self.q2 - other.q2,
            self.q3 - other.q3,
        )

    def __neg__(self) -> Quaternion:
        return Quaternion(-self.q0, -self.q1, -self.q2, -self.q3)

    def __mul__(self, other: Quaternion | float) -> Quaternion:
        if isinstance(other, Quaternion):
            a, b = self, other
            return Quaternion(
                a.q0 * b.q0 - a.q1 * b.q1 - a.q2 * b.q2 - a.q3 * b.q3,
                a.q0 * b.q1 + a.q1 * b.q0 + a.q2 * b.q3 - a.q3 * b.q2,
                a.q0 * b.q2 - a.q1 * b.q3 + a.q2 * b.q0 + a.q3 * b.q1,
                a.q0 * b.q3 + a.q1 * b.q2 - a.q2 * b.q1 + a.q3 * b.q0,
            )
        if isinstance(other, (int, float)):
            s = float(other)
            return Quaternion(s * self.q0, s * self.q1, s * self.q2, s * self.q3)
        return NotImplemented

    def __rmul__(self, other: float) -> Quaternion:
        if isinstance(other, (int, float)):
            return self * other
        return NotImplemented

    # ------------------------------------------------------------------
    # Rotate and translate
    # ------------------------------------------------------------------

    def rotate(self, by: Quaternion) -> Quaternion:
        """
        Rotate `self` by the unit quaternion `by`: ``by * self * by*``.

        Only meaningful when `self` is pure.
        """
        return by * self * by.conjugate

    def translate(self, by: Quaternion) -> Quaternion:
        """Offset `self` by `by`. Only meaningful when both are pure."""
        return self + by

    # ------------------------------------------------------------------
    # Angle + direction
    # ------------------------------------------------------------------

    def as_angle_direction(self) -> tuple[float, tuple[float, float, float]] | None:
        """
        Extract the rotation angle and axis.

        Returns
        -------
        tuple[float, tuple[float, float, float]] | None
            ``(angle, (dx, dy, dz))`` with angle in radians in [0, 2π].
            The direction is (0, 0, 0) when the angle is zero, since the
            axis is undefined there. None if `self` is a zero quaternion.
        """
        unit = self.normalize()
        if unit is None:
            return None

        angle = 2.0 * float(np.arctan2(np.linalg.norm(unit.as_array()[1:]), unit.q0))
        if abs(angle) <= EPSILON:
            return angle, (0.0, 0.0, 0.0)

        df = float(np.sin(angle / 2.0))
        return angle, (unit.q1 / df, unit.q2 / df, unit.q3 / df)

    @classmethod
    def from_angle_direction(
        cls, angle: float, direction: tuple[float, float, float]
    ) -> Quaternion:
        """
        Rotation of `angle` radians about `direction`.

        `direction` need not be normalized. A zero direction gives the
        identity rotation.
        """
        dx, dy, dz = direction
        n = float(np.linalg.norm([dx, dy, dz]))
        if n <= EPSILON:
            return IDENTITY

        ca2 = float(np.cos(angle / 2.0))
        sa2 = float(np.sin(angle / 2.0))
        return cls(ca2, sa2 * dx / n, sa2 * dy / n, sa2 * dz / n)

    # ------------------------------------------------------------------
    # Yaw, pitch, roll
    # ------------------------------------------------------------------

    def as_yaw_pitch_roll(self) -> tuple[float, float, float]:
        """
        Extract (yaw, pitch, roll) in radians.

        Inverse of `from_yaw_pitch_roll` for pitch in (-π/2, π/2). Yaw is
        the angle carried by q1 and roll the angle carried by q3.
        """
        q0, q1, q2, q3 = self.q0, self.q1, self.q2, self.q3
        s = 2.0 * (q0 * q2 - q3 * q1)
        # asin is undefined for |s| > 1, which rounding can produce at the poles
        s = np.clip(s, -1.0, 1.0)
        return (
            float(np.arctan2(2.0 * (q0 * q1 + q2 * q3), 1.0 - 2.0 * (q1 * q1 + q2 * q2))),
            float(np.arcsin(s)),
            float(np.arctan2(2.0 * (q0 * q3 + q1 * q2), 1.0 - 2.0 * (q2 * q2 + q3 * q3))),
        )

    @classmethod
    def from_yaw_pitch_roll(cls, yaw: float, pitch: float, roll: float) -> Quaternion:
        """Rotation quaternion from (yaw, pitch, roll) in radians."""
        ys, yc = float(np.sin(yaw / 2.0)), float(np.cos(yaw / 2.0))
        ps, pc = float(np.sin(pitch / 2.0)), float(np.cos(pitch / 2.0))
        rs, rc = float(np.sin(roll / 2.0)), float(np.cos(roll / 2.0))

        return cls(
            yc * pc * rc + ys * ps * rs,
            ys * pc * rc - yc * ps * rs,
            yc * ps * rc + ys * pc * rs,
            yc * pc * rs - ys * ps * rc,
        )

    # ------------------------------------------------------------------
    # Points and arrays
    # ------------------------------------------------------------------

    @classmethod
    def from_position(cls, x: float, y: float, z: float) -> Quaternion:
        """Pure quaternion (0, x, y, z)."""
        return cls(0.0, float(x), float(y), float(z))

    @property
    def vector(self) -> tuple[float, float, float]:
        """The imaginary part (q1, q2, q3)."""
        return (self.q1, self.q2, self.q3)

    def as_array(self) -> NDArray[np.float64]:
        """Scalar-first array [q0, q1, q2, q3]."""
        return np.array([self.q0, self.q1, self.q2, self.q3], dtype=np.float64)

    @classmethod
    def from_array(cls, q: ArrayLike) -> Quaternion:
        """
        Build from a scalar-first array-like of shape (4,).

        Raises
        ------
        ValueError
            If `q` does not have shape (4,)
        """
        arr = np.asarray(q, dtype=np.float64)
        if arr.shape != (4,):
            raise ValueError(f"Quaternion must have shape (4,), got {arr.shape}")
        return cls(float(arr[0]), float(arr[1]), float(arr[2]), float(arr[3]))


IDENTITY = Quaternion(1.0, 0.0, 0.0, 0.0)
"""Identity rotation (1, 0, 0, 0)."""

ZERO = Quaternion(0.0, 0.0, 0.0, 0.0)
"""Zero quaternion; the origin as a point."""


__all__ = [
    "EPSILON",
    "Quaternion",
    "IDENTITY",
    "ZERO",
]
