"""
Directions: unit vectors expressed in a frame.

A Direction is an immutable (frame, quat) pair where `quat` is a pure unit
quaternion. Directions are free vectors: moving between frames applies only
the rotation between them, never the translation.
"""
from __future__ import annotations

import numpy as np

from frametree.algebra.quaternion import Quaternion
from frametree.core.frame import Axis, Frame
from frametree.core.framed import Invertible, Rotatable, Transformable
from frametree.geometry.orientation import Orientation
from frametree.geometry.position import Position
from frametree.units import AngleUnit, LengthUnit, Quantity, meter, radian

_AXIS_VECTORS = {
    Axis.X: Quaternion(0.0, 1.0, 0.0, 0.0),
    Axis.Y: Quaternion(0.0, 0.0, 1.0, 0.0),
    Axis.Z: Quaternion(0.0, 0.0, 0.0, 1.0),
}


class Direction(Invertible, Rotatable, Transformable):
    """
    A unit direction in a frame.

    ``Direction(frame)`` points along `frame`'s z axis; pass `axis` for the
    others. Arbitrary directions come from `from_xyz`, `from_cross`,
    `from_spherical` and `from_cylindrical`, each of which returns None when
    the input has no direction.

    Parameters
    ----------
    frame : Frame
        Frame the direction is expressed in
    axis : Axis
        Axis to point along
    """

    __slots__ = ("_frame", "quat")

    def __init__(self, frame: Frame, axis: Axis = Axis.Z) -> None:
        self._frame = frame
        self.quat = _AXIS_VECTORS[Axis.parse(axis)]

    @classmethod
    def _make(cls, frame: Frame, quat: Quaternion) -> Direction:
        direction = cls.__new__(cls)
        direction._frame = frame
        direction.quat = quat
        return direction

    @classmethod
    def from_axis(cls, frame: Frame, axis: Axis) -> Direction:
        """Unit vector along `axis`."""
        return cls(frame, axis)

    @classmethod
    def from_xyz(cls, frame: Frame, x: float, y: float, z: float) -> Direction | None:
        """Normalized (x, y, z); None for the zero vector."""
        quat = Quaternion.from_position(x, y, z).normalize()
        if quat is None:
            return None
        return cls._make(frame, quat)

    @classmethod
    def from_cross(cls, frame: Frame, dir1: Direction, dir2: Direction) -> Direction | None:
        """
        Normalized cross product ``dir1 x dir2``.

        Both inputs are transformed into `frame` first. Returns None when they
        are parallel or antiparallel.
        """
        a = dir1.transform_to(frame).quat
        b = dir2.transform_to(frame).quat
        # for pure a, b the vector part of a * b is a x b
        cross = a * b
        return cls.from_xyz(frame, cross.q1, cross.q2, cross.q3)

    @classmethod
    def from_spherical(
        cls,
        frame: Frame,
        radius: Quantity[LengthUnit],
        azimuth: Quantity[AngleUnit],
        inclination: Quantity[AngleUnit],
    ) -> Direction | None:
        """Direction of a spherical-coordinate point; None for zero radius."""
        position = Position.from_spherical(frame, radius, azimuth, inclination)
        return None if position is None else position.direction

    @classmethod
    def from_cylindrical(
        cls,
        frame: Frame,
        radius: Quantity[LengthUnit],
        azimuth: Quantity[AngleUnit],
        height: Quantity[LengthUnit],
    ) -> Direction | None:
        """Direction of a cylindrical-coordinate point; None for zero radius."""
        position = Position.from_cylindrical(frame, radius, azimuth, height)
        return None if position is None else position.direction

    # ------------------------------------------------------------------
    # Coordinates and angles
    # ------------------------------------------------------------------

    @property
    def frame(self) -> Frame:
        return self._frame

    @property
    def x(self) -> float:
        return self.quat.q1

    @property
    def y(self) -> float:
        return self.quat.q2

    @property
    def z(self) -> float:
        return self.quat.q3

    @property
    def vector(self) -> tuple[float, float, float]:
        return self.quat.vector

    def axial_coord(self, axis: Axis) -> float:
        """Component along `axis`."""
        return self.quat.vector[axis.value]

    def included_angle(self, that: Direction) -> Quantity[AngleUnit]:
        """Angle between `self` and `that` (transformed into ``self.frame``)."""
        that = that.transform_to(self.frame)
        return Quantity(_acos(self.quat.dot(that.quat)), radian)

    def included_angle_axis(self, axis: Axis) -> Quantity[AngleUnit]:
        """Angle between `self` and one of its frame's axes."""
        return Quantity(_acos(self.axial_coord(axis)), radian)

    def position(self, unit: LengthUnit = meter) -> Position:
        """The point one `unit` from the origin along `self`."""
        return Position._make(self.frame, unit, self.quat)

    def orientation(self, angle: Quantity[AngleUnit] | float) -> Orientation:
        """Rotation by `angle` about `self`."""
        return Orientation.from_angle_direction(self.frame, angle, self)

    # ------------------------------------------------------------------
    # Capabilities
    # ------------------------------------------------------------------

    @property
    def inverse(self) -> Direction:
        """The opposite direction."""
        return Direction._make(self.frame, self.quat.conjugate)

    def rotate(self, offset: Orientation) -> Direction:
        offset = offset.transform_to(self.frame)
        return Direction._make(self.frame, self.quat.rotate(by=offset.quat))

    def transform_to(self, frame: Frame) -> Direction:
        """The same physical direction, expressed in `frame`."""
        if self.frame is frame:
            return self
        moved = Frame.from_position(self.position(meter)).transform_to(frame)
        return Direction._make(frame, self.quat.rotate(by=moved.offset.as_rotation))

    def transform_by(self, frame: Frame) -> Direction:
        """`self` turned by the rotation of `frame` (expressed in ``self.frame``)."""
        rotation = frame.transform_to(self.frame).offset.as_rotation
        return Direction._make(self.frame, self.quat.rotate(by=rotation))

    # ------------------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Direction):
            return NotImplemented
        return self.frame is other.frame and self.quat == other.quat

    def __hash__(self) -> int:
        return hash((id(self.frame), self.quat))

    def __repr__(self) -> str:
        return f"Direction({self.frame}, x={self.x!r}, y={self.y!r}, z={self.z!r})"


def _acos(cosine: float) -> float:
    return float(np.arccos(np.clip(cosine, -1.0, 1.0)))


__all__ = ["Direction"]
