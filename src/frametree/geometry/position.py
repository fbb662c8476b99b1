"""
Positions: 3D points expressed in a frame.

A Position is an immutable (frame, unit, quat) triple where `quat` is a pure
quaternion holding the cartesian coordinates in `unit`. Anything that needs
the frame tree (rotating by an orientation in another frame, transforming to
another frame) goes through a one-off `Frame` built from the position.
"""
from __future__ import annotations

from typing import TYPE_CHECKING

import numpy as np

from frametree.algebra.quaternion import EPSILON, ZERO, Quaternion
from frametree.core.frame import Axis, Frame
from frametree.core.framed import Composable, Invertible, Rotatable, Transformable, Translatable
from frametree.units import AngleUnit, LengthUnit, Quantity, converter, meter, radian, to_radians

if TYPE_CHECKING:
    from frametree.geometry.direction import Direction
    from frametree.geometry.orientation import Orientation


class Position(Invertible, Rotatable, Translatable, Transformable, Composable):
    """
    A point in a frame.

    Parameters
    ----------
    frame : Frame
        Frame the coordinates are expressed in
    unit : LengthUnit
        Unit of `x`, `y`, `z`
    x, y, z : float
        Cartesian coordinates

    Examples
    --------
    >>> from frametree import Frame, Position, millimeter
    >>> p = Position(Frame.root, millimeter, 3.0, 4.0, 0.0)
    >>> p.distance
    Quantity(5.0, mm)
    """

    __slots__ = ("_frame", "unit", "quat")

    def __init__(
        self,
        frame: Frame,
        unit: LengthUnit = meter,
        x: float = 0.0,
        y: float = 0.0,
        z: float = 0.0,
    ) -> None:
        self._frame = frame
        self.unit = unit
        self.quat = Quaternion.from_position(x, y, z)

    @classmethod
    def _make(cls, frame: Frame, unit: LengthUnit, quat: Quaternion) -> Position:
        position = cls.__new__(cls)
        position._frame = frame
        position.unit = unit
        position.quat = quat
        return position

    @classmethod
    def origin(cls, frame: Frame, unit: LengthUnit = meter) -> Position:
        """The origin of `frame`."""
        return cls._make(frame, unit, ZERO)

    @classmethod
    def from_spherical(
        cls,
        frame: Frame,
        radius: Quantity[LengthUnit],
        azimuth: Quantity[AngleUnit],
        inclination: Quantity[AngleUnit],
    ) -> Position | None:
        """
        Position from spherical coordinates.

        Parameters
        ----------
        frame : Frame
            Frame of the result
        radius : Quantity[LengthUnit]
            Distance from the origin; its unit becomes the position's unit
        azimuth : Quantity[AngleUnit]
            Angle in the xy plane, measured from +x toward +y
        inclination : Quantity[AngleUnit]
            Angle from +z

        Returns
        -------
        Position | None
            None when `radius` is zero, since the angles are then undefined
        """
        r = radius.value
        if abs(r) <= EPSILON:
            return None
        theta = to_radians(inclination.value, inclination.unit)
        phi = to_radians(azimuth.value, azimuth.unit)
        return cls(
            frame,
            radius.unit,
            r * np.sin(theta) * np.cos(phi),
            r * np.sin(theta) * np.sin(phi),
            r * np.cos(theta),
        )

    @classmethod
    def from_cylindrical(
        cls,
        frame: Frame,
        radius: Quantity[LengthUnit],
        azimuth: Quantity[AngleUnit],
        height: Quantity[LengthUnit],
    ) -> Position | None:
        """
        Position from cylindrical coordinates.

        `height` is converted into the unit of `radius`. Returns None when
        `radius` is zero.
        """
        r = radius.value
        if abs(r) <= EPSILON:
            return None
        phi = to_radians(azimuth.value, azimuth.unit)
        h = radius.unit.convert(height.value, height.unit)
        return cls(frame, radius.unit, r * np.cos(phi), r * np.sin(phi), h)

    # ------------------------------------------------------------------
    # Coordinates
    # ------------------------------------------------------------------

    @property
    def frame(self) -> Frame:
        return self._frame

    @property
    def x(self) -> Quantity[LengthUnit]:
        return self.axial_distance(Axis.X)

    @property
    def y(self) -> Quantity[LengthUnit]:
        return self.axial_distance(Axis.Y)

    @property
    def z(self) -> Quantity[LengthUnit]:
        return self.axial_distance(Axis.Z)

    @property
    def vector(self) -> tuple[float, float, float]:
        """(x, y, z) as bare floats in `unit`."""
        return self.quat.vector

    def axial_coord(self, axis: Axis) -> float:
        """Bare coordinate along `axis`, in `unit`."""
        return self.quat.vector[axis.value]

    def axial_distance(self, axis: Axis) -> Quantity[LengthUnit]:
        """Coordinate along `axis` as a length Quantity."""
        return Quantity(self.axial_coord(axis), self.unit)

    @property
    def distance(self) -> Quantity[LengthUnit]:
        """Distance from the origin of `frame`."""
        return Quantity(self.quat.norm, self.unit)

    def distance_between(self, that: Position) -> Quantity[LengthUnit]:
        """Distance from `self` to `that`, in `self.unit`."""
        that = that.transform_to(self.frame).scale_for(self.unit)
        return self.translate(that.inverse).distance

    def angle_between(self, that: Position) -> Quantity[AngleUnit] | None:
        """
        Angle between the vectors from the origin to `self` and to `that`.

        `that` is transformed into ``self.frame`` first. Units cancel, so no
        scaling is needed.

        Returns
        -------
        Quantity[AngleUnit] | None
            Angle in radians, or None if either position is the origin
        """
        that = that.transform_to(self.frame)
        norm_self = self.quat.norm
        norm_that = that.quat.norm
        if norm_self <= EPSILON or norm_that <= EPSILON:
            return None
        cosine = self.quat.dot(that.quat) / norm_self / norm_that
        return Quantity(np.arccos(np.clip(cosine, -1.0, 1.0)), radian)

    @property
    def direction(self) -> Direction | None:
        """Unit direction from the origin toward `self`; None at the origin."""
        from frametree.geometry.direction import Direction

        return Direction.from_xyz(self.frame, *self.quat.vector)

    # ------------------------------------------------------------------
    # Scaling
    # ------------------------------------------------------------------

    def scale(self, factor: float) -> Position:
        """Coordinates multiplied by `factor`, same unit."""
        return Position._make(self.frame, self.unit, factor * self.quat)

    def scale_for(self, unit: LengthUnit) -> Position:
        """The same point with coordinates expressed in `unit`."""
        if unit is self.unit:
            return self
        factor = converter(self.unit, unit)
        return Position._make(self.frame, unit, factor * self.quat)

    # ------------------------------------------------------------------
    # Capabilities
    # ------------------------------------------------------------------

    @property
    def inverse(self) -> Position:
        """The point reflected through the origin; ``p.translate(p.inverse)`` is the origin."""
        return Position._make(self.frame, self.unit, self.quat.conjugate)

    def translate(self, offset: Position) -> Position:
        """
        `self` moved by `offset`.

        `offset` is transformed into ``self.frame`` and scaled to
        ``self.unit`` before it is added.
        """
        offset = offset.transform_to(self.frame).scale_for(self.unit)
        return Position._make(self.frame, self.unit, self.quat.translate(by=offset.quat))

    def rotate(self, offset: Orientation) -> Position:
        """`self` rotated about the origin of its frame by `offset`."""
        offset = offset.transform_to(self.frame)
        return Position._make(self.frame, self.unit, self.quat.rotate(by=offset.quat))

    def compose(self, offset: Position) -> Position:
        """Same as `translate`."""
        return self.translate(offset)

    def transform_to(self, frame: Frame) -> Position:
        """The same physical point, expressed in `frame` (unit unchanged)."""
        if self.frame is frame:
            return self
        moved = Frame.from_position(self).transform_to(frame)
        return moved.position.scale_for(self.unit)

    def transform_by(self, frame: Frame) -> Position:
        """A different point: `self` moved by `frame`, staying in ``self.frame``."""
        moved = Frame.from_position(self).transform_by(frame)
        return moved.position.scale_for(self.unit)

    # ------------------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Position):
            return NotImplemented
        return (
            self.frame is other.frame
            and self.unit is other.unit
            and self.quat == other.quat
        )

    def __hash__(self) -> int:
        return hash((id(self.frame), id(self.unit), self.quat))

    def __repr__(self) -> str:
        x, y, z = self.quat.vector
        return f"Position({self.frame}, {self.unit.symbol}, x={x!r}, y={y!r}, z={z!r})"


__all__ = ["Position"]
