"""
Orientations: rotations of a frame's axes.

An Orientation is an immutable (frame, quat) pair where `quat` is a unit
rotation quaternion. Angles may be given as `Quantity` values in any angle
unit, or as bare floats in radians.
"""
from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING

from frametree.algebra.quaternion import IDENTITY, Quaternion
from frametree.core.frame import Axis, Frame
from frametree.core.framed import Composable, Invertible, Rotatable, Transformable
from frametree.units import AngleUnit, Quantity, as_radians, radian, to_radians

if TYPE_CHECKING:
    from frametree.geometry.direction import Direction


class RotationConvention(Enum):
    """
    Angle conventions for `Orientation.from_angles` / `as_angles_for`.

    FIXED_XYZ
        Rotations about the fixed x, y, z axes; angles are (roll, pitch, yaw).
    EULER_ZYX
        Intrinsic z, y', x'' rotations; angles are (yaw, pitch, roll).
    """

    FIXED_XYZ = "fixed_xyz"
    EULER_ZYX = "euler_zyx"


class Orientation(Invertible, Rotatable, Transformable, Composable):
    """
    A rotation expressed in a frame.

    Parameters
    ----------
    frame : Frame
        Frame the rotation is expressed in
    quat : Quaternion
        Unit rotation quaternion. Not checked; see
        `frametree.utils.validation.validate_unit_quaternion`.

    Notes
    -----
    Prefer the named constructors (``identity``, ``from_angle_axis``,
    ``from_yaw_pitch_roll``, ...).
    """

    __slots__ = ("_frame", "quat")

    def __init__(self, frame: Frame, quat: Quaternion = IDENTITY) -> None:
        self._frame = frame
        self.quat = quat

    @classmethod
    def identity(cls, frame: Frame) -> Orientation:
        """No rotation, in `frame`."""
        return cls(frame, IDENTITY)

    @classmethod
    def from_angle_direction(
        cls, frame: Frame, angle: Quantity[AngleUnit] | float, direction: Direction
    ) -> Orientation:
        """
        Rotation by `angle` about `direction`.

        `direction` is transformed into `frame` first.
        """
        direction = direction.transform_to(frame)
        return cls(frame, Quaternion.from_angle_direction(as_radians(angle), direction.vector))

    @classmethod
    def from_angle_axis(
        cls, frame: Frame, angle: Quantity[AngleUnit] | float, axis: Axis
    ) -> Orientation:
        """Rotation by `angle` about one of `frame`'s axes."""
        from frametree.geometry.direction import Direction

        return cls.from_angle_direction(frame, angle, Direction.from_axis(frame, axis))

    @classmethod
    def from_yaw_pitch_roll(
        cls,
        frame: Frame,
        yaw: float,
        pitch: float,
        roll: float,
        unit: AngleUnit = radian,
    ) -> Orientation:
        """
        Rotation from (yaw, pitch, roll) given in `unit`.

        Examples
        --------
        >>> from frametree import Frame, Orientation, degree
        >>> o = Orientation.from_yaw_pitch_roll(Frame.root, 90.0, 0.0, 0.0, unit=degree)
        """
        return cls(
            frame,
            Quaternion.from_yaw_pitch_roll(
                to_radians(yaw, unit),
                to_radians(pitch, unit),
                to_radians(roll, unit),
            ),
        )

    @classmethod
    def from_angles(
        cls,
        frame: Frame,
        convention: RotationConvention,
        x: float,
        y: float,
        z: float,
        unit: AngleUnit = radian,
    ) -> Orientation:
        """
        Rotation from three angles in `convention`.

        Parameters
        ----------
        frame : Frame
            Frame of the result
        convention : RotationConvention
            How (x, y, z) map onto (yaw, pitch, roll)
        x, y, z : float
            Angles in `unit`
        unit : AngleUnit
            Angle unit, radians by default

        Raises
        ------
        ValueError
            If `convention` is not a RotationConvention
        """
        if convention is RotationConvention.FIXED_XYZ:
            return cls.from_yaw_pitch_roll(frame, z, y, x, unit)
        if convention is RotationConvention.EULER_ZYX:
            return cls.from_yaw_pitch_roll(frame, x, y, z, unit)
        raise ValueError(f"Unknown rotation convention: {convention!r}")

    # ------------------------------------------------------------------
    # Angles
    # ------------------------------------------------------------------

    @property
    def frame(self) -> Frame:
        return self._frame

    def as_yaw_pitch_roll(self) -> tuple[float, float, float]:
        """(yaw, pitch, roll) in radians."""
        return self.quat.as_yaw_pitch_roll()

    def as_angles_for(self, convention: RotationConvention) -> tuple[float, float, float]:
        """(x, y, z) angles in radians for `convention`; inverse of `from_angles`."""
        yaw, pitch, roll = self.quat.as_yaw_pitch_roll()
        if convention is RotationConvention.FIXED_XYZ:
            return roll, pitch, yaw
        if convention is RotationConvention.EULER_ZYX:
            return yaw, pitch, roll
        raise ValueError(f"Unknown rotation convention: {convention!r}")

    def as_angle_direction(self) -> tuple[Quantity[AngleUnit], Direction | None] | None:
        """
        Rotation angle and axis.

        The axis is None for a zero rotation, where it is undefined. The
        whole result is None if `quat` is a zero quaternion.
        """
        from frametree.geometry.direction import Direction

        extracted = self.quat.as_angle_direction()
        if extracted is None:
            return None
        angle, (dx, dy, dz) = extracted
        return Quantity(angle, radian), Direction.from_xyz(self.frame, dx, dy, dz)

    # ------------------------------------------------------------------
    # Capabilities
    # ------------------------------------------------------------------

    @property
    def inverse(self) -> Orientation:
        return Orientation(self.frame, self.quat.conjugate)

    def rotate(self, offset: Orientation) -> Orientation:
        """`self` conjugated by `offset` (transformed into ``self.frame``)."""
        offset = offset.transform_to(self.frame)
        return Orientation(self.frame, self.quat.rotate(by=offset.quat))

    def compose(self, offset: Orientation) -> Orientation:
        """Perform `self`, then `offset`."""
        offset = offset.transform_to(self.frame)
        return Orientation(self.frame, offset.quat * self.quat)

    def transform_to(self, frame: Frame) -> Orientation:
        """The same physical orientation, expressed in `frame`."""
        if self.frame is frame:
            return self
        return Frame.from_orientation(self).transform_to(frame).orientation

    def transform_by(self, frame: Frame) -> Orientation:
        """A different orientation: `self` moved by `frame`."""
        return Frame.from_orientation(self).transform_by(frame).orientation

    # ------------------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Orientation):
            return NotImplemented
        return self.frame is other.frame and self.quat == other.quat

    def __hash__(self) -> int:
        return hash((id(self.frame), self.quat))

    def __repr__(self) -> str:
        q = self.quat
        return f"Orientation({self.frame}, quat=({q.q0!r}, {q.q1!r}, {q.q2!r}, {q.q3!r}))"


__all__ = [
    "Orientation",
    "RotationConvention",
]
