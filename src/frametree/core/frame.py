"""
Coordinate frames arranged in a tree.

A Frame is a coordinate system defined by a rigid offset (rotation +
translation, as a DualQuaternion) from a parent frame. Frames nest
arbitrarily deep; every chain of parents ends at the single `Frame.root`,
which is its own parent.

Frames are shared, mutable nodes. When a frame moves (`translated`,
`rotated`, `transformed_to`, `transformed_by`) every holder of that frame,
and every frame below it, sees the new pose the next time it transforms.
Descendant poses are always recomputed from the live tree and never cached.

Examples
--------
>>> from frametree import Frame, Position, meter
>>> bus = Frame.from_position(Position(Frame.root, meter, 1.0, 0.0, 0.0))
>>> camera = Frame.from_position(Position(bus, meter, 0.0, 2.0, 0.0))
>>> camera.transform_to(Frame.root).position.vector
(1.0, 2.0, 0.0)
>>> bus.translated(Position(Frame.root, meter, -2.0, 0.0, 0.0))
>>> camera.transform_to(Frame.root).position.vector
(-1.0, 2.0, 0.0)

Notes
-----
Mutation is a single assignment of the (parent, unit, offset) triple, so a
reader never observes a half-written frame. There is no locking: concurrent
mutation from several threads must be serialized by the caller.
"""
from __future__ import annotations

import logging
from enum import Enum
from typing import TYPE_CHECKING, ClassVar, NamedTuple

from frametree.algebra.dual import IDENTITY_DQ, DualQuaternion
from frametree.core.framed import (
    Composable,
    Invertible,
    Rotatable,
    Transformable,
    Translatable,
)
from frametree.errors import FrameError
from frametree.units import LengthUnit, Quantity, converter, meter

if TYPE_CHECKING:
    from frametree.geometry.direction import Direction
    from frametree.geometry.orientation import Orientation
    from frametree.geometry.position import Position

logger = logging.getLogger(__name__)


class Axis(Enum):
    """The three cartesian axes."""

    X = 0
    Y = 1
    Z = 2

    def __str__(self) -> str:
        return self.name.lower()

    @classmethod
    def parse(cls, name: str | Axis) -> Axis:
        """
        Look up an axis by name ('x', 'y', 'z', any case).

        Raises
        ------
        ValueError
            If `name` is not one of the three axes
        """
        if isinstance(name, Axis):
            return name
        try:
            return cls[name.strip().upper()]
        except KeyError:
            raise ValueError(f"Axis must be 'x', 'y', or 'z', got '{name}'") from None


class _FrameState(NamedTuple):
    parent: Frame
    unit: LengthUnit
    offset: DualQuaternion


class Frame(Invertible, Rotatable, Translatable, Transformable, Composable):
    """
    A node in the frame tree.

    Parameters
    ----------
    parent : Frame
        Frame that `offset` is expressed in
    unit : LengthUnit
        Length unit of the translation in `offset`
    offset : DualQuaternion
        Pose of this frame relative to `parent`. Its rotation must be a unit
        quaternion.
    name : str | None
        Optional label, used in repr and log messages

    Attributes
    ----------
    root : Frame
        The one and only base frame (class attribute)

    Notes
    -----
    Prefer the ``from_position`` / ``from_orientation`` / ``from_pose``
    constructors. Equality is identity: two frames are equal only if they are
    the same node.
    """

    __slots__ = ("_state", "name")

    root: ClassVar[Frame]

    def __init__(
        self,
        parent: Frame,
        unit: LengthUnit = meter,
        offset: DualQuaternion = IDENTITY_DQ,
        name: str | None = None,
    ) -> None:
        self._state = _FrameState(parent, unit, offset)
        self.name = name

    @classmethod
    def _make_root(cls) -> Frame:
        root = cls.__new__(cls)
        root._state = _FrameState(root, meter, IDENTITY_DQ)
        root.name = "root"
        return root

    # ------------------------------------------------------------------
    # Construction from values
    # ------------------------------------------------------------------

    @classmethod
    def from_position(cls, position: Position, name: str | None = None) -> Frame:
        """Frame at `position`, axes parallel to ``position.frame``."""
        return cls(
            position.frame,
            position.unit,
            DualQuaternion.from_translation(position.quat),
            name,
        )

    @classmethod
    def from_orientation(cls, orientation: Orientation, name: str | None = None) -> Frame:
        """Frame at the origin of ``orientation.frame``, rotated by `orientation`."""
        return cls(
            orientation.frame,
            meter,
            DualQuaternion.from_rotation(orientation.quat),
            name,
        )

    @classmethod
    def from_pose(
        cls,
        position: Position,
        orientation: Orientation,
        frame: Frame | None = None,
        name: str | None = None,
    ) -> Frame:
        """
        Frame at `position` rotated by `orientation`.

        Parameters
        ----------
        position : Position
            Origin of the new frame
        orientation : Orientation
            Orientation of the new frame's axes
        frame : Frame | None
            Parent of the new frame. Defaults to ``position.frame``. Both
            `position` and `orientation` are transformed into it first.
        name : str | None
            Optional label
        """
        parent = position.frame if frame is None else frame
        offset = DualQuaternion.from_rotation_translation(
            orientation.transform_to(parent).quat,
            position.transform_to(parent).quat,
        )
        return cls(parent, position.unit, offset, name)

    # ------------------------------------------------------------------
    # State
    # ------------------------------------------------------------------

    @property
    def frame(self) -> Frame:
        """The parent frame."""
        return self._state.parent

    @property
    def parent(self) -> Frame:
        """Alias of `frame`."""
        return self._state.parent

    @property
    def unit(self) -> LengthUnit:
        """Length unit of the offset's translation."""
        return self._state.unit

    @property
    def offset(self) -> DualQuaternion:
        """Pose of `self` relative to its parent."""
        return self._state.offset

    def offset_in(self, unit: LengthUnit) -> DualQuaternion:
        """`offset` with its translation expressed in `unit`."""
        if unit is self.unit:
            return self.offset
        return self.offset.scale_translation(converter(self.unit, unit))

    @property
    def is_base(self) -> bool:
        """True only for the root frame."""
        return self._state.parent is self

    @property
    def position(self) -> Position:
        """Origin of `self`, expressed in the parent frame."""
        from frametree.geometry.position import Position

        return Position._make(self.frame, self.unit, self.offset.as_translation)

    @property
    def orientation(self) -> Orientation:
        """Orientation of `self`, expressed in the parent frame."""
        from frametree.geometry.orientation import Orientation

        return Orientation(self.frame, self.offset.as_rotation)

    # ------------------------------------------------------------------
    # Factories for values in this frame
    # ------------------------------------------------------------------

    def translation(self, unit: LengthUnit, x: float, y: float, z: float) -> Position:
        """A Position in `self`."""
        from frametree.geometry.position import Position

        return Position(self, unit, x, y, z)

    def rotation(self, angle: Quantity | float, direction: Direction) -> Orientation:
        """An Orientation in `self` of `angle` about `direction`."""
        from frametree.geometry.orientation import Orientation

        return Orientation.from_angle_direction(self, angle, direction)

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------

    def _update(self, other: Frame) -> None:
        if self.is_base:
            raise FrameError("The root frame cannot be moved")
        logger.debug("Frame %s moved (parent %s)", self, other.frame)
        self._state = other._state

    def translated(self, offset: Position) -> None:
        """Move `self` in place by `offset`."""
        self.transformed_by(Frame.from_position(offset))

    def rotated(self, offset: Orientation) -> None:
        """Rotate `self` in place by `offset`."""
        self.transformed_by(Frame.from_orientation(offset))

    def transformed_to(self, frame: Frame) -> None:
        """
        Re-parent `self` onto `frame` in place, keeping its physical pose.

        Raises
        ------
        FrameError
            If `frame` is `self` or a descendant of `self` (the tree would
            become cyclic), or if `self` is the root
        """
        if frame is self or frame.has_ancestor(self):
            raise FrameError(f"Cannot re-parent {self} below itself")
        self._update(self.transform_to(frame))

    def transformed_by(self, frame: Frame) -> None:
        """Move `self` in place by `frame`, as `transform_by`."""
        self._update(self.transform_by(frame))

    # ------------------------------------------------------------------
    # Invertible / Rotatable / Translatable / Composable
    # ------------------------------------------------------------------

    @property
    def inverse(self) -> Frame:
        """A new frame with the inverse offset, under the same parent."""
        return Frame(self.frame, self.unit, self.offset.inverse)

    def rotate(self, offset: Orientation) -> Frame:
        """`self` rotated by `offset`, as a new frame."""
        return self.transform_by(Frame.from_orientation(offset))

    def translate(self, offset: Position) -> Frame:
        """`self` translated by `offset`, as a new frame."""
        return self.transform_by(Frame.from_position(offset))

    def compose(self, offset: Frame) -> Frame:
        """Perform `self`, then `offset` (converted into the parent frame)."""
        that = offset.transform_to(self.frame)
        return Frame(self.frame, self.unit, that.offset_in(self.unit) * self.offset)

    # ------------------------------------------------------------------
    # Transformable
    # ------------------------------------------------------------------

    def transform_to(self, frame: Frame) -> Frame:
        """
        Express `self` relative to `frame`.

        Parameters
        ----------
        frame : Frame
            Target frame, anywhere in the tree

        Returns
        -------
        Frame
            A new frame, parented at `frame`, with the same physical pose as
            `self`

        Notes
        -----
        Walks the tree by cases, each recursion strictly closer to `frame`:

        1. `frame` is the parent: same offset.
        2. `frame` is the grandparent: ``parent.offset * self.offset``.
        3. `frame` is further up: go to the grandparent, then on up.
        4. `self` is the parent of `frame`: ``frame.offset.inverse``.
        5. `self` is further above `frame`: invert ``frame -> self``.
        6. Unrelated: up to the common ancestor, then down to `frame`.

        Every offset is converted into ``frame.unit`` before it is composed;
        case 1 keeps ``self.unit``.
        """
        parent = self.frame

        if self is frame:
            return Frame(frame, self.unit, IDENTITY_DQ)

        if parent is frame:
            logger.debug("transform %s -> %s: parent", self, frame)
            return Frame(frame, self.unit, self.offset)

        if parent.has_frame(frame):
            logger.debug("transform %s -> %s: grandparent", self, frame)
            offset = parent.offset_in(frame.unit) * self.offset_in(frame.unit)
            return Frame(frame, frame.unit, offset)

        if parent.has_ancestor(frame):
            logger.debug("transform %s -> %s: ancestor", self, frame)
            return self.transform_to(parent.frame).transform_to(frame)

        if frame.has_frame(self):
            logger.debug("transform %s -> %s: child", self, frame)
            return Frame(frame, frame.unit, frame.offset.inverse)

        if frame.has_ancestor(self):
            logger.debug("transform %s -> %s: descendant", self, frame)
            offset = frame.transform_to(self).offset_in(frame.unit).inverse
            return Frame(frame, frame.unit, offset)

        common = self.common(frame)
        logger.debug("transform %s -> %s: via %s", self, frame, common)
        self_to_common = self.transform_to(common)
        common_to_frame = common.transform_to(frame)
        return Frame(
            frame,
            frame.unit,
            common_to_frame.offset_in(frame.unit) * self_to_common.offset_in(frame.unit),
        )

    def transform_by(self, frame: Frame) -> Frame:
        """
        Move `self` by `frame`.

        `frame` is first expressed in ``self.frame``; its offset is then
        applied after `self`'s own. The result stays in ``self.frame`` and
        has a physically different pose.
        """
        that = frame.transform_to(self.frame)
        return Frame(self.frame, self.unit, that.offset_in(self.unit) * self.offset)

    # ------------------------------------------------------------------

    def __str__(self) -> str:
        return self.name if self.name else f"frame@{id(self):x}"

    def __repr__(self) -> str:
        if self.is_base:
            return "Frame.root"
        return f"Frame({self}, parent={self.frame}, unit={self.unit.symbol})"


Frame.root = Frame._make_root()
ROOT = Frame.root


__all__ = [
    "Axis",
    "Frame",
    "ROOT",
]
