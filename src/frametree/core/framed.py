"""
Capability contracts shared by frames and frame-tagged values.

Everything that lives in a frame (Frame itself, Position, Orientation,
Direction) is `Framed`: it knows its frame and can answer ancestry questions
about it. The remaining contracts are opted into per type:

==============  =====  ========  ===========  =========
Capability      Frame  Position  Orientation  Direction
==============  =====  ========  ===========  =========
Invertible        x       x          x           x
Rotatable         x       x          x           x
Translatable      x       x
Transformable     x       x          x           x
Composable        x       x          x
==============  =====  ========  ===========  =========

For a Frame, ``frame`` is its parent. Ancestry is therefore always asked of
the frame a value *lives in*, which is what makes `common` usable both for
values and for frames.
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Iterator, TypeVar

if TYPE_CHECKING:
    from frametree.core.frame import Frame
    from frametree.geometry.orientation import Orientation
    from frametree.geometry.position import Position

T = TypeVar("T")


class Framed(ABC):
    """Something expressed in a `Frame`."""

    __slots__ = ()

    @property
    @abstractmethod
    def frame(self) -> Frame:
        """The frame `self` is expressed in (for a Frame: its parent)."""

    @property
    def base(self) -> Frame:
        """The root of the tree `self` lives in."""
        frame = self.frame
        return frame if frame.is_base else frame.base

    def lineage(self) -> Iterator[Frame]:
        """Yield ``self.frame`` and then each of its ancestors up to the root."""
        frame = self.frame
        while True:
            yield frame
            if frame.is_base:
                return
            frame = frame.frame

    def common(self, other: Framed) -> Frame:
        """
        Nearest frame shared by the lineages of `self` and `other`.

        Parameters
        ----------
        other : Framed
            Another frame or frame-tagged value

        Returns
        -------
        Frame
            ``other.frame`` if it is in `self`'s lineage, ``self.frame`` if
            it is in `other`'s, otherwise the closest shared ancestor. All
            trees share the root, so a result always exists.
        """
        mine = {id(frame) for frame in self.lineage()}
        for frame in other.lineage():
            if id(frame) in mine:
                return frame
        return self.base

    def has_frame(self, frame: Frame) -> bool:
        """True if `frame` is (identically) the frame of `self`."""
        return self.frame is frame

    def has_ancestor(self, ancestor: Frame) -> bool:
        """True if `ancestor` is ``self.frame`` or any frame above it."""
        return any(frame is ancestor for frame in self.lineage())


class Invertible(Framed):
    """Has an inverse in the same frame."""

    __slots__ = ()

    @property
    @abstractmethod
    def inverse(self: T) -> T:
        """The inverse of `self`."""


class Rotatable(Framed):
    """Can be rotated by an Orientation (converted into ``self.frame`` first)."""

    __slots__ = ()

    @abstractmethod
    def rotate(self: T, offset: Orientation) -> T:
        """Return `self` rotated by `offset`."""


class Translatable(Framed):
    """Can be translated by a Position (converted into ``self.frame`` first)."""

    __slots__ = ()

    @abstractmethod
    def translate(self: T, offset: Position) -> T:
        """Return `self` translated by `offset`."""


class Transformable(Framed):
    """
    Can be re-expressed in another frame, or moved by another frame.

    ``transform_to`` keeps the physical pose and changes the frame it is
    written in. ``transform_by`` keeps the frame and changes the physical
    pose.
    """

    __slots__ = ()

    @abstractmethod
    def transform_to(self: T, frame: Frame) -> T:
        """The same physical quantity, expressed in `frame`."""

    @abstractmethod
    def transform_by(self: T, frame: Frame) -> T:
        """A physically different quantity: `self` moved by `frame`."""


class Composable(Framed):
    """Can be composed with another value of the same type."""

    __slots__ = ()

    @abstractmethod
    def compose(self: T, offset: T) -> T:
        """Perform `self`, then `offset`."""


__all__ = [
    "Framed",
    "Invertible",
    "Rotatable",
    "Translatable",
    "Transformable",
    "Composable",
]
